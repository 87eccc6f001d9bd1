# topmark:header:start
#
#   project      : BuildProps
#   file         : constants.py
#   file_relpath : src/buildprops/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildProps Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

BUILDPROPS_VERSION: str = get_version("buildprops")

# Config discovery (working directory)
DEFAULT_TOML_CONFIG_NAME: Final[str] = "buildprops.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[tuple[str, ...]] = ("tool", "buildprops")

# Environment variables
ENV_LOG_LEVEL: Final[str] = "BUILDPROPS_LOG_LEVEL"
ENV_GIT_SHA: Final[str] = "BUILDPROPS_GIT_SHA"
ENV_GIT_DATE: Final[str] = "BUILDPROPS_GIT_DATE"

# Source-control metadata
UNKNOWN_SHA: Final[str] = "unknown"
SHORT_SHA_LENGTH: Final[int] = 7
COMMIT_DATE_FORMAT: Final[str] = "%Y%m%d-%H%M%S"
DEFAULT_GITHUB_TREE: Final[str] = "master"

# Suffix policy values with special meaning
SPLIT_SUFFIX: Final[str] = "SPLIT"

# Name of the build character file inside a bootstrap archive
BUILD_CHARACTER_ENTRY: Final[str] = "buildcharacter.properties"

# Line separator placeholder used in the shell banner (resolved by the consumer)
BANNER_LINE_SEPARATOR: Final[str] = "%n"

VALUE_NOT_SET: Final[str] = "<not set>"
