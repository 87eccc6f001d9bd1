# topmark:header:start
#
#   project      : BuildProps
#   file         : keys.py
#   file_relpath : src/buildprops/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for BuildProps configuration.

This module defines the authoritative string constants used when reading
BuildProps configuration from TOML sources (``buildprops.toml`` and
``[tool.buildprops]`` in ``pyproject.toml``), plus the built-in defaults.

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by BuildProps configuration.

    Notes:
        - Values must match user-facing TOML keys exactly.
        - CLI option names are defined by the Click commands.
    """

    # [version]
    SECTION_VERSION: Final[str] = "version"

    KEY_BASE: Final[str] = "base"
    KEY_SUFFIX: Final[str] = "suffix"

    # [output]
    SECTION_OUTPUT: Final[str] = "output"

    KEY_VERSIONS_FILE: Final[str] = "versions_file"
    KEY_BUILD_CHARACTER_FILE: Final[str] = "build_character_file"
    KEY_RESOURCE_DIR: Final[str] = "resource_dir"
    KEY_COMPONENT: Final[str] = "component"

    # [metadata]
    SECTION_METADATA: Final[str] = "metadata"

    KEY_COPYRIGHT: Final[str] = "copyright"
    KEY_SHELL_BANNER: Final[str] = "shell_banner"


class Defaults:
    """Built-in configuration defaults (the lowest-precedence layer)."""

    BASE_VERSION: Final[str] = "0.1.0"
    SUFFIX: Final[str] = "SNAPSHOT"

    VERSIONS_FILE: Final[str] = "versions.properties"
    BUILD_CHARACTER_FILE: Final[str] = "buildcharacter.properties"
    RESOURCE_DIR: Final[str] = "build/resources"
    # Empty: use the project root directory name
    COMPONENT: Final[str] = ""

    COPYRIGHT: Final[str] = ""
    # "%s" is replaced with the version by the consumer of the banner
    SHELL_BANNER: Final[str] = "\nWelcome to version %s"
