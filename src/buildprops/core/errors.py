# topmark:header:start
#
#   project      : BuildProps
#   file         : errors.py
#   file_relpath : src/buildprops/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the BuildProps library layer.

These exceptions carry no exit codes and no styling. The CLI maps them to
`buildprops.cli.errors` exceptions at the command boundary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class BuildPropsError(Exception):
    """Base class for all BuildProps library errors."""


class VersionSplitError(BuildPropsError, ValueError):
    """Raised when a ``SPLIT`` base version does not have the expected shape."""

    def __init__(self, base_version: str) -> None:
        self.base_version = base_version
        super().__init__(
            f"Cannot split base version {base_version!r}: expected '<base>' or "
            "'<base>-<suffix>' (e.g. '2.11.8-RC4')"
        )


class GitMetadataError(BuildPropsError):
    """Raised by a git metadata provider that cannot determine commit date + SHA."""


class PropertiesFileError(BuildPropsError):
    """Raised when a properties file (or archive entry) cannot be read or written.

    Attributes:
        path (Path): The file (or archive) that failed.
        reason (str): Human-readable cause.
        missing (bool): True when the failure is a missing file or entry.
    """

    def __init__(self, path: Path, reason: str, *, missing: bool = False) -> None:
        self.path = path
        self.reason = reason
        self.missing = missing
        super().__init__(f"{path}: {reason}")


class ConfigError(BuildPropsError):
    """Raised for unreadable or malformed explicit configuration sources."""
