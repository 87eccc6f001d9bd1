# topmark:header:start
#
#   project      : BuildProps
#   file         : keys.py
#   file_relpath : src/buildprops/core/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical property keys.

These are the keys BuildProps writes into the generated ``.properties`` files.
Downstream build and packaging steps read them back, so renaming one is a
breaking change.

Keep this module behavior-free; it should remain a pure namespace for
constants so it can be imported from anywhere without causing cycles.
"""

from __future__ import annotations

from typing import Final


class PropKey:
    """Property keys shared by the version and build character files."""

    # Always present (see `Versions.to_map`)
    VERSION_NUMBER: Final[str] = "version.number"
    MAVEN_VERSION_NUMBER: Final[str] = "maven.version.number"
    OSGI_VERSION_NUMBER: Final[str] = "osgi.version.number"

    # Per-component version file
    COPYRIGHT_STRING: Final[str] = "copyright.string"
    SHELL_BANNER: Final[str] = "shell.banner"

    # Build character file
    MAVEN_VERSION_BASE: Final[str] = "maven.version.base"
    MAVEN_VERSION_SUFFIX: Final[str] = "maven.version.suffix"
