# topmark:header:start
#
#   project      : BuildProps
#   file         : __init__.py
#   file_relpath : src/buildprops/build/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build session and properties-file tasks."""

from __future__ import annotations

from buildprops.build.session import BuildSession
from buildprops.build.tasks import (
    build_character_properties,
    extract_build_character_properties_file,
    generate_build_character_properties_file,
    generate_version_properties_file,
    version_properties,
)

__all__ = [
    "BuildSession",
    "build_character_properties",
    "extract_build_character_properties_file",
    "generate_build_character_properties_file",
    "generate_version_properties_file",
    "version_properties",
]
