# topmark:header:start
#
#   project      : BuildProps
#   file         : __init__.py
#   file_relpath : src/buildprops/properties/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Deterministic ``.properties`` I/O."""

from __future__ import annotations

from buildprops.properties.io import (
    apply_overrides,
    load_version_props,
    parse_override,
    parse_overrides,
    read_properties,
    render_properties,
    write_properties,
)

__all__ = [
    "apply_overrides",
    "load_version_props",
    "parse_override",
    "parse_overrides",
    "read_properties",
    "render_properties",
    "write_properties",
]
