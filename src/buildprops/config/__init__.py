# topmark:header:start
#
#   project      : BuildProps
#   file         : __init__.py
#   file_relpath : src/buildprops/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for BuildProps.

Re-exports the public configuration types so callers can write
``from buildprops.config import Config, MutableConfig``.
"""

from __future__ import annotations

from buildprops.config.model import Config, MutableConfig, normalize_banner

__all__ = [
    "Config",
    "MutableConfig",
    "normalize_banner",
]
