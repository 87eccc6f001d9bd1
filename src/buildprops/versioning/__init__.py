# topmark:header:start
#
#   project      : BuildProps
#   file         : __init__.py
#   file_relpath : src/buildprops/versioning/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Version derivation: pure functions over ``(base, suffix, sha, date)``."""

from __future__ import annotations

from buildprops.versioning.derive import cross_classifier, derive_versions, split_base_version
from buildprops.versioning.model import SuffixKind, Versions

__all__ = [
    "SuffixKind",
    "Versions",
    "cross_classifier",
    "derive_versions",
    "split_base_version",
]
