# topmark:header:start
#
#   project      : BuildProps
#   file         : __init__.py
#   file_relpath : src/buildprops/git/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source-control metadata (commit date + short SHA) for version derivation."""

from __future__ import annotations

from buildprops.git.model import GitMetadata, format_commit_date, parse_commit_date
from buildprops.git.providers import (
    EnvGitInfoProvider,
    GitCommandInfoProvider,
    GitDirInfoProvider,
    GitInfoProvider,
    default_providers,
    resolve_git_metadata,
)

__all__ = [
    "EnvGitInfoProvider",
    "GitCommandInfoProvider",
    "GitDirInfoProvider",
    "GitInfoProvider",
    "GitMetadata",
    "default_providers",
    "format_commit_date",
    "parse_commit_date",
    "resolve_git_metadata",
]
