# topmark:header:start
#
#   project      : BuildProps
#   file         : __init__.py
#   file_relpath : src/buildprops/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildProps CLI package.

This package groups all Click command definitions and supporting utilities
for the BuildProps command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        buildprops = "buildprops.cli.main:cli"

All subcommands live in `buildprops.cli.commands`.
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
