# topmark:header:start
#
#   project      : BuildProps
#   file         : __main__.py
#   file_relpath : src/buildprops/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running BuildProps via ``python -m buildprops``.

Delegates directly to :func:`buildprops.cli.main.cli`, so there is a single
authoritative CLI entry point regardless of how BuildProps is launched.

Examples:
    Print the versions for the current checkout::

        python -m buildprops show --suffix SHA
"""

from __future__ import annotations

from buildprops.cli.main import cli

if __name__ == "__main__":
    cli()
