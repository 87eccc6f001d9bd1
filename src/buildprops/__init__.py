# topmark:header:start
#
#   project      : BuildProps
#   file         : __init__.py
#   file_relpath : src/buildprops/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildProps package.

BuildProps derives canonical, Maven and OSGi version identifiers for a build
from a base version, a suffix policy and source-control metadata, and writes
them into deterministic ``.properties`` files. It exposes both a CLI and a
small typed API for automation.
"""

from __future__ import annotations
