# topmark:header:start
#
#   project      : BuildProps
#   file         : __init__.py
#   file_relpath : src/buildprops/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across BuildProps.

Included modules:

- ``errors``
  Library exception hierarchy. The CLI translates these into Click exceptions
  carrying an exit code.

- ``exit_codes``
  Centralized exit codes for the CLI, aligned with BSD-style ``sysexits``.

- ``keys``
  Canonical property keys written to the generated ``.properties`` files.
"""

from __future__ import annotations
