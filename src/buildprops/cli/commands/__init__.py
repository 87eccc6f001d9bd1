# topmark:header:start
#
#   project      : BuildProps
#   file         : __init__.py
#   file_relpath : src/buildprops/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the ``buildprops`` group."""
