# topmark:header:start
#
#   project      : BuildProps
#   file         : __init__.py
#   file_relpath : tests/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end
