# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/buildprops/core/exit_codes.py
#   project      : BuildProps
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the BuildProps CLI.

BuildProps aligns with the BSD `sysexits` convention where practical, so that
build scripts can tell a misconfiguration apart from a missing input file or a
failed write.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the BuildProps CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error). Prefer a more specific
            code if available.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: Input path (or archive entry) does not exist. Mirrors BSD
            ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error (missing/invalid config, malformed
            ``SPLIT`` base version). Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
