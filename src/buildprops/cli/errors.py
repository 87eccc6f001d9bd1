# topmark:header:start
#
#   project      : BuildProps
#   file         : errors.py
#   file_relpath : src/buildprops/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the BuildProps CLI.

Usage:
    Commands translate library errors (`buildprops.core.errors`) into these
    exceptions so Click exits with the matching `ExitCode`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from buildprops.core.exit_codes import ExitCode


class BuildPropsCliError(click.ClickException):
    """Base class for all BuildProps CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class BuildPropsUsageError(BuildPropsCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class BuildPropsConfigError(BuildPropsCliError):
    """Error for configuration errors (missing/invalid config, malformed SPLIT version)."""

    exit_code = ExitCode.CONFIG_ERROR


class BuildPropsFileNotFoundError(BuildPropsCliError):
    """Error when an input file (or archive entry) does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class BuildPropsIOError(BuildPropsCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR
