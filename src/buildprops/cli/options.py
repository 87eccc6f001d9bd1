# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/buildprops/cli/options.py
#   project      : BuildProps
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Click-based BuildProps CLI.

This module centralizes reusable options (verbosity, color, configuration
sources and version overrides) and their resolution logic, so commands and
groups can stay thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from buildprops.cli.errors import BuildPropsUsageError
from buildprops.properties.io import parse_overrides

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v`` / ``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        ``-1`` when quiet, ``0`` by default, otherwise the ``-v`` count (capped at 2).

    Raises:
        BuildPropsUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise BuildPropsUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return min(verbose_count, 2)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        output_format: Output format string, e.g. "json", "properties".
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Disables color for machine-readable output formats.
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if output_format and output_format.lower() in {"json", "properties"}:
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds configuration source and version policy options to a command.

    Adds ``--config`` (repeatable), ``--no-config``, ``--base-version`` and
    ``--suffix``.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--suffix",
        "base_version_suffix",
        type=str,
        default=None,
        help=(
            "Suffix policy: SNAPSHOT, SHA-SNAPSHOT, SHA, '' (release), SPLIT, "
            "or a custom suffix such as RC1."
        ),
    )(f)
    f = click.option(
        "--base-version",
        "base_version",
        type=str,
        default=None,
        help="Base version, e.g. 2.11.8 (or 2.11.8-RC4 with --suffix SPLIT).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore pyproject.toml and buildprops.toml in the working directory.",
    )(f)
    f = click.option(
        "--config",
        "config_files",
        multiple=True,
        type=click.Path(dir_okay=False, path_type=Path),
        help="Extra TOML config file(s), applied after discovered ones.",
    )(f)
    return f


def collect_defines(
    ctx: click.Context, param: click.Parameter, value: tuple[str, ...]
) -> dict[str, str]:
    """Click callback turning repeated ``-D KEY=VALUE`` strings into an override map.

    A later definition of the same key wins. A malformed entry is reported as a
    Click parameter error.
    """
    try:
        return parse_overrides(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param=param) from exc
