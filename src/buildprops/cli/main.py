# topmark:header:start
#
#   project      : BuildProps
#   file         : main.py
#   file_relpath : src/buildprops/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildProps command-line entry point.

Key ideas:
- Group-level options (verbosity, color) are initialized once, placed into ``ctx.obj``.
- Subcommands resolve their own configuration and build session through
  `buildprops.cli.cmd_common`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buildprops.cli.commands.build_character import (
    extract_build_character_command,
    generate_build_character_command,
)
from buildprops.cli.commands.generate_version import generate_version_command
from buildprops.cli.commands.show import show_command
from buildprops.cli.commands.version import version_command
from buildprops.cli.console import ClickConsole
from buildprops.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from buildprops.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from buildprops.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Configure program-output verbosity:
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Configure internal logging via env:
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else ColorMode(color_mode or "auto")
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="BuildProps: derive version identifiers and write build properties files.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the BuildProps CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'buildprops show' to print the versions of this checkout.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(show_command)

cli.add_command(generate_version_command)

cli.add_command(generate_build_character_command)

cli.add_command(extract_build_character_command)

if __name__ == "__main__":
    cli()
