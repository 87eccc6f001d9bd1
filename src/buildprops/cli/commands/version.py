# topmark:header:start
#
#   project      : BuildProps
#   file         : version.py
#   file_relpath : src/buildprops/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildProps `version` command.

Prints the current BuildProps version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from buildprops.cli.cli_types import EnumChoiceParam, OutputFormat
from buildprops.cli.cmd_common import get_console, get_effective_verbosity
from buildprops.constants import BUILDPROPS_VERSION

if TYPE_CHECKING:
    from buildprops.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of BuildProps.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of BuildProps.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": BUILDPROPS_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# BuildProps Version\n")
        console.print(f"**BuildProps version: {BUILDPROPS_VERSION}**")
    elif fmt == OutputFormat.PROPERTIES:
        console.print(f"buildprops.version={BUILDPROPS_VERSION}")
    else:
        if vlevel > 0:
            console.print(console.styled("BuildProps version:\n", bold=True, underline=True))
            console.print(f"    {console.styled(BUILDPROPS_VERSION, bold=True)}")
        else:
            console.print(console.styled(BUILDPROPS_VERSION, bold=True))
