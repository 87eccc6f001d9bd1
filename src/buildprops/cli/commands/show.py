# topmark:header:start
#
#   project      : BuildProps
#   file         : show.py
#   file_relpath : src/buildprops/cli/commands/show.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildProps `show` command.

Derives the version identifiers for the current checkout and prints them
without writing any file. Useful to check a suffix policy before a build.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from buildprops.cli.cli_types import EnumChoiceParam, OutputFormat
from buildprops.cli.cmd_common import (
    cli_errors,
    get_console,
    get_effective_verbosity,
    make_session,
    resolve_config_from_click,
)
from buildprops.cli.options import common_config_options
from buildprops.constants import VALUE_NOT_SET
from buildprops.properties.io import render_properties

if TYPE_CHECKING:
    from pathlib import Path

    from buildprops.cli.console import ConsoleLike
    from buildprops.config import Config
    from buildprops.versioning.model import Versions


def _rows(versions: Versions, config: Config, vlevel: int) -> list[tuple[str, str]]:
    rows: list[tuple[str, str]] = [
        ("Canonical", versions.canonical_version),
        ("Maven", versions.maven_version),
        ("OSGi", versions.osgi_version),
        ("GitHub tree", versions.github_tree),
    ]
    if vlevel > 0:
        rows += [
            ("Commit SHA", versions.commit_sha),
            ("Commit date", versions.commit_date),
            ("Release", "yes" if versions.is_release else "no"),
        ]
    if vlevel > 1:
        rows += [
            ("Base version", config.base_version),
            ("Suffix policy", repr(config.base_version_suffix)),
            ("Copyright", config.copyright or VALUE_NOT_SET),
        ]
    return rows


@click.command(
    name="show",
    help="Derive and print the version identifiers without writing files.",
)
@common_config_options
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def show_command(
    *,
    config_files: tuple[Path, ...],
    no_config: bool,
    base_version: str | None,
    base_version_suffix: str | None,
    output_format: OutputFormat | None = None,
) -> None:
    """Derive and print the version identifiers.

    Args:
        config_files (tuple[Path, ...]): Extra config files (``--config``).
        no_config (bool): Skip config discovery.
        base_version (str | None): Base version override.
        base_version_suffix (str | None): Suffix policy override.
        output_format (OutputFormat | None): Output format.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)

    with cli_errors():
        config: Config = resolve_config_from_click(
            config_files=config_files,
            no_config=no_config,
            base_version=base_version,
            base_version_suffix=base_version_suffix,
        )
        versions: Versions = make_session(ctx, config).versions

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps(versions.to_dict(), indent=2))
    elif fmt == OutputFormat.PROPERTIES:
        console.print(render_properties(versions.to_map()), nl=False)
    elif fmt == OutputFormat.MARKDOWN:
        console.print("| Property | Value |")
        console.print("|---|---|")
        for label, value in _rows(versions, config, vlevel):
            console.print(f"| {label} | `{value}` |")
    else:
        rows = _rows(versions, config, vlevel)
        width: int = max(len(label) for label, _ in rows) + 1
        for label, value in rows:
            console.print(f"{console.styled(f'{label}:'.ljust(width), bold=True)} {value}")
