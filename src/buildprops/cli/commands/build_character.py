# topmark:header:start
#
#   project      : BuildProps
#   file         : build_character.py
#   file_relpath : src/buildprops/cli/commands/build_character.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildProps build character commands.

- ``generate-build-character``: write ``buildcharacter.properties`` from the
  derived versions and ``versions.properties`` (with ``-D`` overrides).
- ``extract-build-character``: copy ``buildcharacter.properties`` out of a
  bootstrap jar.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from buildprops.build.tasks import (
    extract_build_character_properties_file,
    generate_build_character_properties_file,
)
from buildprops.cli.cmd_common import (
    cli_errors,
    get_console,
    get_effective_verbosity,
    make_session,
    resolve_config_from_click,
)
from buildprops.cli.options import collect_defines, common_config_options
from buildprops.constants import BUILD_CHARACTER_ENTRY

if TYPE_CHECKING:
    from buildprops.build.session import BuildSession
    from buildprops.cli.console import ConsoleLike
    from buildprops.config import Config


@click.command(
    name="generate-build-character",
    help="Write buildcharacter.properties (versions + versions.properties).",
)
@common_config_options
@click.option(
    "--versions-file",
    "versions_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="The versions.properties input map.",
)
@click.option(
    "--output",
    "output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Destination file (default: {BUILD_CHARACTER_ENTRY} in the project root).",
)
@click.option(
    "-D",
    "--define",
    "defines",
    multiple=True,
    metavar="KEY=VALUE",
    callback=collect_defines,
    help="Override a versions.properties entry (KEY=VALUE); repeatable.",
)
def generate_build_character_command(
    *,
    config_files: tuple[Path, ...],
    no_config: bool,
    base_version: str | None,
    base_version_suffix: str | None,
    versions_file: Path | None,
    output: Path | None,
    defines: dict[str, str],
) -> None:
    """Write the build character file.

    ``-D`` values only replace keys already defined in ``versions.properties``.
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
            versions_file=versions_file,
            build_character_file=output,
        )
        session: BuildSession = make_session(ctx, config, overrides=defines)
        written: Path = generate_build_character_properties_file(session)

    if vlevel >= 0:
        console.print(str(written))
    if vlevel > 0:
        console.print(console.styled(str(session.versions), dim=True))


@click.command(
    name="extract-build-character",
    help=f"Copy {BUILD_CHARACTER_ENTRY} out of a bootstrap jar.",
)
@click.argument(
    "archive",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--output",
    "output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path(BUILD_CHARACTER_ENTRY),
    show_default=True,
    help="Destination file.",
)
def extract_build_character_command(*, archive: Path, output: Path) -> None:
    """Extract the build character file from ``ARCHIVE`` (a jar or zip)."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)

    with cli_errors():
        written: Path = extract_build_character_properties_file(archive, output)

    if vlevel >= 0:
        console.print(str(written))
