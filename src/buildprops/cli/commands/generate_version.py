# topmark:header:start
#
#   project      : BuildProps
#   file         : generate_version.py
#   file_relpath : src/buildprops/cli/commands/generate_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildProps `generate-version-props` command.

Writes ``<resource_dir>/<component>.properties`` with ``version.number``,
``maven.version.number``, ``osgi.version.number``, ``copyright.string`` and
``shell.banner``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from buildprops.build.tasks import generate_version_properties_file
from buildprops.cli.cmd_common import (
    cli_errors,
    get_console,
    get_effective_verbosity,
    make_session,
    resolve_config_from_click,
)
from buildprops.cli.options import common_config_options

if TYPE_CHECKING:
    from buildprops.build.session import BuildSession
    from buildprops.cli.console import ConsoleLike
    from buildprops.config import Config


@click.command(
    name="generate-version-props",
    help="Write the per-component version properties file.",
)
@common_config_options
@click.option(
    "--output",
    "output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Destination file (default: <resource_dir>/<component>.properties).",
)
@click.option(
    "--resource-dir",
    "resource_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory receiving <component>.properties.",
)
@click.option("--component", type=str, default=None, help="Stem of the generated file name.")
@click.option("--copyright", "copyright_str", type=str, default=None, help="copyright.string value.")
def generate_version_command(
    *,
    config_files: tuple[Path, ...],
    no_config: bool,
    base_version: str | None,
    base_version_suffix: str | None,
    output: Path | None,
    resource_dir: Path | None,
    component: str | None,
    copyright_str: str | None,
) -> None:
    """Write the per-component version properties file.

    Prints the path of the written file unless ``--quiet`` is in effect.
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
            resource_dir=resource_dir,
            component=component,
            copyright=copyright_str,
        )
        session: BuildSession = make_session(ctx, config)
        written: Path = generate_version_properties_file(
            session, output.resolve() if output else None
        )

    if vlevel >= 0:
        console.print(str(written))
    if vlevel > 0:
        console.print(console.styled(str(session.versions), dim=True))
