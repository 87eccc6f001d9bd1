# topmark:header:start
#
#   project      : BuildProps
#   file         : cmd_common.py
#   file_relpath : src/buildprops/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands:
resolving the configuration, creating the build session, and translating
library errors into CLI errors with the right exit code.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Any

from buildprops.build.session import BuildSession
from buildprops.cli.console import ClickConsole
from buildprops.cli.errors import (
    BuildPropsConfigError,
    BuildPropsFileNotFoundError,
    BuildPropsIOError,
)
from buildprops.config import MutableConfig
from buildprops.config.logging import get_logger
from buildprops.core.errors import ConfigError, PropertiesFileError, VersionSplitError

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    import click

    from buildprops.cli.console import ConsoleLike
    from buildprops.config import Config

logger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the root context (0 if unset)."""
    obj: Any = ctx.find_root().obj or {}
    return int(obj.get("verbosity_level", 0))


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console created by the group, or a plain one."""
    obj: Any = ctx.find_root().obj or {}
    console: ConsoleLike | None = obj.get("console")
    return console if console is not None else ClickConsole(enable_color=False)


@contextmanager
def cli_errors() -> Iterator[None]:
    """Translate library errors raised in the block into CLI errors.

    Raises:
        BuildPropsConfigError: For configuration problems and malformed ``SPLIT`` versions.
        BuildPropsFileNotFoundError: For missing input files or archive entries.
        BuildPropsIOError: For other read/write failures.
    """
    try:
        yield
    except (VersionSplitError, ConfigError) as exc:
        raise BuildPropsConfigError(str(exc)) from exc
    except PropertiesFileError as exc:
        if exc.missing:
            raise BuildPropsFileNotFoundError(str(exc)) from exc
        raise BuildPropsIOError(str(exc)) from exc


def resolve_config_from_click(
    *,
    config_files: Sequence[Path] = (),
    no_config: bool = False,
    **args: Any,
) -> Config:
    """Merge defaults, discovered config, explicit config files and CLI overrides.

    Args:
        config_files (Sequence[Path]): Values of ``--config``.
        no_config (bool): Value of ``--no-config``.
        **args (Any): CLI overrides understood by `MutableConfig.apply_args`;
            ``None`` means "not provided".

    Returns:
        Config: The frozen configuration.

    Raises:
        ConfigError: If an explicit config file is missing or malformed.
    """
    m: MutableConfig = MutableConfig.load_merged(
        root=Path.cwd(),
        config_files=config_files,
        no_config=no_config,
    )
    m.apply_args(args)
    config: Config = m.freeze()
    logger.debug("Resolved config: %s", config)
    return config


def make_session(
    ctx: click.Context,
    config: Config,
    *,
    overrides: Mapping[str, str] | None = None,
) -> BuildSession:
    """Create the build session for this invocation.

    Tests may inject git metadata providers through ``ctx.obj["git_providers"]``.
    """
    obj: Any = ctx.find_root().obj or {}
    return BuildSession(config, providers=obj.get("git_providers"), overrides=overrides)
