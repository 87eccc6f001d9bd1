# topmark:header:start
#
#   project      : BuildProps
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running BuildProps in a controlled working directory.

`run_cli_in()` changes the process working directory to the given directory
before invoking the Click CLI, so configuration discovery and relative output
paths resolve against the temporary test project.

Git metadata is injected through ``ctx.obj["git_providers"]``; by default the
helpers use the example commit (``20151215-133023`` / ``7559aed``) so that no
test depends on the checkout the suite runs from.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from buildprops.cli.main import cli
from buildprops.core.exit_codes import ExitCode
from tests.conftest import example_provider

if TYPE_CHECKING:
    from pathlib import Path

    from buildprops.git.providers import GitInfoProvider

_DEFAULT = object()


def _obj(git_providers: Any) -> dict[str, Any]:
    providers: Sequence[GitInfoProvider] = (
        [example_provider()] if git_providers is _DEFAULT else git_providers
    )
    return {"git_providers": providers}


def run_cli_in(
    cwd: Path,
    argv: str | Sequence[str] | None,
    *,
    git_providers: Any = _DEFAULT,
    env: dict[str, str] | None = None,
) -> Result:
    """Invoke the CLI with ``cwd`` as the working directory.

    Args:
        cwd (Path): Directory used as the CWD (and project root) for the invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["show", "--format", "json"]``.
        git_providers (Any): Provider chain to inject; defaults to the example commit.
            Pass ``None`` to use the real default chain.
        env (dict[str, str] | None): Extra environment variables for the invocation.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    old_cwd: str = os.getcwd()
    try:
        os.chdir(cwd)
        return runner.invoke(cli, argv, obj=_obj(git_providers), env=env)
    finally:
        os.chdir(old_cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    git_providers: Any = _DEFAULT,
    env: dict[str, str] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper for commands that do not read or write project files
    (e.g. ``--help`` or ``version``).
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, obj=_obj(git_providers), env=env)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def assert_FILE_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with FILE_NOT_FOUND (code 66)."""
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


def assert_IO_ERROR(result: Result) -> None:
    """Assert that the command exited with IO_ERROR (code 74)."""
    assert result.exit_code == ExitCode.IO_ERROR, result.output
