# topmark:header:start
#
#   project      : BuildProps
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the BuildProps test suite.

This file sets up global fixtures and customizes the logging configuration for test runs.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `buildprops.config.MutableConfig` (mutable), then
      `freeze()` into a `buildprops.config.Config`.
    - Do **not** mutate a frozen `Config`; adjust the `MutableConfig` draft
      before freezing (see `make_config`).
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from buildprops.config import MutableConfig, logging
from buildprops.constants import ENV_GIT_DATE, ENV_GIT_SHA, ENV_LOG_LEVEL
from buildprops.git.model import GitMetadata

if TYPE_CHECKING:
    from pathlib import Path

    from buildprops.config import Config

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]

# The commit used throughout the examples: 2015-12-15 13:30:23 UTC, 7559aed...
EXAMPLE_DATE: str = "20151215-133023"
EXAMPLE_SHA: str = "7559aed"
EXAMPLE_FULL_SHA: str = "7559aed0123456789abcdef0123456789abcdef0"
EXAMPLE_MOMENT: datetime = datetime(2015, 12, 15, 13, 30, 23, tzinfo=timezone.utc)


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def clean_buildprops_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell cannot leak BuildProps settings into tests.

    Removes the log level override and any injected git metadata so each test
    decides explicitly where commit information comes from.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in (ENV_LOG_LEVEL, ENV_GIT_SHA, ENV_GIT_DATE):
        monkeypatch.delenv(name, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so failing tests show full diagnostics."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an isolated project directory (``tmp_path / "proj"``).

    Returns:
        Path: The project directory, also the current working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


class StaticGitInfoProvider:
    """Test double returning fixed metadata (or None)."""

    name = "static"

    def __init__(self, meta: GitMetadata | None) -> None:
        self.meta = meta
        self.calls = 0

    def fetch(self) -> GitMetadata | None:
        self.calls += 1
        return self.meta


def example_provider() -> StaticGitInfoProvider:
    """Provider answering with the example commit (``20151215-133023`` / ``7559aed``)."""
    return StaticGitInfoProvider(GitMetadata(date=EXAMPLE_DATE, sha=EXAMPLE_SHA))


def make_config(root: Path, **overrides: Any) -> Config:
    """Return a frozen `Config` rooted at ``root``, built from defaults and overrides."""
    draft: MutableConfig = dataclasses.replace(MutableConfig.from_defaults(root), **overrides)
    return draft.freeze()
