# topmark:header:start
#
#   project      : BuildProps
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for BuildProps configuration discovery, precedence and path normalization."""

from __future__ import annotations

import dataclasses
import textwrap
from typing import TYPE_CHECKING

import pytest

from buildprops.config import Config, MutableConfig, normalize_banner
from buildprops.config.io import get_string_value_or_none, load_toml_dict
from buildprops.core.errors import ConfigError
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


def _write(path: Path, content: str) -> None:
    """Helper: write dedented content to a file, creating parents."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")


def test_defaults(tmp_path: Path) -> None:
    """Without config files, the built-in defaults apply."""
    cfg: Config = MutableConfig.load_merged(root=tmp_path).freeze()
    root: Path = tmp_path.resolve()
    assert cfg.root == root
    assert cfg.base_version == "0.1.0"
    assert cfg.base_version_suffix == "SNAPSHOT"
    assert cfg.versions_file == root / "versions.properties"
    assert cfg.build_character_file == root / "buildcharacter.properties"
    assert cfg.resource_dir == root / "build" / "resources"
    assert cfg.component == root.name
    assert cfg.version_properties_file == root / "build" / "resources" / f"{root.name}.properties"
    assert cfg.copyright == ""
    assert cfg.shell_banner == "%nWelcome to version %s"
    assert cfg.config_files == ()


def test_pyproject_then_buildprops_toml(tmp_path: Path) -> None:
    """``buildprops.toml`` overrides ``[tool.buildprops]`` in ``pyproject.toml``."""
    _write(
        tmp_path / "pyproject.toml",
        """
        [project]
        name = "demo"

        [tool.buildprops.version]
        base = "2.11.8"
        suffix = "SHA"

        [tool.buildprops.metadata]
        copyright = "from pyproject"
        """,
    )
    _write(
        tmp_path / "buildprops.toml",
        """
        [version]
        suffix = "SHA-SNAPSHOT"
        """,
    )
    cfg: Config = MutableConfig.load_merged(root=tmp_path).freeze()
    assert cfg.base_version == "2.11.8"
    assert cfg.base_version_suffix == "SHA-SNAPSHOT"
    assert cfg.copyright == "from pyproject"
    assert [p.name for p in cfg.config_files] == ["pyproject.toml", "buildprops.toml"]


def test_empty_suffix_is_honored(tmp_path: Path) -> None:
    """``suffix = ""`` selects a release build instead of falling back to the default."""
    _write(
        tmp_path / "buildprops.toml",
        """
        [version]
        base = "2.12.0"
        suffix = ""
        """,
    )
    cfg: Config = MutableConfig.load_merged(root=tmp_path).freeze()
    assert cfg.base_version_suffix == ""


def test_paths_resolve_against_declaring_file(tmp_path: Path) -> None:
    """Relative paths in an explicit config file are anchored at that file's directory."""
    root: Path = tmp_path / "proj"
    root.mkdir()
    extra: Path = tmp_path / "shared" / "ci.toml"
    _write(
        extra,
        """
        [output]
        versions_file = "../proj/deps/versions.properties"
        resource_dir = "res"
        component = "compiler"
        """,
    )
    cfg: Config = MutableConfig.load_merged(root=root, config_files=[extra]).freeze()
    assert cfg.versions_file.resolve() == (root / "deps" / "versions.properties").resolve()
    assert cfg.resource_dir.resolve() == (tmp_path / "shared" / "res").resolve()
    assert cfg.version_properties_file.name == "compiler.properties"


def test_explicit_config_files_apply_in_order(tmp_path: Path) -> None:
    """Later ``--config`` files win."""
    one: Path = tmp_path / "one.toml"
    two: Path = tmp_path / "two.toml"
    _write(one, '[version]\nbase = "1.0.0"\nsuffix = "RC1"\n')
    _write(two, '[version]\nbase = "2.0.0"\n')
    cfg: Config = MutableConfig.load_merged(root=tmp_path, config_files=[one, two]).freeze()
    assert cfg.base_version == "2.0.0"
    assert cfg.base_version_suffix == "RC1"


def test_no_config_skips_discovery(tmp_path: Path) -> None:
    """``no_config`` ignores local files but still honors explicit ones."""
    _write(tmp_path / "buildprops.toml", '[version]\nbase = "9.9.9"\n')
    explicit: Path = tmp_path / "explicit.toml"
    _write(explicit, '[version]\nsuffix = "SHA"\n')
    cfg: Config = MutableConfig.load_merged(
        root=tmp_path, config_files=[explicit], no_config=True
    ).freeze()
    assert cfg.base_version == "0.1.0"
    assert cfg.base_version_suffix == "SHA"


def test_missing_explicit_config_is_fatal(tmp_path: Path) -> None:
    """An explicit config file that does not exist raises `ConfigError`."""
    with pytest.raises(ConfigError, match="not found"):
        MutableConfig.load_merged(root=tmp_path, config_files=[tmp_path / "missing.toml"])


def test_malformed_explicit_config_is_fatal(tmp_path: Path) -> None:
    """Invalid TOML in an explicit config file raises `ConfigError`."""
    bad: Path = tmp_path / "bad.toml"
    bad.write_text("[version\nbase = ", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        MutableConfig.load_merged(root=tmp_path, config_files=[bad])


def test_malformed_discovered_config_is_skipped(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """A broken ``buildprops.toml`` is logged and ignored."""
    (tmp_path / "buildprops.toml").write_text("[version\n", encoding="utf-8")
    with caplog.at_level("ERROR", logger="buildprops.config.io"):
        cfg: Config = MutableConfig.load_merged(root=tmp_path).freeze()
    assert cfg.base_version == "0.1.0"
    assert "Invalid TOML" in caplog.text


def test_load_toml_dict_missing_file_returns_empty(tmp_path: Path) -> None:
    """Discovered-file loading never raises."""
    assert load_toml_dict(tmp_path / "nope.toml") == {}


def test_multiline_banner_is_joined(tmp_path: Path) -> None:
    """A multi-line banner becomes a single ``%n``-separated value."""
    _write(
        tmp_path / "buildprops.toml",
        '''
        [metadata]
        shell_banner = """Welcome to Demo %s
        Type :help for more information."""
        ''',
    )
    cfg: Config = MutableConfig.load_merged(root=tmp_path).freeze()
    assert cfg.shell_banner == "Welcome to Demo %s%nType :help for more information."


def test_apply_args_overrides_files(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI values win; ``None`` means "not provided"; paths resolve against the CWD."""
    _write(tmp_path / "buildprops.toml", '[version]\nbase = "1.0.0"\nsuffix = "SHA"\n')
    monkeypatch.chdir(tmp_path)
    m: MutableConfig = MutableConfig.load_merged(root=tmp_path)
    m.apply_args(
        {
            "base_version": "3.0.0",
            "base_version_suffix": None,
            "versions_file": "deps/v.properties",
            "component": "repl",
        }
    )
    cfg: Config = m.freeze()
    assert cfg.base_version == "3.0.0"
    assert cfg.base_version_suffix == "SHA"
    assert cfg.versions_file.resolve() == (tmp_path / "deps" / "v.properties").resolve()
    assert cfg.component == "repl"


def test_frozen_config_is_immutable(tmp_path: Path) -> None:
    """A frozen snapshot rejects assignment; the builder stays editable."""
    draft: MutableConfig = MutableConfig.load_merged(root=tmp_path)
    cfg: Config = draft.freeze()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.base_version = "4.0.0"  # type: ignore[misc]
    draft.base_version = "4.0.0"
    assert draft.freeze().base_version == "4.0.0"
    assert cfg.base_version == "0.1.0"


@parametrize(
    "text, expected",
    [
        ("one line", "one line"),
        ("a\nb", "a%nb"),
        ("a\r\nb\n", "a%nb"),
        ("", ""),
    ],
)
def test_normalize_banner(text: str, expected: str) -> None:
    """Line breaks become ``%n``."""
    assert normalize_banner(text) == expected


@parametrize(
    "value, expected",
    [("x", "x"), (2, "2"), (1.5, "1.5"), (None, None)],
)
def test_get_string_value_or_none(value: object, expected: str | None) -> None:
    """Scalars are coerced to strings; a missing key gives None."""
    table = {} if value is None else {"k": value}
    assert get_string_value_or_none(table, "k") == expected
