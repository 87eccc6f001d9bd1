# topmark:header:start
#
#   project      : BuildProps
#   file         : model.py
#   file_relpath : src/buildprops/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the build tasks.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      is frozen into `Config` once all layers are applied.

Layers, lowest precedence first:
    1. Built-in defaults (`load_defaults_dict`).
    2. ``[tool.buildprops]`` in ``pyproject.toml`` at the project root.
    3. ``buildprops.toml`` at the project root.
    4. Explicit config files (``--config``), in order.
    5. CLI / API overrides (`MutableConfig.apply_args`).

Path semantics:
    - Paths declared in a config file are resolved against that file's directory.
    - CLI path options are resolved against the invocation CWD.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from buildprops.config.io import (
    extract_pyproject_section,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    parse_toml_file,
)
from buildprops.config.keys import Defaults, Toml
from buildprops.config.logging import get_logger
from buildprops.constants import (
    BANNER_LINE_SEPARATOR,
    DEFAULT_TOML_CONFIG_NAME,
    PYPROJECT_TOML_NAME,
)
from buildprops.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from buildprops.config.io import TomlTable
    from buildprops.config.logging import BuildPropsLogger

# Generic mapping accepted by `MutableConfig.apply_args` (CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: BuildPropsLogger = get_logger(__name__)


def normalize_banner(text: str) -> str:
    """Join a multi-line banner into one property value using ``%n`` separators."""
    return BANNER_LINE_SEPARATOR.join(text.splitlines())


def _abs_path_from(base: Path, value: str) -> Path:
    p = Path(value).expanduser()
    return p if p.is_absolute() else (base / p)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for BuildProps.

    Attributes:
        root (Path): Project root; config discovery and git lookup start here.
        base_version (str): The numeric/dotted version root.
        base_version_suffix (str): Suffix policy (``SNAPSHOT``, ``SHA-SNAPSHOT``,
            ``SHA``, ``""``, ``SPLIT`` or a custom value).
        versions_file (Path): The ``versions.properties`` input map.
        build_character_file (Path): Destination of the build character file.
        resource_dir (Path): Directory receiving ``<component>.properties``.
        component (str): Stem of the per-component version properties file.
        copyright (str): Value of ``copyright.string``.
        shell_banner (str): Value of ``shell.banner`` (lines joined with ``%n``).
        config_files (tuple[Path, ...]): Config sources that contributed, in merge order.
    """

    root: Path
    base_version: str
    base_version_suffix: str
    versions_file: Path
    build_character_file: Path
    resource_dir: Path
    component: str
    copyright: str
    shell_banner: str
    config_files: tuple[Path, ...] = ()

    @property
    def version_properties_file(self) -> Path:
        """Destination of the per-component version properties file."""
        return self.resource_dir / f"{self.component}.properties"


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration builder used while merging layers.

    Call `freeze` to obtain the immutable `Config` consumed at runtime.
    """

    root: Path = field(default_factory=Path.cwd)
    base_version: str = Defaults.BASE_VERSION
    base_version_suffix: str = Defaults.SUFFIX
    versions_file: Path | None = None
    build_character_file: Path | None = None
    resource_dir: Path | None = None
    component: str = Defaults.COMPONENT
    copyright: str = Defaults.COPYRIGHT
    shell_banner: str = normalize_banner(Defaults.SHELL_BANNER)
    config_files: list[Path] = field(default_factory=list)

    @classmethod
    def from_defaults(cls, root: Path | None = None) -> MutableConfig:
        """Return a builder holding the built-in defaults for project ``root``."""
        m = cls(root=(root or Path.cwd()).resolve())
        m.merge_toml(load_defaults_dict(), base=m.root)
        return m

    @classmethod
    def load_merged(
        cls,
        *,
        root: Path | None = None,
        config_files: Sequence[Path] = (),
        no_config: bool = False,
    ) -> MutableConfig:
        """Build a configuration from defaults, discovered files and explicit files.

        Args:
            root (Path | None): Project root (defaults to the CWD).
            config_files (Sequence[Path]): Explicit config files, applied last in order.
            no_config (bool): Skip ``pyproject.toml`` / ``buildprops.toml`` discovery.

        Returns:
            MutableConfig: The merged builder.

        Raises:
            ConfigError: If an explicit config file is missing or malformed.
        """
        m: MutableConfig = cls.from_defaults(root)

        if not no_config:
            pyproject: Path = m.root / PYPROJECT_TOML_NAME
            if pyproject.is_file():
                section: TomlTable = extract_pyproject_section(load_toml_dict(pyproject))
                if section:
                    m.merge_toml(section, base=m.root, source=pyproject)
            local: Path = m.root / DEFAULT_TOML_CONFIG_NAME
            if local.is_file():
                m.merge_toml(load_toml_dict(local), base=m.root, source=local)

        for path in config_files:
            if not path.is_file():
                raise ConfigError(f"Config file not found: {path}")
            m.merge_toml(parse_toml_file(path), base=path.resolve().parent, source=path)

        return m

    def merge_toml(
        self,
        data: TomlTable,
        *,
        base: Path,
        source: Path | None = None,
    ) -> MutableConfig:
        """Overlay the keys present in ``data`` onto this builder.

        Args:
            data (TomlTable): A BuildProps TOML table (top level of ``buildprops.toml``
                or the ``[tool.buildprops]`` table).
            base (Path): Directory that relative paths in ``data`` are resolved against.
            source (Path | None): The file ``data`` came from, recorded in ``config_files``.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        version_tbl: TomlTable = get_table_value(data, Toml.SECTION_VERSION)
        output_tbl: TomlTable = get_table_value(data, Toml.SECTION_OUTPUT)
        metadata_tbl: TomlTable = get_table_value(data, Toml.SECTION_METADATA)

        base_version: str | None = get_string_value_or_none(version_tbl, Toml.KEY_BASE)
        if base_version is not None:
            self.base_version = base_version
        # An empty suffix is meaningful (release build)
        suffix: str | None = get_string_value_or_none(version_tbl, Toml.KEY_SUFFIX)
        if suffix is not None:
            self.base_version_suffix = suffix

        for key, attr in (
            (Toml.KEY_VERSIONS_FILE, "versions_file"),
            (Toml.KEY_BUILD_CHARACTER_FILE, "build_character_file"),
            (Toml.KEY_RESOURCE_DIR, "resource_dir"),
        ):
            value: str | None = get_string_value_or_none(output_tbl, key)
            if value:
                setattr(self, attr, _abs_path_from(base, value))

        component: str | None = get_string_value_or_none(output_tbl, Toml.KEY_COMPONENT)
        if component is not None:
            self.component = component

        copyright_str: str | None = get_string_value_or_none(metadata_tbl, Toml.KEY_COPYRIGHT)
        if copyright_str is not None:
            self.copyright = copyright_str
        banner: str | None = get_string_value_or_none(metadata_tbl, Toml.KEY_SHELL_BANNER)
        if banner is not None:
            self.shell_banner = normalize_banner(banner)

        if source is not None:
            self.config_files.append(source)
            logger.debug("Merged config from %s", source)
        return self

    def apply_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI / API overrides; ``None`` values mean "not provided".

        Recognized keys: ``base_version``, ``base_version_suffix``,
        ``versions_file``, ``build_character_file``, ``resource_dir``,
        ``component``, ``copyright``.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        cwd: Path = Path.cwd()
        for key in ("base_version", "base_version_suffix", "component", "copyright"):
            value: Any = args.get(key)
            if value is not None:
                setattr(self, key, str(value))
        for key in ("versions_file", "build_character_file", "resource_dir"):
            value = args.get(key)
            if value is not None:
                setattr(self, key, _abs_path_from(cwd, str(value)))
        return self

    def freeze(self) -> Config:
        """Return the immutable runtime snapshot."""
        return Config(
            root=self.root,
            base_version=self.base_version,
            base_version_suffix=self.base_version_suffix,
            versions_file=self.versions_file or self.root / Defaults.VERSIONS_FILE,
            build_character_file=(
                self.build_character_file or self.root / Defaults.BUILD_CHARACTER_FILE
            ),
            resource_dir=self.resource_dir or self.root / Defaults.RESOURCE_DIR,
            component=self.component or self.root.name,
            copyright=self.copyright,
            shell_banner=self.shell_banner,
            config_files=tuple(self.config_files),
        )
