# topmark:header:start
#
#   project      : BuildProps
#   file         : io.py
#   file_relpath : src/buildprops/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading BuildProps configuration from
on-disk TOML files (``buildprops.toml`` / ``pyproject.toml``) and small value
getters for the parsed tables.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from buildprops.config.keys import Defaults, Toml
from buildprops.config.logging import get_logger
from buildprops.constants import PYPROJECT_TOOL_SECTION
from buildprops.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from buildprops.config.logging import BuildPropsLogger

TomlTable = dict[str, Any]

logger: BuildPropsLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return BuildProps **runtime defaults** as a TOML-shaped dict.

    This function performs no I/O. The returned value is a new dict so callers
    can mutate it safely.
    """
    return {
        Toml.SECTION_VERSION: {
            Toml.KEY_BASE: Defaults.BASE_VERSION,
            Toml.KEY_SUFFIX: Defaults.SUFFIX,
        },
        Toml.SECTION_OUTPUT: {
            Toml.KEY_VERSIONS_FILE: Defaults.VERSIONS_FILE,
            Toml.KEY_BUILD_CHARACTER_FILE: Defaults.BUILD_CHARACTER_FILE,
            Toml.KEY_RESOURCE_DIR: Defaults.RESOURCE_DIR,
            Toml.KEY_COMPONENT: Defaults.COMPONENT,
        },
        Toml.SECTION_METADATA: {
            Toml.KEY_COPYRIGHT: Defaults.COPYRIGHT,
            Toml.KEY_SHELL_BANNER: Defaults.SHELL_BANNER,
        },
    }


def parse_toml_file(path: Path) -> TomlTable:
    """Load and parse a TOML file, raising on failure.

    Args:
        path: Path to a TOML document.

    Returns:
        The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a discovered TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``buildprops.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        return parse_toml_file(path)
    except ConfigError as e:
        logger.error("%s", e)
        return {}


def extract_pyproject_section(data: TomlTable) -> TomlTable:
    """Return the ``[tool.buildprops]`` table of a parsed ``pyproject.toml`` (or ``{}``)."""
    table: Any = data
    for part in PYPROJECT_TOOL_SECTION:
        if not isinstance(table, dict):
            return {}
        table = cast("TomlTable", table).get(part, {})
    return cast("TomlTable", table) if isinstance(table, dict) else {}


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table, or ``{}`` if absent or not a table."""
    value: Any = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.warning("Ignoring [%s]: expected a table, got %s", key, type(value).__name__)
    return {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    If the value is a ``str``, it is returned as is. If the value is of type
    ``int``, ``float``, or ``bool``, it is coerced to a string using ``str(...)``.
    When the key is missing or the value is not coercible, ``None`` is returned.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The extracted or coerced string value, or ``None``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    logger.warning("Ignoring %s: cannot coerce %r to string", key, value)
    return None
