# topmark:header:start
#
#   project      : BuildProps
#   file         : io.py
#   file_relpath : src/buildprops/properties/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read and write Java-style ``.properties`` files.

Writing is deterministic: unlike a plain ``Properties.store``-style dump,
`write_properties` emits keys in Java string order and never prepends the
timestamp comment line, so two runs over the same map produce byte-identical
files.

Escaping (``=``, ``:``, ``#``, ``!``, whitespace, non-ASCII as ``\\uXXXX``) is
delegated to `javaproperties`, one key/value pair at a time.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import javaproperties

from buildprops.config.logging import get_logger
from buildprops.core.errors import PropertiesFileError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

    from buildprops.config.logging import BuildPropsLogger

logger: BuildPropsLogger = get_logger(__name__)

# `.properties` files are Latin-1 by definition; escaped output is pure ASCII.
PROPERTIES_ENCODING: str = "iso-8859-1"

# A ``\uXXXX`` escape is preceded by an even number of backslashes.
_UNICODE_ESCAPE_RE: re.Pattern[str] = re.compile(r"(?<!\\)((?:\\\\)*)\\u([0-9a-f]{4})")


def java_key_order(key: str) -> bytes:
    """Sort key comparing UTF-16 code units, like ``java.lang.String.compareTo``.

    Differs from code point order only for keys mixing supplementary characters
    with characters in ``U+E000..U+FFFF``.
    """
    return key.encode("utf-16-be", "surrogatepass")


def _upper_unicode_escapes(line: str) -> str:
    return _UNICODE_ESCAPE_RE.sub(lambda m: f"{m.group(1)}\\u{m.group(2).upper()}", line)


def render_properties(entries: Mapping[str, str]) -> str:
    """Render ``entries`` as ``.properties`` text with sorted keys and no comments.

    Keys are ordered by UTF-16 code units and ``\\uXXXX`` escapes use upper-case
    hex digits, matching the bytes ``java.util.Properties`` would write.

    Args:
        entries (Mapping[str, str]): The properties to serialize.

    Returns:
        str: One ``key=value`` line per entry, each terminated by ``\\n``.
    """
    out: list[str] = []
    for key in sorted(entries, key=java_key_order):
        line: str = _upper_unicode_escapes(javaproperties.join_key_value(key, entries[key]))
        out.append(f"{line}\n")
    return "".join(out)


def write_properties(entries: Mapping[str, str], destination: Path) -> Path:
    """Write ``entries`` to ``destination`` deterministically, overwriting it.

    Parent directories are created as needed.

    Args:
        entries (Mapping[str, str]): The properties to serialize.
        destination (Path): Target file.

    Returns:
        Path: ``destination``.

    Raises:
        PropertiesFileError: If the file cannot be written.
    """
    text: str = render_properties(entries)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        # Bytes, not text mode: no platform newline translation.
        destination.write_bytes(text.encode(PROPERTIES_ENCODING))
    except OSError as exc:
        raise PropertiesFileError(destination, f"cannot write: {exc}") from exc
    logger.debug("Wrote %d properties to %s", len(entries), destination)
    return destination


def read_properties(path: Path) -> dict[str, str]:
    """Load a ``.properties`` file into a plain dict.

    Args:
        path (Path): File to read.

    Returns:
        dict[str, str]: The parsed key/value pairs.

    Raises:
        PropertiesFileError: If the file is missing or unreadable. No default
            map is substituted.
    """
    try:
        with path.open("rb") as fp:
            props: dict[str, str] = javaproperties.load(fp)
    except FileNotFoundError as exc:
        raise PropertiesFileError(path, "file not found", missing=True) from exc
    except OSError as exc:
        raise PropertiesFileError(path, f"cannot read: {exc}") from exc
    logger.trace("Read %d properties from %s", len(props), path)
    return dict(props)


def apply_overrides(props: Mapping[str, str], overrides: Mapping[str, str]) -> dict[str, str]:
    """Return ``props`` with values replaced by same-key ``overrides``.

    Overrides for keys that ``props`` does not define are ignored.
    """
    return {key: overrides.get(key, value) for key, value in props.items()}


def load_version_props(path: Path, overrides: Mapping[str, str] | None = None) -> dict[str, str]:
    """Read the global ``versions.properties`` map and apply external overrides.

    Args:
        path (Path): The ``versions.properties`` file.
        overrides (Mapping[str, str] | None): Externally supplied key/value
            pairs; a matching key wins over the file.

    Returns:
        dict[str, str]: The post-override map.

    Raises:
        PropertiesFileError: If ``path`` is missing or unreadable.
    """
    props: dict[str, str] = read_properties(path)
    if not overrides:
        return props
    merged: dict[str, str] = apply_overrides(props, overrides)
    for key in sorted(k for k in overrides if k in props and props[k] != overrides[k]):
        logger.info("Override for %s: %r -> %r", key, props[key], overrides[key])
    return merged


def parse_override(text: str) -> tuple[str, str]:
    """Split one ``KEY=VALUE`` override at the first ``=``.

    The value may be empty or contain further ``=`` characters.

    Raises:
        ValueError: If ``text`` has no ``=`` or an empty key.
    """
    key, sep, value = text.partition("=")
    key = key.strip()
    if not sep or not key:
        raise ValueError(f"Expected KEY=VALUE, got {text!r}")
    return key, value


def parse_overrides(items: Iterable[str]) -> dict[str, str]:
    """Parse ``-D``-style ``KEY=VALUE`` overrides; a later duplicate key wins.

    Raises:
        ValueError: If any item is malformed.
    """
    return dict(parse_override(item) for item in items)
