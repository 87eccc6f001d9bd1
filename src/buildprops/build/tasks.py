# topmark:header:start
#
#   project      : BuildProps
#   file         : tasks.py
#   file_relpath : src/buildprops/build/tasks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build tasks that produce (or extract) properties files.

- `generate_version_properties_file`: ``<component>.properties`` with the
  version numbers, copyright string and shell banner.
- `generate_build_character_properties_file`: ``buildcharacter.properties``
  with the version numbers, the ``versions.properties`` map and the Maven
  base/suffix.
- `extract_build_character_properties_file`: copy ``buildcharacter.properties``
  out of a bootstrap jar.

Every value needed is computed before the first write, so a failure (e.g. a
malformed ``SPLIT`` base version) leaves no partial output behind.
"""

from __future__ import annotations

import zipfile
from typing import TYPE_CHECKING

from buildprops.config.logging import get_logger
from buildprops.constants import BUILD_CHARACTER_ENTRY
from buildprops.core.errors import PropertiesFileError
from buildprops.core.keys import PropKey
from buildprops.properties.io import write_properties

if TYPE_CHECKING:
    from pathlib import Path

    from buildprops.build.session import BuildSession
    from buildprops.config.logging import BuildPropsLogger
    from buildprops.versioning.model import Versions

logger: BuildPropsLogger = get_logger(__name__)


def version_properties(session: BuildSession) -> dict[str, str]:
    """Return the entries of the per-component version properties file."""
    config = session.config
    return {
        **session.versions.to_map(),
        PropKey.COPYRIGHT_STRING: config.copyright,
        PropKey.SHELL_BANNER: config.shell_banner,
    }


def build_character_properties(session: BuildSession) -> dict[str, str]:
    """Return the entries of the build character file.

    Later sources win on key collisions: version numbers, then
    ``versions.properties``, then the Maven base/suffix.
    """
    versions: Versions = session.versions
    return {
        **versions.to_map(),
        **session.version_props,
        PropKey.MAVEN_VERSION_BASE: versions.maven_base,
        PropKey.MAVEN_VERSION_SUFFIX: versions.maven_suffix,
    }


def generate_version_properties_file(
    session: BuildSession,
    destination: Path | None = None,
) -> Path:
    """Write ``<component>.properties`` and return its path.

    Args:
        session (BuildSession): The current build session.
        destination (Path | None): Override for ``config.version_properties_file``.

    Returns:
        Path: The written file.
    """
    target: Path = destination or session.config.version_properties_file
    entries: dict[str, str] = version_properties(session)
    written: Path = write_properties(entries, target)
    logger.info("Generated version properties file %s", written)
    return written


def generate_build_character_properties_file(
    session: BuildSession,
    destination: Path | None = None,
) -> Path:
    """Write ``buildcharacter.properties`` and return its path.

    Args:
        session (BuildSession): The current build session.
        destination (Path | None): Override for ``config.build_character_file``.

    Returns:
        Path: The written file.

    Raises:
        PropertiesFileError: If ``versions.properties`` is missing or unreadable.
    """
    target: Path = destination or session.config.build_character_file
    entries: dict[str, str] = build_character_properties(session)
    written: Path = write_properties(entries, target)
    logger.info("Generated build character file %s", written)
    return written


def _find_build_character_entry(names: list[str]) -> str | None:
    if BUILD_CHARACTER_ENTRY in names:
        return BUILD_CHARACTER_ENTRY
    # Nested entries: pick the shallowest one for a stable choice
    nested: list[str] = [n for n in names if n.rsplit("/", 1)[-1] == BUILD_CHARACTER_ENTRY]
    if not nested:
        return None
    return min(nested, key=lambda n: (n.count("/"), n))


def extract_build_character_properties_file(archive: Path, destination: Path) -> Path:
    """Copy the ``buildcharacter.properties`` entry of a jar/zip archive to ``destination``.

    Args:
        archive (Path): A bootstrap jar (any zip archive).
        destination (Path): File to write; parent directories are created.

    Returns:
        Path: ``destination``.

    Raises:
        PropertiesFileError: If the archive is missing, unreadable, or has no
            ``buildcharacter.properties`` entry.
    """
    try:
        with zipfile.ZipFile(archive) as zf:
            entry: str | None = _find_build_character_entry(zf.namelist())
            data: bytes | None = zf.read(entry) if entry is not None else None
    except FileNotFoundError as exc:
        raise PropertiesFileError(archive, "archive not found", missing=True) from exc
    except (OSError, zipfile.BadZipFile) as exc:
        raise PropertiesFileError(archive, f"cannot read archive: {exc}") from exc

    if entry is None or data is None:
        raise PropertiesFileError(
            archive, f"no {BUILD_CHARACTER_ENTRY} entry in archive", missing=True
        )

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(data)
    except OSError as exc:
        raise PropertiesFileError(destination, f"cannot write: {exc}") from exc
    logger.info("Extracted %s from %s to %s", entry, archive, destination)
    return destination
