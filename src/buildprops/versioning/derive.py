# topmark:header:start
#
#   project      : BuildProps
#   file         : derive.py
#   file_relpath : src/buildprops/versioning/derive.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Derive canonical, Maven and OSGi versions from a base version and suffix policy.

Examples of the generated versions (date ``20151215-133023``, SHA ``7559aed``):

    ("2.11.8", "SNAPSHOT")     -> ("2.11.8-20151215-133023-7559aed",
                                   "2.11.8-bin-SNAPSHOT",
                                   "2.11.8.v20151215-133023-7559aed")
    ("2.11.8", "SHA-SNAPSHOT") -> ("2.11.8-20151215-133023-7559aed",
                                   "2.11.8-bin-7559aed-SNAPSHOT",
                                   "2.11.8.v20151215-133023-7559aed")
    ("2.11.8", "SHA")          -> ("2.11.8-7559aed",
                                   "2.11.8-bin-7559aed",
                                   "2.11.8.v20151215-133023-7559aed")
    ("2.11.0", "SHA")          -> ("2.11.0-7559aed",
                                   "2.11.0-pre-7559aed",
                                   "2.11.0.v20151215-133023-7559aed")
    ("2.11.8", "")             -> ("2.11.8",
                                   "2.11.8",
                                   "2.11.8.v20151215-133023-VFINAL-7559aed")
    ("2.11.8", "M3")           -> ("2.11.8-M3",
                                   "2.11.8-M3",
                                   "2.11.8.v20151215-133023-M3-7559aed")
    ("2.11.8-RC4", "SPLIT")    -> ("2.11.8-RC4",
                                   "2.11.8-RC4",
                                   "2.11.8.v20151215-133023-RC4-7559aed")

``SNAPSHOT`` is the default policy for local builds, ``SHA-SNAPSHOT`` suits PR
validation, ``SHA`` gives integration builds a proper version, an empty suffix
marks a release, and any other value is an RC / milestone. ``SPLIT`` splits the
real suffix off ``base_version`` first and then applies the same rules.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from buildprops.config.logging import get_logger
from buildprops.constants import SPLIT_SUFFIX
from buildprops.core.errors import VersionSplitError
from buildprops.versioning.model import SuffixKind, Versions

if TYPE_CHECKING:
    from buildprops.config.logging import BuildPropsLogger

logger: BuildPropsLogger = get_logger(__name__)

# Leading dotted/word token, optionally followed by a dash-prefixed tail.
_SPLIT_RE: re.Pattern[str] = re.compile(r"([\w+.]+)(-[\w+.-]+)?", re.ASCII)

# major.minor.patch, capturing the patch number.
_PATCH_RE: re.Pattern[str] = re.compile(r"\d+\.\d+\.(\d+)", re.ASCII)


def split_base_version(base_version: str) -> tuple[str, str]:
    """Split ``base_version`` into ``(base, suffix)`` for the ``SPLIT`` policy.

    Args:
        base_version (str): A version such as ``2.11.8`` or ``2.11.8-RC4``.

    Returns:
        tuple[str, str]: The base and the suffix without its leading dash
        (empty when there is no tail).

    Raises:
        VersionSplitError: If ``base_version`` does not have the expected shape.
    """
    m: re.Match[str] | None = _SPLIT_RE.fullmatch(base_version)
    if m is None:
        raise VersionSplitError(base_version)
    tail: str | None = m.group(2)
    return m.group(1), tail[1:] if tail else ""


def cross_classifier(base: str) -> str:
    """Return ``"bin"`` for a patch release (``X.Y.Z`` with ``Z > 0``), else ``"pre"``."""
    m: re.Match[str] | None = _PATCH_RE.fullmatch(base)
    if m is not None and int(m.group(1)) > 0:
        return "bin"
    return "pre"


def derive_versions(
    base_version: str,
    base_version_suffix: str,
    sha: str,
    date: str,
) -> Versions:
    """Compute the canonical, Maven and OSGi versions for one build.

    Args:
        base_version (str): The numeric/dotted version root (may carry a suffix
            when ``base_version_suffix`` is ``SPLIT``).
        base_version_suffix (str): ``SNAPSHOT``, ``SHA-SNAPSHOT``, ``SHA``, ``""``,
            ``SPLIT`` or any custom value.
        sha (str): Short commit SHA or ``"unknown"``.
        date (str): ``yyyyMMdd-HHmmss`` UTC commit timestamp.

    Returns:
        Versions: The derived versions.

    Raises:
        VersionSplitError: If the policy is ``SPLIT`` and ``base_version`` cannot be split.
    """
    if base_version_suffix == SPLIT_SUFFIX:
        base, suffix = split_base_version(base_version)
        logger.debug("Split %r into base=%r suffix=%r", base_version, base, suffix)
    else:
        base, suffix = base_version, base_version_suffix

    cross: str = cross_classifier(base)
    kind: SuffixKind = SuffixKind.classify(suffix)

    if kind is SuffixKind.SNAPSHOT:
        canonical = f"{base}-{date}-{sha}"
        maven_suffix = f"-{cross}-SNAPSHOT"
        osgi = f"{base}.v{date}-{sha}"
        release = False
    elif kind is SuffixKind.SHA_SNAPSHOT:
        canonical = f"{base}-{date}-{sha}"
        maven_suffix = f"-{cross}-{sha}-SNAPSHOT"
        osgi = f"{base}.v{date}-{sha}"
        release = False
    elif kind is SuffixKind.SHA:
        canonical = f"{base}-{sha}"
        maven_suffix = f"-{cross}-{sha}"
        osgi = f"{base}.v{date}-{sha}"
        release = False
    elif kind is SuffixKind.RELEASE:
        canonical = base
        maven_suffix = ""
        osgi = f"{base}.v{date}-VFINAL-{sha}"
        release = True
    else:
        canonical = f"{base}-{suffix}"
        maven_suffix = f"-{suffix}"
        osgi = f"{base}.v{date}-{suffix}-{sha}"
        release = True

    versions = Versions(
        canonical_version=canonical,
        maven_base=base,
        maven_suffix=maven_suffix,
        osgi_version=osgi,
        commit_sha=sha,
        commit_date=date,
        is_release=release,
    )
    logger.debug("Derived %s (suffix kind: %s)", versions, kind.name)
    return versions
