# topmark:header:start
#
#   project      : BuildProps
#   file         : model.py
#   file_relpath : src/buildprops/versioning/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Version value types.

This module defines:
    - `SuffixKind`: the tagged variant behind the suffix policy dispatch.
    - `Versions`: the immutable result of a derivation, with its derived
      Maven version, GitHub tree and property-map projection.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from buildprops.constants import DEFAULT_GITHUB_TREE, UNKNOWN_SHA
from buildprops.core.keys import PropKey


class SuffixKind(str, Enum):
    """Classification of an effective (post-``SPLIT``) version suffix.

    Members:
      SNAPSHOT: Local snapshot build (the default policy).
      SHA_SNAPSHOT: Snapshot that carries the commit SHA (PR validation builds).
      SHA: Integration build identified by its commit SHA.
      RELEASE: Empty suffix, a final release.
      CUSTOM: Any other value, treated as an RC / milestone (e.g. ``M3``, ``RC4``).

    Suffix values are matched as complete strings: ``SHA-FOO`` is ``CUSTOM``.
    """

    SNAPSHOT = "SNAPSHOT"
    SHA_SNAPSHOT = "SHA-SNAPSHOT"
    SHA = "SHA"
    RELEASE = ""
    CUSTOM = "custom"

    @classmethod
    def classify(cls, suffix: str) -> SuffixKind:
        """Return the kind for ``suffix`` using exact string comparison.

        Args:
            suffix (str): The effective suffix.

        Returns:
            SuffixKind: The matching kind, `SuffixKind.CUSTOM` for anything else.
        """
        for kind in (cls.SNAPSHOT, cls.SHA_SNAPSHOT, cls.SHA, cls.RELEASE):
            if suffix == kind.value:
                return kind
        return cls.CUSTOM


@dataclass(frozen=True, slots=True)
class Versions:
    """Canonical, Maven and OSGi version identifiers for one build.

    Attributes:
        canonical_version (str): Human/tooling-facing version, e.g.
            ``2.11.8-20151215-133023-7559aed``.
        maven_base (str): Base version used for Maven coordinates.
        maven_suffix (str): Suffix appended to `maven_base` for the artifact version.
        osgi_version (str): OSGi version with a ``v``-prefixed qualifier.
        commit_sha (str): Short commit hash or ``"unknown"``.
        commit_date (str): ``yyyyMMdd-HHmmss`` UTC commit timestamp.
        is_release (bool): True for release and RC / milestone builds.
    """

    canonical_version: str
    maven_base: str
    maven_suffix: str
    osgi_version: str
    commit_sha: str
    commit_date: str
    is_release: bool

    @property
    def maven_version(self) -> str:
        """Maven artifact version (``maven_base + maven_suffix``)."""
        return self.maven_base + self.maven_suffix

    @property
    def github_tree(self) -> str:
        """Tree to link sources to: the release tag, the commit, or the default branch."""
        if self.is_release:
            return "v" + self.maven_version
        if self.commit_sha != UNKNOWN_SHA:
            return self.commit_sha
        return DEFAULT_GITHUB_TREE

    def __str__(self) -> str:
        return (
            f"Canonical: {self.canonical_version}, Maven: {self.maven_version}, "
            f"OSGi: {self.osgi_version}, github: {self.github_tree}"
        )

    def to_map(self) -> dict[str, str]:
        """Return the three version properties shared by every generated file."""
        return {
            PropKey.VERSION_NUMBER: self.canonical_version,
            PropKey.MAVEN_VERSION_NUMBER: self.maven_version,
            PropKey.OSGI_VERSION_NUMBER: self.osgi_version,
        }

    def to_dict(self) -> dict[str, str | bool]:
        """Return a JSON-friendly view including the derived fields."""
        return {
            "canonical_version": self.canonical_version,
            "maven_version": self.maven_version,
            "maven_base": self.maven_base,
            "maven_suffix": self.maven_suffix,
            "osgi_version": self.osgi_version,
            "commit_sha": self.commit_sha,
            "commit_date": self.commit_date,
            "is_release": self.is_release,
            "github_tree": self.github_tree,
        }
