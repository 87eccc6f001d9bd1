# topmark:header:start
#
#   project      : BuildProps
#   file         : test_derive.py
#   file_relpath : tests/versioning/test_derive.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `buildprops.versioning.derive`.

The expected values below are the reference examples for commit date
``20151215-133023`` and SHA ``7559aed``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from buildprops.core.errors import BuildPropsError, VersionSplitError
from buildprops.versioning import (
    SuffixKind,
    Versions,
    cross_classifier,
    derive_versions,
    split_base_version,
)
from tests.conftest import EXAMPLE_DATE, EXAMPLE_SHA, parametrize

if TYPE_CHECKING:
    from buildprops.versioning.model import Versions as VersionsT


def _derive(base_version: str, suffix: str, sha: str = EXAMPLE_SHA) -> VersionsT:
    return derive_versions(base_version, suffix, sha, EXAMPLE_DATE)


@parametrize(
    "base_version, suffix, canonical, maven, osgi, is_release",
    [
        (
            "2.11.8",
            "SNAPSHOT",
            "2.11.8-20151215-133023-7559aed",
            "2.11.8-bin-SNAPSHOT",
            "2.11.8.v20151215-133023-7559aed",
            False,
        ),
        (
            "2.11.8",
            "SHA-SNAPSHOT",
            "2.11.8-20151215-133023-7559aed",
            "2.11.8-bin-7559aed-SNAPSHOT",
            "2.11.8.v20151215-133023-7559aed",
            False,
        ),
        (
            "2.11.8",
            "SHA",
            "2.11.8-7559aed",
            "2.11.8-bin-7559aed",
            "2.11.8.v20151215-133023-7559aed",
            False,
        ),
        (
            "2.11.0",
            "SHA",
            "2.11.0-7559aed",
            "2.11.0-pre-7559aed",
            "2.11.0.v20151215-133023-7559aed",
            False,
        ),
        (
            "2.11.8",
            "",
            "2.11.8",
            "2.11.8",
            "2.11.8.v20151215-133023-VFINAL-7559aed",
            True,
        ),
        (
            "2.11.8",
            "M3",
            "2.11.8-M3",
            "2.11.8-M3",
            "2.11.8.v20151215-133023-M3-7559aed",
            True,
        ),
        (
            "2.11.8-RC4",
            "SPLIT",
            "2.11.8-RC4",
            "2.11.8-RC4",
            "2.11.8.v20151215-133023-RC4-7559aed",
            True,
        ),
    ],
)
def test_reference_examples(
    base_version: str,
    suffix: str,
    canonical: str,
    maven: str,
    osgi: str,
    is_release: bool,
) -> None:
    """Each suffix policy yields the documented canonical/Maven/OSGi triple."""
    v: VersionsT = _derive(base_version, suffix)
    assert v.canonical_version == canonical
    assert v.maven_version == maven
    assert v.osgi_version == osgi
    assert v.is_release is is_release
    assert v.commit_sha == EXAMPLE_SHA
    assert v.commit_date == EXAMPLE_DATE


def test_maven_base_is_the_split_base() -> None:
    """With SPLIT, ``maven_base`` excludes the suffix and ``maven_suffix`` carries it."""
    v: VersionsT = _derive("2.11.8-RC4", "SPLIT")
    assert v.maven_base == "2.11.8"
    assert v.maven_suffix == "-RC4"


def test_suffix_matching_is_exact() -> None:
    """``SHA-FOO`` is a custom suffix, not the ``SHA`` policy."""
    v: VersionsT = _derive("2.11.8", "SHA-FOO")
    assert v.canonical_version == "2.11.8-SHA-FOO"
    assert v.maven_version == "2.11.8-SHA-FOO"
    assert v.osgi_version == "2.11.8.v20151215-133023-SHA-FOO-7559aed"
    assert v.is_release is True


def test_lowercase_snapshot_is_custom() -> None:
    """Policy names are case-sensitive."""
    v: VersionsT = _derive("2.11.8", "snapshot")
    assert v.maven_version == "2.11.8-snapshot"
    assert v.is_release is True


def test_split_without_tail_is_a_release() -> None:
    """``SPLIT`` of a bare version behaves like the empty suffix."""
    assert _derive("2.12.0", "SPLIT") == _derive("2.12.0", "")


def test_unknown_sha_is_used_verbatim() -> None:
    """The ``unknown`` sentinel flows into the strings like a real SHA."""
    v: VersionsT = _derive("2.11.8", "SNAPSHOT", sha="unknown")
    assert v.canonical_version == "2.11.8-20151215-133023-unknown"
    assert v.github_tree == "master"


@parametrize(
    "base, expected",
    [
        ("2.11.8", "bin"),
        ("2.11.0", "pre"),
        ("2.12.0", "pre"),
        ("10.4.12", "bin"),
        ("2.11", "pre"),
        ("2.11.0.1", "pre"),
        ("2.11.8.1", "pre"),
        ("abc", "pre"),
    ],
)
def test_cross_classifier(base: str, expected: str) -> None:
    """``bin`` only for a full ``X.Y.Z`` with a non-zero patch."""
    assert cross_classifier(base) == expected


@parametrize(
    "text, expected",
    [
        ("2.11.8", ("2.11.8", "")),
        ("2.11.8-RC4", ("2.11.8", "RC4")),
        ("2.12.0-M3-extra", ("2.12.0", "M3-extra")),
        ("1.0+build.5-SNAPSHOT", ("1.0+build.5", "SNAPSHOT")),
    ],
)
def test_split_base_version(text: str, expected: tuple[str, str]) -> None:
    """The leading token becomes the base, the dash tail (minus its dash) the suffix."""
    assert split_base_version(text) == expected


@parametrize("text", ["", "-RC1", "2.11.8 RC1", "2.11.8-", "2.11.8/RC1", "2.11.8-RC1 "])
def test_split_rejects_malformed_versions(text: str) -> None:
    """Inputs that do not fit ``base(-tail)?`` are fatal configuration errors."""
    with pytest.raises(VersionSplitError) as excinfo:
        derive_versions(text, "SPLIT", EXAMPLE_SHA, EXAMPLE_DATE)
    assert excinfo.value.base_version == text
    assert isinstance(excinfo.value, BuildPropsError)
    assert isinstance(excinfo.value, ValueError)


def test_malformed_base_is_fine_without_split() -> None:
    """Only the SPLIT policy validates the shape of the base version."""
    v: VersionsT = _derive("weird version", "SHA")
    assert v.canonical_version == "weird version-7559aed"


@parametrize(
    "suffix, kind",
    [
        ("SNAPSHOT", SuffixKind.SNAPSHOT),
        ("SHA-SNAPSHOT", SuffixKind.SHA_SNAPSHOT),
        ("SHA", SuffixKind.SHA),
        ("", SuffixKind.RELEASE),
        ("RC1", SuffixKind.CUSTOM),
        ("custom", SuffixKind.CUSTOM),
        ("SHA-FOO", SuffixKind.CUSTOM),
    ],
)
def test_suffix_kind_classify(suffix: str, kind: SuffixKind) -> None:
    """Classification is by exact string comparison."""
    assert SuffixKind.classify(suffix) is kind


def test_to_map_has_exactly_three_keys() -> None:
    """`Versions.to_map` exposes the three shared version properties."""
    v: VersionsT = _derive("2.11.8", "SNAPSHOT")
    assert v.to_map() == {
        "version.number": "2.11.8-20151215-133023-7559aed",
        "maven.version.number": "2.11.8-bin-SNAPSHOT",
        "osgi.version.number": "2.11.8.v20151215-133023-7559aed",
    }


@parametrize(
    "base_version, suffix, sha, tree",
    [
        ("2.11.8", "", EXAMPLE_SHA, "v2.11.8"),
        ("2.11.8", "RC1", EXAMPLE_SHA, "v2.11.8-RC1"),
        ("2.11.8", "SNAPSHOT", EXAMPLE_SHA, EXAMPLE_SHA),
        ("2.11.8", "SHA", "unknown", "master"),
    ],
)
def test_github_tree(base_version: str, suffix: str, sha: str, tree: str) -> None:
    """Release tag, then commit SHA, then the default branch."""
    assert _derive(base_version, suffix, sha=sha).github_tree == tree


def test_str_summary() -> None:
    """The one-line summary names all four identifiers."""
    v: VersionsT = _derive("2.11.8", "SHA")
    assert str(v) == (
        "Canonical: 2.11.8-7559aed, Maven: 2.11.8-bin-7559aed, "
        "OSGi: 2.11.8.v20151215-133023-7559aed, github: 7559aed"
    )


def test_versions_is_immutable() -> None:
    """`Versions` is a frozen value."""
    v: Versions = _derive("2.11.8", "SHA")
    with pytest.raises(AttributeError):
        v.maven_base = "3.0.0"  # type: ignore[misc]


def test_to_dict_includes_derived_fields() -> None:
    """The JSON view carries ``maven_version`` and ``github_tree`` too."""
    d = _derive("2.11.8", "").to_dict()
    assert d["maven_version"] == "2.11.8"
    assert d["github_tree"] == "v2.11.8"
    assert d["is_release"] is True
