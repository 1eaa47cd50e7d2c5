# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Pre-release ordering: 1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-alpha.beta
< 1.0.0-beta < 1.0.0-beta.2 < 1.0.0-beta.11 < 1.0.0-rc.1 < 1.0.0
Build metadata is ignored in comparisons, as SemVer 2.0.0 requires.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, TypeVar, Union

from .semver import Version, parse_version

VersionLike = Union[str, Version]
V = TypeVar("V", str, Version)


class Ordering(IntEnum):
    """Result of comparing two versions."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _coerce(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> Ordering:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        Ordering.LESS if version1 < version2
        Ordering.EQUAL if both have the same precedence
        Ordering.GREATER if version1 > version2

    Raises:
        MalformedVersionError: If either version string is invalid

    Note:
        Build metadata is ignored, so "1.0.0+001" and "1.0.0+002" compare
        EQUAL even though the Version objects are not ``==``.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        <Ordering.LESS: -1>
        >>> compare_versions("1.0.0-alpha.1", "1.0.0-alpha.beta")
        <Ordering.LESS: -1>
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        <Ordering.LESS: -1>
    """
    key1 = _coerce(version1).precedence_key
    key2 = _coerce(version2).precedence_key
    if key1 == key2:
        return Ordering.EQUAL
    return Ordering.LESS if key1 < key2 else Ordering.GREATER


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or Version object

    Returns:
        A tuple that can be used for sorting versions

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _coerce(version).precedence_key


def sort_versions(versions: Iterable[V], reverse: bool = False) -> list[V]:
    """Sort versions by precedence, keeping the input order of ties.

    Items are returned as given: strings stay strings. Versions that differ
    only in build metadata keep their relative order, also when reversed.

    Raises:
        MalformedVersionError: If any version string is invalid
    """
    return sorted(versions, key=version_key, reverse=reverse)


def max_version(versions: Iterable[V]) -> V:
    """Return the highest-precedence version (first one on ties)."""
    return max(versions, key=version_key)


def min_version(versions: Iterable[V]) -> V:
    """Return the lowest-precedence version (first one on ties)."""
    return min(versions, key=version_key)
