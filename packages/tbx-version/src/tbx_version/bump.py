# SPDX-License-Identifier: MIT
"""Version increments.

Every bump returns a new Version and drops pre-release and build metadata.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from .semver import Version, parse_version


class BumpPart(str, Enum):
    """Version component to increment."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"

    def __str__(self) -> str:
        return self.value


def _coerce(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def next_major(version: Union[str, Version]) -> Version:
    """Return MAJOR+1.0.0.

    Examples:
        >>> str(next_major("1.2.3-beta+xyz"))
        '2.0.0'
    """
    return _coerce(version).next_major()


def next_minor(version: Union[str, Version]) -> Version:
    """Return MAJOR.MINOR+1.0."""
    return _coerce(version).next_minor()


def next_patch(version: Union[str, Version]) -> Version:
    """Return MAJOR.MINOR.PATCH+1."""
    return _coerce(version).next_patch()


def bump_version(version: Union[str, Version], part: Union[str, BumpPart]) -> Version:
    """Increment one component of a version.

    Args:
        version: Version string or Version object
        part: "major", "minor" or "patch"

    Returns:
        The bumped Version

    Raises:
        ValueError: If part is not a known component
        MalformedVersionError: If the version string is invalid
    """
    try:
        part = BumpPart(part)
    except ValueError:
        allowed = ", ".join(p.value for p in BumpPart)
        raise ValueError(f"Unknown version part {part!r}, expected one of: {allowed}") from None

    if part is BumpPart.MAJOR:
        return next_major(version)
    if part is BumpPart.MINOR:
        return next_minor(version)
    return next_patch(version)
