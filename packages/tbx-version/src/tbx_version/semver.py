# SPDX-License-Identifier: MIT
"""Semantic version parsing for toolbox packages.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata
(Semantic Versioning 2.0.0):
- Pre-release: -alpha, -alpha.1, -beta.11, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +001, +exp.sha.5114f85

A version string is accepted only when it re-renders to exactly the same text,
so "1.02.3", " 1.2.3" and "1.2.3.4" are all rejected.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional, Union

# Semantic versioning regex pattern (SemVer 2.0.0 compliant)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
# Accepts exactly the strings parse_version() accepts.
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?\Z",
    re.ASCII,
)

# Loose tokenizer; identifier rules and round-trip are checked afterwards
_TOKENS = re.compile(
    r"(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)"
    r"(?:-(?P<prerelease>[^+]*))?"
    r"(?:\+(?P<build>.*))?",
    re.ASCII | re.DOTALL,
)
_CORE = re.compile(r"\d+\.\d+\.\d+", re.ASCII)
_IDENTIFIER = re.compile(r"[0-9A-Za-z-]+", re.ASCII)

Identifiers = Union[str, Iterable[str], None]


class Reason(str, Enum):
    """Why a version was rejected."""

    FEWER_THAN_THREE = "fewer than three numeric components"
    PRERELEASE_CHARACTERS = "prerelease identifier contains disallowed characters"
    PRERELEASE_LEADING_ZERO = "prerelease numeric identifier has a leading zero"
    BUILD_CHARACTERS = "build identifier contains disallowed characters"
    NOT_ROUND_TRIP = "input did not round-trip to the same canonical string"
    INVALID_NUMBER = "version numbers must be non-negative integers"
    NOT_A_STRING = "version must be a string"

    def __str__(self) -> str:
        return self.value


class MalformedVersionError(ValueError):
    """Raised when a version string or component violates semantic versioning.

    Attributes:
        value: The offending input (whole version string, or a field value)
        reason: The rule that was violated
        field: Name of the offending field when building from components,
            None when parsing a whole string
    """

    def __init__(self, value: Any, reason: Reason, field: Optional[str] = None):
        self.value = value
        self.reason = reason
        self.field = field
        if field is None:
            message = f"Malformed semantic version {value!r}: {reason.value}"
        else:
            message = f"Malformed {field} {value!r}: {reason.value}"
        super().__init__(message)


def _is_numeric(identifier: str) -> bool:
    return identifier.isascii() and identifier.isdigit()


def _check_prerelease(identifiers: tuple[str, ...]) -> Optional[Reason]:
    for identifier in identifiers:
        if not _IDENTIFIER.fullmatch(identifier):
            return Reason.PRERELEASE_CHARACTERS
        if _is_numeric(identifier) and len(identifier) > 1 and identifier[0] == "0":
            return Reason.PRERELEASE_LEADING_ZERO
    return None


def _check_build(identifiers: tuple[str, ...]) -> Optional[Reason]:
    for identifier in identifiers:
        if not _IDENTIFIER.fullmatch(identifier):
            return Reason.BUILD_CHARACTERS
    return None


def _to_number(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise MalformedVersionError(value, Reason.INVALID_NUMBER, field)
    if isinstance(value, int):
        if value < 0:
            raise MalformedVersionError(value, Reason.INVALID_NUMBER, field)
        return value
    if isinstance(value, str) and _is_numeric(value):
        try:
            return int(value)
        except ValueError as e:  # exceeds the int/str conversion limit
            raise MalformedVersionError(value, Reason.INVALID_NUMBER, field) from e
    raise MalformedVersionError(value, Reason.INVALID_NUMBER, field)


def _to_identifiers(value: Identifiers, field: str, reason: Reason) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(value.split(".")) if value else ()
    try:
        identifiers = tuple(value)
    except TypeError as e:
        raise MalformedVersionError(value, reason, field) from e
    if not all(isinstance(identifier, str) for identifier in identifiers):
        raise MalformedVersionError(value, reason, field)
    return identifiers


def _classify(identifier: str) -> tuple:
    """Tag a prerelease identifier as numeric (0, length, s) or text (1, s).

    Numeric identifiers have no leading zeros, so length then text orders
    them by value without converting to int.
    """
    if _is_numeric(identifier):
        return (0, len(identifier), identifier)
    return (1, identifier)


@dataclass(frozen=True, slots=True)
class Version:
    """A validated, immutable semantic version.

    Equality and hashing cover every field, build metadata included. The
    ordering operators follow SemVer precedence and ignore build metadata,
    so ``1.0.0+a <= 1.0.0+b`` and ``1.0.0+a >= 1.0.0+b`` both hold while
    ``1.0.0+a == 1.0.0+b`` does not. Use :meth:`same_precedence` for the
    ordering-equality relation.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g., ("alpha", "1")), empty if none
        build: Build metadata identifiers (e.g., ("build", "123")), empty if none
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "major", _to_number(self.major, "major"))
        object.__setattr__(self, "minor", _to_number(self.minor, "minor"))
        object.__setattr__(self, "patch", _to_number(self.patch, "patch"))

        prerelease = _to_identifiers(self.prerelease, "prerelease", Reason.PRERELEASE_CHARACTERS)
        reason = _check_prerelease(prerelease)
        if reason is not None:
            raise MalformedVersionError(self.prerelease, reason, "prerelease")
        object.__setattr__(self, "prerelease", prerelease)

        build = _to_identifiers(self.build, "build", Reason.BUILD_CHARACTERS)
        reason = _check_build(build)
        if reason is not None:
            raise MalformedVersionError(self.build, reason, "build")
        object.__setattr__(self, "build", build)

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(version_string)

    @classmethod
    def from_parts(
        cls,
        major: Union[int, str],
        minor: Union[int, str],
        patch: Union[int, str],
        prerelease: Identifiers = None,
        build: Identifiers = None,
    ) -> "Version":
        """Build a version from components. See :func:`from_parts`."""
        return cls(major, minor, patch, prerelease, build)  # type: ignore[arg-type]

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += "-" + ".".join(self.prerelease)
        if self.build:
            version += "+" + ".".join(self.build)
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def prerelease_string(self) -> Optional[str]:
        """Return the dotted pre-release text, or None."""
        return ".".join(self.prerelease) if self.prerelease else None

    @property
    def build_string(self) -> Optional[str]:
        """Return the dotted build metadata text, or None."""
        return ".".join(self.build) if self.build else None

    @property
    def precedence_key(self) -> tuple:
        """Return a tuple ordering versions by SemVer precedence.

        A release sorts after any pre-release of the same core version.
        Numeric identifiers sort before text ones, and a shorter identifier
        list sorts before a longer one it is a prefix of.
        """
        if not self.prerelease:
            prerelease_key: tuple = (1,)
        else:
            prerelease_key = (0, tuple(_classify(p) for p in self.prerelease))
        return (self.major, self.minor, self.patch, prerelease_key)

    def same_precedence(self, other: "Version") -> bool:
        """Return True if both versions have equal precedence (build ignored)."""
        return self.precedence_key == other.precedence_key

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.precedence_key < other.precedence_key

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.precedence_key <= other.precedence_key

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.precedence_key > other.precedence_key

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.precedence_key >= other.precedence_key

    def next_major(self) -> "Version":
        """Return the next major version; pre-release and build are dropped."""
        return Version(self.major + 1, 0, 0)

    def next_minor(self) -> "Version":
        """Return the next minor version; pre-release and build are dropped."""
        return Version(self.major, self.minor + 1, 0)

    def next_patch(self) -> "Version":
        """Return the next patch version; pre-release and build are dropped."""
        return Version(self.major, self.minor, self.patch + 1)


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    The whole string must match; surrounding whitespace is not stripped.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        MalformedVersionError: If the string does not follow semantic versioning

    Examples:
        >>> str(parse_version("1.2.3"))
        '1.2.3'

        >>> parse_version("1.0.0-alpha.1").prerelease
        ('alpha', '1')

        >>> parse_version("2.0.0-rc.1+build.456").build_string
        'build.456'
    """
    if not isinstance(version_string, str):
        raise MalformedVersionError(version_string, Reason.NOT_A_STRING)

    match = _TOKENS.fullmatch(version_string)
    if not match:
        if _CORE.match(version_string):
            raise MalformedVersionError(version_string, Reason.NOT_ROUND_TRIP)
        raise MalformedVersionError(version_string, Reason.FEWER_THAN_THREE)

    # An explicit "-" or "+" must be followed by identifiers
    prerelease: tuple[str, ...] = ()
    if match.group("prerelease") is not None:
        prerelease = tuple(match.group("prerelease").split("."))
        reason = _check_prerelease(prerelease)
        if reason is not None:
            raise MalformedVersionError(version_string, reason)

    build: tuple[str, ...] = ()
    if match.group("build") is not None:
        build = tuple(match.group("build").split("."))
        reason = _check_build(build)
        if reason is not None:
            raise MalformedVersionError(version_string, reason)

    try:
        version = Version(
            major=match.group("major"),  # type: ignore[arg-type]
            minor=match.group("minor"),  # type: ignore[arg-type]
            patch=match.group("patch"),  # type: ignore[arg-type]
            prerelease=prerelease,
            build=build,
        )
    except MalformedVersionError as e:
        raise MalformedVersionError(version_string, e.reason) from e

    if str(version) != version_string:
        raise MalformedVersionError(version_string, Reason.NOT_ROUND_TRIP)
    return version


def from_parts(
    major: Union[int, str],
    minor: Union[int, str],
    patch: Union[int, str],
    prerelease: Identifiers = None,
    build: Identifiers = None,
) -> Version:
    """Build a Version from its components, validating each one.

    Args:
        major: Non-negative integer, or a string of ASCII digits
        minor: Non-negative integer, or a string of ASCII digits
        patch: Non-negative integer, or a string of ASCII digits
        prerelease: Dotted string or iterable of identifiers; None or "" for none
        build: Dotted string or iterable of identifiers; None or "" for none

    Returns:
        A Version object

    Raises:
        MalformedVersionError: Naming the first invalid field
    """
    return Version.from_parts(major, minor, patch, prerelease, build)


def format_version(version: Version) -> str:
    """Return the canonical string for a version (inverse of parse_version)."""
    return str(version)


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate

    Returns:
        True if the string is a valid semantic version, False otherwise

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    try:
        parse_version(version_string)
    except MalformedVersionError:
        return False
    return True
