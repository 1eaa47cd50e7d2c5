# SPDX-License-Identifier: MIT
"""Semantic version parsing and comparison for toolbox packages.

This package provides an immutable semantic version value following
Semantic Versioning 2.0.0 rules: parsing with strict round-trip validation,
canonical rendering, precedence ordering and version bumps.

Example:
    >>> from tbx_version import parse_version, compare_versions, next_major
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    ('alpha', '1')
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    <Ordering.LESS: -1>
    >>>
    >>> str(next_major(version))
    '2.0.0'
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    parse_version,
    from_parts,
    format_version,
    is_valid_semver,
    MalformedVersionError,
    Reason,
    SEMVER_PATTERN,
)
from .compare import (
    Ordering,
    compare_versions,
    version_key,
    sort_versions,
    max_version,
    min_version,
)
from .bump import (
    BumpPart,
    bump_version,
    next_major,
    next_minor,
    next_patch,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "from_parts",
    "format_version",
    "is_valid_semver",
    "MalformedVersionError",
    "Reason",
    "SEMVER_PATTERN",
    # Version comparison
    "Ordering",
    "compare_versions",
    "version_key",
    "sort_versions",
    "max_version",
    "min_version",
    # Version bumps
    "BumpPart",
    "bump_version",
    "next_major",
    "next_minor",
    "next_patch",
]
