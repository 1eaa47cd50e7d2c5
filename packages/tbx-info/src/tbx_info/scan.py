# SPDX-License-Identifier: MIT
"""Locate semantic versions inside free-form text.

Typical inputs are changelog headings, ``Contents.m`` banners or the output of
``git describe``; the first line that holds a valid version wins.
"""

from __future__ import annotations

import re
from typing import Iterator

from tbx_version import MalformedVersionError, Version, parse_version

# Candidate tokens; parse_version() has the final word on validity.
# A "v" prefix is allowed, a preceding digit or dot is not.
VERSION_CANDIDATE = re.compile(
    r"(?<![\d.])"
    r"\d+\.\d+\.\d+"
    r"(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
    r"(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
    r"(?![0-9A-Za-z_+-]|\.[0-9A-Za-z_-])",
    re.ASCII,
)


class VersionNotFoundError(LookupError):
    """Raised when no valid semantic version appears in the text."""

    def __init__(self, text: str):
        self.text = text
        preview = text if len(text) <= 40 else text[:37] + "..."
        super().__init__(f"No semantic version found in {preview!r}")


def _line_versions(line: str) -> Iterator[Version]:
    for match in VERSION_CANDIDATE.finditer(line):
        try:
            yield parse_version(match.group(0))
        except MalformedVersionError:
            continue


def iter_versions(text: str) -> Iterator[Version]:
    """Yield every valid version in ``text``, line by line, left to right.

    Examples:
        >>> [str(v) for v in iter_versions("from 1.0.0 to v1.1.0-rc.1")]
        ['1.0.0', '1.1.0-rc.1']
    """
    for line in text.splitlines():
        yield from _line_versions(line)


def find_version(text: str) -> Version:
    """Return the first valid version found in ``text``.

    Lines without a valid version are skipped.

    Args:
        text: Arbitrary text, e.g. the contents of a changelog

    Returns:
        The first Version found

    Raises:
        VersionNotFoundError: If no line contains a valid version
        TypeError: If text is not a string

    Examples:
        >>> str(find_version("Release notes\\nrelease v1.2.3-rc.1 (stable)"))
        '1.2.3-rc.1'
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected text as str, got {type(text).__name__}")
    for version in iter_versions(text):
        return version
    raise VersionNotFoundError(text)
