# SPDX-License-Identifier: MIT
"""Unit tests for version bumps."""

import pytest

from tbx_version import (
    BumpPart,
    MalformedVersionError,
    bump_version,
    next_major,
    next_minor,
    next_patch,
    parse_version,
)


class TestNextVersions:
    """Tests for next_major, next_minor and next_patch."""

    def test_next_major_clears_everything(self):
        """Test that a major bump resets minor, patch and suffixes."""
        assert str(next_major(parse_version("1.2.3-beta+xyz"))) == "2.0.0"

    def test_next_minor(self):
        """Test that a minor bump resets patch and suffixes."""
        assert str(next_minor("1.2.3-beta+xyz")) == "1.3.0"

    def test_next_patch(self):
        """Test that a patch bump drops suffixes."""
        assert str(next_patch("1.2.3-beta+xyz")) == "1.2.4"

    def test_prerelease_still_bumps(self):
        """Test that a pre-release is not promoted in place."""
        assert str(next_patch("1.0.0-rc.1")) == "1.0.1"

    def test_from_zero(self):
        """Test bumping from 0.0.0."""
        assert str(next_major("0.0.0")) == "1.0.0"
        assert str(next_minor("0.0.0")) == "0.1.0"
        assert str(next_patch("0.0.0")) == "0.0.1"

    def test_input_untouched(self):
        """Test that bumps return new values."""
        v = parse_version("1.2.3-alpha")
        bumped = v.next_minor()
        assert str(v) == "1.2.3-alpha"
        assert bumped is not v
        assert bumped > v

    def test_method_forms(self):
        """Test the Version method forms."""
        v = parse_version("4.5.6+build")
        assert str(v.next_major()) == "5.0.0"
        assert str(v.next_minor()) == "4.6.0"
        assert str(v.next_patch()) == "4.5.7"

    def test_invalid_string(self):
        """Test bumping an invalid version string."""
        with pytest.raises(MalformedVersionError):
            next_major("1.2")


class TestBumpVersion:
    """Tests for bump_version dispatch."""

    @pytest.mark.parametrize(
        "part,expected",
        [
            ("major", "2.0.0"),
            ("minor", "1.1.0"),
            ("patch", "1.0.1"),
            (BumpPart.MAJOR, "2.0.0"),
            (BumpPart.PATCH, "1.0.1"),
        ],
    )
    def test_parts(self, part, expected):
        """Test each part from 1.0.0."""
        assert str(bump_version("1.0.0", part)) == expected

    def test_unknown_part(self):
        """Test that an unknown part raises ValueError."""
        with pytest.raises(ValueError, match="Unknown version part"):
            bump_version("1.0.0", "build")
