# SPDX-License-Identifier: MIT
"""Tests for the ToolboxInfo record."""

from __future__ import annotations

import json

import pytest

from tbx_info import DEFAULT_VERSION, RecordValidationError, ToolboxInfo
from tbx_version import MalformedVersionError, Version, parse_version


@pytest.fixture
def toolbox_data() -> dict:
    """Decoded toolbox.cfg content."""
    return {
        "name": "emd",
        "title": "Empirical Mode Decomposition",
        "version": "1.0.0",
        "url": "https://github.com/example/emd.git",
        "branch": "master",
        "paths": ["util", "emd-beta"],
        "deps": "signal",
        "uuid": "0d8a2f0e-8a5d-4f0c-9d6b-6f4c1a1b2c3d",
    }


class TestToolboxInfoConstruction:
    """Tests for building records in code."""

    def test_defaults(self):
        """Only the name is needed; uuid is generated."""
        info = ToolboxInfo(name="emd")
        assert info.version == DEFAULT_VERSION
        assert str(info.version) == "0.0.1"
        assert info.branch == "master"
        assert info.paths == ()
        assert len(info.uuid) == 36

    def test_uuid_unique(self):
        """Each new record gets its own uuid."""
        assert ToolboxInfo(name="a").uuid != ToolboxInfo(name="a").uuid

    def test_version_string_parsed(self):
        """A version string is parsed into a Version."""
        info = ToolboxInfo(name="emd", version="2.1.0-beta")  # type: ignore[arg-type]
        assert isinstance(info.version, Version)
        assert info.version.prerelease == ("beta",)

    def test_invalid_version_string(self):
        """An invalid version string is rejected."""
        with pytest.raises(MalformedVersionError):
            ToolboxInfo(name="emd", version="1.0")  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "kwargs,field",
        [
            ({"name": "1 bad name"}, "name"),
            ({"name": "emd", "title": "x" * 70}, "title"),
            ({"name": "emd", "url": "not a url"}, "url"),
            ({"name": "emd", "version": 1}, "version"),
        ],
    )
    def test_invalid_fields_rejected(self, kwargs, field):
        """Records built in code follow the same rules as decoded ones."""
        with pytest.raises(RecordValidationError) as exc_info:
            ToolboxInfo(**kwargs)
        assert [e.field for e in exc_info.value.errors] == [field]

    def test_several_invalid_fields_reported(self):
        """Every invalid field is reported at once."""
        with pytest.raises(RecordValidationError) as exc_info:
            ToolboxInfo(name="1 bad name", title="x" * 200, url="not a url")
        assert {e.field for e in exc_info.value.errors} == {"name", "title", "url"}

    def test_valid_record_round_trips(self):
        """A record built in code is accepted back from its own JSON."""
        info = ToolboxInfo(name="emd", title="t" * 69, url="git@github.com:example/emd.git")
        assert ToolboxInfo.from_json(info.to_json()) == info

    def test_single_string_promoted(self):
        """A single path string becomes a one-item tuple."""
        info = ToolboxInfo(name="emd", paths="util")  # type: ignore[arg-type]
        assert info.paths == ("util",)

    def test_immutable(self):
        """Records are frozen."""
        info = ToolboxInfo(name="emd")
        with pytest.raises(AttributeError):
            info.uuid = "other"  # type: ignore[misc]


class TestToolboxInfoSerialization:
    """Tests for dict and JSON conversion."""

    def test_from_dict(self, toolbox_data: dict):
        """Decoded data becomes a record."""
        info = ToolboxInfo.from_dict(toolbox_data)
        assert info.name == "emd"
        assert info.version == parse_version("1.0.0")
        assert info.paths == ("util", "emd-beta")
        assert info.deps == ("signal",)
        assert info.exclude == ()
        assert info.uuid == toolbox_data["uuid"]

    def test_missing_uuid_generated(self, toolbox_data: dict):
        """A record without uuid gets one."""
        del toolbox_data["uuid"]
        info = ToolboxInfo.from_dict(toolbox_data)
        assert info.uuid

    def test_unknown_keys_ignored(self, toolbox_data: dict):
        """Unknown keys do not fail and are dropped."""
        toolbox_data["maintainer"] = "someone"
        info = ToolboxInfo.from_dict(toolbox_data)
        assert "maintainer" not in info.to_dict()

    def test_to_dict_version_is_canonical_string(self, toolbox_data: dict):
        """The version is stored as its canonical string."""
        toolbox_data["version"] = "1.0.0-rc.1+build.7"
        data = ToolboxInfo.from_dict(toolbox_data).to_dict()
        assert data["version"] == "1.0.0-rc.1+build.7"
        assert data["deps"] == ["signal"]

    def test_json_round_trip(self, toolbox_data: dict):
        """to_json then from_json gives an equal record."""
        info = ToolboxInfo.from_dict(toolbox_data)
        text = info.to_json()
        assert json.loads(text)["version"] == "1.0.0"
        assert ToolboxInfo.from_json(text) == info

    def test_from_json_invalid_json(self):
        """Broken JSON is reported as a validation error."""
        with pytest.raises(RecordValidationError) as exc_info:
            ToolboxInfo.from_json("{not json")
        assert exc_info.value.errors[0].field == "<root>"
        assert "Invalid JSON" in exc_info.value.errors[0].message

    def test_from_dict_invalid(self, toolbox_data: dict):
        """Invalid data raises RecordValidationError."""
        toolbox_data["version"] = "1.02.0"
        with pytest.raises(RecordValidationError) as exc_info:
            ToolboxInfo.from_dict(toolbox_data)
        assert exc_info.value.errors[0].field == "version"
        assert "round-trip" in str(exc_info.value)


class TestToolboxInfoBump:
    """Tests for version bumps on records."""

    @pytest.mark.parametrize(
        "target,expected",
        [
            ("major", "2.0.0"),
            ("minor", "1.1.0"),
            ("patch", "1.0.1"),
            ("0.0.1", "0.0.1"),
            ("3.0.0-alpha+x", "3.0.0-alpha+x"),
        ],
    )
    def test_bump(self, toolbox_data: dict, target: str, expected: str):
        """Parts increment, explicit versions replace."""
        info = ToolboxInfo.from_dict(toolbox_data)
        assert str(info.bump(target).version) == expected

    def test_bump_with_version_object(self, toolbox_data: dict):
        """A Version can be set directly."""
        info = ToolboxInfo.from_dict(toolbox_data)
        assert info.bump(Version(5, 0, 0)).version == Version(5, 0, 0)

    def test_bump_preserves_other_fields(self, toolbox_data: dict):
        """Everything but the version is kept, uuid included."""
        info = ToolboxInfo.from_dict(toolbox_data)
        bumped = info.bump("major")
        assert bumped.uuid == info.uuid
        assert bumped.paths == info.paths
        assert str(info.version) == "1.0.0"

    def test_bump_invalid_target(self, toolbox_data: dict):
        """Neither a part nor a version is rejected."""
        info = ToolboxInfo.from_dict(toolbox_data)
        with pytest.raises(MalformedVersionError):
            info.bump("build")
