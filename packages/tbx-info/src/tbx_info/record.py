# SPDX-License-Identifier: MIT
"""Toolbox metadata record.

A ToolboxInfo embeds one Version and converts to and from the JSON document
stored as toolbox.cfg, with the version kept as its canonical string.
"""

from __future__ import annotations

import json
import uuid as uuid_module
from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Union

from tbx_version import BumpPart, Version, bump_version, parse_version

from .schema import DEFAULT_BRANCH
from .validator import RecordValidationError, ValidationErrorDetail, validate_record_strict

DEFAULT_VERSION = Version(0, 0, 1)


def _new_uuid() -> str:
    return str(uuid_module.uuid4())


def _as_tuple(value: Union[str, Iterable[str]]) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class ToolboxInfo:
    """Information about a toolbox.

    Attributes:
        name: Unique toolbox name, usable as an identifier
        title: Human readable title (fewer than 70 characters)
        version: The toolbox version
        url: Git remote of the source code, may be empty
        branch: Source branch
        paths: Sub-paths an installer should add
        deps: Other toolboxes this one relies on
        exclude: Files or folders left out of installs
        uuid: Unique identifier, generated once and kept across bumps
    """

    name: str
    title: str = ""
    version: Version = DEFAULT_VERSION
    url: str = ""
    branch: str = DEFAULT_BRANCH
    paths: tuple[str, ...] = ()
    deps: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()
    uuid: str = field(default_factory=_new_uuid)

    def __post_init__(self) -> None:
        if isinstance(self.version, str):
            object.__setattr__(self, "version", parse_version(self.version))
        for key in ("paths", "deps", "exclude"):
            object.__setattr__(self, key, _as_tuple(getattr(self, key)))
        if not isinstance(self.version, Version):
            raise RecordValidationError(
                [
                    ValidationErrorDetail(
                        field="version",
                        message="version must be a Version or a version string",
                        value=self.version,
                    )
                ]
            )
        validate_record_strict(self.to_dict())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ToolboxInfo":
        """Create a ToolboxInfo from decoded toolbox.cfg data.

        Unknown keys are ignored. A missing uuid is generated.

        Raises:
            RecordValidationError: If the data is invalid
        """
        record = validate_record_strict(data)
        kwargs: dict[str, Any] = {
            "name": record["name"],
            "title": record["title"],
            "version": parse_version(record["version"]),
            "url": record["url"],
            "branch": record["branch"],
            "paths": record["paths"],
            "deps": record["deps"],
            "exclude": record["exclude"],
        }
        if "uuid" in record:
            kwargs["uuid"] = record["uuid"]
        return cls(**kwargs)

    @classmethod
    def from_json(cls, text: str) -> "ToolboxInfo":
        """Create a ToolboxInfo from toolbox.cfg JSON text.

        Raises:
            RecordValidationError: If the text is not valid JSON or the data is invalid
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise RecordValidationError(
                [ValidationErrorDetail(field="<root>", message=f"Invalid JSON: {e}")]
            ) from e
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Return the record as JSON-ready data, version as its canonical string."""
        return {
            "name": self.name,
            "title": self.title,
            "version": str(self.version),
            "url": self.url,
            "branch": self.branch,
            "paths": list(self.paths),
            "deps": list(self.deps),
            "exclude": list(self.exclude),
            "uuid": self.uuid,
        }

    def to_json(self, indent: int | None = 2) -> str:
        """Return the record as toolbox.cfg JSON text."""
        return json.dumps(self.to_dict(), indent=indent)

    def bump(self, target: Union[str, BumpPart, Version]) -> "ToolboxInfo":
        """Return a copy with a new version.

        Args:
            target: "major", "minor" or "patch" to increment that part, or an
                explicit version (string or Version) to set

        Raises:
            MalformedVersionError: If target is neither a part nor a valid version
        """
        if isinstance(target, Version):
            version = target
        elif target in tuple(part.value for part in BumpPart):
            version = bump_version(self.version, target)
        else:
            version = parse_version(target)  # type: ignore[arg-type]
        return replace(self, version=version)
