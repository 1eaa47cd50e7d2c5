# SPDX-License-Identifier: MIT
"""JSON Schema definition for toolbox metadata (toolbox.cfg).

The record describes one toolbox: its identity, its semantic version, where its
source lives and which paths and dependencies an installer should handle.
"""

from __future__ import annotations

# Toolbox name: usable as an identifier in code
NAME_PATTERN = r"^[A-Za-z_][A-Za-z0-9_]*$"

# Git remote: https://host/path(.git), ssh://user@host/path, git://host/path
# or scp-like user@host:path
GIT_URL_PATTERN = (
    r"^(?:(?P<proto>git|ssh|https)://)?"
    r"(?:[\w.+\-:]+@)?"
    r"(?P<hostname>.+?)(?(proto)/|:)"
    r"(?P<path>.+?)(?:\.git)?$"
)

MAX_TITLE_LENGTH = 69

DEFAULT_BRANCH = "master"

# Fields that may be given as one string or a list of strings
LIST_FIELDS = ("paths", "deps", "exclude")

_string_or_list: dict = {
    "type": ["string", "array"],
    "items": {"type": "string"},
}

# JSON Schema for toolbox.cfg
TOOLBOX_SCHEMA: dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Toolbox Info",
    "description": "Metadata for a toolbox (toolbox.cfg)",
    "type": "object",
    "required": ["name", "title", "version", "url", "branch"],
    "properties": {
        "name": {
            "type": "string",
            "description": "Unique toolbox name, usable as an identifier",
            "pattern": NAME_PATTERN,
        },
        "title": {
            "type": "string",
            "description": "Human readable title",
            "maxLength": MAX_TITLE_LENGTH,
        },
        # Checked separately so that the semver rule can be reported
        "version": {
            "type": "string",
            "description": "Toolbox version following semantic versioning",
        },
        "url": {
            "type": "string",
            "description": "Git remote of the toolbox source, may be empty",
            "anyOf": [{"const": ""}, {"pattern": GIT_URL_PATTERN}],
        },
        "branch": {
            "type": "string",
            "description": "Source branch",
        },
        "paths": {**_string_or_list, "description": "Sub-paths to add on install"},
        "deps": {**_string_or_list, "description": "Toolboxes this one depends on"},
        "exclude": {**_string_or_list, "description": "Files or folders left out of installs"},
        "uuid": {
            "type": "string",
            "description": "Unique, immutable identifier of the toolbox",
            "minLength": 1,
        },
    },
    "additionalProperties": True,
}

# Default values for optional fields
TOOLBOX_DEFAULTS: dict = {
    "paths": [],
    "deps": [],
    "exclude": [],
}


def get_toolbox_schema() -> dict:
    """Return a copy of the toolbox JSON schema."""
    return TOOLBOX_SCHEMA.copy()
