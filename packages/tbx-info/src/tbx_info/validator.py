# SPDX-License-Identifier: MIT
"""Toolbox record validation.

This module validates toolbox.cfg data against the schema, checks the version
with the semantic version parser, and applies default values, with structured
error reporting.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from jsonschema import Draft202012Validator, ValidationError

from tbx_version import MalformedVersionError, parse_version

from .schema import LIST_FIELDS, TOOLBOX_DEFAULTS, TOOLBOX_SCHEMA


class RecordError(Exception):
    """Base exception for toolbox record errors."""

    pass


class RecordValidationError(RecordError):
    """Raised when toolbox record validation fails.

    Attributes:
        errors: List of validation errors with field paths and messages
    """

    def __init__(self, errors: list[ValidationErrorDetail]):
        self.errors = errors
        message = f"Toolbox record validation failed with {len(errors)} error(s)"
        if errors:
            message += f": {errors[0].field}: {errors[0].message}"
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class ValidationErrorDetail:
    """Details about a single validation error.

    Attributes:
        field: JSON path to the invalid field (e.g., "version" or "deps[0]")
        message: Human-readable error message
        value: The invalid value that caused the error (if available)
    """

    field: str
    message: str
    value: Any = None


@dataclass
class ValidationResult:
    """Result of toolbox record validation.

    Attributes:
        valid: Whether the record is valid
        errors: List of validation errors (empty if valid)
        record: The validated record with defaults applied (None if invalid)
    """

    valid: bool
    errors: list[ValidationErrorDetail] = field(default_factory=list)
    record: dict | None = None


_validator = Draft202012Validator(TOOLBOX_SCHEMA)


def _json_path_from_error(error: ValidationError) -> str:
    """Convert a jsonschema error path to a readable field path."""
    if not error.absolute_path:
        return "<root>"
    parts = []
    for part in error.absolute_path:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        elif parts:
            parts.append(f".{part}")
        else:
            parts.append(str(part))
    return "".join(parts)


def _format_error_message(error: ValidationError) -> str:
    """Format a jsonschema error into a human-readable message."""
    if error.validator == "type":
        expected = error.validator_value
        if isinstance(expected, list):
            expected = " or ".join(expected)
        return f"Expected {expected}, got {type(error.instance).__name__}"

    if error.validator == "pattern":
        if error.absolute_path and error.absolute_path[-1] == "name":
            return "Name must start with a letter or underscore and contain only letters, digits and underscores"
        return "Value does not match required pattern"

    if error.validator == "anyOf" and error.absolute_path and error.absolute_path[-1] == "url":
        return "URL must be empty or a git remote (https://, ssh://, git:// or user@host:path)"

    if error.validator == "maxLength":
        return f"String must be at most {error.validator_value} character(s)"

    if error.validator == "minLength":
        return f"String must be at least {error.validator_value} character(s)"

    return error.message


def _check_version(record: dict) -> list[ValidationErrorDetail]:
    value = record.get("version")
    if not isinstance(value, str):
        # Missing or mistyped versions are reported by the schema
        return []
    try:
        parse_version(value)
    except MalformedVersionError as e:
        return [ValidationErrorDetail(field="version", message=str(e.reason), value=value)]
    return []


def validate_record(record: dict) -> ValidationResult:
    """Validate toolbox record data against the schema.

    Single strings in ``paths``, ``deps`` and ``exclude`` are promoted to
    one-item lists, and defaults are applied for missing optional fields.

    Args:
        record: A dictionary containing the toolbox data

    Returns:
        ValidationResult with validation status, errors, and processed record

    Example:
        >>> result = validate_record(
        ...     {"name": "emd", "title": "EMD", "version": "1.0.0", "url": "", "branch": "master"}
        ... )
        >>> result.valid
        True
        >>> result.record["deps"]
        []
    """
    if not isinstance(record, dict):
        return ValidationResult(
            valid=False,
            errors=[
                ValidationErrorDetail(
                    field="<root>",
                    message=f"Toolbox record must be a dictionary, got {type(record).__name__}",
                    value=record,
                )
            ],
        )

    errors: list[ValidationErrorDetail] = [
        ValidationErrorDetail(field=name, message=f"Missing required field: {name}")
        for name in TOOLBOX_SCHEMA["required"]
        if name not in record
    ]
    for error in _validator.iter_errors(record):
        if error.validator == "required":
            continue
        errors.append(
            ValidationErrorDetail(
                field=_json_path_from_error(error),
                message=_format_error_message(error),
                value=error.instance if error.absolute_path else None,
            )
        )
    errors.extend(_check_version(record))

    if errors:
        return ValidationResult(valid=False, errors=errors)

    result_record = record.copy()
    for key in LIST_FIELDS:
        if isinstance(result_record.get(key), str):
            result_record[key] = [result_record[key]]
    for key, default_value in TOOLBOX_DEFAULTS.items():
        if key not in result_record:
            result_record[key] = default_value.copy()

    return ValidationResult(valid=True, record=result_record)


def validate_record_strict(record: dict) -> dict:
    """Validate toolbox record data and raise an exception if invalid.

    Args:
        record: A dictionary containing the toolbox data

    Returns:
        The validated record with default values applied

    Raises:
        RecordValidationError: If the record is invalid
    """
    result = validate_record(record)
    if not result.valid:
        raise RecordValidationError(result.errors)
    return result.record  # type: ignore[return-value]
