# SPDX-License-Identifier: MIT
"""Work with toolbox.cfg records passed on standard input."""

from __future__ import annotations

import json

import click

from tbx_info import RecordValidationError, ToolboxInfo, validate_record
from tbx_version import MalformedVersionError

from ..main import Context, echo_error, echo_info, echo_success, pass_context, read_stdin


def _report_record_errors(error: RecordValidationError) -> None:
    echo_error(f"Errors ({len(error.errors)}):")
    for detail in error.errors:
        echo_error(f"  - [{detail.field}] {detail.message}")


@click.group()
def info() -> None:
    """Toolbox record commands (JSON on stdin, JSON on stdout)."""


@info.command()
@click.argument("target")
@pass_context
def bump(ctx: Context, target: str) -> None:
    """Bump the version of the toolbox record on standard input.

    TARGET is major, minor or patch, or an explicit version to set. The
    updated record is printed as JSON; every other field is preserved.

    \b
    Examples:
        tbx info bump minor < toolbox.cfg
        tbx info bump 2.0.0-rc.1 < toolbox.cfg
    """
    try:
        record = ToolboxInfo.from_json(read_stdin())
    except RecordValidationError as e:
        _report_record_errors(e)
        raise SystemExit(1)

    try:
        bumped = record.bump(target)
    except MalformedVersionError as e:
        echo_error(f"TARGET must be major, minor, patch or a version: {e}")
        raise SystemExit(1)

    if ctx.verbose:
        click.echo(f"{record.name}: {record.version} -> {bumped.version}", err=True)
    echo_info(bumped.to_json(indent=ctx.load_config().json_indent))


@info.command()
@pass_context
def validate(ctx: Context) -> None:
    """Validate the toolbox record on standard input."""
    try:
        data = json.loads(read_stdin())
    except json.JSONDecodeError as e:
        echo_error(f"Invalid JSON syntax: {e}")
        raise SystemExit(1)

    result = validate_record(data)
    if not result.valid:
        _report_record_errors(RecordValidationError(result.errors))
        raise SystemExit(1)

    if ctx.verbose:
        echo_info(f"{result.record['name']} {result.record['version']}")
    echo_success("Validation passed")
