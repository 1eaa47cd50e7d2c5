# SPDX-License-Identifier: MIT
"""Parse, check, compare, sort, bump and find semantic versions."""

from __future__ import annotations

import json
from typing import Optional

import click

from tbx_info import VersionNotFoundError, find_version
from tbx_version import (
    BumpPart,
    MalformedVersionError,
    Ordering,
    Version,
    bump_version,
    compare_versions,
    parse_version,
    sort_versions,
)

from ..main import (
    Context,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    pass_context,
    read_stdin,
)

_SYMBOLS = {
    Ordering.LESS: "<",
    Ordering.EQUAL: "=",
    Ordering.GREATER: ">",
}


def _parse_or_exit(text: str) -> Version:
    """Parse a version, or report the error and exit with status 1."""
    try:
        return parse_version(text)
    except MalformedVersionError as e:
        echo_error(str(e))
        raise SystemExit(1)


@click.command()
@click.argument("version")
@click.option("--json", "as_json", is_flag=True, help="Print the components as JSON.")
@pass_context
def parse(ctx: Context, version: str, as_json: bool) -> None:
    """Parse VERSION and print its components.

    \b
    Examples:
        tbx parse 1.2.3-rc.1+build.5
        tbx parse --json 2.0.0
    """
    v = _parse_or_exit(version)

    if as_json:
        data = {
            "version": str(v),
            "major": v.major,
            "minor": v.minor,
            "patch": v.patch,
            "prerelease": list(v.prerelease),
            "build": list(v.build),
        }
        echo_info(json.dumps(data, indent=ctx.load_config().json_indent))
        return

    echo_info(f"major:      {v.major}")
    echo_info(f"minor:      {v.minor}")
    echo_info(f"patch:      {v.patch}")
    echo_info(f"prerelease: {v.prerelease_string or ''}")
    echo_info(f"build:      {v.build_string or ''}")


@click.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def check(ctx: Context, versions: tuple[str, ...]) -> None:
    """Check that every VERSION is a valid semantic version.

    Exits with status 1 if any of them is not.
    """
    failed = 0
    for text in versions:
        try:
            parse_version(text)
        except MalformedVersionError as e:
            failed += 1
            echo_error(f"{text!r}: {e.reason}")
        else:
            echo_success(f"{text}: valid")

    if ctx.verbose:
        echo_info(f"{len(versions) - failed}/{len(versions)} valid")
    if failed:
        raise SystemExit(1)


@click.command()
@click.argument("first")
@click.argument("second")
@pass_context
def compare(ctx: Context, first: str, second: str) -> None:
    """Compare two versions and print <, = or >.

    Build metadata is ignored; a note is printed when the two versions
    differ only in build metadata.
    """
    a = _parse_or_exit(first)
    b = _parse_or_exit(second)
    result = compare_versions(a, b)
    echo_info(_SYMBOLS[result])
    if result is Ordering.EQUAL and a != b:
        echo_warning(f"{a} and {b} differ only in build metadata")


@click.command()
@click.argument("versions", nargs=-1)
@click.option("--reverse", "-r", is_flag=True, help="Sort from highest to lowest.")
@pass_context
def sort(ctx: Context, versions: tuple[str, ...], reverse: bool) -> None:
    """Sort versions by precedence, one per line.

    Reads one version per line from standard input when no VERSIONS are
    given. Versions of equal precedence keep their input order.
    """
    items = list(versions)
    if not items:
        items = [line.strip() for line in read_stdin().splitlines() if line.strip()]

    parsed = [_parse_or_exit(text) for text in items]
    for v in sort_versions(parsed, reverse=reverse):
        echo_info(str(v))

    if ctx.verbose:
        echo_info(f"Sorted {len(parsed)} version(s)")


@click.command()
@click.argument("version")
@click.argument(
    "part",
    required=False,
    type=click.Choice([p.value for p in BumpPart]),
)
@pass_context
def bump(ctx: Context, version: str, part: Optional[str]) -> None:
    """Print VERSION with PART incremented.

    PART defaults to TBX_DEFAULT_BUMP, or patch. Pre-release and build
    metadata are dropped.
    """
    v = _parse_or_exit(version)
    chosen = part or ctx.load_config().default_bump
    if ctx.verbose:
        echo_info(f"Bumping {chosen} of {v}")
    echo_info(str(bump_version(v, chosen)))


@click.command()
@pass_context
def find(ctx: Context) -> None:
    """Print the first semantic version found on standard input."""
    text = read_stdin()
    try:
        v = find_version(text)
    except VersionNotFoundError as e:
        echo_error(str(e))
        raise SystemExit(1)
    echo_info(str(v))
