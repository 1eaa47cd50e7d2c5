# SPDX-License-Identifier: MIT
"""CLI entry point for the tbx command."""

from __future__ import annotations

import sys
from typing import Optional

import click

from .config import CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config()
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def read_stdin() -> str:
    """Read all of standard input as text."""
    return sys.stdin.read()


@click.group()
@click.version_option(package_name="tbx-tools")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@pass_context
def cli(ctx: Context, verbose: bool) -> None:
    """Semantic version tool for toolboxes.

    Parse, compare, sort and bump semantic versions, and bump the version
    of a toolbox.cfg record passed on standard input.

    \b
    Examples:
        tbx parse 1.2.3-rc.1+build.5
        tbx compare 1.0.0-alpha 1.0.0
        tbx sort 1.10.0 1.9.0 1.0.0-rc.1
        tbx bump 1.2.3 minor
        git describe --tags | tbx find
        tbx info bump patch < toolbox.cfg
    """
    ctx.verbose = verbose
    try:
        config = ctx.load_config()
    except ConfigError as e:
        echo_error(str(e))
        raise SystemExit(1)
    if not config.color:
        click.get_current_context().color = False


# Import and register commands
from .commands import version, info

cli.add_command(version.parse)
cli.add_command(version.check)
cli.add_command(version.compare)
cli.add_command(version.sort)
cli.add_command(version.bump)
cli.add_command(version.find)
cli.add_command(info.info)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
