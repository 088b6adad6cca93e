# SPDX-License-Identifier: MIT
"""CLI entry point for the semver-order command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from semver_order import SemverError
from semver_order.log import setup_logging

from .config import CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def config_or_exit(ctx: Context) -> CLIConfig:
    """Load configuration, exiting with status 1 if it is invalid."""
    try:
        return ctx.load_config()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)


@click.group()
@click.version_option(package_name="semver-order")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read configuration from this directory's pyproject.toml.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Parse, compare and sort semantic versions.

    \b
    Examples:
        semver-order parse v1.2.3-rc.1
        semver-order compare 1.0.0-alpha 1.0.0
        semver-order sort 1.10.0 1.2.0 1.2.0-rc.1
        git tag | semver-order sort --skip-invalid
        semver-order classify 2.0.0
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    setup_logging(verbose=verbose)


# Import and register commands
from .commands import classify, compare, parse, sort

cli.add_command(parse.parse)
cli.add_command(compare.compare)
cli.add_command(sort.sort)
cli.add_command(classify.classify)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except (ConfigError, SemverError) as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
