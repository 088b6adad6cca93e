# SPDX-License-Identifier: MIT
"""Parse a version and print its canonical form."""

from __future__ import annotations

import json
import sys
from typing import Optional

import click

from semver_order import InvalidVersionError, parse_version, to_dict

from ..config import OUTPUT_FORMATS
from ..main import Context, config_or_exit, echo_error, echo_info, pass_context


@click.command()
@click.argument("version")
@click.option(
    "--output",
    "-o",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (defaults to the configured format, else text).",
)
@pass_context
def parse(ctx: Context, version: str, output: Optional[str]) -> None:
    """Parse VERSION and print it in canonical form.

    A leading "v" is accepted and dropped.

    \b
    Examples:
        semver-order parse v1.2.3
        semver-order parse 1.0.0-rc.1+build.7 -o json
    """
    config = config_or_exit(ctx)
    output = output or config.output

    try:
        parsed = parse_version(version)
    except InvalidVersionError as e:
        echo_error(e.message)
        sys.exit(1)

    if output == "json":
        echo_info(json.dumps(to_dict(parsed), indent=2))
    else:
        echo_info(str(parsed))
