# SPDX-License-Identifier: MIT
"""Sort versions."""

from __future__ import annotations

import json
import sys
from typing import Optional

import click

from semver_order import InvalidVersionError, sort_versions, to_dict

from ..config import OUTPUT_FORMATS
from ..main import Context, config_or_exit, echo_error, echo_info, pass_context


@click.command()
@click.argument("versions", nargs=-1)
@click.option(
    "--reverse/--no-reverse",
    "-r",
    default=None,
    help="Print newest first (defaults to the configured setting).",
)
@click.option(
    "--skip-invalid/--no-skip-invalid",
    default=None,
    help="Ignore inputs that are not versions instead of failing.",
)
@click.option(
    "--output",
    "-o",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (defaults to the configured format, else text).",
)
@pass_context
def sort(
    ctx: Context,
    versions: tuple[str, ...],
    reverse: Optional[bool],
    skip_invalid: Optional[bool],
    output: Optional[str],
) -> None:
    """Sort VERSIONS, or one version per line from stdin.

    Blank stdin lines are ignored. The reverse and skip-invalid flags
    override the configured settings.

    \b
    Examples:
        semver-order sort 1.10.0 1.2.0 1.2.0-rc.1
        git tag | semver-order sort --skip-invalid --reverse
    """
    config = config_or_exit(ctx)

    if versions:
        items = list(versions)
    else:
        items = [line.strip() for line in sys.stdin if line.strip()]

    try:
        ordered = sort_versions(
            items,
            reverse=config.reverse if reverse is None else reverse,
            skip_invalid=config.skip_invalid if skip_invalid is None else skip_invalid,
        )
    except InvalidVersionError as e:
        echo_error(e.message)
        sys.exit(1)

    if (output or config.output) == "json":
        echo_info(json.dumps([to_dict(v) for v in ordered], indent=2))
    else:
        for version in ordered:
            echo_info(str(version))
