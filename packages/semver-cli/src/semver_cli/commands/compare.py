# SPDX-License-Identifier: MIT
"""Compare two versions."""

from __future__ import annotations

import sys

import click

from semver_order import InvalidVersionError, compare_versions

from ..main import echo_error, echo_info

_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


@click.command()
@click.argument("first")
@click.argument("second")
def compare(first: str, second: str) -> None:
    """Print "<", "=" or ">" for FIRST compared to SECOND.

    Stable versions sort after their pre-releases, so
    "1.0.0-alpha" < "1.0.0".
    """
    try:
        result = compare_versions(first, second)
    except InvalidVersionError as e:
        echo_error(e.message)
        sys.exit(1)

    echo_info(_SYMBOLS[result])
