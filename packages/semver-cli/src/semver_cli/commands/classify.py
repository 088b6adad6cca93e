# SPDX-License-Identifier: MIT
"""Show which kind of release a version is."""

from __future__ import annotations

import sys

import click

from semver_order import InvalidVersionError, parse_version

from ..main import echo_error, echo_info

PREDICATES = (
    "is_stable",
    "is_pre_release",
    "is_major_release",
    "is_minor_release",
    "is_patch_release",
    "is_initial_release",
)


@click.command()
@click.argument("version")
def classify(version: str) -> None:
    """Print each release predicate for VERSION as "name: true|false"."""
    try:
        parsed = parse_version(version)
    except InvalidVersionError as e:
        echo_error(e.message)
        sys.exit(1)

    for name in PREDICATES:
        echo_info(f"{name}: {str(getattr(parsed, name)).lower()}")
