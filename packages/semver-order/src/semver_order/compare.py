# SPDX-License-Identifier: MIT
"""Version comparison and sorting helpers.

Ordering: major, minor and patch numerically, then any pre-release before
no pre-release, then pre-release and build metadata as plain strings.

Pre-release identifiers are NOT compared field by field as semver.org
describes: "1.0.0-alpha.10" sorts before "1.0.0-alpha.2".
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

from .errors import InvalidVersionError
from .log import get_logger
from .semver import SemanticVersion, parse_version, try_parse

logger = get_logger(__name__)

VersionLike = Union[str, SemanticVersion]


def _coerce(version: VersionLike) -> SemanticVersion:
    return version if isinstance(version, SemanticVersion) else parse_version(version)


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or SemanticVersion)
        version2: Second version (string or SemanticVersion)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
        >>> compare_versions("v1.0.0", "1.0.0")
        0
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    if v1 < v2:
        return -1
    if v1 > v2:
        return 1
    return 0


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _coerce(version).sort_key


def sort_versions(
    versions: Iterable[VersionLike],
    *,
    reverse: bool = False,
    skip_invalid: bool = False,
) -> list[SemanticVersion]:
    """Parse and sort versions.

    Args:
        versions: Version strings or SemanticVersion objects
        reverse: Sort newest first
        skip_invalid: Drop strings that are not versions instead of raising

    Returns:
        The parsed versions in order

    Raises:
        InvalidVersionError: If a string is invalid and skip_invalid is False
    """
    parsed: list[SemanticVersion] = []
    for item in versions:
        if isinstance(item, SemanticVersion):
            parsed.append(item)
            continue
        version = try_parse(item)
        if version is None:
            if not skip_invalid:
                raise InvalidVersionError(str(item))
            logger.warning("Skipping invalid version %r", item)
            continue
        parsed.append(version)

    return sorted(parsed, reverse=reverse)


def max_version(versions: Iterable[VersionLike]) -> Optional[SemanticVersion]:
    """Return the greatest version, or None if there are none.

    Raises:
        InvalidVersionError: If any string is invalid
    """
    return max((_coerce(v) for v in versions), default=None)
