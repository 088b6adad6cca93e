# SPDX-License-Identifier: MIT
"""Semantic version value type and parser.

Accepts MAJOR.MINOR.PATCH with optional pre-release and build metadata, plus
a leading ``v`` as used by most tagging conventions:
- Pre-release: -alpha, -alpha.1, -beta.2, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +20240101, +001
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional

from .errors import InvalidVersionError
from .log import get_logger

logger = get_logger(__name__)

# Semantic versioning pattern (SemVer 2.0.0), extended with an optional "v".
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
# Digits are spelled [0-9] because \d also matches non-ASCII digits.
SEMVER_PATTERN = re.compile(
    r"v?"
    r"(?P<major>0|[1-9][0-9]*)"
    r"\.(?P<minor>0|[1-9][0-9]*)"
    r"\.(?P<patch>0|[1-9][0-9]*)"
    r"(?:-(?P<prerelease>(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)

# Largest value accepted for major, minor and patch (signed 64-bit).
MAX_COMPONENT = 2**63 - 1


@dataclass(frozen=True, slots=True)
class SemanticVersion:
    """A semantic version.

    Fields set through the constructor are not validated; only parsing
    guarantees that ``pre_release`` and ``build`` follow the grammar.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        pre_release: Pre-release identifiers (e.g. "alpha.1"), "" for none
        build: Build metadata (e.g. "build.123"), "" for none
    """

    major: int
    minor: int
    patch: int
    pre_release: str = ""
    build: str = ""

    @classmethod
    def try_parse(cls, text: Any) -> Optional["SemanticVersion"]:
        """Parse ``text``, returning None if it is not a semantic version."""
        return try_parse(text)

    @classmethod
    def parse(cls, text: str) -> "SemanticVersion":
        """Parse ``text``, raising InvalidVersionError if it is not a semantic version."""
        return parse_version(text)

    def __str__(self) -> str:
        """Return the canonical string representation (never prefixed with "v")."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            version += f"-{self.pre_release}"
        if self.build:
            version += f"+{self.build}"
        return version

    @property
    def sort_key(self) -> tuple:
        """Tuple that orders versions the way the comparison operators do.

        A version without pre-release sorts after every pre-release of the
        same triple, build-only versions included, so "1.0.0+b" sorts after
        "1.0.0-alpha" even though it is not stable. Keying this tier on
        is_stable instead would make the order cyclic:
        1.0.0+b < 1.0.0-alpha < 1.0.0 < 1.0.0+b. Pre-release and build
        compare as plain strings.
        """
        return (
            self.major,
            self.minor,
            self.patch,
            not self.pre_release,
            self.pre_release,
            self.build,
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.sort_key >= other.sort_key

    @property
    def base_version(self) -> str:
        """Return the version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def is_stable(self) -> bool:
        """True if there is neither pre-release nor build metadata."""
        return not self.pre_release and not self.build

    @property
    def is_pre_release(self) -> bool:
        """True for anything that is not stable, build-only versions included."""
        return not self.is_stable

    @property
    def is_major_release(self) -> bool:
        """True for stable X.0.0 with X > 0."""
        return self.is_stable and self.major > 0 and self.minor == 0 and self.patch == 0

    @property
    def is_minor_release(self) -> bool:
        """True for stable X.Y.0 with Y > 0."""
        return self.is_stable and self.minor > 0 and self.patch == 0

    @property
    def is_patch_release(self) -> bool:
        """True for stable X.Y.Z with Z > 0."""
        return self.is_stable and self.patch > 0

    @property
    def is_initial_release(self) -> bool:
        """True only for exactly 0.0.0."""
        return self == SemanticVersion(0, 0, 0)


def try_parse(text: Any) -> Optional[SemanticVersion]:
    """Parse a semantic version string.

    The whole string must match; surrounding whitespace is not stripped.

    Args:
        text: A string of the form [v]MAJOR.MINOR.PATCH[-prerelease][+build]

    Returns:
        The parsed SemanticVersion, or None if ``text`` is not a valid
        version (including non-string input and components larger than
        MAX_COMPONENT).

    Examples:
        >>> try_parse("v1.2.3-rc.1+build.5")
        SemanticVersion(major=1, minor=2, patch=3, pre_release='rc.1', build='build.5')
        >>> try_parse("1.2") is None
        True
    """
    if not isinstance(text, str):
        logger.debug("Rejected non-string version input of type %s", type(text).__name__)
        return None

    match = SEMVER_PATTERN.fullmatch(text)
    if match is None:
        logger.debug("Rejected malformed version %r", text)
        return None

    major = int(match.group("major"))
    minor = int(match.group("minor"))
    patch = int(match.group("patch"))
    if max(major, minor, patch) > MAX_COMPONENT:
        logger.debug("Rejected version %r: component exceeds %d", text, MAX_COMPONENT)
        return None

    return SemanticVersion(
        major=major,
        minor=minor,
        patch=patch,
        pre_release=match.group("prerelease") or "",
        build=match.group("buildmetadata") or "",
    )


def parse_version(version_string: str) -> SemanticVersion:
    """Parse a semantic version string into a SemanticVersion.

    Args:
        version_string: A string following semantic versioning format

    Returns:
        The parsed SemanticVersion

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("2.0.0-rc.1+build.456")
        SemanticVersion(major=2, minor=0, patch=0, pre_release='rc.1', build='build.456')
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )
    if not version_string:
        raise InvalidVersionError(version_string, "Version string cannot be empty")

    version = try_parse(version_string)
    if version is None:
        raise InvalidVersionError(version_string)
    return version


def is_valid_semver(version_string: Any) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
    """
    return try_parse(version_string) is not None
