# SPDX-License-Identifier: MIT
"""Exceptions raised by semver_order."""

from __future__ import annotations


class SemverError(Exception):
    """Base class for all semver_order errors."""

    pass


class InvalidVersionError(SemverError):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version!r}"
        super().__init__(self.message)


class VersionDecodeError(SemverError):
    """Raised when a serialized version cannot be decoded."""

    pass
