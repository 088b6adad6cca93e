# SPDX-License-Identifier: MIT
"""Mapping and JSON serialization for SemanticVersion.

The serialized form is an object with the keys ``major``, ``minor``,
``patch``, ``preRelease`` and ``build``. Decoding checks types only; like
direct construction, it does not validate identifiers against the grammar.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from .errors import VersionDecodeError
from .semver import SemanticVersion

_INT_FIELDS = ("major", "minor", "patch")
_STR_FIELDS = {"preRelease": "pre_release", "build": "build"}


def to_dict(version: SemanticVersion) -> dict[str, Any]:
    """Return the serializable mapping for ``version``."""
    return {
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
        "preRelease": version.pre_release,
        "build": version.build,
    }


def from_dict(data: Mapping[str, Any]) -> SemanticVersion:
    """Build a SemanticVersion from a mapping produced by :func:`to_dict`.

    Raises:
        VersionDecodeError: If a key is missing or has the wrong type
    """
    if not isinstance(data, Mapping):
        raise VersionDecodeError(f"Expected an object, got {type(data).__name__}")

    fields: dict[str, Any] = {}
    for key in _INT_FIELDS:
        if key not in data:
            raise VersionDecodeError(f"Missing required field: {key}")
        value = data[key]
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, int):
            raise VersionDecodeError(f"Field '{key}' must be an integer, got {type(value).__name__}")
        if value < 0:
            raise VersionDecodeError(f"Field '{key}' must be non-negative, got {value}")
        fields[key] = value

    for key, attr in _STR_FIELDS.items():
        if key not in data:
            raise VersionDecodeError(f"Missing required field: {key}")
        value = data[key]
        if not isinstance(value, str):
            raise VersionDecodeError(f"Field '{key}' must be a string, got {type(value).__name__}")
        fields[attr] = value

    return SemanticVersion(**fields)


def to_json(version: SemanticVersion) -> str:
    """Serialize ``version`` as a JSON object."""
    return json.dumps(to_dict(version))


def from_json(text: str) -> SemanticVersion:
    """Deserialize a JSON object produced by :func:`to_json`.

    Raises:
        VersionDecodeError: If the text is not valid JSON or not a version object
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise VersionDecodeError(f"Invalid JSON: {e}") from e
    return from_dict(data)
