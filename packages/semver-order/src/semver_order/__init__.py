# SPDX-License-Identifier: MIT
"""Semantic version parsing, formatting and ordering.

Example:
    >>> from semver_order import try_parse, compare_versions
    >>>
    >>> version = try_parse("v1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.pre_release
    'alpha.1'
    >>> str(version)
    '1.2.3-alpha.1+build.456'
    >>>
    >>> try_parse("1.2") is None
    True
    >>>
    >>> compare_versions("1.0.0-alpha", "1.0.0")
    -1
"""

__version__ = "0.1.0"

from .errors import (
    SemverError,
    InvalidVersionError,
    VersionDecodeError,
)
from .semver import (
    SemanticVersion,
    try_parse,
    parse_version,
    is_valid_semver,
    SEMVER_PATTERN,
    MAX_COMPONENT,
)
from .compare import (
    compare_versions,
    version_key,
    sort_versions,
    max_version,
)
from .codec import (
    to_dict,
    from_dict,
    to_json,
    from_json,
)

__all__ = [
    # Errors
    "SemverError",
    "InvalidVersionError",
    "VersionDecodeError",
    # Version parsing
    "SemanticVersion",
    "try_parse",
    "parse_version",
    "is_valid_semver",
    "SEMVER_PATTERN",
    "MAX_COMPONENT",
    # Version comparison
    "compare_versions",
    "version_key",
    "sort_versions",
    "max_version",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
]
