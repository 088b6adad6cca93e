# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

TOOL_TABLE = "semver-order"
OUTPUT_FORMATS = ("text", "json")


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """Defaults for the semver-order command, read from ``[tool.semver-order]``.

    Attributes:
        project_dir: Directory the configuration was loaded from
        reverse: Sort newest first
        skip_invalid: Drop invalid versions when sorting instead of failing
        output: Output format, "text" or "json"
    """

    project_dir: Optional[Path] = None
    reverse: bool = False
    skip_invalid: bool = False
    output: str = "text"

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Raises:
            ConfigError: If the file is invalid
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax in {pyproject_path}: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Optional[Path] = None,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: If a setting has the wrong type or value
        """
        table = pyproject.get("tool", {}).get(TOOL_TABLE, {})
        if not isinstance(table, dict):
            raise ConfigError(f"[tool.{TOOL_TABLE}] must be a table")

        reverse = table.get("reverse", False)
        if not isinstance(reverse, bool):
            raise ConfigError(f"tool.{TOOL_TABLE}.reverse must be a boolean")

        skip_invalid = table.get("skip-invalid", False)
        if not isinstance(skip_invalid, bool):
            raise ConfigError(f"tool.{TOOL_TABLE}.skip-invalid must be a boolean")

        output = table.get("output", "text")
        if output not in OUTPUT_FORMATS:
            raise ConfigError(
                f"tool.{TOOL_TABLE}.output must be one of {', '.join(OUTPUT_FORMATS)}, got {output!r}"
            )

        return cls(
            project_dir=project_dir,
            reverse=reverse,
            skip_invalid=skip_invalid,
            output=output,
        )


def find_project_root(start_dir: Optional[str | Path] = None) -> Optional[Path]:
    """Find the nearest directory at or above ``start_dir`` with a pyproject.toml.

    Returns:
        The directory, or None if there is none
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    for candidate in (current, *current.parents):
        if (candidate / "pyproject.toml").exists():
            return candidate
    return None


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration.

    Args:
        project_dir: Project directory (defaults to finding the project root)

    Returns:
        CLIConfig instance; defaults when no pyproject.toml is found

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    if project_dir is None:
        project_dir = find_project_root()
        if project_dir is None:
            return CLIConfig()

    project_path = Path(project_dir)

    if (project_path / "pyproject.toml").exists():
        return CLIConfig.from_pyproject(project_path)

    return CLIConfig(project_dir=project_path)
