# SPDX-License-Identifier: MIT
"""Integration test: pick releases out of a repository's tag list.

This test runs the library and the semver-order entry point against the
tags of a sample repository:
- Non-version tags are skipped
- Tags sort with stable releases after their pre-releases
- The configured defaults in the sample pyproject.toml are honoured
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from semver_cli.main import main
from semver_order import max_version, sort_versions, try_parse


@pytest.fixture
def sample_repo_dir() -> Path:
    """Get the sample repository directory."""
    return Path(__file__).parent / "sample_repo"


@pytest.fixture
def tags(sample_repo_dir: Path) -> list[str]:
    """Read the sample repository's tags."""
    return (sample_repo_dir / "tags.txt").read_text().split()


class TestReleaseSelection:
    """Library-level selection of releases from tags."""

    def test_sorted_tags(self, tags: list[str]):
        """Test the full order of valid tags."""
        ordered = sort_versions(tags, skip_invalid=True)

        assert [str(v) for v in ordered] == [
            "0.1.0",
            "0.2.0-beta.1",
            "0.2.0",
            "1.0.0-alpha",
            "1.0.0-alpha.2",
            "1.0.0-rc.1",
            "1.0.0",
            "1.0.1+hotfix.3",
            "1.1.0",
            "1.9.2",
            "1.10.0",
        ]

    def test_latest_stable(self, tags: list[str]):
        """Test choosing the newest stable release."""
        stable = [v for v in (try_parse(t) for t in tags) if v is not None and v.is_stable]

        assert str(max_version(stable)) == "1.10.0"

    def test_release_kinds(self, tags: list[str]):
        """Test classifying the tags."""
        parsed = [v for v in (try_parse(t) for t in tags) if v is not None]

        assert [str(v) for v in parsed if v.is_major_release] == ["1.0.0"]
        assert [str(v) for v in parsed if v.is_minor_release] == [
            "0.1.0",
            "0.2.0",
            "1.1.0",
            "1.10.0",
        ]
        assert [str(v) for v in parsed if v.is_patch_release] == ["1.9.2"]


@pytest.mark.usefixtures("reset_logging")
class TestEntryPoint:
    """Runs of the semver-order entry point."""

    def test_sort_with_project_config(
        self,
        sample_repo_dir: Path,
        tags: list[str],
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ):
        """Test that the sample project's config sorts newest first and skips junk."""
        monkeypatch.setattr(sys, "argv", ["semver-order", "-C", str(sample_repo_dir), "sort", *tags])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "1.10.0"
        assert lines[-1] == "0.1.0"
        assert "nightly" not in lines

    def test_invalid_version_exit_code(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ):
        """Test that an invalid version exits with status 1 and reports on stderr."""
        monkeypatch.setattr(sys, "argv", ["semver-order", "parse", "release-candidate"])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        assert "Invalid semantic version" in capsys.readouterr().err
