# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Generator

import pytest
from click.testing import CliRunner

from semver_cli.config import ConfigError


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def empty_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Run in a directory tree without any pyproject.toml."""
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.chdir(work_dir)
    # Stop the upward search from finding a pyproject.toml outside tmp_path
    monkeypatch.setattr(
        "semver_cli.config.find_project_root",
        _no_project_root,
    )
    yield work_dir


def _no_project_root(start_dir=None):
    raise ConfigError("Could not find project root (no pyproject.toml found)")


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[[str], Path]:
    """Create a project directory whose pyproject.toml has the given [tool.semver] body."""

    def _make(tool_semver: str) -> Path:
        project_dir = tmp_path / "project"
        project_dir.mkdir(exist_ok=True)
        (project_dir / "pyproject.toml").write_text(
            f"""[project]
name = "example"
version = "1.0.0"

[tool.semver]
{tool_semver}
"""
        )
        return project_dir

    return _make
