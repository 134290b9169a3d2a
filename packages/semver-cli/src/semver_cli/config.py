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

from semver_version import CompareMode

OUTPUT_FORMATS = ("normal", "json", "xml")
OUTPUT_BEHAVIORS = ("normal", "silent", "verbose", "debug")


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class SemverConfig:
    """CLI configuration loaded from the ``[tool.semver]`` table.

    Attributes:
        project_dir: Directory containing pyproject.toml, if one was found
        mode: Default comparison mode for ``semver compare``
        output_format: Default output format for ``semver parse``
        output: Default output behavior for ``semver compare``
    """

    project_dir: Optional[Path] = None
    mode: CompareMode = CompareMode.PRECEDENCE
    output_format: str = "normal"
    output: str = "normal"

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "SemverConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            SemverConfig instance

        Raises:
            ConfigError: If the file is invalid or holds unknown values
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
    ) -> "SemverConfig":
        """Create SemverConfig from a parsed pyproject.toml dictionary.

        Args:
            pyproject: Parsed pyproject.toml as a dictionary
            project_dir: Directory containing pyproject.toml

        Returns:
            SemverConfig instance

        Raises:
            ConfigError: If ``[tool.semver]`` holds unknown values
        """
        tool_semver = pyproject.get("tool", {}).get("semver", {})
        if not isinstance(tool_semver, dict):
            raise ConfigError("[tool.semver] must be a table")

        mode_value = tool_semver.get("mode", CompareMode.PRECEDENCE.value)
        try:
            mode = CompareMode(mode_value)
        except ValueError:
            raise ConfigError(
                f"Invalid mode {mode_value!r} in [tool.semver]; expected one of: "
                + ", ".join(m.value for m in CompareMode)
            ) from None

        output_format = _choice(tool_semver, "output-format", OUTPUT_FORMATS)
        output = _choice(tool_semver, "output", OUTPUT_BEHAVIORS)

        return cls(
            project_dir=project_dir,
            mode=mode,
            output_format=output_format,
            output=output,
        )


def _choice(table: dict[str, Any], key: str, choices: tuple[str, ...]) -> str:
    """Read a key that must be one of ``choices``; the first choice is the default."""
    value = table.get(key, choices[0])
    if value not in choices:
        raise ConfigError(
            f"Invalid {key} {value!r} in [tool.semver]; expected one of: {', '.join(choices)}"
        )
    return value


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory

    Raises:
        ConfigError: If no project root is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    raise ConfigError("Could not find project root (no pyproject.toml found)")


def load_config(project_dir: Optional[str | Path] = None) -> SemverConfig:
    """Load CLI configuration, falling back to defaults.

    Args:
        project_dir: Directory to start searching from (defaults to cwd)

    Returns:
        SemverConfig instance; defaults when no pyproject.toml is found

    Raises:
        ConfigError: If configuration exists but cannot be loaded
    """
    try:
        project_path = find_project_root(project_dir)
    except ConfigError:
        return SemverConfig()

    return SemverConfig.from_pyproject(project_path)
