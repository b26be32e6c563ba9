"""Configuration loading from pyproject.toml and the environment."""

from __future__ import annotations

import logging
import tomllib
from typing import TYPE_CHECKING, Any

import pydantic

from release_coordinator.config.models import CoordinatorConfig
from release_coordinator.exceptions import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

logger = logging.getLogger(__name__)

TOOL_NAME = "release-coordinator"
OUTPUT_ENV_VAR = "GITHUB_OUTPUT"


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Parse a pyproject.toml file.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML
    """
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except OSError as e:
        raise ConfigError(f"Could not read {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def extract_tool_config(pyproject: Mapping[str, Any]) -> dict[str, Any]:
    """Return the [tool.release-coordinator] table, or an empty dict."""
    section = pyproject.get("tool", {}).get(TOOL_NAME, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[tool.{TOOL_NAME}] must be a table")
    return dict(section)


def load_config(project_root: Path, env: Mapping[str, str] | None = None) -> CoordinatorConfig:
    """Load configuration for the project at project_root.

    Args:
        project_root: Project directory; its pyproject.toml is optional
        env: Environment mapping consulted for the CI output file. The
            process environment is never read implicitly.

    Returns:
        Validated configuration

    Raises:
        ConfigError: If pyproject.toml or the tool table is invalid
    """
    pyproject_path = project_root / "pyproject.toml"
    data: dict[str, Any] = {}
    if pyproject_path.is_file():
        data = extract_tool_config(load_pyproject_toml(pyproject_path))
    else:
        logger.debug("No pyproject.toml in %s, using defaults", project_root)

    data["project_root"] = project_root
    if env is not None and env.get(OUTPUT_ENV_VAR):
        data["output_file"] = env[OUTPUT_ENV_VAR]

    try:
        return CoordinatorConfig.model_validate(data)
    except pydantic.ValidationError as e:
        raise ConfigError(f"Invalid [tool.{TOOL_NAME}] configuration:\n{e}") from e
