"""
toolpath - Configuration Loader

Merges configuration with this precedence:
  1. Project file (--config PATH, else .toolpath.yml in the working directory)
  2. Package defaults (toolpath/config/defaults.yaml)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from toolpath.config.io import load_yaml_file
from toolpath.config.merge import deep_merge
from toolpath.config.schema import validate_config

DEFAULTS_PATH = Path(__file__).resolve().parent / "defaults.yaml"
PROJECT_CONFIG_NAME = ".toolpath.yml"


class ConfigValidationError(Exception):
    """Raised when a toolpath config cannot be read or fails schema validation."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


@dataclass(frozen=True)
class ToolRequirement:
    """A tool that preflight should resolve."""

    name: str
    required: bool = True
    hint: str = ""


def _load_yaml(path: Path, source: str) -> dict[str, Any]:
    """Load YAML with consistent error handling for the loader."""
    try:
        return load_yaml_file(path)
    except ValueError as exc:
        raise ConfigValidationError(f"{source}: {exc}") from exc


def _validate(config: dict[str, Any], source: str) -> None:
    errors = validate_config(config)
    if errors:
        raise ConfigValidationError(f"Validation failed for {source}", errors=errors)


def load_config(
    config_path: Path | None = None,
    cwd: Path | None = None,
    defaults_path: Path = DEFAULTS_PATH,
) -> dict[str, Any]:
    """Load the effective toolpath configuration.

    Args:
        config_path: Explicit project config. Must exist if given.
        cwd: Directory searched for .toolpath.yml when no explicit path is given.
        defaults_path: Package defaults file.

    Returns:
        Merged configuration dictionary.

    Raises:
        ConfigValidationError: A file is unreadable, not a mapping, or fails the schema.
    """
    config = _load_yaml(defaults_path, "defaults")
    _validate(config, "defaults")

    if config_path is not None:
        if not config_path.exists():
            raise ConfigValidationError(f"Config file not found: {config_path}")
        project_path = config_path
    else:
        project_path = (cwd or Path.cwd()) / PROJECT_CONFIG_NAME

    project = _load_yaml(project_path, str(project_path))
    if project:
        _validate(project, str(project_path))
        config = deep_merge(config, project)
    return config


def tool_requirements(config: dict[str, Any]) -> list[ToolRequirement]:
    """Return the enabled tools from a loaded config, in file order."""
    requirements: list[ToolRequirement] = []
    for name, entry in (config.get("tools") or {}).items():
        entry = entry or {}
        if not entry.get("enabled", True):
            continue
        requirements.append(
            ToolRequirement(
                name=str(name),
                required=bool(entry.get("required", True)),
                hint=str(entry.get("hint", "")),
            )
        )
    return requirements
