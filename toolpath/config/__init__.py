"""Config management module for toolpath."""

from __future__ import annotations

from toolpath.config.io import dump_yaml, load_yaml_file
from toolpath.config.loader import (
    ConfigValidationError,
    ToolRequirement,
    load_config,
    tool_requirements,
)
from toolpath.config.merge import deep_merge
from toolpath.config.schema import get_schema, validate_config

__all__ = [
    "ConfigValidationError",
    "ToolRequirement",
    "deep_merge",
    "dump_yaml",
    "get_schema",
    "load_config",
    "load_yaml_file",
    "tool_requirements",
    "validate_config",
]
