"""Schema loading and validation for toolpath config."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from jsonschema import Draft7Validator

SCHEMA_PATH = Path(__file__).resolve().parents[1] / "schema" / "toolpath-config.schema.json"


def get_schema(schema_path: Path = SCHEMA_PATH) -> dict[str, Any]:
    """Load the toolpath config schema.

    Args:
        schema_path: Location of the JSON schema.

    Returns:
        Parsed JSON schema as a dict.
    """
    data = json.loads(schema_path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Schema at {schema_path} is not a JSON object")
    return data


def validate_config(config: dict[str, Any], schema_path: Path = SCHEMA_PATH) -> list[str]:
    """Validate a config dict against the toolpath schema.

    Args:
        config: Configuration data to validate.
        schema_path: Location of the JSON schema.

    Returns:
        Sorted list of validation error strings.
    """
    validator = Draft7Validator(get_schema(schema_path))
    errors: list[str] = []
    for err in validator.iter_errors(config):
        path = ".".join(str(p) for p in err.path) or "<root>"
        errors.append(f"{path}: {err.message}")
    return sorted(errors)
