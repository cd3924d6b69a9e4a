"""Config command handler."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from toolpath.config.io import dump_yaml
from toolpath.config.loader import ConfigValidationError, load_config
from toolpath.exit_codes import EXIT_SUCCESS, EXIT_USAGE
from toolpath.types import CommandResult


def config_error(exc: ConfigValidationError, json_mode: bool) -> int | CommandResult:
    """Report a config load failure as a usage error."""
    if json_mode:
        messages = [str(exc), *exc.errors]
        return CommandResult(
            exit_code=EXIT_USAGE,
            summary=str(exc),
            problems=[{"severity": "error", "message": msg, "code": "TOOLPATH-CONFIG-001"} for msg in messages],
        )
    print(f"Error: {exc}", file=sys.stderr)
    for err in exc.errors:
        print(f"  - {err}", file=sys.stderr)
    return EXIT_USAGE


def cmd_config(args: argparse.Namespace) -> int | CommandResult:
    json_mode = getattr(args, "json", False)
    config_path = getattr(args, "config", None)
    try:
        config = load_config(Path(config_path) if config_path else None)
    except ConfigValidationError as exc:
        return config_error(exc, json_mode)

    if getattr(args, "subcommand", None) == "validate":
        tools = sorted((config.get("tools") or {}).keys())
        summary = f"Config OK ({len(tools)} tools)"
        if json_mode:
            return CommandResult(exit_code=EXIT_SUCCESS, summary=summary, data={"tools": tools})
        print(summary)
        return EXIT_SUCCESS

    if json_mode:
        return CommandResult(exit_code=EXIT_SUCCESS, summary="Effective config", data={"config": config})
    print(dump_yaml(config), end="")
    return EXIT_SUCCESS
