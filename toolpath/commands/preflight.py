"""Preflight checks: resolve every configured tool and report which are usable."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from toolpath.commands.config_cmd import config_error
from toolpath.commands.resolve import error_code, remediation
from toolpath.config.loader import ConfigValidationError, ToolRequirement, load_config, tool_requirements
from toolpath.errors import ResolutionError
from toolpath.exit_codes import EXIT_FAILURE, EXIT_SUCCESS
from toolpath.resolver import Resolver
from toolpath.types import CommandResult


def _add_check(
    checks: list[dict[str, Any]],
    name: str,
    ok: bool,
    required: bool,
    detail: str,
    hint: str | None = None,
) -> None:
    status = "ok" if ok else ("fail" if required else "warn")
    entry = {
        "name": name,
        "status": status,
        "required": required,
        "detail": detail,
    }
    if hint:
        entry["hint"] = hint
    checks.append(entry)


def _check_tool(
    checks: list[dict[str, Any]],
    tool: ToolRequirement,
    resolver: Resolver,
) -> ResolutionError | None:
    try:
        path = resolver.resolve(tool.name)
    except ResolutionError as exc:
        _add_check(checks, tool.name, False, tool.required, str(exc), tool.hint or remediation(exc))
        return exc
    _add_check(checks, tool.name, True, tool.required, path)
    return None


def _requirements(args: argparse.Namespace) -> list[ToolRequirement]:
    names = getattr(args, "tool", None) or []
    if names:
        return [ToolRequirement(name=name) for name in names]
    config_path = getattr(args, "config", None)
    config = load_config(Path(config_path) if config_path else None)
    return tool_requirements(config)


def cmd_preflight(args: argparse.Namespace, resolver: Resolver | None = None) -> int | CommandResult:
    json_mode = getattr(args, "json", False)
    if resolver is None:
        resolver = Resolver()

    try:
        tools = _requirements(args)
    except ConfigValidationError as exc:
        return config_error(exc, json_mode)

    checks: list[dict[str, Any]] = []
    problems: list[dict[str, Any]] = []
    suggestions: list[dict[str, Any]] = []
    for tool in tools:
        exc = _check_tool(checks, tool, resolver)
        if exc is None or not tool.required:
            continue
        problems.append({"severity": "error", "message": str(exc), "code": error_code(exc), "tool": tool.name})
        suggestions.append({"message": tool.hint or remediation(exc), "tool": tool.name})

    required_failures = [c for c in checks if c["required"] and c["status"] != "ok"]
    exit_code = EXIT_FAILURE if required_failures else EXIT_SUCCESS

    summary = f"{len(required_failures)} required checks failed" if required_failures else "Preflight OK"

    if json_mode:
        return CommandResult(
            exit_code=exit_code,
            summary=summary,
            problems=problems,
            suggestions=suggestions,
            data={"checks": checks},
        )

    for check in checks:
        status = check["status"].upper()
        name = check["name"]
        detail = check["detail"]
        line = f"[{status}] {name}: {detail}"
        print(line)
        hint = check.get("hint")
        if hint:
            print(f"  -> {hint}")

    return exit_code
