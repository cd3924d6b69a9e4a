"""Resolve command handler."""

from __future__ import annotations

import argparse
import sys
from typing import Any

from toolpath.errors import OverrideInvalidError, ResolutionError
from toolpath.exit_codes import EXIT_FAILURE, EXIT_SUCCESS
from toolpath.resolver import Attempt, Resolver
from toolpath.types import CommandResult


def error_code(exc: ResolutionError) -> str:
    if isinstance(exc, OverrideInvalidError):
        return "TOOLPATH-OVERRIDE-001"
    return "TOOLPATH-NOTFOUND-001"


def remediation(exc: ResolutionError) -> str:
    if isinstance(exc, OverrideInvalidError):
        return f"Fix or unset ${exc.env_var}."
    return f"Add `{exc.executable_name}` to $PATH, or set ${exc.env_var} to a valid executable."


def _print_trace(trace: list[Attempt]) -> None:
    for attempt in trace:
        status = "ok" if attempt.valid else "no"
        print(f"  [{status}] {attempt.source}: {attempt.candidate}", file=sys.stderr)


def cmd_resolve(args: argparse.Namespace, resolver: Resolver | None = None) -> int | CommandResult:
    json_mode = getattr(args, "json", False)
    explain = getattr(args, "explain", False)
    if resolver is None:
        resolver = Resolver()
    trace: list[Attempt] = []

    try:
        path = resolver.resolve(args.name, trace=trace)
    except ResolutionError as exc:
        if json_mode:
            return CommandResult(
                exit_code=EXIT_FAILURE,
                summary=str(exc),
                problems=[
                    {
                        "severity": "error",
                        "message": str(exc),
                        "code": error_code(exc),
                    }
                ],
                suggestions=[{"message": remediation(exc)}],
                data={
                    "name": exc.executable_name,
                    "env_var": exc.env_var,
                    "attempts": [a.to_dict() for a in trace],
                },
            )
        print(f"Error: {exc}", file=sys.stderr)
        if explain:
            _print_trace(trace)
        return EXIT_FAILURE

    if json_mode:
        data: dict[str, Any] = {"name": args.name, "path": path}
        if explain:
            data["attempts"] = [a.to_dict() for a in trace]
        return CommandResult(exit_code=EXIT_SUCCESS, summary=f"Resolved {args.name}: {path}", data=data)

    print(path)
    if explain:
        _print_trace(trace)
    return EXIT_SUCCESS
