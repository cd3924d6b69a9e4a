from __future__ import annotations

import argparse
import json
import logging
import sys
import time

from toolpath import __version__
from toolpath.exit_codes import EXIT_INTERNAL_ERROR, EXIT_SUCCESS
from toolpath.types import CommandResult

__all__ = ["CommandResult", "build_parser", "main"]


def cmd_resolve(args: argparse.Namespace) -> int | CommandResult:
    from toolpath.commands.resolve import cmd_resolve as handler

    return handler(args)


def cmd_preflight(args: argparse.Namespace) -> int | CommandResult:
    from toolpath.commands.preflight import cmd_preflight as handler

    return handler(args)


def cmd_vars(args: argparse.Namespace) -> int | CommandResult:
    from toolpath.commands.vars import cmd_vars as handler

    return handler(args)


def cmd_config(args: argparse.Namespace) -> int | CommandResult:
    from toolpath.commands.config_cmd import cmd_config as handler

    return handler(args)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="toolpath", description="Locate and validate external executables")
    parser.add_argument("--version", action="version", version=f"toolpath {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log each candidate tried to stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Subcommand copies default to SUPPRESS: a value given before the subcommand is kept.
    def add_json_flag(target: argparse.ArgumentParser, inherit: bool = False) -> None:
        target.add_argument(
            "--json",
            action="store_true",
            default=argparse.SUPPRESS if inherit else False,
            help="Output machine-readable JSON",
        )

    def add_config_flag(target: argparse.ArgumentParser, inherit: bool = False) -> None:
        target.add_argument(
            "--config",
            default=argparse.SUPPRESS if inherit else None,
            help="Project config file (default: ./.toolpath.yml if present)",
        )

    resolve = subparsers.add_parser("resolve", help="Print the path to use for an executable")
    add_json_flag(resolve)
    resolve.add_argument("name", help="Executable name (e.g. cargo)")
    resolve.add_argument("--explain", action="store_true", help="Show every candidate tried")
    resolve.set_defaults(func=cmd_resolve)

    preflight = subparsers.add_parser("preflight", help="Check that configured tools resolve")
    add_json_flag(preflight)
    add_config_flag(preflight)
    preflight.add_argument(
        "--tool",
        action="append",
        metavar="NAME",
        help="Check this tool instead of the configured set (repeatable)",
    )
    preflight.set_defaults(func=cmd_preflight)

    doctor = subparsers.add_parser("doctor", help="Alias for preflight")
    add_json_flag(doctor)
    add_config_flag(doctor)
    doctor.add_argument(
        "--tool",
        action="append",
        metavar="NAME",
        help="Check this tool instead of the configured set (repeatable)",
    )
    doctor.set_defaults(func=cmd_preflight)

    env_vars = subparsers.add_parser("vars", help="Show override variables for executable names")
    add_json_flag(env_vars)
    env_vars.add_argument("names", nargs="+", help="Executable names")
    env_vars.set_defaults(func=cmd_vars)

    config = subparsers.add_parser("config", help="Inspect toolpath configuration")
    add_json_flag(config)
    add_config_flag(config)
    config_sub = config.add_subparsers(dest="subcommand")
    config.set_defaults(func=cmd_config)

    config_show = config_sub.add_parser("show", help="Show merged defaults + project config")
    add_json_flag(config_show, inherit=True)
    add_config_flag(config_show, inherit=True)
    config_show.set_defaults(func=cmd_config)

    config_validate = config_sub.add_parser("validate", help="Validate project config against the schema")
    add_json_flag(config_validate, inherit=True)
    add_config_flag(config_validate, inherit=True)
    config_validate.set_defaults(func=cmd_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")
    start = time.perf_counter()
    command = args.command
    subcommand = getattr(args, "subcommand", None)
    if subcommand:
        command = f"{command} {subcommand}"

    try:
        result = args.func(args)
    except Exception as exc:  # noqa: BLE001 - surface in JSON mode
        if getattr(args, "json", False):
            problems = [
                {
                    "severity": "error",
                    "message": str(exc),
                    "code": "TOOLPATH-UNHANDLED",
                }
            ]
            payload = CommandResult(
                exit_code=EXIT_INTERNAL_ERROR,
                summary=str(exc),
                problems=problems,
            ).to_payload(
                command,
                "error",
                int((time.perf_counter() - start) * 1000),
            )
            print(json.dumps(payload, indent=2))
            return EXIT_INTERNAL_ERROR
        raise

    if isinstance(result, CommandResult):
        exit_code = result.exit_code
        command_result = result
    else:
        exit_code = int(result)
        command_result = CommandResult(exit_code=exit_code)

    if not command_result.summary:
        command_result.summary = "OK" if exit_code == EXIT_SUCCESS else "Command failed"

    if getattr(args, "json", False):
        status = "success" if exit_code == EXIT_SUCCESS else "failure"
        payload = command_result.to_payload(
            command,
            status,
            int((time.perf_counter() - start) * 1000),
        )
        print(json.dumps(payload, indent=2))
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
