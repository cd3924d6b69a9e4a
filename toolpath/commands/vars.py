"""Show the override variable for each executable name."""

from __future__ import annotations

import argparse
import os

from toolpath.exit_codes import EXIT_SUCCESS
from toolpath.resolver import override_var_name
from toolpath.types import CommandResult


def cmd_vars(args: argparse.Namespace) -> int | CommandResult:
    json_mode = getattr(args, "json", False)
    rows = []
    for name in args.names:
        env_var = override_var_name(name)
        value = os.environ.get(env_var)
        rows.append({"name": name, "env_var": env_var, "set": value is not None, "value": value})

    if json_mode:
        return CommandResult(exit_code=EXIT_SUCCESS, summary=f"{len(rows)} names", data={"vars": rows})

    for row in rows:
        state = f"= {row['value']}" if row["set"] else "(unset)"
        print(f"{row['name']}: ${row['env_var']} {state}")
    return EXIT_SUCCESS
