"""toolpath - locate and validate external executables.

Resolution order for an executable ``name``:

1. The ``NAME`` environment variable (an explicit override; a broken
   override is an error, never skipped).
2. ``name`` itself, found through ``$PATH``.
3. ``~/.cargo/bin/<name>``.
"""

from __future__ import annotations

from toolpath.errors import ExecutableNotFoundError, OverrideInvalidError, ResolutionError
from toolpath.launcher import VERSION_FLAG, ProcessLauncher, SubprocessLauncher, is_valid_executable
from toolpath.resolver import Attempt, Resolver, fallback_path, override_var_name, resolve

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Attempt",
    "ExecutableNotFoundError",
    "OverrideInvalidError",
    "ProcessLauncher",
    "ResolutionError",
    "Resolver",
    "SubprocessLauncher",
    "VERSION_FLAG",
    "fallback_path",
    "is_valid_executable",
    "override_var_name",
    "resolve",
]
