"""Executable resolution.

Three places are checked for an executable ``name``:

1. The override variable ``NAME`` (``CARGO`` for ``cargo``). If it is set
   but not runnable, resolution fails; it does not fall back.
2. ``name`` itself, which succeeds when ``name`` is on ``$PATH``.
3. ``~/.cargo/bin/<name>``, where rustup installs ``cargo``, ``rustc``
   and ``rustup``.

Nothing is cached. Each call spawns up to two ``--version`` processes.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from toolpath.errors import ExecutableNotFoundError, OverrideInvalidError
from toolpath.launcher import ProcessLauncher, is_valid_executable
from toolpath.utils.env import ascii_upper
from toolpath.utils.paths import cargo_bin_dir, home_dir

logger = logging.getLogger(__name__)

SOURCE_OVERRIDE = "override"
SOURCE_PATH = "path"
SOURCE_FALLBACK = "fallback"


@dataclass(frozen=True)
class Attempt:
    """One validated candidate, recorded when a trace list is supplied."""

    source: str
    candidate: str
    valid: bool

    def to_dict(self) -> dict[str, Any]:
        return {"source": self.source, "candidate": self.candidate, "valid": self.valid}


def override_var_name(executable_name: str) -> str:
    """Return the environment variable that overrides ``executable_name``."""
    return ascii_upper(executable_name)


def fallback_path(executable_name: str, home: Path) -> Path:
    return cargo_bin_dir(home) / executable_name


def _as_name(executable_name: Any) -> str:
    if isinstance(executable_name, os.PathLike):
        return os.fspath(executable_name)
    return str(executable_name)


class Resolver:
    """Resolve executable names to runnable paths.

    Args:
        launcher: Used for every trial invocation. Defaults to spawning real processes.
        environ: Mapping consulted for override variables. Defaults to ``os.environ``
            as it is at call time.
        home: Returns the home directory, or None when unknown (the fallback
            location is then skipped).
    """

    def __init__(
        self,
        launcher: ProcessLauncher | None = None,
        environ: Mapping[str, str] | None = None,
        home: Callable[[], Path | None] = home_dir,
    ) -> None:
        self.launcher = launcher
        self.environ = environ
        self.home = home

    def _check(self, source: str, candidate: str, trace: list[Attempt] | None) -> bool:
        valid = is_valid_executable(candidate, self.launcher)
        logger.debug("%s candidate %s: %s", source, candidate, "ok" if valid else "not runnable")
        if trace is not None:
            trace.append(Attempt(source, candidate, valid))
        return valid

    def resolve(self, executable_name: Any, trace: list[Attempt] | None = None) -> str:
        """Return a runnable path or command name for ``executable_name``.

        The override value and the bare name are returned exactly as given;
        the fallback is returned as a full path.

        Args:
            executable_name: Name of the executable, e.g. ``"cargo"``.
            trace: If given, one Attempt is appended per candidate tried.

        Returns:
            The path or command name to invoke.

        Raises:
            OverrideInvalidError: The override variable is set to something not runnable.
            ExecutableNotFoundError: No override and no runnable candidate.
        """
        name = _as_name(executable_name)
        env_var = override_var_name(name)
        environ = os.environ if self.environ is None else self.environ

        override = environ.get(env_var)
        if override is not None:
            if self._check(SOURCE_OVERRIDE, override, trace):
                return override
            logger.warning("%s is set to %r, which is not a runnable executable", env_var, override)
            raise OverrideInvalidError(name, env_var, override)

        if self._check(SOURCE_PATH, name, trace):
            return name

        home = self.home()
        if home is not None:
            candidate = str(fallback_path(name, home))
            if self._check(SOURCE_FALLBACK, candidate, trace):
                return candidate
        else:
            logger.debug("home directory unknown; skipping %s fallback", name)

        raise ExecutableNotFoundError(name, env_var)


def resolve(executable_name: Any, trace: list[Attempt] | None = None) -> str:
    """Resolve ``executable_name`` with the real environment and process launcher.

    See :meth:`Resolver.resolve`.
    """
    return Resolver().resolve(executable_name, trace=trace)
