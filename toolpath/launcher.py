"""Trial invocation used to decide whether a candidate is runnable.

Every executable toolpath resolves is expected to accept ``--version``
without side effects and without reading input. ``cargo``, ``rustc`` and
``rustup`` all do. Tools that need other flags to start cleanly are not
supported.
"""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Sequence
from typing import Protocol

logger = logging.getLogger(__name__)

VERSION_FLAG = "--version"


class ProcessLauncher(Protocol):
    """Starts a process and waits for it to finish.

    ``launch`` returns normally when the process ran to completion,
    whatever its exit status. It raises ``OSError`` (or ``ValueError`` for
    arguments the OS refuses) when the process could not be started.
    """

    def launch(self, argv: Sequence[str]) -> None: ...


class SubprocessLauncher:
    """ProcessLauncher backed by ``subprocess.run`` with output discarded."""

    def launch(self, argv: Sequence[str]) -> None:
        subprocess.run(  # noqa: S603
            list(argv),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )


_DEFAULT_LAUNCHER = SubprocessLauncher()


def is_valid_executable(candidate: str | os.PathLike[str], launcher: ProcessLauncher | None = None) -> bool:
    """Return True if ``candidate --version`` can be started and runs to completion.

    The exit status is ignored: a program that starts and exits non-zero
    still counts as runnable.

    Args:
        candidate: Bare command name or path to try.
        launcher: Launcher to use; defaults to a SubprocessLauncher.

    Returns:
        Whether the candidate could be launched.
    """
    if launcher is None:
        launcher = _DEFAULT_LAUNCHER
    argv = [os.fspath(candidate), VERSION_FLAG]
    try:
        launcher.launch(argv)
    except (OSError, ValueError) as exc:
        logger.debug("launch failed for %s: %s", argv[0], exc)
        return False
    return True
