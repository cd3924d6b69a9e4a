"""Home directory and well-known install locations."""

from __future__ import annotations

from pathlib import Path


def home_dir() -> Path | None:
    """Return the current user's home directory, or None if it cannot be determined."""
    try:
        return Path.home()
    except RuntimeError:
        return None


def cargo_bin_dir(home: Path) -> Path:
    """Return the directory rustup installs toolchain proxies into."""
    return home / ".cargo" / "bin"
