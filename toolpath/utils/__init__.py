"""Shared utility functions for toolpath."""

from __future__ import annotations

from toolpath.utils.env import ascii_upper
from toolpath.utils.paths import cargo_bin_dir, home_dir

__all__ = [
    "ascii_upper",
    "cargo_bin_dir",
    "home_dir",
]
