"""Environment variable helpers."""

from __future__ import annotations

import string

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def ascii_upper(value: str) -> str:
    """Uppercase ASCII letters only, independent of locale.

    ``str.upper`` would also fold non-ASCII characters (``"ß"`` becomes
    ``"SS"``), which changes the variable name.
    """
    return value.translate(_ASCII_UPPER)
