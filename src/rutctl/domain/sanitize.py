"""Sanitizer: reduce raw user input to the characters a RUT can hold.

Both helpers are total: ``None``, empty or non-string input yields ``""``.
"""

from __future__ import annotations

import re
from typing import Any

_NON_RUT_CHARS = re.compile(r"[^0-9K]")
_NON_DIGITS = re.compile(r"[^0-9]")


def sanitize(value: Any) -> str:
    """Keep only decimal digits and ``K`` (upper-casing ``k``), in order.

    ``"12.345.678-k"`` -> ``"12345678K"``.
    """
    if not isinstance(value, str) or not value:
        return ""
    return _NON_RUT_CHARS.sub("", value.upper())


def digits_only(value: Any) -> str:
    """Keep only the decimal digits of *value*."""
    if not isinstance(value, str) or not value:
        return ""
    return _NON_DIGITS.sub("", value)
