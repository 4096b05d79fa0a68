"""Incremental masker: format a RUT while it is still being typed.

Uses its own rules instead of the Decomposer because partial input must
render sensibly before the user has finished:

- one character or less: returned as is
- trailing ``K``: check character, digits before it grouped, ``-K`` appended
- exactly 8 characters: grouped, no dash (a check digit may still follow)
- 9 or more: last character is the check digit
- otherwise: grouped, no dash
"""

from __future__ import annotations

from typing import Any

from rutctl.domain.formatting import group_thousands
from rutctl.domain.sanitize import digits_only, sanitize


def mask_as_typed(value: Any) -> str:
    """Format partial input for a live text field: ``"1234"`` -> ``"1.234"``."""
    token = sanitize(value)
    if len(token) <= 1:
        return token

    if token.endswith("K"):
        return f"{group_thousands(digits_only(token[:-1]))}-K"

    if len(token) >= 9:
        check = token[-1]
        grouped = group_thousands(digits_only(token[:-1]))
        return f"{grouped}-{check}" if check.isdigit() else grouped

    # 2..8 characters, no trailing K: no check digit assumed yet.
    return group_thousands(digits_only(token))
