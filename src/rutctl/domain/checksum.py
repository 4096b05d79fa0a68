"""Checksum engine: modulo-11 check character for a RUT body.

The algorithm itself is a pure function. Memoisation is layered on top by
the :func:`memoized` decorator so that turning it off (or removing it) never
changes a return value, only latency.

INVARIANT: the memo has no size bound and no eviction. It is cleared only by
:func:`reset_memo`.
"""

from __future__ import annotations

import functools
import logging
import threading
from collections.abc import Callable
from typing import Any

from rutctl.domain.sanitize import digits_only

logger = logging.getLogger(__name__)

_FIRST_MULTIPLIER = 2
_LAST_MULTIPLIER = 7


class _Memo:
    """Thread-safe, unbounded ``digits -> check character`` table."""

    def __init__(self) -> None:
        self.enabled = True
        self._entries: dict[str, str | None] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> tuple[bool, str | None]:
        with self._lock:
            if key in self._entries:
                return True, self._entries[key]
        return False, None

    def put(self, key: str, value: str | None) -> None:
        with self._lock:
            self._entries[key] = value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


_memo = _Memo()


def memoized(func: Callable[[str], str | None]) -> Callable[[Any], str | None]:
    """Decorator: cache *func* keyed by the digits of its argument."""

    @functools.wraps(func)
    def wrapper(body: Any) -> str | None:
        digits = digits_only(body)
        if not digits or not _memo.enabled:
            return func(digits)
        hit, cached = _memo.get(digits)
        if hit:
            return cached
        result = func(digits)
        _memo.put(digits, result)
        return result

    return wrapper


def check_character_for(digits: str) -> str | None:
    """Compute the check character for a digits-only string, uncached.

    Digits are weighted right to left with multipliers 2..7, cycling back
    to 2. ``11 - sum % 11`` is in 1..11: 11 maps to ``"0"``, 10 to ``"K"``,
    and 1..9 are rendered as themselves.
    """
    if not digits:
        return None
    total = 0
    multiplier = _FIRST_MULTIPLIER
    for ch in reversed(digits):
        total += int(ch) * multiplier
        multiplier += 1
        if multiplier > _LAST_MULTIPLIER:
            multiplier = _FIRST_MULTIPLIER
    raw = 11 - total % 11
    if raw == 11:
        return "0"
    if raw == 10:
        return "K"
    return str(raw)


@memoized
def calculate_check_character(body: str) -> str | None:
    """Return the check character for *body*, or ``None`` if it has no digits.

    Stray non-digit characters in *body* are ignored.
    """
    return check_character_for(body)


def reset_memo() -> None:
    """Drop every memoised check character. Safe to call on an empty memo."""
    size = len(_memo)
    _memo.clear()
    logger.debug("Checksum memo cleared (%d entries)", size)


def set_memo_enabled(enabled: bool) -> None:
    """Turn memoisation on or off. Existing entries are kept."""
    _memo.enabled = enabled


def memo_enabled() -> bool:
    """Whether check characters are currently being memoised."""
    return _memo.enabled


def memo_size() -> int:
    """Number of bodies currently memoised."""
    return len(_memo)
