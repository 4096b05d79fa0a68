"""Decomposer: split sanitized input into a digit body and a check character.

A bare run of digits is ambiguous (``12345678`` may be a full body or a
7-digit body plus its check digit). The ambiguity is resolved by an ordered
rule table; the first rule that returns a result wins:

1. Trailing ``K``: always the check character, whatever the length.
2. All digits: 9 -> 8 + check; 8 -> bare body; 6 or 7 -> bare body.
   Other lengths fall through.
3. Two or more characters: the last one is the check character.
4. Anything shorter: bare body, no check character.

Pure functions, no infrastructure dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from rutctl.domain.sanitize import digits_only, sanitize
from rutctl.domain.types import DecomposedRut

_Rule = Callable[[str], DecomposedRut | None]


def _k_terminated(token: str) -> DecomposedRut | None:
    if token[-1] != "K":
        return None
    return DecomposedRut(body=digits_only(token[:-1]), check="K")


def _pure_digits(token: str) -> DecomposedRut | None:
    if not token.isdigit():
        return None
    if len(token) == 9:
        return DecomposedRut(body=token[:8], check=token[-1])
    # Never read 8 digits as 7 + check.
    if len(token) in (6, 7, 8):
        return DecomposedRut(body=token)
    return None


def _trailing_check(token: str) -> DecomposedRut | None:
    if len(token) <= 1:
        return None
    return DecomposedRut(body=digits_only(token[:-1]), check=token[-1].upper())


def _degenerate(token: str) -> DecomposedRut:
    return DecomposedRut(body=digits_only(token))


_RULES: tuple[_Rule, ...] = (_k_terminated, _pure_digits, _trailing_check)


def decompose(value: Any) -> DecomposedRut:
    """Split *value* into ``DecomposedRut(body, check)``.

    Never raises. Callers detect "could not decompose" by testing the
    fields for emptiness.
    """
    token = sanitize(value)
    if not token:
        return DecomposedRut(body="", check="")
    for rule in _RULES:
        result = rule(token)
        if result is not None:
            return result
    return _degenerate(token)


def extract_body(value: Any) -> str:
    """Return the digit body of *value* (``""`` if none)."""
    return decompose(value).body


def extract_check_character(value: Any) -> str:
    """Return the supplied check character of *value* (``""`` if none)."""
    return decompose(value).check


def has_plausible_structure(value: Any) -> bool:
    """Coarse pre-filter: at least three RUT characters survive sanitizing."""
    return len(sanitize(value)) >= 3
