"""Validator: body-shape and plausibility predicates plus full validation.

Every predicate returns ``False`` (never raises) for malformed or
non-string input.

``validate_full`` does not apply the repeated-digit filter: a RUT whose
check character matches is accepted even when its body looks implausible.
Only ``validate_body_only`` rejects suspicious bodies.
"""

from __future__ import annotations

import re
from typing import Any

from rutctl.domain.checksum import calculate_check_character
from rutctl.domain.decompose import decompose
from rutctl.domain.sanitize import digits_only

MIN_BODY_LENGTH = 6
MAX_BODY_LENGTH = 8

_BODY_SHAPE = re.compile(rf"^\d{{{MIN_BODY_LENGTH},{MAX_BODY_LENGTH}}}$")
_REPEATED_DIGIT = re.compile(r"^(\d)\1*$")


def is_valid_body_shape(body: Any) -> bool:
    """True iff the digits of *body* are exactly 6, 7 or 8 long."""
    return _BODY_SHAPE.match(digits_only(body)) is not None


def is_suspicious(body: Any) -> bool:
    """True for an empty body or one made of a single repeated digit."""
    digits = digits_only(body)
    if not digits:
        return True
    return _REPEATED_DIGIT.match(digits) is not None


def validate_body_only(body: Any) -> bool:
    """Plausibility check of a body without any check character."""
    return is_valid_body_shape(body) and not is_suspicious(body)


def validate_full(value: Any) -> bool:
    """Validate a complete RUT (body plus check character) in any layout."""
    if not isinstance(value, str):
        return False
    parts = decompose(value)
    if not parts.is_complete:
        return False
    if not is_valid_body_shape(parts.body):
        return False
    expected = calculate_check_character(parts.body)
    if expected is None:
        return False
    return expected == parts.check.upper()
