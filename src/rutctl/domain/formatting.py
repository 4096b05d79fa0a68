"""Formatter: render a RUT in one of the canonical layouts.

Also hosts the operations built directly on top of rendering
(completion, comparison, sample generation).
"""

from __future__ import annotations

import random
from typing import Any

from rutctl.domain.checksum import calculate_check_character
from rutctl.domain.decompose import decompose
from rutctl.domain.sanitize import digits_only
from rutctl.domain.types import DEFAULT_FORMAT, RutFormat
from rutctl.domain.validation import is_valid_body_shape

# Bodies with a known check character. Each is 8 digits long or checks to K, so the
# rendered sample reads back unambiguously.
SAMPLE_BODIES: tuple[str, ...] = (
    "12345678",  # 5
    "800000",  # K
    "24965106",  # 0
    "18765432",  # 7
    "15345678",  # K
    "20123456",  # 5
)


def group_thousands(digits: str) -> str:
    """Group *digits* in threes counting from the right: ``1234567`` -> ``1.234.567``."""
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i : i + 3] for i in range(head, len(digits), 3))
    return ".".join(g for g in groups if g)


def coerce_format(fmt: RutFormat | str) -> RutFormat:
    """Accept a ``RutFormat`` or its string value.

    Raises:
        ValueError: *fmt* is not a known layout.
    """
    try:
        return RutFormat(fmt)
    except ValueError:
        valid = ", ".join(f.value for f in RutFormat)
        msg = f"Unknown RUT format {fmt!r} (expected one of: {valid})"
        raise ValueError(msg) from None


def render(body: str, check: str, fmt: RutFormat | str = DEFAULT_FORMAT) -> str:
    """Render an already split ``(body, check)`` pair.

    Leading zeros are dropped from the body; an all-zero body renders as ``"0"``.
    """
    layout = coerce_format(fmt)
    digits = digits_only(body).lstrip("0") or "0"
    check = check.upper()
    if layout is RutFormat.NODASH:
        return f"{digits}{check}"
    if layout is RutFormat.DASH:
        return f"{digits}-{check}"
    return f"{group_thousands(digits)}-{check}"


def format_rut(value: Any, fmt: RutFormat | str = DEFAULT_FORMAT) -> str:
    """Render *value* in layout *fmt*, computing the check character if missing.

    Returns ``""`` when no body can be extracted, or when the check character
    is missing and the body is not 6-8 digits long.

    Raises:
        ValueError: *fmt* is not a known layout.
    """
    layout = coerce_format(fmt)
    parts = decompose(value)
    if not parts.body:
        return ""

    check = parts.check
    if not check:
        if not is_valid_body_shape(parts.body):
            return ""
        check = calculate_check_character(parts.body) or ""
    return render(parts.body, check, layout)


def normalize(value: Any, fmt: RutFormat | str = DEFAULT_FORMAT) -> str:
    """Normalize whatever the user typed into layout *fmt* (see :func:`format_rut`)."""
    return format_rut(value, fmt)


def complete_from_body(body: Any, fmt: RutFormat | str = DEFAULT_FORMAT) -> str | None:
    """Append the computed check character to a bare body and render it.

    Returns ``None`` unless the digits of *body* are 6-8 long. The pair is
    rendered directly, so 6- and 7-digit bodies are never re-read as a
    longer body without a check character.
    """
    layout = coerce_format(fmt)
    digits = digits_only(body)
    if not is_valid_body_shape(digits):
        return None
    check = calculate_check_character(digits)
    if check is None:
        return None
    return render(digits, check, layout)


def equals_ignoring_format(a: Any, b: Any) -> bool:
    """True when *a* and *b* render to the same non-empty ``nodash`` form."""
    left = format_rut(a, RutFormat.NODASH)
    right = format_rut(b, RutFormat.NODASH)
    return bool(left) and left == right


def generate_sample(fmt: RutFormat | str = DEFAULT_FORMAT) -> str:
    """Return a correctly checksummed example RUT for demos and tests.

    Drawn from :data:`SAMPLE_BODIES`; not random in any meaningful sense.
    """
    body = random.choice(SAMPLE_BODIES)
    return complete_from_body(body, fmt) or ""
