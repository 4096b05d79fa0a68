"""RutService: RUT operations for the CLI and other front ends.

Wraps the pure domain functions so every outcome, including "this input is
not a RUT", comes back as a :class:`ServiceResult` instead of an empty
string or ``None``.

Error codes:
  INVALID_RUT   - no body and check character could be read, or the body
                  is not 6-8 digits
  RUT_MISMATCH  - the supplied check character does not match the body
  INVALID_BODY  - a bare body is not 6-8 digits
  UNFORMATTABLE - the input cannot be rendered in any layout
  UNKNOWN_STYLE - the requested layout is not one of the RutFormat values
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rutctl.domain import checksum
from rutctl.domain.checksum import calculate_check_character
from rutctl.domain.decompose import decompose, has_plausible_structure
from rutctl.domain.formatting import (
    complete_from_body,
    coerce_format,
    equals_ignoring_format,
    format_rut,
    generate_sample,
)
from rutctl.domain.mask import mask_as_typed
from rutctl.domain.sanitize import digits_only, sanitize
from rutctl.domain.types import RutFormat
from rutctl.domain.validation import is_suspicious, is_valid_body_shape, validate_full
from rutctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from rutctl.config.settings import RutSettings

logger = logging.getLogger(__name__)


def _error(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


class RutService:
    """RUT validation, formatting and completion as ServiceResults.

    Applies the ``[checksum] memo`` setting on construction. The memo is
    process-wide, so the last service built decides whether it is used.
    """

    def __init__(self, settings: RutSettings | None = None) -> None:
        if settings is None:
            from rutctl.config.settings import RutSettings

            settings = RutSettings()
        self._settings = settings
        checksum.set_memo_enabled(settings.checksum.memo)

    def _style(self, style: RutFormat | str | None) -> RutFormat:
        if style is None:
            return self._settings.format.default
        return coerce_format(style)

    def _bad_style(self, op: str, style: object, exc: ValueError) -> ServiceResult:
        return _error(op, "UNKNOWN_STYLE", str(exc), style=str(style))

    def validate(self, value: str) -> ServiceResult:
        """Validate a complete RUT; warn (but pass) on repeated-digit bodies."""
        op = "validate"
        parts = decompose(value)
        if not parts.is_complete or not is_valid_body_shape(parts.body):
            logger.debug("validate: unreadable input %r", value)
            return _error(
                op,
                "INVALID_RUT",
                f"Not a RUT: {value!r} (expected 6-8 digits and a check character)",
                body=parts.body,
                check=parts.check,
            )

        expected = calculate_check_character(parts.body)
        if not validate_full(value):
            logger.debug("validate: check mismatch for %s", parts.body)
            return _error(
                op,
                "RUT_MISMATCH",
                f"Check character {parts.check} does not match body {parts.body} "
                f"(expected {expected})",
                body=parts.body,
                check=parts.check,
                expected=expected,
            )

        warnings: list[str] = []
        if is_suspicious(parts.body):
            warnings.append(f"Body {parts.body} is a repeated-digit pattern")
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "input": value,
                "valid": True,
                "body": parts.body,
                "check": parts.check,
                "formatted": format_rut(value, self._settings.format.default),
            },
            warnings=warnings,
        )

    def format(self, value: str, style: RutFormat | str | None = None) -> ServiceResult:
        """Render *value* in *style* (default from settings)."""
        op = "format"
        try:
            layout = self._style(style)
        except ValueError as exc:
            return self._bad_style(op, style, exc)
        formatted = format_rut(value, layout)
        if not formatted:
            return _error(op, "UNFORMATTABLE", f"Cannot format {value!r} as a RUT")
        return ServiceResult(
            ok=True,
            op=op,
            data={"input": value, "formatted": formatted, "style": layout.value},
        )

    def complete(self, body: str, style: RutFormat | str | None = None) -> ServiceResult:
        """Append the computed check character to a bare body."""
        op = "complete"
        try:
            layout = self._style(style)
        except ValueError as exc:
            return self._bad_style(op, style, exc)
        completed = complete_from_body(body, layout)
        if completed is None:
            return _error(op, "INVALID_BODY", f"Body must be 6-8 digits, got {body!r}")
        warnings: list[str] = []
        if is_suspicious(body):
            warnings.append(f"Body {digits_only(body)} is a repeated-digit pattern")
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "input": body,
                "formatted": completed,
                "check": calculate_check_character(body),
                "style": layout.value,
            },
            warnings=warnings,
        )

    def mask(self, value: str) -> ServiceResult:
        """Render partial input the way a live text field would."""
        return ServiceResult(
            ok=True,
            op="mask",
            data={"input": value, "masked": mask_as_typed(value)},
        )

    def inspect(self, value: str) -> ServiceResult:
        """Report how *value* is read: sanitized token, split, and every check."""
        parts = decompose(value)
        expected = calculate_check_character(parts.body) if parts.body else None
        return ServiceResult(
            ok=True,
            op="inspect",
            data={
                "input": value,
                "sanitized": sanitize(value),
                "body": parts.body,
                "check": parts.check,
                "expected_check": expected,
                "plausible": has_plausible_structure(value),
                "valid_shape": is_valid_body_shape(parts.body),
                "suspicious": is_suspicious(parts.body),
                "valid": validate_full(value),
            },
        )

    def compare(self, a: str, b: str) -> ServiceResult:
        """Compare two RUTs ignoring layout."""
        return ServiceResult(
            ok=True,
            op="compare",
            data={"a": a, "b": b, "equal": equals_ignoring_format(a, b)},
        )

    def sample(self, style: RutFormat | str | None = None) -> ServiceResult:
        """Return a correctly checksummed example RUT."""
        op = "sample"
        try:
            layout = self._style(style)
        except ValueError as exc:
            return self._bad_style(op, style, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"rut": generate_sample(layout), "style": layout.value},
        )

    def reset_memo(self) -> ServiceResult:
        """Clear the checksum memo."""
        cleared = checksum.memo_size()
        checksum.reset_memo()
        return ServiceResult(ok=True, op="reset_memo", data={"cleared": cleared})
