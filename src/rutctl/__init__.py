"""rutctl: validate, format and compute check digits for Chilean RUT numbers."""

from __future__ import annotations

from rutctl.domain.checksum import calculate_check_character, reset_memo
from rutctl.domain.decompose import (
    decompose,
    extract_body,
    extract_check_character,
    has_plausible_structure,
)
from rutctl.domain.formatting import (
    complete_from_body,
    equals_ignoring_format,
    format_rut,
    generate_sample,
    normalize,
)
from rutctl.domain.mask import mask_as_typed
from rutctl.domain.sanitize import sanitize
from rutctl.domain.types import DecomposedRut, RutFormat
from rutctl.domain.validation import (
    is_suspicious,
    is_valid_body_shape,
    validate_body_only,
    validate_full,
)

__version__ = "0.1.0"

__all__ = [
    "DecomposedRut",
    "RutFormat",
    "__version__",
    "calculate_check_character",
    "complete_from_body",
    "decompose",
    "equals_ignoring_format",
    "extract_body",
    "extract_check_character",
    "format_rut",
    "generate_sample",
    "has_plausible_structure",
    "is_suspicious",
    "is_valid_body_shape",
    "mask_as_typed",
    "normalize",
    "reset_memo",
    "sanitize",
    "validate_body_only",
    "validate_full",
]
