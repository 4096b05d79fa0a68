"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, rutctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel

from rutctl.domain.types import DEFAULT_FORMAT, RutFormat


class FormatConfig(BaseModel):
    """[format] section."""

    model_config = {"frozen": True}

    default: RutFormat = DEFAULT_FORMAT


class ChecksumConfig(BaseModel):
    """[checksum] section."""

    model_config = {"frozen": True}

    memo: bool = True

