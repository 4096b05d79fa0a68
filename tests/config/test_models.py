"""Tests for config models: defaults and sparse overrides."""

import pytest

from rutctl.config.models import ChecksumConfig, FormatConfig
from rutctl.domain.types import RutFormat


class TestSectionModels:
    def test_defaults(self) -> None:
        assert FormatConfig().default is RutFormat.DOTDASH
        assert ChecksumConfig().memo is True

    def test_format_accepts_string_value(self) -> None:
        assert FormatConfig.model_validate({"default": "dash"}).default is RutFormat.DASH

    def test_rejects_unknown_format(self) -> None:
        with pytest.raises(ValueError):
            FormatConfig(default="dots")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        cfg = ChecksumConfig()
        with pytest.raises(Exception):
            cfg.memo = False  # type: ignore[misc]
