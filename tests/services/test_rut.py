"""Tests for RutService."""

from pathlib import Path

import pytest

from rutctl.config.settings import RutSettings
from rutctl.domain import checksum
from rutctl.domain.validation import validate_full
from rutctl.services.rut import RutService


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> RutSettings:
    monkeypatch.delenv("RUTCTL_CONFIG", raising=False)
    return RutSettings.from_cli(start_dir=tmp_path)


@pytest.fixture
def svc(settings: RutSettings) -> RutService:
    return RutService(settings)


class TestValidate:
    def test_valid(self, svc: RutService) -> None:
        result = svc.validate("12.345.678-5")
        assert result.ok
        assert result.op == "validate"
        assert result.data["body"] == "12345678"
        assert result.data["check"] == "5"
        assert result.data["formatted"] == "12.345.678-5"
        assert result.warnings == []

    def test_mismatch(self, svc: RutService) -> None:
        result = svc.validate("12.345.678-9")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "RUT_MISMATCH"
        assert result.error.detail["expected"] == "5"

    @pytest.mark.parametrize("raw", ["", "abc", "12345678", "1234-5"])
    def test_invalid(self, svc: RutService, raw: str) -> None:
        result = svc.validate(raw)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_RUT"

    def test_suspicious_body_passes_with_warning(self, svc: RutService) -> None:
        result = svc.validate("11.111.111-1")
        assert result.ok
        assert len(result.warnings) == 1
        assert "repeated-digit" in result.warnings[0]


class TestFormat:
    def test_default_style(self, svc: RutService) -> None:
        result = svc.format("123456785")
        assert result.ok
        assert result.data["formatted"] == "12.345.678-5"
        assert result.data["style"] == "dotdash"

    def test_explicit_style(self, svc: RutService) -> None:
        assert svc.format("12.345.678-5", "nodash").data["formatted"] == "123456785"

    def test_configured_default(self, tmp_path: Path) -> None:
        (tmp_path / "rutctl.toml").write_text('[format]\ndefault = "dash"\n')
        svc = RutService(RutSettings.from_cli(start_dir=tmp_path))
        assert svc.format("123456785").data["formatted"] == "12345678-5"

    def test_unformattable(self, svc: RutService) -> None:
        result = svc.format("abc")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNFORMATTABLE"

    @pytest.mark.parametrize("op", ["format", "complete"])
    def test_unknown_style_is_an_error_result(self, svc: RutService, op: str) -> None:
        result = getattr(svc, op)("12345678", "bogus")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_STYLE"
        assert result.error.detail["style"] == "bogus"

    def test_unknown_style_for_sample(self, svc: RutService) -> None:
        result = svc.sample("dots")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_STYLE"


class TestComplete:
    def test_completes(self, svc: RutService) -> None:
        result = svc.complete("12345678", "dash")
        assert result.ok
        assert result.data["formatted"] == "12345678-5"
        assert result.data["check"] == "5"

    def test_invalid_body(self, svc: RutService) -> None:
        result = svc.complete("123")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_BODY"

    def test_suspicious_body_warns(self, svc: RutService) -> None:
        result = svc.complete("22.222.222")
        assert result.ok
        assert result.warnings == ["Body 22222222 is a repeated-digit pattern"]


class TestMaskInspectCompareSample:
    def test_mask(self, svc: RutService) -> None:
        assert svc.mask("1234").data["masked"] == "1.234"

    def test_inspect(self, svc: RutService) -> None:
        data = svc.inspect("12.345.678-5").data
        assert data["sanitized"] == "123456785"
        assert data["body"] == "12345678"
        assert data["check"] == "5"
        assert data["expected_check"] == "5"
        assert data["plausible"] is True
        assert data["valid_shape"] is True
        assert data["suspicious"] is False
        assert data["valid"] is True

    def test_inspect_empty(self, svc: RutService) -> None:
        data = svc.inspect("").data
        assert data["expected_check"] is None
        assert data["suspicious"] is True
        assert data["valid"] is False

    def test_compare(self, svc: RutService) -> None:
        assert svc.compare("12345678", "12.345.678-5").data["equal"] is True
        assert svc.compare("12345678", "87654321").data["equal"] is False

    def test_sample(self, svc: RutService) -> None:
        result = svc.sample("dash")
        assert result.data["style"] == "dash"
        assert validate_full(result.data["rut"])


class TestMemoSetting:
    def test_memo_disabled_by_config(self, tmp_path: Path) -> None:
        (tmp_path / "rutctl.toml").write_text("[checksum]\nmemo = false\n")
        svc = RutService(RutSettings.from_cli(start_dir=tmp_path))
        svc.validate("12.345.678-5")
        assert checksum.memo_enabled() is False
        assert checksum.memo_size() == 0

    def test_reset_memo(self, svc: RutService) -> None:
        svc.validate("12.345.678-5")
        result = svc.reset_memo()
        assert result.ok
        assert result.data["cleared"] == 1
        assert checksum.memo_size() == 0
