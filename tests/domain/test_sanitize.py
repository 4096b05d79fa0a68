"""Tests for the sanitizer helpers."""

import pytest

from rutctl.domain.sanitize import digits_only, sanitize


class TestSanitize:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("12.345.678-9", "123456789"),
            ("12 345 678-9", "123456789"),
            ("12345678-9", "123456789"),
            ("  12.345.678 - 5 ", "123456785"),
        ],
    )
    def test_strips_punctuation_and_whitespace(self, raw: str, expected: str) -> None:
        assert sanitize(raw) == expected

    def test_uppercases_k(self) -> None:
        assert sanitize("800.000-k") == "800000K"
        assert sanitize("800.000-K") == "800000K"

    def test_drops_other_letters(self) -> None:
        assert sanitize("12a34b56c78d5") == "123456785"

    def test_preserves_order(self) -> None:
        assert sanitize("k1-2") == "K12"

    def test_empty_string(self) -> None:
        assert sanitize("") == ""

    def test_none(self) -> None:
        assert sanitize(None) == ""

    def test_non_string(self) -> None:
        assert sanitize(12345678) == ""

    def test_only_noise(self) -> None:
        assert sanitize("abc.-/") == ""


class TestDigitsOnly:
    def test_keeps_digits(self) -> None:
        assert digits_only("12.345.678-K") == "12345678"

    def test_empty_and_absent(self) -> None:
        assert digits_only("") == ""
        assert digits_only(None) == ""

    def test_no_digits(self) -> None:
        assert digits_only("abc") == ""
