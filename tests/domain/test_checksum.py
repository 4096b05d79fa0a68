"""Tests for the modulo-11 checksum engine and its memo."""

import threading

import pytest

from rutctl.domain import checksum
from rutctl.domain.checksum import (
    calculate_check_character,
    check_character_for,
    memo_size,
    reset_memo,
    set_memo_enabled,
)

_CHECK_CHARACTERS = set("0123456789K")


class TestCalculateCheckCharacter:
    @pytest.mark.parametrize(
        "body,expected",
        [
            ("12345678", "5"),
            ("11111111", "1"),
            ("800000", "K"),
            ("24965106", "0"),
            ("7654321", "6"),
            ("20123456", "5"),
        ],
    )
    def test_known_values(self, body: str, expected: str) -> None:
        assert calculate_check_character(body) == expected

    def test_ignores_formatting(self) -> None:
        assert calculate_check_character("12.345.678") == "5"

    @pytest.mark.parametrize("body", ["", "abc", "-.-"])
    def test_no_digits_returns_none(self, body: str) -> None:
        assert calculate_check_character(body) is None

    def test_multiplier_wraps_after_seven(self) -> None:
        """The 7th digit from the right is weighted 2 again, not 8."""
        # 1 in position 7 from the right: 1*2 = 2, 11 - 2 = 9
        assert calculate_check_character("1000000") == "9"
        # 1 in position 6 from the right: 1*7 = 7, 11 - 7 = 4
        assert calculate_check_character("100000") == "4"

    def test_all_zero_body(self) -> None:
        assert calculate_check_character("000000") == "0"

    @pytest.mark.parametrize("length", [6, 7, 8])
    def test_deterministic_and_in_alphabet(self, length: int) -> None:
        for start in range(0, 10):
            body = "".join(str((start + i * 7) % 10) for i in range(length))
            first = calculate_check_character(body)
            assert first in _CHECK_CHARACTERS
            assert calculate_check_character(body) == first


class TestMemo:
    def test_results_are_memoised(self) -> None:
        calculate_check_character("12345678")
        calculate_check_character("12.345.678")
        assert memo_size() == 1

    def test_empty_input_is_not_memoised(self) -> None:
        calculate_check_character("")
        assert memo_size() == 0

    def test_reset_clears(self) -> None:
        calculate_check_character("12345678")
        reset_memo()
        assert memo_size() == 0

    def test_reset_on_empty_memo_is_safe(self) -> None:
        reset_memo()
        reset_memo()
        assert memo_size() == 0

    def test_disabled_memo_gives_same_results(self) -> None:
        cached = calculate_check_character("24965106")
        set_memo_enabled(False)
        reset_memo()
        assert calculate_check_character("24965106") == cached
        assert memo_size() == 0

    def test_memo_matches_uncached_function(self) -> None:
        for body in ("12345678", "800000", "7654321", "24965106"):
            assert calculate_check_character(body) == check_character_for(body)

    def test_concurrent_callers(self) -> None:
        bodies = [f"{n:08d}" for n in range(10_000_000, 10_000_200)]
        errors: list[str] = []

        def worker() -> None:
            for body in bodies:
                if calculate_check_character(body) != check_character_for(body):
                    errors.append(body)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert memo_size() == len(bodies)

    def test_memo_enabled_flag(self) -> None:
        assert checksum.memo_enabled() is True
        set_memo_enabled(False)
        assert checksum.memo_enabled() is False
