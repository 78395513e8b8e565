"""Tests for result text formatting."""

import pytest

from format_hasil import format_result
from kalkulator import INVALID_RESULT, CalculationResult, calculate_from_fields

QURAN_RESULT = CalculationResult(True, 2, 5, 35.0, False)
IQRA_RESULT = CalculationResult(True, 3, 0, 0.0, True)


class TestFormatResult:

    @pytest.mark.parametrize("style,expected", [
        ("compact", "2H 5B"),
        ("long", "2 Halaman 5 Baris"),
        ("total", "Total: 2 Hal 5 Baris"),
    ])
    def test_quran(self, style, expected):
        assert format_result(QURAN_RESULT, style) == expected

    @pytest.mark.parametrize("style,expected", [
        ("compact", "3 Hal"),
        ("long", "3 Halaman"),
        ("total", "Total: 3 Halaman"),
    ])
    def test_iqra(self, style, expected):
        assert format_result(IQRA_RESULT, style) == expected

    @pytest.mark.parametrize("style", ["compact", "long", "total"])
    def test_invalid_is_placeholder(self, style):
        assert format_result(INVALID_RESULT, style) == "-"
        assert format_result(None, style) == "-"

    def test_zero_pages_still_shown(self):
        result = calculate_from_fields("An-Naba'", 1, "An-Naba'", 10)
        assert format_result(result) == "0H 5B"
        assert format_result(result, "long") == "0 Halaman 5 Baris"

    @pytest.mark.parametrize("style", ["verbose", "", None])
    def test_unknown_style_falls_back_to_compact(self, style):
        assert format_result(QURAN_RESULT, style) == "2H 5B"
        assert format_result(IQRA_RESULT, style) == "3 Hal"
        assert format_result(INVALID_RESULT, style) == "-"
