"""Tests for free-text cleaning helpers."""

import pytest

from chipload.core.text import (
    clean_letters,
    clean_material,
    clean_number,
    clean_unit,
    round_half_up,
)


class TestCleanNumber:
    @pytest.mark.parametrize("text, expected", [
        ("6mm", 6.0),
        (" 6.35 mm", 6.35),
        ("1/4 inch", 0.25),
        ("1 1/4in", 1.25),
        (".5 in", 0.5),
        ("2", 2.0),
        ("3 (balanced)", 3.0),
    ])
    def test_numbers(self, text, expected):
        assert clean_number(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["", "mm", "two"])
    def test_no_number_is_zero(self, text):
        assert clean_number(text) == 0.0

    def test_zero_denominator_falls_back(self):
        assert clean_number("1/0") == pytest.approx(1.0)

    @pytest.mark.parametrize("text", [
        "9" * 400 + "mm",
        "9" * 400 + "/" + "9" * 400,
        "1 " + "9" * 400 + "/1",
    ])
    def test_overflow_is_zero(self, text):
        assert clean_number(text) == 0.0


class TestCleanWords:
    def test_letters(self):
        assert clean_letters("6 mm") == "mm"
        assert clean_letters("1/4 inch") == "inch"
        assert clean_letters("12") == ""

    def test_unit_keeps_slash(self):
        assert clean_unit(" mm/min.") == "mm/min"
        assert clean_unit("in/m ") == "in/m"

    def test_material(self):
        assert clean_material("  Wood ") == "Wood"
        assert clean_material("Acrylic  -  plastic") == "Acrylic plastic"
        assert clean_material("MDF_2") == "MDF"
        assert clean_material("") == ""


class TestRoundHalfUp:
    @pytest.mark.parametrize("value, expected", [
        (6.35, 6),
        (2.5, 3),
        (3.5, 4),
        (3.49, 3),
        (-2.5, -3),
    ])
    def test_rounding(self, value, expected):
        assert round_half_up(value) == expected
