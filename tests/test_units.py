"""Tests for units module."""

import pytest

from chipload.core.units import (
    LENGTH_UNITS,
    RATE_UNITS,
    Unit,
    UnitMismatchError,
    UnknownUnitError,
    convert,
)


class TestUnit:
    def test_inch_to_mm(self):
        assert Unit.INCH.to_base(1.0) == pytest.approx(25.4)

    def test_mm_to_mm(self):
        assert Unit.MM.to_base(25.4) == pytest.approx(25.4)

    def test_inch_from_mm(self):
        assert Unit.IN.from_base(25.4) == pytest.approx(1.0)

    def test_rate_flag(self):
        assert Unit.MM_PER_MIN.is_rate
        assert not Unit.INCHES.is_rate

    def test_lookup_is_case_insensitive(self):
        assert Unit.lookup(" MM/M ") is Unit.MM_PER_MIN

    def test_lookup_unknown(self):
        with pytest.raises(UnknownUnitError) as info:
            Unit.lookup("furlong")
        assert info.value.unit == "furlong"

    def test_dictionaries(self):
        assert LENGTH_UNITS == ["mm", "in", "inch", "inches"]
        assert RATE_UNITS == [
            "mm/s", "mm/m", "m/m", "inch/s", "inch/m", "in/s", "in/m", "feet/m",
        ]


class TestConvert:
    def test_inch_to_mm(self):
        assert convert(1.0, "in", "mm") == pytest.approx(25.4)

    def test_quarter_inch(self):
        assert convert(0.25, "inch", "mm") == pytest.approx(6.35)

    @pytest.mark.parametrize("unit", [u.value for u in Unit])
    def test_identity(self, unit):
        assert convert(123.4, unit, unit) == pytest.approx(123.4)

    def test_feed_mm_per_min_to_mm_per_s(self):
        assert convert(600, "mm/m", "mm/s") == pytest.approx(10.0)

    def test_feed_mm_per_min_to_inch_per_min(self):
        assert convert(254, "mm/m", "in/m") == pytest.approx(10.0)

    def test_feed_metres_per_min(self):
        assert convert(4080, "mm/m", "m/m") == pytest.approx(4.08)

    def test_feet_per_min(self):
        assert convert(304.8, "mm/m", "feet/m") == pytest.approx(1.0)

    def test_unknown_unit_is_error_not_zero(self):
        with pytest.raises(UnknownUnitError):
            convert(10.0, "mm", "parsec")
        with pytest.raises(UnknownUnitError):
            convert(10.0, "cubit", "mm")

    def test_length_to_rate_rejected(self):
        with pytest.raises(UnitMismatchError):
            convert(10.0, "mm", "mm/s")
