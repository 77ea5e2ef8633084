"""Unit enum and conversion helpers.

Length units share the millimetre as base, rate units share mm/s.
"""

from __future__ import annotations

from enum import Enum


class UnknownUnitError(ValueError):
    """Raised when a unit name is not in the conversion table."""

    def __init__(self, unit: str):
        super().__init__(f"Unknown unit: {unit!r}")
        self.unit = unit


class UnitMismatchError(ValueError):
    """Raised when converting between a length and a rate unit."""


class Unit(Enum):
    MM = "mm"
    IN = "in"
    INCH = "inch"
    INCHES = "inches"
    MM_PER_S = "mm/s"
    MM_PER_MIN = "mm/m"
    M_PER_MIN = "m/m"
    INCH_PER_S = "inch/s"
    INCH_PER_MIN = "inch/m"
    IN_PER_S = "in/s"
    IN_PER_MIN = "in/m"
    FEET_PER_MIN = "feet/m"

    @property
    def is_rate(self) -> bool:
        return "/" in self.value

    @property
    def multiplier(self) -> float:
        """Size of one of this unit expressed in the base unit."""
        return _MULTIPLIERS[self]

    def to_base(self, value: float) -> float:
        return value * self.multiplier

    def from_base(self, value: float) -> float:
        return value / self.multiplier

    def label(self) -> str:
        return self.value

    @classmethod
    def lookup(cls, name: str | Unit) -> Unit:
        """Return the member named *name* (exact, case-insensitive)."""
        if isinstance(name, Unit):
            return name
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise UnknownUnitError(name) from None


_MULTIPLIERS: dict[Unit, float] = {
    Unit.MM: 1.0,
    Unit.IN: 25.4,
    Unit.INCH: 25.4,
    Unit.INCHES: 25.4,
    Unit.MM_PER_S: 1.0,
    Unit.MM_PER_MIN: 1.0 / 60.0,
    Unit.M_PER_MIN: 1000.0 / 60.0,
    Unit.INCH_PER_S: 25.4,
    Unit.INCH_PER_MIN: 25.4 / 60.0,
    Unit.IN_PER_S: 25.4,
    Unit.IN_PER_MIN: 25.4 / 60.0,
    Unit.FEET_PER_MIN: 304.8 / 60.0,
}

# Match dictionaries, in the order used for tie-breaking
LENGTH_UNITS: list[str] = [u.value for u in Unit if not u.is_rate]
RATE_UNITS: list[str] = [u.value for u in Unit if u.is_rate]

# Solver feed rates are expressed in this unit
FEED_UNIT = Unit.MM_PER_MIN


def convert(value: float, from_unit: str | Unit, to_unit: str | Unit) -> float:
    """Convert *value* from *from_unit* to *to_unit*.

    Raises UnknownUnitError if either unit is missing from the table and
    UnitMismatchError when mixing a length unit with a rate unit.
    """
    src = Unit.lookup(from_unit)
    dst = Unit.lookup(to_unit)
    if src.is_rate != dst.is_rate:
        raise UnitMismatchError(
            f"Cannot convert between {src.value!r} and {dst.value!r}"
        )
    return value * (src.multiplier / dst.multiplier)
