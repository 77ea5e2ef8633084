"""Machine envelopes used to bound the speed/feed search.

Feeds are in mm/min.  The Tormach mills are rated in inches per minute;
their limits are converted here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..core.units import FEED_UNIT, Unit, convert


@dataclass(frozen=True)
class MachineProfile:
    """Spindle and feed limits of one machine."""

    model: str
    min_rpm: int
    max_rpm: int
    max_feed: int     # mm/min
    power_w: int = 0

    def __str__(self) -> str:
        return (
            f"{self.model}  "
            f"{self.min_rpm}–{self.max_rpm} RPM  "
            f"{self.max_feed} mm/min"
            + (f"  {self.power_w} W" if self.power_w else "")
        )


class MachineModel(Enum):
    ROUTER = "router"
    PCNC_440 = "440"
    PCNC_770 = "770"
    PCNC_1100 = "1100"


def _ipm(value: float) -> int:
    return round(convert(value, Unit.IN_PER_MIN, FEED_UNIT))


_PROFILES: dict[MachineModel, MachineProfile] = {
    MachineModel.ROUTER: MachineProfile(
        model="Hobby router",
        min_rpm=10000,
        max_rpm=24000,
        max_feed=4080,
        power_w=3000,
    ),
    MachineModel.PCNC_440: MachineProfile(
        model="Tormach PCNC 440",
        min_rpm=100,
        max_rpm=10000,
        max_feed=_ipm(110.0),
    ),
    MachineModel.PCNC_770: MachineProfile(
        model="Tormach PCNC 770",
        min_rpm=175,
        max_rpm=10000,
        max_feed=_ipm(110.0),
    ),
    MachineModel.PCNC_1100: MachineProfile(
        model="Tormach PCNC 1100",
        min_rpm=175,
        max_rpm=10000,
        max_feed=_ipm(135.0),
    ),
}


def get_profile(model: MachineModel | str) -> MachineProfile:
    return _PROFILES[MachineModel(model)]


def list_profiles() -> list[MachineProfile]:
    return list(_PROFILES.values())
