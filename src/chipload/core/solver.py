"""Spindle speed / feed rate operating point search.

The feasible region lives in the (rpm, feed) plane:

* machine box      ``x_min <= x <= x_max`` and ``0 <= y <= y_max``
* chipload band    ``b*x <= y <= a*x`` with ``a >= b >= 0``

where x is rpm and y is feed in mm/min.  A point of ``(0, 0)`` is
returned when nothing feasible exists; callers must treat it as
"infeasible", never as a real zero speed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Grid resolution of the search, matching real spindle/feed dial steps
RPM_STEP = 100
FEED_STEP = 50


@dataclass(frozen=True)
class OperatingPoint:
    """Spindle speed (rpm) and feed rate (mm/min)."""

    rpm: int
    feed_rate: int

    @property
    def is_zero(self) -> bool:
        """True for the "no feasible point" sentinel."""
        return self.rpm == 0 and self.feed_rate == 0

    @property
    def is_degenerate(self) -> bool:
        """True when either axis is zero, which is never a usable cut."""
        return self.rpm == 0 or self.feed_rate == 0

    def scaled(self, rpm_scale: float, feed_scale: float) -> OperatingPoint:
        """Scale both axes, truncating toward zero."""
        return OperatingPoint(int(self.rpm * rpm_scale),
                              int(self.feed_rate * feed_scale))


NO_POINT = OperatingPoint(0, 0)


def feasible(
    point: OperatingPoint,
    x_min: int,
    x_max: int,
    y_max: int,
    a: Optional[float],
    b: float,
) -> bool:
    """Boundary-inclusive membership test for the feasible region.

    ``a=None`` drops the upper chipload line (single-slope region).
    """
    x, y = point.rpm, point.feed_rate
    return (
        x_min <= x <= x_max
        and 0 <= y <= y_max
        and y >= b * x
        and (a is None or y <= a * x)
    )


def solve_maximizing(
    x_min: int,
    x_max: int,
    y_max: int,
    a: float,
    b: float,
    maximize_y: bool,
) -> OperatingPoint:
    """Grid search for the feasible point with the largest feed or rpm.

    With *maximize_y* the search walks rpm in RPM_STEP increments and, at
    each rpm, scans the feeds allowed by the chipload band in FEED_STEP
    increments.  Otherwise it walks feeds and scans the rpm range allowed
    at each feed.  Returns NO_POINT when no grid point is feasible.
    """
    best = NO_POINT
    best_value: Optional[int] = None

    if maximize_y:
        for x in range(x_min, x_max + 1, RPM_STEP):
            y_low = max(0, int(b * x))
            y_high = min(y_max, int(a * x))
            for y in range(y_low, y_high + 1, FEED_STEP):
                p = OperatingPoint(x, y)
                if feasible(p, x_min, x_max, y_max, a, b) and (
                    best_value is None or y > best_value
                ):
                    best, best_value = p, y
    else:
        for y in range(0, y_max + 1, FEED_STEP):
            # y <= a*x bounds rpm from below, y >= b*x from above
            x_low = max(x_min, int(y / a)) if a > 0 else x_min
            x_high = min(x_max, int(y / b)) if b > 0 else x_max
            for x in range(x_low, x_high + 1, RPM_STEP):
                p = OperatingPoint(x, y)
                if feasible(p, x_min, x_max, y_max, a, b) and (
                    best_value is None or x > best_value
                ):
                    best, best_value = p, x

    return best


def solve_midpoint(
    x_min: int,
    x_max: int,
    y_max: int,
    slope: float,
) -> OperatingPoint:
    """Balanced point: middle rpm, feed halfway between the chipload line
    and the machine maximum.

    Only the lower line ``y >= slope*x`` is enforced; if the midpoint falls
    under it the feed is raised onto the line, even past *y_max*.
    """
    mid_x = (x_min + x_max) // 2
    y_floor = max(0, int(slope * mid_x))
    mid_y = (y_floor + y_max) // 2

    if mid_y < slope * mid_x:
        mid_y = int(slope * mid_x)

    return OperatingPoint(mid_x, mid_y)
