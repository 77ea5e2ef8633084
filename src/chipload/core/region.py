"""Shapely geometry of the (rpm, feed) feasible region.

The solver works on a coarse grid; this module describes the exact
region so the report can show the rpm/feed window that the chipload
band leaves inside the machine envelope.
"""

from __future__ import annotations

from typing import Optional

from shapely.geometry import LineString, Polygon, box
from shapely.geometry.base import BaseGeometry


def feasible_region(
    x_min: float,
    x_max: float,
    y_max: float,
    a: Optional[float],
    b: float,
) -> BaseGeometry:
    """Machine box intersected with the chipload band ``b*x <= y <= a*x``.

    ``a=None`` leaves the band open upwards (single-slope region).  When
    ``a == b`` the band collapses to a line and so does the result.
    """
    envelope = box(x_min, 0.0, x_max, y_max)

    if a is None:
        top = max(y_max, b * x_max) + 1.0
        band = Polygon([
            (x_min, b * x_min),
            (x_max, b * x_max),
            (x_max, top),
            (x_min, top),
        ])
    elif a == b:
        band = LineString([(x_min, b * x_min), (x_max, b * x_max)])
    else:
        band = Polygon([
            (x_min, b * x_min),
            (x_max, b * x_max),
            (x_max, a * x_max),
            (x_min, a * x_min),
        ])

    return envelope.intersection(band)


def region_window(
    region: BaseGeometry,
) -> Optional[tuple[float, float, float, float]]:
    """(rpm_lo, feed_lo, rpm_hi, feed_hi) of *region*, or None if empty."""
    if region.is_empty:
        return None
    return tuple(float(v) for v in region.bounds)
