"""Speed and feed recommendation for a single job request.

Cleans the free-text request, matches units and material against the
known vocabularies, looks up the tabulated chipload and searches the
machine envelope for an operating point.  Fatal problems raise a
ChiploadError; recoverable ones are recorded as warnings in an IssueLog
and the calculation continues with a default.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from shapely.geometry.base import BaseGeometry

from ..config.defaults import (
    BAND_CHIPLOAD_SCALE,
    BEGINNER_FEED_SCALE,
    BEGINNER_RPM_SCALE,
    DEFAULT_OUT_UNIT,
    DEFAULT_TOOTH_COUNT,
    MAX_DEVIATION,
    MAX_TOOTH_COUNT,
)
from ..config.machine_profiles import MachineProfile
from .catalog import CatalogEntry, MaterialCatalog
from .errors import (
    CatalogMissError,
    EmptyCatalogError,
    IssueCode,
    IssueLog,
    MissingDiameterError,
    MissingDiameterUnitError,
    MissingMaterialError,
    UnknownDiameterUnitError,
    UnknownMaterialError,
    UnknownOutputUnitError,
)
from .matcher import MAX_MATERIAL_DISTANCE, MAX_UNIT_DISTANCE, best_match
from .region import feasible_region, region_window
from .request import JobRequest
from .solver import OperatingPoint, solve_maximizing, solve_midpoint
from .text import clean_letters, clean_material, clean_number, clean_unit, round_half_up
from .units import FEED_UNIT, LENGTH_UNITS, RATE_UNITS, Unit, convert


class JobQuality(IntEnum):
    """Finish-vs-removal tradeoff selected by the user (1–5)."""

    MAX_FINISH = 1
    FINISH = 2
    BALANCED = 3
    REMOVAL = 4
    MAX_REMOVAL = 5
    BEGINNER = 6     # set by the beginner flag, never typed by the user

    @property
    def label(self) -> str:
        return _QUALITY_LABELS[self]

    @property
    def uses_band(self) -> bool:
        """Quality codes solved over the two-line chipload band."""
        return self in (JobQuality.MAX_FINISH, JobQuality.FINISH,
                        JobQuality.REMOVAL, JobQuality.MAX_REMOVAL)

    @property
    def maximizes_feed(self) -> bool:
        return self in (JobQuality.REMOVAL, JobQuality.MAX_REMOVAL)


_QUALITY_LABELS = {
    JobQuality.MAX_FINISH: "max finish",
    JobQuality.FINISH: "finish",
    JobQuality.BALANCED: "balanced",
    JobQuality.REMOVAL: "material removal",
    JobQuality.MAX_REMOVAL: "max material removal",
    JobQuality.BEGINNER: "beginner",
}


@dataclass
class Calculation:
    """Result of one request, ready to be reported."""

    material: str
    tool_diameter: float          # as typed, in tool_unit
    tool_unit: str
    diameter_mm: int              # rounded, used for the lookup
    tooth_count: int
    quality: JobQuality
    entry: CatalogEntry
    machine: MachineProfile
    point: OperatingPoint         # rpm, feed in mm/min
    feed_rate: float              # feed in out_unit
    out_unit: str
    window: Optional[tuple[float, float, float, float]] = None
    checklist: bool = False
    list_materials: bool = False
    materials: list[str] = field(default_factory=list)
    issues: IssueLog = field(default_factory=IssueLog)
    summary: list[str] = field(default_factory=list)  # Human-readable trace


def operating_point(
    quality: JobQuality,
    chipload: float,
    tooth_count: int,
    machine: MachineProfile,
) -> tuple[OperatingPoint, BaseGeometry]:
    """Solve for *quality* and return the point plus the region searched."""
    x_min, x_max, y_max = machine.min_rpm, machine.max_rpm, machine.max_feed

    if quality.uses_band:
        a = BAND_CHIPLOAD_SCALE * (chipload + MAX_DEVIATION) * tooth_count
        b = max(0.0, BAND_CHIPLOAD_SCALE * (chipload - MAX_DEVIATION) * tooth_count)
        point = solve_maximizing(x_min, x_max, y_max, a, b,
                                 maximize_y=quality.maximizes_feed)
        return point, feasible_region(x_min, x_max, y_max, a, b)

    slope = chipload * tooth_count
    point = solve_midpoint(x_min, x_max, y_max, slope)
    if quality is JobQuality.BEGINNER:
        point = point.scaled(BEGINNER_RPM_SCALE, BEGINNER_FEED_SCALE)
    return point, feasible_region(x_min, x_max, y_max, None, slope)


def _tooth_count(text: str, issues: IssueLog) -> int:
    teeth = clean_number(text)
    if teeth.is_integer() and 0 < teeth <= MAX_TOOTH_COUNT:
        return int(teeth)
    issues.add(IssueCode.INVALID_TOOTH_COUNT, teeth=DEFAULT_TOOTH_COUNT)
    return DEFAULT_TOOTH_COUNT


def _job_quality(text: str, issues: IssueLog) -> JobQuality:
    value = clean_number(text)
    if value == 0:
        issues.add(IssueCode.MISSING_JOB_QUALITY)
        return JobQuality.BALANCED
    if not value.is_integer() or not 1 <= value <= 5:
        issues.add(IssueCode.INVALID_JOB_QUALITY)
        return JobQuality.BALANCED
    return JobQuality(int(value))


def calculate(
    request: JobRequest,
    catalog: MaterialCatalog,
    machine: MachineProfile,
    issues: Optional[IssueLog] = None,
    default_out_unit: str = DEFAULT_OUT_UNIT,
) -> Calculation:
    """Recommend rpm and feed for *request* on *machine*.

    Warnings are appended to *issues* (a fresh log if omitted) so that a
    caller can still report them when a later step raises.

    Raises
    ------
    ChiploadError:
        Missing material/diameter/unit, no match for a unit or the
        material, or no catalog row for the rounded diameter.
    """
    if issues is None:
        issues = IssueLog()

    # ------------------------------------------------------------------
    # Required fields
    # ------------------------------------------------------------------
    material = clean_material(request.material)
    tool_diameter = clean_number(request.tool_diameter)
    tool_unit = clean_letters(request.tool_diameter)
    if not material:
        raise MissingMaterialError()
    if tool_diameter == 0:
        raise MissingDiameterError()
    if not tool_unit:
        raise MissingDiameterUnitError()

    # ------------------------------------------------------------------
    # Optional fields, defaulted with a warning
    # ------------------------------------------------------------------
    tooth_count = _tooth_count(request.tooth_count, issues)
    quality = _job_quality(request.job_quality, issues)
    out_unit = clean_unit(request.out_unit)
    if not out_unit:
        issues.add(IssueCode.MISSING_OUTPUT_UNIT, unit=default_out_unit)
        out_unit = default_out_unit
    if request.beginner:
        quality = JobQuality.BEGINNER

    # ------------------------------------------------------------------
    # Vocabulary matching and lookup
    # ------------------------------------------------------------------
    matched_unit = best_match(tool_unit, LENGTH_UNITS, MAX_UNIT_DISTANCE)
    if matched_unit is None:
        raise UnknownDiameterUnitError(unit=tool_unit)
    diameter_mm = round_half_up(convert(tool_diameter, matched_unit, Unit.MM))

    names = catalog.distinct_material_names()
    if not names:
        raise EmptyCatalogError()
    matched_material = best_match(material, names, MAX_MATERIAL_DISTANCE)
    if matched_material is None:
        raise UnknownMaterialError(material=material)

    entry = catalog.lookup(matched_material, diameter_mm)
    if entry is None:
        available = ", ".join(
            f"{d:g}" for d in catalog.diameters_for(matched_material))
        raise CatalogMissError(material=matched_material, diameter=diameter_mm,
                               available=available)

    summary = [
        f"Material: {material!r} → {matched_material}",
        f"Tool: {tool_diameter:g} {tool_unit!r} → {matched_unit}"
        f" | {diameter_mm} mm | {tooth_count} flutes",
        f"Chipload: {entry.chipload} mm/tooth | rpm factor {entry.rpm_factor}",
    ]

    # ------------------------------------------------------------------
    # Operating point
    # ------------------------------------------------------------------
    point, region = operating_point(quality, entry.chipload, tooth_count, machine)
    if point.is_degenerate or point.feed_rate > machine.max_feed:
        issues.add(IssueCode.INFEASIBLE_POINT,
                   max_feed=machine.max_feed, min_rpm=machine.min_rpm)
    summary.append(
        f"Quality {int(quality)} ({quality.label}) → "
        f"{point.rpm} rpm @ {point.feed_rate} {FEED_UNIT.value}"
    )

    matched_out_unit = best_match(out_unit, RATE_UNITS, MAX_UNIT_DISTANCE)
    if matched_out_unit is None:
        raise UnknownOutputUnitError(unit=out_unit)
    feed_rate = convert(point.feed_rate, FEED_UNIT, matched_out_unit)
    summary.append(f"Feed: {feed_rate:.1f} {matched_out_unit} ({out_unit!r})")

    return Calculation(
        material=matched_material,
        tool_diameter=tool_diameter,
        tool_unit=matched_unit,
        diameter_mm=diameter_mm,
        tooth_count=tooth_count,
        quality=quality,
        entry=entry,
        machine=machine,
        point=point,
        feed_rate=feed_rate,
        out_unit=matched_out_unit,
        window=region_window(region),
        checklist=request.checklist,
        list_materials=request.list_materials,
        materials=names,
        issues=issues,
        summary=summary,
    )
