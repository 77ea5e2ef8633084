"""Plain text report of recommended speeds and feeds.

Every run appends to the same report file, so a user keeps a running
notebook of their tools: numbered warnings first, then either the
result block or the numbered error that stopped the run.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from ..core.calculator import Calculation
from ..core.errors import Issue
from .format import banner, checkbox, fmt, heading, rule

CHECKLIST = [
    "Go over CAD model and check dimensions.",
    "Go over CAD model and check what is the smallest path width in the "
    "design (should be equal or more than the tool diameter being used).",
    "Go over the tool paths and check if all the parameters are correct.",
    "Does the reference point and stock material in CAD correctly match "
    "the machine setup?",
    "Is the stock material firmly secured in place?",
    "Is any of the fixing hardware in the way of the toolpath?",
    "Is the CNC correctly homed?",
    "Is the CNC tool correctly fixed?",
    "Is the CNC tool length measured?",
    "Is the CNC zero point correctly setup matching the CAD reference "
    "point for the toolpaths?",
    "Observe from a safe place, if possible, the machine running, take "
    "notes of what you see.",
    "Observe the machined piece, take notes.",
    "If you observed something out of the ordinary or the results were "
    "unsatisfactory, collect your notes, search for possible solutions "
    "and/or ask for help.",
]


def error_lines(issue: Issue) -> list[str]:
    return [
        "============= ERRORS =============",
        "",
        f"ERROR {int(issue.code)}: {issue.message}",
        "",
        "==================================",
        "",
        "",
    ]


def warning_lines(issues: Iterable[Issue]) -> list[str]:
    issues = list(issues)
    if not issues:
        return []
    lines = ["============= WARNINGS ============="]
    for issue in issues:
        lines += [f"Warning {int(issue.code)}: {issue.message}", ""]
    return lines


def _window_line(calc: Calculation) -> str:
    if calc.window is None:
        return "Feasible window: none inside the machine envelope"
    rpm_lo, feed_lo, rpm_hi, feed_hi = calc.window
    return (
        f"Feasible window: {rpm_lo:.0f}–{rpm_hi:.0f} rpm, "
        f"{feed_lo:.0f}–{feed_hi:.0f} mm/m"
    )


def result_lines(calc: Calculation) -> list[str]:
    """Report block for a successful calculation."""
    dia = fmt(calc.tool_diameter)
    depth = fmt(calc.tool_diameter / 2)
    unit = calc.tool_unit

    lines = ["", ""]
    lines += banner(
        f"NEW TOOL: {dia} {unit} ({calc.tooth_count} flutes) for {calc.material}"
    )
    lines += [
        "",
        f"Parameters optimized for job quality {int(calc.quality)} "
        f"({calc.quality.label}):",
        f"Feedrate: {calc.feed_rate:.1f} {calc.out_unit}",
        f"RPM:      {calc.point.rpm} rpm",
        "",
        f"Machine:  {calc.machine}",
        f"Chipload: {fmt(calc.entry.chipload, 4)} mm/tooth "
        f"@ {calc.diameter_mm} mm (rpm factor {fmt(calc.entry.rpm_factor)})",
        _window_line(calc),
        "",
        "Remember that this is a good starting point, first you should try "
        "testing it in a",
        f"small piece of {calc.material} and note how it goes. Adjust it as "
        "needed or try to get",
        "different values by changing the job speed/finish (or other "
        "parameters). When testing",
        f"start with a relatively low depth of cut of {depth} {unit} and "
        "increment it until a max of",
        f"{dia} {unit}. If dealing with metals like aluminum or steel don't "
        f"go above {depth} {unit}.",
        "",
        "",
    ]

    if calc.checklist:
        lines += heading("CHECKLIST")
        lines.append("")
        lines += [checkbox(item) for item in CHECKLIST]
        lines += ["", ""]

    if calc.list_materials:
        lines += heading(f"{len(calc.materials)} Materials Supported:")
        lines.append("")
        lines += calc.materials
        lines.append("")

    lines += [rule(), "", ""]
    return lines


class ReportWriter:
    """Appends report blocks to a text file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def get_lines(self, calc: Calculation) -> list[str]:
        return warning_lines(calc.issues.warnings) + result_lines(calc)

    def write(self, calc: Calculation) -> None:
        self._append(self.get_lines(calc))

    def write_error(self, error: Issue, warnings: Iterable[Issue] = ()) -> None:
        self._append(warning_lines(warnings) + error_lines(error))

    def _append(self, lines: list[str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write("\n".join(lines) + "\n")
