"""Job request: the raw free-text answers a user gives about a cut.

Requests are read from a plain text form, one answer per line::

    I'm a beginner: no
    Material to cut: Wood
    Tool Diameter: 1/4 inch
    Tool Flutes: 2
    Job Quality: 3
    I want to get the FeedRate in: mm/m
    Print a generic CNC CHECKLIST for the job: yes
    Print a LIST of supported materials: no

Values are kept as typed; cleaning and validation happen in the
calculator.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from .errors import RequestReadError


@dataclass(frozen=True)
class JobRequest:
    material: str = ""
    tool_diameter: str = ""    # number with embedded unit, e.g. "6mm"
    tooth_count: str = ""
    job_quality: str = ""
    out_unit: str = ""
    beginner: bool = False
    checklist: bool = False
    list_materials: bool = False

    def with_overrides(self, **overrides: Any) -> JobRequest:
        """Copy with every non-None override applied."""
        known = {f.name for f in fields(self)}
        changes = {k: v for k, v in overrides.items()
                   if k in known and v is not None}
        return replace(self, **changes)


# Line prefix → (field, is_flag)
_PROMPTS: dict[str, tuple[str, bool]] = {
    "I'm a beginner:": ("beginner", True),
    "Material to cut:": ("material", False),
    "Tool Diameter:": ("tool_diameter", False),
    "Tool Flutes:": ("tooth_count", False),
    "Job Quality:": ("job_quality", False),
    "I want to get the FeedRate in:": ("out_unit", False),
    "Print a generic CNC CHECKLIST for the job:": ("checklist", True),
    "Print a LIST of supported materials:": ("list_materials", True),
}


def _is_yes(answer: str) -> bool:
    return "y" in answer.lower()


def parse_request(text: str) -> JobRequest:
    """Build a JobRequest from the text of a request form.

    Unknown lines are ignored; a repeated prompt keeps the last answer.
    """
    values: dict[str, Any] = {}
    for line in text.splitlines():
        line = line.rstrip("\r\n")
        for prompt, (name, is_flag) in _PROMPTS.items():
            if line.startswith(prompt):
                answer = line[len(prompt):].strip()
                values[name] = _is_yes(answer) if is_flag else answer
                break
    return JobRequest(**values)


def read_request(path: Path) -> JobRequest:
    """Read the request form at *path*.

    Raises RequestReadError if the file cannot be read.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise RequestReadError(path=str(path)) from exc
    return parse_request(text)
