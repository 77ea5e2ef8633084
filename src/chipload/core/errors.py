"""Numbered errors and warnings raised while computing speeds and feeds.

Codes 1–15 are part of the report format: each maps to one fixed
explanation that is written to the user's report file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class IssueCode(IntEnum):
    CATALOG_LOAD = 1
    EMPTY_CATALOG = 2
    REQUEST_READ = 3
    MISSING_MATERIAL = 4
    MISSING_DIAMETER_UNIT = 5
    MISSING_OUTPUT_UNIT = 6
    INVALID_TOOTH_COUNT = 7
    MISSING_DIAMETER = 8
    MISSING_JOB_QUALITY = 9
    INVALID_JOB_QUALITY = 10
    UNKNOWN_DIAMETER_UNIT = 11
    UNKNOWN_MATERIAL = 12
    CATALOG_MISS = 13
    UNKNOWN_OUTPUT_UNIT = 14
    INFEASIBLE_POINT = 15

    @property
    def severity(self) -> str:
        return "warning" if self in _WARNING_CODES else "error"

    @property
    def template(self) -> str:
        return _MESSAGES[self]


_WARNING_CODES = frozenset({
    IssueCode.MISSING_OUTPUT_UNIT,
    IssueCode.INVALID_TOOTH_COUNT,
    IssueCode.MISSING_JOB_QUALITY,
    IssueCode.INVALID_JOB_QUALITY,
    IssueCode.INFEASIBLE_POINT,
})

_MESSAGES: dict[IssueCode, str] = {
    IssueCode.CATALOG_LOAD:
        "Failed to load the chipload table {path} :(",
    IssueCode.EMPTY_CATALOG:
        "The chipload table has no usable rows, "
        "there are no materials to choose from :(",
    IssueCode.REQUEST_READ:
        "Failed to read the job request from {path}.",
    IssueCode.MISSING_MATERIAL:
        "Ups! You forgot to select a material (ex.: Wood or cOrK).",
    IssueCode.MISSING_DIAMETER_UNIT:
        "Ups! you forgot the tool diameter unit (ex.: 3mm or 1/4 inch).",
    IssueCode.MISSING_OUTPUT_UNIT:
        "You didn't specify the units you want the results to be displayed, "
        "the feedrate was calculated in {unit}.",
    IssueCode.INVALID_TOOTH_COUNT:
        "You didn't specify how many cutting edges your tool has, the "
        "calculation has resumed with {teeth} cutting edges as it is the most "
        "common type. Make sure the tool has {teeth} cutting edges before "
        "resuming with any machining!",
    IssueCode.MISSING_DIAMETER:
        "UPS! You forgot to specify a tool diameter (ex.: 3mm or 1/4 inch).",
    IssueCode.MISSING_JOB_QUALITY:
        "You didn't specify the job quality, the values were calculated "
        "with the default of 3 (balanced).",
    IssueCode.INVALID_JOB_QUALITY:
        "You didn't enter a valid job quality (finish 1 - 5 speed), the "
        "values were calculated with the default of 3 (balanced).",
    IssueCode.UNKNOWN_DIAMETER_UNIT:
        "Ups! It looks like the tool diameter unit {unit!r} isn't valid "
        "(ex.: either mm or iNc3hes are valid but 3hfu349t9 isn't).",
    IssueCode.UNKNOWN_MATERIAL:
        "Ups! It looks like the material {material!r} isn't supported "
        "(ex.: either Wood or WoO0ds are valid/supported but 3hfu349t9 "
        "isn't and Unobtanium isn't supported).",
    IssueCode.CATALOG_MISS:
        "Ups! For {material} the chipload table lacks data to satisfy "
        "the {diameter} mm tool you want to use "
        "(diameters in the table: {available} mm).",
    IssueCode.UNKNOWN_OUTPUT_UNIT:
        "Ups! It looks like the feedrate unit {unit!r} isn't valid "
        "(ex.: mm/m, in/m or feet/m).",
    IssueCode.INFEASIBLE_POINT:
        "BE CAREFUL!!! The feed is to high for the machine. You should get "
        "a tool with less cutting edges, smaller diameter or even both. "
        "Still if you know what you are doing you could try to run the "
        "machine at its maximum feedrate of {max_feed} mm/m @{min_rpm} rpm.",
}


@dataclass
class Issue:
    """A single numbered problem found while handling a request."""

    code: IssueCode
    context: dict[str, Any] = field(default_factory=dict)

    @property
    def severity(self) -> str:
        return self.code.severity

    @property
    def message(self) -> str:
        return self.code.template.format(**self.context)

    def __str__(self) -> str:
        return f"{self.severity.capitalize()} {int(self.code)}: {self.message}"


@dataclass
class IssueLog:
    """Issues collected over one request."""

    issues: list[Issue] = field(default_factory=list)

    def add(self, code: IssueCode, **context: Any) -> Issue:
        issue = Issue(code, context)
        self.issues.append(issue)
        return issue

    @property
    def warnings(self) -> list[Issue]:
        return [i for i in self.issues if i.severity == "warning"]

    @property
    def codes(self) -> list[IssueCode]:
        return [i.code for i in self.issues]

    @property
    def has_errors(self) -> bool:
        return any(i.severity == "error" for i in self.issues)

    @property
    def has_warnings(self) -> bool:
        return any(i.severity == "warning" for i in self.issues)

    @property
    def is_ok(self) -> bool:
        return len(self.issues) == 0


class ChiploadError(Exception):
    """Base class for conditions that stop a request."""

    code: IssueCode

    def __init__(self, **context: Any):
        self.issue = Issue(self.code, context)
        super().__init__(str(self.issue))

    @property
    def exit_code(self) -> int:
        return int(self.code)


class CatalogLoadError(ChiploadError):
    code = IssueCode.CATALOG_LOAD


class EmptyCatalogError(ChiploadError):
    code = IssueCode.EMPTY_CATALOG


class RequestReadError(ChiploadError):
    code = IssueCode.REQUEST_READ


class MissingMaterialError(ChiploadError):
    code = IssueCode.MISSING_MATERIAL


class MissingDiameterUnitError(ChiploadError):
    code = IssueCode.MISSING_DIAMETER_UNIT


class MissingDiameterError(ChiploadError):
    code = IssueCode.MISSING_DIAMETER


class UnknownDiameterUnitError(ChiploadError):
    code = IssueCode.UNKNOWN_DIAMETER_UNIT


class UnknownMaterialError(ChiploadError):
    code = IssueCode.UNKNOWN_MATERIAL


class CatalogMissError(ChiploadError):
    code = IssueCode.CATALOG_MISS


class UnknownOutputUnitError(ChiploadError):
    code = IssueCode.UNKNOWN_OUTPUT_UNIT
