"""Chipload reference table keyed by (material, tool diameter).

The table is read once from a CSV file with a header row::

    material,diameter,chipload,rpm_factor
    Wood,6,0.15,1.0

``rpm_factor`` is optional and defaults to 1.0.  Diameters are whole
millimetres; lookups use the rounded tool diameter.
"""

from __future__ import annotations

import csv
import math
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional

from .errors import CatalogLoadError


@dataclass(frozen=True)
class CatalogEntry:
    """Recommended chipload for one material and tool diameter."""

    material: str
    diameter: float   # mm
    chipload: float   # mm/tooth
    rpm_factor: float = 1.0

    @property
    def key(self) -> tuple[str, float]:
        return (self.material.lower(), self.diameter)


class MaterialCatalog:
    """Read-only store of CatalogEntry rows.

    (lowercased material, diameter) pairs are unique: later duplicates
    are dropped and the first-seen row is kept.
    """

    def __init__(self, entries: Iterable[CatalogEntry] = ()):
        self._entries: dict[tuple[str, float], CatalogEntry] = {}
        self._names: Optional[list[str]] = None
        for entry in entries:
            self._insert(entry)

    def _insert(self, entry: CatalogEntry) -> bool:
        if entry.key in self._entries:
            return False
        self._entries[entry.key] = entry
        self._names = None
        return True

    @classmethod
    def load(cls, path: Path) -> MaterialCatalog:
        """Build a catalog from the CSV file at *path*.

        Malformed and duplicate rows are skipped with a warning.  Raises
        CatalogLoadError if the file cannot be opened.
        """
        path = Path(path)
        try:
            with path.open(newline="", encoding="utf-8") as fh:
                rows = list(csv.reader(fh))
        except (OSError, UnicodeDecodeError) as exc:
            raise CatalogLoadError(path=str(path)) from exc

        catalog = cls()
        # First row is the header
        for line_no, row in enumerate(rows[1:], start=2):
            if not any(cell.strip() for cell in row):
                continue
            entry = _parse_row(row)
            if entry is None:
                warnings.warn(
                    f"{path.name}:{line_no}: skipping malformed row {row!r}",
                    UserWarning,
                    stacklevel=2,
                )
                continue
            if not catalog._insert(entry):
                warnings.warn(
                    f"{path.name}:{line_no}: duplicate entry for "
                    f"{entry.material} @ {entry.diameter:g} mm ignored",
                    UserWarning,
                    stacklevel=2,
                )
        return catalog

    def lookup(self, material: str, diameter: int) -> Optional[CatalogEntry]:
        """Entry for *material* (case-insensitive) at exactly *diameter* mm."""
        return self._entries.get((material.lower(), float(diameter)))

    def distinct_material_names(self) -> list[str]:
        """Material names, case-insensitively unique, in first-seen order."""
        if self._names is None:
            seen: set[str] = set()
            names: list[str] = []
            for entry in self._entries.values():
                folded = entry.material.lower()
                if folded not in seen:
                    seen.add(folded)
                    names.append(entry.material)
            self._names = names
        return list(self._names)

    def diameters_for(self, material: str) -> list[float]:
        """Sorted diameters available for *material*."""
        folded = material.lower()
        return sorted(e.diameter for e in self._entries.values()
                      if e.material.lower() == folded)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries.values())


def _parse_row(row: list[str]) -> Optional[CatalogEntry]:
    """Parse one CSV row, or return None if it is malformed."""
    if len(row) < 3:
        return None
    material = row[0].strip()
    if not material:
        return None
    try:
        diameter = float(row[1])
        chipload = float(row[2])
        factor_cell = row[3].strip() if len(row) > 3 else ""
        rpm_factor = float(factor_cell) if factor_cell else 1.0
    except ValueError:
        return None
    if not all(math.isfinite(v) for v in (diameter, chipload, rpm_factor)):
        return None
    if diameter <= 0 or chipload < 0:
        return None
    return CatalogEntry(material, diameter, chipload, rpm_factor)
