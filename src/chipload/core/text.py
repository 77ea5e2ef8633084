"""Helpers that pull words and numbers out of free-text request fields."""

from __future__ import annotations

import math
import re

_MIXED = re.compile(r"(\d+)\s+(\d+)\s*/\s*(\d+)")
_FRACTION = re.compile(r"(\d+(?:\.\d+)?)\s*/\s*(\d+(?:\.\d+)?)")
_DECIMAL = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def clean_letters(text: str) -> str:
    """Keep alphabetic characters only (``"6 mm"`` → ``"mm"``)."""
    return "".join(c for c in text if c.isalpha())


def clean_unit(text: str) -> str:
    """Keep letters and ``/`` so rate units survive (``" mm/min."`` → ``"mm/min"``)."""
    return "".join(c for c in text if c.isalpha() or c == "/")


def clean_material(text: str) -> str:
    """Keep letters, collapsing any other run of characters into one space."""
    words = re.split(r"[\W\d_]+", text)
    return " ".join(w for w in words if w)


def clean_number(text: str) -> float:
    """Extract the first number in *text*.

    Understands decimals (``"6.35mm"``), fractions (``"1/4 inch"``) and
    mixed numbers (``"1 1/4in"``).  Returns 0.0 when no number is found
    or the number overflows a float.
    """
    m = _MIXED.search(text)
    if m and float(m.group(3)) != 0:
        value = float(m.group(1)) + float(m.group(2)) / float(m.group(3))
    else:
        m = _FRACTION.search(text)
        if m and float(m.group(2)) != 0:
            value = float(m.group(1)) / float(m.group(2))
        else:
            m = _DECIMAL.search(text)
            if m is None:
                return 0.0
            value = float(m.group(0))
    return value if math.isfinite(value) else 0.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)
