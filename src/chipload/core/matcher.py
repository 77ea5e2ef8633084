"""Approximate dictionary lookup based on Levenshtein edit distance.

Used to map noisy free text onto a known vocabulary: unit names
("milimeters" → "mm") and material names ("woood" → "Wood").
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

# Unit names are short, so only small typos are accepted
MAX_UNIT_DISTANCE = 3
MAX_MATERIAL_DISTANCE = 6


def levenshtein_distance(s1: str, s2: str) -> int:
    """Case-insensitive edit distance between *s1* and *s2*.

    Insertions, deletions and substitutions each cost 1.
    """
    a = s1.lower()
    b = s2.lower()
    d = np.zeros((len(a) + 1, len(b) + 1), dtype=np.int64)
    d[:, 0] = np.arange(len(a) + 1)
    d[0, :] = np.arange(len(b) + 1)

    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            d[i, j] = min(
                d[i - 1, j] + 1,         # deletion
                d[i, j - 1] + 1,         # insertion
                d[i - 1, j - 1] + cost,  # substitution
            )

    return int(d[len(a), len(b)])


def closest(query: str, dictionary: Sequence[str]) -> tuple[str, int]:
    """Return the nearest candidate in *dictionary* and its distance.

    Ties keep the earliest candidate.  Raises ValueError if *dictionary*
    is empty.
    """
    if len(dictionary) == 0:
        raise ValueError("Cannot match against an empty dictionary")

    best = dictionary[0]
    best_distance = levenshtein_distance(query, best)
    for candidate in dictionary[1:]:
        distance = levenshtein_distance(query, candidate)
        if distance < best_distance:
            best = candidate
            best_distance = distance
    return best, best_distance


def best_match(
    query: str,
    dictionary: Sequence[str],
    max_distance: int,
) -> Optional[str]:
    """Nearest entry of *dictionary* to *query*, or None if none is
    within *max_distance* edits.
    """
    candidate, distance = closest(query, dictionary)
    if distance > max_distance:
        return None
    return candidate
