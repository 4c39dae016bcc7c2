"""
"Did you mean" ranking for unknown unit and substance names.
"""

from typing import Iterable, List


def shift_distance(a: str, b: str) -> int:
    """
    Distance between two names: length difference plus the fewest
    character mismatches over any shift of the shorter name along the longer one.

    Offsets run over [0, d) where d is the length difference; equal-length
    names are compared at offset 0 only.
    """
    short, long = (a, b) if len(a) <= len(b) else (b, a)
    d = len(long) - len(short)

    best = None
    for k in range(max(d, 1)):
        mismatches = sum(1 for i, ch in enumerate(short) if ch != long[i + k])
        if best is None or mismatches < best:
            best = mismatches

    return d + best


def rank_suggestions(name: str, candidates: Iterable[str]) -> List[str]:
    """Sort candidates by distance to name; ties keep table order."""
    return sorted(candidates, key=lambda c: shift_distance(name, c))
