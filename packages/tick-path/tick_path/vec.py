"""2D point alias and coordinate normalization."""
from __future__ import annotations

from collections.abc import Sequence

Point = tuple[float, float]


def point(value: Sequence[float]) -> Point:
    """Normalize a 2-sequence of numbers to a float tuple."""
    try:
        n = len(value)
    except TypeError:
        raise ValueError(f"Expected 2 coordinates, got {value!r}") from None
    if n != 2:
        raise ValueError(f"Expected 2 coordinates, got {n}")
    x, y = value
    return (float(x), float(y))
