"""LineSegment value type."""
from __future__ import annotations

from dataclasses import dataclass

from tick_path.vec import Point, point


@dataclass(frozen=True, slots=True)
class LineSegment:
    """Straight path piece between endpoints ``a`` and ``b``.

    Endpoints are normalized to ``(float, float)`` tuples. ``a == b`` is
    allowed and yields a degenerate segment the walker parks on.
    """

    a: Point
    b: Point

    def __post_init__(self) -> None:
        object.__setattr__(self, "a", point(self.a))
        object.__setattr__(self, "b", point(self.b))
