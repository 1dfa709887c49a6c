"""Read-only segment export for debug drawing. Not used by the walker's stepping."""
from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

from tick_path.segment import LineSegment
from tick_path.vec import Point

if TYPE_CHECKING:
    from tick_path.walker import PathWalker

SegmentLines = tuple[tuple[Point, Point], ...]


class SegmentRenderer(Protocol):
    def draw_line(self, a: Point, b: Point) -> None: ...


def segment_lines(segments: Iterable[LineSegment]) -> SegmentLines:
    return tuple((seg.a, seg.b) for seg in segments)


def draw_segments(walker: PathWalker, renderer: SegmentRenderer) -> int:
    """Push every exported segment to ``renderer``. Returns the number drawn.

    Draws nothing unless the walker was configured with ``draw_segments``.
    """
    lines = walker.debug_lines()
    for a, b in lines:
        renderer.draw_line(a, b)
    return len(lines)
