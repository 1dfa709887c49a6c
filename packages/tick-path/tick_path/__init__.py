"""tick-path - Ping-pong traversal of 2D line segment paths, stepped per tick."""
from __future__ import annotations

from tick_path import vec
from tick_path.config import WalkerConfig
from tick_path.debug import SegmentRenderer, draw_segments, segment_lines
from tick_path.segment import LineSegment
from tick_path.types import Direction, Transition
from tick_path.walker import PathWalker

__all__ = [
    "Direction",
    "LineSegment",
    "PathWalker",
    "SegmentRenderer",
    "Transition",
    "WalkerConfig",
    "draw_segments",
    "segment_lines",
    "vec",
]
