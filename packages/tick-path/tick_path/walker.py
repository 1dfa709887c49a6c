"""PathWalker - ping-pong traversal of a segment path, stepped by elapsed time."""
from __future__ import annotations

import dataclasses
import logging
from collections.abc import Sequence
from typing import Callable

from tick_path.config import WalkerConfig
from tick_path.debug import SegmentLines, segment_lines
from tick_path.segment import LineSegment
from tick_path.types import Direction, Transition
from tick_path.vec import Point

logger = logging.getLogger(__name__)

TransitionCallback = Callable[["PathWalker", Transition], None]


class PathWalker:
    """Moves back and forth along an ordered sequence of line segments.

    The x coordinate advances linearly with ``phase_timer * step_factor``
    and y is taken from the line through ``start`` and ``target``. Speed is
    therefore only exact on horizontal segments, and a segment with no
    horizontal span never completes: the coefficient stays at 0 and the
    walker parks at its start.

    An empty path gives an inert walker whose ``step`` always returns None.
    """

    def __init__(
        self,
        segments: Sequence[LineSegment],
        config: WalkerConfig | None = None,
        *,
        step_factor: float | None = None,
        on_transition: TransitionCallback | None = None,
    ) -> None:
        for seg in segments:
            if not isinstance(seg, LineSegment):
                raise TypeError(
                    f"Path items must be LineSegment, got {type(seg).__name__}"
                )
        if config is None:
            config = WalkerConfig()
        if step_factor is not None:
            config = dataclasses.replace(config, step_factor=step_factor)

        self._segments: tuple[LineSegment, ...] = tuple(segments)
        self._config = config
        self._on_transition = on_transition
        self._has_path = bool(self._segments)
        self._index = 0
        self._direction = Direction.FORWARD
        self._start: Point = (0.0, 0.0)
        self._target: Point = (0.0, 0.0)
        self._phase_timer = 0.0
        self._coefficient = 0.0
        self._position: Point | None = None
        self._transitions = 0

        if not self._has_path:
            logger.debug("PathWalker created with an empty path; walker is inert")
            return
        self.reset()
        logger.debug(
            "PathWalker created: %d segments, step_factor=%s",
            len(self._segments),
            config.step_factor,
        )

    # -- Read-only state --

    @property
    def segments(self) -> tuple[LineSegment, ...]:
        return self._segments

    @property
    def config(self) -> WalkerConfig:
        return self._config

    @property
    def step_factor(self) -> float:
        return self._config.step_factor

    @property
    def has_path(self) -> bool:
        return self._has_path

    @property
    def index(self) -> int:
        return self._index

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def start(self) -> Point:
        return self._start

    @property
    def target(self) -> Point:
        return self._target

    @property
    def phase_timer(self) -> float:
        return self._phase_timer

    @property
    def coefficient(self) -> float:
        return self._coefficient

    @property
    def position(self) -> Point | None:
        return self._position

    @property
    def transitions(self) -> int:
        return self._transitions

    @property
    def current_segment(self) -> LineSegment | None:
        if not self._has_path:
            return None
        return self._segments[self._index]

    # -- Stepping --

    def reset(self) -> None:
        """Return to the initial state: first segment, moving forward."""
        if not self._has_path:
            return
        first = self._segments[0]
        self._index = 0
        self._direction = Direction.FORWARD
        self._start, self._target = first.a, first.b
        self._phase_timer = 0.0
        self._coefficient = 0.0
        self._position = None
        self._transitions = 0

    def step(self, dt: float) -> Point | None:
        """Advance by ``dt`` and return the new position (None when inert).

        Completion is detected from the coefficient computed on the previous
        call, so the segment change happens one step after the coefficient
        reaches 1.
        """
        if not self._has_path:
            return None

        # Also catches NaN.
        if not dt >= 0:
            logger.warning("Invalid dt %r clamped to 0", dt)
            dt = 0.0

        self._phase_timer += dt

        if self._coefficient >= 1.0:
            transition = self._advance()
            self._phase_timer = 0.0
            self._transitions += 1
            logger.debug(
                "Transition %s[%d] -> %s[%d]",
                transition.from_direction.value,
                transition.from_index,
                transition.to_direction.value,
                transition.to_index,
            )
            if self._on_transition is not None:
                self._on_transition(self, transition)

        stepped = self._phase_timer * self._config.step_factor
        start, target = self._start, self._target
        if self._direction is Direction.BACKWARD:
            x = start[0] - stepped
        else:
            x = start[0] + stepped

        span = target[0] - start[0]
        self._coefficient = 0.0 if span == 0 else (x - start[0]) / span

        self._position = (x, start[1] + self._coefficient * (target[1] - start[1]))
        return self._position

    def _advance(self) -> Transition:
        """Select the next segment, reversing direction at either end."""
        old_index = self._index
        old_direction = self._direction
        last = len(self._segments) - 1

        if old_direction is Direction.FORWARD:
            if self._index < last:
                self._index += 1
                seg = self._segments[self._index]
                self._start, self._target = seg.a, seg.b
            else:
                # Walk the last segment again, end to start.
                self._index = last
                seg = self._segments[self._index]
                self._start, self._target = seg.b, seg.a
                self._direction = Direction.BACKWARD
        else:
            if self._index > 0:
                self._index -= 1
                seg = self._segments[self._index]
                self._start, self._target = seg.b, seg.a
            else:
                self._index = 0
                seg = self._segments[0]
                self._start, self._target = seg.a, seg.b
                self._direction = Direction.FORWARD

        return Transition(old_index, self._index, old_direction, self._direction)

    # -- Diagnostics --

    def debug_lines(self) -> SegmentLines:
        """Endpoint pairs for every segment when ``draw_segments`` is enabled."""
        if not self._config.draw_segments:
            return ()
        return segment_lines(self._segments)
