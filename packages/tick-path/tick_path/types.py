"""Direction enum and transition records for path walking."""
from __future__ import annotations

import enum
from dataclasses import dataclass


class Direction(enum.Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass(frozen=True, slots=True)
class Transition:
    """Segment change reported after a traversal completes. Not walker state."""

    from_index: int
    to_index: int
    from_direction: Direction
    to_direction: Direction

    @property
    def reversed(self) -> bool:
        return self.from_direction is not self.to_direction
