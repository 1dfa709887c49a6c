"""Walker configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WalkerConfig:
    """Immutable configuration for a PathWalker.

    Attributes:
        step_factor: Traversal speed. Horizontal distance covered per unit
            of elapsed time. Zero parks the walker at the segment start.
        draw_segments: Expose segment endpoints through ``debug_lines()``.
    """

    step_factor: float = 1.0
    draw_segments: bool = False

    def __post_init__(self) -> None:
        if not self.step_factor >= 0:
            raise ValueError("step_factor must be non-negative")
