"""Ping-pong -- a walker driven by a fixed-timestep host loop.

Demonstrates:
- Building a path from LineSegments
- Configuring step_factor through WalkerConfig
- Stepping the walker once per tick with a constant dt
- Reacting to segment transitions through on_transition

Run: python examples/ping_pong.py --tps 10 --ticks 60
"""

import argparse
import logging

from tick_path import LineSegment, PathWalker, Transition, WalkerConfig


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="tick-path ping-pong demo")
    p.add_argument("--tps", type=int, default=10, help="Ticks per second (default: 10)")
    p.add_argument("--ticks", type=int, default=60, help="Ticks to run (default: 60)")
    p.add_argument("--speed", type=float, default=8.0, help="Step factor (default: 8.0)")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args()


def on_transition(walker: PathWalker, transition: Transition) -> None:
    turn = "  (turn around)" if transition.reversed else ""
    print(
        f"  -> segment {transition.to_index} {transition.to_direction.value}{turn}"
    )


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.tps <= 0:
        raise SystemExit("--tps must be positive")

    path = [
        LineSegment((0.0, 0.0), (4.0, 1.0)),
        LineSegment((4.0, 1.0), (8.0, 0.0)),
        LineSegment((8.0, 0.0), (12.0, 2.0)),
    ]
    walker = PathWalker(
        path, WalkerConfig(step_factor=args.speed), on_transition=on_transition
    )

    dt = 1.0 / args.tps
    print("=== Ping-pong ===\n")
    for tick in range(1, args.ticks + 1):
        x, y = walker.step(dt)
        print(
            f"  tick {tick:3d}  |  seg {walker.index} {walker.direction.value:8s}"
            f"  |  ({x:6.2f}, {y:6.2f})"
        )

    print(f"\nDone after {args.ticks} ticks, {walker.transitions} transitions.")


if __name__ == "__main__":
    main()
