"""
TouchSynth — CORE CONTRACTS

Shared value types passed between the gesture builder, the curve
generator, the dispatcher and the sinks. Everything here is immutable.

Coordinates are pixels. Times are integer milliseconds relative to the
DOWN sample of the gesture they belong to.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional


# ============================================================
# Geometry
# ============================================================

@dataclass(frozen=True)
class Position:
    x: float
    y: float

    def __add__(self, other: "Position") -> "Position":
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Position") -> "Position":
        return Position(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned rectangle of a target, in the global frame."""
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def size_center(self) -> Position:
        """Centre of the rectangle in the target's own (local) frame."""
        return Position(self.width / 2, self.height / 2)


@dataclass(frozen=True)
class Target:
    """
    A component gestures are performed on.

    global_bounds is None when the component has no rendered extent;
    every gesture on such a target fails.
    """
    tag: str
    global_bounds: Optional[Bounds] = None


# f(t_ms) -> Position, defined on [0, duration]
GesturePath = Callable[[float], Position]

# f(t_ms) -> coordinate, one axis of a GesturePath
ScalarCurve = Callable[[float], float]


# ============================================================
# Dispatcher → Sink
# ============================================================

class Phase(str, Enum):
    DOWN = "DOWN"
    MOVE = "MOVE"
    UP = "UP"


@dataclass(frozen=True)
class Sample:
    """A single pointer sample handed to the input sink."""
    position: Position
    t_ms: int
    phase: Phase


def lerp(start: float, stop: float, fraction: float) -> float:
    # exact at both ends: lerp(a, b, 0) == a and lerp(a, b, 1) == b
    return start * (1.0 - fraction) + stop * fraction
