"""
Gesture paths.

A path maps time in ms on [0, duration] to a global Position. Paths are
built per axis from scalar curves and paired up, so all of the velocity
math below is one-dimensional.
"""

from __future__ import annotations

import logging
import math
from typing import Tuple

from touchsynth.core.errors import PreconditionError, VelocityRangeError
from touchsynth.core.types import GesturePath, Position, ScalarCurve, lerp

logger = logging.getLogger(__name__)


def _sign(x: float) -> int:
    return (x > 0) - (x < 0)


def _require_positive_duration(duration_ms: float) -> None:
    if duration_ms <= 0:
        raise PreconditionError(f"Duration must be positive, got {duration_ms}ms")


def pair_curves(fx: ScalarCurve, fy: ScalarCurve) -> GesturePath:
    def path(t: float) -> Position:
        return Position(fx(t), fy(t))
    return path


def linear_curve(start: float, end: float, duration_ms: float) -> ScalarCurve:
    _require_positive_duration(duration_ms)

    def curve(t: float) -> float:
        return lerp(start, end, t / duration_ms)
    return curve


def linear_path(start: Position, end: Position, duration_ms: float) -> GesturePath:
    return pair_curves(
        linear_curve(start.x, end.x, duration_ms),
        linear_curve(start.y, end.y, duration_ms),
    )


def decompose_velocity(start: Position, end: Position, velocity_px_s: float) -> Tuple[float, float]:
    """
    Split a speed along start -> end into x and y components, in px/ms.

    Same as (cos, sin) of atan2(dy, dx), but computed as dx / |d| and
    dy / |d| so an axis the swipe does not move along gets exactly 0.
    A zero-length swipe points along +x, like atan2(0, 0) == 0.
    """
    delta = end - start
    per_ms = velocity_px_s / 1000
    length = math.hypot(delta.x, delta.y)
    if length == 0:
        return per_ms, 0.0
    return delta.x / length * per_ms, delta.y / length * per_ms


def create_velocity_curve(
    duration_ms: float,
    start: float,
    end: float,
    velocity: float,
    window_ms: float = 100,
) -> ScalarCurve:
    """
    Build f(t) = a*(t-D)^2 + b*(t-D) + c with D = duration_ms such that
    f(0) = start, f(D) = end and f'(D) = velocity (px/ms).

    From f(D) = end: c = end. From f'(D) = velocity: b = velocity.
    From f(0) = start:
        a*D^2 - velocity*D + end = start
        a = (start - end + velocity*D) / D^2

    High velocities give a parabola that first moves away from `end`,
    like a bow being drawn. The consumer's velocity tracker only looks at
    the last `window_ms` of samples, so before D - window_ms the path is
    free: it is replaced by a straight line from `start` to f(D - window_ms).
    That only works when f(D - window_ms) lies on the `end` side of
    `start`; otherwise VelocityRangeError is raised.
    """
    _require_positive_duration(duration_ms)
    d = float(duration_ms)
    a = (start - end + velocity * d) / (d * d)

    def curve(t: float) -> float:
        if t <= 0:
            return start
        dt = t - d
        return a * dt * dt + velocity * dt + end

    direction = _sign(end - start)
    if _sign(curve(1) - start) == direction:
        return curve

    cutoff_ms = d - window_ms
    if cutoff_ms <= 0:
        logger.warning(
            "curve %s -> %s over %sms at %s px/ms starts off in the wrong direction "
            "and is too short to straighten (window %sms)",
            start, end, duration_ms, velocity, window_ms,
        )
        raise VelocityRangeError(
            f"Creating a gesture between {start} and {end} with a duration of "
            f"{duration_ms}ms and a resulting velocity of {velocity} px/ms starts off "
            f"in the wrong direction, and the duration leaves no time before the "
            f"last {window_ms}ms to correct it"
        )

    cutoff_value = curve(cutoff_ms)
    if _sign(cutoff_value - start) != direction:
        logger.warning(
            "curve %s -> %s over %sms at %s px/ms leaves the range at t=%sms (%s)",
            start, end, duration_ms, velocity, cutoff_ms, cutoff_value,
        )
        raise VelocityRangeError(
            f"Creating a gesture between {start} and {end} with a duration of "
            f"{duration_ms}ms and a resulting velocity of {velocity} px/ms results "
            f"in a movement that goes outside of the range [{start}..{end}]"
        )

    logger.debug("straightening curve %s -> %s before t=%sms", start, end, cutoff_ms)

    def corrected(t: float) -> float:
        if t < cutoff_ms:
            return lerp(start, cutoff_value, t / cutoff_ms)
        return curve(t)
    return corrected


def create_velocity_path(
    start: Position,
    end: Position,
    duration_ms: float,
    velocity_px_s: float,
    window_ms: float = 100,
) -> GesturePath:
    """Path from start to end whose velocity at duration_ms is velocity_px_s along start -> end."""
    vx, vy = decompose_velocity(start, end, velocity_px_s)
    fx = create_velocity_curve(duration_ms, start.x, end.x, vx, window_ms)
    fy = create_velocity_curve(duration_ms, start.y, end.y, vy, window_ms)
    return pair_curves(fx, fy)
