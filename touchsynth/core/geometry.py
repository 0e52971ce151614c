from __future__ import annotations

from touchsynth.core.errors import MissingBoundsError
from touchsynth.core.types import Bounds, Position, Target


def get_global_bounds(target: Target) -> Bounds:
    bounds = target.global_bounds
    if bounds is None:
        raise MissingBoundsError(
            f"Target {target.tag!r} has no layout to resolve coordinates on"
        )
    return bounds


def resolve(target: Target, local: Position) -> Position:
    """Map a position relative to the target's top-left corner to the global frame."""
    bounds = get_global_bounds(target)
    return local + Position(bounds.left, bounds.top)
