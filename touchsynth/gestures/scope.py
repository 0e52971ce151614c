from __future__ import annotations

from typing import Optional

from touchsynth.core.config import EDGE_SWIPE_DURATION_MS, MIN_VELOCITY_SWIPE_MS, Preset
from touchsynth.core.curves import create_velocity_path
from touchsynth.core.errors import PreconditionError
from touchsynth.core.geometry import get_global_bounds, resolve
from touchsynth.core.types import Position, Target
from touchsynth.dispatcher.input_dispatcher import InputDispatcher


class GestureScope:
    """
    Gestures on one target.

    All positions passed in are in the target's local frame, (0, 0) being
    its top-left corner. Every method raises MissingBoundsError when the
    target has no bounds, and nothing is dispatched in that case.

    Example:
        scope = GestureScope(Target("list", Bounds(0, 100, 400, 600)), dispatcher)
        scope.swipe_up()
    """

    def __init__(self, target: Target, dispatcher: InputDispatcher) -> None:
        self.target = target
        self.dispatcher = dispatcher

    @property
    def preset(self) -> Preset:
        return self.dispatcher.preset

    def _duration(self, duration_ms: Optional[int]) -> int:
        if duration_ms is None:
            return self.preset.swipe.default_duration_ms
        return duration_ms

    def click(self, position: Optional[Position] = None) -> None:
        """Click at `position`, or in the middle of the target."""
        if position is None:
            position = get_global_bounds(self.target).size_center
        self.dispatcher.send_click(resolve(self.target, position))

    def swipe(self, start: Position, end: Position, duration_ms: Optional[int] = None) -> None:
        """
        Swipe along the straight line from start to end.

        duration_ms defaults to the preset's swipe duration (200ms) and must
        be positive: a 0ms swipe would put DOWN and UP on the same timestamp,
        so it raises PreconditionError.
        """
        duration_ms = self._duration(duration_ms)
        if duration_ms <= 0:
            raise PreconditionError(f"Duration must be positive, got {duration_ms}ms")
        global_start = resolve(self.target, start)
        global_end = resolve(self.target, end)
        self.dispatcher.send_swipe(global_start, global_end, duration_ms)

    def swipe_with_velocity(
        self,
        start: Position,
        end: Position,
        end_velocity: float,
        duration_ms: Optional[int] = None,
    ) -> None:
        """
        Swipe from start to end such that a trailing-window velocity tracker
        measures `end_velocity` (px/s, along start -> end) at the release.

        The path is a parabola per axis; if that would set off away from
        `end`, the part before the tracker's window is replaced by a straight
        line. Raises VelocityRangeError when even that cannot work.
        """
        duration_ms = self._duration(duration_ms)
        tuning = self.preset.velocity
        if end_velocity < 0:
            raise PreconditionError(f"Velocity cannot be {end_velocity}, it must be positive")
        if duration_ms < MIN_VELOCITY_SWIPE_MS:
            raise PreconditionError(
                f"Duration must be at least {MIN_VELOCITY_SWIPE_MS}ms because "
                f"velocity requires at least 3 input events"
            )

        global_start = resolve(self.target, start)
        global_end = resolve(self.target, end)
        path = create_velocity_path(
            global_start, global_end, duration_ms, end_velocity, window_ms=tuning.window_ms
        )
        self.dispatcher.send_swipe_path(path, duration_ms)

    # Edge swipes start slightly inside the edge they leave from and end
    # on the opposite edge, through the middle of the target. They always
    # take EDGE_SWIPE_DURATION_MS, whatever the preset or profile says.

    def swipe_up(self) -> None:
        bounds = get_global_bounds(self.target)
        fuzz = self.preset.swipe.edge_fuzz_factor
        x = bounds.width / 2
        start = Position(x, bounds.height * (1 - fuzz))
        end = Position(x, 0.0)
        self.swipe(start, end, EDGE_SWIPE_DURATION_MS)

    def swipe_down(self) -> None:
        bounds = get_global_bounds(self.target)
        fuzz = self.preset.swipe.edge_fuzz_factor
        x = bounds.width / 2
        start = Position(x, bounds.height * fuzz)
        end = Position(x, bounds.height)
        self.swipe(start, end, EDGE_SWIPE_DURATION_MS)

    def swipe_left(self) -> None:
        bounds = get_global_bounds(self.target)
        fuzz = self.preset.swipe.edge_fuzz_factor
        y = bounds.height / 2
        start = Position(bounds.width * (1 - fuzz), y)
        end = Position(0.0, y)
        self.swipe(start, end, EDGE_SWIPE_DURATION_MS)

    def swipe_right(self) -> None:
        bounds = get_global_bounds(self.target)
        fuzz = self.preset.swipe.edge_fuzz_factor
        y = bounds.height / 2
        start = Position(bounds.width * fuzz, y)
        end = Position(bounds.width, y)
        self.swipe(start, end, EDGE_SWIPE_DURATION_MS)
