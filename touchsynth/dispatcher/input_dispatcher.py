from __future__ import annotations

import logging
from threading import Lock
from typing import List, Sequence, Tuple

from touchsynth.core.config import DEFAULT_PRESET, Preset
from touchsynth.core.curves import linear_path
from touchsynth.core.errors import PreconditionError
from touchsynth.core.types import GesturePath, Phase, Position, Sample

logger = logging.getLogger(__name__)


def _check_period(period_ms: int) -> None:
    if int(period_ms) != period_ms or period_ms <= 0:
        raise PreconditionError(f"Event period must be a positive whole number of ms, got {period_ms}")


def sample_path(path: GesturePath, duration_ms: int, period_ms: int) -> Tuple[Sample, ...]:
    """
    Discretize `path` into DOWN, MOVE*, UP.

    DOWN at t=0, a MOVE at every multiple of `period_ms` strictly inside
    (0, duration_ms), UP at t=duration_ms. The last interval is shorter
    than the period when the duration is not a multiple of it.
    """
    _check_period(period_ms)
    if int(duration_ms) != duration_ms or duration_ms <= 0:
        raise PreconditionError(f"Swipe duration must be a positive whole number of ms, got {duration_ms}")
    duration_ms = int(duration_ms)
    period_ms = int(period_ms)

    samples: List[Sample] = [Sample(path(0), 0, Phase.DOWN)]
    for t in range(period_ms, duration_ms, period_ms):
        samples.append(Sample(path(t), t, Phase.MOVE))
    samples.append(Sample(path(duration_ms), duration_ms, Phase.UP))
    return tuple(samples)


def click_samples(position: Position, period_ms: int) -> Tuple[Sample, ...]:
    """DOWN and UP at the same spot, one event period apart."""
    _check_period(period_ms)
    period_ms = int(period_ms)
    return (
        Sample(position, 0, Phase.DOWN),
        Sample(position, period_ms, Phase.UP),
    )


class InputDispatcher:
    """
    Turns global-frame gestures into sample sequences and hands each one,
    complete, to the sink.

    The sink is held exclusively for one sequence at a time, so gestures
    sent from different threads never interleave. Share one dispatcher per
    sink.
    """

    def __init__(self, sink, preset: Preset = DEFAULT_PRESET) -> None:
        self.sink = sink
        self.preset = preset
        self._lock = Lock()

    @property
    def event_period_ms(self) -> int:
        return self.preset.timing.event_period_ms

    def send_click(self, position: Position) -> None:
        self._send(click_samples(position, self.event_period_ms))

    def send_swipe(self, start: Position, end: Position, duration_ms: int) -> None:
        self.send_swipe_path(linear_path(start, end, duration_ms), duration_ms)

    def send_swipe_path(self, path: GesturePath, duration_ms: int) -> None:
        self._send(sample_path(path, duration_ms, self.event_period_ms))

    def _send(self, samples: Sequence[Sample]) -> None:
        with self._lock:
            logger.debug(
                "dispatching %d samples over %dms (%s -> %s)",
                len(samples), samples[-1].t_ms, samples[0].position, samples[-1].position,
            )
            self.sink.accept(samples)
