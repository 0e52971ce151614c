import threading
import time

import pytest

from touchsynth.core.config import DEFAULT_PRESET, FINE_PRESET
from touchsynth.core.curves import linear_path
from touchsynth.core.errors import PreconditionError
from touchsynth.core.types import Phase, Position, lerp
from touchsynth.dispatcher.input_dispatcher import InputDispatcher, click_samples, sample_path
from touchsynth.injector.recorder import RecordingSink

START = Position(5, 7)
END = Position(23, 29)


def moves(samples):
    return [s for s in samples if s.phase == Phase.MOVE]


def expected_move_count(duration, period):
    if duration % period:
        return (duration - 1) // period
    return duration // period - 1


def test_line_scenario():
    samples = sample_path(linear_path(START, END, 50), 50, 10)

    assert [(s.t_ms, s.phase) for s in samples] == [
        (0, Phase.DOWN),
        (10, Phase.MOVE),
        (20, Phase.MOVE),
        (30, Phase.MOVE),
        (40, Phase.MOVE),
        (50, Phase.UP),
    ]
    assert samples[0].position == START
    assert samples[-1].position == END
    for s in moves(samples):
        assert START.x < s.position.x < END.x
        assert START.y < s.position.y < END.y


@pytest.mark.parametrize("period", [9, 10, 11])
@pytest.mark.parametrize("duration", [1, 9, 10, 11, 25, 50, 99, 100])
def test_down_moves_up_layout(duration, period):
    samples = sample_path(linear_path(START, END, duration), duration, period)

    first, last = samples[0], samples[-1]
    assert (first.phase, first.t_ms, first.position) == (Phase.DOWN, 0, START)
    assert (last.phase, last.t_ms, last.position) == (Phase.UP, duration, END)

    ms = moves(samples)
    assert len(ms) == expected_move_count(duration, period)
    assert [s.t_ms for s in ms] == [k * period for k in range(1, len(ms) + 1)]
    assert all(0 < s.t_ms < duration for s in ms)

    times = [s.t_ms for s in samples]
    assert times == sorted(set(times))

    for s in ms:
        fraction = s.t_ms / duration
        assert s.position.x == pytest.approx(lerp(START.x, END.x, fraction))
        assert s.position.y == pytest.approx(lerp(START.y, END.y, fraction))


def test_shorter_period_only_adds_moves():
    path = linear_path(START, END, 50)
    coarse = sample_path(path, 50, 10)
    fine = sample_path(path, 50, 5)
    assert len(moves(fine)) == 9
    assert fine[0] == coarse[0]
    assert fine[-1] == coarse[-1]


def test_sampling_is_deterministic():
    path = linear_path(START, END, 73)
    assert sample_path(path, 73, 10) == sample_path(path, 73, 10)


@pytest.mark.parametrize("duration", [0, -5, 12.5])
def test_bad_duration(duration):
    with pytest.raises(PreconditionError):
        sample_path(lambda t: START, duration, 10)


@pytest.mark.parametrize("period", [0, -10, 2.5])
def test_bad_period(period):
    with pytest.raises(PreconditionError):
        sample_path(lambda t: START, 50, period)


def test_click_samples():
    down, up = click_samples(START, 10)
    assert (down.phase, down.t_ms, down.position) == (Phase.DOWN, 0, START)
    assert (up.phase, up.t_ms, up.position) == (Phase.UP, 10, START)


def test_dispatcher_sends_one_sequence_per_gesture():
    sink = RecordingSink()
    d = InputDispatcher(sink, DEFAULT_PRESET)
    d.send_swipe(START, END, 50)
    d.send_click(END)
    assert len(sink.gestures) == 2
    assert len(sink.gestures[0]) == 6
    assert [s.phase for s in sink.last] == [Phase.DOWN, Phase.UP]


def test_dispatcher_uses_preset_period():
    sink = RecordingSink()
    InputDispatcher(sink, FINE_PRESET).send_swipe(START, END, 50)
    assert [s.t_ms for s in moves(sink.last)] == [5, 10, 15, 20, 25, 30, 35, 40, 45]


def test_dispatcher_sends_nothing_on_bad_duration():
    sink = RecordingSink()
    with pytest.raises(PreconditionError):
        InputDispatcher(sink).send_swipe(START, END, 0)
    assert sink.gestures == []


class SlowSink:
    """Writes samples one at a time, yielding between them."""

    def __init__(self):
        self.written = []

    def accept(self, samples):
        for s in samples:
            self.written.append(s)
            time.sleep(0.0005)


def test_concurrent_gestures_do_not_interleave():
    sink = SlowSink()
    d = InputDispatcher(sink)

    def worker(y):
        for _ in range(3):
            d.send_swipe(Position(0, y), Position(100, y), 40)

    threads = [threading.Thread(target=worker, args=(y,)) for y in (1, 2, 3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    # 9 gestures, each DOWN MOVE MOVE MOVE UP on a single y
    assert len(sink.written) == 9 * 5
    for i in range(0, len(sink.written), 5):
        chunk = sink.written[i:i + 5]
        assert [s.phase for s in chunk] == [Phase.DOWN] + [Phase.MOVE] * 3 + [Phase.UP]
        assert len({s.position.y for s in chunk}) == 1
