from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Sequence

from evdev import AbsInfo, UInput, ecodes as e

from touchsynth.core.types import Phase, Sample


def _axis(size: int) -> AbsInfo:
    return AbsInfo(value=0, min=0, max=max(0, size - 1), fuzz=0, flat=0, resolution=0)


@dataclass
class UInputTouch:
    """
    Single-contact touchscreen injector using Linux uinput (type B
    multitouch protocol, slot 0 only).

    With real_time=True each sample is written at its own timestamp
    relative to the first one; otherwise samples are written back to back.
    """
    ui: UInput
    width: int
    height: int
    real_time: bool = False
    _tracking_id: int = 0

    @classmethod
    def create(cls, width: int, height: int, real_time: bool = False) -> "UInputTouch":
        caps = {
            e.EV_KEY: [e.BTN_TOUCH],
            e.EV_ABS: [
                (e.ABS_X, _axis(width)),
                (e.ABS_Y, _axis(height)),
                (e.ABS_MT_SLOT, AbsInfo(value=0, min=0, max=0, fuzz=0, flat=0, resolution=0)),
                (e.ABS_MT_TRACKING_ID, AbsInfo(value=0, min=0, max=65535, fuzz=0, flat=0, resolution=0)),
                (e.ABS_MT_POSITION_X, _axis(width)),
                (e.ABS_MT_POSITION_Y, _axis(height)),
            ],
        }
        ui = UInput(caps, name="TouchSynth Virtual Touchscreen", input_props=[e.INPUT_PROP_DIRECT])
        return cls(ui=ui, width=width, height=height, real_time=real_time)

    def accept(self, samples: Sequence[Sample]) -> None:
        t0 = time.monotonic()
        for s in samples:
            if self.real_time:
                remaining = t0 + s.t_ms / 1000.0 - time.monotonic()
                if remaining > 0:
                    time.sleep(remaining)

            x, y = self._clamp(s.position.x, s.position.y)
            if s.phase == Phase.DOWN:
                self._down(x, y)
            elif s.phase == Phase.MOVE:
                self._move(x, y)
            else:
                self._up(x, y)

    def _clamp(self, x: float, y: float) -> tuple:
        xi = min(max(int(round(x)), 0), self.width - 1)
        yi = min(max(int(round(y)), 0), self.height - 1)
        return xi, yi

    def _position(self, x: int, y: int) -> None:
        self.ui.write(e.EV_ABS, e.ABS_MT_POSITION_X, x)
        self.ui.write(e.EV_ABS, e.ABS_MT_POSITION_Y, y)
        self.ui.write(e.EV_ABS, e.ABS_X, x)
        self.ui.write(e.EV_ABS, e.ABS_Y, y)

    def _down(self, x: int, y: int) -> None:
        self._tracking_id = (self._tracking_id + 1) % 65536
        self.ui.write(e.EV_ABS, e.ABS_MT_SLOT, 0)
        self.ui.write(e.EV_ABS, e.ABS_MT_TRACKING_ID, self._tracking_id)
        self._position(x, y)
        self.ui.write(e.EV_KEY, e.BTN_TOUCH, 1)
        self.ui.syn()

    def _move(self, x: int, y: int) -> None:
        self.ui.write(e.EV_ABS, e.ABS_MT_SLOT, 0)
        self._position(x, y)
        self.ui.syn()

    def _up(self, x: int, y: int) -> None:
        # final position first so the release lands exactly on the last sample
        self._move(x, y)
        self.ui.write(e.EV_ABS, e.ABS_MT_TRACKING_ID, -1)
        self.ui.write(e.EV_KEY, e.BTN_TOUCH, 0)
        self.ui.syn()

    def close(self) -> None:
        self.ui.close()
