from __future__ import annotations

import logging
import os

from touchsynth.core.config import preset_by_name
from touchsynth.core.errors import VelocityRangeError
from touchsynth.core.types import Bounds, Position, Target
from touchsynth.dispatcher.input_dispatcher import InputDispatcher
from touchsynth.gestures.scope import GestureScope
from touchsynth.injector.uinput_touch import UInputTouch
from touchsynth.runtime.profile import apply_profile, load_profile

SCREEN_W, SCREEN_H = 1920, 1080


def main():
	logging.basicConfig(level=os.environ.get("TOUCHSYNTH_LOG", "WARNING"))

	preset = preset_by_name(os.environ.get("TOUCHSYNTH_PRESET", "Default"))
	preset = apply_profile(preset, load_profile())

	touch = UInputTouch.create(SCREEN_W, SCREEN_H, real_time=True)
	screen = Target("screen", Bounds(0, 0, SCREEN_W, SCREEN_H))
	scope = GestureScope(screen, InputDispatcher(touch, preset))

	print(f"[TouchSynth] demo gestures, preset {preset.name.value}, "
	      f"event period {preset.timing.event_period_ms}ms")
	try:
		scope.click()
		scope.swipe_up()
		scope.swipe_down()
		scope.swipe_left()
		scope.swipe_right()
		try:
			scope.swipe_with_velocity(Position(400, 540), Position(1500, 540), end_velocity=3000)
		except VelocityRangeError as exc:
			print(f"[TouchSynth] fling skipped: {exc}")
	finally:
		touch.close()
		print("done")


if __name__ == "__main__":
	main()
