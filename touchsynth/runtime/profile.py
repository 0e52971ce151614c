"""
Per-user overrides on top of a preset, stored as flat JSON in
~/.config/touchsynth/profile.json. Only the known keys are read; others
are ignored.
"""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Optional

from touchsynth.core.config import Preset


_TIMING_KEYS = ("event_period_ms",)
_SWIPE_KEYS = ("default_duration_ms", "edge_fuzz_factor")
_VELOCITY_KEYS = ("window_ms", "fit_degree")


def _profile_path() -> Path:
    p = Path.home() / ".config" / "touchsynth"
    p.mkdir(parents=True, exist_ok=True)
    return p / "profile.json"


def save_profile(preset: Preset) -> None:
    data = {}
    for k in _TIMING_KEYS:
        data[k] = getattr(preset.timing, k)
    for k in _SWIPE_KEYS:
        data[k] = getattr(preset.swipe, k)
    for k in _VELOCITY_KEYS:
        data[k] = getattr(preset.velocity, k)
    _profile_path().write_text(json.dumps(data, indent=2))


def load_profile() -> Optional[dict]:
    p = _profile_path()
    if not p.exists():
        return None
    return json.loads(p.read_text())


def _pick(prof: dict, keys) -> dict:
    return {k: prof[k] for k in keys if k in prof}


def apply_profile(preset: Preset, prof: Optional[dict]) -> Preset:
    if not prof:
        return preset
    return replace(
        preset,
        timing=replace(preset.timing, **_pick(prof, _TIMING_KEYS)),
        swipe=replace(preset.swipe, **_pick(prof, _SWIPE_KEYS)),
        velocity=replace(preset.velocity, **_pick(prof, _VELOCITY_KEYS)),
    )
