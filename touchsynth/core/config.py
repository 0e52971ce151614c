"""
TouchSynth — Defaults (Presets)

The event period is an environment-level setting: it is read by the
dispatcher, never passed to individual gestures.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# Fixed, not part of any preset or profile.
# 3 samples minimum for the consumer's velocity fit
MIN_VELOCITY_SWIPE_MS = 25
EDGE_SWIPE_DURATION_MS = 200


class PresetName(str, Enum):
    DEFAULT = "Default"
    FINE = "Fine"
    COARSE = "Coarse"


@dataclass(frozen=True)
class DispatchTiming:
    event_period_ms: int = 10


@dataclass(frozen=True)
class SwipeTuning:
    default_duration_ms: int = 200
    # distance of an edge swipe's start from the edge, as a fraction of the
    # target's size; the exact edge may trigger system edge gestures
    edge_fuzz_factor: float = 0.083


@dataclass(frozen=True)
class VelocityTuning:
    # trailing window the consumer's velocity tracker fits; the curve
    # fallback threshold must move with it
    window_ms: int = 100
    # polynomial degree of the consumer's fit, used by core.velocity
    fit_degree: int = 2


@dataclass(frozen=True)
class Preset:
    name: PresetName
    timing: DispatchTiming = DispatchTiming()
    swipe: SwipeTuning = SwipeTuning()
    velocity: VelocityTuning = VelocityTuning()


DEFAULT_PRESET = Preset(
    name=PresetName.DEFAULT,
    timing=DispatchTiming(event_period_ms=10),
)

# roughly a 200Hz digitizer
FINE_PRESET = Preset(
    name=PresetName.FINE,
    timing=DispatchTiming(event_period_ms=5),
)

# one sample per 60Hz frame
COARSE_PRESET = Preset(
    name=PresetName.COARSE,
    timing=DispatchTiming(event_period_ms=16),
)

PRESETS = {
    PresetName.DEFAULT: DEFAULT_PRESET,
    PresetName.FINE: FINE_PRESET,
    PresetName.COARSE: COARSE_PRESET,
}


def preset_by_name(name: str) -> Preset:
    """Case-insensitive lookup, e.g. from the TOUCHSYNTH_PRESET env var."""
    for key, preset in PRESETS.items():
        if key.value.lower() == name.strip().lower():
            return preset
    known = ", ".join(k.value for k in PRESETS)
    raise KeyError(f"Unknown preset {name!r} (known: {known})")
