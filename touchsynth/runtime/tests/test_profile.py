from pathlib import Path

import pytest

from touchsynth.core.config import DEFAULT_PRESET, FINE_PRESET, PresetName, preset_by_name
from touchsynth.runtime.profile import apply_profile, load_profile, save_profile


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    return tmp_path


def test_no_profile(home):
    assert load_profile() is None
    assert apply_profile(DEFAULT_PRESET, None) is DEFAULT_PRESET


def test_profile_round_trip(home):
    save_profile(FINE_PRESET)
    assert (home / ".config" / "touchsynth" / "profile.json").exists()

    prof = load_profile()
    assert prof["event_period_ms"] == 5
    assert apply_profile(DEFAULT_PRESET, prof).timing == FINE_PRESET.timing


def test_partial_profile_overrides_only_its_keys():
    p = apply_profile(DEFAULT_PRESET, {"window_ms": 80, "edge_fuzz_factor": 0.1, "unknown": 1})
    assert p.velocity.window_ms == 80
    assert p.swipe.edge_fuzz_factor == 0.1
    assert p.velocity.fit_degree == DEFAULT_PRESET.velocity.fit_degree
    assert p.timing == DEFAULT_PRESET.timing
    assert p.name == PresetName.DEFAULT


def test_preset_by_name():
    assert preset_by_name("fine") is FINE_PRESET
    assert preset_by_name(" Default ") is DEFAULT_PRESET
    with pytest.raises(KeyError):
        preset_by_name("turbo")


def test_profile_cannot_touch_fixed_limits():
    p = apply_profile(DEFAULT_PRESET, {"min_duration_ms": 5, "event_period_ms": 8})
    assert p.timing.event_period_ms == 8
    assert not hasattr(p.velocity, "min_duration_ms")
