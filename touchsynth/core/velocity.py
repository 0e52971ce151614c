"""
Trailing-window velocity estimation, the way a consumer's velocity
tracker measures the release velocity of a gesture.

A polynomial is fitted per axis through (age, position) of the samples
no older than `VelocityTuning.window_ms` relative to the last one; the
velocity is the slope of that polynomial at age 0.
Velocity swipes are shaped for this estimator, and tests use it to
check them.
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from touchsynth.core.config import VelocityTuning
from touchsynth.core.types import Sample


def _slope_at_zero(ages: np.ndarray, values: np.ndarray, degree: int) -> float:
    deg = min(degree, len(ages) - 1)
    if deg < 1:
        return 0.0
    coeffs = np.polyfit(ages, values, deg)
    # highest power first; the linear term is the derivative at age 0
    return float(coeffs[-2])


def estimate_velocity(
    samples: Sequence[Sample],
    tuning: VelocityTuning = VelocityTuning(),
) -> Tuple[float, float]:
    """
    Return (vx, vy) in px/s at the time of the last sample.

    Window and degree come from `tuning`, the same VelocityTuning whose
    window_ms the curve generator straightens paths against.
    """
    if len(samples) < 2:
        return 0.0, 0.0

    t_last = samples[-1].t_ms
    recent = [s for s in samples if t_last - s.t_ms <= tuning.window_ms]

    ages = np.array([s.t_ms - t_last for s in recent], dtype=float)
    xs = np.array([s.position.x for s in recent], dtype=float)
    ys = np.array([s.position.y for s in recent], dtype=float)

    vx = _slope_at_zero(ages, xs, tuning.fit_degree) * 1000.0
    vy = _slope_at_zero(ages, ys, tuning.fit_degree) * 1000.0
    return vx, vy
