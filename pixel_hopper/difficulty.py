"""World clock and difficulty curve.

Everything here is a pure function of ``(ticks, score)`` so two simulations
fed the same history always agree on speed and gravity.
"""

from __future__ import annotations

from typing import NamedTuple

from .config import (
    BASE_GRAVITY,
    BASE_SPEED,
    GRAVITY_RANGE,
    SCORE_PER_SPEED,
    SCORE_RAMP,
    SPEED_RANGE,
    TIME_RAMP_TICKS,
)
from .utils import clamp


class WorldParams(NamedTuple):
    speed: float
    gravity: float
    difficulty: float


def difficulty_for(ticks: int, score: float) -> float:
    """Normalized difficulty in [0, 1]; time and score ramps add up and saturate."""
    return clamp(ticks / TIME_RAMP_TICKS + score / SCORE_RAMP, 0.0, 1.0)


def advance(ticks: int, score: float) -> WorldParams:
    d = difficulty_for(ticks, score)
    return WorldParams(
        speed=BASE_SPEED + d * SPEED_RANGE,
        gravity=BASE_GRAVITY + d * GRAVITY_RANGE,
        difficulty=d,
    )


def score_gain(speed: float) -> float:
    """Distance score earned by one tick of scrolling at ``speed``."""
    return speed * SCORE_PER_SPEED
