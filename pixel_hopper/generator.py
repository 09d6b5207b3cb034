"""Procedural platform stream and the decorative star field.

The stream keeps a sliding window of platforms: whatever scrolls off the left
edge is dropped and new platforms are appended on the right until the spawn
horizon is covered again.
"""

from __future__ import annotations

import random

from .config import (
    GROUND_Y,
    INITIAL_PLATFORMS,
    MIN_PLATFORM_WIDTH,
    MIN_PLATFORM_Y,
    PLATFORM_HEIGHT,
    SCREEN_WIDTH,
    SPAWN_HORIZON,
    STAR_COUNT,
    THIN_PLATFORM_FACTOR,
)
from .entities import Platform, Star
from .utils import RandomSource, clamp, uniform


# Generation bounds as functions of difficulty d in [0, 1].
# Harder means wider gaps, narrower platforms and bigger height changes.

def min_gap(d: float) -> float:
    return 70.0 + d * 35.0


def max_gap(d: float) -> float:
    return 190.0 + d * 70.0


def min_width(d: float) -> float:
    return max(92.0, 120.0 - d * 28.0)


def max_width(d: float) -> float:
    return max(140.0, 270.0 - d * 90.0)


def thin_chance(d: float) -> float:
    return 0.2 + d * 0.25


def max_step(d: float) -> float:
    return 70.0 + d * 70.0


def raise_chance(d: float) -> float:
    return 0.35 + d * 0.3


def max_raise(d: float) -> float:
    return 45.0 + d * 45.0


def spawn_next(last: Platform, difficulty: float, rng: RandomSource) -> Platform:
    """Create the platform that follows ``last``.

    Consumes five draws from ``rng`` (six when the extra raise triggers), in
    the order gap, width, thin hazard, vertical step, raise, raise amount.
    """
    d = clamp(difficulty, 0.0, 1.0)

    gap = uniform(rng, min_gap(d), max_gap(d))

    width = uniform(rng, min_width(d), max_width(d))
    if rng.random() < thin_chance(d):
        width *= THIN_PLATFORM_FACTOR

    step = uniform(rng, -max_step(d), max_step(d))
    y = clamp(last.y + step, MIN_PLATFORM_Y, GROUND_Y)
    if rng.random() < raise_chance(d):
        y = max(MIN_PLATFORM_Y, y - (18.0 + rng.random() * max_raise(d)))

    return Platform(last.right + gap, y, max(MIN_PLATFORM_WIDTH, width), PLATFORM_HEIGHT)


def initial_platforms() -> list[Platform]:
    return [Platform(x, GROUND_Y - dy, w, PLATFORM_HEIGHT) for x, dy, w in INITIAL_PLATFORMS]


class PlatformStream:
    """Ordered, never-empty window of platforms sorted by ascending x."""

    def __init__(self, rng: RandomSource | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.platforms: list[Platform] = []
        self.reset()

    def reset(self) -> None:
        self.platforms = initial_platforms()

    @property
    def first(self) -> Platform:
        return self.platforms[0]

    @property
    def last(self) -> Platform:
        return self.platforms[-1]

    def scroll(self, speed: float) -> None:
        for plat in self.platforms:
            plat.update(speed)

    def evict(self) -> int:
        """Drop platforms fully past the left edge, always keeping at least one."""
        dropped = 0
        while len(self.platforms) > 1 and self.platforms[0].offscreen():
            self.platforms.pop(0)
            dropped += 1
        return dropped

    def fill(self, difficulty: float) -> int:
        """Spawn until the rightmost platform starts inside the spawn horizon."""
        spawned = 0
        while self.last.x < SCREEN_WIDTH - SPAWN_HORIZON:
            self.platforms.append(spawn_next(self.last, difficulty, self.rng))
            spawned += 1
        return spawned

    def update(self, speed: float, difficulty: float) -> None:
        self.scroll(speed)
        self.evict()
        self.fill(difficulty)

    def __len__(self) -> int:
        return len(self.platforms)

    def __iter__(self):
        return iter(self.platforms)


class StarField:
    """Parallax stars; recycled the same way platforms are, by wrapping around."""

    def __init__(self, rng: RandomSource | None = None, count: int = STAR_COUNT) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.count = count
        self.stars: list[Star] = []
        self.reset()

    def reset(self) -> None:
        self.stars = [Star(self.rng) for _ in range(self.count)]

    def update(self, speed: float) -> None:
        for star in self.stars:
            star.update(speed, self.rng)
