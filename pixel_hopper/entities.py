"""Simulation entities: the player body, platforms, decorative stars and world scalars.

Nothing in here knows how it is drawn; the pygame adapter reads these objects
through :class:`pixel_hopper.simulation.SimulationSnapshot`.
"""

from __future__ import annotations

import enum

from .config import (
    BASE_GRAVITY,
    BASE_SPEED,
    EVICT_MARGIN,
    GROUND_Y,
    JUMP_VELOCITY,
    PLATFORM_HEIGHT,
    PLAYER_H,
    PLAYER_W,
    PLAYER_X,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    STAR_BAND,
    STAR_BIG_CHANCE,
    STAR_PARALLAX,
    STAR_RESPAWN_JITTER,
)
from .utils import RandomSource


class GameState(enum.Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    GAME_OVER = "game_over"


class Player:
    """The single player-controlled rectangle.

    ``w`` and ``h`` are fixed at construction; :meth:`reset` only touches
    position, velocity and the grounded flag.
    """

    def __init__(self, x: float = PLAYER_X, y: float = GROUND_Y - PLAYER_H) -> None:
        self.w = PLAYER_W
        self.h = PLAYER_H
        self.reset(x, y)

    def reset(self, x: float = PLAYER_X, y: float = GROUND_Y - PLAYER_H) -> None:
        self.x = float(x)
        self.y = float(y)
        self.vx = 0.0
        self.vy = 0.0
        self.grounded = True

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def jump(self, impulse: float = JUMP_VELOCITY) -> None:
        self.vy = impulse
        self.grounded = False

    def rect(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.w, self.h)

    def __repr__(self) -> str:
        return (
            f"Player(x={self.x:.2f}, y={self.y:.2f}, vx={self.vx:.2f}, "
            f"vy={self.vy:.2f}, grounded={self.grounded})"
        )


class Platform:
    """A walkable rectangle scrolling left with the world."""

    def __init__(self, x: float, y: float, w: float, h: float = PLATFORM_HEIGHT) -> None:
        self.x = float(x)
        self.y = float(y)
        self.w = float(w)
        self.h = float(h)

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def update(self, scroll_speed: float) -> None:
        self.x -= scroll_speed

    def offscreen(self) -> bool:
        return self.right < -EVICT_MARGIN

    def rect(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.w, self.h)

    def __repr__(self) -> str:
        return f"Platform(x={self.x:.2f}, y={self.y:.2f}, w={self.w:.2f}, h={self.h:.2f})"


class Star:
    """Background star that drifts with parallax and wraps around the screen."""

    def __init__(self, rng: RandomSource) -> None:
        self.x = rng.random() * SCREEN_WIDTH
        self.y = rng.random() * (SCREEN_HEIGHT * STAR_BAND)
        self.size = 3 if rng.random() < STAR_BIG_CHANCE else 2

    def update(self, scroll_speed: float, rng: RandomSource) -> None:
        self.x -= scroll_speed * STAR_PARALLAX
        if self.x < -4:
            self.x = SCREEN_WIDTH + rng.random() * STAR_RESPAWN_JITTER
            self.y = rng.random() * (SCREEN_HEIGHT * STAR_BAND)

    def as_tuple(self) -> tuple[float, float, int]:
        return (self.x, self.y, self.size)


class World:
    """Scalar simulation parameters for one run plus the persisted best score."""

    def __init__(self, best_score: int = 0) -> None:
        self.best_score = best_score
        self.jump_velocity = JUMP_VELOCITY
        self.reset()

    def reset(self) -> None:
        self.speed = BASE_SPEED
        self.gravity = BASE_GRAVITY
        self.score = 0.0
        self.ticks = 0
        self.difficulty = 0.0
        self.state = GameState.NOT_STARTED

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER
