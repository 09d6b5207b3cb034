"""Game state machine and per-tick update for Pixel Hopper.

:class:`Simulation` owns every piece of mutable game state. The host calls
:meth:`Simulation.tick` once per frame and draws the snapshot it returns;
the simulation never schedules itself.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from .config import SCREEN_WIDTH, STORAGE_KEY
from .controls import FrameInput
from .difficulty import advance, score_gain
from .entities import GameState, Player, World
from .generator import PlatformStream, StarField
from .physics import fell_out, step_player
from .storage import MemoryScoreStore, ScoreStore, load_best_score
from .utils import RandomSource

logger = logging.getLogger(__name__)

Rect = tuple[float, float, float, float]


@dataclass(frozen=True)
class SimulationSnapshot:
    """Read-only view of one tick, everything the renderer needs."""

    state: GameState
    player: Rect
    grounded: bool
    platforms: tuple[Rect, ...]
    stars: tuple[tuple[float, float, int], ...]
    score: float
    best_score: int
    difficulty: float

    @property
    def display_score(self) -> int:
        return int(self.score)


class Simulation:
    """Explicit context for one game: world scalars, player, platforms, stars."""

    def __init__(
        self,
        store: ScoreStore | None = None,
        rng: RandomSource | None = None,
        star_rng: RandomSource | None = None,
        seed: int | None = None,
    ) -> None:
        if seed is not None:
            rng = rng if rng is not None else random.Random(seed)
            star_rng = star_rng if star_rng is not None else random.Random(seed + 1)
        self.store: ScoreStore = store if store is not None else MemoryScoreStore()
        self.world = World(best_score=self._read_best_score())
        self.player = Player()
        self.platforms = PlatformStream(rng)
        self.stars = StarField(star_rng)
        self.reset()

    def _read_best_score(self) -> int:
        try:
            return load_best_score(self.store, STORAGE_KEY)
        except OSError as exc:
            logger.warning("Could not read best score, starting from 0: %s", exc)
            return 0

    @property
    def state(self) -> GameState:
        return self.world.state

    def reset(self) -> None:
        """Back to the not-started state with a fresh run; the best score survives."""
        self.world.reset()
        self.player.reset()
        self.platforms.reset()
        self.stars.reset()

    def jump(self) -> None:
        """Handle a jump press: starts, restarts or jumps depending on state."""
        world = self.world
        if world.state is GameState.GAME_OVER:
            logger.debug("Restarting after game over")
            self.reset()
            self._start()
            self.player.jump(world.jump_velocity)
            return
        if world.state is GameState.NOT_STARTED:
            self._start()
            self.player.jump(world.jump_velocity)
            return
        if self.player.grounded:
            self.player.jump(world.jump_velocity)

    def _start(self) -> None:
        self.world.state = GameState.RUNNING
        logger.info("Run started (best score %d)", self.world.best_score)

    def tick(self, frame: FrameInput | None = None) -> SimulationSnapshot:
        """Consume one frame of input and advance the world if a run is active."""
        if frame is None:
            frame = FrameInput()
        if frame.jump:
            self.jump()
        if self.world.state is GameState.RUNNING:
            self._update(frame)
        return self.snapshot()

    def _update(self, frame: FrameInput) -> None:
        world = self.world
        world.ticks += 1
        world.speed, world.gravity, world.difficulty = advance(world.ticks, world.score)
        world.score += score_gain(world.speed)

        self.platforms.update(world.speed, world.difficulty)
        self.stars.update(world.speed)

        step_player(
            self.player,
            self.platforms.platforms,
            frame.move,
            world.gravity,
            world.speed,
            SCREEN_WIDTH,
        )

        if fell_out(self.player):
            self.trigger_game_over()

    def trigger_game_over(self) -> None:
        world = self.world
        if world.state is not GameState.RUNNING:
            return
        world.state = GameState.GAME_OVER
        final = int(world.score)
        logger.info("Game over at score %d after %d ticks", final, world.ticks)
        if final > world.best_score:
            world.best_score = final
            logger.info("New best score: %d", final)
            try:
                self.store.set(STORAGE_KEY, final)
            except OSError as exc:
                logger.warning("Could not save best score %d: %s", final, exc)

    def snapshot(self) -> SimulationSnapshot:
        return SimulationSnapshot(
            state=self.world.state,
            player=self.player.rect(),
            grounded=self.player.grounded,
            platforms=tuple(p.rect() for p in self.platforms),
            stars=tuple(s.as_tuple() for s in self.stars.stars),
            score=self.world.score,
            best_score=self.world.best_score,
            difficulty=self.world.difficulty,
        )
