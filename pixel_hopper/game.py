"""Game loop, input mapping and rendering composition for Pixel Hopper."""

from __future__ import annotations

import argparse
import logging
import sys

import pygame

from .config import (
    COL_ACCENT,
    COL_TEXT,
    FPS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from .controls import InputBuffer, Move
from .entities import GameState
from .render import (
    draw_dim_overlay,
    draw_platforms,
    draw_player,
    draw_score_banner,
    draw_stars,
    make_backdrop,
)
from .simulation import Simulation, SimulationSnapshot
from .storage import JsonScoreStore, MemoryScoreStore, ScoreStore, default_scores_path

logger = logging.getLogger(__name__)

JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_w)
MOVE_BINDINGS = {
    pygame.K_LEFT: Move.LEFT,
    pygame.K_a: Move.LEFT,
    pygame.K_RIGHT: Move.RIGHT,
    pygame.K_d: Move.RIGHT,
}


class Game:
    """Top-level pygame host: owns the window, feeds input in, draws snapshots out."""

    def __init__(
        self,
        store: ScoreStore | None = None,
        seed: int | None = None,
        simulation: Simulation | None = None,
    ) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.DOUBLEBUF)
        pygame.display.set_caption("Pixel Hopper")
        self.clock = pygame.time.Clock()
        self.font_big = pygame.font.SysFont("couriernew", 28)
        self.font_small = pygame.font.SysFont("couriernew", 18)

        # Precompute sky gradient and hill band
        self.backdrop = make_backdrop(SCREEN_WIDTH, SCREEN_HEIGHT)

        self.sim = simulation if simulation is not None else Simulation(store=store, seed=seed)
        self.input = InputBuffer(MOVE_BINDINGS)
        self.snapshot: SimulationSnapshot = self.sim.snapshot()

    def reset(self) -> None:
        self.sim.reset()
        # held directions survive a reset, a pending jump does not
        self.input.cancel_jump()
        self.snapshot = self.sim.snapshot()

    def update(self) -> None:
        self.snapshot = self.sim.tick(self.input.consume())

    def handle_input(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key in JUMP_KEYS:
                self.input.request_jump()
            elif event.key in MOVE_BINDINGS:
                self.input.press(event.key)
            elif event.key == pygame.K_r:
                logger.debug("Manual reset")
                self.reset()
            elif event.key == pygame.K_ESCAPE:
                pygame.event.post(pygame.event.Event(pygame.QUIT))
        elif event.type == pygame.KEYUP:
            self.input.release(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1:
                self.input.request_jump()

    def draw(self) -> None:
        snap = self.snapshot
        self.screen.blit(self.backdrop, (0, 0))
        draw_stars(self.screen, snap.stars)
        draw_platforms(self.screen, snap.platforms)
        draw_player(self.screen, snap.player, snap.grounded)
        self._draw_ui(self.screen)
        pygame.display.flip()

    def _draw_ui(self, surf: pygame.Surface) -> None:
        snap = self.snapshot
        draw_score_banner(surf, self.font_small, snap.display_score, snap.best_score, COL_ACCENT)

        if snap.state is GameState.NOT_STARTED:
            draw_dim_overlay(surf)
            title = self.font_big.render("PRESS JUMP", True, COL_ACCENT)
            surf.blit(title, title.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)))
        elif snap.state is GameState.GAME_OVER:
            title = self.font_big.render("Game Over", True, COL_TEXT)
            retry = self.font_small.render("Press jump to restart", True, COL_TEXT)
            surf.blit(title, title.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 - 24)))
            surf.blit(retry, retry.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 + 16)))

        help_text = self.font_small.render(
            "Space/Up/Click to jump • Left/Right to move • R to reset • Esc to quit",
            True,
            (180, 180, 190),
        )
        surf.blit(help_text, help_text.get_rect(midbottom=(SCREEN_WIDTH // 2, SCREEN_HEIGHT - 12)))

    def run(self) -> None:
        while True:
            self.clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    pygame.quit()
                    sys.exit(0)
                self.handle_input(event)

            self.update()
            self.draw()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="pixel-hopper", description="Side-scrolling platform hopper.")
    p.add_argument("--seed", type=int, default=None, help="Seed for platform generation (random if omitted).")
    p.add_argument(
        "--scores",
        default=None,
        help="Best-score file. Defaults to $PIXEL_HOPPER_SCORES or ~/.pixel_hopper/scores.json.",
    )
    p.add_argument("--no-save", action="store_true", help="Keep the best score in memory only.")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    return p.parse_args(argv)


def make_store(args: argparse.Namespace) -> ScoreStore:
    if args.no_save:
        return MemoryScoreStore()
    return JsonScoreStore(args.scores or default_scores_path())


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    Game(store=make_store(args), seed=args.seed).run()
