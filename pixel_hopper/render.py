"""Drawing helpers for the pygame adapter.

All functions take plain tuples from :class:`~pixel_hopper.simulation.SimulationSnapshot`
so the simulation never has to know about surfaces.
"""

from __future__ import annotations

from typing import Callable, Sequence

import numpy as np
import pygame

from .config import (
    COL_BANNER,
    COL_DUST,
    COL_HILLS,
    COL_PLATFORM,
    COL_PLATFORM_DOTS,
    COL_PLATFORM_TOP,
    COL_PLAYER,
    COL_PLAYER_EYES,
    COL_PLAYER_MOUTH,
    COL_SKY_BOTTOM,
    COL_SKY_TOP,
    COL_STAR,
    COL_TEXT,
)
from .utils import clamp

Rect = tuple[float, float, float, float]


def scale_color(color: tuple[int, int, int], factor: float) -> tuple[int, int, int]:
    """Scale an RGB color by factor, clamped to [0,255]."""
    r, g, b = color
    return (
        int(clamp(r * factor, 0, 255)),
        int(clamp(g * factor, 0, 255)),
        int(clamp(b * factor, 0, 255)),
    )


def procedural_noise_surface(
    w: int,
    h: int,
    noise_func: Callable[[np.ndarray, np.ndarray], np.ndarray],
    top: tuple[int, int, int],
    bottom: tuple[int, int, int],
) -> np.ndarray:
    """Blend two colors with a noise field built on a NumPy meshgrid.

    Args:
        w, h: Dimensions.
        noise_func: Function taking X, Y meshgrids in [0,1] and returning
            blend weights; 0 gives ``top`` and 1 gives ``bottom``.

    Returns:
        ``(w, h, 3)`` uint8 array ready for ``pygame.surfarray.make_surface``.
    """
    x = np.linspace(0, 1, w, dtype=np.float32)
    y = np.linspace(0, 1, h, dtype=np.float32)
    X, Y = np.meshgrid(x, y)
    t = np.clip(noise_func(X, Y), 0.0, 1.0)[..., None]
    c0 = np.array(top, dtype=np.float32)
    c1 = np.array(bottom, dtype=np.float32)
    rgb = np.clip(c0 * (1.0 - t) + c1 * t, 0, 255).astype(np.uint8)
    return np.ascontiguousarray(rgb.transpose(1, 0, 2))


def _sky_weights(X: np.ndarray, Y: np.ndarray) -> np.ndarray:
    # vertical gradient with faint banding, like dithered pixel-art sky
    return Y + 0.04 * np.sin(X * 40.0 + Y * 7.0) * np.sin(Y * 23.0)


def make_backdrop(w: int, h: int) -> pygame.Surface:
    """Precompute the sky and hill band as one surface for fast blitting."""
    surf = pygame.surfarray.make_surface(
        procedural_noise_surface(w, h, _sky_weights, COL_SKY_TOP, COL_SKY_BOTTOM)
    )
    pygame.draw.rect(surf, COL_HILLS, (0, h - 150, w, 92))
    return surf


def draw_stars(surf: pygame.Surface, stars: Sequence[tuple[float, float, int]]) -> None:
    for x, y, size in stars:
        surf.fill(COL_STAR, (round(x), round(y), size, size))


def draw_platforms(surf: pygame.Surface, platforms: Sequence[Rect]) -> None:
    for x, y, w, h in platforms:
        px, pw = round(x), round(w)
        surf.fill(COL_PLATFORM, (px, round(y), pw, round(h)))
        surf.fill(COL_PLATFORM_TOP, (px, round(y), pw, 10))
        dot_x = x + 6
        while dot_x < x + w - 6:
            surf.fill(COL_PLATFORM_DOTS, (round(dot_x), round(y) + 18, 8, 8))
            dot_x += 18


def draw_player(surf: pygame.Surface, rect: Rect, grounded: bool) -> None:
    x, y, w, h = rect
    px, py = round(x), round(y)
    surf.fill(COL_PLAYER, (px, py, round(w), round(h)))
    surf.fill(COL_PLAYER_EYES, (px + 4, py + 8, 6, 6))
    surf.fill(COL_PLAYER_EYES, (px + 16, py + 8, 6, 6))
    surf.fill(COL_PLAYER_MOUTH, (px + 7, py + 24, 12, 4))
    if not grounded:
        # dust puffs under the feet while airborne
        surf.fill(COL_DUST, (px - 2, py + round(h) - 3, 4, 3))
        surf.fill(COL_DUST, (px + round(w) - 2, py + round(h) - 3, 4, 3))


def draw_score_banner(
    surf: pygame.Surface, font: pygame.font.Font, score: int, best: int, accent: tuple[int, int, int]
) -> None:
    banner = pygame.Surface((220, 44), pygame.SRCALPHA)
    banner.fill((*COL_BANNER, 209))
    surf.blit(banner, (16, 14))
    pygame.draw.rect(surf, accent, (16, 14, 220, 44), 2)
    text = font.render(f"SCORE {score}", True, COL_TEXT)
    surf.blit(text, (28, 14 + (44 - text.get_height()) // 2))
    best_text = font.render(f"BEST {best}", True, scale_color(COL_TEXT, 0.8))
    surf.blit(best_text, best_text.get_rect(topright=(surf.get_width() - 20, 24)))


def draw_dim_overlay(surf: pygame.Surface, alpha: int = 90) -> None:
    shade = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
    shade.fill((0, 0, 0, alpha))
    surf.blit(shade, (0, 0))
