"""Geometry helpers shared by the generator and the collision resolver."""

from __future__ import annotations

from typing import Protocol


class RectLike(Protocol):
    x: float
    y: float
    w: float
    h: float


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp a numeric value into the inclusive range [lo, hi]."""
    return max(lo, min(hi, value))


def ranges_overlap(a_lo: float, a_hi: float, b_lo: float, b_hi: float) -> bool:
    """True if the open intervals (a_lo, a_hi) and (b_lo, b_hi) share any length."""
    return a_hi > b_lo and a_lo < b_hi


def rects_intersect(a: RectLike, b: RectLike) -> bool:
    """Strict AABB overlap test; touching edges do not count."""
    return ranges_overlap(a.x, a.x + a.w, b.x, b.x + b.w) and ranges_overlap(
        a.y, a.y + a.h, b.y, b.y + b.h
    )


def penetration_depths(a: RectLike, b: RectLike) -> tuple[float, float, float, float]:
    """How far ``a`` reaches into ``b`` through each face of ``b``.

    Returns ``(left, right, top, bottom)``: the distance ``a`` would have to
    move to leave ``b`` through that face. Only meaningful when the rects
    intersect.
    """
    left = a.x + a.w - b.x
    right = b.x + b.w - a.x
    top = a.y + a.h - b.y
    bottom = b.y + b.h - a.y
    return left, right, top, bottom


class RandomSource(Protocol):
    """Anything yielding uniform floats in [0, 1); ``random.Random`` qualifies."""

    def random(self) -> float: ...


def uniform(rng: RandomSource, lo: float, hi: float) -> float:
    """Draw from [lo, hi) using a single ``rng.random()`` call."""
    return lo + rng.random() * (hi - lo)
