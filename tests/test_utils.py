import math
import random

from pixel_hopper.entities import Platform
from pixel_hopper.utils import (
    clamp,
    penetration_depths,
    ranges_overlap,
    rects_intersect,
    uniform,
)


def test_clamp_basic() -> None:
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10


def test_ranges_overlap_excludes_touching() -> None:
    assert ranges_overlap(0, 10, 5, 15) is True
    assert ranges_overlap(0, 10, 10, 20) is False
    assert ranges_overlap(10, 20, 0, 10) is False
    assert ranges_overlap(2, 3, 0, 10) is True


def test_rects_intersect() -> None:
    a = Platform(0, 0, 10, 10)
    assert rects_intersect(a, Platform(5, 5, 10, 10)) is True
    # shared edge only
    assert rects_intersect(a, Platform(10, 0, 10, 10)) is False
    assert rects_intersect(a, Platform(0, 10, 10, 10)) is False


def test_penetration_depths() -> None:
    body = Platform(95, 0, 10, 10)
    block = Platform(100, 2, 50, 50)
    left, right, top, bottom = penetration_depths(body, block)
    assert math.isclose(left, 5.0)
    assert math.isclose(right, 55.0)
    assert math.isclose(top, 8.0)
    assert math.isclose(bottom, 52.0)


def test_uniform_uses_one_draw() -> None:
    rng = random.Random(9)
    expected = random.Random(9).random()
    assert math.isclose(uniform(rng, 10.0, 20.0), 10.0 + expected * 10.0)
