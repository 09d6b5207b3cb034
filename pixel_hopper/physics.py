"""Player integration and swept rectangle-vs-platform collision resolution."""

from __future__ import annotations

import enum
import math
from typing import Iterable

from .config import (
    FALL_MARGIN,
    MOVE_DAMPING,
    MOVE_SPEED,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SUBSTEP_FLOOR,
    SUBSTEP_SCALE,
)
from .controls import Move
from .entities import Platform, Player
from .utils import penetration_depths, ranges_overlap, rects_intersect


class Contact(enum.Enum):
    LAND = "land"
    HEAD = "head"
    SIDE_LEFT = "side_left"  # ran into the platform's left face
    SIDE_RIGHT = "side_right"  # ran into the platform's right face
    PUSH_TOP = "push_top"
    PUSH_BOTTOM = "push_bottom"
    PUSH_LEFT = "push_left"
    PUSH_RIGHT = "push_right"


HORIZONTAL_CONTACTS = frozenset(
    {Contact.SIDE_LEFT, Contact.SIDE_RIGHT, Contact.PUSH_LEFT, Contact.PUSH_RIGHT}
)


def apply_move_input(player: Player, move: Move) -> None:
    if move is Move.LEFT:
        player.vx = -MOVE_SPEED
    elif move is Move.RIGHT:
        player.vx = MOVE_SPEED
    else:
        player.vx *= MOVE_DAMPING


def keep_in_bounds(player: Player, screen_width: float = SCREEN_WIDTH) -> bool:
    """Clamp the player horizontally to the screen. Returns True if clamped."""
    if player.x < 0:
        player.x = 0.0
        player.vx = 0.0
        return True
    if player.x + player.w > screen_width:
        player.x = screen_width - player.w
        player.vx = 0.0
        return True
    return False


def substep_count(vy: float, speed: float) -> int:
    """More substeps the faster things move, never fewer than ``SUBSTEP_FLOOR``."""
    return max(SUBSTEP_FLOOR, math.ceil((abs(vy) + speed) / SUBSTEP_SCALE))


def resolve_platform(player: Player, prev_x: float, prev_y: float, plat: Platform) -> Contact | None:
    """Resolve the player against one platform, returning the contact applied.

    Swept tests compare the previous and current edges so that a body that
    crossed a face during the substep is caught even when it no longer
    overlaps. When none of them match but the rects still overlap, the
    player is pushed out along the axis of least penetration.
    """
    prev_top = prev_y
    prev_bottom = prev_y + player.h
    prev_left = prev_x
    prev_right = prev_x + player.w

    overlap_x_now = ranges_overlap(player.x, player.right, plat.x, plat.right)
    overlap_x_prev = ranges_overlap(prev_left, prev_right, plat.x, plat.right)
    overlap_y_now = ranges_overlap(player.y, player.bottom, plat.y, plat.bottom)

    if (
        player.vy >= 0
        and (overlap_x_now or overlap_x_prev)
        and prev_bottom <= plat.y
        and player.bottom >= plat.y
    ):
        player.y = plat.y - player.h
        player.vy = 0.0
        player.grounded = True
        return Contact.LAND

    if (
        player.vy < 0
        and (overlap_x_now or overlap_x_prev)
        and prev_top >= plat.bottom
        and player.y <= plat.bottom
    ):
        player.y = plat.bottom
        player.vy = 0.0
        return Contact.HEAD

    if overlap_y_now and prev_right <= plat.x and player.right >= plat.x:
        player.x = plat.x - player.w
        player.vx = 0.0
        return Contact.SIDE_LEFT

    if overlap_y_now and prev_left >= plat.right and player.x <= plat.right:
        player.x = plat.right
        player.vx = 0.0
        return Contact.SIDE_RIGHT

    if not rects_intersect(player, plat):
        return None

    pen_left, pen_right, pen_top, pen_bottom = penetration_depths(player, plat)
    smallest = min(pen_left, pen_right, pen_top, pen_bottom)
    if smallest == pen_top:
        player.y = plat.y - player.h
        player.vy = min(0.0, player.vy)
        player.grounded = True
        return Contact.PUSH_TOP
    if smallest == pen_bottom:
        player.y = plat.bottom
        player.vy = max(0.0, player.vy)
        return Contact.PUSH_BOTTOM
    if smallest == pen_left:
        player.x = plat.x - player.w
        player.vx = min(0.0, player.vx)
        return Contact.PUSH_LEFT
    player.x = plat.right
    player.vx = max(0.0, player.vx)
    return Contact.PUSH_RIGHT


def resolve_collisions(
    player: Player, prev_x: float, prev_y: float, platforms: Iterable[Platform]
) -> list[Contact]:
    """One response per platform; keep going so seams between platforms both count."""
    contacts: list[Contact] = []
    for plat in platforms:
        contact = resolve_platform(player, prev_x, prev_y, plat)
        if contact is not None:
            contacts.append(contact)
    return contacts


def step_player(
    player: Player,
    platforms: list[Platform],
    move: Move,
    gravity: float,
    speed: float,
    screen_width: float = SCREEN_WIDTH,
) -> list[Contact]:
    """Advance the player by one tick.

    Horizontal input and the screen clamp are applied first, then gravity,
    then ``substep_count`` passes that each move a fraction of the way and
    resolve collisions. A horizontal contact cancels the rest of the
    horizontal travel for this tick.
    """
    start_x = player.x
    apply_move_input(player, move)
    player.x += player.vx
    keep_in_bounds(player, screen_width)
    end_x = player.x
    player.x = start_x

    player.vy += gravity
    player.grounded = False

    steps = substep_count(player.vy, speed)
    blocked = False
    contacts: list[Contact] = []
    for i in range(steps):
        prev_x, prev_y = player.x, player.y
        if not blocked:
            if i == steps - 1:
                player.x = end_x
            else:
                player.x = start_x + (end_x - start_x) * (i + 1) / steps
        player.y += player.vy / steps
        hits = resolve_collisions(player, prev_x, prev_y, platforms)
        if HORIZONTAL_CONTACTS.intersection(hits):
            blocked = True
        contacts.extend(hits)
    return contacts


def fell_out(player: Player, screen_height: float = SCREEN_HEIGHT) -> bool:
    return player.y > screen_height + FALL_MARGIN
