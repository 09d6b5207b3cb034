import pytest

from pixel_hopper.config import (
    BASE_GRAVITY,
    BASE_SPEED,
    MOVE_SPEED,
    PLAYER_W,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from pixel_hopper.controls import Move
from pixel_hopper.entities import Platform, Player
from pixel_hopper.physics import (
    Contact,
    apply_move_input,
    fell_out,
    keep_in_bounds,
    resolve_collisions,
    resolve_platform,
    step_player,
    substep_count,
)


def standing_on(plat: Platform, x: float = 150) -> Player:
    player = Player(x=x, y=plat.y - 36)
    player.vy = 0.0
    return player


def test_substep_count_floor_and_scaling() -> None:
    assert substep_count(0.0, 0.0) == 2
    assert substep_count(0.45, BASE_SPEED) == 2
    assert substep_count(40.0, 3.1) == 22
    assert substep_count(-40.0, 3.1) == 22


def test_move_input_sets_and_damps_velocity() -> None:
    player = Player()
    apply_move_input(player, Move.RIGHT)
    assert player.vx == MOVE_SPEED
    apply_move_input(player, Move.NONE)
    assert player.vx == pytest.approx(MOVE_SPEED * 0.75)
    apply_move_input(player, Move.LEFT)
    assert player.vx == -MOVE_SPEED


def test_keep_in_bounds_left_edge() -> None:
    player = Player(x=-3)
    player.vx = -4.0
    assert keep_in_bounds(player) is True
    assert player.x == 0
    assert player.vx == 0


def test_landing_is_idempotent() -> None:
    plat = Platform(0, 482, 320)
    player = standing_on(plat)
    for _ in range(30):
        contacts = step_player(player, [plat], Move.NONE, BASE_GRAVITY, BASE_SPEED)
        assert Contact.LAND in contacts
        assert player.grounded is True
        assert player.vy == 0.0
        assert player.y == pytest.approx(446.0)
        assert player.x == pytest.approx(150.0)


def test_grounded_resets_when_walking_off() -> None:
    plat = Platform(0, 482, 100)
    player = standing_on(plat, x=200)
    step_player(player, [plat], Move.NONE, BASE_GRAVITY, BASE_SPEED)
    assert player.grounded is False
    assert player.y > 446.0


def test_fast_fall_does_not_tunnel_through_thin_platform() -> None:
    plat = Platform(100, 300, 200, 1)
    player = Player(x=150, y=300 - 36 - 10)
    player.vy = 40.0
    contacts = step_player(player, [plat], Move.NONE, BASE_GRAVITY, BASE_SPEED)
    assert Contact.LAND in contacts
    assert player.grounded is True
    assert player.bottom == pytest.approx(300.0)
    assert player.vy == 0.0


def test_head_contact_stops_upward_motion() -> None:
    plat = Platform(100, 200, 200, 20)
    player = Player(x=150, y=225)
    player.vy = -10.0
    contacts = step_player(player, [plat], Move.NONE, BASE_GRAVITY, BASE_SPEED)
    assert Contact.HEAD in contacts
    assert player.y == pytest.approx(220.0)
    assert player.vy == 0.0
    assert player.grounded is False


def test_side_contact_from_the_left() -> None:
    plat = Platform(200, 300, 100, 100)
    player = Player(x=172, y=320)
    player.vy = 0.0
    contacts = step_player(player, [plat], Move.RIGHT, 0.0, 0.0)
    assert Contact.SIDE_LEFT in contacts
    assert player.x == pytest.approx(174.0)
    assert player.vx == 0.0


def test_side_contact_from_the_right() -> None:
    plat = Platform(100, 300, 100, 100)
    player = Player(x=202, y=320)
    player.vy = 0.0
    contacts = step_player(player, [plat], Move.LEFT, 0.0, 0.0)
    assert Contact.SIDE_RIGHT in contacts
    assert player.x == pytest.approx(200.0)
    assert player.vx == 0.0


def test_fallback_pushes_out_through_top() -> None:
    plat = Platform(100, 300, 300)
    player = Player(x=150, y=269)
    player.vy = 0.0
    # previous position equals current: no swept edge can match
    assert resolve_platform(player, 150, 269, plat) is Contact.PUSH_TOP
    assert player.y == 264
    assert player.grounded is True


def test_fallback_pushes_out_sideways() -> None:
    plat = Platform(100, 300, 300)
    player = Player(x=77, y=320)
    player.vx = 2.0
    player.grounded = False
    assert resolve_platform(player, 77, 320, plat) is Contact.PUSH_LEFT
    assert player.x == 74
    assert player.vx == 0.0
    assert player.grounded is False


def test_fallback_pushes_out_through_bottom() -> None:
    plat = Platform(100, 300, 300)
    player = Player(x=150, y=355)
    player.vy = -2.0
    player.grounded = False
    assert resolve_platform(player, 150, 355, plat) is Contact.PUSH_BOTTOM
    assert player.y == 358
    assert player.vy == 0.0
    assert player.grounded is False


def test_fallback_pushes_out_through_right_side() -> None:
    plat = Platform(100, 300, 300)
    player = Player(x=397, y=320)
    player.vx = -3.0
    player.grounded = False
    assert resolve_platform(player, 397, 320, plat) is Contact.PUSH_RIGHT
    assert player.x == 400
    assert player.vx == 0.0


def test_fallback_keeps_outward_velocity() -> None:
    plat = Platform(100, 300, 300)
    player = Player(x=397, y=320)
    player.vx = 2.5
    assert resolve_platform(player, 397, 320, plat) is Contact.PUSH_RIGHT
    assert player.vx == 2.5


@pytest.mark.parametrize(
    "y, contact, expected_y",
    [
        # corner overlap of 5 on both axes: vertical faces win the tie
        (269, Contact.PUSH_TOP, 264),
        (353, Contact.PUSH_BOTTOM, 358),
    ],
)
def test_fallback_tie_prefers_vertical_push(y: float, contact: Contact, expected_y: float) -> None:
    plat = Platform(100, 300, 300)
    player = Player(x=79, y=y)
    player.vy = 0.0
    assert resolve_platform(player, 79, y, plat) is contact
    assert player.y == expected_y
    assert player.x == 79


def test_no_contact_when_apart() -> None:
    plat = Platform(500, 300, 100)
    player = Player(x=150, y=100)
    assert resolve_platform(player, 150, 100, plat) is None


def test_resting_on_seam_touches_both_platforms() -> None:
    left = Platform(0, 300, 100)
    right = Platform(100, 300, 100)
    player = Player(x=90, y=264)
    player.vy = 0.0
    player.vy += BASE_GRAVITY
    player.y += player.vy / 2
    contacts = resolve_collisions(player, 90, 264, [left, right])
    assert contacts == [Contact.LAND, Contact.LAND]
    assert player.grounded is True
    assert player.y == 264


def test_continuous_right_input_clamps_to_screen_edge() -> None:
    player = Player(x=SCREEN_WIDTH - 120, y=50)
    for _ in range(40):
        step_player(player, [], Move.RIGHT, 0.0, BASE_SPEED)
        assert player.x <= SCREEN_WIDTH - PLAYER_W
    assert player.x == SCREEN_WIDTH - PLAYER_W
    assert player.vx == 0.0


def test_clamp_zeroes_velocity_on_the_crossing_tick() -> None:
    player = Player(x=SCREEN_WIDTH - PLAYER_W - 2, y=50)
    step_player(player, [], Move.RIGHT, BASE_GRAVITY, BASE_SPEED)
    assert player.x == SCREEN_WIDTH - PLAYER_W
    assert player.vx == 0.0


def test_fell_out() -> None:
    player = Player(y=SCREEN_HEIGHT + 10)
    assert fell_out(player) is False
    player.y = SCREEN_HEIGHT + 10.5
    assert fell_out(player) is True
