"""
Tests untuk hitbox geometry dan AABB collision
"""

import pytest

from rkena_mma.config import ActionState
from rkena_mma.fighters.hitbox import AttackHitboxes, Rect, check_collision, follow_fighter


def make_hitbox(action, x=150.0, direction=1, width=100.0, height=180.0, y=220.0):
    return AttackHitboxes.create(action, x, y, width, height, direction)


def test_overlapping_rects_collide():
    assert check_collision(Rect(0, 0, 10, 10), Rect(5, 5, 10, 10))


def test_edge_touching_rects_do_not_collide():
    assert not check_collision(Rect(0, 0, 10, 10), Rect(10, 0, 10, 10))
    assert not check_collision(Rect(0, 0, 10, 10), Rect(0, 10, 10, 10))


def test_punch_facing_right_starts_at_mid_body():
    box = make_hitbox(ActionState.PUNCH, x=150, direction=1)

    assert box.x == pytest.approx(200)
    assert box.w == pytest.approx(80)
    assert box.y == pytest.approx(220 + 180 * 0.15)
    assert box.h == pytest.approx(180 * 0.2)


def test_punch_facing_left_mirrors_reach():
    box = make_hitbox(ActionState.PUNCH, x=200, direction=-1)

    # Ends at the fighter's mid body, extends to the left
    assert box.x + box.w == pytest.approx(250)
    assert box.x == pytest.approx(170)


def test_kick_is_longer_and_lower_than_punch():
    punch = make_hitbox(ActionState.PUNCH)
    kick = make_hitbox(ActionState.KICK)

    assert kick.w > punch.w
    assert kick.y > punch.y


def test_takedown_band_is_widest():
    takedown = make_hitbox(ActionState.TAKEDOWN)
    kick = make_hitbox(ActionState.KICK)

    assert takedown.w > kick.w
    assert takedown.w == pytest.approx(120)


def test_block_has_no_hitbox():
    with pytest.raises(ValueError):
        make_hitbox(ActionState.BLOCK)


def test_follow_fighter_uses_follow_offset():
    box = make_hitbox(ActionState.TAKEDOWN, x=150)

    follow_fighter(box, ActionState.TAKEDOWN, 160, 100, 1)

    assert box.x == pytest.approx(160 + 100 * 0.3)
    assert box.w == pytest.approx(120)


def test_rect_center():
    assert Rect(0, 0, 10, 20).center == (5, 10)
