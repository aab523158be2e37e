"""
Hitbox & Hurtbox System
=======================
Sistem collision detection untuk combat.
- Hitbox: Area yang bisa melukai (hanya ada saat attack window terbuka)
- Hurtbox: Area yang bisa terkena hit (full body rectangle)
"""

from dataclasses import dataclass
from typing import Tuple

from rkena_mma.config import ACTION_DATA, ActionState, HitboxShape


@dataclass
class Rect:
    """Axis-aligned rectangle dalam world coordinates (x, y = pojok kiri atas)"""
    x: float
    y: float
    w: float
    h: float

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.w / 2, self.y + self.h / 2)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.w, self.h)


def check_collision(r1: Rect, r2: Rect) -> bool:
    """AABB overlap test. Rectangle yang hanya bersentuhan di tepi tidak dihitung."""
    return (r1.x < r2.x + r2.w and
            r1.x + r1.w > r2.x and
            r1.y < r2.y + r2.h and
            r1.y + r1.h > r2.y)


def _front_x(x: float, width: float, direction: int,
             reach: float, offset_ratio: float) -> float:
    """Posisi x hitbox di depan fighter, mengikuti arah hadap"""
    if direction == 1:
        return x + width * offset_ratio
    return x - reach + width * (1 - offset_ratio)


class AttackHitboxes:
    """
    Factory untuk hitbox berbagai jenis serangan.
    """

    @staticmethod
    def create(action: ActionState, x: float, y: float,
               width: float, height: float, direction: int) -> Rect:
        """Buat hitbox untuk action di depan fighter"""
        shape = ACTION_DATA[action].hitbox
        if shape is None:
            raise ValueError(f"{action.value} has no hitbox")
        return AttackHitboxes._from_shape(shape, x, y, width, height, direction)

    @staticmethod
    def _from_shape(shape: HitboxShape, x: float, y: float,
                    width: float, height: float, direction: int) -> Rect:
        reach = width * shape.reach_ratio
        return Rect(
            x=_front_x(x, width, direction, reach, shape.offset_ratio),
            y=y + height * shape.y_ratio,
            w=reach,
            h=height * shape.height_ratio,
        )


def follow_fighter(hitbox: Rect, action: ActionState, x: float,
                   width: float, direction: int):
    """Geser hitbox supaya tetap nempel ke fighter yang sedang bergerak (lunge)"""
    shape = ACTION_DATA[action].hitbox
    if shape is None:
        return
    hitbox.x = _front_x(x, width, direction, hitbox.w, shape.follow_offset_ratio)
