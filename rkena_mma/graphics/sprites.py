"""
Procedural Sprite Generator
===========================
Gambar fighter dan arena secara procedural menggunakan pygame primitives.
Tidak memerlukan asset eksternal. Pose dihitung dari action state + timer.
"""

import math
import random
from dataclasses import dataclass
from typing import Tuple

import pygame

from rkena_mma.config import (
    ActionState, DEFAULT_BALANCE, BalanceConfig,
    SCREEN_WIDTH, SCREEN_HEIGHT, GROUND_Y,
    BLACK, WHITE, DARK_GRAY, COLOR_BG, COLOR_FENCE, COLOR_MAT, COLOR_MAT_LINE,
)
from rkena_mma.core.snapshot import FighterSnapshot


@dataclass
class Pose:
    """Offset animasi relatif terhadap body (pixel / radian)"""
    body_y: float = 0.0      # Angkat/turunkan torso dari posisi berdiri
    lean: float = 0.0        # Rotasi body, positif = condong ke depan
    arm_reach: float = 0.0   # Extension lengan depan
    leg_reach: float = 0.0   # Extension kaki depan
    guard_up: bool = False
    shake: float = 0.0


def pose_for(fighter: FighterSnapshot, time_ms: float,
             balance: BalanceConfig = DEFAULT_BALANCE) -> Pose:
    """Hitung pose dari state + progress action"""
    w, h = fighter.width, fighter.height
    state = fighter.state
    total = balance.frames_for(state) or 1
    progress = 1 - fighter.state_timer / total

    if state == ActionState.IDLE:
        return Pose(body_y=math.sin(time_ms / 200) * h * 0.02,
                    arm_reach=math.sin(time_ms / 200 + math.pi) * 5)

    if state == ActionState.WALK:
        cycle = math.sin(time_ms / 80)
        return Pose(body_y=abs(cycle) * h * 0.03, leg_reach=cycle * w * 0.2,
                    arm_reach=-cycle * 10)

    if state == ActionState.PUNCH:
        if progress < 0.2:
            reach = -w * 0.2  # Windup
        elif progress < 0.5:
            reach = w * 0.8   # Extension
        else:
            reach = 0.0
        return Pose(lean=0.15, arm_reach=reach)

    if state == ActionState.KICK:
        return Pose(lean=-0.3, leg_reach=w * 0.6 if progress < 0.5 else 0.0)

    if state == ActionState.BLOCK:
        return Pose(lean=-0.1, arm_reach=-w * 0.1, guard_up=True)

    if state == ActionState.TAKEDOWN:
        if balance.in_takedown_window(fighter.state_timer):
            return Pose(body_y=-h * 0.25, lean=1.2, arm_reach=w * 0.8)
        if progress < balance.takedown_window_start:
            return Pose(body_y=-h * 0.2, lean=0.4)
        return Pose(body_y=-h * 0.3, lean=0.6)

    if state == ActionState.SPRAWL:
        return Pose(body_y=-h * 0.3, lean=1.4, leg_reach=-w * 0.5)

    if state == ActionState.SLAMMED:
        elapsed = total - fighter.state_timer
        floor = -h * 0.33
        if elapsed < 10:
            drop = floor * elapsed / 10  # Dibanting
        elif elapsed < 20:
            drop = floor + math.sin((elapsed - 10) / 10 * math.pi) * h * 0.08  # Bounce
        else:
            drop = floor
        return Pose(body_y=drop, lean=-1.6)

    if state == ActionState.HIT:
        return Pose(lean=-0.2, shake=5.0)

    if state == ActionState.KO:
        return Pose(body_y=-h * 0.33, lean=-1.57)

    return Pose()


class FighterSprites:
    """
    Generate sprite fighter secara procedural.
    Digambar menghadap kanan di surface sendiri, lalu di-rotate/flip.
    """

    def __init__(self, balance: BalanceConfig = DEFAULT_BALANCE):
        self.balance = balance
        self._jitter = random.Random()

    def draw(self, surface: pygame.Surface, fighter: FighterSnapshot, time_ms: float):
        pose = pose_for(fighter, time_ms, self.balance)
        w, h = int(fighter.width), int(fighter.height)

        # Canvas lebih besar supaya limb yang extend tidak terpotong
        size = int(max(w, h) * 2)
        body = pygame.Surface((size, size), pygame.SRCALPHA)
        self._draw_body(body, fighter, pose, size)

        rotated = pygame.transform.rotate(body, -math.degrees(pose.lean))
        if fighter.direction < 0:
            rotated = pygame.transform.flip(rotated, True, False)

        # Shadow
        cx = fighter.x + fighter.width / 2
        shadow = pygame.Surface((int(w * 1.2), int(h * 0.1)), pygame.SRCALPHA)
        pygame.draw.ellipse(shadow, (0, 0, 0, 100), shadow.get_rect())
        surface.blit(shadow, (cx - w * 0.6, fighter.y + h - h * 0.05 - 5))

        shake = (self._jitter.random() - 0.5) * 2 * pose.shake if pose.shake else 0
        feet_y = fighter.y + h - pose.body_y
        rect = rotated.get_rect(center=(cx + shake, feet_y - h / 2))
        surface.blit(rotated, rect)

    def _draw_body(self, body: pygame.Surface, fighter: FighterSnapshot, pose: Pose, size: int):
        w, h = fighter.width, fighter.height
        skin = fighter.skin_color
        shorts = fighter.shorts_color
        dark_skin = tuple(max(0, c - 40) for c in skin)

        cx = size / 2
        feet = size / 2 + h / 2
        limb = w * 0.28
        torso_w = w * 0.6
        head = w * 0.45

        hip_y = feet - h * 0.45
        shoulder_y = feet - h * 0.78

        # Back leg
        pygame.draw.rect(body, dark_skin,
                         (cx - limb - 4 - pose.leg_reach * 0.3, hip_y, limb, feet - hip_y))
        # Back arm
        back_arm_y = shoulder_y - (h * 0.15 if pose.guard_up else 0)
        pygame.draw.rect(body, dark_skin, (cx - torso_w / 2 - limb * 0.6, back_arm_y, limb * 0.8, h * 0.3))

        # Torso
        pygame.draw.rect(body, skin, (cx - torso_w / 2, shoulder_y, torso_w, hip_y - shoulder_y),
                         border_radius=8)
        # Shorts
        pygame.draw.rect(body, shorts, (cx - torso_w / 2, hip_y - h * 0.05, torso_w, h * 0.18),
                         border_radius=4)
        pygame.draw.line(body, WHITE, (cx - torso_w / 2, hip_y - h * 0.05),
                         (cx + torso_w / 2, hip_y - h * 0.05), 2)

        # Head
        pygame.draw.circle(body, skin, (int(cx + 4), int(shoulder_y - head / 2)), int(head / 2))
        pygame.draw.circle(body, BLACK, (int(cx + head * 0.25), int(shoulder_y - head * 0.55)), 3)

        # Front leg
        leg_x = cx + 4 + max(0.0, pose.leg_reach)
        if pose.leg_reach > w * 0.3:
            # Kick: kaki lurus horizontal
            pygame.draw.rect(body, skin, (cx, hip_y, pose.leg_reach + limb, limb))
        else:
            pygame.draw.rect(body, skin, (leg_x, hip_y, limb, feet - hip_y))

        # Front arm + glove
        arm_len = h * 0.25 + max(0.0, pose.arm_reach)
        arm_y = shoulder_y + 6 - (h * 0.15 if pose.guard_up else 0)
        if pose.arm_reach > w * 0.3:
            pygame.draw.rect(body, skin, (cx + torso_w / 4, arm_y, arm_len, limb * 0.8))
            glove_pos = (int(cx + torso_w / 4 + arm_len), int(arm_y + limb * 0.4))
        else:
            pygame.draw.rect(body, skin, (cx + torso_w / 4, arm_y, limb * 0.8, h * 0.28))
            glove_pos = (int(cx + torso_w / 4 + limb * 0.4 + pose.arm_reach * 0.2),
                         int(arm_y + h * 0.28))
        pygame.draw.circle(body, shorts, glove_pos, int(limb * 0.55))


class ArenaSprites:
    """Background: crowd gelap, fence cage, dan mat"""

    @staticmethod
    def create_arena_surface(width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                             seed: int = 7) -> pygame.Surface:
        surface = pygame.Surface((width, height))
        rng = random.Random(seed)
        wall_base_y = height - 100
        fence_top_y = wall_base_y - 220

        # Crowd gradient
        for y in range(wall_base_y):
            shade = int(10 + 12 * math.sin(math.pi * y / wall_base_y))
            pygame.draw.line(surface, (shade, shade, shade), (0, y), (width, y))

        # Crowd lights
        lights = pygame.Surface((width, height), pygame.SRCALPHA)
        for _ in range(20):
            radius = int(rng.random() * 40 + 10)
            alpha = int(rng.random() * 10)
            pygame.draw.circle(lights, (255, 255, 255, alpha),
                               (int(rng.random() * width), int(rng.random() * (wall_base_y - 50))),
                               radius)
        surface.blit(lights, (0, 0))

        # Cage mesh
        fence = pygame.Surface((width, wall_base_y - fence_top_y), pygame.SRCALPHA)
        fence.fill((20, 20, 20, 200))
        for ix in range(-100, width + 100, 16):
            pygame.draw.line(fence, (*COLOR_FENCE, 255), (ix, 0), (ix + 40, fence.get_height()), 1)
            pygame.draw.line(fence, (*COLOR_FENCE, 255), (ix, 0), (ix - 40, fence.get_height()), 1)
        surface.blit(fence, (0, fence_top_y))
        pygame.draw.line(surface, (10, 10, 10), (0, fence_top_y), (width, fence_top_y), 16)
        pygame.draw.line(surface, (51, 51, 51), (0, fence_top_y - 4), (width, fence_top_y - 4), 2)

        # Mat
        pygame.draw.rect(surface, COLOR_MAT, (0, wall_base_y, width, height - wall_base_y))
        pygame.draw.line(surface, COLOR_BG, (0, wall_base_y), (width, wall_base_y), 4)
        pygame.draw.ellipse(surface, COLOR_MAT_LINE,
                            (width / 2 - 160, GROUND_Y - 28, 320, 56), 3)

        # Commentators + table
        for seat in range(3):
            head_x, head_y = ArenaSprites.commentator_position(seat, width, height)
            pygame.draw.rect(surface, (25, 25, 35), (head_x - 22, head_y + 14, 44, 40),
                             border_radius=6)
            pygame.draw.circle(surface, (60, 50, 45), (head_x, head_y), 14)
        table_y = height - 130
        pygame.draw.rect(surface, DARK_GRAY, (width / 2 - 180, table_y, 360, 20))
        return surface

    @staticmethod
    def commentator_position(seat: int, width: int = SCREEN_WIDTH,
                             height: int = SCREEN_HEIGHT) -> Tuple[int, int]:
        """Posisi kepala commentator di belakang meja"""
        offsets = (-110, 0, 110)
        return width // 2 + offsets[min(seat, 2)], height - 180
