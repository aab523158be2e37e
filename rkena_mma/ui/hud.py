"""
HUD System
==========
Name plates, health bars, stamina bars, timer. Semua nilai dibaca dari
MatchSnapshot, HUD tidak pernah menyentuh fighter langsung.
"""

import pygame
from typing import Optional, Tuple

from rkena_mma.config import (
    SCREEN_WIDTH,
    WHITE, BLACK, DARK_GRAY, RED,
    HEALTH_GREEN, HEALTH_YELLOW, HEALTH_RED, STAMINA_BLUE,
    NAME_BAR_P1, NAME_BAR_P2, YELLOW,
)
from rkena_mma.core.snapshot import FighterSnapshot, MatchSnapshot


def format_time(seconds: int) -> str:
    """180 -> '03:00'"""
    seconds = max(0, int(seconds))
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


class Bar:
    """
    Bar horizontal dengan smooth lerp.
    is_flipped = isi dari kanan ke kiri (sisi fighter 2).
    """

    def __init__(self, x: int, y: int, width: int, height: int,
                 color: Tuple[int, int, int], is_flipped: bool = False,
                 lerp_speed: float = 10.0):
        self.rect = pygame.Rect(x, y, width, height)
        self.color = color
        self.is_flipped = is_flipped
        self.lerp_speed = lerp_speed

        self.current = 1.0
        self.target = 1.0

    def set_ratio(self, ratio: float):
        self.target = max(0.0, min(1.0, ratio))

    def snap(self):
        """Langsung ke target (awal ronde)"""
        self.current = self.target

    def update(self, dt: float):
        self.current += (self.target - self.current) * min(1.0, self.lerp_speed * dt)

    def fill_color(self) -> Tuple[int, int, int]:
        return self.color

    def render(self, surface: pygame.Surface):
        pygame.draw.rect(surface, DARK_GRAY, self.rect)

        fill_width = int(self.rect.width * self.current)
        if fill_width > 0:
            fill_x = self.rect.right - fill_width if self.is_flipped else self.rect.x
            pygame.draw.rect(surface, self.fill_color(),
                             (fill_x, self.rect.y, fill_width, self.rect.height))

        pygame.draw.rect(surface, (90, 90, 90), self.rect, 1)


class HealthBar(Bar):
    """Health bar, warna turun dari hijau ke merah"""

    def __init__(self, x: int, y: int, width: int, height: int, is_flipped: bool = False):
        super().__init__(x, y, width, height, HEALTH_GREEN, is_flipped, lerp_speed=12.0)

    def fill_color(self) -> Tuple[int, int, int]:
        if self.current > 0.6:
            return HEALTH_GREEN if not self.is_flipped else HEALTH_YELLOW
        elif self.current > 0.3:
            return HEALTH_YELLOW
        return HEALTH_RED


class StaminaBar(Bar):

    def __init__(self, x: int, y: int, width: int, height: int, is_flipped: bool = False):
        super().__init__(x, y, width, height, STAMINA_BLUE, is_flipped, lerp_speed=12.0)

    def fill_color(self) -> Tuple[int, int, int]:
        # Redup saat di bawah biaya action termurah
        return self.color if self.current > 0.1 else (60, 80, 110)


class HUD:
    """
    Main HUD class combining all elements.
    """

    def __init__(self):
        bar_width = 300
        margin = 24
        name_y = 8
        health_y = name_y + 26
        stamina_y = health_y + 14

        self.health_bar1 = HealthBar(margin, health_y, bar_width, 10)
        self.health_bar2 = HealthBar(SCREEN_WIDTH - margin - bar_width, health_y,
                                     bar_width, 10, is_flipped=True)
        self.stamina_bar1 = StaminaBar(margin, stamina_y, int(bar_width * 0.6), 6)
        self.stamina_bar2 = StaminaBar(SCREEN_WIDTH - margin - int(bar_width * 0.6), stamina_y,
                                       int(bar_width * 0.6), 6, is_flipped=True)

        self._name_plates = (
            pygame.Rect(margin, name_y, bar_width, 24),
            pygame.Rect(SCREEN_WIDTH - margin - bar_width, name_y, bar_width, 24),
        )
        self.fighter1_name = ""
        self.fighter2_name = ""
        self.time_remaining = 0

        self.name_font: Optional[pygame.font.Font] = None
        self.timer_font: Optional[pygame.font.Font] = None

    def _init_fonts(self):
        if self.name_font is None:
            self.name_font = pygame.font.Font(None, 22)
            self.timer_font = pygame.font.Font(None, 34)

    def reset(self, snapshot: MatchSnapshot):
        """Awal ronde: bar langsung penuh tanpa animasi"""
        self.update(0.0, snapshot)
        for bar in (self.health_bar1, self.health_bar2, self.stamina_bar1, self.stamina_bar2):
            bar.snap()

    def update(self, dt: float, snapshot: MatchSnapshot):
        """Update HUD dari snapshot terbaru"""
        self._apply(snapshot.fighter1, self.health_bar1, self.stamina_bar1)
        self._apply(snapshot.fighter2, self.health_bar2, self.stamina_bar2)
        self.fighter1_name = snapshot.fighter1.name
        self.fighter2_name = snapshot.fighter2.name
        self.time_remaining = snapshot.time_remaining

        for bar in (self.health_bar1, self.health_bar2, self.stamina_bar1, self.stamina_bar2):
            bar.update(dt)

    @staticmethod
    def _apply(fighter: FighterSnapshot, health: HealthBar, stamina: StaminaBar):
        health.set_ratio(fighter.health_percent)
        stamina.set_ratio(fighter.stamina_percent)

    def render(self, surface: pygame.Surface):
        """Render entire HUD"""
        self._init_fonts()

        # Name plates
        for rect, color, name, flipped in (
            (self._name_plates[0], NAME_BAR_P1, self.fighter1_name, False),
            (self._name_plates[1], NAME_BAR_P2, self.fighter2_name, True),
        ):
            pygame.draw.rect(surface, color, rect)
            text = self.name_font.render(name, True, WHITE)
            if flipped:
                surface.blit(text, (rect.x + 10, rect.centery - text.get_height() // 2))
            else:
                surface.blit(text, (rect.right - 10 - text.get_width(),
                                    rect.centery - text.get_height() // 2))

        self.health_bar1.render(surface)
        self.health_bar2.render(surface)
        self.stamina_bar1.render(surface)
        self.stamina_bar2.render(surface)

        # Center block: logo + timer
        center = pygame.Rect(SCREEN_WIDTH // 2 - 70, 4, 140, 40)
        pygame.draw.rect(surface, BLACK, center)
        pygame.draw.rect(surface, RED, (center.x + 8, center.y + 6, 8, 8))

        color = YELLOW if self.time_remaining <= 30 else WHITE
        timer = self.timer_font.render(format_time(self.time_remaining), True, color)
        surface.blit(timer, timer.get_rect(center=center.center))
