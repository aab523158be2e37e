"""
Menu System
===========
Title screen dan result screen (YOU WIN! / K.O. / DRAW).
"""

import pygame
from typing import List, Optional
from dataclasses import dataclass

from rkena_mma.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT,
    WHITE, GRAY, LIGHT_GRAY, RED, GREEN, YELLOW, Winner,
)

CONTROLS_HELP = (
    ("LEFT / RIGHT", "MOVE"),
    ("Z", "PUNCH"),
    ("X", "KICK"),
    ("C", "BLOCK"),
    ("V", "TAKEDOWN"),
)


@dataclass
class MenuItem:
    """Single menu item"""
    text: str
    action: str


class MenuSystem:
    """
    Base menu dengan selection dan keyboard navigation.
    """

    def __init__(self, y_start: int = SCREEN_HEIGHT * 3 // 4):
        self.items: List[MenuItem] = []
        self.selected_index = 0
        self.x = SCREEN_WIDTH // 2
        self.y_start = y_start
        self.item_spacing = 36

        self.font: Optional[pygame.font.Font] = None
        self.title_font: Optional[pygame.font.Font] = None
        self.small_font: Optional[pygame.font.Font] = None

        self._overlay = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
        self._overlay.fill((0, 0, 0, 220))

    def _init_fonts(self):
        if self.font is None:
            self.font = pygame.font.Font(None, 34)
            self.title_font = pygame.font.Font(None, 72)
            self.small_font = pygame.font.Font(None, 22)

    def add_item(self, text: str, action: str):
        self.items.append(MenuItem(text=text, action=action))

    def move_selection(self, direction: int):
        if self.items:
            self.selected_index = (self.selected_index + direction) % len(self.items)

    def update(self, input_handler) -> Optional[str]:
        """Handle input; return action yang dipilih"""
        if input_handler.is_action_just_pressed('up'):
            self.move_selection(-1)
        elif input_handler.is_action_just_pressed('down'):
            self.move_selection(1)

        if input_handler.is_confirm() and self.items:
            return self.items[self.selected_index].action
        return None

    def render_items(self, surface: pygame.Surface):
        self._init_fonts()
        for i, item in enumerate(self.items):
            selected = i == self.selected_index
            label = f"> {item.text} <" if selected else item.text
            text = self.font.render(label, True, YELLOW if selected else WHITE)
            surface.blit(text, text.get_rect(center=(self.x, self.y_start + i * self.item_spacing)))


class MainMenu(MenuSystem):
    """Title screen dengan daftar kontrol"""

    def __init__(self):
        super().__init__()
        self.add_item("FIGHT!", "start")
        self.add_item("QUIT", "quit")

    def render(self, surface: pygame.Surface):
        self._init_fonts()
        surface.blit(self._overlay, (0, 0))

        title = self.title_font.render("RKENA MMA", True, RED)
        surface.blit(title, title.get_rect(center=(self.x, 70)))
        sub = self.font.render("CHAMPIONSHIP", True, WHITE)
        surface.blit(sub, sub.get_rect(center=(self.x, 115)))

        header = self.small_font.render("CONTROLS:", True, GRAY)
        surface.blit(header, header.get_rect(center=(self.x, 160)))
        for i, (keys, action) in enumerate(CONTROLS_HELP):
            y = 185 + i * 22
            k = self.small_font.render(f"[{keys}]", True, WHITE)
            a = self.small_font.render(action, True, LIGHT_GRAY)
            surface.blit(k, (self.x - 20 - k.get_width(), y))
            surface.blit(a, (self.x + 20, y))

        self.render_items(surface)


class ResultScreen(MenuSystem):
    """Layar akhir match dengan Rematch"""

    def __init__(self):
        super().__init__(y_start=SCREEN_HEIGHT * 2 // 3)
        self.add_item("REMATCH", "rematch")
        self.add_item("MAIN MENU", "menu")
        self.winner: Optional[Winner] = None

    def set_winner(self, winner: Winner):
        self.winner = winner
        self.selected_index = 0

    def headline(self):
        if self.winner == Winner.PLAYER:
            return "YOU WIN!", GREEN
        if self.winner == Winner.DRAW:
            return "DRAW", YELLOW
        return "K.O.", RED

    def render(self, surface: pygame.Surface):
        self._init_fonts()
        surface.blit(self._overlay, (0, 0))
        text, color = self.headline()
        title = self.title_font.render(text, True, color)
        surface.blit(title, title.get_rect(center=(self.x, SCREEN_HEIGHT // 3)))
        self.render_items(surface)
