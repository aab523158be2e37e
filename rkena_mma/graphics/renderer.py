"""
Main Renderer
=============
Menggambar satu frame dari MatchSnapshot: arena, commentator shout,
fighters, particles, dan debug overlay.
"""

import pygame
from typing import Optional

from rkena_mma.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, SHOUT_FRAMES, DEBUG_HITBOXES,
    BLACK, WHITE, GREEN, RED,
)
from rkena_mma.core.snapshot import FighterSnapshot, MatchSnapshot, ShoutSnapshot
from rkena_mma.graphics.sprites import FighterSprites, ArenaSprites


class Renderer:
    """
    Main renderer untuk game.
    Hanya membaca snapshot, tidak pernah menyentuh World.
    """

    def __init__(self):
        self.fighter_sprites = FighterSprites()

        # Background surface (cached)
        self._background = ArenaSprites.create_arena_surface(SCREEN_WIDTH, SCREEN_HEIGHT)
        self._shout_font: Optional[pygame.font.Font] = None
        self._debug_font: Optional[pygame.font.Font] = None

        # Debug
        self.debug_hitboxes = DEBUG_HITBOXES

    def toggle_debug(self) -> bool:
        self.debug_hitboxes = not self.debug_hitboxes
        return self.debug_hitboxes

    def render(self, surface: pygame.Surface, snapshot: MatchSnapshot, time_ms: float):
        """Render complete game frame"""
        surface.fill(BLACK)
        surface.blit(self._background, (0, 0))

        # Shout di belakang fighters
        if snapshot.shout:
            self._render_shout(surface, snapshot.shout)

        # Yang lebih tinggi digambar dulu
        fighters = sorted((snapshot.fighter1, snapshot.fighter2), key=lambda f: f.y)
        for fighter in fighters:
            self.fighter_sprites.draw(surface, fighter, time_ms)

        self._render_particles(surface, snapshot)

        if self.debug_hitboxes:
            for fighter in fighters:
                self._render_debug_hitboxes(surface, fighter)

    def _render_particles(self, surface: pygame.Surface, snapshot: MatchSnapshot):
        for p in snapshot.particles:
            size = max(1, int(p.size))
            pygame.draw.rect(surface, p.color, (int(p.x), int(p.y), size, size))

    def _render_shout(self, surface: pygame.Surface, shout: ShoutSnapshot):
        """Speech bubble di atas commentator, fade di 30 frame terakhir"""
        if self._shout_font is None:
            self._shout_font = pygame.font.Font(None, 30)

        alpha = int(255 * min(1.0, shout.frames_left / 30))
        scale = 1 + (SHOUT_FRAMES - shout.frames_left) * 0.003
        x, head_y = ArenaSprites.commentator_position(shout.seat)

        text = self._shout_font.render(shout.text, True, RED)
        if scale != 1:
            text = pygame.transform.smoothscale(
                text, (int(text.get_width() * scale), int(text.get_height() * scale)))

        bubble_w, bubble_h = text.get_width() + 30, text.get_height() + 16
        bubble = pygame.Surface((bubble_w, bubble_h + 12), pygame.SRCALPHA)
        pygame.draw.rect(bubble, WHITE, (0, 0, bubble_w, bubble_h), border_radius=10)
        pygame.draw.rect(bubble, (51, 51, 51), (0, 0, bubble_w, bubble_h), 2, border_radius=10)
        # Ekor bubble
        pygame.draw.polygon(bubble, WHITE, [(bubble_w // 2 - 8, bubble_h - 1),
                                            (bubble_w // 2 + 8, bubble_h - 1),
                                            (bubble_w // 2, bubble_h + 11)])
        bubble.blit(text, (15, 8))
        bubble.set_alpha(alpha)

        surface.blit(bubble, (x - bubble_w // 2, head_y - 60 - bubble_h // 2))

    def _render_debug_hitboxes(self, surface: pygame.Surface, fighter: FighterSnapshot):
        """Render hitbox/hurtbox debug overlay"""
        if self._debug_font is None:
            self._debug_font = pygame.font.Font(None, 18)

        # Hurtbox (green)
        pygame.draw.rect(surface, GREEN,
                         (int(fighter.x), int(fighter.y), int(fighter.width), int(fighter.height)), 1)

        # Active hitbox (red)
        if fighter.hitbox:
            x, y, w, h = fighter.hitbox
            pygame.draw.rect(surface, RED, (int(x), int(y), int(w), int(h)), 2)

        label = f"{fighter.state.value} {fighter.state_timer}"
        text = self._debug_font.render(label, True, WHITE)
        surface.blit(text, (int(fighter.x), int(fighter.y) - 14))
