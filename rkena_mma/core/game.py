"""
Main Game Engine for RKENA MMA Championship
"""

import logging
import pygame
from typing import Optional

from rkena_mma.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_SCALE, FPS, GAME_TITLE,
    GameState, Winner, DEBUG_FRAMERATE, WHITE, BLACK,
)
from rkena_mma.core.input_handler import InputHandler
from rkena_mma.core.match import MatchController
from rkena_mma.core.snapshot import MatchSnapshot
from rkena_mma.core.state_machine import StateMachine
from rkena_mma.fighters.fighter import InputState
from rkena_mma.audio.sound_manager import SoundManager
from rkena_mma.graphics.renderer import Renderer
from rkena_mma.ui.hud import HUD
from rkena_mma.ui.menu import MainMenu, ResultScreen

logger = logging.getLogger(__name__)


class Game:
    """
    pygame host: window, clock, dan per-frame callback yang memberi
    MatchController dt + input, lalu menggambar snapshot.
    """

    def __init__(self, seed: Optional[int] = None, mute: bool = False,
                 debug_hitboxes: bool = False):
        pygame.init()

        # Display: arena digambar 800x450 lalu di-scale ke window
        self.window = pygame.display.set_mode(
            (SCREEN_WIDTH * WINDOW_SCALE, SCREEN_HEIGHT * WINDOW_SCALE))
        pygame.display.set_caption(GAME_TITLE)
        self.screen = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))

        # Clock
        self.clock = pygame.time.Clock()
        self.running = True
        self.dt_ms = 0.0
        self.fps = 0.0

        # Core systems
        self.state_machine = StateMachine(GameState.MENU)
        self.input_handler = InputHandler()
        self.match = MatchController(seed=seed)
        self.match.on_game_over(self._on_game_over)

        # Presentation
        self.renderer = Renderer()
        self.renderer.debug_hitboxes = debug_hitboxes
        self.hud = HUD()
        self.main_menu = MainMenu()
        self.result_screen = ResultScreen()
        self.sound_manager = SoundManager()
        if mute:
            self.sound_manager.muted = True

        self.snapshot: Optional[MatchSnapshot] = None
        self._font: Optional[pygame.font.Font] = None

        self._setup_state_handlers()
        self.input_handler.register_key_callback(
            self.input_handler.bindings['debug'], self._toggle_debug)
        self.input_handler.register_key_callback(
            self.input_handler.bindings['mute'], self.sound_manager.toggle_mute)

    def _setup_state_handlers(self):
        """Register handlers for each game state"""
        self.state_machine.register_handlers(
            GameState.MENU,
            update=self._update_menu
        )
        self.state_machine.register_handlers(
            GameState.PLAYING,
            enter=self._enter_playing,
            update=self._update_playing
        )
        for state in (GameState.VICTORY, GameState.GAMEOVER):
            self.state_machine.register_handlers(
                state,
                enter=self._enter_result,
                update=self._update_result
            )

    def run(self):
        """Main game loop"""
        while self.running:
            self.dt_ms = float(self.clock.tick(FPS))
            self.fps = self.clock.get_fps()

            self.input_handler.update()
            for event in pygame.event.get():
                self.input_handler.process_event(event)

            if self.input_handler.should_quit():
                self.running = False
                continue

            self.state_machine.update(self.dt_ms)
            self._render()

            pygame.transform.scale(self.screen, self.window.get_size(), self.window)
            pygame.display.flip()

        self._cleanup()

    def _render(self):
        """Render current frame"""
        self.screen.fill(BLACK)

        if self.snapshot is not None:
            self.renderer.render(self.screen, self.snapshot, pygame.time.get_ticks())
            self.hud.render(self.screen)

        if self.state_machine.is_state(GameState.MENU):
            self.main_menu.render(self.screen)
        elif self.state_machine.current_state in (GameState.VICTORY, GameState.GAMEOVER):
            self.result_screen.render(self.screen)

        if DEBUG_FRAMERATE:
            self._render_fps()

    def _render_fps(self):
        if self._font is None:
            self._font = pygame.font.Font(None, 20)
        fps_text = self._font.render(f"FPS: {int(self.fps)}", True, WHITE)
        self.screen.blit(fps_text, (10, SCREEN_HEIGHT - 20))

    def _cleanup(self):
        """Clean up resources"""
        self.sound_manager.cleanup()
        pygame.quit()

    def _toggle_debug(self):
        enabled = self.renderer.toggle_debug()
        logger.info("Debug hitboxes %s", "on" if enabled else "off")

    # =========================================================================
    # STATE HANDLERS
    # =========================================================================

    def _update_menu(self, dt_ms: float):
        if self.input_handler.is_action_just_pressed('cancel'):
            self.running = False
            return

        action = self.main_menu.update(self.input_handler)
        if action == 'start':
            self.state_machine.transition_to(GameState.PLAYING)
        elif action == 'quit':
            self.running = False

    def _enter_playing(self):
        """Fresh round; rematch kalau datang dari result screen"""
        if self.state_machine.previous_state in (GameState.VICTORY, GameState.GAMEOVER):
            self.snapshot = self.match.rematch()
        else:
            self.snapshot = self.match.start_round()
        self.hud.reset(self.snapshot)
        self.sound_manager.reset()

    def _update_playing(self, dt_ms: float):
        if self.input_handler.is_action_just_pressed('cancel'):
            self.state_machine.transition_to(GameState.MENU)
            return

        controls: InputState = self.input_handler.fight_input()
        # frame() bisa memicu _on_game_over lewat scheduler
        snapshot = self.match.frame(dt_ms, controls)
        self.snapshot = snapshot
        self.hud.update(dt_ms / 1000.0, snapshot)
        self.sound_manager.handle_snapshot(snapshot)

    def _on_game_over(self, winner: Winner):
        target = GameState.VICTORY if winner == Winner.PLAYER else GameState.GAMEOVER
        self.result_screen.set_winner(winner)
        self.state_machine.transition_to(target, winner=winner)

    def _enter_result(self):
        winner = self.state_machine.get_data('winner')
        logger.info("Result screen: %s", winner.name if winner else "-")

    def _update_result(self, dt_ms: float):
        action = self.result_screen.update(self.input_handler)
        if action == 'rematch':
            self.state_machine.transition_to(GameState.PLAYING)
        elif action == 'menu':
            self.state_machine.transition_to(GameState.MENU)
