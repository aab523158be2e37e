"""
Input Handler
=============
Keyboard state -> InputState untuk player, plus binding menu/system.
"""

import pygame
from typing import Callable, Dict, Set, Tuple
from dataclasses import dataclass, field

from rkena_mma.fighters.fighter import InputState


@dataclass
class KeyboardState:
    """Current state of all keys"""
    keys_pressed: Set[int] = field(default_factory=set)
    keys_just_pressed: Set[int] = field(default_factory=set)
    quit_requested: bool = False


# Fight controls: intent -> keys
FIGHT_BINDINGS: Dict[str, Tuple[int, ...]] = {
    'left': (pygame.K_LEFT, pygame.K_a),
    'right': (pygame.K_RIGHT, pygame.K_d),
    'punch': (pygame.K_z, pygame.K_j),
    'kick': (pygame.K_x, pygame.K_k),
    'block': (pygame.K_c, pygame.K_l),
    'takedown': (pygame.K_v, pygame.K_DOWN),
}


class InputHandler:
    """
    Keyboard plumbing. Menghasilkan InputState untuk player tiap frame,
    plus just-pressed untuk menu dan toggle.
    """

    def __init__(self):
        self.state = KeyboardState()

        # Menu / system bindings (action -> key)
        self.bindings: Dict[str, int] = {
            'confirm': pygame.K_RETURN,
            'alt_confirm': pygame.K_SPACE,
            'cancel': pygame.K_ESCAPE,
            'up': pygame.K_UP,
            'down': pygame.K_DOWN,
            'debug': pygame.K_F1,
            'mute': pygame.K_m,
        }

        self._key_callbacks: Dict[int, Callable] = {}

    def update(self):
        """Reset edge state; dipanggil sebelum event loop tiap frame"""
        self.state.keys_just_pressed.clear()
        self.state.quit_requested = False

    def process_event(self, event: pygame.event.Event):
        """Satu pygame event: quit, key down/up, fokus hilang"""
        if event.type == pygame.QUIT:
            self.state.quit_requested = True

        elif event.type == pygame.KEYDOWN:
            if event.key not in self.state.keys_pressed:
                self.state.keys_just_pressed.add(event.key)
                if event.key in self._key_callbacks:
                    self._key_callbacks[event.key]()
            self.state.keys_pressed.add(event.key)

        elif event.type == pygame.KEYUP:
            self.state.keys_pressed.discard(event.key)

        elif event.type == pygame.WINDOWFOCUSLOST:
            # Key-up tidak datang kalau window kehilangan fokus
            self.state.keys_pressed.clear()

    def fight_input(self) -> InputState:
        """Intent player untuk frame ini (held keys)"""
        pressed = self.state.keys_pressed
        return InputState(**{
            intent: any(key in pressed for key in keys)
            for intent, keys in FIGHT_BINDINGS.items()
        })

    def is_key_just_pressed(self, key: int) -> bool:
        return key in self.state.keys_just_pressed

    def is_action_just_pressed(self, action: str) -> bool:
        """Menu/system action yang baru ditekan frame ini"""
        if action in self.bindings:
            return self.is_key_just_pressed(self.bindings[action])
        return False

    def is_confirm(self) -> bool:
        return self.is_action_just_pressed('confirm') or self.is_action_just_pressed('alt_confirm')

    def register_key_callback(self, key: int, callback: Callable):
        """Callback langsung saat key ditekan (F1, M)"""
        self._key_callbacks[key] = callback

    def should_quit(self) -> bool:
        return self.state.quit_requested
