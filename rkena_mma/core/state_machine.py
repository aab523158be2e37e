"""
Match Flow State Machine
========================
MENU -> PLAYING -> VICTORY / GAMEOVER -> PLAYING (rematch) atau MENU.
Hanya transisi yang ada di FLOW_TRANSITIONS yang diterima.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, FrozenSet, Optional

from rkena_mma.config import GameState

logger = logging.getLogger(__name__)

FLOW_TRANSITIONS: Dict[GameState, FrozenSet[GameState]] = {
    GameState.MENU: frozenset({GameState.PLAYING}),
    GameState.PLAYING: frozenset({GameState.VICTORY, GameState.GAMEOVER, GameState.MENU}),
    GameState.VICTORY: frozenset({GameState.PLAYING, GameState.MENU}),
    GameState.GAMEOVER: frozenset({GameState.PLAYING, GameState.MENU}),
}


@dataclass
class StateHandlers:
    enter: Optional[Callable[[], None]] = None
    exit: Optional[Callable[[], None]] = None
    update: Optional[Callable[[float], None]] = None


class StateMachine:
    """
    Flow antar layar. Data dari transition_to(**kwargs) disimpan di
    state_data supaya bisa dibaca enter handler state berikutnya.
    """

    def __init__(self, initial: GameState = GameState.MENU):
        self.current_state: GameState = initial
        self.previous_state: Optional[GameState] = None
        self._handlers: Dict[GameState, StateHandlers] = {
            state: StateHandlers() for state in GameState
        }
        self.state_data: Dict[str, Any] = {}

    def register_handlers(
        self,
        state: GameState,
        enter: Optional[Callable] = None,
        exit_handler: Optional[Callable] = None,
        update: Optional[Callable] = None
    ):
        handlers = self._handlers[state]
        if enter:
            handlers.enter = enter
        if exit_handler:
            handlers.exit = exit_handler
        if update:
            handlers.update = update

    def can_transition(self, new_state: GameState) -> bool:
        return new_state in FLOW_TRANSITIONS[self.current_state]

    def transition_to(self, new_state: GameState, **kwargs) -> bool:
        """
        Exit handler state lama, lalu enter handler state baru.
        Return False kalau sudah di state itu atau transisi tidak diizinkan.
        """
        if new_state == self.current_state:
            return False

        if not self.can_transition(new_state):
            logger.warning("Rejected flow transition %s -> %s",
                           self.current_state.name, new_state.name)
            return False

        self.state_data.update(kwargs)

        leaving = self._handlers[self.current_state]
        if leaving.exit:
            leaving.exit()

        self.previous_state, self.current_state = self.current_state, new_state
        logger.debug("Flow: %s -> %s", self.previous_state.name, new_state.name)

        entering = self._handlers[new_state]
        if entering.enter:
            entering.enter()
        return True

    def update(self, dt: float):
        handler = self._handlers[self.current_state].update
        if handler:
            handler(dt)

    def is_state(self, state: GameState) -> bool:
        return self.current_state == state

    def get_data(self, key: str, default: Any = None) -> Any:
        return self.state_data.get(key, default)
