"""Application and in-game state machine."""

from __future__ import annotations

import enum
from typing import Optional, Union


class AppState(enum.Enum):
    SETUP = "setup"
    MENU = "menu"
    GAME = "game"
    CREDITS = "credits"


class GameState(enum.Enum):
    SETUP = "setup"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


class StateMachine:
    """Holds the current app state, and the game sub-state while in a game.

    Requested transitions are queued and take effect on ``apply``.
    """

    def __init__(self) -> None:
        self.app = AppState.SETUP
        self.game: Optional[GameState] = None
        self._next_app: Optional[AppState] = None
        self._next_game: Optional[GameState] = None

    def set_app(self, state: AppState) -> None:
        self._next_app = state

    def set_game(self, state: GameState) -> None:
        self._next_game = state

    def apply(self) -> list[Union[AppState, GameState]]:
        """Perform queued transitions and return the states entered, in order."""
        entered: list[Union[AppState, GameState]] = []
        if self._next_app is not None:
            target = self._next_app
            self._next_app = None
            if target != self.app:
                self.app = target
                entered.append(target)
                if target is AppState.GAME:
                    self.game = GameState.SETUP
                    entered.append(GameState.SETUP)
                else:
                    self.game = None
                    self._next_game = None
        if self._next_game is not None:
            target = self._next_game
            self._next_game = None
            if self.game is not None and target != self.game:
                self.game = target
                entered.append(target)
        return entered

    def auto_advance(self) -> None:
        """Queue the automatic moves out of the setup states."""
        if self.app is AppState.SETUP:
            self.set_app(AppState.MENU)
        if self.game is GameState.SETUP:
            self.set_game(GameState.RUNNING)