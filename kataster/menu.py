"""Menus: entries, selection, title blinking and what accepting an entry does."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

from kataster.arena import Timer, TimerMode
from kataster.state import AppState, GameState

RGB = tuple[float, float, float]

SELECTED_BORDER: RGB = (0.4, 0.4, 0.4)
SELECTED_BG: RGB = (0.2, 0.2, 0.2)
UNSELECTED_BORDER: RGB = (0.2, 0.2, 0.2)
UNSELECTED_BG: RGB = (0.0, 0.0, 0.0)

BUTTON_SIZE = (150.0, 45.0)
BUTTON_BORDER = 5.0
BUTTON_MARGIN = 5.0
BUTTON_RADIUS = 10.0
TITLE_FONT_SIZE = 120.0
ENTRY_FONT_SIZE = 25.0
BLINK_PERIOD = 0.5

_TEAL: RGB = (0.0, 0.7, 0.7)
_RED: RGB = (0xAA / 255.0, 0x22 / 255.0, 0x22 / 255.0)
_YELLOW: RGB = (0xF8 / 255.0, 0xE4 / 255.0, 0x73 / 255.0)


class MenuAction(enum.Enum):
    MENU_UP = "menu_up"
    MENU_DOWN = "menu_down"
    ACCEPT = "accept"
    PAUSE_UNPAUSE = "pause_unpause"


# Key names as understood by pygame.key.key_code.
MENU_KEY_BINDINGS: tuple[tuple[MenuAction, str], ...] = (
    (MenuAction.ACCEPT, "return"),
    (MenuAction.PAUSE_UNPAUSE, "escape"),
    (MenuAction.MENU_UP, "w"),
    (MenuAction.MENU_UP, "up"),
    (MenuAction.MENU_DOWN, "s"),
    (MenuAction.MENU_DOWN, "down"),
)


@dataclass(frozen=True)
class MenuOutcome:
    """State changes requested by accepting a menu entry."""

    app: Optional[AppState] = None
    game: Optional[GameState] = None
    exit_app: bool = False


@dataclass
class DrawBlink:
    """Toggles the visibility of a menu title at a fixed period."""

    enabled: bool
    timer: Timer = field(default_factory=lambda: Timer(BLINK_PERIOD, TimerMode.REPEATING))

    def tick(self, delta: float, visible: bool) -> bool:
        """Advance the blink clock; return the new visibility."""
        if not self.enabled:
            return visible
        self.timer.tick(delta)
        if self.timer.finished():
            return not visible
        return visible


@dataclass
class MenuHandler:
    main_text: str
    main_text_color: RGB
    main_text_blink: bool
    entries: list[str]
    selected_id: int = 0

    def _step(self, offset: int) -> None:
        if not self.entries:
            raise ValueError("a menu without entries has nothing to select")
        self.selected_id = (self.selected_id + offset) % len(self.entries)

    def move_up(self) -> None:
        self._step(-1)

    def move_down(self) -> None:
        self._step(1)


def main_menu() -> MenuHandler:
    return MenuHandler("Kataster", _TEAL, False, ["Play", "Credits", "Exit"])


def pause_menu() -> MenuHandler:
    return MenuHandler("Pause", _YELLOW, True, ["Resume", "Menu", "Exit"])


def gameover_menu() -> MenuHandler:
    return MenuHandler("Game Over", _RED, False, ["Menu", "Exit"])


def credits_menu() -> MenuHandler:
    return MenuHandler("", _TEAL, False, ["Menu", "Exit"])


def main_menu_accept(app_state: AppState, selected_id: int) -> Optional[MenuOutcome]:
    """Effect of accepting an entry of the main or credits menu."""
    if app_state is AppState.MENU:
        if selected_id == 0:
            return MenuOutcome(app=AppState.GAME)
        if selected_id == 1:
            return MenuOutcome(app=AppState.CREDITS)
        return MenuOutcome(exit_app=True)
    if app_state is AppState.CREDITS:
        if selected_id == 0:
            return MenuOutcome(app=AppState.MENU)
        return MenuOutcome(exit_app=True)
    return None


def game_menu_accept(game_state: GameState, selected_id: int) -> Optional[MenuOutcome]:
    """Effect of accepting an entry of the pause or game-over menu."""
    if game_state is GameState.PAUSED:
        if selected_id == 0:
            return MenuOutcome(game=GameState.RUNNING)
        if selected_id == 1:
            return MenuOutcome(app=AppState.MENU)
        return MenuOutcome(exit_app=True)
    if game_state is GameState.OVER:
        if selected_id == 0:
            return MenuOutcome(app=AppState.MENU)
        return MenuOutcome(exit_app=True)
    return None


def toggle_pause(game_state: GameState) -> Optional[GameState]:
    """The state the pause key leads to, or None if it does nothing here."""
    if game_state is GameState.RUNNING:
        return GameState.PAUSED
    if game_state is GameState.PAUSED:
        return GameState.RUNNING
    return None