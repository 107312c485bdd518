import pytest

from kataster.menu import (
    DrawBlink,
    MenuHandler,
    MenuOutcome,
    credits_menu,
    game_menu_accept,
    gameover_menu,
    main_menu,
    main_menu_accept,
    pause_menu,
    toggle_pause,
)
from kataster.state import AppState, GameState


def test_main_menu_entries():
    menu = main_menu()
    assert menu.main_text == "Kataster"
    assert menu.entries == ["Play", "Credits", "Exit"]
    assert menu.selected_id == 0
    assert menu.main_text_blink is False


def test_only_pause_menu_blinks():
    assert pause_menu().main_text_blink is True
    assert gameover_menu().main_text_blink is False
    assert credits_menu().main_text_blink is False


def test_other_menus_entries():
    assert pause_menu().entries == ["Resume", "Menu", "Exit"]
    assert gameover_menu().entries == ["Menu", "Exit"]
    assert credits_menu().entries == ["Menu", "Exit"]
    assert gameover_menu().main_text == "Game Over"
    assert credits_menu().main_text == ""


def test_move_up_wraps_to_last():
    menu = main_menu()
    menu.move_up()
    assert menu.selected_id == len(menu.entries) - 1


def test_move_down_wraps_to_first():
    menu = main_menu()
    for _ in menu.entries:
        menu.move_down()
    assert menu.selected_id == 0


def test_up_then_down_is_identity():
    menu = pause_menu()
    menu.move_down()
    before = menu.selected_id
    menu.move_up()
    menu.move_down()
    assert menu.selected_id == before


def test_empty_menu_cannot_move():
    menu = MenuHandler("x", (0.0, 0.0, 0.0), False, [])
    with pytest.raises(ValueError):
        menu.move_down()


@pytest.mark.parametrize(
    "state, selected, expected",
    [
        (AppState.MENU, 0, MenuOutcome(app=AppState.GAME)),
        (AppState.MENU, 1, MenuOutcome(app=AppState.CREDITS)),
        (AppState.MENU, 2, MenuOutcome(exit_app=True)),
        (AppState.CREDITS, 0, MenuOutcome(app=AppState.MENU)),
        (AppState.CREDITS, 1, MenuOutcome(exit_app=True)),
        (AppState.GAME, 0, None),
        (AppState.SETUP, 0, None),
    ],
)
def test_main_menu_accept(state, selected, expected):
    assert main_menu_accept(state, selected) == expected


@pytest.mark.parametrize(
    "state, selected, expected",
    [
        (GameState.PAUSED, 0, MenuOutcome(game=GameState.RUNNING)),
        (GameState.PAUSED, 1, MenuOutcome(app=AppState.MENU)),
        (GameState.PAUSED, 2, MenuOutcome(exit_app=True)),
        (GameState.OVER, 0, MenuOutcome(app=AppState.MENU)),
        (GameState.OVER, 1, MenuOutcome(exit_app=True)),
        (GameState.RUNNING, 0, None),
        (GameState.SETUP, 1, None),
    ],
)
def test_game_menu_accept(state, selected, expected):
    assert game_menu_accept(state, selected) == expected


@pytest.mark.parametrize(
    "state, expected",
    [
        (GameState.RUNNING, GameState.PAUSED),
        (GameState.PAUSED, GameState.RUNNING),
        (GameState.OVER, None),
        (GameState.SETUP, None),
    ],
)
def test_toggle_pause(state, expected):
    assert toggle_pause(state) == expected


def test_blink_toggles_after_period():
    blink = DrawBlink(enabled=True)
    assert blink.tick(0.5, True) is False


def test_blink_keeps_visibility_before_period():
    blink = DrawBlink(enabled=True)
    assert blink.tick(0.2, True) is True
    assert blink.tick(0.2, False) is False


def test_disabled_blink_never_toggles():
    blink = DrawBlink(enabled=False)
    assert blink.tick(10.0, True) is True
    assert blink.timer.elapsed == 0.0