from kataster.state import AppState, GameState, StateMachine


def test_initial_state():
    machine = StateMachine()
    assert machine.app is AppState.SETUP
    assert machine.game is None


def test_setup_advances_to_menu():
    machine = StateMachine()
    machine.auto_advance()
    assert machine.apply() == [AppState.MENU]
    assert machine.app is AppState.MENU


def test_transition_waits_for_apply():
    machine = StateMachine()
    machine.set_app(AppState.CREDITS)
    assert machine.app is AppState.SETUP
    machine.apply()
    assert machine.app is AppState.CREDITS


def test_entering_game_starts_game_setup_then_running():
    machine = StateMachine()
    machine.set_app(AppState.GAME)
    assert machine.apply() == [AppState.GAME, GameState.SETUP]
    machine.auto_advance()
    assert machine.apply() == [GameState.RUNNING]
    assert machine.game is GameState.RUNNING


def test_leaving_game_drops_game_state():
    machine = StateMachine()
    machine.set_app(AppState.GAME)
    machine.apply()
    machine.set_game(GameState.PAUSED)
    machine.set_app(AppState.MENU)
    assert machine.apply() == [AppState.MENU]
    assert machine.game is None


def test_game_state_ignored_outside_game():
    machine = StateMachine()
    machine.set_game(GameState.RUNNING)
    assert machine.apply() == []
    assert machine.game is None


def test_same_state_enters_nothing():
    machine = StateMachine()
    machine.set_app(AppState.SETUP)
    assert machine.apply() == []