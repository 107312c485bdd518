import pytest

from kataster.assets import load_assets


def test_file_names():
    sprites, audio, ui = load_assets(lambda name: name)
    assert sprites.laser == "laserRed07.png"
    assert sprites.meteor_big == "meteorBrown_big1.png"
    assert sprites.player_ship == "playerShip2_red.png"
    assert sprites.asteroid_explosion == "flash00.png"
    assert audio.laser_trigger == "sfx_laser1.ogg"
    assert audio.ship_explosion == "Explosion_ship.ogg"
    assert ui.font == "kenvector_future.ttf"
    assert ui.ship_life == "playerLife1_red.png"


def test_shared_files():
    sprites, audio, _ = load_assets(lambda name: name)
    assert sprites.ship_explosion == sprites.ship_contact
    assert audio.ship_contact == audio.asteroid_explosion


def test_loader_called_for_each_asset():
    calls = []

    def loader(name):
        calls.append(name)
        return len(calls)

    sprites, audio, ui = load_assets(loader)
    assert len(calls) == 15
    assert sprites.laser == 1
    assert ui.ship_life == 15


def test_loader_error_propagates():
    def loader(name):
        raise FileNotFoundError(name)

    with pytest.raises(FileNotFoundError):
        load_assets(loader)