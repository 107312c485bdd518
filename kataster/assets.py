"""Names of the sprite, sound and font files the game uses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class SpriteAssets:
    laser: Any
    meteor_big: Any
    meteor_med: Any
    meteor_small: Any
    player_ship: Any
    ship_explosion: Any
    ship_contact: Any
    asteroid_explosion: Any


@dataclass(frozen=True)
class AudioAssets:
    laser_trigger: Any
    ship_explosion: Any
    ship_contact: Any
    asteroid_explosion: Any


@dataclass(frozen=True)
class UiAssets:
    font: Any
    font_fira: Any
    ship_life: Any


def load_assets(
    loader: Callable[[str], Any],
) -> tuple[SpriteAssets, AudioAssets, UiAssets]:
    """Load every asset through ``loader``, which maps a file name to a handle."""
    sprites = SpriteAssets(
        laser=loader("laserRed07.png"),
        meteor_big=loader("meteorBrown_big1.png"),
        meteor_med=loader("meteorBrown_med1.png"),
        meteor_small=loader("meteorBrown_small1.png"),
        player_ship=loader("playerShip2_red.png"),
        ship_explosion=loader("explosion01.png"),
        ship_contact=loader("explosion01.png"),
        asteroid_explosion=loader("flash00.png"),
    )
    audio = AudioAssets(
        laser_trigger=loader("sfx_laser1.ogg"),
        ship_explosion=loader("Explosion_ship.ogg"),
        ship_contact=loader("Explosion.ogg"),
        asteroid_explosion=loader("Explosion.ogg"),
    )
    ui = UiAssets(
        font=loader("kenvector_future.ttf"),
        font_fira=loader("FiraSans-Bold.ttf"),
        ship_life=loader("playerLife1_red.png"),
    )
    return sprites, audio, ui