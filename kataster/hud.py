"""Heads-up display contents: score text and remaining-life icons."""

from __future__ import annotations

from kataster.player_ship import START_LIFE

SCORE_COLOR = (0x00, 0xAA, 0xAA)
SCORE_FONT_SIZE = 50.0
HUD_MARGIN = 10.0


def score_text(score: int) -> str:
    return f"{score}"


def life_icons(life: int) -> list[bool]:
    """Visibility of each life icon, from the first to the last."""
    return [life >= minimum for minimum in range(1, START_LIFE + 1)]