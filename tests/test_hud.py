import pytest

from kataster.hud import life_icons, score_text
from kataster.player_ship import START_LIFE


@pytest.mark.parametrize("score", [0, 10, 1230])
def test_score_text_is_decimal(score):
    assert score_text(score) == str(score)
    assert int(score_text(score)) == score


def test_one_icon_per_starting_life():
    assert len(life_icons(START_LIFE)) == START_LIFE
    assert all(life_icons(START_LIFE))


def test_no_icons_when_dead():
    icons = life_icons(0)
    assert len(icons) == START_LIFE
    assert [bool(icon) for icon in icons] == [False] * START_LIFE


@pytest.mark.parametrize("life", range(START_LIFE + 1))
def test_icons_fill_from_the_left(life):
    icons = life_icons(life)
    assert sum(icons) == life
    assert icons == sorted(icons, reverse=True)