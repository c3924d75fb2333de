import random

import pytest

from slimeguard.app import RULES_BUTTON, START_BUTTON, VIEW_LEFT, App, Screen, main
from slimeguard.game import Outcome
from slimeguard.lawn import SHOVEL_TEXT
from slimeguard.scene import ItemKind
from slimeguard.sun import SUN_VALUE, Sun


def _centre(rect):
    return (rect.x + rect.width / 2, rect.y + rect.height / 2)


def _screen_pos(x, y):
    return (x - VIEW_LEFT, y)


@pytest.fixture
def app():
    result = App(seed=1)
    result.start_game()
    return result


def test_app_starts_on_title():
    assert App().screen is Screen.TITLE


def test_start_button_opens_game():
    app = App(seed=3)
    assert app.handle_click(_centre(START_BUTTON)) is Screen.GAME
    assert app.game.outcome is Outcome.PLAYING


def test_rules_button_and_back():
    app = App()
    assert app.handle_click(_centre(RULES_BUTTON)) is Screen.RULES
    assert app.game is None
    assert app.handle_click((10, 10)) is Screen.TITLE


def test_click_outside_buttons_keeps_title():
    app = App()
    assert app.handle_click((10, 10)) is Screen.TITLE
    assert app.game is None


def test_pause_button_toggles_and_freezes(app):
    game = app.game
    button = game.button
    app.handle_click(_screen_pos(button.x, button.y))
    assert button.running is False
    before = game.shop.counter
    game.tick()
    assert game.shop.counter == before
    app.handle_click(_screen_pos(button.x, button.y))
    assert button.running is True


def test_collect_sun(app):
    game = app.game
    sun = game.scene.add(Sun((500.0, 300.0), rng=random.Random(0)))
    start = game.shop.sun
    app.handle_click(_screen_pos(sun.x, sun.y))
    assert game.shop.sun == start + SUN_VALUE
    assert sun.counter == sun.lifetime


def test_unready_card_is_not_selected(app):
    card = app.game.shop.card("Qiqi")
    app.handle_click(_screen_pos(card.x, card.y))
    assert app.selected is None


def test_plant_and_dig_up(app):
    game = app.game
    card = game.shop.card("Qiqi")
    card.counter = card.cooldown
    start = game.shop.sun
    app.handle_click(_screen_pos(card.x, card.y))
    assert app.selected == "Qiqi"
    app.handle_click(_screen_pos(290, 130))
    assert app.selected is None
    assert game.shop.sun == start - card.cost
    heroes = game.scene.items_of(ItemKind.HERO)
    assert [(h.x, h.y) for h in heroes] == [(290.0, 130.0)]

    shovel = game.shovel
    app.handle_click(_screen_pos(shovel.x, shovel.y))
    assert app.selected == SHOVEL_TEXT
    app.handle_click(_screen_pos(290, 130))
    assert game.scene.items_of(ItemKind.HERO) == []


def test_back_returns_to_title(app):
    assert app.back() is Screen.TITLE
    assert app.selected is None


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0


def test_main_rejects_bad_seed():
    with pytest.raises(SystemExit) as info:
        main(["--seed", "abc"])
    assert info.value.code == 2