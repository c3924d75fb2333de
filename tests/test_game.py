import random

from slimeguard.config import INITIAL_SUN, SLIME_WAVES, SPAWN_INTERVAL
from slimeguard.game import (
    CHECK_INTERVAL,
    LANE_HEIGHT,
    LANE_TOP,
    LANES,
    SPAWN_X,
    Game,
    Outcome,
)
from slimeguard.scene import ItemKind
from slimeguard.slimes import Cyro, Slime


def make_game():
    return Game(rng=random.Random(1))


def test_initial_field():
    game = make_game()
    assert len(game.mowers) == LANES
    assert [m.y for m in game.mowers] == [LANE_TOP + LANE_HEIGHT * i for i in range(LANES)]
    assert game.shop.sun == INITIAL_SUN
    assert game.outcome is Outcome.PLAYING
    assert game.running


def test_slime_spawns_after_interval():
    game = make_game()
    results = [game.add_slime() for _ in range(SPAWN_INTERVAL)]
    assert all(r is None for r in results[:-1])
    slime = results[-1]
    assert isinstance(slime, Slime)
    assert slime.x == SPAWN_X
    assert slime.y in {LANE_TOP + LANE_HEIGHT * i for i in range(LANES)}
    assert game.spawned == 1
    assert slime in game.scene


def test_spawning_stops_after_all_waves():
    game = make_game()
    game.spawned = SLIME_WAVES
    assert all(game.add_slime() is None for _ in range(SPAWN_INTERVAL * 2))
    assert game.scene.items_of(ItemKind.SLIME) == []


def test_slime_past_the_house_loses():
    game = make_game()
    game.scene.add(Cyro(100, LANE_TOP))
    outcomes = [game.check() for _ in range(CHECK_INTERVAL)]
    assert outcomes[-2] is Outcome.PLAYING
    assert outcomes[-1] is Outcome.LOST
    assert not game.running


def test_all_waves_cleared_wins():
    game = make_game()
    game.spawned = SLIME_WAVES
    for _ in range(CHECK_INTERVAL):
        game.check()
    assert game.outcome is Outcome.WON


def test_remaining_slime_keeps_playing():
    game = make_game()
    game.spawned = SLIME_WAVES
    game.scene.add(Cyro(800, LANE_TOP))
    for _ in range(CHECK_INTERVAL):
        game.check()
    assert game.outcome is Outcome.PLAYING


def test_paused_game_does_not_advance():
    game = make_game()
    game.button.press()
    counter = game.shop.counter
    for _ in range(SPAWN_INTERVAL):
        game.tick()
    assert game.shop.counter == counter
    assert game.spawned == 0


def test_ticks_spawn_slimes():
    game = make_game()
    for _ in range(SPAWN_INTERVAL):
        game.tick()
    assert game.spawned == 1
    assert len(game.scene.items_of(ItemKind.SLIME)) == 1


def test_decided_game_stops_ticking():
    game = make_game()
    game.outcome = Outcome.WON
    counter = game.shop.counter
    assert game.tick() is Outcome.WON
    assert game.shop.counter == counter