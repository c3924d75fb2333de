import random
from types import SimpleNamespace

from slimeguard.scene import Scene
from slimeguard.sun import DROP_HEIGHT, SUN_LIFETIME, SUN_VALUE, Sun


def test_sky_sun_lands_on_lawn():
    rng = random.Random(7)
    for _ in range(50):
        sun = Sun(rng=rng)
        tx, ty = sun.target
        assert 290 <= tx < 290 + 82 * 7
        assert 130 <= ty < 130 + 98 * 5
        assert sun.x == tx
        assert sun.y == DROP_HEIGHT


def test_sun_near_origin():
    rng = random.Random(3)
    for _ in range(50):
        sun = Sun((400, 200), rng=rng)
        tx, ty = sun.target
        assert 385 <= tx < 415
        assert 215 <= ty < 245
        assert sun.y == 200


def test_sun_falls_to_target_and_stops():
    scene = Scene()
    sun = scene.add(Sun(rng=random.Random(11)))
    for _ in range(250):
        scene.advance()
    assert sun.target[1] <= sun.y < sun.target[1] + sun.speed
    resting = sun.y
    scene.advance()
    assert sun.y == resting


def test_collect_adds_value_and_expires():
    scene = Scene()
    shop = SimpleNamespace(sun=0)
    sun = scene.add(Sun(rng=random.Random(1)))
    assert sun.collect(shop) == SUN_VALUE
    assert shop.sun == 25
    scene.advance()
    assert sun not in scene


def test_sun_expires_after_lifetime():
    scene = Scene()
    sun = scene.add(Sun(rng=random.Random(5)))
    for _ in range(SUN_LIFETIME - 1):
        scene.advance()
    assert sun in scene
    scene.advance()
    assert sun not in scene


def test_bounding_rect_centered():
    rect = Sun(rng=random.Random(0)).bounding_rect()
    assert rect.contains(0, 0)
    assert rect.width == 70
    assert not rect.contains(36, 0)