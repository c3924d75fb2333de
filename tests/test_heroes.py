import pytest

from slimeguard.config import ATK_VENTI, HP_HERO, HP_ZHONGLI
from slimeguard.heroes import (
    BLAST_TICKS,
    FUSE_TICKS,
    MUZZLE_OFFSET,
    SHOT_INTERVAL,
    SUN_INTERVAL,
    Ganyu,
    Klee,
    Qiqi,
    Tartaglia,
    Venti,
    Xiangling,
    Zhongli,
    create_hero,
)
from slimeguard.projectiles import Projectile
from slimeguard.scene import Scene
from slimeguard.slimes import Anemo, Element, Grass, SlimeState
from slimeguard.sun import Sun


def _of_type(scene, cls):
    return [item for item in scene if isinstance(item, cls)]


def test_create_hero_maps_card_names():
    hero = create_hero("ZhongLi")
    assert isinstance(hero, Zhongli)
    assert hero.hp == HP_ZHONGLI
    assert isinstance(create_hero("Qiqi"), Qiqi)
    assert create_hero("Qiqi").hp == HP_HERO


def test_create_hero_unknown_name():
    with pytest.raises(KeyError):
        create_hero("Nobody")


def test_hero_removed_when_dead():
    scene = Scene()
    hero = scene.add(Zhongli(290, 130))
    hero.hp = 0
    scene.advance()
    assert hero not in scene


def test_base_collision_same_lane_and_close():
    hero = Zhongli(290, 130)
    assert hero.collides_with(Anemo(310, 130))
    assert not hero.collides_with(Anemo(400, 130))
    assert not hero.collides_with(Anemo(300, 228))


def test_shooter_fires_after_interval_when_slime_in_lane():
    scene = Scene()
    venti = scene.add(Venti(300, 130))
    scene.add(Anemo(900, 130))
    for _ in range(SHOT_INTERVAL - 1):
        venti.advance(scene)
    assert _of_type(scene, Projectile) == []
    venti.advance(scene)
    shots = _of_type(scene, Projectile)
    assert len(shots) == 1
    assert shots[0].x == 300 + MUZZLE_OFFSET
    assert shots[0].y == 130
    assert shots[0].attack == ATK_VENTI
    assert shots[0].element is Element.WIND
    assert venti.counter == 0


def test_shooter_holds_fire_without_slime_in_lane():
    scene = Scene()
    venti = scene.add(Venti(300, 130))
    scene.add(Anemo(900, 228))
    for _ in range(SHOT_INTERVAL):
        venti.advance(scene)
    assert _of_type(scene, Projectile) == []
    assert venti.counter == 0


@pytest.mark.parametrize(
    "cls, element",
    [(Venti, Element.WIND), (Ganyu, Element.SNOW), (Tartaglia, Element.WATER), (Klee, Element.FIRE)],
)
def test_shooter_elements(cls, element):
    scene = Scene()
    hero = scene.add(cls(300, 130))
    scene.add(Grass(900, 130))
    for _ in range(SHOT_INTERVAL):
        hero.advance(scene)
    (shot,) = _of_type(scene, Projectile)
    assert shot.element is element
    assert shot.attack == hero.attack


def test_qiqi_produces_sun():
    scene = Scene()
    qiqi = scene.add(Qiqi(290, 130))
    for _ in range(SUN_INTERVAL - 1):
        qiqi.advance(scene)
    assert _of_type(scene, Sun) == []
    qiqi.advance(scene)
    suns = _of_type(scene, Sun)
    assert len(suns) == 1
    assert suns[0].y == qiqi.y


def test_xiangling_blast_burns_nearby_slimes_only():
    scene = Scene()
    bomb = scene.add(Xiangling(400, 130))
    near = scene.add(Grass(450, 130))
    far = scene.add(Grass(700, 130))
    for _ in range(FUSE_TICKS):
        bomb.advance(scene)
    assert bomb.state == 1
    assert near.hp <= 0
    assert near.state is SlimeState.BURN
    assert far.hp == far.base_hp
    assert far.state is SlimeState.WALK
    for _ in range(BLAST_TICKS):
        bomb.advance(scene)
    assert bomb not in scene


def test_xiangling_bounding_rect_grows_on_blast():
    bomb = Xiangling()
    small = bomb.bounding_rect()
    bomb.state = 1
    big = bomb.bounding_rect()
    assert big.width > small.width
    assert big.height > small.height