"""The heroes: planted defenders that shoot, produce sun, block or explode."""

from __future__ import annotations

import math
from typing import Optional

from .config import (
    ATK_GANYU,
    ATK_KLEE,
    ATK_TARTAGLIA,
    ATK_VENTI,
    ATK_XIANGLING,
    HP_HERO,
    HP_ZHONGLI,
)
from .projectiles import Projectile
from .scene import Item, ItemKind, Rect, Scene
from .slimes import Element, SlimeState
from .sun import Sun

# Ticks between two shots of a shooter.
SHOT_INTERVAL = int(1.4 * 1000 / 33)
# Ticks between two suns produced by Qiqi.
SUN_INTERVAL = int(10.0 * 1000 / 33)
# Horizontal offset at which a shot leaves the shooter.
MUZZLE_OFFSET = 32
# Ticks Xiangling's fuse burns before the blast, and how long the blast lasts.
FUSE_TICKS = 20
BLAST_TICKS = 10
# Slimes closer than this to Xiangling are caught in the blast.
BLAST_RADIUS = 160


class Hero(Item):
    """Base hero: has hit points and dies when they run out."""

    kind = ItemKind.HERO
    base_hp: int = HP_HERO
    base_attack: int = 0
    interval: int = 0
    animation_name = ""
    join_sound = ""

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y)
        self.hp = self.base_hp
        self.attack = self.base_attack
        self.state = 0
        self.counter = 0
        self.animation = self.animation_name

    def bounding_rect(self) -> Rect:
        return Rect(-35, -35, 70, 70)

    def collides_with(self, other: Item) -> bool:
        """A slime in the same lane less than 30 units away."""
        return (
            other.kind is ItemKind.SLIME
            and math.isclose(other.y, self.y)
            and abs(other.x - self.x) < 30
        )

    def _died(self, scene: Scene) -> bool:
        if self.hp <= 0:
            scene.remove(self)
            return True
        return False

    def advance(self, scene: Scene) -> None:
        self._died(scene)


class Shooter(Hero):
    """A hero that fires an elemental shot whenever a slime is in its lane."""

    element = Element.SNOW
    interval = SHOT_INTERVAL

    def collides_with(self, other: Item) -> bool:
        """Any slime in the same lane."""
        return other.kind is ItemKind.SLIME and math.isclose(other.y, self.y)

    def advance(self, scene: Scene) -> None:
        if self._died(scene):
            return
        self.counter += 1
        if self.counter >= self.interval:
            self.counter = 0
            if self.colliding_items(scene):
                scene.add(
                    Projectile(self.attack, self.element, self.x + MUZZLE_OFFSET, self.y)
                )


class Qiqi(Hero):
    """Produces a sun next to herself at a fixed interval."""

    interval = SUN_INTERVAL
    animation_name = "Qiqi.gif"
    join_sound = "QiqiJoin.wav"

    def advance(self, scene: Scene) -> None:
        if self._died(scene):
            return
        self.counter += 1
        if self.counter >= self.interval:
            self.counter = 0
            scene.add(Sun((self.x, self.y)))


class Venti(Shooter):
    base_attack = ATK_VENTI
    element = Element.WIND
    animation_name = "Venti.gif"
    join_sound = "VentiJoin.wav"


class Ganyu(Shooter):
    base_attack = ATK_GANYU
    element = Element.SNOW
    animation_name = "Ganyu.gif"
    join_sound = "GanyuJoin.wav"


class Tartaglia(Shooter):
    base_attack = ATK_TARTAGLIA
    element = Element.WATER
    animation_name = "Tartaglia.gif"
    join_sound = "TartagliaJoin.wav"


class Klee(Shooter):
    base_attack = ATK_KLEE
    element = Element.FIRE
    animation_name = "Klee.gif"
    join_sound = "KleeJoin.wav"


class Zhongli(Hero):
    """A sturdy wall that only soaks up damage."""

    base_hp = HP_ZHONGLI
    animation_name = "ZhongLi.gif"
    join_sound = "ZhongLiJoin.wav"


class Xiangling(Hero):
    """A bomb: after its fuse it blasts every slime nearby, then disappears.

    State 0 is the burning fuse, state 1 the blast.
    """

    base_attack = ATK_XIANGLING
    animation_name = "Guoba.gif"
    join_sound = "XianglingJoin.wav"

    def bounding_rect(self) -> Rect:
        if self.state:
            return Rect(-150, -150, 300, 300)
        return super().bounding_rect()

    def collides_with(self, other: Item) -> bool:
        """Any slime closer than the blast radius."""
        return (
            other.kind is ItemKind.SLIME
            and math.hypot(other.x - self.x, other.y - self.y) < BLAST_RADIUS
        )

    def advance(self, scene: Scene) -> None:
        if self._died(scene):
            return
        self.counter += 1
        if self.state == 0 and self.counter >= FUSE_TICKS:
            self.state = 1
            self.counter = 0
            self.animation = "Boom.gif"
            for slime in self.colliding_items(scene):
                slime.hp -= self.attack
                if slime.hp <= 0:
                    slime.state = SlimeState.BURN
                    slime.animation = "slmDie.gif"
        elif self.state == 1 and self.counter >= BLAST_TICKS:
            scene.remove(self)


_HEROES: dict[str, type[Hero]] = {
    "Qiqi": Qiqi,
    "Venti": Venti,
    "Xiangling": Xiangling,
    "ZhongLi": Zhongli,
    "Ganyu": Ganyu,
    "Tartaglia": Tartaglia,
    "Klee": Klee,
}


def create_hero(name: str) -> Hero:
    """Create the hero a shop card of the given name plants; raise KeyError if unknown."""
    cls: Optional[type[Hero]] = _HEROES.get(name)
    if cls is None:
        raise KeyError(f"unknown hero: {name!r}")
    return cls()