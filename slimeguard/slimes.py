"""The slimes: element-bearing enemies that walk left and chew on heroes."""

from __future__ import annotations

import enum
import math

from .config import (
    ATK_SLIME,
    HP_ANEMO,
    HP_CYRO,
    HP_ELECTRO,
    HP_GRASS,
    HP_PYRO,
    SPEED_SLIME_FAST,
    SPEED_SLIME_SLOW,
)
from .scene import Item, ItemKind, Rect, Scene

# Slimes slower than this are drawn as chilled and cannot be slowed further.
CHILL_THRESHOLD = 0.55
# Ticks a burnt slime lingers before it disappears.
BURN_TICKS = 20


class Element(enum.Enum):
    """The elements slimes carry and projectiles deliver."""

    SNOW = 0
    WATER = 1
    FIRE = 2
    WIND = 3
    THUNDER = 4
    GRASS = 5


class SlimeState(enum.IntEnum):
    """What a slime is doing."""

    WALK = 0
    ATTACK = 1
    DIE = 2
    BURN = 3


class Slime(Item):
    """Base slime: walks left along its lane and attacks the hero it meets."""

    kind = ItemKind.SLIME
    base_hp: float = 0.0
    base_speed: float = 0.0
    element = Element.SNOW
    animation_name = ""

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y)
        self.hp = float(self.base_hp)
        self.attack = ATK_SLIME
        self.speed = self.base_speed
        self.state = SlimeState.WALK
        self.animation = self.animation_name
        self.burn_ticks = BURN_TICKS

    def bounding_rect(self) -> Rect:
        return Rect(0, -30, 90, 80)

    def collides_with(self, other: Item) -> bool:
        """A hero in the same lane less than 30 units away."""
        return (
            other.kind is ItemKind.HERO
            and math.isclose(other.y, self.y)
            and abs(other.x - self.x) < 30
        )

    def advance(self, scene: Scene) -> None:
        if self.hp <= 0:
            if self.state < SlimeState.DIE:
                self.state = SlimeState.DIE
                scene.remove(self)
            else:
                self.burn_ticks -= 1
                if self.burn_ticks <= 0:
                    scene.remove(self)
            return
        targets = self.colliding_items(scene)
        if targets:
            targets[0].hp -= self.attack
            self.state = SlimeState.ATTACK
            self.animation = self.animation_name
            return
        self.state = SlimeState.WALK
        self.animation = self.animation_name
        self.x -= self.speed


class Anemo(Slime):
    base_hp = HP_ANEMO
    base_speed = SPEED_SLIME_FAST
    element = Element.WIND
    animation_name = "fengslm.gif"


class Cyro(Slime):
    base_hp = HP_CYRO
    base_speed = SPEED_SLIME_SLOW
    element = Element.SNOW
    animation_name = "bingslm.gif"


class Electro(Slime):
    base_hp = HP_ELECTRO
    base_speed = SPEED_SLIME_SLOW
    element = Element.THUNDER
    animation_name = "leislm.gif"


class Grass(Slime):
    base_hp = HP_GRASS
    base_speed = SPEED_SLIME_SLOW
    element = Element.GRASS
    animation_name = "caoslm.gif"


class Pyro(Slime):
    base_hp = HP_PYRO
    base_speed = SPEED_SLIME_SLOW
    element = Element.FIRE
    animation_name = "huoslm.gif"


_SPAWN_TABLE: tuple[tuple[int, type[Slime]], ...] = (
    (20, Anemo),
    (40, Cyro),
    (60, Electro),
    (80, Grass),
    (100, Pyro),
)


def spawn_slime(roll: int) -> Slime:
    """Create the slime chosen by a roll in 0..99 (20% chance for each kind)."""
    if not 0 <= roll < 100:
        raise ValueError(f"roll must be in 0..99, got {roll}")
    return next(cls for limit, cls in _SPAWN_TABLE if roll < limit)()