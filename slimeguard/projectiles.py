"""Hero projectiles and the elemental reaction table they apply on hit."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional

from .scene import Item, ItemKind, Rect, Scene
from .slimes import CHILL_THRESHOLD, Element, Slime

# Projectiles beyond this x have left the field.
FIELD_RIGHT = 1069


@dataclass(frozen=True)
class _Reaction:
    """Damage as a multiple of the attack plus a flat bonus."""

    scale: float
    bonus: float = 0.0

    def damage(self, attack: int) -> float:
        return attack * self.scale + self.bonus


_NONE = _Reaction(0.0)
_PLAIN = _Reaction(1.0)
_SWIRL = _Reaction(1.0, 50.0)
_MELT = _Reaction(1.5)
_DOUBLE = _Reaction(2.0)
_CHARGED = _Reaction(0.0, 75.0)
_BURNING = _Reaction(0.0, 100.0)

# None means the hit slows the slime instead of hurting it.
_SLOW: Optional[_Reaction] = None


_REACTIONS: dict[Element, dict[Element, Optional[_Reaction]]] = {
    Element.WATER: {
        Element.SNOW: _SLOW,
        Element.WATER: _NONE,
        Element.FIRE: _MELT,
        Element.WIND: _SWIRL,
        Element.THUNDER: _CHARGED,
        Element.GRASS: _PLAIN,
    },
    Element.SNOW: {
        Element.SNOW: _NONE,
        Element.WATER: _SLOW,
        Element.FIRE: _MELT,
        Element.WIND: _SWIRL,
        Element.THUNDER: _CHARGED,
        Element.GRASS: _PLAIN,
    },
    Element.FIRE: {
        Element.SNOW: _DOUBLE,
        Element.WATER: _DOUBLE,
        Element.FIRE: _NONE,
        Element.WIND: _SWIRL,
        Element.THUNDER: _CHARGED,
        Element.GRASS: _BURNING,
    },
    Element.WIND: {
        Element.SNOW: _SWIRL,
        Element.WATER: _SWIRL,
        Element.FIRE: _SWIRL,
        Element.WIND: _SWIRL,
        Element.THUNDER: _SWIRL,
        Element.GRASS: _PLAIN,
    },
}


def react(element: Element, attack: int, slime: Slime) -> float:
    """Apply a hit of the given element to the slime and return the damage dealt."""
    rules = _REACTIONS.get(element)
    if rules is None:
        return 0.0
    rule = rules[slime.element]
    if rule is None:
        if slime.speed > CHILL_THRESHOLD:
            slime.speed /= 2
        return 0.0
    damage = rule.damage(attack)
    slime.hp -= damage
    return damage


SPRITES = {
    Element.WATER: "ShuiPea.png",
    Element.FIRE: "KleeBoom.png",
    Element.WIND: "FengPea.png",
    Element.SNOW: "BingPea.png",
}


class Projectile(Item):
    """A shot flying right along its lane until it hits a slime or leaves the field."""

    kind = ItemKind.OTHER

    def __init__(
        self,
        attack: int = 0,
        element: Element = Element.SNOW,
        x: float = 0.0,
        y: float = 0.0,
    ) -> None:
        super().__init__(x, y)
        self.attack = attack
        self.element = element
        self.speed = 360.0 * 40 / 1000

    @property
    def sprite(self) -> str:
        """Image name for the projectile's element, empty if it has none."""
        return SPRITES.get(self.element, "")

    def bounding_rect(self) -> Rect:
        return Rect(-12, -28, 24, 24)

    def collides_with(self, other: Item) -> bool:
        """A slime in the same lane less than 15 units away."""
        return (
            other.kind is ItemKind.SLIME
            and math.isclose(other.y, self.y)
            and abs(other.x - self.x) < 15
        )

    def advance(self, scene: Scene) -> None:
        hits = self.colliding_items(scene)
        if hits:
            react(self.element, self.attack, random.choice(hits))
            scene.remove(self)
            return
        self.x += self.speed
        if self.x > FIELD_RIGHT:
            scene.remove(self)