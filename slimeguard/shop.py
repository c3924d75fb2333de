"""The card tray: sun balance, card cooldowns and planting heroes."""

from __future__ import annotations

import random
from typing import Optional

from .config import CARDS, INITIAL_SUN, CardSpec, card_spec
from .heroes import Hero, create_hero
from .scene import Item, ItemKind, Rect, Scene
from .sun import Sun

# Ticks between two suns dropped from the sky.
SKY_SUN_INTERVAL = int(7.0 * 1000 / 33)


class Card(Item):
    """A card in the tray; it cools down after each use."""

    kind = ItemKind.OTHER

    def __init__(self, name: str, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y)
        self.spec: CardSpec = card_spec(name)
        self.counter = 0

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def cost(self) -> int:
        return self.spec.cost

    @property
    def cooldown(self) -> int:
        return self.spec.cooldown

    def bounding_rect(self) -> Rect:
        return Rect(-50, -30, 100, 60)

    def ready(self) -> bool:
        """Whether the cooldown has elapsed."""
        return self.counter >= self.cooldown

    def can_buy(self, sun: int) -> bool:
        """Whether the card is ready and affordable with the given sun."""
        return self.ready() and self.cost <= sun

    def advance(self, scene: Scene) -> None:
        if self.counter < self.cooldown:
            self.counter += 1


class Shop(Item):
    """The tray of cards and the player's sun; also drops sun from the sky."""

    kind = ItemKind.OTHER

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(x, y)
        self.sun = INITIAL_SUN
        self.counter = 0
        self.interval = SKY_SUN_INTERVAL
        self._rng = rng or random.Random()
        self.cards = [
            Card(spec.name, x - 157 + 65 * index, y - 2)
            for index, spec in enumerate(CARDS)
        ]

    def bounding_rect(self) -> Rect:
        return Rect(-270, -45, 540, 90)

    def card(self, name: str) -> Card:
        """The card of the given name; raise KeyError if there is none."""
        for card in self.cards:
            if card.name == name:
                return card
        raise KeyError(f"unknown card: {name!r}")

    def advance(self, scene: Scene) -> None:
        for card in self.cards:
            card.advance(scene)
        self.counter += 1
        if self.counter >= self.interval:
            self.counter = 0
            scene.add(Sun(rng=self._rng))

    def plant(self, scene: Scene, name: str, x: float, y: float) -> Optional[Hero]:
        """Plant the named hero at (x, y) and return it.

        Returns None when the card is cooling down or unaffordable, or when a
        hero already stands there.
        """
        card = self.card(name)
        if not card.can_buy(self.sun):
            return None
        if any(item.kind is ItemKind.HERO for item in scene.items_at(x, y)):
            return None
        self.sun -= card.cost
        hero = create_hero(name)
        hero.x = float(x)
        hero.y = float(y)
        scene.add(hero)
        card.counter = 0
        self.counter = 0
        return hero