"""A minimal 2D scene: positioned items, bounding boxes and a tick loop."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator


class ItemKind(enum.Enum):
    """What an item is, for collision filtering."""

    HERO = 1
    SLIME = 2
    OTHER = 3


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside the rectangle or on its edge."""
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height


def _scene_rect(item: "Item") -> Rect:
    local = item.bounding_rect()
    return Rect(local.x + item.x, local.y + item.y, local.width, local.height)


def _overlap(a: Rect, b: Rect) -> bool:
    return (
        a.x < b.x + b.width
        and b.x < a.x + a.width
        and a.y < b.y + b.height
        and b.y < a.y + a.height
    )


class Item:
    """Something placed in the scene at (x, y) that takes part in each tick."""

    kind = ItemKind.OTHER

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)

    def bounding_rect(self) -> Rect:
        """The item's extent relative to its position."""
        return Rect(0.0, 0.0, 0.0, 0.0)

    def collides_with(self, other: "Item") -> bool:
        """By default, two items collide when their bounding boxes overlap."""
        return _overlap(_scene_rect(self), _scene_rect(other))

    def colliding_items(self, scene: "Scene") -> list["Item"]:
        """Every other item in the scene this item collides with."""
        return [other for other in scene if other is not self and self.collides_with(other)]

    def advance(self, scene: "Scene") -> None:
        """Take one tick of action; the base item does nothing."""


class Scene:
    """An ordered collection of items advanced together."""

    def __init__(self) -> None:
        self._items: dict[Item, None] = {}

    @property
    def items(self) -> list[Item]:
        """All items, in the order they were added."""
        return list(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def add(self, item: Item) -> Item:
        """Place an item in the scene and return it."""
        self._items[item] = None
        return item

    def remove(self, item: Item) -> None:
        """Take an item out of the scene; raise ValueError if it is not there."""
        if item not in self._items:
            raise ValueError("item is not in the scene")
        self._items.pop(item)

    def items_at(self, x: float, y: float) -> list[Item]:
        """Items whose bounding box holds the point, topmost (latest added) first."""
        return [item for item in reversed(self._items) if _scene_rect(item).contains(x, y)]

    def items_of(self, kind: ItemKind) -> list[Item]:
        """Items of the given kind, in the order they were added."""
        return [item for item in self._items if item.kind is kind]

    def advance(self) -> None:
        """Advance every item once; items removed during the tick are skipped."""
        for item in list(self._items):
            if item in self._items:
                item.advance(self)