"""Sun: the currency that falls onto the lawn and is collected by clicking."""

from __future__ import annotations

import random
from typing import Any, Optional

from .scene import Item, ItemKind, Rect, Scene

SUN_VALUE = 25
SUN_LIFETIME = int(10.0 * 1000 / 33)
FALL_SPEED = 60.0 * 50 / 1000
# Height at which sky-dropped sun appears.
DROP_HEIGHT = 70

_FIELD_LEFT = 290
_FIELD_TOP = 130
_FIELD_WIDTH = 82 * 7
_FIELD_HEIGHT = 98 * 5


class Sun(Item):
    """A sun that falls to a target point and vanishes after its lifetime.

    Without an origin it drops from the sky onto a random spot of the lawn;
    with one it pops out near that point.
    """

    kind = ItemKind.OTHER

    def __init__(
        self,
        origin: Optional[tuple[float, float]] = None,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        rng = rng or random.Random()
        if origin is None:
            target = (
                _FIELD_LEFT + rng.randrange(_FIELD_WIDTH),
                _FIELD_TOP + rng.randrange(_FIELD_HEIGHT),
            )
            start_y = DROP_HEIGHT
        else:
            ox, oy = origin
            target = (ox + rng.randrange(30) - 15, oy + rng.randrange(30) + 15)
            start_y = oy
        super().__init__(target[0], start_y)
        self.target = (float(target[0]), float(target[1]))
        self.speed = FALL_SPEED
        self.counter = 0
        self.lifetime = SUN_LIFETIME

    def bounding_rect(self) -> Rect:
        return Rect(-35, -35, 70, 70)

    def collect(self, shop: Any) -> int:
        """Add this sun's value to the shop and expire it on the next tick."""
        shop.sun += SUN_VALUE
        self.counter = self.lifetime
        return SUN_VALUE

    def advance(self, scene: Scene) -> None:
        self.counter += 1
        if self.counter >= self.lifetime:
            scene.remove(self)
        elif self.y < self.target[1]:
            self.y += self.speed