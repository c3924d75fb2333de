"""Lawn furniture: mowers, the shovel, the planting grid and the pause button."""

from __future__ import annotations

import math
from typing import Callable, Optional

from .heroes import Hero
from .scene import Item, ItemKind, Rect, Scene
from .shop import Shop

# Items beyond this x have left the field.
FIELD_RIGHT = 1069
MOWER_SPEED = 270.0 * 33 / 1000

# Grid geometry of the lawn: origin of the snapping and size of one cell.
_GRID_LEFT = 249
_GRID_TOP = 81
CELL_WIDTH = 82
CELL_HEIGHT = 98
CELL_X0 = 290
CELL_Y0 = 130

SHOVEL_TEXT = "Shovel"


def _trunc_div(value: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def snap_to_cell(x: float, y: float) -> tuple[float, float]:
    """The centre of the lawn cell that holds the scene point (x, y)."""
    col = _trunc_div(int(x) - _GRID_LEFT, CELL_WIDTH)
    row = _trunc_div(int(y) - _GRID_TOP, CELL_HEIGHT)
    return float(col * CELL_WIDTH + CELL_X0), float(row * CELL_HEIGHT + CELL_Y0)


class Mower(Item):
    """Sits at the end of a lane; once a slime reaches it, it sweeps the lane."""

    kind = ItemKind.OTHER

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y)
        self.triggered = False
        self.speed = MOWER_SPEED

    def bounding_rect(self) -> Rect:
        return Rect(-30, -30, 60, 60)

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
            self.triggered = True
            for slime in hits:
                slime.hp = 0
        if self.triggered:
            self.x += self.speed
        if self.x > FIELD_RIGHT:
            scene.remove(self)


class Shovel(Item):
    """Digs up planted heroes."""

    kind = ItemKind.OTHER

    def bounding_rect(self) -> Rect:
        return Rect(-40, -40, 80, 80)

    def remove_hero(self, scene: Scene, x: float, y: float) -> Optional[Hero]:
        """Remove the topmost hero at (x, y) and return it, or None if there is none."""
        for item in scene.items_at(x, y):
            if item.kind is ItemKind.HERO:
                scene.remove(item)
                return item  # type: ignore[return-value]
        return None


class Lawn(Item):
    """The planting area: cards and the shovel are dropped onto it."""

    kind = ItemKind.OTHER

    def __init__(
        self, shop: Shop, shovel: Shovel, x: float = 0.0, y: float = 0.0
    ) -> None:
        super().__init__(x, y)
        self.shop = shop
        self.shovel = shovel

    def bounding_rect(self) -> Rect:
        return Rect(-369, -235, 738, 470)

    def drop(self, scene: Scene, text: str, x: float, y: float) -> Optional[Hero]:
        """Handle a drop of a card or the shovel at scene point (x, y).

        Returns the hero planted or dug up, or None if nothing happened.
        """
        if not text:
            return None
        cx, cy = snap_to_cell(x, y)
        if text == SHOVEL_TEXT:
            return self.shovel.remove_hero(scene, cx, cy)
        return self.shop.plant(scene, text, cx, cy)


class PauseButton(Item):
    """Toggles the game between running and paused."""

    kind = ItemKind.OTHER

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        *,
        on_toggle: Optional[Callable[[bool], None]] = None,
    ) -> None:
        super().__init__(x, y)
        self.running = True
        self._on_toggle = on_toggle

    @property
    def label(self) -> str:
        """The caption shown on the button."""
        return "PAUSE!" if self.running else "CONTINUE"

    def bounding_rect(self) -> Rect:
        return Rect(-80, -20, 160, 40)

    def press(self) -> bool:
        """Flip between running and paused and return whether the game now runs."""
        self.running = not self.running
        if self._on_toggle is not None:
            self._on_toggle(self.running)
        return self.running