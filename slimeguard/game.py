"""The game loop: builds the field, spawns slimes and decides the outcome."""

from __future__ import annotations

import enum
import random
from typing import Optional

from .config import SLIME_WAVES, SPAWN_INTERVAL
from .lawn import Lawn, Mower, PauseButton, Shovel
from .scene import ItemKind, Scene
from .shop import Shop
from .slimes import Slime, spawn_slime

LANES = 5
LANE_TOP = 130
LANE_HEIGHT = 98
SPAWN_X = 1028
MOWER_X = 210
# A slime that walks past this x has reached the house.
LOSE_X = 200
# Ticks between two checks of the outcome.
CHECK_INTERVAL = SPAWN_INTERVAL // 10
# How often the game ticks, in milliseconds.
TICK_MS = 50


class Outcome(enum.Enum):
    """Where the game stands."""

    PLAYING = "playing"
    LOST = "lost"
    WON = "won"


class Game:
    """One level: the scene with its shop, shovel, lawn, mowers and slimes."""

    def __init__(self, *, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()
        self.scene = Scene()
        self.shop = self.scene.add(Shop(520, 45, rng=self.rng))
        self.shovel = self.scene.add(Shovel(830, 40))
        self.button = self.scene.add(PauseButton(970, 20))
        self.lawn = self.scene.add(Lawn(self.shop, self.shovel, 619, 325))
        self.mowers = [
            self.scene.add(Mower(MOWER_X, LANE_TOP + LANE_HEIGHT * lane))
            for lane in range(LANES)
        ]
        self.spawned = 0
        self.outcome = Outcome.PLAYING
        self._spawn_counter = 0
        self._check_counter = 0

    @property
    def running(self) -> bool:
        """Whether the clock runs: not paused and not yet decided."""
        return self.button.running and self.outcome is Outcome.PLAYING

    def slimes(self) -> list[Slime]:
        """The slimes currently on the field."""
        return self.scene.items_of(ItemKind.SLIME)  # type: ignore[return-value]

    def add_slime(self) -> Optional[Slime]:
        """Count one tick towards the next slime and spawn it when due."""
        if self.spawned >= SLIME_WAVES:
            return None
        self._spawn_counter += 1
        if self._spawn_counter < SPAWN_INTERVAL:
            return None
        self.spawned += 1
        self._spawn_counter = 0
        slime = spawn_slime(self.rng.randrange(100))
        lane = self.rng.randrange(LANES)
        slime.x = float(SPAWN_X)
        slime.y = float(LANE_TOP + LANE_HEIGHT * lane)
        self.scene.add(slime)
        return slime

    def check(self) -> Outcome:
        """Periodically decide whether the level is lost or won."""
        if self.outcome is not Outcome.PLAYING:
            return self.outcome
        self._check_counter += 1
        if self._check_counter < CHECK_INTERVAL:
            return self.outcome
        self._check_counter = 0
        slimes = self.slimes()
        if any(slime.x < LOSE_X for slime in slimes):
            self.outcome = Outcome.LOST
        elif self.spawned == SLIME_WAVES and not slimes:
            self.outcome = Outcome.WON
        return self.outcome

    def tick(self) -> Outcome:
        """Run one step of the clock unless paused or decided."""
        if not self.running:
            return self.outcome
        self.scene.advance()
        self.add_slime()
        return self.check()