"""Game balance: timings, hit points, attack values and the card table."""

from __future__ import annotations

from dataclasses import dataclass

# How many slimes a level spawns in total.
SLIME_WAVES = 30
# Ticks between two spawned slimes.
SPAWN_INTERVAL = 200
# Sun the player starts with.
INITIAL_SUN = 500

# Hero hit points and attack values.
HP_ZHONGLI = 4000
HP_HERO = 300

ATK_XIANGLING = 1800
ATK_VENTI = 200
ATK_TARTAGLIA = 175
ATK_KLEE = 200
ATK_GANYU = 150

# Slime hit points, attack per tick and walking speeds.
HP_ANEMO = 640
HP_CYRO = 600
HP_ELECTRO = 700
HP_GRASS = 1000
HP_PYRO = 700

ATK_SLIME = 100 * 33 // 1000

SPEED_SLIME_SLOW = 80.0 * 33 / 1000 / 4.7
SPEED_SLIME_FAST = 80.0 * 33 / 1000 / 2.5


@dataclass(frozen=True)
class CardSpec:
    """A shop card: the hero it plants, its price in sun and its cooldown in ticks."""

    name: str
    cost: int
    cooldown: int


CARDS: tuple[CardSpec, ...] = (
    CardSpec("Qiqi", 50, 150),
    CardSpec("Venti", 100, 227),
    CardSpec("Xiangling", 200, 606),
    CardSpec("ZhongLi", 50, 606),
    CardSpec("Ganyu", 125, 227),
    CardSpec("Tartaglia", 100, 227),
    CardSpec("Klee", 150, 227),
)

CARD_NAMES: tuple[str, ...] = tuple(card.name for card in CARDS)

_CARDS_BY_NAME = {card.name: card for card in CARDS}


def card_spec(name: str) -> CardSpec:
    """Return the card with the given hero name; raise KeyError if there is none."""
    try:
        return _CARDS_BY_NAME[name]
    except KeyError:
        raise KeyError(f"unknown card: {name!r}") from None