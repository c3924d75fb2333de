"""The playable window: title screen, rules screen and the running game."""

from __future__ import annotations

import argparse
import enum
import os
import random
from typing import Optional, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .game import TICK_MS, Game, Outcome  # noqa: E402
from .heroes import Hero, Xiangling  # noqa: E402
from .lawn import CELL_HEIGHT, CELL_WIDTH, CELL_X0, CELL_Y0, SHOVEL_TEXT, Mower  # noqa: E402
from .projectiles import Projectile  # noqa: E402
from .scene import Item, Rect  # noqa: E402
from .shop import Card  # noqa: E402
from .slimes import Element, Slime  # noqa: E402
from .sun import Sun  # noqa: E402

WINDOW_SIZE = (900, 600)
WINDOW_TITLE = "原神大战史莱姆QAQ"
RULES_TITLE = "玩法简介"
# The game view shows the scene from this x onwards.
VIEW_LEFT = 150
FRAME_RATE = 60

START_BUTTON = Rect(180, 350, 220, 100)
RULES_BUTTON = Rect(490, 350, 220, 100)

LAWN_COLUMNS = 9
LAWN_ROWS = 5

RULES_TEXT = (
    "Slimes walk in from the right along five lanes.",
    "Drag heroes from the card tray onto the lawn to stop them.",
    "Every hero costs sun; click falling sun to collect it.",
    "Qiqi makes sun, Zhongli blocks, Xiangling explodes,",
    "Venti, Ganyu, Tartaglia and Klee shoot elemental shots.",
    "Elements react with the slime's own element for extra effects.",
    "Use the shovel to dig a hero up again.",
    "If a slime reaches the house, you lose. Survive every wave to win.",
    "",
    "Click anywhere to go back.",
)

_ELEMENT_COLOURS = {
    Element.SNOW: (150, 220, 255),
    Element.WATER: (40, 110, 230),
    Element.FIRE: (230, 70, 30),
    Element.WIND: (90, 220, 170),
    Element.THUNDER: (170, 90, 230),
    Element.GRASS: (110, 190, 40),
}


class Screen(enum.Enum):
    """Which screen the window shows."""

    TITLE = "title"
    RULES = "rules"
    GAME = "game"


def _to_screen(x: float, y: float) -> tuple[int, int]:
    return int(x - VIEW_LEFT), int(y)


def _card_rect(card: Card) -> Rect:
    local = card.bounding_rect()
    return Rect(card.x + local.x, card.y + local.y, local.width, local.height)


class App:
    """Holds the current screen and game and turns clicks into actions."""

    def __init__(self, *, seed: Optional[int] = None) -> None:
        self.seed = seed
        self.screen = Screen.TITLE
        self.game: Optional[Game] = None
        self.selected: Optional[str] = None

    def start_game(self) -> Game:
        """Begin a fresh level and switch to it."""
        self.game = Game(rng=random.Random(self.seed))
        self.selected = None
        self.screen = Screen.GAME
        return self.game

    def back(self) -> Screen:
        """Return to the title screen."""
        self.screen = Screen.TITLE
        self.selected = None
        return self.screen

    def handle_click(self, pos: tuple[float, float]) -> Screen:
        """React to a left click at a window position and return the screen now shown."""
        x, y = pos
        if self.screen is Screen.TITLE:
            if START_BUTTON.contains(x, y):
                self.start_game()
            elif RULES_BUTTON.contains(x, y):
                self.screen = Screen.RULES
        elif self.screen is Screen.RULES:
            self.back()
        elif self.game is not None:
            self._click_game(x + VIEW_LEFT, y)
        return self.screen

    def _card_at(self, x: float, y: float) -> Optional[Card]:
        assert self.game is not None
        hits = [card for card in self.game.shop.cards if _card_rect(card).contains(x, y)]
        return min(hits, key=lambda card: abs(card.x - x), default=None)

    def _click_game(self, x: float, y: float) -> None:
        game = self.game
        assert game is not None
        items = game.scene.items_at(x, y)
        for item in items:
            if isinstance(item, Sun):
                item.collect(game.shop)
                return
            if item is game.button:
                game.button.press()
                return
        if game.shovel in items:
            self.selected = SHOVEL_TEXT
            return
        card = self._card_at(x, y)
        if card is not None:
            self.selected = card.name if card.can_buy(game.shop.sun) else None
            return
        if self.selected is not None and game.lawn in items:
            game.lawn.drop(game.scene, self.selected, x, y)
        self.selected = None

    def run(self) -> None:
        """Open the window and run until it is closed."""
        pygame.init()
        try:
            surface = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(WINDOW_TITLE)
            font = pygame.font.SysFont(None, 24)
            big = pygame.font.SysFont(None, 72)
            clock = pygame.time.Clock()
            elapsed = 0
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return
                    if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        if self.screen is Screen.TITLE:
                            return
                        self.back()
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        self.handle_click(event.pos)
                elapsed += clock.tick(FRAME_RATE)
                if self.screen is Screen.GAME and self.game is not None:
                    while elapsed >= TICK_MS:
                        self.game.tick()
                        elapsed -= TICK_MS
                else:
                    elapsed = 0
                self._draw(surface, font, big)
                pygame.display.flip()
        finally:
            pygame.quit()

    # Drawing

    def _draw(self, surface: pygame.Surface, font: pygame.font.Font, big: pygame.font.Font) -> None:
        if self.screen is Screen.TITLE:
            self._draw_title(surface, font, big)
        elif self.screen is Screen.RULES:
            self._draw_rules(surface, font, big)
        elif self.game is not None:
            self._draw_game(surface, font, big, self.game)

    @staticmethod
    def _text(surface, font, text, centre, colour=(255, 255, 255)) -> None:
        image = font.render(text, True, colour)
        surface.blit(image, image.get_rect(center=centre))

    def _draw_title(self, surface, font, big) -> None:
        surface.fill((30, 40, 70))
        self._text(surface, big, "Heroes vs Slimes", (450, 205), (255, 220, 120))
        for rect, caption in ((START_BUTTON, "Start"), (RULES_BUTTON, "Rules")):
            box = pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height))
            pygame.draw.rect(surface, (200, 150, 60), box, border_radius=12)
            self._text(surface, big, caption, box.center, (40, 20, 0))

    def _draw_rules(self, surface, font, big) -> None:
        surface.fill((50, 60, 40))
        panel = pygame.Rect(90, 75, 675, 450)
        pygame.draw.rect(surface, (235, 225, 190), panel, border_radius=8)
        self._text(surface, font, "How to play", (panel.centerx, panel.y + 30), (60, 30, 0))
        for line_no, line in enumerate(RULES_TEXT):
            self._text(surface, font, line, (panel.centerx, panel.y + 80 + 32 * line_no), (40, 30, 20))

    def _draw_game(self, surface, font, big, game: Game) -> None:
        surface.fill((60, 110, 40))
        for row in range(LAWN_ROWS):
            for col in range(LAWN_COLUMNS):
                cx, cy = _to_screen(CELL_X0 + col * CELL_WIDTH, CELL_Y0 + row * CELL_HEIGHT)
                shade = (90, 160, 60) if (row + col) % 2 else (80, 145, 50)
                cell = pygame.Rect(cx - CELL_WIDTH // 2, cy - CELL_HEIGHT // 2, CELL_WIDTH, CELL_HEIGHT)
                pygame.draw.rect(surface, shade, cell)
        self._draw_tray(surface, font, game)
        for item in game.scene:
            self._draw_item(surface, font, game, item)
        if game.outcome is Outcome.LOST:
            self._text(surface, big, "The slimes got through!", (450, 300), (255, 80, 80))
        elif game.outcome is Outcome.WON:
            self._text(surface, big, "Victory!", (450, 300), (255, 230, 90))

    def _draw_tray(self, surface, font, game: Game) -> None:
        shop = game.shop
        sx, sy = _to_screen(shop.x, shop.y)
        pygame.draw.rect(surface, (120, 80, 40), pygame.Rect(sx - 270, sy - 45, 540, 90))
        self._text(surface, font, str(shop.sun), (sx - 222, sy + 29), (255, 240, 150))
        for card in shop.cards:
            cx, cy = _to_screen(card.x, card.y)
            box = pygame.Rect(cx - 30, cy - 35, 60, 70)
            pygame.draw.rect(surface, (230, 220, 180), box)
            if card.name == self.selected:
                pygame.draw.rect(surface, (255, 255, 0), box, 3)
            self._text(surface, font, card.name[:6], (cx, cy - 12), (40, 30, 20))
            self._text(surface, font, f"{card.cost:3d}", (cx, cy + 20), (40, 30, 20))
            if not card.ready():
                height = int(box.height * (1 - card.counter / card.cooldown))
                veil = pygame.Surface((box.width, height), pygame.SRCALPHA)
                veil.fill((0, 0, 0, 200))
                surface.blit(veil, box.topleft)
            elif not card.can_buy(shop.sun):
                veil = pygame.Surface(box.size, pygame.SRCALPHA)
                veil.fill((0, 0, 0, 100))
                surface.blit(veil, box.topleft)

    def _draw_item(self, surface, font, game: Game, item: Item) -> None:
        x, y = _to_screen(item.x, item.y)
        if item is game.shovel:
            box = pygame.Rect(x - 40, y - 40, 80, 80)
            pygame.draw.rect(surface, (150, 110, 70), box)
            if self.selected == SHOVEL_TEXT:
                pygame.draw.rect(surface, (255, 255, 0), box, 3)
            self._text(surface, font, "Shovel", (x, y))
        elif item is game.button:
            pygame.draw.rect(surface, (70, 60, 90), pygame.Rect(x - 80, y - 20, 160, 40), border_radius=8)
            self._text(surface, font, game.button.label, (x, y), (0, 255, 0))
        elif isinstance(item, Mower):
            pygame.draw.rect(surface, (170, 170, 170), pygame.Rect(x - 25, y - 20, 50, 40))
        elif isinstance(item, Xiangling) and item.state:
            pygame.draw.circle(surface, (255, 140, 0), (x, y), 150, 6)
        elif isinstance(item, Hero):
            pygame.draw.circle(surface, (240, 200, 150), (x, y), 30)
            self._text(surface, font, type(item).__name__[:2], (x, y), (40, 20, 0))
        elif isinstance(item, Slime):
            colour = _ELEMENT_COLOURS[item.element]
            pygame.draw.ellipse(surface, colour, pygame.Rect(x, y - 20, 70, 50))
        elif isinstance(item, Projectile):
            pygame.draw.circle(surface, _ELEMENT_COLOURS[item.element], (x, y - 16), 10)
        elif isinstance(item, Sun):
            pygame.draw.circle(surface, (255, 220, 40), (x, y), 28)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game window."""
    parser = argparse.ArgumentParser(prog="slimeguard", description="Defend the lawn against slimes.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    args = parser.parse_args(argv)
    App(seed=args.seed).run()
    return 0