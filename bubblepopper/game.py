"""The state of a game of bubble popping and its rules."""

from __future__ import annotations

import random

from .config import CANVAS_HEIGHT, CANVAS_WIDTH
from .keys import Scancode
from .objects import Bubble, EnemyBird, GameObject, MrPopper, Star
from .render import Brush

BACKGROUND_TEXTURE = "assets/background.png"
COLLIDE_SOUND = "assets/collide.wav"
BUBBLE_COUNT = 5
STARS_TO_WIN = 3

MENU_LINES = (
    (100, "Menu"),
    (150, "Press B to go back"),
    (200, "Use arrows to move left or right"),
    (250, "Press space to pop the bubble"),
)


class GameState:
    """Holds every object of the game and applies the rules each frame."""

    def __init__(self, graphics, rng: random.Random | None = None):
        self.graphics = graphics
        self.rng = rng if rng is not None else random.Random()
        self.score = 0
        self.running = True
        self.menu_on = False
        self.trapped_bubble: Bubble | None = None

        self.elements: list[GameObject] = [
            Bubble(graphics, self.rng, "Bubble") for _ in range(BUBBLE_COUNT)
        ]
        self.player = MrPopper(
            graphics, "MrPopper", CANVAS_WIDTH / 2, CANVAS_HEIGHT - 100, 50, 50
        )
        self.elements.append(self.player)

        centres = (CANVAS_WIDTH / 2 + 300, CANVAS_WIDTH / 2, CANVAS_WIDTH / 2 - 300)
        self.elements.extend(Star(graphics, "Star", x, 200) for x in centres)
        self.elements.extend(
            EnemyBird(graphics, "EnemyBird", x, 200, 30, 30) for x in centres
        )

        self.text_brush = Brush(fill_color=[1.0, 0.0, 0.0], fill_opacity=1.0)

    def _all(self, kind):
        return (element for element in self.elements if isinstance(element, kind))

    def init(self):
        """Start a new game and the timers of all objects."""
        self.running = True
        self.menu_on = False
        self.score = 0
        for element in self.elements:
            element.init()

    def draw(self):
        """Draw the background, every object and the text overlay."""
        background = Brush(texture=BACKGROUND_TEXTURE)
        self.graphics.draw_rect(
            CANVAS_WIDTH / 2, CANVAS_HEIGHT / 2, CANVAS_WIDTH, CANVAS_HEIGHT, background
        )
        for element in self.elements:
            element.draw()

        if not self.running:
            self.graphics.draw_text(400, 300, 50, "Game Over", self.text_brush)
            return

        if self.menu_on:
            for y, line in MENU_LINES:
                self.graphics.draw_text(300, y, 25, line, self.text_brush)

        self.graphics.draw_text(50, 30, 30, f"Score: {self.score}", self.text_brush)
        self.graphics.draw_text(CANVAS_WIDTH - 200, 30, 20, "Press H for help ", self.text_brush)

    def update(self, ms):
        """Advance all objects by ``ms`` milliseconds and apply the game rules."""
        if not self.running:
            return

        for element in self.elements:
            element.update(ms)

        if self.graphics.get_key_state(Scancode.H):
            self.menu_on = True
        elif self.graphics.get_key_state(Scancode.B):
            self.menu_on = False

        player = self.player

        bubble = next((b for b in self._all(Bubble) if player.intersect(b)), None)
        if bubble is not None:
            self.trapped_bubble = bubble
            player.pos_x = bubble.pos_x
            player.pos_y = bubble.pos_y
            player.trapped = True

        star = next(
            (s for s in self._all(Star) if s.active and player.intersect(s)), None
        )
        if star is not None:
            self.score += 1
            star.active = False
            if self.trapped_bubble is not None:
                self.trapped_bubble.set_popped(True)
            player.trapped = False
            self.graphics.play_sound(COLLIDE_SOUND, 0.5, False)

        if any(b.active and player.intersect(b) for b in self._all(EnemyBird)):
            for s in self._all(Star):
                s.active = True
            self.score = 0

        if (
            self.graphics.get_key_state(Scancode.SPACE)
            and player.trapped
            and self.trapped_bubble is not None
        ):
            self.trapped_bubble.set_popped(True)
            self.trapped_bubble.active = False
            player.trapped = False

        if self.score == STARS_TO_WIN:
            self.running = False