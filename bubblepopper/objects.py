"""The things that live on the game canvas: bubbles, birds, stars and the player."""

from __future__ import annotations

import random

from .box import Box
from .config import CANVAS_HEIGHT, CANVAS_WIDTH
from .keys import Scancode
from .render import Brush
from .timer import Timer

POP_SOUND = "assets/pop.wav"
ENEMY_TEXTURE = "assets/enemy1.png"
STAR_TEXTURE = "assets/star.png"
PLAYER_RIGHT_TEXTURE = "assets/mrpopper1.png"
PLAYER_LEFT_TEXTURE = "assets/mrpopper2.png"

BUBBLE_SIZE = 50
BUBBLE_RETURN_DELAY = 2000
BIRD_RANGE = 200
BIRD_SPEED = 0.1


def _random_x(rng: random.Random) -> float:
    return float(rng.randrange(CANVAS_WIDTH - 100) + 100)


class GameObject(Box):
    """A named box on the canvas that can be updated and drawn.

    ``graphics`` provides the clock, input, drawing and sound services.
    Objects compare by identity.
    """

    __eq__ = object.__eq__
    __hash__ = object.__hash__

    def __init__(self, graphics, name="", x=0.0, y=0.0, width=0.0, height=0.0):
        super().__init__(float(x), float(y), float(width), float(height))
        self.graphics = graphics
        self.name = name
        self.active = True
        self.brush = Brush(outline_opacity=0.0, fill_opacity=1.0)
        self.timer = Timer(clock=graphics.get_global_time)

    def update(self, ms):
        """Advance the object by ``ms`` milliseconds; does nothing by default."""

    def init(self):
        """Start the object's timer."""
        self.timer.start()

    def draw(self):
        """Draw the object as a rectangle while it is active."""
        if self.active:
            self.graphics.draw_rect(self.pos_x, self.pos_y, self.width, self.height, self.brush)


class Bubble(GameObject):
    """A translucent bubble rising from the bottom of the canvas."""

    def __init__(self, graphics, rng: random.Random, name="Bubble"):
        super().__init__(graphics, name, 0, CANVAS_HEIGHT - 50, BUBBLE_SIZE, BUBBLE_SIZE)
        self.rng = rng
        self.speed = 2.5
        self.popped = False
        self.time_since_popped = 0.0
        self.brush.fill_opacity = 0.5
        self.brush.fill_color = [rng.random(), rng.random(), rng.random()]
        self.pos_x = _random_x(rng)

    def update(self, ms):
        """Rise; pop at the top and come back from the bottom after a delay."""
        step = float(self.timer)
        self.pos_y -= self.speed * step

        if self.pos_y < 0:
            self.pos_y = float(CANVAS_HEIGHT + self.rng.randrange(200))
            self.pos_x = _random_x(self.rng)
            self.active = True
            self.popped = True
            self.graphics.play_sound(POP_SOUND, 0.5, False)

        if self.popped:
            self.time_since_popped += step
            if self.time_since_popped > BUBBLE_RETURN_DELAY:
                self.pos_y = float(CANVAS_HEIGHT)
                self.pos_x = _random_x(self.rng)
                self.popped = False
                self.time_since_popped = 0.0
                self.active = True

    def draw(self):
        """Draw the bubble as a disk while it is active."""
        if self.active:
            self.graphics.draw_disk(self.pos_x, self.pos_y, self.width / 2.0, self.brush)

    def set_popped(self, popped):
        """Mark the bubble popped; a popped bubble is moved off the canvas with a sound."""
        self.popped = popped
        if popped:
            self.pos_x = -100.0
            self.graphics.play_sound(POP_SOUND, 0.5, False)


class EnemyBird(GameObject):
    """A bird patrolling left and right around its starting point."""

    def __init__(self, graphics, name="EnemyBird", x=0, y=0, width=0, height=0):
        super().__init__(graphics, name, x, y, width, height)
        self.brush.texture = ENEMY_TEXTURE
        self.initial_x = float(x)
        self.initial_y = float(y)
        self.direction = 1

    def update(self, ms):
        """Move sideways, turning once the bird strays too far from its start."""
        offset = self.pos_x - self.initial_x
        if offset > BIRD_RANGE:
            self.direction = -1
        elif offset < -BIRD_RANGE:
            self.direction = 1
        self.pos_x += self.direction * BIRD_SPEED * ms


class MrPopper(GameObject):
    """The player: walks with the arrow keys, or rides a bubble that caught him."""

    def __init__(self, graphics, name="MrPopper", x=0, y=0, width=0, height=0):
        super().__init__(graphics, name, x, y, width, height)
        self.trapped = False
        self.speed = 2.5
        self.brush.texture = PLAYER_RIGHT_TEXTURE

    @property
    def ground(self) -> float:
        """The y coordinate at which the player stands on the bottom of the canvas."""
        return CANVAS_HEIGHT - self.height / 2.0

    def update(self, ms):
        """Walk and fall when free; rise with the bubble when trapped."""
        step = self.speed * float(self.timer)
        if self.trapped:
            self.pos_y -= step
            if self.pos_y < 0:
                self.trapped = False
            return

        if self.graphics.get_key_state(Scancode.LEFT):
            self.pos_x -= step
            self.brush.texture = PLAYER_LEFT_TEXTURE
        if self.graphics.get_key_state(Scancode.RIGHT):
            self.pos_x += step
            self.brush.texture = PLAYER_RIGHT_TEXTURE

        if self.pos_y < self.ground:
            self.pos_y += step
        if self.pos_y > self.ground:
            self.pos_y = self.ground


class Star(GameObject):
    """A star to be collected."""

    def __init__(self, graphics, name="Star", x=0, y=0):
        super().__init__(graphics, name, x, y, 50, 50)
        self.brush.texture = STAR_TEXTURE