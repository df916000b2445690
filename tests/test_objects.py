import random

import pytest

from bubblepopper.config import CANVAS_HEIGHT, CANVAS_WIDTH
from bubblepopper.keys import Scancode
from bubblepopper.objects import (
    BUBBLE_RETURN_DELAY,
    POP_SOUND,
    Bubble,
    EnemyBird,
    GameObject,
    MrPopper,
    Star,
)


class FakeGraphics:
    def __init__(self):
        self.now = 0.0
        self.keys = set()
        self.sounds = []
        self.disks = []
        self.rects = []

    def get_global_time(self):
        return self.now

    def get_key_state(self, key):
        return key in self.keys

    def play_sound(self, soundfile, volume, looping=False):
        self.sounds.append(soundfile)
        return True

    def draw_disk(self, cx, cy, radius, brush):
        self.disks.append((cx, cy, radius, brush))

    def draw_rect(self, center_x, center_y, width, height, brush):
        self.rects.append((center_x, center_y, width, height, brush))


@pytest.fixture
def graphics():
    return FakeGraphics()


def run_timer_out(obj, graphics):
    obj.init()
    graphics.now = 1000.0


def test_game_object_draws_rect_only_when_active(graphics):
    obj = GameObject(graphics, "thing", 10, 20, 30, 40)
    obj.draw()
    assert graphics.rects[0][:4] == (10.0, 20.0, 30.0, 40.0)
    obj.active = False
    obj.draw()
    assert len(graphics.rects) == 1


def test_game_objects_compare_by_identity(graphics):
    first = GameObject(graphics, "a", 1, 1, 1, 1)
    second = GameObject(graphics, "a", 1, 1, 1, 1)
    assert first != second
    assert first == first
    assert len({first, second}) == 2


def test_bubble_starts_near_bottom_with_random_colour(graphics):
    bubble = Bubble(graphics, random.Random(1))
    assert bubble.pos_y == CANVAS_HEIGHT - 50
    assert bubble.width == 50 and bubble.height == 50
    assert 100 <= bubble.pos_x < CANVAS_WIDTH
    assert all(0.0 <= c <= 1.0 for c in bubble.brush.fill_color)
    assert bubble.brush.fill_opacity == 0.5
    assert bubble.popped is False


def test_bubble_does_not_move_before_timer_runs(graphics):
    bubble = Bubble(graphics, random.Random(2))
    start = bubble.pos_y
    bubble.update(16)
    assert bubble.pos_y == start


def test_bubble_rises_by_speed_once_timer_is_full(graphics):
    bubble = Bubble(graphics, random.Random(3))
    run_timer_out(bubble, graphics)
    start = bubble.pos_y
    bubble.update(16)
    assert bubble.pos_y == pytest.approx(start - bubble.speed)


def test_bubble_pops_at_top_and_restarts_below(graphics):
    bubble = Bubble(graphics, random.Random(4))
    run_timer_out(bubble, graphics)
    bubble.pos_y = 1.0
    bubble.active = False
    bubble.update(16)
    assert CANVAS_HEIGHT <= bubble.pos_y < CANVAS_HEIGHT + 200
    assert 100 <= bubble.pos_x < CANVAS_WIDTH
    assert bubble.popped is True
    assert bubble.active is True
    assert graphics.sounds == [POP_SOUND]


def test_popped_bubble_returns_after_delay(graphics):
    bubble = Bubble(graphics, random.Random(5))
    run_timer_out(bubble, graphics)
    bubble.popped = True
    bubble.active = False
    bubble.time_since_popped = BUBBLE_RETURN_DELAY
    bubble.update(16)
    assert bubble.pos_y == CANVAS_HEIGHT
    assert bubble.popped is False
    assert bubble.time_since_popped == 0.0
    assert bubble.active is True


def test_set_popped_moves_bubble_off_canvas(graphics):
    bubble = Bubble(graphics, random.Random(6))
    bubble.set_popped(True)
    assert bubble.pos_x == -100.0
    assert graphics.sounds == [POP_SOUND]
    bubble.set_popped(False)
    assert bubble.popped is False
    assert graphics.sounds == [POP_SOUND]


def test_bubble_draws_disk_with_half_width_radius(graphics):
    bubble = Bubble(graphics, random.Random(7))
    bubble.draw()
    cx, cy, radius, _ = graphics.disks[0]
    assert (cx, cy) == (bubble.pos_x, bubble.pos_y)
    assert radius == bubble.width / 2.0
    bubble.active = False
    bubble.draw()
    assert len(graphics.disks) == 1


def test_bird_moves_with_elapsed_milliseconds(graphics):
    bird = EnemyBird(graphics, "EnemyBird", 500, 200, 30, 30)
    bird.update(100)
    assert bird.pos_x == pytest.approx(510.0)
    assert bird.brush.texture == "assets/enemy1.png"


def test_bird_turns_back_past_its_range(graphics):
    bird = EnemyBird(graphics, "EnemyBird", 500, 200, 30, 30)
    bird.pos_x = bird.initial_x + 201
    before = bird.pos_x
    bird.update(10)
    assert bird.direction == -1
    assert bird.pos_x < before

    bird.pos_x = bird.initial_x - 201
    before = bird.pos_x
    bird.update(10)
    assert bird.direction == 1
    assert bird.pos_x > before


def test_player_falls_and_stops_at_ground(graphics):
    player = MrPopper(graphics, "MrPopper", 500, 400, 50, 50)
    run_timer_out(player, graphics)
    player.update(16)
    assert player.pos_y == pytest.approx(400 + player.speed)
    player.pos_y = player.ground - 1
    player.update(16)
    assert player.pos_y == player.ground


def test_player_walks_left_and_right(graphics):
    player = MrPopper(graphics, "MrPopper", 500, 475, 50, 50)
    run_timer_out(player, graphics)
    graphics.keys = {Scancode.LEFT}
    player.update(16)
    assert player.pos_x == pytest.approx(500 - player.speed)
    assert player.brush.texture == "assets/mrpopper2.png"
    graphics.keys = {Scancode.RIGHT}
    player.update(16)
    assert player.pos_x == pytest.approx(500)
    assert player.brush.texture == "assets/mrpopper1.png"


def test_trapped_player_rises_and_is_freed_at_top(graphics):
    player = MrPopper(graphics, "MrPopper", 500, 300, 50, 50)
    run_timer_out(player, graphics)
    player.trapped = True
    graphics.keys = {Scancode.LEFT}
    player.update(16)
    assert player.pos_y == pytest.approx(300 - player.speed)
    assert player.pos_x == 500
    player.pos_y = 1.0
    player.update(16)
    assert player.trapped is False


def test_star_has_fixed_size_and_texture(graphics):
    star = Star(graphics, "Star", 800, 200)
    assert (star.pos_x, star.pos_y, star.width, star.height) == (800, 200, 50, 50)
    assert star.brush.texture == "assets/star.png"
    assert star.active is True