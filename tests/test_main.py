import pytest

from bubblepopper.config import CANVAS_HEIGHT, CANVAS_WIDTH, WINDOW_HEIGHT, WINDOW_WIDTH
from bubblepopper.main import build_game, main
from bubblepopper.objects import Bubble
from bubblepopper.render import ScaleMode


class RecordingGraphics:
    def __init__(self):
        self.calls = {}
        self.now = 0.0

    def get_global_time(self):
        return self.now

    def create_window(self, width, height, title):
        self.calls["create_window"] = (width, height, title)

    def set_draw_function(self, draw):
        self.calls["draw"] = draw

    def set_update_function(self, update):
        self.calls["update"] = update

    def set_canvas_size(self, width, height):
        self.calls["canvas"] = (width, height)

    def set_canvas_scale_mode(self, mode):
        self.calls["mode"] = mode

    def set_window_background(self, brush):
        self.calls["background"] = brush

    def set_font(self, fontname):
        self.calls["font"] = fontname
        return False


def test_build_game_sets_up_window():
    graphics = RecordingGraphics()
    game = build_game(graphics, 3)
    assert graphics.calls["create_window"] == (WINDOW_WIDTH, WINDOW_HEIGHT, "Bubble Popper")
    assert graphics.calls["canvas"] == (CANVAS_WIDTH, CANVAS_HEIGHT)
    assert graphics.calls["mode"] is ScaleMode.FIT
    assert graphics.calls["background"].fill_color == [0.6, 0.8, 0.95]
    assert graphics.calls["font"] == "assets/bubbles.ttf"
    assert graphics.calls["draw"] == game.draw
    assert graphics.calls["update"] == game.update


def test_build_game_starts_the_game():
    graphics = RecordingGraphics()
    game = build_game(graphics, 3)
    assert game.running is True
    assert game.score == 0
    assert all(element.timer.is_running() for element in game.elements)


def test_same_seed_gives_same_bubbles():
    first = build_game(RecordingGraphics(), 42)
    second = build_game(RecordingGraphics(), 42)

    def layout(game):
        return [
            (e.pos_x, tuple(e.brush.fill_color))
            for e in game.elements
            if isinstance(e, Bubble)
        ]

    assert layout(first) == layout(second)


def test_main_rejects_bad_seed():
    with pytest.raises(SystemExit) as info:
        main(["--seed", "abc"])
    assert info.value.code == 2


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "--seed" in capsys.readouterr().out