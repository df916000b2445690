"""Window, input, timing and drawing services built on pygame."""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from typing import Callable

import pygame

from .keys import Scancode, key_for_pygame
from .render import Brush, Renderer, ScaleMode

_LEFT, _MIDDLE, _RIGHT = 1, 2, 3


@dataclass
class MouseState:
    """The state of the pointing device as seen during the last update cycle."""

    button_left_pressed: bool = False
    button_middle_pressed: bool = False
    button_right_pressed: bool = False
    button_left_released: bool = False
    button_middle_released: bool = False
    button_right_released: bool = False
    button_left_down: bool = False
    button_middle_down: bool = False
    button_right_down: bool = False
    dragging: bool = False
    cur_pos_x: int = 0
    cur_pos_y: int = 0
    prev_pos_x: int = 0
    prev_pos_y: int = 0


class Graphics:
    """Owns the application window and runs the draw/update loop.

    Drawing calls take canvas units; the canvas is mapped onto the window
    according to the scale mode. The loop ends on a quit request or when
    Escape is pressed.
    """

    def __init__(self, audio: bool = True, frame_rate: int = 60) -> None:
        self.frame_rate = frame_rate
        self._audio = audio
        self._renderer: Renderer | None = None
        self._canvas_size: tuple[float, float] | None = None
        self._scale_mode = ScaleMode.FIT
        self._background = (0, 0, 0)
        self._full_screen = False
        self._window_size = (0, 0)
        self._draw: Callable[[], None] | None = None
        self._update: Callable[[float], None] | None = None
        self._resize: Callable[[int, int], None] | None = None
        self._keys_down: set[Scancode] = set()
        self._mouse = MouseState()
        self._delta = 0.0
        self._start: float | None = None
        self._clock = pygame.time.Clock()

    # -- window -------------------------------------------------------------

    def _require_renderer(self) -> Renderer:
        if self._renderer is None:
            raise RuntimeError("no window has been created")
        return self._renderer

    def _set_mode(self) -> pygame.Surface:
        flags = pygame.FULLSCREEN if self._full_screen else pygame.RESIZABLE
        surface = pygame.display.set_mode(self._window_size, flags)
        if self._renderer is not None:
            self._renderer.surface = surface
        return surface

    def create_window(self, width, height, title):
        """Create and show a window of the given pixel size and title."""
        pygame.display.init()
        self._window_size = (int(width), int(height))
        surface = self._set_mode()
        pygame.display.set_caption(title)
        canvas_w, canvas_h = self._canvas_size or (float(width), float(height))
        self._renderer = Renderer(surface, canvas_w, canvas_h, self._scale_mode, audio=self._audio)
        self._start = time.perf_counter()
        self._keys_down.clear()
        self._mouse = MouseState()

    def set_window_background(self, brush: Brush):
        """Use the fill colour of ``brush`` for the area around and behind the canvas."""
        self._background = tuple(round(min(1.0, max(0.0, c)) * 255) for c in brush.fill_color[:3])

    def destroy_window(self):
        """Close the window and release its resources."""
        self._renderer = None
        self._keys_down.clear()
        pygame.display.quit()

    def set_canvas_size(self, width, height):
        """Set the canvas extents in application units."""
        self._canvas_size = (float(width), float(height))
        if self._renderer is not None:
            self._renderer.canvas_width, self._renderer.canvas_height = self._canvas_size

    def set_canvas_scale_mode(self, mode):
        """Choose how the canvas adapts to the window size."""
        self._scale_mode = ScaleMode(mode)
        if self._renderer is not None:
            self._renderer.mode = self._scale_mode

    def set_full_screen(self, full_screen):
        """Switch between full-screen and windowed mode."""
        self._full_screen = bool(full_screen)
        if self._renderer is not None:
            self._set_mode()

    # -- callbacks ----------------------------------------------------------

    def set_draw_function(self, draw):
        """Call ``draw()`` every time the window is redrawn."""
        self._draw = draw

    def set_update_function(self, update):
        """Call ``update(ms)`` once per frame with the milliseconds since the last one."""
        self._update = update

    def set_resize_function(self, resize):
        """Call ``resize(width, height)`` whenever the window changes size."""
        self._resize = resize

    # -- loop ---------------------------------------------------------------

    def _mouse_button(self, button: int, down: bool) -> None:
        names = {_LEFT: "left", _MIDDLE: "middle", _RIGHT: "right"}
        name = names.get(button)
        if name is None:
            return
        edge = "pressed" if down else "released"
        setattr(self._mouse, f"button_{name}_{edge}", True)
        setattr(self._mouse, f"button_{name}_down", down)

    def _pump_events(self) -> bool:
        mouse = self._mouse
        mouse.button_left_pressed = mouse.button_middle_pressed = mouse.button_right_pressed = False
        mouse.button_left_released = mouse.button_middle_released = mouse.button_right_released = False
        mouse.dragging = False
        mouse.prev_pos_x, mouse.prev_pos_y = mouse.cur_pos_x, mouse.cur_pos_y

        keep_running = True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                keep_running = False
            elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                code = key_for_pygame(getattr(event, "scancode", Scancode.UNKNOWN))
                if event.type == pygame.KEYDOWN:
                    if code is Scancode.ESCAPE or getattr(event, "key", None) == pygame.K_ESCAPE:
                        keep_running = False
                    self._keys_down.add(code)
                else:
                    self._keys_down.discard(code)
            elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                self._mouse_button(event.button, event.type == pygame.MOUSEBUTTONDOWN)
                mouse.cur_pos_x, mouse.cur_pos_y = (int(v) for v in event.pos)
            elif event.type == pygame.MOUSEMOTION:
                mouse.cur_pos_x, mouse.cur_pos_y = (int(v) for v in event.pos)
                if mouse.button_left_down:
                    mouse.dragging = True
            elif event.type == pygame.VIDEORESIZE:
                self._window_size = (int(event.w), int(event.h))
                if self._resize is not None:
                    self._resize(int(event.w), int(event.h))
        return keep_running

    def _render(self) -> None:
        renderer = self._require_renderer()
        surface = pygame.display.get_surface() or renderer.surface
        renderer.surface = surface
        surface.fill(self._background)
        if self._draw is not None:
            self._draw()
        pygame.display.flip()

    def start_message_loop(self):
        """Process events, update and redraw until the window is asked to close."""
        self._require_renderer()
        self._clock.tick()
        while self._pump_events():
            self._delta = float(self._clock.tick(self.frame_rate))
            if self._update is not None:
                self._update(self._delta)
            self._render()

    # -- input and time -----------------------------------------------------

    def get_mouse_state(self):
        """Return a snapshot of the mouse state."""
        return replace(self._mouse)

    def get_key_state(self, key):
        """Return True while the key with scan code ``key`` is held down."""
        return key_for_pygame(int(key)) in self._keys_down

    def get_delta_time(self):
        """Return the milliseconds between the last two updates."""
        return self._delta

    def get_global_time(self):
        """Return the milliseconds since the window was created, or 0.0 before that."""
        if self._start is None:
            return 0.0
        return (time.perf_counter() - self._start) * 1000.0

    # -- drawing and audio --------------------------------------------------

    def draw_rect(self, center_x, center_y, width, height, brush):
        """Draw a rectangle centred at (center_x, center_y) in canvas units."""
        self._require_renderer().draw_rect(center_x, center_y, width, height, brush)

    def draw_disk(self, cx, cy, radius, brush):
        """Draw a disk centred at (cx, cy) in canvas units."""
        self._require_renderer().draw_disk(cx, cy, radius, brush)

    def draw_text(self, pos_x, pos_y, size, text, brush):
        """Draw text whose baseline starts at (pos_x, pos_y) using the current font."""
        self._require_renderer().draw_text(pos_x, pos_y, size, text, brush)

    def set_font(self, fontname):
        """Make a TrueType font current; return False if it cannot be loaded."""
        return self._require_renderer().set_font(fontname)

    def play_sound(self, soundfile, volume, looping=False):
        """Play a sound sample; return False if it could not be played."""
        return self._require_renderer().play_sound(soundfile, volume, looping)