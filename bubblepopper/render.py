"""Shape, text and audio output onto a canvas that is mapped to a pygame surface."""

from __future__ import annotations

import math
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from itertools import product
from pathlib import Path
from typing import Callable, Iterator

import pygame

_GRADIENT_RESOLUTION = 64
_ARC_STEP_DEGREES = 3.0
_WHITE = (255, 255, 255, 255)

_UV = Callable[[float, float], "tuple[float, float]"]


class ScaleMode(Enum):
    """How the canvas adapts to the size of the window."""

    WINDOW = 0
    STRETCH = 1
    FIT = 2


def _white() -> list[float]:
    return [1.0, 1.0, 1.0]


@dataclass
class Brush:
    """Drawing attributes shared by every primitive; colours are RGB in [0, 1]."""

    fill_color: list[float] = field(default_factory=_white)
    fill_secondary_color: list[float] = field(default_factory=_white)
    fill_opacity: float = 1.0
    fill_secondary_opacity: float = 1.0
    outline_color: list[float] = field(default_factory=_white)
    outline_opacity: float = 1.0
    outline_width: float = 1.0
    texture: str = ""
    gradient: bool = False
    gradient_dir_u: float = 0.0
    gradient_dir_v: float = 1.0


def compute_viewport(window_width, window_height, canvas_width, canvas_height, mode):
    """Return ``(offset_x, offset_y, scale_x, scale_y)`` mapping canvas units to pixels.

    A canvas point (x, y) lands on pixel
    ``(offset_x + x * scale_x, offset_y + y * scale_y)``.
    """
    mode = ScaleMode(mode)
    if window_width < 0 or window_height < 0:
        raise ValueError("window size must not be negative")
    if mode is ScaleMode.WINDOW:
        return (0.0, 0.0, 1.0, 1.0)
    if canvas_width <= 0 or canvas_height <= 0:
        raise ValueError("canvas size must be positive")
    scale_x = window_width / canvas_width
    scale_y = window_height / canvas_height
    if mode is ScaleMode.STRETCH:
        return (0.0, 0.0, scale_x, scale_y)
    scale = min(scale_x, scale_y)
    return (
        (window_width - canvas_width * scale) / 2.0,
        (window_height - canvas_height * scale) / 2.0,
        scale,
        scale,
    )


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


def _rgba(color, opacity: float) -> tuple[int, int, int, int]:
    red, green, blue = (round(_clamp(c) * 255) for c in color[:3])
    return (red, green, blue, round(_clamp(opacity) * 255))


def _mix(brush: Brush, s: float) -> tuple[int, int, int, int]:
    color = [
        a * (1.0 - s) + b * s
        for a, b in zip(brush.fill_color, brush.fill_secondary_color)
    ]
    opacity = brush.fill_opacity * (1.0 - s) + brush.fill_secondary_opacity * s
    return _rgba(color, opacity)


def _resolve(name: str) -> Path:
    return Path(name.replace("\\", "/"))


def _has_outline(brush: Brush) -> bool:
    return brush.outline_opacity > 0.0 and brush.outline_width > 0.0


def _stroke(brush: Brush) -> int:
    return max(1, round(brush.outline_width))


def _rect_uv(nx: float, ny: float) -> tuple[float, float]:
    return nx, ny


def _disk_uv(nx: float, ny: float) -> tuple[float, float]:
    dx, dy = (nx - 0.5) * 2.0, (0.5 - ny) * 2.0
    u = (math.atan2(dy, dx) / (2.0 * math.pi)) % 1.0
    return u, min(1.0, math.hypot(dx, dy))


def _sector_uv(start: float, end: float, inner: float) -> _UV:
    span = end - start

    def uv(nx: float, ny: float) -> tuple[float, float]:
        dx, dy = (nx - 0.5) * 2.0, (0.5 - ny) * 2.0
        radius = math.hypot(dx, dy)
        v = _clamp((radius - inner) / (1.0 - inner)) if inner < 1.0 else 0.0
        angle = math.degrees(math.atan2(dy, dx))
        u = _clamp(((angle - start) % 360.0) / span) if span else 0.0
        return u, v

    return uv


class Renderer:
    """Draws shapes and text given in canvas units onto a pygame surface.

    The canvas is mapped to the surface according to ``mode``; drawing is
    clipped to the canvas area. Sounds, textures and fonts are loaded once and
    cached. File names may use either slash as separator.
    """

    def __init__(self, surface, canvas_width, canvas_height, mode=ScaleMode.FIT, audio=True):
        self.surface = surface
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height
        self.mode = ScaleMode(mode)
        self._audio = audio
        self._orientation = 0.0
        self._pose_scale = (1.0, 1.0)
        self._font_path: str | None = None
        self._fonts: dict[tuple[str, int], pygame.font.Font] = {}
        self._textures: dict[str, pygame.Surface | None] = {}
        self._sounds: dict[str, pygame.mixer.Sound] = {}

    # -- coordinate mapping -------------------------------------------------

    def _viewport(self) -> tuple[float, float, float, float]:
        width, height = self.surface.get_size()
        return compute_viewport(width, height, self.canvas_width, self.canvas_height, self.mode)

    def _to_screen(self, x: float, y: float) -> tuple[float, float]:
        offset_x, offset_y, scale_x, scale_y = self._viewport()
        return offset_x + x * scale_x, offset_y + y * scale_y

    def _pixel_size(self, width: float, height: float) -> tuple[int, int] | None:
        _, _, scale_x, scale_y = self._viewport()
        size = (round(abs(width) * scale_x), round(abs(height) * scale_y))
        return size if size[0] > 0 and size[1] > 0 else None

    def _canvas_rect(self) -> pygame.Rect:
        if self.mode is ScaleMode.WINDOW:
            return self.surface.get_rect()
        offset_x, offset_y, scale_x, scale_y = self._viewport()
        return pygame.Rect(
            round(offset_x),
            round(offset_y),
            round(self.canvas_width * scale_x),
            round(self.canvas_height * scale_y),
        )

    @contextmanager
    def _clipped(self) -> Iterator[None]:
        previous = self.surface.get_clip()
        self.surface.set_clip(self._canvas_rect())
        try:
            yield
        finally:
            self.surface.set_clip(previous)

    # -- image building -----------------------------------------------------

    def _texture(self, name: str) -> pygame.Surface | None:
        if not name:
            return None
        if name not in self._textures:
            path = _resolve(name)
            image = None
            if path.is_file():
                try:
                    image = pygame.image.load(str(path))
                except (pygame.error, OSError):
                    image = None
            if image is not None and not image.get_flags() & pygame.SRCALPHA:
                opaque = pygame.Surface(image.get_size(), pygame.SRCALPHA)
                opaque.blit(image, (0, 0))
                image = opaque
            self._textures[name] = image
        return self._textures[name]

    def _fill(self, width: int, height: int, brush: Brush, uv: _UV, textured: bool = True) -> pygame.Surface:
        if brush.gradient:
            grid_w = min(width, _GRADIENT_RESOLUTION)
            grid_h = min(height, _GRADIENT_RESOLUTION)
            grid = pygame.Surface((grid_w, grid_h), pygame.SRCALPHA)
            for gx, gy in product(range(grid_w), range(grid_h)):
                u, v = uv((gx + 0.5) / grid_w, (gy + 0.5) / grid_h)
                s = _clamp(u * brush.gradient_dir_u + v * brush.gradient_dir_v)
                grid.set_at((gx, gy), _mix(brush, s))
            image = pygame.transform.smoothscale(grid, (width, height))
        else:
            image = pygame.Surface((width, height), pygame.SRCALPHA)
            image.fill(_rgba(brush.fill_color, brush.fill_opacity))
        texture = self._texture(brush.texture) if textured else None
        if texture is not None:
            scaled = pygame.transform.scale(texture, (width, height))
            image.blit(scaled, (0, 0), special_flags=pygame.BLEND_RGBA_MULT)
        return image

    def _blit_posed(self, image: pygame.Surface, pivot: tuple[float, float], center_offset: tuple[float, float]) -> None:
        scale_x, scale_y = self._pose_scale
        if (scale_x, scale_y) != (1.0, 1.0):
            width = round(image.get_width() * abs(scale_x))
            height = round(image.get_height() * abs(scale_y))
            if width <= 0 or height <= 0:
                return
            image = pygame.transform.scale(image, (width, height))
            if scale_x < 0 or scale_y < 0:
                image = pygame.transform.flip(image, scale_x < 0, scale_y < 0)
        dx, dy = center_offset[0] * scale_x, center_offset[1] * scale_y
        if self._orientation:
            image = pygame.transform.rotate(image, self._orientation)
            angle = math.radians(self._orientation)
            cos, sin = math.cos(angle), math.sin(angle)
            dx, dy = dx * cos + dy * sin, -dx * sin + dy * cos
        rect = image.get_rect(center=(round(pivot[0] + dx), round(pivot[1] + dy)))
        with self._clipped():
            self.surface.blit(image, rect)

    # -- primitives ---------------------------------------------------------

    def draw_rect(self, center_x, center_y, width, height, brush):
        """Draw a rectangle of the given size centred at (center_x, center_y)."""
        size = self._pixel_size(width, height)
        if size is None:
            return
        image = self._fill(*size, brush, _rect_uv)
        if _has_outline(brush):
            pygame.draw.rect(
                image, _rgba(brush.outline_color, brush.outline_opacity), image.get_rect(), _stroke(brush)
            )
        self._blit_posed(image, self._to_screen(center_x, center_y), (0.0, 0.0))

    def draw_line(self, x1, y1, x2, y2, brush):
        """Draw a segment using the outline colour, opacity and width; pose is ignored."""
        if brush.outline_opacity <= 0.0:
            return
        start = self._to_screen(x1, y1)
        end = self._to_screen(x2, y2)
        width = _stroke(brush)
        pad = width + 1
        left = math.floor(min(start[0], end[0])) - pad
        top = math.floor(min(start[1], end[1])) - pad
        image_w = math.ceil(max(start[0], end[0])) - left + pad
        image_h = math.ceil(max(start[1], end[1])) - top + pad
        image = pygame.Surface((image_w, image_h), pygame.SRCALPHA)
        pygame.draw.line(
            image,
            _rgba(brush.outline_color, brush.outline_opacity),
            (start[0] - left, start[1] - top),
            (end[0] - left, end[1] - top),
            width,
        )
        with self._clipped():
            self.surface.blit(image, (left, top))

    def draw_disk(self, cx, cy, radius, brush):
        """Draw a disk of the given radius centred at (cx, cy)."""
        size = self._pixel_size(2.0 * radius, 2.0 * radius)
        if size is None:
            return
        image = self._fill(*size, brush, _disk_uv)
        mask = pygame.Surface(size, pygame.SRCALPHA)
        pygame.draw.ellipse(mask, _WHITE, mask.get_rect())
        image.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MULT)
        if _has_outline(brush):
            pygame.draw.ellipse(
                image, _rgba(brush.outline_color, brush.outline_opacity), image.get_rect(), _stroke(brush)
            )
        self._blit_posed(image, self._to_screen(cx, cy), (0.0, 0.0))

    def draw_sector(self, cx, cy, radius1, radius2, start_angle, end_angle, brush):
        """Draw the part of a ring between two radii and two angles in degrees.

        Angles grow counter-clockwise from the positive x axis.
        """
        inner, outer = sorted((abs(radius1), abs(radius2)))
        size = self._pixel_size(2.0 * outer, 2.0 * outer)
        if size is None:
            return
        width, height = size
        ratio = inner / outer
        image = self._fill(width, height, brush, _sector_uv(start_angle, end_angle, ratio))

        half_w, half_h = width / 2.0, height / 2.0
        steps = max(2, math.ceil(abs(end_angle - start_angle) / _ARC_STEP_DEGREES))
        angles = [
            math.radians(start_angle + (end_angle - start_angle) * step / steps)
            for step in range(steps + 1)
        ]

        def arc(scale: float, sweep: list[float]) -> list[tuple[float, float]]:
            return [
                (half_w + half_w * scale * math.cos(a), half_h - half_h * scale * math.sin(a))
                for a in sweep
            ]

        points = arc(1.0, angles) + arc(ratio, list(reversed(angles)))
        mask = pygame.Surface(size, pygame.SRCALPHA)
        pygame.draw.polygon(mask, _WHITE, points)
        image.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MULT)
        if _has_outline(brush):
            pygame.draw.polygon(
                image, _rgba(brush.outline_color, brush.outline_opacity), points, _stroke(brush)
            )
        self._blit_posed(image, self._to_screen(cx, cy), (0.0, 0.0))

    # -- text -----------------------------------------------------------------

    def _font_at(self, path: str, pixels: int) -> pygame.font.Font:
        key = (path, pixels)
        if key not in self._fonts:
            self._fonts[key] = pygame.font.Font(path, pixels)
        return self._fonts[key]

    def set_font(self, fontname):
        """Make the TrueType font at ``fontname`` current; return False if it cannot be loaded."""
        path = _resolve(fontname)
        if not path.is_file():
            return False
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            self._font_at(str(path), 12)
        except (pygame.error, OSError):
            return False
        self._font_path = str(path)
        return True

    def draw_text(self, pos_x, pos_y, size, text, brush):
        """Draw ``text`` with its baseline's left end at (pos_x, pos_y).

        Nothing is drawn while no font is current. Only the fill attributes of
        the brush are used.
        """
        if self._font_path is None or not text:
            return
        _, _, _, scale_y = self._viewport()
        pixels = round(size * scale_y)
        if pixels <= 0:
            return
        font = self._font_at(self._font_path, pixels)
        glyphs = font.render(text, True, (255, 255, 255))
        width, height = glyphs.get_size()
        if width <= 0 or height <= 0:
            return
        image = self._fill(width, height, brush, _rect_uv, textured=False)
        image.blit(glyphs, (0, 0), special_flags=pygame.BLEND_RGBA_MULT)
        offset = (width / 2.0, height / 2.0 - font.get_ascent())
        self._blit_posed(image, self._to_screen(pos_x, pos_y), offset)

    # -- pose -----------------------------------------------------------------

    def set_orientation(self, angle):
        """Rotate later shapes by ``angle`` degrees counter-clockwise about their pivot."""
        self._orientation = float(angle)

    def set_scale(self, sx, sy):
        """Scale later shapes by (sx, sy) about their pivot."""
        self._pose_scale = (float(sx), float(sy))

    def reset_pose(self):
        """Restore the default orientation and scale."""
        self._orientation = 0.0
        self._pose_scale = (1.0, 1.0)

    # -- audio ----------------------------------------------------------------

    def _mixer_ready(self) -> bool:
        if not self._audio:
            return False
        if pygame.mixer.get_init():
            return True
        try:
            pygame.mixer.init()
        except pygame.error:
            self._audio = False
            return False
        return True

    def play_sound(self, soundfile, volume, looping=False):
        """Play a sound sample; return False if it could not be played."""
        path = _resolve(soundfile)
        if not path.is_file() or not self._mixer_ready():
            return False
        key = str(path)
        sound = self._sounds.get(key)
        if sound is None:
            try:
                sound = pygame.mixer.Sound(key)
            except pygame.error:
                return False
            self._sounds[key] = sound
        sound.set_volume(_clamp(volume))
        sound.play(loops=-1 if looping else 0)
        return True

    def play_music(self, soundfile, volume, looping=True, fade_time=0):
        """Stream an audio file as music, replacing any music playing; return False on failure."""
        path = _resolve(soundfile)
        if not path.is_file() or not self._mixer_ready():
            return False
        try:
            pygame.mixer.music.load(str(path))
        except pygame.error:
            return False
        pygame.mixer.music.set_volume(_clamp(volume))
        pygame.mixer.music.play(loops=-1 if looping else 0, fade_ms=max(0, int(fade_time)))
        return True

    def stop_music(self, fade_time=0):
        """Stop the music, fading out over ``fade_time`` milliseconds if positive."""
        if not pygame.mixer.get_init():
            return
        if fade_time > 0:
            pygame.mixer.music.fadeout(int(fade_time))
        else:
            pygame.mixer.music.stop()