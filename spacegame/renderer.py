"""Drawing of lines, points, circles and text onto a pygame surface."""

from __future__ import annotations

import enum
import logging
import math
import weakref
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping

import pygame

from spacegame.datatypes import Color4, Vector2

if TYPE_CHECKING:
    from spacegame.camera import Camera

logger = logging.getLogger(__name__)


class EngineFont(enum.IntEnum):
    """Fonts known to the engine."""

    DEBUG = 0


DEFAULT_FONT_FILES: dict[EngineFont, str | None] = {
    EngineFont.DEBUG: "data/FONT/Roboto-Regular.ttf",
}


@dataclass(eq=False)
class CachedFont:
    """A loaded font at one point size; ``handle`` is None if loading failed."""

    font: EngineFont
    point_size: float
    handle: Any = None

    def is_valid(self) -> bool:
        """Return whether the font loaded and has a usable size."""
        return self.point_size > 0.0 and self.handle is not None


def _pixel(vector: Vector2) -> tuple[int, int]:
    return math.floor(vector.x), math.floor(vector.y)


class Renderer:
    """Draws in camera space onto a pygame surface.

    ``font_files`` maps each :class:`EngineFont` to a font file path;
    a path of None selects pygame's built-in font.
    """

    def __init__(
        self,
        surface: pygame.Surface,
        font_files: Mapping[EngineFont, str | None] | None = None,
    ) -> None:
        self.surface = surface
        self.font_files = dict(DEFAULT_FONT_FILES if font_files is None else font_files)
        self.current_camera: Camera | None = None
        self.debug = False
        self._font_cache: list[weakref.ref[CachedFont]] = []
        self._debug_font: CachedFont | None = None

    @property
    def loaded_font_count(self) -> int:
        """Number of fonts in the cache that are still in use."""
        return sum(1 for ref in self._font_cache if ref() is not None)

    @property
    def debug_font(self) -> CachedFont:
        """The font used for debug overlays, loaded on first use."""
        if self._debug_font is None:
            self._debug_font = self.get_cached_font(EngineFont.DEBUG, 16.0)
        return self._debug_font

    def to_camera_space(self, vector: Vector2) -> Vector2:
        """Return ``vector`` relative to the current camera."""
        if self.current_camera is None:
            return vector
        return vector - self.current_camera.global_position

    def draw_renderer_debug_info(self) -> None:
        """Draw the number of loaded fonts."""
        self.render_text(
            f"LOADED FONTS: {self.loaded_font_count}",
            Vector2(0.0, 400.0),
            Vector2.ZERO,
            Color4.BLUE,
            self.debug_font,
            1.0,
        )

    def clear(self, color: Color4) -> None:
        """Fill the whole surface with ``color``."""
        self.surface.fill(tuple(color))

    def present(self) -> None:
        """Finish the frame, adding debug info and flipping the display if shown."""
        if self.debug:
            self.draw_renderer_debug_info()
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()

    def render_line(self, point1: Vector2, point2: Vector2, color: Color4) -> None:
        """Draw a one-pixel line between two world points."""
        start = self.to_camera_space(point1)
        end = self.to_camera_space(point2)
        pygame.draw.line(self.surface, tuple(color), tuple(start), tuple(end))

    def render_point(self, point: Vector2, color: Color4) -> None:
        """Set the pixel under a world point; points off the surface are ignored."""
        self.surface.set_at(_pixel(self.to_camera_space(point)), tuple(color))

    def render_circle(self, origin: Vector2, radius: float, color: Color4) -> None:
        """Draw a circle outline centred on a world point."""
        centre = self.to_camera_space(origin)
        pygame.draw.circle(self.surface, tuple(color), tuple(centre), radius, width=1)

    def get_cached_font(self, font: EngineFont, point_size: float) -> CachedFont:
        """Return a font at ``point_size``, reusing one still in use if possible.

        The returned font may be invalid if loading failed; invalid fonts
        are not cached.
        """
        live: list[weakref.ref[CachedFont]] = []
        found: CachedFont | None = None
        for ref in self._font_cache:
            cached = ref()
            if cached is None:
                continue
            live.append(ref)
            if found is None and cached.font == font and cached.point_size == point_size:
                found = cached
        self._font_cache = live
        if found is not None:
            return found

        path = self.font_files[font]
        cached_font = CachedFont(font, point_size)
        if point_size > 0.0:
            if not pygame.font.get_init():
                pygame.font.init()
            try:
                cached_font.handle = pygame.font.Font(path, max(1, round(point_size)))
            except (OSError, pygame.error) as exc:
                logger.warning("Font failed to load: %s %.1f %s", path, point_size, exc)

        if cached_font.is_valid():
            self._font_cache.append(weakref.ref(cached_font))
            logger.info("Font cached: %s %.1f", path, point_size)
        return cached_font

    def render_text(
        self,
        text: str,
        position: Vector2,
        anchor: Vector2,
        color: Color4,
        cached_font: CachedFont,
        render_scale: float = 1.0,
    ) -> pygame.Rect | None:
        """Draw ``text`` with its top-left corner at a world position.

        Returns the rectangle covered on the surface, or None if the font
        is invalid. ``anchor`` is accepted for layout but not yet applied.
        """
        if not cached_font.is_valid():
            logger.warning(
                "Font is invalid: %s %.1f",
                self.font_files.get(cached_font.font),
                cached_font.point_size,
            )
            return None

        image = cached_font.handle.render(text, True, tuple(color))
        if render_scale != 1.0:
            size = (
                max(0, round(image.get_width() * render_scale)),
                max(0, round(image.get_height() * render_scale)),
            )
            image = pygame.transform.scale(image, size)

        top_left = _pixel(self.to_camera_space(position))
        self.surface.blit(image, top_left)
        return pygame.Rect(top_left, image.get_size())