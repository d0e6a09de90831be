"""Main game object: window, event handling and the frame loop."""

from __future__ import annotations

import argparse
import logging
from typing import Mapping, Sequence

import pygame

from spacegame.camera import Camera
from spacegame.datatypes import Color4, Vector2
from spacegame.editor import EditorComponent
from spacegame.inputstate import InputState
from spacegame.profiler import Sampler, Timer
from spacegame.registry import Registry
from spacegame.renderer import EngineFont, Renderer
from spacegame.scene_root import SceneRoot
from spacegame.spaceship import Spaceship
from spacegame.vector_renderer import VectorRendererComponent

logger = logging.getLogger(__name__)

_LEFT_BUTTON = 1
_RIGHT_BUTTON = 3


class Game:
    """Owns the window, the scene and the renderer, and runs the frame loop.

    F3 toggles debug drawing and F11 toggles fullscreen.
    """

    def __init__(
        self,
        width: int = 640,
        height: int = 480,
        title: str = "Space",
        font_files: Mapping[EngineFont, str | None] | None = None,
        max_fps: int = 60,
    ) -> None:
        self.width = width
        self.height = height
        self.title = title
        self.font_files = font_files
        self.max_fps = max_fps
        self.window: pygame.Surface | None = None
        self.scene_root: SceneRoot | None = None
        self.renderer: Renderer | None = None
        self.input_state = InputState()
        self.should_exit = False
        self._debug = False
        self.frame_time = 0.0
        self.frame_timer = Timer()
        self.fps_sampler = Sampler(16)

    @property
    def debug(self) -> bool:
        """Whether debug overlays are drawn."""
        return self._debug

    @debug.setter
    def debug(self, value: bool) -> None:
        self._debug = bool(value)
        if self.renderer is not None:
            self.renderer.debug = self._debug

    def run(self) -> None:
        """Open the window and run frames until asked to quit."""
        pygame.init()
        try:
            try:
                self.window = pygame.display.set_mode((self.width, self.height))
            except pygame.error as exc:
                logger.error("Could not create window: %s", exc)
                return
            pygame.display.set_caption(self.title)

            self.renderer = Renderer(self.window, self.font_files)
            self.renderer.debug = self._debug
            self.setup_scene()

            clock = pygame.time.Clock()
            self.frame_timer.reset()
            while not self.should_exit:
                clock.tick(self.max_fps)
                self.frame_time = self.frame_timer.elapsed()
                if self.frame_time > 0.0:
                    self.fps_sampler.push(1.0 / self.frame_time)
                self.frame_timer.reset()

                self.poll_events()
                self.update_scene()
                self.render_frame()
        finally:
            if self.scene_root is not None:
                self.scene_root.close()
            pygame.quit()

    def setup_scene(self) -> None:
        """Build the scene: root with editor, the ship and a camera."""
        if self.renderer is None:
            raise RuntimeError("a renderer is needed before the scene can be set up")
        if self.scene_root is not None:
            self.scene_root.close()

        root = SceneRoot()
        root.add_component(VectorRendererComponent)
        editor = root.add_component(EditorComponent)
        editor.input_state = self.input_state

        root.add_child(Spaceship(input_state=self.input_state))

        camera = Camera()
        camera.position = Vector2(0.0, 0.0)
        root.add_child(camera)

        self.scene_root = root
        self.renderer.current_camera = camera

    def poll_events(self) -> None:
        """Handle every pending window, keyboard and mouse event."""
        for event in pygame.event.get():
            self._handle_event(event)

    def _handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.should_exit = True
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_F3:
                self.debug = not self.debug
            elif event.key == pygame.K_F11:
                self._toggle_fullscreen()
            self.input_state.set_key(pygame.key.name(event.key), True)
        elif event.type == pygame.KEYUP:
            self.input_state.set_key(pygame.key.name(event.key), False)
        elif event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            state = self.input_state
            state.set_mouse(x, y, state.left_button, state.right_button)
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            pressed = event.type == pygame.MOUSEBUTTONDOWN
            x, y = event.pos
            state = self.input_state
            left = pressed if event.button == _LEFT_BUTTON else state.left_button
            right = pressed if event.button == _RIGHT_BUTTON else state.right_button
            state.set_mouse(x, y, left, right)

    def _toggle_fullscreen(self) -> None:
        if self.window is None:
            return
        try:
            pygame.display.toggle_fullscreen()
        except pygame.error as exc:
            logger.warning("Could not toggle fullscreen: %s", exc)

    def update_scene(self) -> None:
        """Step physics, refresh transforms and update every node."""
        if self.scene_root is None:
            raise RuntimeError("the scene has not been set up")
        self.scene_root.step_simulation(self.frame_time)
        self.scene_root.update_transform_recursive()
        self.scene_root.update(self.frame_time)

    def render_frame(self) -> None:
        """Clear, draw the scene and the frame rate, then present."""
        if self.renderer is None or self.scene_root is None:
            raise RuntimeError("the scene has not been set up")
        renderer = self.renderer
        renderer.clear(Color4.BLACK)
        self.scene_root.draw(renderer)
        renderer.render_text(
            f"FPS {self.fps_sampler.average():.0f}",
            Vector2.ZERO,
            Vector2.ZERO,
            Color4.WHITE,
            renderer.debug_font,
        )
        renderer.present()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="spacegame", description="Fly a small vector spaceship.")
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    registry = Registry()
    registry.initialize()
    Game().run()
    return 0