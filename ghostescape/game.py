"""The game singleton: window, main loop, audio, drawing and helpers."""

from __future__ import annotations

import logging
import math
import random
import time
from typing import Any, Callable, Iterable, Optional, Sequence, Tuple

import pygame

from .asset_store import AssetStore
from .defs import Color

logger = logging.getLogger(__name__)


def _rgba(color: Sequence[float]) -> Tuple[int, int, int, int]:
    return tuple(int(round(max(0.0, min(1.0, c)) * 255)) for c in color)  # type: ignore[return-value]


def _render_text(font: pygame.font.Font, text: str) -> pygame.Surface:
    lines = text.split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    rendered = [font.render(line, True, (255, 255, 255)) for line in lines]
    line_height = font.get_linesize()
    width = max(surface.get_width() for surface in rendered)
    surface = pygame.Surface((width, line_height * len(rendered)), pygame.SRCALPHA)
    for row, line_surface in enumerate(rendered):
        surface.blit(line_surface, (0, row * line_height))
    return surface


class Game:
    """Owns the window, the current scene, the score and shared services."""

    _instance: Optional["Game"] = None

    def __init__(self) -> None:
        self.asset_store = AssetStore()
        self.screen_size = pygame.Vector2(0, 0)
        self.screen: Optional[pygame.Surface] = None
        self.mouse_position = pygame.Vector2(0, 0)
        self.mouse_buttons: Tuple[bool, bool, bool] = (False, False, False)
        self.is_running = True
        self.current_scene: Any = None
        self.next_scene: Any = None
        self.fps = 60
        self.frame_delay = 0
        self.dt = 0.0
        self._score = 0
        self.high_score = 0
        self._audio_ready = False
        self._sound_volume = 0.25
        self._rng = random.Random()

    @classmethod
    def instance(cls) -> "Game":
        """Return the shared game object, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def init(self, title: str, width: int, height: int, scene_factory: Callable[[], Any]) -> None:
        """Open the window and audio, then start the scene made by ``scene_factory``."""
        self.screen_size = pygame.Vector2(width, height)
        pygame.init()
        try:
            pygame.mixer.init()
            pygame.mixer.set_num_channels(16)
            pygame.mixer.music.set_volume(0.25)
            self._audio_ready = True
        except pygame.error as exc:
            logger.error("audio initialisation failed: %s", exc)
        pygame.font.init()
        pygame.display.set_caption(title)
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE | pygame.SCALED)
        self.frame_delay = 1_000_000_000 // self.fps
        self.current_scene = scene_factory()
        self.current_scene.init()

    def run(self) -> None:
        """Run the main loop until the game is asked to quit."""
        while self.is_running:
            start = time.perf_counter_ns()
            if self.next_scene is not None:
                self.change_scene(self.next_scene)
                self.next_scene = None
            self.handle_events()
            self.update(self.dt)
            self.render()
            elapsed = time.perf_counter_ns() - start
            if elapsed < self.frame_delay:
                time.sleep((self.frame_delay - elapsed) / 1e9)
                self.dt = self.frame_delay / 1e9
            else:
                self.dt = elapsed / 1e9

    def handle_events(self) -> None:
        """Dispatch pending window events to the current scene."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.is_running = False
            else:
                self.current_scene.handle_events(event)

    def update(self, dt: float) -> None:
        """Refresh the mouse state and advance the current scene."""
        self._update_mouse()
        self.current_scene.update(dt)

    def render(self) -> None:
        """Clear the window, draw the current scene and show it."""
        if self.screen is None or self.current_scene is None:
            return
        self.screen.fill((0, 0, 0))
        self.current_scene.render()
        pygame.display.flip()

    def clean(self) -> None:
        """Release the scene, the assets and the window."""
        if self.current_scene is not None:
            self.current_scene.clean()
            self.current_scene = None
        self.asset_store.clean()
        if self._audio_ready:
            pygame.mixer.quit()
            self._audio_ready = False
        pygame.quit()
        self.screen = None

    @property
    def score(self) -> int:
        return self._score

    @score.setter
    def score(self, value: int) -> None:
        self._score = value
        if self._score > self.high_score:
            self.high_score = self._score

    def add_score(self, score: int) -> None:
        """Add to the score, raising the high score if it is passed."""
        self.score = self._score + score

    def quit(self) -> None:
        """Stop the main loop after the current frame."""
        self.is_running = False

    def safe_change_scene(self, scene: Any) -> None:
        """Switch to ``scene`` at the start of the next frame."""
        self.next_scene = scene

    def change_scene(self, scene: Any) -> None:
        """Clean the current scene and start ``scene`` at once."""
        if self.current_scene is not None:
            self.current_scene.clean()
        self.current_scene = scene
        self.current_scene.init()

    # Audio

    def play_music(self, music_path: str, loop: bool = True) -> None:
        if not self._audio_ready:
            return
        pygame.mixer.music.load(self.asset_store.get_music(music_path))
        pygame.mixer.music.play(-1 if loop else 0)

    def play_sound(self, sound_path: str) -> None:
        if not self._audio_ready:
            return
        sound = self.asset_store.get_sound(sound_path)
        sound.set_volume(self._sound_volume)
        sound.play()

    def stop_music(self) -> None:
        if self._audio_ready:
            pygame.mixer.music.stop()

    def stop_sound(self) -> None:
        if self._audio_ready:
            pygame.mixer.stop()

    def pause_music(self) -> None:
        if self._audio_ready:
            pygame.mixer.music.pause()

    def pause_sound(self) -> None:
        if self._audio_ready:
            pygame.mixer.pause()

    def resume_music(self) -> None:
        if self._audio_ready:
            pygame.mixer.music.unpause()

    def resume_sound(self) -> None:
        if self._audio_ready:
            pygame.mixer.unpause()

    # Random numbers

    def random_float(self, low: float, high: float) -> float:
        return self._rng.uniform(low, high)

    def random_int(self, low: int, high: int) -> int:
        """Random integer in the closed range [low, high]."""
        return self._rng.randint(low, high)

    def random_vec2(self, low: Sequence[float], high: Sequence[float]) -> pygame.Vector2:
        return pygame.Vector2(self.random_float(low[0], high[0]), self.random_float(low[1], high[1]))

    def random_ivec2(self, low: Sequence[int], high: Sequence[int]) -> Tuple[int, int]:
        return (self.random_int(low[0], high[0]), self.random_int(low[1], high[1]))

    # Drawing

    def render_texture(self, texture: Any, position: Sequence[float], size: Sequence[float],
                       mask: Sequence[float] = (1.0, 1.0)) -> None:
        """Draw part of a texture; ``mask`` keeps a fraction of width and of height from the bottom."""
        surface = getattr(texture, "surface", None)
        if self.screen is None or surface is None:
            return
        mask_x, mask_y = mask
        src = texture.src_rect
        src_rect = pygame.Rect(
            int(src.x),
            int(src.y + src.h * (1 - mask_y)),
            int(round(src.w * mask_x)),
            int(round(src.h * mask_y)),
        ).clip(surface.get_rect())
        dst_x = position[0]
        dst_y = position[1] + size[1] * (1 - mask_y)
        dst_w = size[0] * mask_x
        dst_h = size[1] * mask_y
        width, height = int(round(dst_w)), int(round(dst_h))
        if src_rect.w <= 0 or src_rect.h <= 0 or width <= 0 or height <= 0:
            return
        image = pygame.transform.scale(surface.subsurface(src_rect), (width, height))
        if texture.is_flip:
            image = pygame.transform.flip(image, True, False)
        if texture.angle:
            image = pygame.transform.rotate(image, -texture.angle)
        centre = (round(dst_x + dst_w / 2), round(dst_y + dst_h / 2))
        self.screen.blit(image, image.get_rect(center=centre))

    def render_fill_circle(self, position: Sequence[float], size: Sequence[float], alpha: float) -> None:
        """Draw a translucent white ellipse filling the given box."""
        if self.screen is None:
            return
        width, height = int(size[0]), int(size[1])
        if width <= 0 or height <= 0:
            return
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        pygame.draw.ellipse(overlay, (255, 255, 255, int(max(0.0, min(1.0, alpha)) * 255)), overlay.get_rect())
        self.screen.blit(overlay, (int(position[0]), int(position[1])))

    def render_hbar(self, position: Sequence[float], size: Sequence[float], percent: float, color: Color) -> None:
        """Draw an outlined horizontal bar filled to ``percent``."""
        if self.screen is None:
            return
        rgba = _rgba(color)
        x, y = int(position[0]), int(position[1])
        pygame.draw.rect(self.screen, rgba, pygame.Rect(x, y, int(size[0]), int(size[1])), 1)
        fill_width = int(size[0] * percent)
        if fill_width > 0:
            pygame.draw.rect(self.screen, rgba, pygame.Rect(x, y, fill_width, int(size[1])))

    def draw_grid(self, top_left: Sequence[float], bottom_right: Sequence[float],
                  grid_width: float, color: Color) -> None:
        """Draw grid lines every ``grid_width`` pixels inside the box."""
        if grid_width <= 0:
            raise ValueError("grid width must be positive")
        if self.screen is None:
            return
        rgba = _rgba(color)
        left, top = top_left
        right, bottom = bottom_right
        x = left
        while x <= right:
            pygame.draw.line(self.screen, rgba, (x, top), (x, bottom))
            x += grid_width
        y = top
        while y <= bottom:
            pygame.draw.line(self.screen, rgba, (left, y), (right, y))
            y += grid_width

    def draw_boundary(self, top_left: Sequence[float], bottom_right: Sequence[float],
                      boundary_width: float, color: Color) -> None:
        """Draw a frame that grows outwards from the box, one pixel per step."""
        if self.screen is None:
            return
        rgba = _rgba(color)
        left, top = top_left
        right, bottom = bottom_right
        for i in range(math.ceil(boundary_width)):
            rect = pygame.Rect(int(left - i), int(top - i), int(right - left + 2 * i), int(bottom - top + 2 * i))
            pygame.draw.rect(self.screen, rgba, rect, 1)

    def draw_points(self, points: Iterable[Sequence[float]], render_pos: Sequence[float], color: Color) -> None:
        """Plot single pixels at ``points`` shifted by ``render_pos``."""
        if self.screen is None:
            return
        # The red channel follows alpha; the star layers have always been drawn this way.
        rgba = _rgba((color.a, color.g, color.b, color.a))
        dx, dy = render_pos
        for px, py in points:
            self.screen.set_at((int(px + dx), int(py + dy)), rgba)

    def create_text(self, text: str, font_path: str, font_size: int = 16) -> pygame.Surface:
        """Render ``text`` (which may span lines) in white with the given font."""
        return _render_text(self.asset_store.get_font(font_path, font_size), text)

    # Utilities

    def is_mouse_in_rect(self, top_left: Sequence[float], bottom_right: Sequence[float]) -> bool:
        x, y = self.mouse_position
        return top_left[0] <= x <= bottom_right[0] and top_left[1] <= y <= bottom_right[1]

    def load_text_file(self, file_path: str) -> str:
        """Read a text file, ending every line with a newline; empty if unreadable."""
        try:
            with open(file_path, encoding="utf-8", newline="") as handle:
                return "".join(line.rstrip("\n") + "\n" for line in handle)
        except OSError:
            return ""

    def _update_mouse(self) -> None:
        if not pygame.display.get_init() or pygame.display.get_surface() is None:
            return
        self.mouse_position = pygame.Vector2(pygame.mouse.get_pos())
        pressed = pygame.mouse.get_pressed()
        self.mouse_buttons = (bool(pressed[0]), bool(pressed[1]), bool(pressed[2]))