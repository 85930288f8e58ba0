"""The title screen and the main play scene."""

from __future__ import annotations

import math
import struct
from pathlib import Path
from typing import Any, Optional, Sequence, Union

import pygame

from .bg_star import add_bg_star_child
from .defs import Anchor, Color
from .hud_button import HUDButton, add_hud_button_child
from .hud_stats import HUDStats, add_hud_stats_child
from .hud_text import HUDText, add_hud_text_child
from .player import Player
from .scene import Scene
from .spawner import Spawner
from .timer import Timer, add_timer_child
from .ui_mouse import UIMouse, add_ui_mouse_child

SCORE_FILE = "assets/score.dat"
FONT = "assets/font/VonwaonBitmap-16px.ttf"

_SCORE_FORMAT = struct.Struct("<i")
_RIGHT_BUTTON_MASK = 1 << 2
_SLOW_FACTOR = 0.4


def save_high_score(file_path: Union[str, Path], score: int) -> None:
    """Write ``score`` as a four-byte little-endian signed integer."""
    Path(file_path).write_bytes(_SCORE_FORMAT.pack(int(score)))


def load_high_score(file_path: Union[str, Path]) -> int:
    """Read a score written by :func:`save_high_score`; 0 if absent or short."""
    try:
        data = Path(file_path).read_bytes()
    except OSError:
        return 0
    if len(data) < _SCORE_FORMAT.size:
        return 0
    (score,) = _SCORE_FORMAT.unpack_from(data)
    return score


def _hide_cursor() -> None:
    try:
        pygame.mouse.set_visible(False)
    except pygame.error:
        pass


def _right_button_held(buttons: Any) -> bool:
    if isinstance(buttons, int):
        return bool(buttons & _RIGHT_BUTTON_MASK)
    if isinstance(buttons, Sequence) and len(buttons) > 2:
        return bool(buttons[2])
    return False


class SceneTitle(Scene):
    """Title screen with start, credits and quit buttons and the high score."""

    def __init__(self) -> None:
        super().__init__()
        self.boundary_color = Color(0.5, 0.5, 0.5, 1.0)
        self.color_timer = 0.0
        self.button_start: Optional[HUDButton] = None
        self.button_credits: Optional[HUDButton] = None
        self.button_quit: Optional[HUDButton] = None
        self.credits_text: Optional[HUDText] = None
        self.ui_mouse: Optional[UIMouse] = None

    def init(self) -> None:
        super().init()
        self.load_data(SCORE_FILE)
        _hide_cursor()

        game = self.game
        game.play_music("assets/bgm/Spooky music.mp3", True)
        screen = pygame.Vector2(game.screen_size)
        centre = screen / 2.0
        title_size = pygame.Vector2(screen.x / 2.0, screen.y / 3.0)
        add_hud_text_child(self, "幽 灵 逃 生", centre - pygame.Vector2(0, 100), title_size, FONT, 64)
        score_text = f"最高分: {game.high_score}"
        add_hud_text_child(self, score_text, centre + pygame.Vector2(0, 100), pygame.Vector2(200, 50), FONT, 32)

        self.button_start = add_hud_button_child(
            self, centre + pygame.Vector2(-200, 200),
            "assets/UI/A_Start1.png", "assets/UI/A_Start2.png", "assets/UI/A_Start3.png", 2.0)
        self.button_credits = add_hud_button_child(
            self, centre + pygame.Vector2(0, 200),
            "assets/UI/A_Credits1.png", "assets/UI/A_Credits2.png", "assets/UI/A_Credits3.png", 2.0)
        self.button_quit = add_hud_button_child(
            self, centre + pygame.Vector2(200, 200),
            "assets/UI/A_Quit1.png", "assets/UI/A_Quit2.png", "assets/UI/A_Quit3.png", 2.0)

        text = game.load_text_file("assets/credits.txt")
        self.credits_text = add_hud_text_child(self, text, centre, pygame.Vector2(500, 500), FONT, 16)
        self.credits_text.set_bg_size_by_text()
        self.credits_text.is_active = False

        self.ui_mouse = add_ui_mouse_child(
            self, "assets/UI/pointer_c_shaded.png", "assets/UI/pointer_c_shaded.png", 1.0, Anchor.TOP_LEFT)

    def handle_events(self, event: Any) -> bool:
        """While credits are shown, a mouse release closes them."""
        if self.credits_text is not None and self.credits_text.is_active:
            if event.type == pygame.MOUSEBUTTONUP:
                self.credits_text.is_active = False
                return True
        return super().handle_events(event)

    def update(self, dt: float) -> None:
        self.color_timer += dt
        self._update_color()
        if self.credits_text is not None and self.credits_text.is_active:
            self.ui_mouse.update(dt)
            return
        super().update(dt)
        self._check_button_quit()
        self._check_button_start()
        self._check_button_credits()

    def render(self) -> None:
        self._render_background()
        super().render()

    def clean(self) -> None:
        super().clean()

    def load_data(self, file_path: str) -> None:
        """Load the saved high score into the game."""
        self.game.high_score = load_high_score(file_path)

    def _render_background(self) -> None:
        margin = pygame.Vector2(30.0, 30.0)
        self.game.draw_boundary(margin, self.game.screen_size - margin, 10.0, self.boundary_color)

    def _update_color(self) -> None:
        t = self.color_timer
        self.boundary_color = Color(
            0.5 + 0.5 * math.sin(t * 0.9),
            0.5 + 0.5 * math.sin(t * 0.8),
            0.5 + 0.5 * math.sin(t * 0.7),
            self.boundary_color.a,
        )

    def _check_button_quit(self) -> None:
        if self.button_quit.take_trigger():
            self.game.quit()

    def _check_button_start(self) -> None:
        if self.button_start.take_trigger():
            self.game.safe_change_scene(SceneMain())

    def _check_button_credits(self) -> None:
        if self.button_credits.take_trigger():
            self.credits_text.is_active = True


class SceneMain(Scene):
    """The play field: the player, spawning enemies and the HUD."""

    def __init__(self) -> None:
        super().__init__()
        self.player: Optional[Player] = None
        self.spawner: Optional[Spawner] = None
        self.ui_mouse: Optional[UIMouse] = None
        self.hud_stats: Optional[HUDStats] = None
        self.hud_text_score: Optional[HUDText] = None
        self.button_pause: Optional[HUDButton] = None
        self.button_restart: Optional[HUDButton] = None
        self.button_back: Optional[HUDButton] = None
        self.end_timer: Optional[Timer] = None

    def init(self) -> None:
        super().init()
        _hide_cursor()
        game = self.game
        game.play_music("assets/bgm/OhMyGhost.ogg", True)
        screen = pygame.Vector2(game.screen_size)
        self.world_size = screen * 3.0
        self.camera_position = self.world_size / 2.0 - screen / 2.0

        self.player = Player()
        self.player.init()
        self.player.set_position(self.world_size / 2.0)
        self.add_child(self.player)

        add_bg_star_child(self, 2000, 0.2, 0.5, 0.7)

        self.end_timer = add_timer_child(self)

        self.spawner = Spawner()
        self.spawner.init()
        self.spawner.target = self.player
        self.add_child(self.spawner)

        self.button_pause = add_hud_button_child(
            self, screen - pygame.Vector2(230.0, 30.0),
            "assets/UI/A_Pause1.png", "assets/UI/A_Pause2.png", "assets/UI/A_Pause3.png")
        self.button_restart = add_hud_button_child(
            self, screen - pygame.Vector2(140.0, 30.0),
            "assets/UI/A_Restart1.png", "assets/UI/A_Restart2.png", "assets/UI/A_Restart3.png")
        self.button_back = add_hud_button_child(
            self, screen - pygame.Vector2(50.0, 30.0),
            "assets/UI/A_Back1.png", "assets/UI/A_Back2.png", "assets/UI/A_Back3.png")

        self.hud_stats = add_hud_stats_child(self, self.player, pygame.Vector2(30.0, 30.0))
        self.hud_text_score = add_hud_text_child(
            self, "Score: 0", pygame.Vector2(screen.x - 120.0, 30.0), pygame.Vector2(200, 50))

        # Added last so the pointer is drawn on top of everything else.
        self.ui_mouse = add_ui_mouse_child(self, "assets/UI/29.png", "assets/UI/30.png", 1.0, Anchor.CENTER)

    def handle_events(self, event: Any) -> bool:
        return super().handle_events(event)

    def update(self, dt: float) -> None:
        if _right_button_held(getattr(self.game, "mouse_buttons", ())):
            dt *= _SLOW_FACTOR
        super().update(dt)
        self._update_score()
        self._check_button_restart()
        self._check_button_pause()
        self._check_button_back()
        if self.player is not None and not self.player.is_active:
            self.end_timer.start()
            self.save_data(SCORE_FILE)
        self._check_end_timer()

    def render(self) -> None:
        self._render_background()
        super().render()

    def clean(self) -> None:
        super().clean()

    def save_data(self, file_path: str) -> None:
        """Save the game's high score."""
        save_high_score(file_path, self.game.high_score)

    def _render_background(self) -> None:
        start = -self.camera_position
        end = self.world_size - self.camera_position
        self.game.draw_grid(start, end, 80.0, Color(0.5, 0.5, 0.5, 1.0))
        self.game.draw_boundary(start, end, 5.0, Color(1.0, 1.0, 1.0, 1.0))

    def _update_score(self) -> None:
        self.hud_text_score.set_text(f"Score: {self.game.score}")

    def _check_button_pause(self) -> None:
        if not self.button_pause.take_trigger():
            return
        if self.is_pause:
            self.resume()
        else:
            self.pause()

    def _check_button_restart(self) -> None:
        if not self.button_restart.take_trigger():
            return
        self.save_data(SCORE_FILE)
        self.game.score = 0
        self.game.safe_change_scene(SceneMain())

    def _check_button_back(self) -> None:
        if not self.button_back.take_trigger():
            return
        self.save_data(SCORE_FILE)
        self.game.score = 0
        self.game.safe_change_scene(SceneTitle())

    def _check_end_timer(self) -> None:
        if not self.end_timer.time_out():
            return
        self.pause()
        self.game.resume_music()
        centre = pygame.Vector2(self.game.screen_size) / 2.0
        self.button_restart.set_render_position(centre - pygame.Vector2(200.0, 0.0))
        self.button_restart.set_scale(4.0)
        self.button_back.set_render_position(centre + pygame.Vector2(200.0, 0.0))
        self.button_back.set_scale(4.0)
        self.button_pause.is_active = False
        self.end_timer.stop()