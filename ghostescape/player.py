"""The ghost steered by the player."""

from __future__ import annotations

from typing import Any, Callable, Optional

import pygame

from .actor import Actor
from .collider import add_collider_child
from .effect import Effect, add_effect_child
from .sprite_anim import SpriteAnim, add_sprite_anim_child
from .stats import add_stats_child
from .timer import Timer, add_timer_child
from .weapon_thunder import WeaponThunder, add_weapon_thunder_child

_IDLE_SHEET = "assets/sprite/ghost-idle.png"
_MOVE_SHEET = "assets/sprite/ghost-move.png"
_DEATH_EFFECT = "assets/effect/1764.png"
_HIT_SOUND = "assets/sound/hit-flesh-02-266309.mp3"
_DEATH_SOUND = "assets/sound/female-scream-02-89290.mp3"

_FLASH_INTERVAL = 0.4
_PLAYER_SPEED = 500.0
_FRICTION = 0.9
_MOVING_THRESHOLD = 0.1


def _pressed_keys() -> Any:
    """Current keyboard state, or nothing pressed when there is no display."""
    if not pygame.display.get_init():
        return {}
    try:
        return pygame.key.get_pressed()
    except pygame.error:
        return {}


def _is_down(keys: Any, key: int) -> bool:
    try:
        return bool(keys[key])
    except (KeyError, IndexError):
        return False


class Player(Actor):
    """A ghost moved with WASD that casts thunder and dies when out of health."""

    def __init__(self) -> None:
        super().__init__()
        self.weapon_thunder: Optional[WeaponThunder] = None
        self.sprite_idle: Optional[SpriteAnim] = None
        self.sprite_move: Optional[SpriteAnim] = None
        self.effect: Optional[Effect] = None
        self.flash_timer: Optional[Timer] = None
        self.is_moving = False
        self.read_keys: Callable[[], Any] = _pressed_keys

    def init(self) -> None:
        super().init()
        self.flash_timer = add_timer_child(self, _FLASH_INTERVAL)
        self.flash_timer.start()
        self.max_speed = _PLAYER_SPEED
        self.sprite_idle = add_sprite_anim_child(self, _IDLE_SHEET, 2.0)
        self.sprite_move = add_sprite_anim_child(self, _MOVE_SHEET, 2.0)
        self.sprite_move.is_active = False

        self.collider = add_collider_child(self, self.sprite_idle.size / 2.0)
        self.stats = add_stats_child(self)
        self.effect = add_effect_child(self.game.current_scene, _DEATH_EFFECT, pygame.Vector2(0, 0), 2.0)
        self.effect.is_active = False
        self.weapon_thunder = add_weapon_thunder_child(self, 2.0, 40.0)

    def handle_events(self, event: Any) -> bool:
        return super().handle_events(event)

    def update(self, dt: float) -> None:
        super().update(dt)
        self.velocity *= _FRICTION
        self._keyboard_control()
        self._check_state()
        self.move(dt)
        self._sync_camera()
        self._check_is_dead()

    def render(self) -> None:
        """Draw the ghost, blinking while it is invincible."""
        if (self.stats is not None and self.stats.is_invincible
                and self.flash_timer is not None and self.flash_timer.progress < 0.5):
            return
        super().render()

    def clean(self) -> None:
        super().clean()

    def take_damage(self, damage: float) -> None:
        """Take a hit unless invincible, with a sound."""
        if self.stats is None or self.stats.is_invincible:
            return
        super().take_damage(damage)
        self.game.play_sound(_HIT_SOUND)

    def _keyboard_control(self) -> None:
        keys = self.read_keys()
        if _is_down(keys, pygame.K_w):
            self.velocity.y = -self.max_speed
        if _is_down(keys, pygame.K_s):
            self.velocity.y = self.max_speed
        if _is_down(keys, pygame.K_a):
            self.velocity.x = -self.max_speed
        if _is_down(keys, pygame.K_d):
            self.velocity.x = self.max_speed

    def _sync_camera(self) -> None:
        self.game.current_scene.set_camera_position(self._position - self.game.screen_size / 2.0)

    def _check_state(self) -> None:
        facing_left = self.velocity.x < 0
        self.sprite_move.flip = facing_left
        self.sprite_idle.flip = facing_left

        moving = self.velocity.length() > _MOVING_THRESHOLD
        if moving != self.is_moving:
            self.is_moving = moving
            self._change_state(moving)

    def _change_state(self, is_moving: bool) -> None:
        if is_moving:
            shown, hidden = self.sprite_move, self.sprite_idle
        else:
            shown, hidden = self.sprite_idle, self.sprite_move
        hidden.is_active = False
        shown.is_active = True
        shown.current_frame = hidden.current_frame
        shown.frame_timer = hidden.frame_timer

    def _check_is_dead(self) -> None:
        if self.stats.is_alive:
            return
        self.effect.is_active = True
        self.effect.set_position(self.position)
        self.is_active = False
        self.game.play_sound(_DEATH_SOUND)