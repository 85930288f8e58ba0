"""Three-state screen buttons: normal, hovered and pressed."""

from __future__ import annotations

from typing import Any, Optional, Sequence

import pygame

from .defs import Anchor
from .object_screen import ObjectScreen
from .sprite import Sprite, add_sprite_child

_PRESS_SOUND = "assets/sound/UI_button08.wav"
_HOVER_SOUND = "assets/sound/UI_button12.wav"


class HUDButton(ObjectScreen):
    """A button that latches a trigger when clicked and released over it."""

    def __init__(self) -> None:
        super().__init__()
        self.sprite_normal: Optional[Sprite] = None
        self.sprite_hover: Optional[Sprite] = None
        self.sprite_press: Optional[Sprite] = None
        self.is_hover = False
        self.is_press = False
        self.is_trigger = False

    def handle_events(self, event: Any) -> bool:
        """Track left-button presses; True when the event was consumed."""
        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == pygame.BUTTON_LEFT and self.is_hover:
                self.is_press = True
                self.game.play_sound(_PRESS_SOUND)
                return True
        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == pygame.BUTTON_LEFT:
                self.is_press = False
                if self.is_hover:
                    self.is_trigger = True
                    return True
        return False

    def update(self, dt: float) -> None:
        self._check_hover()
        self._check_state()

    def take_trigger(self) -> bool:
        """True once after a click; reading it resets the button."""
        if self.is_trigger:
            self.is_trigger = False
            self.is_press = False
            self.is_hover = False
            return True
        return False

    def set_scale(self, scale: float) -> None:
        """Scale all three sprites; each call compounds."""
        for sprite in self._sprites():
            sprite.set_scale(scale)

    def _sprites(self) -> tuple:
        return tuple(s for s in (self.sprite_normal, self.sprite_hover, self.sprite_press) if s is not None)

    def _check_hover(self) -> None:
        pos = self.render_position + self.sprite_normal.offset
        hover = self.game.is_mouse_in_rect(pos, pos + self.sprite_normal.size)
        if hover != self.is_hover:
            self.is_hover = hover
            if self.is_hover and not self.is_press:
                self.game.play_sound(_HOVER_SOUND)

    def _check_state(self) -> None:
        if self.is_press:
            shown = self.sprite_press
        elif self.is_hover:
            shown = self.sprite_hover
        else:
            shown = self.sprite_normal
        for sprite in self._sprites():
            sprite.is_active = sprite is shown


def add_hud_button_child(parent: Any, render_pos: Sequence[float], file_path1: str, file_path2: str,
                         file_path3: str, scale: float = 1.0, anchor: Anchor = Anchor.CENTER) -> HUDButton:
    """Create a button from normal, hover and press images and attach it to ``parent``."""
    button = HUDButton()
    button.init()
    button.set_render_position(render_pos)
    button.sprite_normal = add_sprite_child(button, file_path1, scale, anchor)
    button.sprite_hover = add_sprite_child(button, file_path2, scale, anchor)
    button.sprite_press = add_sprite_child(button, file_path3, scale, anchor)
    button.sprite_hover.is_active = False
    button.sprite_press.is_active = False
    if parent is not None:
        parent.add_child(button)
    return button