"""Animated mouse pointer drawn in place of the system cursor."""

from __future__ import annotations

from typing import Any, Optional

from .defs import Anchor
from .object_screen import ObjectScreen
from .sprite import Sprite, add_sprite_child

_FIRST_PHASE = 0.3
_SECOND_PHASE = 0.6


class UIMouse(ObjectScreen):
    """A pointer that follows the mouse and alternates between two images."""

    def __init__(self) -> None:
        super().__init__()
        self.sprite1: Optional[Sprite] = None
        self.sprite2: Optional[Sprite] = None
        self.timer = 0.0

    def update(self, dt: float) -> None:
        self.timer += dt
        if self.timer < _FIRST_PHASE:
            self.sprite1.is_active = True
            self.sprite2.is_active = False
        elif self.timer < _SECOND_PHASE:
            self.sprite1.is_active = False
            self.sprite2.is_active = True
        else:
            self.timer = 0.0
        self.set_render_position(self.game.mouse_position)


def add_ui_mouse_child(parent: Any, file_path1: str, file_path2: str, scale: float = 1.0,
                       anchor: Anchor = Anchor.CENTER) -> UIMouse:
    """Create a pointer from two images and attach it to ``parent``."""
    ui_mouse = UIMouse()
    ui_mouse.init()
    ui_mouse.sprite1 = add_sprite_child(ui_mouse, file_path1, scale, anchor)
    ui_mouse.sprite2 = add_sprite_child(ui_mouse, file_path2, scale, anchor)
    if parent is not None:
        parent.add_child(ui_mouse)
    return ui_mouse