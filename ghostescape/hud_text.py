"""Text boxes with a stretched background image."""

from __future__ import annotations

from typing import Any, Optional, Sequence

import pygame

from .defs import Anchor
from .object_screen import ObjectScreen
from .sprite import Sprite, add_sprite_child, load_texture
from .text_label import TextLabel, add_text_label_child

DEFAULT_FONT = "assets/font/VonwaonBitmap-16px.ttf"
DEFAULT_BACKGROUND = "assets/UI/Textfield_01.png"


class HUDText(ObjectScreen):
    """A text label drawn over a background sprite of a chosen size."""

    def __init__(self) -> None:
        super().__init__()
        self.text_label: Optional[TextLabel] = None
        self.sprite_bg: Optional[Sprite] = None
        self._size = pygame.Vector2(0, 0)

    @property
    def size(self) -> pygame.Vector2:
        """Size of the background."""
        return pygame.Vector2(self._size)

    @property
    def text(self) -> str:
        return self.text_label.text

    def set_bg_size_by_text(self, margin: float = 50.0) -> None:
        """Fit the background to the text plus ``margin`` on each axis."""
        self.set_size(self.text_label.size + pygame.Vector2(margin, margin))

    def set_size(self, size: Sequence[float]) -> None:
        """Resize the background."""
        self._size = pygame.Vector2(size)
        self.sprite_bg.set_size(self._size)

    def set_text(self, text: str) -> None:
        self.text_label.set_text(text)

    def set_background(self, file_path: str) -> None:
        """Replace the background image, creating the sprite if needed."""
        if self.sprite_bg is not None:
            self.sprite_bg.set_texture(load_texture(file_path))
        else:
            self.sprite_bg = add_sprite_child(self, file_path, 1, Anchor.CENTER)


def add_hud_text_child(parent: Any, text: str, render_pos: Sequence[float], size: Sequence[float],
                       font_path: str = DEFAULT_FONT, font_size: int = 32,
                       bg_path: str = DEFAULT_BACKGROUND, anchor: Anchor = Anchor.CENTER) -> HUDText:
    """Create a text box at ``render_pos`` and attach it to ``parent``."""
    hud_text = HUDText()
    hud_text.init()
    hud_text.set_render_position(render_pos)
    hud_text.sprite_bg = add_sprite_child(hud_text, bg_path, 1, anchor)
    hud_text.set_size(size)
    hud_text.text_label = add_text_label_child(hud_text, text, font_path, font_size, anchor)
    if parent is not None:
        parent.add_child(hud_text)
    return hud_text