"""Text attached to a screen object."""

from __future__ import annotations

from typing import Any, Optional

import pygame

from .defs import Anchor
from .object_affiliate import ObjectAffiliate


class TextLabel(ObjectAffiliate):
    """A line or block of text whose size follows its content."""

    def __init__(self) -> None:
        super().__init__()
        self.font_path = ""
        self.font_size = 16
        self._text = ""
        self._surface: Optional[pygame.Surface] = None

    @property
    def text(self) -> str:
        return self._text

    def render(self) -> None:
        super().render()
        screen = self.game.screen
        if screen is None or self._surface is None or self.parent is None:
            return
        pos = self.parent.render_position + self.offset
        screen.blit(self._surface, (round(pos.x), round(pos.y)))

    def clean(self) -> None:
        super().clean()
        self._surface = None

    def set_font(self, font_path: str, font_size: int) -> None:
        """Choose the font file and size together."""
        self.font_path = font_path
        self.font_size = font_size
        self._update_size()

    def set_font_path(self, font_path: str) -> None:
        """Change the font file, keeping the size."""
        self.font_path = font_path
        self._update_size()

    def set_font_size(self, font_size: int) -> None:
        """Change the font size, keeping the file."""
        self.font_size = font_size
        self._update_size()

    def set_text(self, text: str) -> None:
        """Replace the text and resize to fit it."""
        self._text = text
        self._update_size()

    def _update_size(self) -> None:
        if not self.font_path:
            self._surface = None
            return
        self._surface = self.game.create_text(self._text, self.font_path, self.font_size)
        self.set_size(self._surface.get_size())


def add_text_label_child(parent: Any, text: str, font_path: str, font_size: int,
                         anchor: Anchor = Anchor.CENTER) -> TextLabel:
    """Create a text label and attach it to ``parent``."""
    label = TextLabel()
    label.init()
    label.set_font(font_path, font_size)
    label.set_text(text)
    label.anchor = anchor
    label._update_size()
    if parent is not None:
        parent.add_child(label)
        label.parent = parent
    return label