"""Textures and static sprites."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import pygame

from .defs import Anchor
from .game import Game
from .object_affiliate import ObjectAffiliate


@dataclass
class Texture:
    """An image together with the region of it to draw, a rotation and a flip."""

    surface: Optional[pygame.Surface] = None
    src_rect: pygame.Rect = field(default_factory=lambda: pygame.Rect(0, 0, 0, 0))
    angle: float = 0.0
    is_flip: bool = False

    def copy(self) -> "Texture":
        """A copy sharing the image but with its own source rectangle."""
        return Texture(self.surface, pygame.Rect(self.src_rect), self.angle, self.is_flip)


def load_texture(file_path: str) -> Texture:
    """Load the image at ``file_path`` into a texture covering all of it."""
    surface = Game.instance().asset_store.get_image(file_path)
    width, height = surface.get_size()
    return Texture(surface, pygame.Rect(0, 0, width, height))


class Sprite(ObjectAffiliate):
    """A texture drawn on its parent; ``percentage`` crops width and height."""

    def __init__(self) -> None:
        super().__init__()
        self._texture = Texture()
        self.is_finish = False
        self.percentage = pygame.Vector2(1.0, 1.0)

    def render(self) -> None:
        if self._texture.surface is None or self.parent is None or self.is_finish:
            return
        pos = self.parent.render_position + self.offset
        self.game.render_texture(self._texture, pos, self._size, self.percentage)

    @property
    def texture(self) -> Texture:
        return self._texture

    @texture.setter
    def texture(self, value: Texture) -> None:
        self.set_texture(value)

    def set_texture(self, texture: Texture) -> None:
        """Use ``texture`` and take its region's size as the sprite size."""
        self._texture = texture.copy()
        self._size = pygame.Vector2(self._texture.src_rect.w, self._texture.src_rect.h)

    @property
    def flip(self) -> bool:
        return self._texture.is_flip

    @flip.setter
    def flip(self, value: bool) -> None:
        self._texture.is_flip = value

    @property
    def angle(self) -> float:
        return self._texture.angle

    @angle.setter
    def angle(self, value: float) -> None:
        self._texture.angle = value


def add_sprite_child(parent: Any, file_path: str, scale: float = 1.0, anchor: Anchor = Anchor.CENTER) -> Sprite:
    """Create a sprite from an image file and attach it to ``parent``."""
    sprite = Sprite()
    sprite.init()
    sprite.anchor = anchor
    sprite.set_texture(load_texture(file_path))
    sprite.set_scale(scale)
    sprite.parent = parent
    if parent is not None:
        parent.add_child(sprite)
    return sprite