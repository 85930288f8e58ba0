"""Sprites animated from a horizontal strip of square frames."""

from __future__ import annotations

from typing import Any

import pygame

from .defs import Anchor
from .sprite import Sprite, Texture, load_texture


class SpriteAnim(Sprite):
    """A sprite that steps through square frames laid out left to right."""

    def __init__(self) -> None:
        super().__init__()
        self.current_frame = 0
        self.total_frames = 0
        self.fps = 10
        self.frame_timer = 0.0
        self.is_loop = True

    def update(self, dt: float) -> None:
        if self.is_finish:
            return
        self.frame_timer += dt
        if self.frame_timer >= 1.0 / self.fps:
            self.current_frame += 1
            if self.current_frame >= self.total_frames:
                self.current_frame = 0
                if not self.is_loop:
                    self.is_finish = True
            self.frame_timer = 0.0
        self._texture.src_rect.x = self._texture.src_rect.w * self.current_frame

    def set_texture(self, texture: Texture) -> None:
        """Use ``texture`` as a strip; each frame is as wide as the strip is tall."""
        strip = texture.copy()
        height = strip.src_rect.h
        if height <= 0:
            raise ValueError("animation texture has no height")
        self.total_frames = int(strip.src_rect.w / height)
        strip.src_rect.w = height
        self._texture = strip
        self._size = pygame.Vector2(strip.src_rect.w, strip.src_rect.h)


def add_sprite_anim_child(parent: Any, file_path: str, scale: float = 1.0,
                          anchor: Anchor = Anchor.CENTER) -> SpriteAnim:
    """Create an animation from an image strip and attach it to ``parent``."""
    sprite_anim = SpriteAnim()
    sprite_anim.init()
    sprite_anim.anchor = anchor
    sprite_anim.set_texture(load_texture(file_path))
    sprite_anim.set_scale(scale)
    sprite_anim.parent = parent
    if parent is not None:
        parent.add_child(sprite_anim)
    return sprite_anim