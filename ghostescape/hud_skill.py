"""Skill icon that fills up as the skill cools down."""

from __future__ import annotations

from typing import Any, Optional, Sequence

import pygame

from .defs import Anchor
from .object_screen import ObjectScreen
from .sprite import Sprite, add_sprite_child

_DIM = int(0.3 * 255)


class HUDSkill(ObjectScreen):
    """A dimmed icon overdrawn from the bottom up by its ready fraction."""

    def __init__(self) -> None:
        super().__init__()
        self.icon: Optional[Sprite] = None
        self._percentage = 1.0
        self._dim_source: Optional[pygame.Surface] = None
        self._dim_surface: Optional[pygame.Surface] = None

    def _dimmed(self, surface: pygame.Surface) -> pygame.Surface:
        if self._dim_source is not surface:
            dim = surface.copy()
            dim.fill((_DIM, _DIM, _DIM), special_flags=pygame.BLEND_RGB_MULT)
            self._dim_source, self._dim_surface = surface, dim
        return self._dim_surface

    def render(self) -> None:
        """Draw the whole icon dimmed, then the ready part at full brightness."""
        icon = self.icon
        if icon is not None and icon.texture.surface is not None:
            background = icon.texture.copy()
            background.surface = self._dimmed(background.surface)
            self.game.render_texture(background, self.render_position + icon.offset, icon.size)
        super().render()

    @property
    def percentage(self) -> float:
        return self._percentage

    @percentage.setter
    def percentage(self, value: float) -> None:
        self.set_percentage(value)

    def set_percentage(self, percentage: float) -> None:
        """Set the ready fraction, clamped to [0, 1]."""
        percentage = min(max(percentage, 0.0), 1.0)
        self._percentage = percentage
        if self.icon is not None:
            self.icon.percentage = pygame.Vector2(1.0, percentage)


def add_hud_skill_child(parent: Any, file_path: str, pos: Sequence[float], scale: float = 1.0,
                        anchor: Anchor = Anchor.CENTER) -> HUDSkill:
    """Create a skill icon at ``pos`` and attach it to ``parent``."""
    hud_skill = HUDSkill()
    hud_skill.init()
    hud_skill.icon = add_sprite_child(hud_skill, file_path, scale, anchor)
    hud_skill.set_render_position(pos)
    if parent is not None:
        parent.add_child(hud_skill)
    return hud_skill