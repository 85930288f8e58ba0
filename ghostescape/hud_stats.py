"""Health and mana bars for the player."""

from __future__ import annotations

from typing import Any, Optional, Sequence

import pygame

from .defs import Anchor
from .object_screen import ObjectScreen
from .sprite import Sprite, add_sprite_child


class HUDStats(ObjectScreen):
    """Health and mana bars that follow a target actor's stats."""

    def __init__(self) -> None:
        super().__init__()
        self.target: Any = None
        self.health_bar: Optional[Sprite] = None
        self.health_bar_bg: Optional[Sprite] = None
        self.health_icon: Optional[Sprite] = None
        self.mana_bar: Optional[Sprite] = None
        self.mana_bar_bg: Optional[Sprite] = None
        self.mana_icon: Optional[Sprite] = None
        self.health_percentage = 1.0
        self.mana_percentage = 1.0

    def _bar(self, file_path: str, scale: float, shift: float) -> Sprite:
        sprite = add_sprite_child(self, file_path, scale, Anchor.CENTER_LEFT)
        sprite.offset = sprite.offset + pygame.Vector2(shift, 0)
        return sprite

    def init(self) -> None:
        super().init()
        self.health_bar_bg = self._bar("assets/UI/bar_bg.png", 3.0, 30)
        self.health_bar = self._bar("assets/UI/bar_red.png", 3.0, 30)
        self.health_icon = self._bar("assets/UI/Red Potion.png", 0.5, 0)
        self.mana_bar_bg = self._bar("assets/UI/bar_bg.png", 3.0, 300)
        self.mana_bar = self._bar("assets/UI/bar_blue.png", 3.0, 300)
        self.mana_icon = self._bar("assets/UI/Blue Potion.png", 0.5, 270)

    def update(self, dt: float) -> None:
        super().update(dt)
        self._update_health_bar()
        self._update_mana_bar()

    def _target_stats(self) -> Any:
        if self.target is None:
            return None
        return self.target.stats

    def _update_health_bar(self) -> None:
        stats = self._target_stats()
        if stats is None or self.health_bar is None:
            return
        self.health_bar.percentage = pygame.Vector2(stats.health / stats.max_health, 1.0)

    def _update_mana_bar(self) -> None:
        stats = self._target_stats()
        if stats is None or self.mana_bar is None:
            return
        self.mana_bar.percentage = pygame.Vector2(stats.mana / stats.max_mana, 1.0)


def add_hud_stats_child(parent: Any, target: Any, render_position: Sequence[float]) -> HUDStats:
    """Create stat bars for ``target`` and attach them to ``parent``."""
    hud_stats = HUDStats()
    hud_stats.init()
    hud_stats.set_render_position(render_position)
    hud_stats.target = target
    if parent is not None:
        parent.add_child(hud_stats)
    return hud_stats