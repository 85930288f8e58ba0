"""World objects that move, have stats and take damage."""

from __future__ import annotations

from typing import Any

import pygame

from .object_world import ObjectWorld


def _clamp(value: pygame.Vector2, low: pygame.Vector2, high: pygame.Vector2) -> pygame.Vector2:
    return pygame.Vector2(
        min(max(value.x, low.x), high.x),
        min(max(value.y, low.y), high.y),
    )


class Actor(ObjectWorld):
    """A moving world object with optional stats and health bar."""

    def __init__(self) -> None:
        super().__init__()
        self.stats: Any = None
        self.health_bar: Any = None
        self.velocity = pygame.Vector2(0, 0)
        self.max_speed = 100.0

    def update(self, dt: float) -> None:
        super().update(dt)
        self._update_health_bar()

    def take_damage(self, damage: float) -> None:
        """Pass ``damage`` on to the stats, if there are any."""
        if self.stats is None:
            return
        self.stats.take_damage(damage)

    def move(self, dt: float) -> None:
        """Move by the velocity, keeping the collider inside the world."""
        self.set_position(self._position + self.velocity * dt)
        margin_top_left = pygame.Vector2(0, 0)
        margin_bottom_right = pygame.Vector2(0, 0)
        if self.collider is not None:
            margin_top_left = pygame.Vector2(self.collider.offset)
            margin_bottom_right = self.collider.offset + self.collider.size
        world_size = self.game.current_scene.world_size
        self._position = _clamp(self._position, -margin_top_left, world_size - margin_bottom_right)

    @property
    def is_alive(self) -> bool:
        """Alive unless the stats say otherwise."""
        if self.stats is None:
            return True
        return self.stats.is_alive

    def _update_health_bar(self) -> None:
        if self.stats is None or self.health_bar is None:
            return
        self.health_bar.percentage = self.stats.health / self.stats.max_health