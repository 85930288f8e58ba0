"""Objects that live in world coordinates and follow the camera."""

from __future__ import annotations

from typing import Any, Sequence

import pygame

from .defs import ObjectType
from .object_screen import ObjectScreen


class ObjectWorld(ObjectScreen):
    """A node with a world position; its screen position follows the camera."""

    def __init__(self) -> None:
        super().__init__()
        self._position = pygame.Vector2(0, 0)
        self.collider: Any = None

    def init(self) -> None:
        self.object_type = ObjectType.OBJECT_WORLD

    def update(self, dt: float) -> None:
        super().update(dt)
        self.render_position = self.game.current_scene.world_to_screen(self._position)

    def take_damage(self, damage: float) -> None:
        """Receive damage; plain world objects ignore it."""

    @property
    def position(self) -> pygame.Vector2:
        return pygame.Vector2(self._position)

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self.set_position(value)

    def set_position(self, position: Sequence[float]) -> None:
        """Move to ``position`` in the world and refresh the screen position."""
        self._position = pygame.Vector2(position)
        self.render_position = self.game.current_scene.world_to_screen(self._position)

    def set_render_position(self, render_position: Sequence[float]) -> None:
        """Move to ``render_position`` on screen and refresh the world position."""
        self.render_position = pygame.Vector2(render_position)
        self._position = self.game.current_scene.screen_to_world(self.render_position)