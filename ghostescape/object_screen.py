"""Objects that live in screen coordinates."""

from __future__ import annotations

from typing import Sequence

import pygame

from .defs import ObjectType
from .objects import Object


class ObjectScreen(Object):
    """A node drawn at a fixed position on the screen."""

    def __init__(self) -> None:
        super().__init__()
        self.render_position = pygame.Vector2(0, 0)

    def init(self) -> None:
        self.object_type = ObjectType.OBJECT_SCREEN

    def set_render_position(self, render_position: Sequence[float]) -> None:
        """Move the object to ``render_position`` on the screen."""
        self.render_position = pygame.Vector2(render_position)

    @property
    def position(self) -> pygame.Vector2:
        """World position; screen objects have none, so it is the origin."""
        return pygame.Vector2(0, 0)