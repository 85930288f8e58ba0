"""Scenes: roots of the object tree with a camera and separate layers."""

from __future__ import annotations

from typing import Any, List, Sequence

import pygame

from .defs import ObjectType
from .objects import Object

_CAMERA_MARGIN = 30


def _clamp(value: pygame.Vector2, low: pygame.Vector2, high: pygame.Vector2) -> pygame.Vector2:
    return pygame.Vector2(
        min(max(value.x, low.x), high.x),
        min(max(value.y, low.y), high.y),
    )


class Scene(Object):
    """A scene holding plain, world and screen children and a camera."""

    def __init__(self) -> None:
        super().__init__()
        self.camera_position = pygame.Vector2(0, 0)
        self.world_size = pygame.Vector2(0, 0)
        self.children_world: List[Any] = []
        self.children_screen: List[Any] = []
        self.is_pause = False

    def handle_events(self, event: Any) -> bool:
        """Offer ``event`` to screen children, then (unless paused) the rest."""
        if self._handle_list(self.children_screen, event):
            return True
        if self.is_pause:
            return False
        super().handle_events(event)
        return self._handle_list(self.children_world, event)

    def update(self, dt: float) -> None:
        """Advance the scene; a paused scene only advances screen children."""
        if not self.is_pause:
            super().update(dt)
            self._update_list(self.children_world, dt)
        self._update_list(self.children_screen, dt)

    def render(self) -> None:
        """Draw plain, then world, then screen children."""
        super().render()
        self._render_list(self.children_world)
        self._render_list(self.children_screen)

    def clean(self) -> None:
        super().clean()
        self._clean_list(self.children_world)
        self._clean_list(self.children_screen)

    def _layer_for(self, child: Object) -> List[Any]:
        if child.object_type in (ObjectType.OBJECT_WORLD, ObjectType.ENEMY):
            return self.children_world
        if child.object_type == ObjectType.OBJECT_SCREEN:
            return self.children_screen
        return self.children

    def add_child(self, child: Object) -> None:
        """Put ``child`` in the layer that matches its type."""
        self._layer_for(child).append(child)

    def remove_child(self, child: Object) -> None:
        """Take ``child`` out of its layer without cleaning it."""
        layer = self._layer_for(child)
        layer[:] = [c for c in layer if c is not child]

    def save_data(self, file_path: str) -> None:
        """Persist scene data; scenes without data do nothing."""

    def load_data(self, file_path: str) -> None:
        """Restore scene data; scenes without data do nothing."""

    def world_to_screen(self, world_position: Sequence[float]) -> pygame.Vector2:
        return pygame.Vector2(world_position) - self.camera_position

    def screen_to_world(self, screen_position: Sequence[float]) -> pygame.Vector2:
        return pygame.Vector2(screen_position) + self.camera_position

    def pause(self) -> None:
        """Freeze the world and pause all audio."""
        self.is_pause = True
        self.game.pause_sound()
        self.game.pause_music()

    def resume(self) -> None:
        """Unfreeze the world and resume all audio."""
        self.is_pause = False
        self.game.resume_sound()
        self.game.resume_music()

    def set_camera_position(self, camera_position: Sequence[float]) -> None:
        """Move the camera, keeping it within a small margin of the world."""
        margin = pygame.Vector2(_CAMERA_MARGIN, _CAMERA_MARGIN)
        upper = self.world_size - self.game.screen_size + margin
        self.camera_position = _clamp(pygame.Vector2(camera_position), -margin, upper)