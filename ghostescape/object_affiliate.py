"""Elements attached to a screen object, placed relative to it by an anchor."""

from __future__ import annotations

from typing import Any, Sequence

import pygame

from .defs import Anchor, anchor_offset
from .objects import Object


class ObjectAffiliate(Object):
    """A child element with a size, an offset from its parent and an anchor."""

    def __init__(self) -> None:
        super().__init__()
        self.parent: Any = None
        self.offset = pygame.Vector2(0, 0)
        self._size = pygame.Vector2(0, 0)
        self.anchor = Anchor.CENTER

    def set_offset_by_anchor(self, anchor: Anchor) -> None:
        """Set the anchor and recompute the offset from the current size."""
        self.anchor = anchor
        offset = anchor_offset(anchor, self._size)
        if offset is not None:
            self.offset = offset

    @property
    def size(self) -> pygame.Vector2:
        return pygame.Vector2(self._size)

    @size.setter
    def size(self, value: Sequence[float]) -> None:
        self.set_size(value)

    def set_size(self, size: Sequence[float]) -> None:
        """Set the size and re-place the element by its anchor."""
        self._size = pygame.Vector2(size)
        self.set_offset_by_anchor(self.anchor)

    def set_scale(self, scale: float) -> None:
        """Multiply the current size by ``scale``; each call compounds."""
        self._size *= scale
        self.set_offset_by_anchor(self.anchor)