"""Collision shapes attached to world objects."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Optional, Sequence

from .defs import Anchor
from .object_affiliate import ObjectAffiliate


class ColliderType(Enum):
    """Shape of a collider; a circle uses the size's x as its diameter."""

    CIRCLE = auto()
    RECTANGLE = auto()


class Collider(ObjectAffiliate):
    """A collision area placed on its parent."""

    debug = False

    def __init__(self) -> None:
        super().__init__()
        self.collider_type = ColliderType.CIRCLE

    def render(self) -> None:
        """Draw the collision area when debugging is switched on."""
        if not self.debug:
            return
        super().render()
        pos = self.parent.render_position + self.offset
        self.game.render_fill_circle(pos, self._size, 0.3)

    def is_colliding(self, other: Optional["Collider"]) -> bool:
        """True when this collider overlaps ``other``; only circles are tested."""
        if other is None:
            return False
        if self.collider_type == ColliderType.CIRCLE and other.collider_type == ColliderType.CIRCLE:
            point1 = self.parent.position + self.offset + self._size / 2.0
            point2 = other.parent.position + other.offset + other._size / 2.0
            return (point1 - point2).length() < (self._size.x + other._size.x) / 2.0
        return False


def add_collider_child(
    parent: Any,
    size: Sequence[float],
    collider_type: ColliderType = ColliderType.CIRCLE,
    anchor: Anchor = Anchor.CENTER,
) -> Collider:
    """Create a collider of ``size`` and attach it to ``parent``."""
    collider = Collider()
    collider.init()
    collider.anchor = anchor
    collider.parent = parent
    collider.set_size(size)
    collider.collider_type = collider_type
    if parent is not None:
        parent.add_child(collider)
    return collider