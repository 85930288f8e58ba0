"""Shared enumerations, colours and anchor geometry."""

from __future__ import annotations

from enum import Enum, auto
from typing import NamedTuple, Optional, Sequence

import pygame


class ObjectType(Enum):
    """Kind of object, used by scenes to route children."""

    NONE = auto()
    OBJECT_SCREEN = auto()
    OBJECT_WORLD = auto()
    ENEMY = auto()


class Anchor(Enum):
    """Point of an attached element that sits on its parent's position."""

    NONE = auto()
    TOP_LEFT = auto()
    TOP_CENTER = auto()
    TOP_RIGHT = auto()
    CENTER_LEFT = auto()
    CENTER = auto()
    CENTER_RIGHT = auto()
    BOTTOM_LEFT = auto()
    BOTTOM_CENTER = auto()
    BOTTOM_RIGHT = auto()


class Color(NamedTuple):
    """An RGBA colour with components between 0 and 1."""

    r: float
    g: float
    b: float
    a: float = 1.0


_ANCHOR_FACTORS = {
    Anchor.TOP_LEFT: (0.0, 0.0),
    Anchor.TOP_CENTER: (-0.5, 0.0),
    Anchor.TOP_RIGHT: (-1.0, 0.0),
    Anchor.CENTER_LEFT: (0.0, -0.5),
    Anchor.CENTER: (-0.5, -0.5),
    Anchor.CENTER_RIGHT: (-1.0, -0.5),
    Anchor.BOTTOM_LEFT: (0.0, -1.0),
    Anchor.BOTTOM_CENTER: (-0.5, -1.0),
    Anchor.BOTTOM_RIGHT: (-1.0, -1.0),
}


def anchor_offset(anchor: Anchor, size: Sequence[float]) -> Optional[pygame.Vector2]:
    """Offset that places an element of ``size`` at ``anchor``.

    Returns None for ``Anchor.NONE``, meaning the offset is left as it is.
    """
    factors = _ANCHOR_FACTORS.get(anchor)
    if factors is None:
        return None
    width, height = size
    fx, fy = factors
    return pygame.Vector2(width * fx, height * fy)