"""Three parallax layers of twinkling background stars."""

from __future__ import annotations

import math
from typing import Any, List

import pygame

from .defs import Color
from .game import Game
from .objects import Object


def _pulse(t: float, fr: float, fg: float, fb: float) -> Color:
    return Color(
        0.5 + 0.5 * math.sin(t * fr),
        0.5 + 0.5 * math.sin(t * fg),
        0.5 + 0.5 * math.sin(t * fb),
        1.0,
    )


class BgStar(Object):
    """Star layers that scroll slower than the camera and cycle colour."""

    def __init__(self) -> None:
        super().__init__()
        self.star_far: List[pygame.Vector2] = []
        self.star_mid: List[pygame.Vector2] = []
        self.star_near: List[pygame.Vector2] = []
        self.scale_far = 0.2
        self.scale_mid = 0.5
        self.scale_near = 0.7
        self.color_far = Color(0.0, 0.0, 0.0, 1.0)
        self.color_mid = Color(0.0, 0.0, 0.0, 1.0)
        self.color_near = Color(0.0, 0.0, 0.0, 1.0)
        self.timer = 0.0
        self.num = 2000

    def update(self, dt: float) -> None:
        self.timer += dt
        self.color_far = _pulse(self.timer, 0.9, 0.8, 0.7)
        self.color_mid = _pulse(self.timer, 0.8, 0.7, 0.6)
        self.color_near = _pulse(self.timer, 0.7, 0.6, 0.5)

    def render(self) -> None:
        camera = self.game.current_scene.camera_position
        self.game.draw_points(self.star_far, -camera * self.scale_far, self.color_far)
        self.game.draw_points(self.star_mid, -camera * self.scale_mid, self.color_mid)
        self.game.draw_points(self.star_near, -camera * self.scale_near, self.color_near)


def add_bg_star_child(parent: Any, num: int, scale_far: float, scale_mid: float, scale_near: float) -> BgStar:
    """Scatter ``num`` stars per layer over the area each layer can scroll to."""
    game = Game.instance()
    bg_star = BgStar()
    bg_star.init()
    bg_star.num = num
    bg_star.scale_far = scale_far
    bg_star.scale_mid = scale_mid
    bg_star.scale_near = scale_near
    extra = game.current_scene.world_size - game.screen_size
    origin = pygame.Vector2(0, 0)
    for _ in range(num):
        bg_star.star_far.append(game.random_vec2(origin, game.screen_size + extra * scale_far))
        bg_star.star_mid.append(game.random_vec2(origin, game.screen_size + extra * scale_mid))
        bg_star.star_near.append(game.random_vec2(origin, game.screen_size + extra * scale_near))
    if parent is not None:
        parent.add_child(bg_star)
    return bg_star