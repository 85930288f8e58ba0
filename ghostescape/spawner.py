"""Spawns waves of enemies around the camera."""

from __future__ import annotations

from typing import Any

from .effect import add_effect_child
from .enemy import add_enemy_child
from .objects import Object

_SPAWN_SOUND = "assets/sound/silly-ghost-sound-242342.mp3"
_SPAWN_EFFECT = "assets/effect/184_3.png"


class Spawner(Object):
    """Every ``interval`` seconds spawns ``num`` enemies in view, each behind an effect."""

    def __init__(self) -> None:
        super().__init__()
        self.num = 20
        self.timer = 0.0
        self.interval = 3.0
        self.target: Any = None

    def update(self, dt: float) -> None:
        if self.target is None or not self.target.is_active:
            return
        self.timer += dt
        if self.timer < self.interval:
            return
        self.timer = 0.0
        self.game.play_sound(_SPAWN_SOUND)
        scene = self.game.current_scene
        for _ in range(self.num):
            camera = scene.camera_position
            pos = self.game.random_vec2(camera, camera + self.game.screen_size)
            enemy = add_enemy_child(None, pos, self.target)
            add_effect_child(scene, _SPAWN_EFFECT, pos, 1.0, enemy)