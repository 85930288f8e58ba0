"""Ghost enemies that chase the player."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Optional, Sequence

import pygame

from .actor import Actor
from .affiliate_bar import add_affiliate_bar_child
from .collider import add_collider_child
from .defs import Anchor, ObjectType
from .sprite_anim import SpriteAnim, add_sprite_anim_child
from .stats import add_stats_child

_NORMAL_SHEET = "assets/sprite/ghost-Sheet.png"
_HURT_SHEET = "assets/sprite/ghostHurt-Sheet.png"
_DIE_SHEET = "assets/sprite/ghostDead-Sheet.png"


class EnemyState(Enum):
    """Animation state of an enemy."""

    NORMAL = auto()
    HURT = auto()
    DIE = auto()


class Enemy(Actor):
    """Chases its target, hurts it on contact and scores when killed."""

    def __init__(self) -> None:
        super().__init__()
        self.state = EnemyState.NORMAL
        self.target: Any = None
        self.anim_normal: Optional[SpriteAnim] = None
        self.anim_hurt: Optional[SpriteAnim] = None
        self.anim_die: Optional[SpriteAnim] = None
        self.current_anim: Optional[SpriteAnim] = None
        self.score = 10

    def init(self) -> None:
        super().init()
        self.anim_normal = add_sprite_anim_child(self, _NORMAL_SHEET, 2.0)
        self.anim_hurt = add_sprite_anim_child(self, _HURT_SHEET, 2.0)
        self.anim_die = add_sprite_anim_child(self, _DIE_SHEET, 2.0)
        self.anim_hurt.is_active = False
        self.anim_die.is_active = False
        self.anim_die.is_loop = False

        self.current_anim = self.anim_normal
        self.collider = add_collider_child(self, self.current_anim.size)
        self.stats = add_stats_child(self)
        size = self.anim_normal.size
        self.health_bar = add_affiliate_bar_child(self, pygame.Vector2(size.x - 10, 10), Anchor.BOTTOM_CENTER)
        self.health_bar.offset = self.health_bar.offset + pygame.Vector2(0, size.y / 2.0 - 5.0)

        self.object_type = ObjectType.ENEMY

    def update(self, dt: float) -> None:
        super().update(dt)
        if self.target is not None and self.target.is_active:
            self._aim_target(self.target)
            self.move(dt)
            self._attack()
        self._check_state()
        self._remove()

    def _aim_target(self, target: Any) -> None:
        if target is None:
            return
        direction = target.position - self.position
        if direction.length() == 0:
            self.velocity = pygame.Vector2(0, 0)
            return
        self.velocity = direction.normalize() * self.max_speed

    def _check_state(self) -> None:
        if self.stats.health <= 0:
            new_state = EnemyState.DIE
        elif self.stats.is_invincible:
            new_state = EnemyState.HURT
        else:
            new_state = EnemyState.NORMAL
        if new_state != self.state:
            self._change_state(new_state)

    def _change_state(self, new_state: EnemyState) -> None:
        self.current_anim.is_active = False
        self.current_anim = {
            EnemyState.NORMAL: self.anim_normal,
            EnemyState.HURT: self.anim_hurt,
            EnemyState.DIE: self.anim_die,
        }[new_state]
        self.current_anim.is_active = True
        if new_state == EnemyState.DIE:
            self.game.add_score(self.score)
        self.state = new_state

    def _remove(self) -> None:
        if self.anim_die.is_finish:
            self.need_remove = True

    def _attack(self) -> None:
        target = self.target
        if self.collider is None or target is None or target.collider is None:
            return
        if self.collider.is_colliding(target.collider):
            if self.stats is not None and target.stats is not None:
                target.take_damage(self.stats.damage)


def add_enemy_child(parent: Any, pos: Sequence[float], target: Any) -> Enemy:
    """Create an enemy at ``pos`` chasing ``target``."""
    enemy = Enemy()
    enemy.init()
    enemy.set_position(pos)
    enemy.target = target
    if parent is not None:
        parent.add_child(enemy)
    return enemy