"""Spells: animated areas that damage enemies they overlap."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from .collider import ColliderType, add_collider_child
from .defs import Anchor, ObjectType
from .object_world import ObjectWorld
from .sprite_anim import SpriteAnim, add_sprite_anim_child


class Spell(ObjectWorld):
    """Deals its damage to every overlapping enemy each frame until its animation ends."""

    def __init__(self) -> None:
        super().__init__()
        self.sprite: Optional[SpriteAnim] = None
        self.damage = 60.0

    def update(self, dt: float) -> None:
        super().update(dt)
        if self.sprite is not None and self.sprite.is_finish:
            self.need_remove = True
        self._attack()

    def _attack(self) -> None:
        if self.collider is None:
            return
        for obj in list(self.game.current_scene.children_world):
            if obj.object_type != ObjectType.ENEMY:
                continue
            if obj.collider is not None and self.collider.is_colliding(obj.collider):
                obj.take_damage(self.damage)


def add_spell_child(parent: Any, file_path: str, pos: Sequence[float], damage: float,
                    scale: float = 1.0, anchor: Anchor = Anchor.CENTER) -> Spell:
    """Create a spell at ``pos`` whose collider matches its animation frame."""
    spell = Spell()
    spell.init()
    spell.damage = damage
    spell.sprite = add_sprite_anim_child(spell, file_path, scale, anchor)
    spell.collider = add_collider_child(spell, spell.sprite.size, ColliderType.CIRCLE, anchor)
    spell.sprite.is_loop = False
    spell.set_position(pos)
    if parent is not None:
        parent.add_child(spell)
    return spell