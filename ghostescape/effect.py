"""One-shot animations that can hand over to another object when done."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from .object_world import ObjectWorld
from .sprite_anim import SpriteAnim, add_sprite_anim_child


class Effect(ObjectWorld):
    """Plays an animation once, then removes itself and releases ``next_object``."""

    def __init__(self) -> None:
        super().__init__()
        self.sprite: Optional[SpriteAnim] = None
        self.next_object: Any = None

    def update(self, dt: float) -> None:
        super().update(dt)
        self._check_finish()

    def clean(self) -> None:
        super().clean()
        if self.next_object is not None:
            self.next_object.clean()
            self.next_object = None

    def _check_finish(self) -> None:
        if self.sprite is None or not self.sprite.is_finish:
            return
        self.need_remove = True
        if self.next_object is not None:
            self.game.current_scene.safe_add_child(self.next_object)
            self.next_object = None


def add_effect_child(parent: Any, file_path: str, pos: Sequence[float], scale: float = 1.0,
                     next_object: Any = None) -> Effect:
    """Create an effect at ``pos`` playing the strip in ``file_path``."""
    effect = Effect()
    effect.init()
    effect.sprite = add_sprite_anim_child(effect, file_path, scale)
    effect.sprite.is_loop = False
    effect.set_position(pos)
    effect.next_object = next_object
    if parent is not None:
        parent.add_child(effect)
    return effect