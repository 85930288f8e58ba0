"""Base weapon: cool-down, mana cost and casting a spell."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from .objects import Object


class Weapon(Object):
    """A weapon held by an actor; concrete weapons decide when to fire."""

    def __init__(self) -> None:
        super().__init__()
        self.parent: Any = None
        self.cool_down = 1.0
        self.mana_cost = 0.0
        self.cool_down_timer = 0.0

    def update(self, dt: float) -> None:
        super().update(dt)
        self.cool_down_timer += dt

    def attack(self, position: Sequence[float], spell: Optional[Any]) -> None:
        """Pay the mana, restart the cool-down and put ``spell`` into the scene at ``position``."""
        if spell is None:
            return
        self.parent.stats.use_mana(self.mana_cost)
        self.cool_down_timer = 0.0
        spell.set_position(position)
        self.game.current_scene.safe_add_child(spell)

    def can_attack(self) -> bool:
        """True when cooled down and the holder has enough mana."""
        if self.cool_down_timer < self.cool_down:
            return False
        return self.parent.stats.can_use_mana(self.mana_cost)