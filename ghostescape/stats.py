"""Health, mana, damage and invincibility of an actor."""

from __future__ import annotations

from typing import Any

from .objects import Object


class Stats(Object):
    """Combat statistics; a hit grants a short spell of invincibility."""

    def __init__(self) -> None:
        super().__init__()
        self.parent: Any = None
        self.health = 100.0
        self.max_health = 100.0
        self.mana = 100.0
        self.max_mana = 100.0
        self.damage = 40.0
        self.mana_regen = 10.0
        self.invincible_time = 1.5
        self.invincible_timer = 0.0
        self.is_alive = True
        self.is_invincible = False

    def update(self, dt: float) -> None:
        super().update(dt)
        self.regen_mana(dt)
        if self.is_invincible:
            self.invincible_timer += dt
            if self.invincible_timer >= self.invincible_time:
                self.is_invincible = False
                self.invincible_timer = 0.0

    def can_use_mana(self, mana_cost: float) -> bool:
        return self.mana >= mana_cost

    def use_mana(self, mana_cost: float) -> None:
        """Spend mana, never going below zero."""
        self.mana = max(0.0, self.mana - mana_cost)

    def regen_mana(self, dt: float) -> None:
        """Regain mana over ``dt`` seconds, up to the maximum."""
        self.mana = min(self.max_mana, self.mana + self.mana_regen * dt)

    def take_damage(self, damage: float) -> None:
        """Lose health unless invincible; dies only when health drops below zero."""
        if self.is_invincible:
            return
        self.health -= damage
        if self.health < 0:
            self.health = 0.0
            self.is_alive = False
        self.is_invincible = True
        self.invincible_timer = 0.0


def add_stats_child(parent: Any, max_health: float = 100.0, max_mana: float = 100.0,
                    damage: float = 40.0, mana_regen: float = 10.0) -> Stats:
    """Create full stats and attach them to ``parent``."""
    stats = Stats()
    stats.parent = parent
    stats.max_health = max_health
    stats.health = max_health
    stats.max_mana = max_mana
    stats.mana = max_mana
    stats.damage = damage
    stats.mana_regen = mana_regen
    if parent is not None:
        parent.add_child(stats)
    return stats