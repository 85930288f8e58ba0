"""The thunder strike weapon cast with the left mouse button."""

from __future__ import annotations

from typing import Any, Optional

import pygame

from .defs import Anchor
from .hud_skill import HUDSkill, add_hud_skill_child
from .spell import add_spell_child
from .weapon import Weapon

_ICON = "assets/UI/Electric-Icon.png"
_SOUND = "assets/sound/big-thunder.mp3"
_SPELL = "assets/effect/Thunderstrike w blur.png"
_SPELL_DAMAGE = 40.0
_SPELL_SCALE = 3.0


class WeaponThunder(Weapon):
    """Casts a thunder strike at the mouse and shows its cool-down on the HUD."""

    def __init__(self) -> None:
        super().__init__()
        self.hud_skill: Optional[HUDSkill] = None

    def init(self) -> None:
        super().init()
        scene = self.game.current_scene
        pos = pygame.Vector2(self.game.screen_size.x - 300, 30)
        self.hud_skill = add_hud_skill_child(scene, _ICON, pos, 0.14, Anchor.CENTER)

    def update(self, dt: float) -> None:
        super().update(dt)
        if self.hud_skill is not None:
            self.hud_skill.set_percentage(self.cool_down_timer / self.cool_down)

    def handle_events(self, event: Any) -> bool:
        """Cast on a left click when ready; True when a spell was cast."""
        if event.type != pygame.MOUSEBUTTONDOWN or event.button != pygame.BUTTON_LEFT:
            return False
        if not self.can_attack():
            return False
        self.game.play_sound(_SOUND)
        pos = self.game.mouse_position + self.game.current_scene.camera_position
        spell = add_spell_child(None, _SPELL, pos, _SPELL_DAMAGE, _SPELL_SCALE, Anchor.CENTER)
        self.attack(pos, spell)
        return True


def add_weapon_thunder_child(parent: Any, cool_down: float, mana_cost: float) -> WeaponThunder:
    """Create a thunder weapon held by ``parent``."""
    weapon = WeaponThunder()
    weapon.init()
    weapon.parent = parent
    weapon.cool_down = cool_down
    weapon.mana_cost = mana_cost
    if parent is not None:
        parent.add_child(weapon)
    return weapon