import pygame
import pytest

from ghostescape.actor import Actor
from ghostescape.asset_store import AssetStore
from ghostescape.game import Game
from ghostescape.object_world import ObjectWorld
from ghostescape.scene import Scene
from ghostescape.stats import add_stats_child
from ghostescape.weapon import Weapon


@pytest.fixture
def scene(monkeypatch):
    game = Game.instance()
    monkeypatch.setattr(game, "asset_store", AssetStore(image_loader=lambda path: pygame.Surface((64, 32))))
    scene = Scene()
    monkeypatch.setattr(game, "current_scene", scene)
    monkeypatch.setattr(game, "screen_size", pygame.Vector2(1280, 720))
    monkeypatch.setattr(game, "screen", None)
    return scene


def _armed(mana_cost=40.0, max_mana=100.0):
    actor = Actor()
    actor.stats = add_stats_child(actor, max_mana=max_mana)
    weapon = Weapon()
    weapon.parent = actor
    weapon.cool_down = 2.0
    weapon.mana_cost = mana_cost
    return actor, weapon


def test_cannot_attack_during_cool_down(scene):
    _, weapon = _armed()
    assert not weapon.can_attack()
    weapon.update(1.0)
    assert not weapon.can_attack()
    weapon.update(1.0)
    assert weapon.can_attack()


def test_cannot_attack_without_mana(scene):
    _, weapon = _armed(mana_cost=150.0)
    weapon.update(5.0)
    assert not weapon.can_attack()


def test_attack_spends_mana_and_queues_spell(scene):
    actor, weapon = _armed()
    weapon.update(3.0)
    spell = ObjectWorld()
    spell.init()
    mana_before = actor.stats.mana
    weapon.attack((200, 150), spell)
    assert actor.stats.mana + weapon.mana_cost == mana_before
    assert weapon.cool_down_timer == 0
    assert spell.position == pygame.Vector2(200, 150)
    assert spell not in scene.children_world
    scene.update(0.0)
    assert spell in scene.children_world


def test_attack_without_spell_changes_nothing(scene):
    actor, weapon = _armed()
    weapon.update(3.0)
    weapon.attack((0, 0), None)
    assert actor.stats.mana == actor.stats.max_mana
    assert weapon.cool_down_timer == 3.0