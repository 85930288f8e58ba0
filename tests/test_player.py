import pygame
import pytest

from ghostescape.asset_store import AssetStore
from ghostescape.effect import Effect
from ghostescape.game import Game
from ghostescape.player import Player
from ghostescape.scene import Scene
from ghostescape.weapon_thunder import WeaponThunder


class _Sound:
    def play(self, *args, **kwargs):
        return None

    def stop(self):
        return None


@pytest.fixture
def scene():
    game = Game.instance()
    game.asset_store = AssetStore(
        image_loader=lambda path: pygame.Surface((64, 32)),
        sound_loader=lambda path: _Sound(),
        music_loader=lambda path: path,
    )
    game.screen_size = pygame.Vector2(1280, 720)
    new_scene = Scene()
    new_scene.world_size = game.screen_size * 3
    game.change_scene(new_scene)
    return new_scene


@pytest.fixture
def player(scene):
    hero = Player()
    hero.init()
    hero.read_keys = lambda: {}
    hero.set_position(scene.world_size / 2.0)
    scene.add_child(hero)
    return hero


def test_init_sets_up_parts(player, scene):
    assert player.max_speed == 500.0
    assert player.sprite_idle.is_active is True
    assert player.sprite_move.is_active is False
    assert player.collider.size == player.sprite_idle.size / 2.0
    assert player.effect in scene.children_world
    assert player.effect.is_active is False
    assert any(isinstance(c, WeaponThunder) for c in player.children)


def test_velocity_decays_without_input(player):
    player.velocity = pygame.Vector2(100, 0)
    player.update(0.01)
    assert 0 < player.velocity.x < 100


def test_keys_set_velocity(player):
    player.read_keys = lambda: {pygame.K_d: True, pygame.K_w: True}
    player.update(0.01)
    assert player.velocity.x == pytest.approx(player.max_speed)
    assert player.velocity.y == pytest.approx(-player.max_speed)


def test_moving_switches_sprites_and_flip(player):
    player.read_keys = lambda: {pygame.K_a: True}
    player.update(0.01)
    assert player.is_moving is True
    assert player.sprite_move.is_active is True
    assert player.sprite_idle.is_active is False
    assert player.sprite_idle.flip is True

    player.read_keys = lambda: {}
    player.velocity = pygame.Vector2(0, 0)
    player.update(0.01)
    assert player.is_moving is False
    assert player.sprite_idle.is_active is True
    assert player.sprite_move.is_active is False
    assert player.sprite_idle.flip is False


def test_camera_follows_player(player, scene):
    player.update(0.01)
    game = Game.instance()
    assert scene.camera_position == player.position - game.screen_size / 2.0


def test_take_damage_then_invincible(player):
    player.take_damage(30)
    expected = player.stats.max_health - 30
    assert player.stats.health == pytest.approx(expected)
    assert player.stats.is_invincible is True
    player.take_damage(30)
    assert player.stats.health == pytest.approx(expected)


def test_death_shows_effect_and_deactivates(player):
    player.stats.take_damage(1000)
    player.update(0.01)
    assert player.is_active is False
    assert player.effect.is_active is True
    assert player.effect.position == player.position


def test_key_event_not_consumed(player):
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)
    assert player.handle_events(event) is False


def test_click_during_cool_down_is_ignored(player):
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=pygame.BUTTON_LEFT, pos=(0, 0))
    assert player.handle_events(event) is False
    assert player.stats.mana == pytest.approx(player.stats.max_mana)


def test_click_when_ready_casts_spell(player):
    game = Game.instance()
    game.mouse_position = pygame.Vector2(100, 100)
    player.weapon_thunder.cool_down_timer = player.weapon_thunder.cool_down
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=pygame.BUTTON_LEFT, pos=(100, 100))
    assert player.handle_events(event) is True
    assert player.stats.mana < player.stats.max_mana
    assert player.weapon_thunder.cool_down_timer == 0.0


def test_death_effect_is_an_effect(player):
    assert isinstance(player.effect, Effect)
    assert player.effect.sprite.is_loop is False