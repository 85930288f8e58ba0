import pygame
import pytest

from ghostescape.asset_store import AssetStore
from ghostescape.game import Game
from ghostescape.hud_button import add_hud_button_child
from ghostescape.scene import Scene


@pytest.fixture
def game():
    g = Game.instance()
    saved = (g.asset_store, g.current_scene, g.screen_size, g.mouse_position, g.screen)
    g.asset_store = AssetStore(image_loader=lambda path: pygame.Surface((32, 16)))
    g.current_scene = Scene()
    g.screen_size = pygame.Vector2(1280, 720)
    g.mouse_position = pygame.Vector2(0, 0)
    g.screen = None
    yield g
    g.asset_store, g.current_scene, g.screen_size, g.mouse_position, g.screen = saved


def _event(kind, button=pygame.BUTTON_LEFT):
    return pygame.event.Event(kind, button=button)


def _button():
    return add_hud_button_child(None, (100, 100), "n.png", "h.png", "p.png")


def test_initial_sprites(game):
    button = _button()
    assert button.sprite_normal.is_active
    assert not button.sprite_hover.is_active
    assert not button.sprite_press.is_active
    assert button.children == [button.sprite_normal, button.sprite_hover, button.sprite_press]


def test_attached_to_parent(game):
    scene = game.current_scene
    button = add_hud_button_child(scene, (10, 10), "n.png", "h.png", "p.png")
    assert button in scene.children_screen
    assert button.render_position == pygame.Vector2(10, 10)


def test_hover_shows_hover_sprite(game):
    button = _button()
    game.mouse_position = pygame.Vector2(100, 100)
    button.update(0.016)
    assert button.is_hover
    assert button.sprite_hover.is_active
    assert not button.sprite_normal.is_active


def test_no_hover_away_from_button(game):
    button = _button()
    game.mouse_position = pygame.Vector2(500, 500)
    button.update(0.016)
    assert not button.is_hover
    assert button.sprite_normal.is_active


def test_click_triggers_once(game):
    button = _button()
    game.mouse_position = pygame.Vector2(100, 100)
    button.update(0.016)
    assert button.handle_events(_event(pygame.MOUSEBUTTONDOWN)) is True
    assert button.is_press
    button.update(0.016)
    assert button.sprite_press.is_active
    assert button.handle_events(_event(pygame.MOUSEBUTTONUP)) is True
    assert not button.is_press
    assert button.take_trigger() is True
    assert button.take_trigger() is False
    assert not button.is_hover


def test_press_ignored_when_not_hovered(game):
    button = _button()
    assert button.handle_events(_event(pygame.MOUSEBUTTONDOWN)) is False
    assert button.handle_events(_event(pygame.MOUSEBUTTONUP)) is False
    assert button.take_trigger() is False


def test_right_button_ignored(game):
    button = _button()
    game.mouse_position = pygame.Vector2(100, 100)
    button.update(0.016)
    assert button.handle_events(_event(pygame.MOUSEBUTTONDOWN, pygame.BUTTON_RIGHT)) is False
    assert not button.is_press


def test_set_scale_scales_all_sprites(game):
    button = _button()
    before = [s.size for s in (button.sprite_normal, button.sprite_hover, button.sprite_press)]
    button.set_scale(2.0)
    after = [s.size for s in (button.sprite_normal, button.sprite_hover, button.sprite_press)]
    assert after == [size * 2.0 for size in before]