import pygame
import pytest

from ghostescape.asset_store import AssetStore
from ghostescape.bg_star import BgStar, add_bg_star_child
from ghostescape.defs import Color
from ghostescape.game import Game
from ghostescape.scene import Scene


@pytest.fixture
def game(monkeypatch):
    game = Game.instance()
    monkeypatch.setattr(game, "asset_store", AssetStore(image_loader=lambda path: pygame.Surface((64, 32))))
    scene = Scene()
    scene.world_size = pygame.Vector2(3840, 2160)
    monkeypatch.setattr(game, "current_scene", scene)
    monkeypatch.setattr(game, "screen_size", pygame.Vector2(1280, 720))
    monkeypatch.setattr(game, "screen", None)
    return game


def test_layers_are_filled_within_bounds(game):
    parent = game.current_scene
    star = add_bg_star_child(parent, 50, 0.2, 0.5, 0.7)
    assert star in parent.children
    extra = parent.world_size - game.screen_size
    for layer, scale in ((star.star_far, 0.2), (star.star_mid, 0.5), (star.star_near, 0.7)):
        assert len(layer) == 50
        bound = game.screen_size + extra * scale
        for point in layer:
            assert 0 <= point.x <= bound.x
            assert 0 <= point.y <= bound.y


def test_scales_and_count_are_kept(game):
    star = add_bg_star_child(None, 3, 0.1, 0.3, 0.9)
    assert (star.num, star.scale_far, star.scale_mid, star.scale_near) == (3, 0.1, 0.3, 0.9)


def test_colours_start_mid_grey(game):
    star = BgStar()
    star.update(0.0)
    grey = Color(0.5, 0.5, 0.5, 1.0)
    assert star.color_far == grey
    assert star.color_mid == grey
    assert star.color_near == grey


def test_colours_stay_in_range(game):
    star = BgStar()
    for _ in range(20):
        star.update(0.77)
        for colour in (star.color_far, star.color_mid, star.color_near):
            assert all(0.0 <= c <= 1.0 for c in colour)
            assert colour.a == 1.0


def test_render_draws_far_layer_with_parallax(game, monkeypatch):
    screen = pygame.Surface((100, 100))
    monkeypatch.setattr(game, "screen", screen)
    game.current_scene.camera_position = pygame.Vector2(10, 0)
    star = BgStar()
    star.scale_far = 0.5
    star.star_far = [pygame.Vector2(20, 20)]
    star.render()
    assert tuple(screen.get_at((15, 20)))[:3] == (255, 0, 0)
    assert tuple(screen.get_at((20, 20)))[:3] == (0, 0, 0)