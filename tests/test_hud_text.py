import pygame
import pytest

from ghostescape.asset_store import AssetStore
from ghostescape.game import Game
from ghostescape.hud_text import add_hud_text_child
from ghostescape.scene import Scene


class _FakeFont:
    def __init__(self, size):
        self.size = size

    def render(self, text, antialias, color):
        return pygame.Surface((max(1, len(text)) * self.size // 2, self.size))

    def get_linesize(self):
        return self.size


@pytest.fixture
def game():
    g = Game.instance()
    saved = (g.asset_store, g.current_scene, g.screen_size, g.mouse_position, g.screen)
    g.asset_store = AssetStore(
        image_loader=lambda path: pygame.Surface((32, 16)),
        font_loader=lambda path, size: _FakeFont(size),
    )
    g.current_scene = Scene()
    g.screen_size = pygame.Vector2(1280, 720)
    g.mouse_position = pygame.Vector2(0, 0)
    g.screen = None
    yield g
    g.asset_store, g.current_scene, g.screen_size, g.mouse_position, g.screen = saved


def _text_box(parent=None, text="Score: 0"):
    return add_hud_text_child(parent, text, (100, 50), (200, 50), font_path="font.ttf")


def test_creation(game):
    box = _text_box(game.current_scene)
    assert box.text == "Score: 0"
    assert box.size == pygame.Vector2(200, 50)
    assert box.sprite_bg.size == pygame.Vector2(200, 50)
    assert box.text_label.parent is box
    assert box in game.current_scene.children_screen


def test_set_text_changes_label(game):
    box = _text_box(text="a")
    short = box.text_label.size
    box.set_text("a much longer line")
    assert box.text == "a much longer line"
    assert box.text_label.size.x > short.x


def test_set_bg_size_by_text(game):
    box = _text_box()
    box.set_bg_size_by_text(10.0)
    assert box.size == box.text_label.size + pygame.Vector2(10.0, 10.0)
    assert box.sprite_bg.size == box.size


def test_set_bg_size_default_margin(game):
    box = _text_box()
    box.set_bg_size_by_text()
    assert box.size == box.text_label.size + pygame.Vector2(50.0, 50.0)


def test_set_size(game):
    box = _text_box()
    box.set_size((300, 80))
    assert box.size == pygame.Vector2(300, 80)
    assert box.sprite_bg.size == pygame.Vector2(300, 80)


def test_set_background_uses_image_size(game):
    box = _text_box()
    bg = box.sprite_bg
    box.set_background("other.png")
    assert box.sprite_bg is bg
    assert box.sprite_bg.size == pygame.Vector2(game.asset_store.get_image("other.png").get_size())