import pygame
import pytest

from ghostescape.defs import ObjectType
from ghostescape.game import Game
from ghostescape.object_screen import ObjectScreen
from ghostescape.object_world import ObjectWorld
from ghostescape.objects import Object
from ghostescape.scene import Scene


class ProbeMixin:
    def handle_events(self, event):
        self.log.append(("event", self.name))
        return self.consume

    def update(self, dt):
        self.log.append(("update", self.name))

    def render(self):
        self.log.append(("render", self.name))

    def clean(self):
        self.log.append(("clean", self.name))


class PlainProbe(ProbeMixin, Object):
    pass


class WorldProbe(ProbeMixin, ObjectWorld):
    pass


class ScreenProbe(ProbeMixin, ObjectScreen):
    pass


def make_probe(cls, log, name, consume=False):
    obj = cls()
    obj.init()
    obj.log = log
    obj.name = name
    obj.consume = consume
    return obj


@pytest.fixture
def game():
    instance = Game.instance()
    previous = instance.current_scene, instance.screen_size
    instance.screen_size = pygame.Vector2(1280, 720)
    yield instance
    instance.current_scene, instance.screen_size = previous


@pytest.fixture
def populated(game):
    log = []
    scene = Scene()
    game.current_scene = scene
    plain = make_probe(PlainProbe, log, "plain")
    world = make_probe(WorldProbe, log, "world")
    screen = make_probe(ScreenProbe, log, "screen")
    for child in (plain, world, screen):
        scene.add_child(child)
    return scene, log, plain, world, screen


def test_add_child_routes_by_type(populated):
    scene, log, plain, world, screen = populated
    enemy = make_probe(WorldProbe, log, "enemy")
    enemy.object_type = ObjectType.ENEMY
    scene.add_child(enemy)
    assert scene.children == [plain]
    assert scene.children_world == [world, enemy]
    assert scene.children_screen == [screen]


def test_remove_child_detaches_without_cleaning(populated):
    scene, log, plain, world, screen = populated
    scene.remove_child(world)
    scene.remove_child(screen)
    assert scene.children_world == []
    assert scene.children_screen == []
    assert log == []


def test_update_order_and_pause(populated):
    scene, log, *_ = populated
    scene.update(0.1)
    assert log == [("update", "plain"), ("update", "world"), ("update", "screen")]
    log.clear()
    scene.pause()
    assert scene.is_pause
    scene.update(0.1)
    assert log == [("update", "screen")]
    log.clear()
    scene.resume()
    assert not scene.is_pause
    scene.update(0.1)
    assert len(log) == 3


def test_screen_child_consumes_event_first(game):
    log = []
    scene = Scene()
    scene.add_child(make_probe(ScreenProbe, log, "screen", consume=True))
    scene.add_child(make_probe(WorldProbe, log, "world"))
    assert scene.handle_events("evt") is True
    assert log == [("event", "screen")]


def test_plain_children_result_does_not_stop_world(game):
    log = []
    scene = Scene()
    scene.add_child(make_probe(PlainProbe, log, "plain", consume=True))
    scene.add_child(make_probe(WorldProbe, log, "world"))
    assert scene.handle_events("evt") is False
    assert log == [("event", "plain"), ("event", "world")]


def test_paused_scene_offers_events_to_screen_only(populated):
    scene, log, *_ = populated
    scene.pause()
    assert scene.handle_events("evt") is False
    assert log == [("event", "screen")]


def test_render_order(populated):
    scene, log, *_ = populated
    scene.render()
    assert log == [("render", "plain"), ("render", "world"), ("render", "screen")]


def test_inactive_children_are_skipped(populated):
    scene, log, plain, world, screen = populated
    world.is_active = False
    scene.render()
    assert ("render", "world") not in log
    assert ("render", "screen") in log


def test_removed_children_are_cleaned(populated):
    scene, log, plain, world, screen = populated
    world.need_remove = True
    scene.update(0.1)
    assert world not in scene.children_world
    assert ("clean", "world") in log
    assert ("update", "world") not in log


def test_safe_add_child_is_routed_on_update(populated):
    scene, log, *_ = populated
    extra = make_probe(WorldProbe, log, "extra")
    scene.safe_add_child(extra)
    assert extra not in scene.children_world
    scene.update(0.1)
    assert extra in scene.children_world


def test_clean_empties_every_layer(populated):
    scene, log, *_ = populated
    scene.clean()
    assert scene.children == [] and scene.children_world == [] and scene.children_screen == []
    assert sorted(log) == [("clean", "plain"), ("clean", "screen"), ("clean", "world")]


def test_world_screen_round_trip(game):
    scene = Scene()
    scene.camera_position = pygame.Vector2(40, 70)
    point = pygame.Vector2(500, 600)
    assert scene.screen_to_world(scene.world_to_screen(point)) == point
    assert scene.world_to_screen(point) == point - scene.camera_position


def test_camera_clamped_below(game):
    scene = Scene()
    scene.world_size = game.screen_size * 3
    scene.set_camera_position((-100, -100))
    assert scene.camera_position == pygame.Vector2(-30, -30)


def test_camera_clamped_above(game):
    scene = Scene()
    scene.world_size = game.screen_size * 3
    scene.set_camera_position((100000, 100000))
    limit = pygame.Vector2(scene.camera_position)
    assert limit == scene.world_size - game.screen_size + pygame.Vector2(30, 30)
    scene.set_camera_position((200000, 200000))
    assert scene.camera_position == limit


def test_camera_inside_world_unchanged(game):
    scene = Scene()
    scene.world_size = game.screen_size * 3
    scene.set_camera_position((400, 300))
    assert scene.camera_position == pygame.Vector2(400, 300)