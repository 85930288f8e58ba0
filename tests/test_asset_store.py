import os

import pygame
import pytest

from ghostescape.asset_store import AssetError, AssetStore


class CountingLoader:
    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)
        return object()


def failing_loader(*args):
    raise FileNotFoundError(args[0])


def test_image_is_loaded_once_and_cached():
    loader = CountingLoader()
    store = AssetStore(image_loader=loader)
    first = store.get_image("a.png")
    second = store.get_image("a.png")
    assert first is second
    assert loader.calls == [("a.png",)]


def test_load_does_not_replace_existing_entry():
    loader = CountingLoader()
    store = AssetStore(sound_loader=loader)
    store.load_sound("s.wav")
    original = store.get_sound("s.wav")
    store.load_sound("s.wav")
    assert store.get_sound("s.wav") is original
    assert len(loader.calls) == 1


def test_fonts_are_keyed_by_size():
    loader = CountingLoader()
    store = AssetStore(font_loader=loader)
    small = store.get_font("f.ttf", 16)
    large = store.get_font("f.ttf", 32)
    assert small is not large
    assert store.get_font("f.ttf", 16) is small
    assert loader.calls == [("f.ttf", 16), ("f.ttf", 32)]


def test_clean_forgets_cached_assets():
    loader = CountingLoader()
    store = AssetStore(music_loader=loader)
    first = store.get_music("m.ogg")
    store.clean()
    second = store.get_music("m.ogg")
    assert first is not second
    assert len(loader.calls) == 2


def test_failed_image_raises_asset_error():
    store = AssetStore(image_loader=failing_loader)
    with pytest.raises(AssetError):
        store.get_image("missing.file")


def test_failed_sound_raises_asset_error():
    store = AssetStore(sound_loader=failing_loader)
    with pytest.raises(AssetError):
        store.get_sound("missing.file")


def test_failed_music_raises_asset_error():
    store = AssetStore(music_loader=failing_loader)
    with pytest.raises(AssetError):
        store.get_music("missing.file")


def test_failed_font_raises_asset_error():
    store = AssetStore(font_loader=failing_loader)
    with pytest.raises(AssetError):
        store.get_font("missing.ttf", 12)


def test_real_image_loads_from_disk(tmp_path):
    path = tmp_path / "pic.png"
    pygame.image.save(pygame.Surface((4, 3)), str(path))
    surface = AssetStore().get_image(str(path))
    assert surface.get_size() == (4, 3)


def test_missing_image_on_disk_raises(tmp_path):
    with pytest.raises(AssetError):
        AssetStore().get_image(str(tmp_path / "nope.png"))


def test_music_path_is_cached(tmp_path):
    path = tmp_path / "track.ogg"
    path.write_bytes(b"x")
    assert AssetStore().get_music(str(path)) == str(path)


def test_missing_music_raises(tmp_path):
    with pytest.raises(AssetError):
        AssetStore().get_music(str(tmp_path / "none.ogg"))


def test_real_font_loads():
    font_path = os.path.join(os.path.dirname(pygame.__file__), pygame.font.get_default_font())
    font = AssetStore().get_font(font_path, 20)
    assert font.get_height() > 0