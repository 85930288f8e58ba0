"""Cache of images, sounds, music and fonts, loaded on first use."""

from __future__ import annotations

import os
from typing import Any, Callable, Dict, Hashable, Tuple

import pygame


class AssetError(Exception):
    """Raised when an asset cannot be loaded."""


def _load_image(file_path: str) -> pygame.Surface:
    surface = pygame.image.load(file_path)
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        surface = surface.convert_alpha()
    return surface


def _load_sound(file_path: str) -> Any:
    return pygame.mixer.Sound(file_path)


def _load_music(file_path: str) -> str:
    # Music is streamed from disk, so the cached value is the checked path.
    if not os.path.isfile(file_path):
        raise FileNotFoundError(file_path)
    return file_path


def _load_font(file_path: str, font_size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(file_path, font_size)


_LOAD_ERRORS = (pygame.error, OSError, ValueError)


class AssetStore:
    """Loads each asset once and hands out the cached copy afterwards."""

    def __init__(
        self,
        image_loader: Callable[[str], Any] = _load_image,
        sound_loader: Callable[[str], Any] = _load_sound,
        music_loader: Callable[[str], Any] = _load_music,
        font_loader: Callable[[str, int], Any] = _load_font,
    ) -> None:
        self._image_loader = image_loader
        self._sound_loader = sound_loader
        self._music_loader = music_loader
        self._font_loader = font_loader
        self._textures: Dict[str, Any] = {}
        self._sounds: Dict[str, Any] = {}
        self._music: Dict[str, Any] = {}
        self._fonts: Dict[Tuple[str, int], Any] = {}

    def clean(self) -> None:
        """Drop every cached asset."""
        self._textures.clear()
        self._sounds.clear()
        self._music.clear()
        self._fonts.clear()

    @staticmethod
    def _load(kind: str, cache: Dict[Any, Any], key: Hashable, loader: Callable[..., Any], *args: Any) -> None:
        if key in cache:
            return
        try:
            asset = loader(*args)
        except _LOAD_ERRORS as exc:
            raise AssetError(f"failed to load {kind}: {args[0]}") from exc
        cache[key] = asset

    def load_image(self, file_path: str) -> None:
        """Load an image unless it is already cached."""
        self._load("image", self._textures, file_path, self._image_loader, file_path)

    def load_sound(self, file_path: str) -> None:
        """Load a sound effect unless it is already cached."""
        self._load("sound", self._sounds, file_path, self._sound_loader, file_path)

    def load_music(self, file_path: str) -> None:
        """Register a music track unless it is already cached."""
        self._load("music", self._music, file_path, self._music_loader, file_path)

    def load_font(self, file_path: str, font_size: int) -> None:
        """Load a font at a size unless that pair is already cached."""
        self._load("font", self._fonts, (file_path, font_size), self._font_loader, file_path, font_size)

    def get_image(self, file_path: str) -> Any:
        """Return the image at ``file_path``, loading it if needed."""
        self.load_image(file_path)
        return self._textures[file_path]

    def get_sound(self, file_path: str) -> Any:
        """Return the sound at ``file_path``, loading it if needed."""
        self.load_sound(file_path)
        return self._sounds[file_path]

    def get_music(self, file_path: str) -> Any:
        """Return the music track at ``file_path``, loading it if needed."""
        self.load_music(file_path)
        return self._music[file_path]

    def get_font(self, file_path: str, font_size: int) -> Any:
        """Return the font at ``file_path`` in ``font_size``, loading it if needed."""
        self.load_font(file_path, font_size)
        return self._fonts[(file_path, font_size)]