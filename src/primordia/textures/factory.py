from __future__ import annotations

import logging
from typing import Any, Dict, Protocol

from .synth import PixelBuffer, StaticAsset, Texture

logger = logging.getLogger(__name__)


class TextureFactory(Protocol):
    """Turns synthesized textures into engine handles.

    Use ArcadeTextureFactory in production. Tests use a dummy to avoid GL.
    """

    def create_texture(self, uid: str, texture: Texture) -> Any:
        ...


class DummyTextureFactory(TextureFactory):
    """Headless factory: the handle is the texture itself."""

    def __init__(self) -> None:
        self.created: Dict[str, Texture] = {}

    def create_texture(self, uid: str, texture: Texture) -> Texture:
        self.created[uid] = texture
        return texture


class ArcadeTextureFactory(TextureFactory):
    """Factory that builds arcade.Texture objects from pixel buffers via Pillow.

    Import is deferred to runtime to keep tests headless.
    """

    def __init__(self, asset_root: str = "assets") -> None:
        try:
            import arcade  # type: ignore
        except Exception as e:  # pragma: no cover - runtime only
            raise RuntimeError(
                "ArcadeTextureFactory requires the 'arcade' package at runtime"
            ) from e
        self._arcade = arcade
        self._asset_root = asset_root

    def create_texture(self, uid: str, texture: Texture):  # pragma: no cover - requires arcade
        arcade = self._arcade
        if isinstance(texture, StaticAsset):
            return arcade.load_texture(f"{self._asset_root}/{texture.path}")
        if isinstance(texture, PixelBuffer):
            return arcade.Texture(texture.to_image(), hash=uid)
        raise TypeError(f"Unsupported texture type: {type(texture).__name__}")


__all__ = ["TextureFactory", "DummyTextureFactory", "ArcadeTextureFactory"]
