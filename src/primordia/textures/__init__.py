"""Procedural texture synthesis: palettes, pixel generators and the uid cache."""

from .palette import CLEAR, Colorant, ColorPalette, Rgba
from .synth import (
    ITEM_SIZE,
    PixelBuffer,
    StaticAsset,
    Texture,
    draw_ball,
    draw_bitmap,
    draw_block,
    draw_lump,
    draw_powder,
)
from .palettes import default_palettes, load_palettes, palette_for
from .render import draw_item_type
from .factory import ArcadeTextureFactory, DummyTextureFactory, TextureFactory
from .cache import TEXTURE_SEED, TextureCache

__all__ = [
    "CLEAR",
    "Colorant",
    "ColorPalette",
    "Rgba",
    "ITEM_SIZE",
    "PixelBuffer",
    "StaticAsset",
    "Texture",
    "draw_ball",
    "draw_bitmap",
    "draw_block",
    "draw_lump",
    "draw_powder",
    "default_palettes",
    "load_palettes",
    "palette_for",
    "draw_item_type",
    "ArcadeTextureFactory",
    "DummyTextureFactory",
    "TextureFactory",
    "TEXTURE_SEED",
    "TextureCache",
]
