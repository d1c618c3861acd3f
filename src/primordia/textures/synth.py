from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Sequence, Union

from ..core.random import RandomSource
from .palette import CLEAR, ColorPalette, Rgba

if TYPE_CHECKING:  # pragma: no cover - typing only
    from PIL import Image


ITEM_SIZE = 256  # pixels


@dataclass
class PixelBuffer:
    """Row-major RGBA pixels; ``pixels[y * width + x]``."""

    width: int
    height: int
    pixels: List[Rgba] = field(default_factory=list)

    @classmethod
    def blank(cls, width: int, height: int) -> "PixelBuffer":
        return cls(width, height, [CLEAR] * (width * height))

    def get(self, x: int, y: int) -> Rgba:
        return self.pixels[y * self.width + x]

    def set(self, x: int, y: int, color: Rgba) -> None:
        self.pixels[y * self.width + x] = color

    def to_bytes(self) -> bytes:
        return bytes(channel for pixel in self.pixels for channel in pixel)

    def to_image(self) -> "Image.Image":
        from PIL import Image

        return Image.frombytes("RGBA", (self.width, self.height), self.to_bytes())

    def opaque_count(self) -> int:
        return sum(1 for p in self.pixels if p[3] != 0)


@dataclass(frozen=True)
class StaticAsset:
    """A pre-authored sprite, referenced by its asset path."""

    path: str


Texture = Union[PixelBuffer, StaticAsset]


def draw_block(palette: ColorPalette, rng: RandomSource, size: int) -> PixelBuffer:
    """One independent palette draw per pixel, row-major."""
    buf = PixelBuffer(size, size)
    for _ in range(size * size):
        buf.pixels.append(palette.pick_color(rng))
    return buf


def draw_ball(palette: ColorPalette, rng: RandomSource, radius: int) -> PixelBuffer:
    """Filled disc in a 2r x 2r buffer.

    Only one quadrant is sampled: for each column ``x`` the scan walks ``y``
    up from zero while ``x*x + y*y < r*r``, draws one color and writes it to the
    four mirrored pixels. Stream values are consumed in exactly this order.
    """
    size = 2 * radius
    buf = PixelBuffer.blank(size, size)
    r2 = radius * radius
    for x in range(radius):
        y = 0
        while x * x + y * y < r2:
            color = palette.pick_color(rng)
            right, left = radius + x, radius - 1 - x
            low, high = radius + y, radius - 1 - y
            buf.set(right, low, color)
            buf.set(left, low, color)
            buf.set(right, high, color)
            buf.set(left, high, color)
            y += 1
    return buf


def draw_powder(palette: ColorPalette, rng: RandomSource, size: int) -> PixelBuffer:
    """A heap: narrow rounded top, wide base."""
    radius = size // 2
    r2 = float(radius * radius)
    buf = PixelBuffer(size, size)
    for y in range(size):
        vertical = (y / size) ** 0.3
        width_multiplier = 0.6 + vertical * 0.8
        squeeze = 1.0 + (1.0 - vertical) ** 0.7 * 1.2
        for x in range(size):
            dx = (x - radius) * squeeze
            dy = float(y - radius)
            if dy > 0.0:
                dy *= 1.0 + (y / size) ** 2 * 0.2
            if dx * dx + dy * dy < r2 * width_multiplier * width_multiplier:
                buf.pixels.append(palette.pick_color(rng))
            else:
                buf.pixels.append(CLEAR)
    return buf


def draw_lump(palette: ColorPalette, rng: RandomSource, size: int) -> PixelBuffer:
    """Four irregularly overlapping circles around the center."""
    radius = size // 2
    small_r2 = int(radius * 0.6) ** 2
    centers = []
    for _ in range(4):
        offset_x = (rng.unit() - 0.5) * 0.8
        offset_y = (rng.unit() - 0.5) * 0.8
        centers.append((radius + radius * offset_x, radius + radius * offset_y))
    buf = PixelBuffer(size, size)
    for y in range(size):
        for x in range(size):
            inside = any(int((x - cx) ** 2 + (y - cy) ** 2) < small_r2 for cx, cy in centers)
            buf.pixels.append(palette.pick_color(rng) if inside else CLEAR)
    return buf


def draw_bitmap(pattern: Sequence[Sequence[bool]], size: int, color: Rgba = (0, 0, 0, 255)) -> PixelBuffer:
    """Scale a boolean bitmap to a square buffer, set cells in ``color``."""
    rows = len(pattern)
    cols = len(pattern[0]) if rows else 0
    buf = PixelBuffer(size, size)
    for y in range(size):
        for x in range(size):
            on = bool(rows and cols and pattern[y * rows // size][x * cols // size])
            buf.pixels.append(color if on else CLEAR)
    return buf


__all__ = [
    "ITEM_SIZE",
    "PixelBuffer",
    "StaticAsset",
    "Texture",
    "draw_block",
    "draw_ball",
    "draw_powder",
    "draw_lump",
    "draw_bitmap",
]
