from __future__ import annotations

from ..core.random import RandomSource
from ..errors import UnsupportedVariant
from ..items.identifier import identify
from ..items.kinds import AbstractKind, PhysicalForm, PhysicalMaterial
from ..items.types import AbstractItem, ItemType, PhysicalItem
from ..runes import from_value
from .palettes import GAS_ALPHA_LOOSENESS, LIQUID_ALPHA_LOOSENESS, palette_for
from .synth import (
    ITEM_SIZE,
    StaticAsset,
    Texture,
    draw_ball,
    draw_bitmap,
    draw_block,
    draw_lump,
    draw_powder,
)


# Materials with a hand-drawn Object sprite.
STATIC_OBJECTS = frozenset({PhysicalMaterial.APPLE})


def draw_item_type(item_type: ItemType, rng: RandomSource, size: int = ITEM_SIZE) -> Texture:
    """Produce the texture for an item type.

    Raises UnsupportedVariant when no draw rule exists for the variant.
    """
    if isinstance(item_type, PhysicalItem):
        return _draw_physical(item_type, rng, size)
    if isinstance(item_type, AbstractItem):
        return _draw_abstract(item_type, size)
    raise UnsupportedVariant(item_type, "draw")


def _draw_physical(item: PhysicalItem, rng: RandomSource, size: int) -> Texture:
    if item.form is PhysicalForm.OBJECT:
        if item.material in STATIC_OBJECTS:
            return StaticAsset(identify(item).asset)
        raise UnsupportedVariant(item, "draw")

    palette = palette_for(item.material)
    if palette is None:
        raise UnsupportedVariant(item, "draw")

    form = item.form
    if form is PhysicalForm.GAS:
        return draw_ball(palette.with_alpha_looseness(GAS_ALPHA_LOOSENESS), rng, size // 2)
    if form is PhysicalForm.LIQUID:
        return draw_ball(palette.with_alpha_looseness(LIQUID_ALPHA_LOOSENESS), rng, size // 2)
    if form is PhysicalForm.POWDER:
        return draw_powder(palette, rng, size)
    if form is PhysicalForm.LUMP:
        return draw_lump(palette, rng, size)
    if form is PhysicalForm.BLOCK:
        return draw_block(palette, rng, size)
    if form is PhysicalForm.BALL:
        return draw_ball(palette, rng, size // 2)
    raise UnsupportedVariant(item, "draw")


def _draw_abstract(item: AbstractItem, size: int) -> Texture:
    if item.kind is AbstractKind.CLICK:
        ident = identify(item)
        return StaticAsset(f"abstract/{ident.adjective}{ident.noun}.png")
    if item.kind is AbstractKind.RUNE:
        rune = from_value(item.variant)
        if rune is None:
            raise UnsupportedVariant(item, "draw")
        return draw_bitmap(rune.pattern, size)
    raise UnsupportedVariant(item, "draw")


__all__ = ["draw_item_type", "STATIC_OBJECTS"]
