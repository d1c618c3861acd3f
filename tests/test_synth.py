import pytest

from primordia.core.random import RandomSource
from primordia.errors import UnsupportedVariant
from primordia.items import (
    AbstractItem,
    AbstractKind,
    EnergyItem,
    EnergyKind,
    Item,
    PhysicalForm,
    PhysicalItem,
    PhysicalMaterial,
)
from primordia.runes import Rune
from primordia.textures import (
    CLEAR,
    Colorant,
    ColorPalette,
    PixelBuffer,
    StaticAsset,
    draw_ball,
    draw_bitmap,
    draw_block,
    draw_item_type,
    draw_lump,
    draw_powder,
)

SOLID = ColorPalette([Colorant.tight(10, 20, 30, 1)])
MIXED = ColorPalette([Colorant.tight(10, 20, 30, 1), Colorant.loose(0, 0, 0, 50, 2)])


def test_block_fills_every_pixel():
    buf = draw_block(SOLID, RandomSource(1), 8)
    assert (buf.width, buf.height) == (8, 8)
    assert len(buf.pixels) == 64
    assert buf.opaque_count() == 64


def test_ball_is_a_mirrored_disc():
    buf = draw_ball(MIXED, RandomSource(2), 4)
    assert (buf.width, buf.height) == (8, 8)
    assert buf.get(0, 0) == CLEAR
    assert buf.get(7, 7) == CLEAR
    assert buf.get(4, 4) != CLEAR
    for y in range(8):
        for x in range(8):
            assert buf.get(x, y) == buf.get(7 - x, y) == buf.get(x, 7 - y)


def test_ball_draws_quadrant_columns_in_order():
    radius = 5
    drawn = RandomSource(21)
    buf = draw_ball(MIXED, drawn, radius)
    rng = RandomSource(21)
    expected = {}
    for x in range(radius):
        y = 0
        while x * x + y * y < radius * radius:
            color = MIXED.pick_color(rng)
            for px in (radius + x, radius - 1 - x):
                for py in (radius + y, radius - 1 - y):
                    expected[(px, py)] = color
            y += 1
    for y in range(2 * radius):
        for x in range(2 * radius):
            assert buf.get(x, y) == expected.get((x, y), CLEAR)
    assert drawn.next() == rng.next()


def test_generators_are_deterministic_per_seed():
    for draw in (draw_block, draw_powder, draw_lump):
        assert draw(MIXED, RandomSource(3), 16) == draw(MIXED, RandomSource(3), 16)
    assert draw_ball(MIXED, RandomSource(3), 8) == draw_ball(MIXED, RandomSource(3), 8)


def test_powder_and_lump_leave_transparent_background():
    powder = draw_powder(SOLID, RandomSource(4), 16)
    lump = draw_lump(SOLID, RandomSource(4), 16)
    for buf in (powder, lump):
        assert 0 < buf.opaque_count() < 16 * 16
        assert buf.get(0, 0) == CLEAR


def test_bitmap_scales_pattern():
    buf = draw_bitmap(Rune.SHELTER.pattern, 6, (1, 2, 3, 255))
    assert buf.get(0, 0) == (1, 2, 3, 255)
    assert buf.get(3, 3) == CLEAR  # the gap in the shelter
    assert buf.get(5, 5) == (1, 2, 3, 255)


def test_to_bytes_and_image():
    buf = draw_block(SOLID, RandomSource(5), 4)
    assert buf.to_bytes()[:4] == bytes((10, 20, 30, 255))
    assert len(buf.to_bytes()) == 4 * 4 * 4
    image = buf.to_image()
    assert image.size == (4, 4)
    assert image.mode == "RGBA"
    assert image.getpixel((0, 0)) == (10, 20, 30, 255)


def test_blank_buffer_is_clear():
    buf = PixelBuffer.blank(3, 2)
    assert buf.opaque_count() == 0
    buf.set(2, 1, (1, 1, 1, 1))
    assert buf.get(2, 1) == (1, 1, 1, 1)
    assert buf.pixels[5] == (1, 1, 1, 1)


def test_static_sprites_for_objects_and_clicks():
    apple = draw_item_type(PhysicalItem(PhysicalForm.OBJECT, PhysicalMaterial.APPLE), RandomSource(1))
    assert apple == StaticAsset("physical/Apple.png")
    click = draw_item_type(AbstractItem(AbstractKind.CLICK, 1), RandomSource(1))
    assert click == StaticAsset("abstract/LongClick.png")


def test_rune_items_draw_their_pattern():
    tex = draw_item_type(AbstractItem(AbstractKind.RUNE, Rune.EXCLUSIVE_SELF.value), RandomSource(1), 8)
    assert isinstance(tex, PixelBuffer)
    assert tex.opaque_count() == 64


def test_liquid_and_block_items_use_material_palettes():
    liquid = Item.physical(PhysicalForm.LIQUID, PhysicalMaterial.SALT_WATER).draw(RandomSource(2))
    assert isinstance(liquid, PixelBuffer)
    assert (liquid.width, liquid.height) == (256, 256)
    block = draw_item_type(PhysicalItem(PhysicalForm.BLOCK, PhysicalMaterial.MUD), RandomSource(2), 8)
    assert block.opaque_count() == 64


@pytest.mark.parametrize(
    "item_type",
    [
        PhysicalItem(PhysicalForm.OBJECT, PhysicalMaterial.IRON),
        PhysicalItem(PhysicalForm.BLOCK, PhysicalMaterial.UNOBTAINIUM),
        PhysicalItem(PhysicalForm.ORE, PhysicalMaterial.IRON),
        AbstractItem(AbstractKind.RUNE, 9),
        EnergyItem(EnergyKind.KINETIC),
    ],
)
def test_unsupported_draws_raise(item_type):
    with pytest.raises(UnsupportedVariant):
        draw_item_type(item_type, RandomSource(1), 8)
