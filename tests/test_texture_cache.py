import sys
import types

import pytest

from primordia.errors import UnsupportedVariant
from primordia.items import ManaIntent, ManaItem, ManaKind, PhysicalForm, PhysicalItem, PhysicalMaterial
from primordia.textures import (
    ArcadeTextureFactory,
    DummyTextureFactory,
    PixelBuffer,
    StaticAsset,
    TextureCache,
)

IRON_BLOCK = PhysicalItem(PhysicalForm.BLOCK, PhysicalMaterial.IRON)
MUD_BLOCK = PhysicalItem(PhysicalForm.BLOCK, PhysicalMaterial.MUD)


def test_texture_generated_once_per_uid():
    factory = DummyTextureFactory()
    cache = TextureCache(factory, size=8)
    first = cache.texture_for(IRON_BLOCK)
    second = cache.texture_for(IRON_BLOCK)
    assert first is second
    assert cache.misses == 1
    assert cache.hits == 1
    assert len(cache) == 1
    assert "physical/Block/Iron" in cache
    assert list(factory.created) == ["physical/Block/Iron"]


def test_texture_independent_of_request_order():
    a = TextureCache(size=8)
    b = TextureCache(size=8)
    a.texture_for(IRON_BLOCK)
    mud_after_iron = a.texture_for(MUD_BLOCK)
    mud_first = b.texture_for(MUD_BLOCK)
    assert mud_after_iron == mud_first


def test_seed_changes_output():
    a = TextureCache(seed=1, size=8).texture_for(MUD_BLOCK)
    b = TextureCache(seed=2, size=8).texture_for(MUD_BLOCK)
    assert a != b


def test_unsupported_item_is_not_cached():
    cache = TextureCache(size=8)
    with pytest.raises(UnsupportedVariant):
        cache.texture_for(ManaItem(ManaKind.FIRE, 0, ManaIntent.ATTACK))
    assert len(cache) == 0


def test_insert_and_get():
    cache = TextureCache()
    assert cache.get("x") is None
    cache.insert("x", "handle")
    assert cache.get("x") == "handle"


def test_arcade_factory_uses_arcade_api(monkeypatch):
    fake = types.ModuleType("arcade")
    fake.load_texture = lambda path: ("loaded", path)
    fake.Texture = lambda image, hash=None: ("texture", hash, image.size)
    monkeypatch.setitem(sys.modules, "arcade", fake)

    factory = ArcadeTextureFactory(asset_root="res")
    assert factory.create_texture("abstract/Click/Short", StaticAsset("abstract/ShortClick.png")) == (
        "loaded",
        "res/abstract/ShortClick.png",
    )
    assert factory.create_texture("u", PixelBuffer.blank(2, 3)) == ("texture", "u", (2, 3))
    with pytest.raises(TypeError):
        factory.create_texture("bad", object())
