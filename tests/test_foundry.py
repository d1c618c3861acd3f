import pytest

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
from primordia.minigames import FoundryMinigame
from primordia.minigames.foundry import transmute

IRON_ORE = PhysicalItem(PhysicalForm.ORE, PhysicalMaterial.IRON)


def test_transmutation_table():
    assert transmute(AbstractItem(AbstractKind.CLICK, 0)) == EnergyItem(EnergyKind.THERMAL)
    assert transmute(AbstractItem(AbstractKind.CLICK, 1)) == EnergyItem(EnergyKind.KINETIC)
    assert transmute(IRON_ORE) == PhysicalItem(PhysicalForm.LIQUID, PhysicalMaterial.IRON)
    block = PhysicalItem(PhysicalForm.BLOCK, PhysicalMaterial.IRON)
    assert transmute(block) == block
    with pytest.raises(UnsupportedVariant):
        transmute(AbstractItem(AbstractKind.CLICK, 3))


def test_ingest_routing():
    foundry = FoundryMinigame()
    assert foundry.ingest_item(Item.energy(EnergyKind.THERMAL, 2.0)) == 2.0
    assert foundry.heat == 2.0
    assert foundry.ingest_item(Item.energy(EnergyKind.KINETIC)) == 0.0
    assert foundry.ingest_item(Item.abstract(AbstractKind.CLICK, 0)) == 1.0
    assert foundry.ingest_item(Item.abstract(AbstractKind.CLICK, 9)) == 0.0
    assert foundry.ingest_item(Item(IRON_ORE)) == 1.0
    assert foundry.ingest_item(Item.physical(PhysicalForm.BLOCK, PhysicalMaterial.IRON)) == 0.0
    assert len(foundry.priority_cooking) == 1
    assert len(foundry.cooking) == 1


def test_cooks_one_item_per_period_priority_first():
    foundry = FoundryMinigame()
    foundry.ingest_item(Item(IRON_ORE, 2.0))
    foundry.ingest_item(Item.abstract(AbstractKind.CLICK, 1))

    assert foundry.tick(0.0) == []
    assert foundry.tick(0.5) == []
    [first] = foundry.tick(1.0)
    assert first.type == EnergyItem(EnergyKind.KINETIC)
    assert foundry.total_cooked == 0.0
    assert foundry.tick(1.5) == []
    [second] = foundry.tick(2.0)
    assert second == Item(PhysicalItem(PhysicalForm.LIQUID, PhysicalMaterial.IRON), 2.0)
    assert foundry.total_cooked == 2.0
    assert foundry.tick(5.0) == []


def test_levels_from_cooked_total():
    foundry = FoundryMinigame()
    foundry.ingest_item(Item(IRON_ORE))
    foundry.tick(0.0)
    foundry.tick(1.0)
    assert foundry.should_level_up()
    hotter = foundry.levelup()
    assert hotter.level == 1
    assert hotter.cook_period == foundry.cook_period


def test_levelup_keeps_the_cook_clock():
    foundry = FoundryMinigame()
    foundry.ingest_item(Item(IRON_ORE))
    foundry.ingest_item(Item(IRON_ORE))
    foundry.tick(0.0)
    foundry.tick(1.0)
    hotter = foundry.levelup()
    assert hotter.last_cook == 1.0
    [cooked] = hotter.tick(2.0)
    assert cooked.type == PhysicalItem(PhysicalForm.LIQUID, PhysicalMaterial.IRON)
