import pytest

from primordia.items import EnergyItem, EnergyKind, Item, PhysicalForm, PhysicalItem, PhysicalMaterial
from primordia.minigames import BatteryMinigame, ChestMinigame, ItemStore

IRON_BLOCK = PhysicalItem(PhysicalForm.BLOCK, PhysicalMaterial.IRON)


def test_item_store_add_remove():
    store = ItemStore()
    store.add("a", 2.0)
    store.add("a", 1.0)
    assert store.amount("a") == 3.0
    assert store.remove("a", 1.0) == 1.0
    assert store.remove("a", 10.0) == 2.0
    assert "a" not in list(store)
    assert store.remove("missing", 1.0) == 0.0


def test_chest_accepts_more_forms_as_it_grows():
    powder = Item.physical(PhysicalForm.POWDER, PhysicalMaterial.DIRT)
    liquid = Item.physical(PhysicalForm.LIQUID, PhysicalMaterial.SALT_WATER)
    gas = Item.physical(PhysicalForm.GAS, PhysicalMaterial.SALT_WATER)
    block = Item(IRON_BLOCK)

    assert ChestMinigame(0).can_accept(block)
    assert not ChestMinigame(4).can_accept(powder)
    assert ChestMinigame(5).can_accept(powder)
    assert not ChestMinigame(9).can_accept(liquid)
    assert ChestMinigame(10).can_accept(liquid)
    assert not ChestMinigame(19).can_accept(gas)
    assert ChestMinigame(20).can_accept(gas)
    assert not ChestMinigame(20).can_accept(Item.energy(EnergyKind.KINETIC))


def test_chest_names():
    assert ChestMinigame(0).name == "chest"
    assert ChestMinigame(5).name == "chest with bags"
    assert ChestMinigame(10).name == "barrels and chest with bags"
    assert ChestMinigame(20).name == "tanks, barrels, and chest with bags"


def test_chest_levels_when_full_and_keeps_contents():
    chest = ChestMinigame()
    assert chest.capacity() == 1.0
    assert chest.ingest_item(Item.physical(PhysicalForm.POWDER, PhysicalMaterial.DIRT)) == 0.0
    assert not chest.should_level_up()
    assert chest.ingest_item(Item(IRON_BLOCK)) == 1.0
    assert chest.should_level_up()
    bigger = chest.levelup()
    assert bigger.level == 1
    assert bigger.capacity() == 2.0
    assert bigger.storage.amount(IRON_BLOCK) == 1.0
    assert not bigger.should_level_up()


def test_chest_remove_and_filter():
    chest = ChestMinigame()
    chest.add_item(Item(IRON_BLOCK, 3.0))
    chest.add_item(Item.physical(PhysicalForm.LUMP, PhysicalMaterial.MUD, 1.0))
    taken = chest.remove_item(IRON_BLOCK, 2.0)
    assert taken == Item(IRON_BLOCK, 2.0)
    assert chest.remove_item(PhysicalItem(PhysicalForm.BALL, PhysicalMaterial.GOLD), 1.0) is None
    assert chest.filtered_items("iron") == [(IRON_BLOCK, 1.0)]
    assert len(chest.filtered_items()) == 2
    chest.filter = "MUD"
    assert [t.material for t, _ in chest.filtered_items()] == [PhysicalMaterial.MUD]


def test_chest_rejects_invalid_level():
    with pytest.raises(ValueError):
        ChestMinigame(100)


def test_battery_allowlist_and_names():
    kinetic = Item.energy(EnergyKind.KINETIC)
    electric = Item.energy(EnergyKind.ELECTRIC)
    thermal = Item.energy(EnergyKind.THERMAL)
    radiant = Item.energy(EnergyKind.RADIANT)

    assert BatteryMinigame(0).can_accept(kinetic)
    assert not BatteryMinigame(9).can_accept(electric)
    assert BatteryMinigame(10).can_accept(electric)
    assert not BatteryMinigame(19).can_accept(thermal)
    assert BatteryMinigame(20).can_accept(thermal)
    assert not BatteryMinigame(49).can_accept(radiant)
    assert BatteryMinigame(50).can_accept(radiant)
    assert not BatteryMinigame(50).can_accept(Item(IRON_BLOCK))

    assert BatteryMinigame(0).name == "spring"
    assert BatteryMinigame(10).name == "spring and battery"
    assert BatteryMinigame(20).name == "spring, battery, heat stone"
    assert BatteryMinigame(50).name == "tesseract"


def test_battery_stores_and_levels():
    battery = BatteryMinigame()
    assert battery.ingest_item(Item.energy(EnergyKind.THERMAL)) == 0.0
    assert battery.ingest_item(Item.energy(EnergyKind.KINETIC, 1.5)) == 1.5
    assert battery.stored() == [(EnergyItem(EnergyKind.KINETIC), 1.5)]
    assert battery.should_level_up()
    bigger = battery.levelup()
    assert bigger.level == 1
    assert bigger.remove_item(EnergyItem(EnergyKind.KINETIC), 1.0).amount == 1.0
    assert bigger.remove_item(EnergyItem(EnergyKind.ELECTRIC), 1.0) is None
