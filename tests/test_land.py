from primordia.core.random import RandomSource
from primordia.items import EnergyKind, Item, PhysicalForm, PhysicalItem, PhysicalMaterial
from primordia.minigames import LandMinigame
from primordia.minigames.land import ARCHAEA, DEFAULT_TERRAIN

WATER = PhysicalItem(PhysicalForm.LIQUID, PhysicalMaterial.FRESH_WATER)


def flood(land):
    for y in range(land.height_in_cells):
        for x in range(land.width_in_cells):
            land.set_terrain_cell(x, y, WATER)


def test_new_land_is_mud_and_lifeless():
    land = LandMinigame()
    assert (land.width_in_cells, land.height_in_cells) == (4, 4)
    assert all(cell == DEFAULT_TERRAIN for row in land.terrain for cell in row)
    assert land.life_forms() == set()
    assert land.area().width == 120.0
    assert LandMinigame(2).width_in_cells == 8


def test_energy_is_stored():
    land = LandMinigame()
    assert land.ingest_item(Item.energy(EnergyKind.THERMAL, 2.0)) == 2.0
    assert land.energy == 2.0


def test_liquid_paints_one_random_cell(rng):
    land = LandMinigame()
    salt = Item.physical(PhysicalForm.LIQUID, PhysicalMaterial.SALT_WATER, 3.0)
    assert land.ingest_item(salt, rng) == 1.0
    painted = [cell for row in land.terrain for cell in row if cell == salt.type]
    assert len(painted) == 1


def test_painting_needs_spare_amount_and_a_random_source(rng):
    land = LandMinigame()
    assert land.ingest_item(Item.physical(PhysicalForm.LUMP, PhysicalMaterial.DIRT, 1.0), rng) == 0.0
    assert land.ingest_item(Item.physical(PhysicalForm.LUMP, PhysicalMaterial.DIRT, 2.0)) == 0.0
    assert land.ingest_item(Item.physical(PhysicalForm.BLOCK, PhysicalMaterial.DIRT, 5.0), rng) == 0.0


def test_neighbors_stay_on_the_board(rng):
    land = LandMinigame()
    for _ in range(100):
        x, y = land.random_neighbor(rng, (0, 0))
        assert x in (0, 1) and y in (0, 1)
        x, y = land.random_neighbor(rng, (3, 3))
        assert x in (2, 3) and y in (2, 3)


def test_archaea_die_off_water(rng):
    land = LandMinigame()
    land.energy = 1.0
    land.set_life_cell(0, 0, ARCHAEA)
    land.evolve(rng)
    assert land.life_forms() == set()


def test_archaea_survive_and_spread_on_water(rng):
    land = LandMinigame()
    land.energy = 20.0
    flood(land)
    land.set_life_cell(1, 1, ARCHAEA)
    for _ in range(20):
        land.evolve(rng)
    assert land.get_life_cell(1, 1) == ARCHAEA
    assert land.energy == 0.0
    population = sum(1 for row in land.life for cell in row if cell is not None)
    assert population > 1


def test_empty_water_world_seeds_archaea_and_levels(rng):
    land = LandMinigame()
    flood(land)
    land.energy = 1.5
    assert land.evolve(rng)
    assert land.energy == 0.5
    assert land.life_forms() == {ARCHAEA}
    assert land.should_level_up()
    evolved = land.levelup()
    assert evolved.level == 1
    assert evolved.get_life_cell(0, 0) == land.get_life_cell(0, 0)
    assert evolved.get_terrain_cell(3, 3) == WATER
    assert not evolved.should_level_up()


def test_generation_needs_stored_energy(rng):
    land = LandMinigame()
    flood(land)
    land.set_life_cell(1, 1, ARCHAEA)
    before = [row[:] for row in land.life]
    for _ in range(20):
        assert not land.evolve(rng)
    assert land.life == before
    assert land.energy == 0.0

    land.ingest_item(Item.energy(EnergyKind.THERMAL, 2.5))
    assert land.evolve(rng)
    assert land.evolve(rng)
    assert land.energy == 0.5
    assert not land.evolve(rng)
    assert land.energy == 0.5
