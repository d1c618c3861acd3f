from primordia.items import Item, PhysicalForm, PhysicalItem, PhysicalMaterial
from primordia.minigames import LifeMinigame

A = PhysicalItem(PhysicalForm.ALGAE, PhysicalMaterial.ADULT)
B = PhysicalItem(PhysicalForm.BACTERIA, PhysicalMaterial.ADULT)


def test_grid_sized_like_rune_canvas():
    assert (LifeMinigame().blocks_per_row, LifeMinigame().blocks_per_column) == (1, 1)
    board = LifeMinigame(16.0)
    assert board.level == 5
    assert (board.blocks_per_row, board.blocks_per_column) == (4, 3)
    assert board.area().width == 120.0


def test_blinker_oscillates_and_newborns_take_majority_type():
    board = LifeMinigame(16.0)
    board.set_cell(1, 0, A)
    board.set_cell(1, 1, B)
    board.set_cell(1, 2, A)
    board.evolve()
    assert board.get_cell(0, 1) == A
    assert board.get_cell(1, 1) == B
    assert board.get_cell(2, 1) == A
    assert board.get_cell(1, 0) is None
    assert board.get_cell(1, 2) is None
    assert board.population() == 3


def test_lonely_cells_die_and_no_wraparound():
    board = LifeMinigame(16.0)
    board.set_cell(0, 0, A)
    board.set_cell(3, 0, A)
    board.evolve()
    assert board.population() == 0


def test_pick_cell_extracts_and_levels():
    board = LifeMinigame()
    assert board.pick_cell(0, 0) == []
    board.set_cell(0, 0, A)
    assert board.pick_cell(0, 0) == [Item(A, 1.0)]
    assert board.get_cell(0, 0) is None
    assert board.should_level_up()
    assert board.levelup().blocks_per_row == 2


def test_life_ingests_nothing_and_ignores_out_of_bounds():
    board = LifeMinigame()
    assert board.ingest_item(Item(A)) == 0.0
    board.set_cell(9, 9, A)
    assert board.get_cell(9, 9) is None
    board.set_cell(0, 0, A)
    board.clear()
    assert board.population() == 0
