from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from ..core.random import RandomSource
from ..items import EnergyItem, Item, ItemType, PhysicalForm, PhysicalItem, PhysicalMaterial
from .base import MAX_LEVEL, Area, SpawnPlan, check_level, grid_parts

logger = logging.getLogger(__name__)

ID = "land"
NAME = "Land"
DESCRIPTION = "Evolve life"

MIN_WIDTH = 100.0
MIN_HEIGHT = 100.0
BUFFER = 20.0
CELLS_PER_LEVEL = 4
CELL_SIZE = 4.0
GENERATION_COST = 1.0

DEFAULT_TERRAIN = PhysicalItem(PhysicalForm.LAND, PhysicalMaterial.MUD)
ARCHAEA = PhysicalItem(PhysicalForm.ARCHAEA, PhysicalMaterial.ADULT)


def cells_per_side(level: int) -> int:
    # Level 0 still gets one block of land to seed life on.
    return CELLS_PER_LEVEL * max(1, level)


def _random_1d(rng: RandomSource, here: int, bound: int) -> int:
    """here-1, here or here+1, clamped to [0, bound)."""
    x = here + rng.below(3)
    if x > 0:
        x -= 1
    return min(x, bound - 1)


@dataclass
class LandMinigame:
    """Terrain painted with ingested liquids and lumps, on which life evolves.

    The level tracks the highest number of distinct life forms seen alive at once.
    """

    max_achieved_complexity: int = 0
    energy: float = 0.0
    level: int = field(init=False)
    terrain: List[List[ItemType]] = field(init=False)
    life: List[List[Optional[ItemType]]] = field(init=False)

    id = ID

    def __post_init__(self) -> None:
        self.level = check_level(min(MAX_LEVEL, self.max_achieved_complexity))
        side = cells_per_side(self.level)
        self.terrain = [[DEFAULT_TERRAIN] * side for _ in range(side)]
        self.life = [[None] * side for _ in range(side)]

    @property
    def name(self) -> str:
        return NAME

    @property
    def description(self) -> str:
        return DESCRIPTION

    @property
    def width_in_cells(self) -> int:
        return len(self.terrain[0])

    @property
    def height_in_cells(self) -> int:
        return len(self.terrain)

    def area(self) -> Area:
        return Area(
            BUFFER + max(MIN_WIDTH, CELL_SIZE * self.width_in_cells),
            BUFFER + max(MIN_HEIGHT, CELL_SIZE * self.height_in_cells),
        )

    def area_with_header(self) -> Area:
        return self.area().with_header()

    def ingest_item(self, item: Item, rng: Optional[RandomSource] = None) -> float:
        """Energy is stored; a unit of liquid or lump paints a random terrain cell.

        Painting needs the world random source and at least two units, so that
        something is always left over to respawn.
        """
        t = item.type
        if isinstance(t, EnergyItem):
            self.energy += item.amount
            return item.amount
        if isinstance(t, PhysicalItem) and t.form in (PhysicalForm.LIQUID, PhysicalForm.LUMP):
            if item.amount <= 1.0 or rng is None:
                return 0.0
            x, y = self.random_coordinate(rng)
            old = self.set_terrain_cell(x, y, t)
            logger.debug("Land cell (%d, %d) changed from %s to %s", x, y, old, t)
            return 1.0
        return 0.0

    def set_terrain_cell(self, x: int, y: int, value: ItemType) -> ItemType:
        old = self.terrain[y][x]
        self.terrain[y][x] = value
        return old

    def get_terrain_cell(self, x: int, y: int) -> ItemType:
        return self.terrain[y][x]

    def set_life_cell(self, x: int, y: int, value: Optional[ItemType]) -> Optional[ItemType]:
        """Returns the life that was replaced."""
        old = self.life[y][x]
        self.life[y][x] = value
        return old

    def get_life_cell(self, x: int, y: int) -> Optional[ItemType]:
        return self.life[y][x]

    def _is_water(self, x: int, y: int) -> bool:
        terrain = self.terrain[y][x]
        return isinstance(terrain, PhysicalItem) and terrain.material.is_water()

    def random_coordinate(self, rng: RandomSource) -> Tuple[int, int]:
        return rng.below(self.width_in_cells), rng.below(self.height_in_cells)

    def random_neighbor(self, rng: RandomSource, here: Tuple[int, int]) -> Tuple[int, int]:
        """A random cell within one step of ``here``; may be ``here`` itself."""
        return (
            _random_1d(rng, here[0], self.width_in_cells),
            _random_1d(rng, here[1], self.height_in_cells),
        )

    def evolve(self, rng: RandomSource) -> bool:
        """Spend one unit of stored energy on a generation.

        Returns False, leaving the board untouched, when less than one unit
        of energy is stored.

        Archaea die off water and spread to a random empty water neighbour.
        An empty world gets a chance to seed archaea on a random water cell.
        Scanning is row-major, so spread favours the top-left corner.
        """
        if self.energy < GENERATION_COST:
            return False
        self.energy -= GENERATION_COST
        alive = [
            (x, y)
            for y in range(self.height_in_cells)
            for x in range(self.width_in_cells)
            if self.life[y][x] is not None
        ]
        for x, y in alive:
            cell = self.life[y][x]
            if cell != ARCHAEA:
                continue
            if not self._is_water(x, y):
                self.set_life_cell(x, y, None)
            nx, ny = self.random_neighbor(rng, (x, y))
            if self._is_water(nx, ny) and self.life[ny][nx] is None:
                self.set_life_cell(nx, ny, ARCHAEA)

        if not alive:
            x, y = self.random_coordinate(rng)
            if self._is_water(x, y):
                self.set_life_cell(x, y, ARCHAEA)
                logger.info("Archaea emerged at (%d, %d)", x, y)

        complexity = len(self.life_forms())
        if complexity > self.max_achieved_complexity:
            self.max_achieved_complexity = min(MAX_LEVEL, complexity)
        return True

    def life_forms(self) -> Set[ItemType]:
        return {cell for row in self.life for cell in row if cell is not None}

    def should_level_up(self) -> bool:
        return self.max_achieved_complexity > self.level

    def levelup(self, rng: Optional[RandomSource] = None) -> "LandMinigame":
        successor = LandMinigame(self.max_achieved_complexity, self.energy)
        # Carry over the overlapping corner of the old board.
        for y in range(min(self.height_in_cells, successor.height_in_cells)):
            for x in range(min(self.width_in_cells, successor.width_in_cells)):
                successor.terrain[y][x] = self.terrain[y][x]
                successor.life[y][x] = self.life[y][x]
        return successor

    def spawn(self) -> SpawnPlan:
        parts = grid_parts("cell", self.width_in_cells, self.height_in_cells, CELL_SIZE)
        return SpawnPlan(ID, NAME, self.area(), tuple(parts))


__all__ = ["LandMinigame", "ID", "NAME", "DESCRIPTION", "ARCHAEA", "DEFAULT_TERRAIN"]
