from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional

from ..core.random import RandomSource
from ..items import Item, ItemType
from .base import MAX_LEVEL, Area, SpawnPlan, grid_parts, level_by_log2
from .rune import blocks_per_column, blocks_per_row

logger = logging.getLogger(__name__)

ID = "life"
NAME = "Life"
DESCRIPTION = "Conway's Game of Life"

MIN_WIDTH = 100.0
MIN_HEIGHT = 100.0
BUFFER = 20.0
CELL_SIZE = 25.0

Cells = List[List[Optional[ItemType]]]


@dataclass
class LifeMinigame:
    """Conway's Game of Life over typed cells.

    Clicking a live cell extracts it as an item; extractions drive the level.
    The board does not ingest items.
    """

    extracted: float = 0.0
    energy: float = 0.0
    level: int = field(init=False)
    cells: Cells = field(init=False)

    id = ID

    def __post_init__(self) -> None:
        self.level = level_by_log2(self.extracted)
        self.cells = [[None] * blocks_per_row(self.level) for _ in range(blocks_per_column(self.level))]

    @property
    def name(self) -> str:
        return NAME

    @property
    def description(self) -> str:
        return DESCRIPTION

    @property
    def blocks_per_row(self) -> int:
        return blocks_per_row(self.level)

    @property
    def blocks_per_column(self) -> int:
        return blocks_per_column(self.level)

    def area(self) -> Area:
        return Area(
            BUFFER + max(MIN_WIDTH, CELL_SIZE * self.blocks_per_row),
            BUFFER + max(MIN_HEIGHT, CELL_SIZE * self.blocks_per_column),
        )

    def area_with_header(self) -> Area:
        return self.area().with_header()

    def ingest_item(self, item: Item) -> float:
        return 0.0

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= y < len(self.cells) and 0 <= x < len(self.cells[y])

    def set_cell(self, x: int, y: int, value: Optional[ItemType]) -> None:
        if self._in_bounds(x, y):
            self.cells[y][x] = value

    def get_cell(self, x: int, y: int) -> Optional[ItemType]:
        if not self._in_bounds(x, y):
            return None
        return self.cells[y][x]

    def clear(self) -> None:
        for row in self.cells:
            for x in range(len(row)):
                row[x] = None

    def pick_cell(self, x: int, y: int) -> List[Item]:
        """Extract a live cell as one unit of its item type."""
        cell = self.get_cell(x, y)
        if cell is None:
            return []
        self.cells[y][x] = None
        self.extracted += 1.0
        return [Item(cell, 1.0)]

    def _neighbors(self, x: int, y: int) -> List[ItemType]:
        found = []
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                cell = self.get_cell(x + dx, y + dy)
                if cell is not None:
                    found.append(cell)
        return found

    def evolve(self) -> None:
        """One generation of B3/S23 on a bounded board.

        A newborn cell takes the most common type among its three parents.
        """
        nxt: Cells = [[None] * len(row) for row in self.cells]
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                neighbors = self._neighbors(x, y)
                if cell is not None and len(neighbors) in (2, 3):
                    nxt[y][x] = cell
                elif cell is None and len(neighbors) == 3:
                    nxt[y][x] = Counter(neighbors).most_common(1)[0][0]
        self.cells = nxt

    def population(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell is not None)

    def should_level_up(self) -> bool:
        if self.level >= MAX_LEVEL:
            return False
        return level_by_log2(self.extracted) > self.level

    def levelup(self, rng: Optional[RandomSource] = None) -> "LifeMinigame":
        return LifeMinigame(self.extracted, self.energy)

    def spawn(self) -> SpawnPlan:
        parts = grid_parts("cell", self.blocks_per_row, self.blocks_per_column, CELL_SIZE)
        return SpawnPlan(ID, NAME, self.area(), tuple(parts))


__all__ = ["LifeMinigame", "ID", "NAME", "DESCRIPTION"]
