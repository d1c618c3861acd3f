from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..core.random import RandomSource
from ..items import AbstractKind, Item
from ..runes import Grid, Rune, match, rune_level
from .base import MAX_LEVEL, Area, SpawnPlan, check_level, grid_parts

logger = logging.getLogger(__name__)

ID = "rune"
NAME = "rune"
DESCRIPTION = "Draw runes!"

MIN_WIDTH = 100.0
MIN_HEIGHT = 100.0
BUFFER = 20.0
PIXEL_SIZE = 25.0
RUNE_TRIGGER_SECONDS = 2.0


def blocks_per_row(level: int) -> int:
    # 0 -> 1, 1 -> 2, 2 -> 2, 3 -> 3 ...
    if level % 2 == 0:
        return 1 + level // 2
    return 2 + level // 2


def blocks_per_column(level: int) -> int:
    # 0 -> 1, 1 -> 1, 2 -> 2, 3 -> 2 ...
    return 1 + level // 2


@dataclass
class RuneMinigame:
    """Drawing-style minigame: a pixel canvas that recognises runes.

    The canvas grows with level so that the next rune in the catalog just
    fits. Holding a recognised drawing for ``trigger_seconds`` emits the rune
    as an item and wipes the canvas; drawing the rune whose value equals the
    current level earns a level-up.
    """

    level: int = 0
    trigger_seconds: float = RUNE_TRIGGER_SECONDS
    pixels: Grid = field(init=False)
    ready_since: Optional[float] = field(default=None, init=False)
    highest_level_rune: Optional[Rune] = field(default=None, init=False)
    _level_earned: bool = field(default=False, init=False, repr=False)

    id = ID

    def __post_init__(self) -> None:
        check_level(self.level)
        self.pixels = [[False] * blocks_per_row(self.level) for _ in range(blocks_per_column(self.level))]

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
            BUFFER + max(MIN_WIDTH, PIXEL_SIZE * self.blocks_per_row),
            BUFFER + max(MIN_HEIGHT, PIXEL_SIZE * self.blocks_per_column),
        )

    def area_with_header(self) -> Area:
        return self.area().with_header()

    def ingest_item(self, item: Item) -> float:
        return 0.0

    # Canvas

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= y < len(self.pixels) and 0 <= x < len(self.pixels[y])

    def get_pixel(self, x: int, y: int) -> bool:
        return self._in_bounds(x, y) and self.pixels[y][x]

    def set_pixel(self, x: int, y: int, value: bool, now: Optional[float] = None) -> None:
        """Set a pixel; out-of-bounds writes are ignored.

        When ``now`` is given the ready timer is refreshed against the new drawing.
        """
        if not self._in_bounds(x, y):
            return
        self.pixels[y][x] = value
        if now is not None:
            self.refresh_ready(now)

    def toggle_pixel(self, x: int, y: int, now: Optional[float] = None) -> bool:
        value = not self.get_pixel(x, y)
        self.set_pixel(x, y, value, now)
        return value

    def clear(self) -> None:
        for row in self.pixels:
            for x in range(len(row)):
                row[x] = False
        self.ready_since = None

    def to_rune(self) -> Optional[Rune]:
        return match(self.pixels)

    # Ready timer

    @property
    def is_ready(self) -> bool:
        return self.ready_since is not None

    def refresh_ready(self, now: float) -> Optional[Rune]:
        """Start the ready timer on a match, stop it when the match is lost."""
        rune = self.to_rune()
        if rune is None:
            if self.ready_since is not None:
                logger.debug("Rune canvas no longer matches; ready cleared")
            self.ready_since = None
        elif self.ready_since is None:
            self.ready_since = now
            logger.debug("Rune %s drawn; ready since %.2f", rune.name, now)
        return rune

    def tick(self, now: float) -> List[Item]:
        """Fire the held rune once it has been ready for longer than the trigger."""
        if self.ready_since is None or now - self.ready_since <= self.trigger_seconds:
            return []
        rune = self.to_rune()
        self.ready_since = None
        if rune is None:
            return []
        self.set_highest_level_rune(rune)
        if rune.value == self.level:
            self._level_earned = True
        self.clear()
        logger.info("Rune %s triggered at level %d", rune.name, self.level)
        return [Item.abstract(AbstractKind.RUNE, rune.value)]

    # Progression

    def set_highest_level_rune(self, rune: Rune) -> None:
        if self.highest_level_rune is None or rune_level(rune) > rune_level(self.highest_level_rune):
            self.highest_level_rune = rune

    def expected_level(self) -> int:
        if self.highest_level_rune is None:
            return 0
        return rune_level(self.highest_level_rune)

    def should_level_up(self) -> bool:
        return self._level_earned and self.level < MAX_LEVEL

    def levelup(self, rng: Optional[RandomSource] = None) -> "RuneMinigame":
        successor = RuneMinigame(min(MAX_LEVEL, self.level + 1), self.trigger_seconds)
        successor.highest_level_rune = self.highest_level_rune
        return successor

    def spawn(self) -> SpawnPlan:
        parts = grid_parts("pixel", self.blocks_per_row, self.blocks_per_column, PIXEL_SIZE)
        return SpawnPlan(ID, NAME, self.area(), tuple(parts))


__all__ = [
    "RuneMinigame",
    "ID",
    "NAME",
    "DESCRIPTION",
    "RUNE_TRIGGER_SECONDS",
    "blocks_per_row",
    "blocks_per_column",
]
