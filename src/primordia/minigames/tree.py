from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..core.random import RandomSource
from ..items import Item, PhysicalForm, PhysicalItem, PhysicalMaterial
from .base import MAX_LEVEL, Area, SpawnPart, SpawnPlan, level_by_log2

logger = logging.getLogger(__name__)

ID = "tree"
NAME = "Tree"
DESCRIPTION = "Pick fruits from the tree!"
AREA = Area(300.0, 300.0)

BASE_INTERVAL = 10.0
INTERVAL_STEP = 0.5
MIN_INTERVAL = 1.0
BASE_FRUIT_CAP = 1
LEVELS_PER_EXTRA_FRUIT = 4
FRUIT_RADIUS = 8.0


@dataclass
class TreeMinigame:
    """Growth-style minigame: fruit ripens over time and is picked by clicking."""

    picked: int = 0
    fruit: PhysicalMaterial = PhysicalMaterial.APPLE
    base_interval: float = BASE_INTERVAL
    interval_step: float = INTERVAL_STEP
    min_interval: float = MIN_INTERVAL
    base_fruit_cap: int = BASE_FRUIT_CAP
    level: int = field(init=False)
    count: int = field(default=0, init=False)
    last_fruit_time: Optional[float] = field(default=None, init=False)

    id = ID

    def __post_init__(self) -> None:
        self.level = level_by_log2(self.picked)

    @property
    def name(self) -> str:
        return NAME

    @property
    def description(self) -> str:
        return DESCRIPTION

    def area(self) -> Area:
        return AREA

    def area_with_header(self) -> Area:
        return self.area().with_header()

    def ingest_item(self, item: Item) -> float:
        return 0.0

    def max_fruit(self) -> int:
        return self.base_fruit_cap + self.level // LEVELS_PER_EXTRA_FRUIT

    def growth_interval(self) -> float:
        return max(self.min_interval, self.base_interval - self.interval_step * self.level)

    def tick(self, now: float) -> List[Item]:
        """Ripen one fruit per interval up to the cap. Fruit is never dropped, only picked."""
        if self.last_fruit_time is None:
            self.last_fruit_time = now
            return []
        if self.count >= self.max_fruit():
            return []
        if now - self.last_fruit_time < self.growth_interval():
            return []
        self.last_fruit_time = now
        self.count += 1
        logger.debug("Tree grew a fruit (%d/%d)", self.count, self.max_fruit())
        return []

    def pick(self) -> List[Item]:
        if self.count <= 0:
            return []
        self.count -= 1
        self.picked += 1
        return [Item.physical(PhysicalForm.OBJECT, self.fruit)]

    def should_level_up(self) -> bool:
        if self.level >= MAX_LEVEL:
            return False
        return level_by_log2(self.picked) > self.level

    def levelup(self, rng: Optional[RandomSource] = None) -> "TreeMinigame":
        successor = TreeMinigame(
            self.picked,
            self.fruit,
            self.base_interval,
            self.interval_step,
            self.min_interval,
            self.base_fruit_cap,
        )
        successor.count = min(self.count, successor.max_fruit())
        successor.last_fruit_time = self.last_fruit_time
        return successor

    def spawn(self) -> SpawnPlan:
        parts = [SpawnPart("trunk", 0.0, 0.0, AREA.width, AREA.height)]
        for i in range(self.count):
            parts.append(
                SpawnPart(
                    "fruit",
                    (i - (self.count - 1) / 2.0) * FRUIT_RADIUS * 3,
                    40.0,
                    FRUIT_RADIUS * 2,
                    FRUIT_RADIUS * 2,
                    PhysicalItem(PhysicalForm.OBJECT, self.fruit),
                )
            )
        return SpawnPlan(ID, NAME, self.area(), tuple(parts))


__all__ = ["TreeMinigame", "ID", "NAME", "DESCRIPTION"]
