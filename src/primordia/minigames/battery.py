from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Tuple

from ..core.random import RandomSource
from ..items import EnergyItem, EnergyKind, Item
from .base import MAX_LEVEL, Area, SpawnPlan, check_level, grid_parts
from .storage import ItemStore

logger = logging.getLogger(__name__)

ID = "battery"
NAME_FIRST = "spring"
NAME_SECOND = "spring and battery"
NAME_THIRD = "spring, battery, heat stone"
NAME_FOURTH = "tesseract"
DESCRIPTION = "Store your energy!"

STORAGE_SIZE = 50.0
SLOTS_PER_ROW = 3
VISIBLE_ROWS = 3

_FIRST: FrozenSet[EnergyKind] = frozenset({EnergyKind.KINETIC})
_SECOND = _FIRST | {EnergyKind.ELECTRIC}
_THIRD = _SECOND | {EnergyKind.THERMAL}


@dataclass
class BatteryMinigame:
    """Storage-style minigame for energy."""

    level: int = 0
    storage: ItemStore[EnergyItem] = field(default_factory=ItemStore)

    id = ID

    def __post_init__(self) -> None:
        check_level(self.level)

    @property
    def name(self) -> str:
        if self.level <= 9:
            return NAME_FIRST
        if self.level <= 19:
            return NAME_SECOND
        if self.level <= 49:
            return NAME_THIRD
        return NAME_FOURTH

    @property
    def description(self) -> str:
        return DESCRIPTION

    def area(self) -> Area:
        return Area(STORAGE_SIZE * SLOTS_PER_ROW, STORAGE_SIZE * VISIBLE_ROWS)

    def area_with_header(self) -> Area:
        return self.area().with_header()

    def capacity(self) -> float:
        return 2.0 ** self.level

    def total_stored(self) -> float:
        return self.storage.total()

    def can_accept(self, item: Item) -> bool:
        if not isinstance(item.type, EnergyItem):
            return False
        kind = item.type.kind
        if self.level <= 9:
            return kind in _FIRST
        if self.level <= 19:
            return kind in _SECOND
        if self.level <= 49:
            return kind in _THIRD
        return True

    def add_item(self, item: Item) -> bool:
        """Store ``item``; returns True once the battery is at or over capacity."""
        if not self.can_accept(item):
            return False
        self.storage.add(item.type, item.amount)  # type: ignore[arg-type]
        return self.total_stored() >= self.capacity()

    def ingest_item(self, item: Item) -> float:
        if not self.can_accept(item):
            return 0.0
        self.add_item(item)
        return item.amount

    def remove_item(self, item_type: EnergyItem, amount: float) -> Optional[Item]:
        removed = self.storage.remove(item_type, amount)
        if removed <= 0.0:
            return None
        return Item(item_type, removed)

    def stored(self) -> List[Tuple[EnergyItem, float]]:
        return self.storage.filtered()

    def should_level_up(self) -> bool:
        return self.level < MAX_LEVEL and self.total_stored() >= self.capacity()

    def levelup(self, rng: Optional[RandomSource] = None) -> "BatteryMinigame":
        return BatteryMinigame(min(MAX_LEVEL, self.level + 1), self.storage.copy())

    def spawn(self) -> SpawnPlan:
        return SpawnPlan(ID, self.name, self.area(), tuple(grid_parts("slot", SLOTS_PER_ROW, VISIBLE_ROWS, STORAGE_SIZE)))


__all__ = ["BatteryMinigame", "ID", "DESCRIPTION"]
