from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..core.random import RandomSource
from ..items import SOLID_FORMS, Item, PhysicalForm, PhysicalItem
from .base import MAX_LEVEL, Area, SpawnPlan, check_level, grid_parts
from .storage import ItemStore

logger = logging.getLogger(__name__)

ID = "chest"
NAME = "chest"
NAME_WITH_BAGS = "chest with bags"
NAME_WITH_BARRELS = "barrels and chest with bags"
NAME_WITH_TANKS = "tanks, barrels, and chest with bags"
DESCRIPTION = "Store your items!"

STORAGE_SIZE = 50.0
ITEMS_PER_ROW = 5
VISIBLE_ROWS = 3

_WITH_POWDER = SOLID_FORMS | {PhysicalForm.POWDER}
_WITH_LIQUID = _WITH_POWDER | {PhysicalForm.LIQUID}


@dataclass
class ChestMinigame:
    """Storage-style minigame for physical items.

    Capacity doubles every level and the set of accepted forms only widens.
    """

    level: int = 0
    storage: ItemStore[PhysicalItem] = field(default_factory=ItemStore)
    filter: str = ""

    id = ID

    def __post_init__(self) -> None:
        check_level(self.level)

    @property
    def name(self) -> str:
        if self.level <= 4:
            return NAME
        if self.level <= 9:
            return NAME_WITH_BAGS
        if self.level <= 19:
            return NAME_WITH_BARRELS
        return NAME_WITH_TANKS

    @property
    def description(self) -> str:
        return DESCRIPTION

    def area(self) -> Area:
        return Area(STORAGE_SIZE * ITEMS_PER_ROW, STORAGE_SIZE * VISIBLE_ROWS)

    def area_with_header(self) -> Area:
        return self.area().with_header()

    def capacity(self) -> float:
        return 2.0 ** self.level

    def total_stored(self) -> float:
        return self.storage.total()

    def can_accept(self, item: Item) -> bool:
        if not isinstance(item.type, PhysicalItem):
            return False
        form = item.type.form
        if self.level <= 4:
            return form in SOLID_FORMS
        if self.level <= 9:
            return form in _WITH_POWDER
        if self.level <= 19:
            return form in _WITH_LIQUID
        return True

    def add_item(self, item: Item) -> bool:
        """Store ``item``; returns True once the chest is at or over capacity."""
        if not self.can_accept(item):
            return False
        self.storage.add(item.type, item.amount)  # type: ignore[arg-type]
        return self.total_stored() >= self.capacity()

    def ingest_item(self, item: Item) -> float:
        if not self.can_accept(item):
            return 0.0
        if self.add_item(item):
            logger.debug("Chest full (%.1f/%.1f)", self.total_stored(), self.capacity())
        return item.amount

    def remove_item(self, item_type: PhysicalItem, amount: float) -> Optional[Item]:
        """Take up to ``amount`` of ``item_type`` out; None if none is stored."""
        removed = self.storage.remove(item_type, amount)
        if removed <= 0.0:
            return None
        return Item(item_type, removed)

    def filtered_items(self, text: Optional[str] = None) -> List[Tuple[PhysicalItem, float]]:
        """Stored entries whose name contains ``text`` (defaults to the chest's filter)."""
        return self.storage.filtered(self.filter if text is None else text)

    def should_level_up(self) -> bool:
        return self.level < MAX_LEVEL and self.total_stored() >= self.capacity()

    def levelup(self, rng: Optional[RandomSource] = None) -> "ChestMinigame":
        return ChestMinigame(min(MAX_LEVEL, self.level + 1), self.storage.copy(), self.filter)

    def spawn(self) -> SpawnPlan:
        return SpawnPlan(ID, self.name, self.area(), tuple(grid_parts("slot", ITEMS_PER_ROW, VISIBLE_ROWS, STORAGE_SIZE)))


__all__ = ["ChestMinigame", "ID", "DESCRIPTION"]
