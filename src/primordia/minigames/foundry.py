from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional

from ..core.random import RandomSource
from ..errors import UnsupportedVariant
from ..items import (
    AbstractItem,
    AbstractKind,
    EnergyItem,
    EnergyKind,
    Item,
    ItemType,
    PhysicalForm,
    PhysicalItem,
)
from .base import MAX_LEVEL, Area, SpawnPart, SpawnPlan, level_by_log2

logger = logging.getLogger(__name__)

ID = "foundry"
NAME = "Foundry"
DESCRIPTION = "Transmute items through heat."
AREA = Area(150.0, 150.0)

COOK_PERIOD_SECONDS = 1.0

CLICK_PRODUCTS = {0: EnergyKind.THERMAL, 1: EnergyKind.KINETIC}


def transmute(item_type: ItemType) -> ItemType:
    """Fixed transmutation table: clicks become energy, ores melt."""
    if isinstance(item_type, AbstractItem) and item_type.kind is AbstractKind.CLICK:
        kind = CLICK_PRODUCTS.get(item_type.variant)
        if kind is None:
            raise UnsupportedVariant(item_type, "transmute")
        return EnergyItem(kind)
    if isinstance(item_type, PhysicalItem) and item_type.form is PhysicalForm.ORE:
        return PhysicalItem(PhysicalForm.LIQUID, item_type.material)
    return item_type


@dataclass
class FoundryMinigame:
    """Queue/cook-style minigame.

    Clicks wait in a priority queue and ores in a regular one. Each cook
    period pops one item (priority first), transmutes it and emits the result.
    Only regular items count towards ``total_cooked``, which drives the level.
    """

    total_cooked: float = 0.0
    heat: float = 0.0
    cooking: Deque[Item] = field(default_factory=deque)
    priority_cooking: Deque[Item] = field(default_factory=deque)
    cook_period: float = COOK_PERIOD_SECONDS
    level: int = field(init=False)
    last_cook: Optional[float] = field(default=None, init=False)

    id = ID

    def __post_init__(self) -> None:
        self.level = level_by_log2(self.total_cooked)

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
        t = item.type
        if isinstance(t, EnergyItem):
            if t.kind is not EnergyKind.THERMAL:
                return 0.0
            self.heat += item.amount
        elif isinstance(t, AbstractItem):
            if t.kind is not AbstractKind.CLICK or t.variant not in CLICK_PRODUCTS:
                return 0.0
            self.priority_cooking.append(item)
        elif isinstance(t, PhysicalItem):
            if t.form is not PhysicalForm.ORE:
                return 0.0
            self.cooking.append(item)
        else:
            return 0.0
        logger.debug("Foundry ingested %s x%.2f", t, item.amount)
        return item.amount

    def tick(self, now: float) -> List[Item]:
        """Cook at most one queued item per period."""
        if self.last_cook is None:
            self.last_cook = now
            return []
        if now - self.last_cook < self.cook_period:
            return []
        if self.priority_cooking:
            raw = self.priority_cooking.popleft()
            self.last_cook = now
            return [Item(transmute(raw.type), raw.amount)]
        if not self.cooking:
            return []
        raw = self.cooking.popleft()
        self.last_cook = now
        self.total_cooked += raw.amount
        return [Item(transmute(raw.type), raw.amount)]

    def should_level_up(self) -> bool:
        if self.level >= MAX_LEVEL:
            return False
        return level_by_log2(self.total_cooked) > self.level

    def levelup(self, rng: Optional[RandomSource] = None) -> "FoundryMinigame":
        successor = FoundryMinigame(
            self.total_cooked,
            self.heat,
            deque(self.cooking),
            deque(self.priority_cooking),
            self.cook_period,
        )
        successor.last_cook = self.last_cook
        return successor

    def spawn(self) -> SpawnPlan:
        parts = (
            SpawnPart("furnace", 0.0, 0.0, 120.0, 120.0),
            SpawnPart("heat_meter", 65.0, 0.0, 10.0, 120.0),
        )
        return SpawnPlan(ID, NAME, self.area(), parts)


__all__ = ["FoundryMinigame", "ID", "NAME", "DESCRIPTION", "COOK_PERIOD_SECONDS", "transmute"]
