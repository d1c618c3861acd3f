from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..core.random import RandomSource
from ..items import Item, PhysicalForm, PhysicalItem, PhysicalMaterial
from .base import MAX_LEVEL, Area, ClickType, SpawnPart, SpawnPlan, level_by_log2

logger = logging.getLogger(__name__)

ID = "primordial_ocean"
NAME = "Primordial Ocean"
DESCRIPTION = "Infinitely deep, the source of water and mud."

BASE_SIZE = 60.0
MAX_SIZE_MULTIPLIER = 2.0


@dataclass
class PrimordialOceanMinigame:
    """Accumulator-style minigame fed with salt water.

    Clicking the ocean draws out salt water (short click) or mud (long click).
    """

    salt_water_collected: float = 0.0
    level: int = field(init=False)
    radius: float = field(init=False)

    id = ID

    def __post_init__(self) -> None:
        self.level = level_by_log2(self.salt_water_collected)
        self.radius = BASE_SIZE * (1.0 + (self.level / MAX_LEVEL) * (MAX_SIZE_MULTIPLIER - 1.0))

    @property
    def name(self) -> str:
        return NAME

    @property
    def description(self) -> str:
        return DESCRIPTION

    def area(self) -> Area:
        return Area.square(self.radius * 2.0)

    def area_with_header(self) -> Area:
        return self.area().with_header()

    @staticmethod
    def item_is_valid(item: Item) -> bool:
        return isinstance(item.type, PhysicalItem) and item.type.material is PhysicalMaterial.SALT_WATER

    def ingest_item(self, item: Item) -> float:
        if not self.item_is_valid(item):
            return 0.0
        self.salt_water_collected += item.amount
        logger.debug("Ocean collected %.2f salt water (total %.2f)", item.amount, self.salt_water_collected)
        return item.amount

    def click(self, click_type: ClickType) -> List[Item]:
        if click_type is ClickType.SHORT:
            return [Item.physical(PhysicalForm.LIQUID, PhysicalMaterial.SALT_WATER)]
        if click_type is ClickType.LONG:
            return [Item.physical(PhysicalForm.LUMP, PhysicalMaterial.MUD)]
        return []

    def should_level_up(self) -> bool:
        if self.level >= MAX_LEVEL:
            return False
        return level_by_log2(self.salt_water_collected) > self.level

    def levelup(self, rng: Optional[RandomSource] = None) -> "PrimordialOceanMinigame":
        return PrimordialOceanMinigame(self.salt_water_collected)

    def spawn(self) -> SpawnPlan:
        side = self.radius * 2.0
        return SpawnPlan(ID, NAME, self.area(), (SpawnPart("ocean", 0.0, 0.0, side, side),))


__all__ = ["PrimordialOceanMinigame", "ID", "NAME", "DESCRIPTION", "BASE_SIZE", "MAX_SIZE_MULTIPLIER"]
