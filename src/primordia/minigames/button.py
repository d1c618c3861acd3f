from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..core.random import RandomSource
from ..items import AbstractKind, Item
from .base import MAX_LEVEL, Area, ClickType, SpawnPart, SpawnPlan, level_by_log2

logger = logging.getLogger(__name__)

ID = "button"
NAME = "Button"
DESCRIPTION = "Click the button, get clicks!"
AREA = Area(200.0, 220.0)

SHORT_CLICK = 0
LONG_CLICK = 1


@dataclass
class ButtonMinigame:
    """Counter-style minigame: every click emits a click item and counts."""

    count: int = 0
    level: int = field(init=False)

    id = ID

    def __post_init__(self) -> None:
        self.level = level_by_log2(self.count)

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

    def click(self, click_type: ClickType) -> List[Item]:
        if click_type is ClickType.INVALID:
            return []
        self.count += 1
        variant = SHORT_CLICK if click_type is ClickType.SHORT else LONG_CLICK
        logger.debug("Button clicked (%s); count=%d", click_type.value, self.count)
        return [Item.abstract(AbstractKind.CLICK, variant)]

    def should_level_up(self) -> bool:
        if self.level >= MAX_LEVEL:
            return False
        return level_by_log2(self.count) > self.level

    def levelup(self, rng: Optional[RandomSource] = None) -> "ButtonMinigame":
        return ButtonMinigame(self.count)

    def spawn(self) -> SpawnPlan:
        return SpawnPlan(ID, NAME, self.area(), (SpawnPart("button", 0.0, 0.0, 180.0, 180.0),))


__all__ = ["ButtonMinigame", "ID", "NAME", "DESCRIPTION"]
