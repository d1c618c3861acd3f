from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Protocol, Tuple

from ..core.random import RandomSource
from ..items import Item, ItemType

MAX_LEVEL = 99
META_HEIGHT = 25.0  # header strip above every minigame


@dataclass(frozen=True)
class Area:
    """Axis-aligned footprint in world units."""

    width: float
    height: float

    @classmethod
    def square(cls, side: float) -> "Area":
        return cls(side, side)

    def with_header(self) -> "Area":
        return Area(self.width, self.height + META_HEIGHT)

    def contains(self, dx: float, dy: float) -> bool:
        """Whether an offset from the area's center falls inside it."""
        return abs(dx) <= self.width / 2 and abs(dy) <= self.height / 2


class ClickType(Enum):
    SHORT = "short"
    LONG = "long"
    INVALID = "invalid"

    @classmethod
    def classify(cls, pressed_seconds: float, long_threshold: float = 1.0) -> "ClickType":
        """Classify a press by its duration; negative durations are invalid."""
        if pressed_seconds < 0:
            return cls.INVALID
        if pressed_seconds >= long_threshold:
            return cls.LONG
        return cls.SHORT


@dataclass(frozen=True)
class SpawnPart:
    """One piece of a minigame's visual layout, relative to its center."""

    role: str
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    item: Optional[ItemType] = None


@dataclass(frozen=True)
class SpawnPlan:
    """What the host should build for a minigame; no rendering happens here."""

    minigame_id: str
    name: str
    area: Area
    parts: Tuple[SpawnPart, ...] = field(default_factory=tuple)


class Minigame(Protocol):
    """Capability set shared by every minigame state class."""

    id: str
    level: int

    @property
    def name(self) -> str:
        ...

    @property
    def description(self) -> str:
        ...

    def area(self) -> Area:
        ...

    def ingest_item(self, item: Item) -> float:
        ...

    def should_level_up(self) -> bool:
        ...

    def levelup(self, rng: Optional[RandomSource] = None) -> "Minigame":
        ...

    def spawn(self) -> SpawnPlan:
        ...


def level_by_log2(total: float) -> int:
    """0 when nothing is accumulated, else ``floor(log2(total)) + 1`` capped at MAX_LEVEL."""
    if total <= 0:
        return 0
    return max(0, min(MAX_LEVEL, int(math.log2(total) + 1.0)))


def check_level(level: int) -> int:
    if not 0 <= level <= MAX_LEVEL:
        raise ValueError(f"Invalid level: {level}; expected 0..{MAX_LEVEL}")
    return level


def grid_parts(role: str, cols: int, rows: int, cell: float) -> List[SpawnPart]:
    """Cells of a centered grid, row 0 at the top."""
    dx = -cell * (cols - 1) / 2.0
    dy = cell * (rows - 1) / 2.0
    return [
        SpawnPart(role, x * cell + dx, dy - y * cell, cell, cell)
        for y in range(rows)
        for x in range(cols)
    ]


__all__ = [
    "MAX_LEVEL",
    "META_HEIGHT",
    "Area",
    "ClickType",
    "SpawnPart",
    "SpawnPlan",
    "Minigame",
    "level_by_log2",
    "check_level",
    "grid_parts",
]
