"""Rune catalog and exact-shape matching over boolean pixel grids.

Grids are lists of rows (``grid[y][x]``). A drawing is matched by cropping it
to its bounding box and comparing it cell by cell against the catalog. There
is no rotation or mirroring: a rotated rune is a different drawing.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

Grid = List[List[bool]]

T = True
F = False


class Rune(Enum):
    INCLUSIVE_SELF = 0
    CONNECTOR = 1
    EXCLUSIVE_SELF = 2
    SHELTER = 3
    INCLUSIVE_OTHER = 4
    FORCE = 5
    EXCLUSIVE_OTHER = 6

    @property
    def pattern(self) -> Grid:
        return [list(row) for row in RUNE_PATTERNS[self]]

    @property
    def dimensions(self) -> Tuple[int, int]:
        rows = RUNE_PATTERNS[self]
        return len(rows[0]), len(rows)


RUNE_PATTERNS: Dict[Rune, Tuple[Tuple[bool, ...], ...]] = {
    Rune.INCLUSIVE_SELF: ((T,),),
    Rune.CONNECTOR: ((T, T),),
    Rune.EXCLUSIVE_SELF: (
        (T, T),
        (T, T),
    ),
    Rune.SHELTER: (
        (T, T, T),
        (T, F, T),
    ),
    Rune.INCLUSIVE_OTHER: (
        (T, T, T),
        (T, F, T),
        (T, T, T),
    ),
    Rune.FORCE: (
        (T, T, F, F),
        (T, F, T, T),
        (T, T, T, F),
    ),
    Rune.EXCLUSIVE_OTHER: (
        (T, T, T, T),
        (T, F, F, T),
        (T, F, F, T),
        (T, T, T, T),
    ),
}

# (width, height) -> rune; each catalog entry has unique dimensions.
_BY_DIMENSIONS: Dict[Tuple[int, int], Rune] = {r.dimensions: r for r in Rune}


def normalize(grid: Sequence[Sequence[bool]]) -> Grid:
    """Crop a grid to the bounding box of its set cells.

    Empty or all-false input yields an empty grid.
    """
    rows = [list(row) for row in grid]
    set_rows = [y for y, row in enumerate(rows) if any(row)]
    if not set_rows:
        return []
    top, bottom = set_rows[0], set_rows[-1]
    set_cols = [x for row in rows for x, cell in enumerate(row) if cell]
    left, right = min(set_cols), max(set_cols)
    cropped: Grid = []
    for row in rows[top:bottom + 1]:
        padded = row + [False] * (right + 1 - len(row))
        cropped.append(padded[left:right + 1])
    return cropped


def match(grid: Sequence[Sequence[bool]]) -> Optional[Rune]:
    """Return the catalog rune drawn in ``grid``, or None."""
    cropped = normalize(grid)
    if not cropped:
        return None
    dims = (len(cropped[0]), len(cropped))
    rune = _BY_DIMENSIONS.get(dims)
    if rune is None:
        return None
    if cropped != rune.pattern:
        return None
    logger.debug("Matched rune %s", rune.name)
    return rune


def from_value(value: int) -> Optional[Rune]:
    try:
        return Rune(value)
    except ValueError:
        return None


def rune_level(rune: Rune) -> int:
    """Canvas level unlocked by drawing ``rune`` (1 for the first rune)."""
    return rune.value + 1


def level_to_rune(level: int) -> Optional[Rune]:
    """Inverse of rune_level; None outside 1..7."""
    if level < 1:
        return None
    return from_value(level - 1)


__all__ = [
    "Grid",
    "Rune",
    "RUNE_PATTERNS",
    "normalize",
    "match",
    "from_value",
    "rune_level",
    "level_to_rune",
]
