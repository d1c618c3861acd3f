"""Ball breaker: a grid of blocks broken by balls made from ingested material.

The bottom of the board has a paddle the player moves left and right. Balls
bounce off or break blocks depending on which is harder. Breaking every block
levels the minigame up, which rebuilds the board from the random stream.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..core.random import RandomSource
from ..items import Item, PhysicalForm, PhysicalItem, PhysicalMaterial
from .base import MAX_LEVEL, Area, SpawnPart, SpawnPlan, check_level

logger = logging.getLogger(__name__)

ID = "ball_breaker"
NAME = "ball breaker"
DESCRIPTION = "Throw balls to break blocks!"

BLOCK_SIZE = 20.0
BASE_BLOCKS = 10
FIRST_BLOCK_ROW = 3

M = PhysicalMaterial

# Index drawn by random_resource -> block material.
RESOURCE_LADDER: Tuple[PhysicalMaterial, ...] = (
    M.MUD,
    M.DIRT,
    M.SANDSTONE,
    M.GRANITE,
    M.MARBLE,
    M.OBSIDIAN,
    M.COPPER,
    M.TIN,
    M.IRON,
    M.SILVER,
    M.GOLD,
    M.DIAMOND,
    M.AMETHYST,
    M.FRESH_WATER,
    M.MOSS,
)

TOUGHNESS: Dict[PhysicalMaterial, int] = {
    M.MUD: 1,
    M.DIRT: 2,
    M.SANDSTONE: 3,
    M.GRANITE: 4,
    M.MARBLE: 4,
    M.OBSIDIAN: 2,
    M.COPPER: 4,
    M.TIN: 4,
    M.IRON: 8,
    M.SILVER: 4,
    M.GOLD: 3,
    M.DIAMOND: 6,
    M.AMETHYST: 6,
    M.FRESH_WATER: 0,
    M.MOSS: 1,
}

DAMAGE: Dict[PhysicalMaterial, int] = {
    M.MUD: 2,
    M.DIRT: 3,
    M.SANDSTONE: 4,
    M.GRANITE: 4,
    M.MARBLE: 4,
    M.OBSIDIAN: 6,
    M.COPPER: 7,
    M.TIN: 7,
    M.BRONZE: 8,  # forged from copper and tin
    M.IRON: 10,
    M.SILVER: 4,
    M.GOLD: 3,
    M.DIAMOND: 11,
    M.AMETHYST: 4,
    M.FRESH_WATER: 1,
    M.MOSS: 0,
}

DEFAULT_TOUGHNESS = 16
DEFAULT_DAMAGE = 16


def resource_is_valid(material: PhysicalMaterial) -> bool:
    return material in RESOURCE_LADDER


def resource_toughness(material: PhysicalMaterial) -> int:
    return TOUGHNESS.get(material, DEFAULT_TOUGHNESS)


def resource_damage(material: PhysicalMaterial) -> int:
    return DAMAGE.get(material, DEFAULT_DAMAGE)


def random_resource(level: int, rng: RandomSource) -> PhysicalMaterial:
    """Block material for a level; level 0 is all mud and draws nothing."""
    index = 0 if level == 0 else 1 + rng.below(level)
    if index < len(RESOURCE_LADDER):
        return RESOURCE_LADDER[index]
    return M.UNOBTAINIUM


@dataclass
class Block:
    material: PhysicalMaterial

    @property
    def toughness(self) -> int:
        return resource_toughness(self.material)

    @property
    def damage(self) -> int:
        return resource_damage(self.material)


@dataclass
class Ball:
    material: PhysicalMaterial

    @property
    def toughness(self) -> int:
        return resource_toughness(self.material)

    @property
    def damage(self) -> int:
        return resource_damage(self.material)


@dataclass
class CollisionOutcome:
    block_broken: bool
    ball_broken: bool
    emitted: List[Item] = field(default_factory=list)


@dataclass
class BallBreakerMinigame:
    """Breakable-grid minigame. Build boards with ``BallBreakerMinigame.new``."""

    level: int
    blocks_per_row: int
    blocks_per_column: int
    blocks: Dict[Tuple[int, int], Block] = field(default_factory=dict)
    balls: Dict[int, Ball] = field(default_factory=dict)
    _next_ball: int = field(default=0, repr=False)

    id = ID

    @classmethod
    def new(cls, level: int, rng: RandomSource) -> "BallBreakerMinigame":
        """Roll a board: grid size first, then one material per block, row by row."""
        check_level(level)
        if level == 0:
            cols = rows = BASE_BLOCKS
        else:
            r = rng.next()
            cols = rows = BASE_BLOCKS + r % level
        board = cls(level, cols, rows)
        for y in range(FIRST_BLOCK_ROW, rows):
            for x in range(cols):
                board.blocks[(x, y)] = Block(random_resource(level, rng))
        logger.debug("Rolled ball breaker board %dx%d with %d blocks", cols, rows, len(board.blocks))
        return board

    @property
    def name(self) -> str:
        return NAME

    @property
    def description(self) -> str:
        return DESCRIPTION

    def area(self) -> Area:
        return Area(BLOCK_SIZE * self.blocks_per_row, BLOCK_SIZE * self.blocks_per_column)

    def area_with_header(self) -> Area:
        return self.area().with_header()

    def ingest_item(self, item: Item) -> float:
        """Turn one unit of a valid material into a ball."""
        t = item.type
        if not isinstance(t, PhysicalItem) or not resource_is_valid(t.material):
            return 0.0
        if item.amount < 1.0:
            return 0.0
        self.launch_ball(t.material)
        return 1.0

    def launch_ball(self, material: PhysicalMaterial) -> int:
        ball_id = self._next_ball
        self._next_ball += 1
        self.balls[ball_id] = Ball(material)
        return ball_id

    def collide(self, ball_id: int, block_pos: Tuple[int, int]) -> CollisionOutcome:
        """Resolve a ball/block contact; both may break in the same collision."""
        ball = self.balls.get(ball_id)
        block = self.blocks.get(block_pos)
        if ball is None or block is None:
            logger.warning("Ignoring collision with unknown ball %s or block %s", ball_id, block_pos)
            return CollisionOutcome(False, False)
        outcome = CollisionOutcome(
            block_broken=ball.damage >= block.toughness,
            ball_broken=block.damage >= ball.toughness,
        )
        if outcome.block_broken:
            del self.blocks[block_pos]
            outcome.emitted.append(Item.physical(PhysicalForm.BLOCK, block.material))
        if outcome.ball_broken:
            del self.balls[ball_id]
            outcome.emitted.append(Item.physical(PhysicalForm.BALL, ball.material))
        return outcome

    def lose_ball(self, ball_id: int) -> None:
        """A ball fell past the paddle."""
        self.balls.pop(ball_id, None)

    def is_cleared(self) -> bool:
        return not self.blocks

    def should_level_up(self) -> bool:
        return self.is_cleared() and self.level < MAX_LEVEL

    def levelup(self, rng: Optional[RandomSource] = None) -> "BallBreakerMinigame":
        if rng is None:
            raise ValueError("BallBreakerMinigame.levelup() needs the world random source")
        return BallBreakerMinigame.new(min(MAX_LEVEL, self.level + 1), rng)

    def block_center(self, x: int, y: int) -> Tuple[float, float]:
        return (
            BLOCK_SIZE * (x - self.blocks_per_row / 2.0 + 0.5),
            BLOCK_SIZE * (y - self.blocks_per_column / 2.0 + 0.5),
        )

    def spawn(self) -> SpawnPlan:
        parts = []
        for (x, y), block in sorted(self.blocks.items(), key=lambda kv: (kv[0][1], kv[0][0])):
            cx, cy = self.block_center(x, y)
            parts.append(
                SpawnPart("block", cx, cy, BLOCK_SIZE, BLOCK_SIZE, PhysicalItem(PhysicalForm.BLOCK, block.material))
            )
        paddle_y = -BLOCK_SIZE * (self.blocks_per_column / 2.0 - 0.5)
        parts.append(SpawnPart("paddle", 0.0, paddle_y, BLOCK_SIZE * 3, BLOCK_SIZE / 2))
        return SpawnPlan(ID, NAME, self.area(), tuple(parts))


__all__ = [
    "BallBreakerMinigame",
    "Ball",
    "Block",
    "CollisionOutcome",
    "ID",
    "NAME",
    "DESCRIPTION",
    "random_resource",
    "resource_is_valid",
    "resource_toughness",
    "resource_damage",
]
