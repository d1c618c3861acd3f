"""Minigame state machines and the closed catalog of minigame kinds."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from ..config import GameConfig
from ..core.random import RandomSource
from .ball_breaker import BallBreakerMinigame
from .base import MAX_LEVEL, Area, ClickType, Minigame, SpawnPart, SpawnPlan
from .battery import BatteryMinigame
from .button import ButtonMinigame
from .chest import ChestMinigame
from .foundry import FoundryMinigame
from .land import LandMinigame
from .life import LifeMinigame
from .primordial_ocean import PrimordialOceanMinigame
from .rune import RuneMinigame
from .storage import ItemStore
from .tree import TreeMinigame

Factory = Callable[[GameConfig, RandomSource], Minigame]

# id -> fresh level-0 state
MINIGAME_KINDS: Dict[str, Factory] = {
    ButtonMinigame.id: lambda cfg, rng: ButtonMinigame(),
    PrimordialOceanMinigame.id: lambda cfg, rng: PrimordialOceanMinigame(),
    ChestMinigame.id: lambda cfg, rng: ChestMinigame(),
    BatteryMinigame.id: lambda cfg, rng: BatteryMinigame(),
    RuneMinigame.id: lambda cfg, rng: RuneMinigame(0, cfg.rune_trigger_seconds),
    FoundryMinigame.id: lambda cfg, rng: FoundryMinigame(cook_period=cfg.cook_period_seconds),
    BallBreakerMinigame.id: lambda cfg, rng: BallBreakerMinigame.new(0, rng),
    TreeMinigame.id: lambda cfg, rng: TreeMinigame(
        base_interval=cfg.tree_base_interval,
        interval_step=cfg.tree_interval_step,
        min_interval=cfg.tree_min_interval,
        base_fruit_cap=cfg.tree_base_fruit_cap,
    ),
    LandMinigame.id: lambda cfg, rng: LandMinigame(),
    LifeMinigame.id: lambda cfg, rng: LifeMinigame(),
}


def create_minigame(
    minigame_id: str, config: Optional[GameConfig] = None, rng: Optional[RandomSource] = None
) -> Minigame:
    """Build the level-0 state for ``minigame_id``.

    Raises KeyError for ids outside the catalog.
    """
    try:
        factory = MINIGAME_KINDS[minigame_id]
    except KeyError:
        raise KeyError(f"Unknown minigame id: {minigame_id}") from None
    return factory(config or GameConfig(), rng or RandomSource())


__all__ = [
    "MAX_LEVEL",
    "Area",
    "ClickType",
    "Minigame",
    "SpawnPart",
    "SpawnPlan",
    "ItemStore",
    "ButtonMinigame",
    "PrimordialOceanMinigame",
    "ChestMinigame",
    "BatteryMinigame",
    "RuneMinigame",
    "FoundryMinigame",
    "BallBreakerMinigame",
    "TreeMinigame",
    "LandMinigame",
    "LifeMinigame",
    "MINIGAME_KINDS",
    "create_minigame",
]
