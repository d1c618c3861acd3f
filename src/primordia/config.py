from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    """Tunable constants for a simulation session.

    - seed: world random stream (board layout, ball breaker grids, land terrain).
    - texture_seed: stream used afresh for each generated item texture.
    - long_click_threshold: seconds a press must last to count as a long click.
    - rune_trigger_seconds: how long a drawn rune must hold before it fires.
    - cook_period_seconds: foundry tick period.
    - tree_*: fruit growth interval (base, per-level reduction, floor) and cap.
    """

    seed: int = 42
    texture_seed: int = 91
    item_texture_size: int = 256
    long_click_threshold: float = 1.0
    rune_trigger_seconds: float = 2.0
    cook_period_seconds: float = 1.0
    tree_base_interval: float = 10.0
    tree_interval_step: float = 0.5
    tree_min_interval: float = 1.0
    tree_base_fruit_cap: int = 1
    max_item_distance: float = 10000.0

    def __post_init__(self) -> None:
        if self.long_click_threshold <= 0:
            raise ValueError(f"long_click_threshold must be positive, got {self.long_click_threshold}")
        if self.tree_min_interval < 0 or self.tree_base_interval < self.tree_min_interval:
            raise ValueError("tree_base_interval must be >= tree_min_interval >= 0")

    @classmethod
    def from_json(cls, path: Path) -> "GameConfig":
        """Load configuration from JSON file. Missing fields fallback to defaults."""
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in raw.items():
            if key not in known:
                logger.warning("Ignoring unknown config key '%s' in %s", key, path)
                continue
            kwargs[key] = value
        cfg = cls(**kwargs)
        logger.info("Loaded config from %s", path)
        return cfg

    def to_json(self, path: Path) -> None:
        """Persist configuration to a JSON file."""
        with path.open("w", encoding="utf-8") as f:
            json.dump(asdict(self), f, indent=2, sort_keys=True)


__all__ = ["GameConfig"]
