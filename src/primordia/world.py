"""Headless host wiring minigames, the unlock graph, textures and events together.

A World owns every shared resource of a session:
- the GameConfig it was built from
- the single seeded RandomSource every level-up and board roll draws from
- the TextureCache for item visuals
- the ProgressionRegistry and the EventBus
- the live minigame states, keyed by id

Rendering and physics hosts drive it through ``ingest``, ``click``, ``tick``
and ``evolve`` and react to the events it emits.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional, Tuple

from .config import GameConfig
from .core.random import RandomSource
from .events import ITEM_EMITTED, LEVEL_UP, UNLOCKED, EventBus
from .items import Item
from .minigames import ClickType, LandMinigame, LifeMinigame, Minigame, create_minigame
from .progression import ProgressionRegistry
from .textures import TextureCache, TextureFactory

logger = logging.getLogger(__name__)


class World:
    def __init__(
        self,
        config: Optional[GameConfig] = None,
        registry: Optional[ProgressionRegistry] = None,
        texture_factory: Optional[TextureFactory] = None,
        bus: Optional[EventBus] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rng = RandomSource(self.config.seed)
        self.textures = TextureCache(
            texture_factory, seed=self.config.texture_seed, size=self.config.item_texture_size
        )
        self.registry = registry if registry is not None else ProgressionRegistry.from_yaml()
        self.bus = bus or EventBus()
        self.minigames: Dict[str, Minigame] = {}
        for minigame_id in self.registry.start_ids():
            self._unlock(minigame_id)
        logger.info("World created with seed=%s and %d minigames", self.config.seed, len(self.minigames))

    # Unlocking

    def _unlock(self, minigame_id: str) -> Minigame:
        state = create_minigame(minigame_id, self.config, self.rng)
        self.minigames[minigame_id] = state
        self.registry.set_instance(minigame_id, state)
        self.registry.record_level(minigame_id, state.level)
        entry = self.registry.get(minigame_id)
        position = entry.position if entry is not None else (0.0, 0.0)
        self.bus.emit(UNLOCKED, {"id": minigame_id, "position": position})
        return state

    def level_up_if_ready(self, minigame_id: str) -> bool:
        """Replace the state with its successor when it has earned a level.

        Newly satisfied dependants are unlocked in registry order.
        """
        state = self.minigames.get(minigame_id)
        if state is None or not state.should_level_up():
            return False
        successor = state.levelup(self.rng)
        self.minigames[minigame_id] = successor
        self.registry.set_instance(minigame_id, successor)
        self.registry.record_level(minigame_id, successor.level)
        logger.info("%s leveled up: %d -> %d", minigame_id, state.level, successor.level)
        self.bus.emit(LEVEL_UP, {"id": minigame_id, "level": successor.level})
        for unlocked_id in self.registry.to_unlock(minigame_id):
            self._unlock(unlocked_id)
        return True

    # Interaction

    def ingest(self, minigame_id: str, item: Item) -> Tuple[float, Optional[Item]]:
        """Offer ``item`` to a minigame.

        Returns the consumed amount and whatever is left of the item, or None
        when nothing remains.
        """
        state = self.minigames.get(minigame_id)
        if state is None:
            logger.warning("Cannot ingest into locked or unknown minigame %s", minigame_id)
            return 0.0, item
        if isinstance(state, LandMinigame):
            consumed = state.ingest_item(item, self.rng)
        else:
            consumed = state.ingest_item(item)
        if consumed > item.amount:
            logger.warning(
                "%s consumed %.3f of an item holding %.3f; clamping", minigame_id, consumed, item.amount
            )
            consumed = item.amount
        logger.debug("%s ingested %.3f of %r", minigame_id, consumed, item.type)
        remaining = item.amount - consumed
        self.level_up_if_ready(minigame_id)
        return consumed, (item.with_amount(remaining) if remaining > 0.0 else None)

    def click(self, minigame_id: str, pressed_seconds: float) -> List[Item]:
        """Deliver a press of ``pressed_seconds`` to a clickable minigame."""
        state = self.minigames.get(minigame_id)
        if state is None:
            logger.warning("Click on locked or unknown minigame %s", minigame_id)
            return []
        click_type = ClickType.classify(pressed_seconds, self.config.long_click_threshold)
        if hasattr(state, "click"):
            items = state.click(click_type)
        elif hasattr(state, "pick") and click_type is not ClickType.INVALID:
            items = state.pick()
        else:
            logger.debug("%s ignores clicks", minigame_id)
            return []
        self._emit_items(minigame_id, items)
        self.level_up_if_ready(minigame_id)
        return items

    def tick(self, now: float) -> List[Item]:
        """Advance every timed minigame to ``now``; returns everything emitted."""
        produced: List[Item] = []
        for minigame_id in list(self.minigames):
            state = self.minigames[minigame_id]
            if not hasattr(state, "tick"):
                continue
            items = state.tick(now)
            self._emit_items(minigame_id, items)
            produced.extend(items)
            self.level_up_if_ready(minigame_id)
        return produced

    def evolve(self) -> None:
        """Step the life board, and the land board while it has stored energy."""
        for minigame_id, state in list(self.minigames.items()):
            if isinstance(state, LandMinigame):
                if not state.evolve(self.rng):
                    continue
            elif isinstance(state, LifeMinigame):
                state.evolve()
            else:
                continue
            self.level_up_if_ready(minigame_id)

    def _emit_items(self, minigame_id: str, items: List[Item]) -> None:
        for item in items:
            self.bus.emit(ITEM_EMITTED, {"id": minigame_id, "item": item})

    # Queries

    def texture_for(self, item: Item) -> Any:
        return self.textures.texture_for(item.type)

    def is_out_of_bounds(self, x: float, y: float) -> bool:
        """Items this far from the origin should be despawned by the host."""
        return math.hypot(x, y) > self.config.max_item_distance

    def snapshot(self) -> Dict[str, Any]:
        return {
            "seed": self.config.seed,
            "minigames": {
                minigame_id: {"name": state.name, "level": state.level}
                for minigame_id, state in sorted(self.minigames.items())
            },
            "locked": sorted(e.minigame_id for e in self.registry if not e.unlocked),
            "textures": len(self.textures),
        }


__all__ = ["World"]
