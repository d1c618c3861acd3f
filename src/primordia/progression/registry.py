from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..data.loader import load_yaml_document
from ..errors import InvalidOperation

logger = logging.getLogger(__name__)

Prerequisite = Tuple[str, int]


@dataclass
class RegistryEntry:
    """Unlock bookkeeping for one minigame id.

    - prerequisites: (minigame_id, required_level) pairs that must all hold
    - level: highest level reported so far; never decreases
    - instance: the live minigame state once unlocked, else None
    - position: host spawn point
    - start: unlocked as soon as a world is created
    """

    minigame_id: str
    prerequisites: List[Prerequisite] = field(default_factory=list)
    level: int = 0
    instance: Optional[Any] = None
    position: Tuple[float, float] = (0.0, 0.0)
    start: bool = False

    @property
    def unlocked(self) -> bool:
        return self.instance is not None


class ProgressionRegistry:
    """Level and unlock state for every known minigame id.

    An entry counts as unlocked once an instance has been attached to it.
    Unknown ids are treated as locked at level 0.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, RegistryEntry] = {}

    @classmethod
    def from_yaml(cls, path: Optional[os.PathLike | str] = None) -> "ProgressionRegistry":
        """Build a registry from the bundled unlock graph or a user file."""
        data = load_yaml_document("unlocks", path)
        registry = cls()
        for minigame_id, raw in data.get("minigames", {}).items():
            x, y = raw.get("position", (0.0, 0.0))
            registry.register(
                minigame_id,
                [(req_id, int(req_level)) for req_id, req_level in raw.get("requires", [])],
                position=(float(x), float(y)),
                start=bool(raw.get("start", False)),
            )
        logger.info("Loaded unlock graph with %d minigames", len(registry))
        return registry

    def register(
        self,
        minigame_id: str,
        prerequisites: Optional[List[Prerequisite]] = None,
        position: Tuple[float, float] = (0.0, 0.0),
        start: bool = False,
    ) -> RegistryEntry:
        if minigame_id in self._entries:
            raise InvalidOperation(f"Minigame already registered: {minigame_id}")
        entry = RegistryEntry(minigame_id, list(prerequisites or []), position=position, start=start)
        self._entries[minigame_id] = entry
        logger.debug("Registered %s with prerequisites %s", minigame_id, entry.prerequisites)
        return entry

    def get(self, minigame_id: str) -> Optional[RegistryEntry]:
        return self._entries.get(minigame_id)

    def start_ids(self) -> List[str]:
        return [e.minigame_id for e in self._entries.values() if e.start]

    def set_instance(self, minigame_id: str, instance: Any) -> None:
        """Attach (or replace) the live state for ``minigame_id``, unlocking it."""
        entry = self._entries.get(minigame_id)
        if entry is None:
            raise InvalidOperation(f"Unknown minigame id: {minigame_id}")
        if instance is None:
            raise InvalidOperation(f"Cannot clear the instance of {minigame_id}; unlocks are permanent")
        if entry.instance is None:
            logger.info("Unlocked %s", minigame_id)
        entry.instance = instance

    def record_level(self, minigame_id: str, level: int) -> None:
        entry = self._entries.get(minigame_id)
        if entry is None:
            logger.warning("Ignoring level %d reported for unknown minigame %s", level, minigame_id)
            return
        if level < entry.level:
            logger.warning(
                "Ignoring level decrease for %s: %d -> %d", minigame_id, entry.level, level
            )
            return
        entry.level = level

    def is_unlocked(self, minigame_id: str) -> bool:
        entry = self._entries.get(minigame_id)
        return entry is not None and entry.unlocked

    def level(self, minigame_id: str) -> int:
        entry = self._entries.get(minigame_id)
        return entry.level if entry is not None else 0

    def prerequisite_satisfied(self, prerequisite: Prerequisite) -> bool:
        minigame_id, required = prerequisite
        return self.is_unlocked(minigame_id) and self.level(minigame_id) >= required

    def prerequisites_met(self, minigame_id: str) -> bool:
        entry = self._entries.get(minigame_id)
        if entry is None:
            return False
        return all(self.prerequisite_satisfied(p) for p in entry.prerequisites)

    def to_unlock(self, just_leveled_id: str) -> List[str]:
        """Locked minigames that depend on ``just_leveled_id`` and are now fully satisfied.

        Registration order is preserved. Already unlocked entries are never
        returned again.
        """
        found = []
        for entry in self._entries.values():
            if entry.unlocked:
                continue
            if not any(req_id == just_leveled_id for req_id, _ in entry.prerequisites):
                continue
            if self.prerequisites_met(entry.minigame_id):
                found.append(entry.minigame_id)
        if found:
            logger.debug("Leveling %s makes %s unlockable", just_leveled_id, found)
        return found

    def __contains__(self, minigame_id: object) -> bool:
        return minigame_id in self._entries

    def __iter__(self) -> Iterator[RegistryEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["ProgressionRegistry", "RegistryEntry", "Prerequisite"]
