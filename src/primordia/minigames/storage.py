from __future__ import annotations

from typing import Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

from ..errors import UnsupportedVariant
from ..items import identify

K = TypeVar("K")


class ItemStore(Generic[K]):
    """Owned mapping of item type to stored amount for storage minigames."""

    def __init__(self, contents: Optional[Dict[K, float]] = None) -> None:
        self._amounts: Dict[K, float] = dict(contents or {})

    def add(self, key: K, amount: float) -> None:
        self._amounts[key] = self._amounts.get(key, 0.0) + amount

    def remove(self, key: K, amount: float) -> float:
        """Take up to ``amount`` of ``key``; returns how much was removed."""
        stored = self._amounts.get(key)
        if stored is None:
            return 0.0
        removed = min(amount, stored)
        if stored - removed <= 0.0:
            del self._amounts[key]
        else:
            self._amounts[key] = stored - removed
        return removed

    def amount(self, key: K) -> float:
        return self._amounts.get(key, 0.0)

    def total(self) -> float:
        return sum(self._amounts.values())

    def filtered(self, text: str = "") -> List[Tuple[K, float]]:
        """Stored entries whose display name contains ``text`` (case-insensitive)."""
        needle = text.lower()
        result = []
        for key, amount in self._amounts.items():
            if needle:
                try:
                    name = identify(key).name.lower()  # type: ignore[arg-type]
                except UnsupportedVariant:
                    name = repr(key).lower()
                if needle not in name:
                    continue
            result.append((key, amount))
        return result

    def copy(self) -> "ItemStore[K]":
        return ItemStore(self._amounts)

    def __iter__(self) -> Iterator[K]:
        return iter(self._amounts)

    def __len__(self) -> int:
        return len(self._amounts)


__all__ = ["ItemStore"]
