from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from ..errors import UnsupportedVariant
from .kinds import AbstractKind
from .types import AbstractItem, ItemType, PhysicalItem

CLICK_ADJECTIVES: Dict[int, str] = {0: "Short", 1: "Long"}

RUNE_ADJECTIVES: Dict[int, str] = {
    0: "Inclusive Self",
    1: "Connector",
    2: "Exclusive Self",
    3: "Shelter",
    4: "Inclusive Other",
    5: "Force",
    6: "Exclusive Other",
}


@dataclass(frozen=True)
class ItemIdentifier:
    """Human name, cache key and asset path source for an item type."""

    domain: str
    noun: str
    adjective: str

    @property
    def name(self) -> str:
        if not self.adjective:
            return self.noun
        return f"{self.adjective} {self.noun}"

    @property
    def uid(self) -> str:
        return f"{self.domain}/{self.noun}/{self.adjective}"

    @property
    def asset(self) -> str:
        stem = self.noun if self.domain == "abstract" else self.adjective
        return f"{self.domain}/{stem}.png"


def identify(item_type: ItemType) -> ItemIdentifier:
    """Derive the identifier for an item type.

    Raises UnsupportedVariant for mana and minigame items and for abstract
    variants outside the known click and rune sets.
    """
    if isinstance(item_type, AbstractItem):
        return _identify_abstract(item_type)
    if isinstance(item_type, PhysicalItem):
        return ItemIdentifier("physical", item_type.form.value, item_type.material.value)
    raise UnsupportedVariant(item_type, "identifier")


def _identify_abstract(item: AbstractItem) -> ItemIdentifier:
    if item.kind is AbstractKind.CLICK:
        adjective = CLICK_ADJECTIVES.get(item.variant)
    elif item.kind is AbstractKind.XP:
        adjective = ""
    else:
        adjective = RUNE_ADJECTIVES.get(item.variant)
    if adjective is None:
        raise UnsupportedVariant(item, "identifier")
    return ItemIdentifier("abstract", item.kind.value, adjective)


__all__ = ["ItemIdentifier", "identify", "CLICK_ADJECTIVES", "RUNE_ADJECTIVES"]
