from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .kinds import (
    AbstractKind,
    EnergyKind,
    ManaIntent,
    ManaKind,
    MinigameItemKind,
    PhysicalForm,
    PhysicalMaterial,
)


@dataclass(frozen=True)
class AbstractItem:
    """Non-material items: clicks, experience and drawn runes."""

    kind: AbstractKind
    variant: int = 0

    tag = "abstract"

    def combines(self, other: "AbstractItem") -> bool:
        return self.kind == other.kind and self.variant == other.variant


@dataclass(frozen=True)
class PhysicalItem:
    form: PhysicalForm
    material: PhysicalMaterial

    tag = "physical"

    def combines(self, other: "PhysicalItem") -> bool:
        if self.material != other.material:
            return False
        if self.material.is_goo():
            return True
        return self.form == other.form and self.form.is_fluid()


@dataclass(frozen=True)
class ManaItem:
    kind: ManaKind
    subkind: int
    intent: ManaIntent

    tag = "mana"

    def combines(self, other: "ManaItem") -> bool:
        # Provisional: mana has no real combination rules yet.
        return (
            self.kind == other.kind
            and self.subkind == other.subkind
            and self.intent == other.intent
        )


@dataclass(frozen=True)
class EnergyItem:
    kind: EnergyKind

    tag = "energy"

    def combines(self, other: "EnergyItem") -> bool:
        return self.kind == other.kind


@dataclass(frozen=True)
class MinigameItem:
    """A packed-up minigame that can be carried around and deployed."""

    kind: MinigameItemKind
    variant: int = 0

    tag = "minigame"

    def combines(self, other: "MinigameItem") -> bool:
        return False


ItemType = Union[AbstractItem, PhysicalItem, ManaItem, EnergyItem, MinigameItem]

ITEM_TYPE_CLASSES = (AbstractItem, PhysicalItem, ManaItem, EnergyItem, MinigameItem)


def same_tag(a: ItemType, b: ItemType) -> bool:
    return type(a) is type(b)


__all__ = [
    "AbstractItem",
    "PhysicalItem",
    "ManaItem",
    "EnergyItem",
    "MinigameItem",
    "ItemType",
    "ITEM_TYPE_CLASSES",
    "same_tag",
]
