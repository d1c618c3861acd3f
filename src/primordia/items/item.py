from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional

from .identifier import ItemIdentifier, identify
from .kinds import (
    AbstractKind,
    EnergyKind,
    ManaIntent,
    ManaKind,
    MinigameItemKind,
    PhysicalForm,
    PhysicalMaterial,
)
from .types import (
    AbstractItem,
    EnergyItem,
    ItemType,
    ManaItem,
    MinigameItem,
    PhysicalItem,
    same_tag,
)

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..core.random import RandomSource
    from ..textures.synth import Texture


MIN_RADIUS = 4.0
UNIT_RADIUS = 8.0
MAX_RADIUS = 18.0
MIN_DENSITY = 1.0


@dataclass(frozen=True)
class Item:
    """A typed quantity that can be produced, combined or consumed.

    Amount is logically non-negative. Zero-amount items are consumed and the
    host should despawn them rather than keep them around.
    """

    type: ItemType
    amount: float = 1.0

    # Constructors

    @classmethod
    def abstract(cls, kind: AbstractKind, variant: int = 0, amount: float = 1.0) -> "Item":
        return cls(AbstractItem(kind, variant), amount)

    @classmethod
    def physical(cls, form: PhysicalForm, material: PhysicalMaterial, amount: float = 1.0) -> "Item":
        return cls(PhysicalItem(form, material), amount)

    @classmethod
    def mana(cls, kind: ManaKind, subkind: int, intent: ManaIntent, amount: float = 1.0) -> "Item":
        return cls(ManaItem(kind, subkind, intent), amount)

    @classmethod
    def energy(cls, kind: EnergyKind, amount: float = 1.0) -> "Item":
        return cls(EnergyItem(kind), amount)

    @classmethod
    def minigame(cls, kind: MinigameItemKind, variant: int = 0, amount: float = 1.0) -> "Item":
        return cls(MinigameItem(kind, variant), amount)

    def with_amount(self, amount: float) -> "Item":
        return replace(self, amount=amount)

    # Geometry

    def size(self) -> float:
        """Collider radius in world units.

        Sub-unit amounts and exactly one unit use fixed radii. Larger piles
        grow with the cube root of their volume, capped at MAX_RADIUS.
        """
        if self.amount < 1.0:
            return MIN_RADIUS
        if self.amount == 1.0:
            return UNIT_RADIUS
        return min(MAX_RADIUS, 9.0 + (3.0 * self.amount / (4.0 * math.pi)) ** (1.0 / 3.0))

    def density(self) -> float:
        r = self.size()
        return max(MIN_DENSITY, self.amount / (math.pi * r * r))

    # Algebra

    def combine(self, other: "Item") -> Optional["Item"]:
        """Merge two items into one, or return None when they are incompatible."""
        if not same_tag(self.type, other.type):
            return None
        if not self.type.combines(other.type):  # type: ignore[arg-type]
            return None
        return Item(self.type, self.amount + other.amount)

    # Identity and visuals

    def identifier(self) -> ItemIdentifier:
        return identify(self.type)

    @property
    def name(self) -> str:
        return self.identifier().name

    @property
    def uid(self) -> str:
        return self.identifier().uid

    @property
    def asset(self) -> str:
        return self.identifier().asset

    def draw(self, rng: "RandomSource") -> "Texture":
        from ..textures.render import draw_item_type

        return draw_item_type(self.type, rng)


__all__ = ["Item", "MIN_RADIUS", "UNIT_RADIUS", "MAX_RADIUS", "MIN_DENSITY"]
