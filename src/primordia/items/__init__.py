"""Item taxonomy, identity and combination algebra."""

from .kinds import (
    AbstractKind,
    EnergyKind,
    ManaIntent,
    ManaKind,
    MinigameItemKind,
    PhysicalForm,
    PhysicalMaterial,
    SOLID_FORMS,
)
from .types import (
    AbstractItem,
    EnergyItem,
    ItemType,
    ManaItem,
    MinigameItem,
    PhysicalItem,
)
from .identifier import ItemIdentifier, identify
from .item import Item, MAX_RADIUS, MIN_RADIUS

__all__ = [
    "AbstractKind",
    "EnergyKind",
    "ManaIntent",
    "ManaKind",
    "MinigameItemKind",
    "PhysicalForm",
    "PhysicalMaterial",
    "SOLID_FORMS",
    "AbstractItem",
    "EnergyItem",
    "ItemType",
    "ManaItem",
    "MinigameItem",
    "PhysicalItem",
    "ItemIdentifier",
    "identify",
    "Item",
    "MAX_RADIUS",
    "MIN_RADIUS",
]
