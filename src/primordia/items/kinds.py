from __future__ import annotations

from enum import Enum
from typing import FrozenSet


class AbstractKind(Enum):
    CLICK = "Click"
    XP = "XP"
    RUNE = "rune"


class PhysicalForm(Enum):
    GAS = "Gas"
    LIQUID = "Liquid"
    POWDER = "Powder"
    OBJECT = "Object"  # generic solid
    LUMP = "Lump"
    BLOCK = "Block"
    BALL = "Ball"
    ORE = "Ore"
    LAND = "Land"
    SEA = "Sea"
    # life stages and organisms
    EGG = "Egg"
    SPORE = "Spore"
    SEED = "Seed"
    ARCHAEA = "Archaea"
    BACTERIA = "Bacteria"
    ALGAE = "Algae"
    FUNGUS = "Fungus"
    PLANT = "Plant"
    ANIMAL = "Animal"
    FRUIT = "Fruit"

    def is_fluid(self) -> bool:
        return self in _FLUID_FORMS

    def is_solid(self) -> bool:
        return self in SOLID_FORMS


SOLID_FORMS: FrozenSet[PhysicalForm] = frozenset(
    {PhysicalForm.OBJECT, PhysicalForm.LUMP, PhysicalForm.BLOCK, PhysicalForm.BALL}
)
# Forms that merge on contact. Powder flows like the fluids do.
_FLUID_FORMS: FrozenSet[PhysicalForm] = frozenset(
    {PhysicalForm.GAS, PhysicalForm.LIQUID, PhysicalForm.POWDER}
)


class PhysicalMaterial(Enum):
    APPLE = "Apple"
    LEMON = "Lemon"
    LIME = "Lime"
    MUD = "Mud"
    DIRT = "Dirt"
    SANDSTONE = "Sandstone"
    GRANITE = "Granite"
    MARBLE = "Marble"
    OBSIDIAN = "Obsidian"
    COPPER = "Copper"
    TIN = "Tin"
    BRONZE = "Bronze"
    IRON = "Iron"
    SILVER = "Silver"
    GOLD = "Gold"
    DIAMOND = "Diamond"
    AMETHYST = "Amethyst"
    MOSS = "Moss"
    UNOBTAINIUM = "Unobtainium"
    SALT_WATER = "Salt Water"
    FRESH_WATER = "Fresh Water"
    # life-stage materials
    EMBRYO = "Embryo"
    JUVENILE = "Juvenile"
    ADULT = "Adult"
    ELDER = "Elder"

    def is_goo(self) -> bool:
        """Goo merges with itself regardless of form."""
        return self is PhysicalMaterial.MUD

    def is_water(self) -> bool:
        return self in (PhysicalMaterial.SALT_WATER, PhysicalMaterial.FRESH_WATER)

    def is_fruit(self) -> bool:
        return self in (PhysicalMaterial.APPLE, PhysicalMaterial.LEMON, PhysicalMaterial.LIME)


class ManaKind(Enum):
    FIRE = "Fire"
    WATER = "Water"
    EARTH = "Earth"
    AIR = "Air"
    LIGHT = "Light"
    DARK = "Dark"


class ManaIntent(Enum):
    ATTACK = "Attack"
    DEFENSE = "Defense"
    SUPPORT = "Support"


class EnergyKind(Enum):
    KINETIC = "Kinetic"
    POTENTIAL = "Potential"
    THERMAL = "Thermal"
    ELECTRIC = "Electric"
    MAGNETIC = "Magnetic"
    RADIANT = "Radiant"


class MinigameItemKind(Enum):
    BUTTON = "Button"
    PRIMORDIAL_OCEAN = "PrimordialOcean"
    DRAW = "Draw"
    BLOCK_BREAKER = "BlockBreaker"
    TREE = "Tree"


__all__ = [
    "AbstractKind",
    "PhysicalForm",
    "PhysicalMaterial",
    "ManaKind",
    "ManaIntent",
    "EnergyKind",
    "MinigameItemKind",
    "SOLID_FORMS",
]
