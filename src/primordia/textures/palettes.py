from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Any, Dict, Mapping, Optional

from ..data.loader import load_yaml_document
from ..errors import DataValidationError
from ..items.kinds import PhysicalMaterial
from .palette import Colorant, ColorPalette

logger = logging.getLogger(__name__)

GAS_ALPHA_LOOSENESS = 128
LIQUID_ALPHA_LOOSENESS = 32


def _colorant_from_raw(raw: Mapping[str, Any]) -> Colorant:
    red, green, blue = (int(c) for c in raw["rgb"])
    return Colorant(
        red,
        green,
        blue,
        alpha=int(raw.get("alpha", 255)),
        weight=int(raw["weight"]),
        looseness=int(raw.get("looseness", 0)),
        alpha_looseness=int(raw.get("alpha_looseness", 0)),
    )


def parse_palettes(raw: Mapping[str, Any]) -> Dict[PhysicalMaterial, ColorPalette]:
    palettes: Dict[PhysicalMaterial, ColorPalette] = {}
    for material_name, colorants in raw.items():
        try:
            material = PhysicalMaterial(material_name)
        except ValueError as e:
            raise DataValidationError(f"Unknown material in palettes: {material_name!r}") from e
        palettes[material] = ColorPalette(_colorant_from_raw(c) for c in colorants)
    return palettes


def load_palettes(path: Optional[os.PathLike | str] = None) -> Dict[PhysicalMaterial, ColorPalette]:
    """Load material palettes from YAML (bundled data unless a path is given)."""
    palettes = parse_palettes(load_yaml_document("palettes", path))
    logger.info("Loaded %d material palettes", len(palettes))
    return palettes


@lru_cache(maxsize=1)
def default_palettes() -> Dict[PhysicalMaterial, ColorPalette]:
    return load_palettes()


def palette_for(material: PhysicalMaterial) -> Optional[ColorPalette]:
    return default_palettes().get(material)


__all__ = [
    "GAS_ALPHA_LOOSENESS",
    "LIQUID_ALPHA_LOOSENESS",
    "parse_palettes",
    "load_palettes",
    "default_palettes",
    "palette_for",
]
