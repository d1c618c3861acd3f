from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, List, Tuple

from ..core.random import RandomSource

logger = logging.getLogger(__name__)

Rgba = Tuple[int, int, int, int]

CLEAR: Rgba = (0, 0, 0, 0)


def _jitter(nominal: int, looseness: int, rng: RandomSource) -> int:
    # A loose channel is re-rolled over [0, looseness]; the nominal value is dropped.
    if looseness == 0:
        return nominal
    return rng.next() % (looseness + 1)


@dataclass(frozen=True)
class Colorant:
    """One weighted color source in a palette.

    Attributes:
        red, green, blue, alpha: nominal channel values (0..255)
        weight: relative frequency within the palette
        looseness: 0 pins RGB to the nominal value; otherwise each channel is
            drawn independently from [0, looseness]
        alpha_looseness: same rule for the alpha channel
    """

    red: int
    green: int
    blue: int
    alpha: int = 255
    weight: int = 1
    looseness: int = 0
    alpha_looseness: int = 0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha", "weight", "looseness", "alpha_looseness"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Colorant.{name} must be in 0..255, got {value}")

    @classmethod
    def tight(cls, red: int, green: int, blue: int, weight: int) -> "Colorant":
        return cls(red, green, blue, 255, weight, 0, 0)

    @classmethod
    def loose(cls, red: int, green: int, blue: int, looseness: int, weight: int) -> "Colorant":
        return cls(red, green, blue, 255, weight, looseness, 0)

    def with_alpha_looseness(self, alpha_looseness: int) -> "Colorant":
        return replace(self, alpha_looseness=alpha_looseness)

    def pick(self, rng: RandomSource) -> Rgba:
        red = _jitter(self.red, self.looseness, rng)
        green = _jitter(self.green, self.looseness, rng)
        blue = _jitter(self.blue, self.looseness, rng)
        alpha = _jitter(self.alpha, self.alpha_looseness, rng)
        return red, green, blue, alpha


class ColorPalette:
    """Ordered, weighted list of colorants.

    Palettes are built once per material and treated as immutable; derived
    palettes (see ``with_alpha_looseness``) are new objects.
    """

    def __init__(self, colorants: Iterable[Colorant] = ()) -> None:
        self._colorants: List[Colorant] = []
        self._total_weight = 0
        for colorant in colorants:
            self._colorants.append(colorant)
            self._total_weight += colorant.weight

    @property
    def colorants(self) -> Tuple[Colorant, ...]:
        return tuple(self._colorants)

    @property
    def total_weight(self) -> int:
        return self._total_weight

    def with_alpha_looseness(self, alpha_looseness: int) -> "ColorPalette":
        return ColorPalette(c.with_alpha_looseness(alpha_looseness) for c in self._colorants)

    def pick(self, rng: RandomSource) -> Colorant:
        """Choose a colorant with probability proportional to its weight.

        Ties resolve by list order: the first colorant whose cumulative bucket
        contains the draw wins.
        """
        if self._total_weight <= 0:
            raise ValueError("ColorPalette.pick() requires a positive total weight")
        remaining = rng.next() % self._total_weight
        for colorant in self._colorants:
            if remaining < colorant.weight:
                return colorant
            remaining -= colorant.weight
        # Unreachable while total_weight is the sum of the weights.
        raise RuntimeError("ColorPalette.pick() walked past the last colorant")

    def pick_color(self, rng: RandomSource) -> Rgba:
        return self.pick(rng).pick(rng)

    def __len__(self) -> int:
        return len(self._colorants)

    def __repr__(self) -> str:
        return f"ColorPalette({len(self._colorants)} colorants, total_weight={self._total_weight})"


__all__ = ["Rgba", "CLEAR", "Colorant", "ColorPalette"]
