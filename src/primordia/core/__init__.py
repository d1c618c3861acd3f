"""Shared low-level helpers: the seeded random stream."""

from .random import RandomSource, RandomState

__all__ = ["RandomSource", "RandomState"]
