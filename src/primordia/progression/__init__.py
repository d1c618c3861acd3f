"""Unlock graph: which minigames a level-up makes available."""

from .registry import Prerequisite, ProgressionRegistry, RegistryEntry

__all__ = ["Prerequisite", "ProgressionRegistry", "RegistryEntry"]
