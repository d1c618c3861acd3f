from __future__ import annotations

import hashlib
import logging
import random
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

_U64_MAX = (1 << 64) - 1


@dataclass
class RandomState:
    """Serializable snapshot of a RandomSource stream."""

    seed: Optional[int]
    internal_state: object


@dataclass
class RandomSource:
    """The game's single sequential stream of unsigned 64-bit draws.

    Consumers reduce ``next()`` with ``%`` (see ``below``). Seeds may be ints
    or strings hashed through ``derive_seed``. ``snapshot``/``restore`` allow
    replaying a stretch of draws.
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.seed is not None:
            self._rng = random.Random(self.seed)
            logger.debug("Random stream seeded with %s", self.seed)
        else:
            self._rng = random.Random()
            logger.debug("Random stream seeded from system entropy")

    @classmethod
    def from_string(cls, source: str) -> "RandomSource":
        return cls(seed=cls.derive_seed(source))

    @staticmethod
    def derive_seed(source: str) -> int:
        """Derive a 64-bit integer seed from an arbitrary string using SHA256."""
        digest = hashlib.sha256(source.encode("utf-8")).digest()
        return int.from_bytes(digest[:8], "big", signed=False)

    def next(self) -> int:
        return self._rng.getrandbits(64)

    def below(self, bound: int) -> int:
        """Return ``next() % bound``; bound must be positive."""
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        return self.next() % bound

    def unit(self) -> float:
        """A float in [0, 1] derived from one ``next()`` draw."""
        return self.next() / _U64_MAX

    def snapshot(self) -> RandomState:
        return RandomState(self.seed, self._rng.getstate())

    def restore(self, state: RandomState) -> None:
        self.seed = state.seed
        self._rng.setstate(state.internal_state)  # type: ignore[arg-type]


__all__ = ["RandomSource", "RandomState"]
