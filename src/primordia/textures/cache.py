from __future__ import annotations

import logging
from threading import RLock
from typing import Any, Dict, Optional

from ..core.random import RandomSource
from ..items.identifier import identify
from ..items.types import ItemType
from .factory import DummyTextureFactory, TextureFactory
from .render import draw_item_type
from .synth import ITEM_SIZE

logger = logging.getLogger(__name__)

TEXTURE_SEED = 91


class TextureCache:
    """Process-wide store of generated item textures keyed by item uid.

    The first request for a uid synthesizes the texture with a fresh stream
    seeded from ``seed`` and hands it to the factory; later requests return the
    stored handle. Entries are never evicted.
    """

    def __init__(
        self,
        factory: Optional[TextureFactory] = None,
        seed: int = TEXTURE_SEED,
        size: int = ITEM_SIZE,
    ) -> None:
        self._lock = RLock()
        self._factory: TextureFactory = factory or DummyTextureFactory()
        self._seed = seed
        self._size = size
        self._handles: Dict[str, Any] = {}
        self.hits = 0
        self.misses = 0

    def get(self, uid: str) -> Optional[Any]:
        with self._lock:
            return self._handles.get(uid)

    def insert(self, uid: str, handle: Any) -> None:
        with self._lock:
            self._handles[uid] = handle

    def texture_for(self, item_type: ItemType) -> Any:
        """Return the engine handle for ``item_type``, generating it once.

        Raises UnsupportedVariant if the item has no identifier or draw rule.
        """
        uid = identify(item_type).uid
        with self._lock:
            handle = self._handles.get(uid)
            if handle is not None:
                self.hits += 1
                logger.debug("Texture cache hit for %s", uid)
                return handle
            self.misses += 1
            texture = draw_item_type(item_type, RandomSource(self._seed), self._size)
            handle = self._factory.create_texture(uid, texture)
            self._handles[uid] = handle
            logger.debug("Generated texture for %s (%d cached)", uid, len(self._handles))
            return handle

    def __contains__(self, uid: object) -> bool:
        with self._lock:
            return uid in self._handles

    def __len__(self) -> int:
        with self._lock:
            return len(self._handles)


__all__ = ["TextureCache", "TEXTURE_SEED"]
