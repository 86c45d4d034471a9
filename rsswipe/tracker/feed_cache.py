import logging
import time
from dataclasses import dataclass
from threading import Lock
from typing import Callable, Dict, List, Optional

from rsswipe.config import CACHE_TTL_SECONDS
from rsswipe.storage.models import Item

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    items: List[Item]
    fetched_at: float


class FeedCache:
    """
    Cache em memória por URL de fonte, com TTL e remoção preguiçosa
    (só no próximo get da mesma chave; não há varredura em background).
    """

    def __init__(self, ttl: float = CACHE_TTL_SECONDS, clock: Callable[[], float] = time.time):
        self.ttl = ttl
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = Lock()  # get/set concorrentes das threads de fetch

    def get(self, url: str) -> Optional[List[Item]]:
        with self._lock:
            entry = self._entries.get(url)
            if entry is None:
                logger.debug("Cache miss for %s", url)
                return None
            if self._clock() - entry.fetched_at > self.ttl:
                del self._entries[url]
                logger.debug("Cache expired for %s", url)
                return None
            logger.debug("Cache hit for %s", url)
            # cópia rasa para evitar mutações externas
            return list(entry.items)

    def set(self, url: str, items: List[Item]) -> None:
        with self._lock:
            self._entries[url] = CacheEntry(items=list(items), fetched_at=self._clock())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


# Único estado compartilhado do processo
feed_cache = FeedCache()
