import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Callable, Iterable, List, Optional

from rsswipe.config import MAX_FETCH_WORKERS
from rsswipe.feeds import BaseFeed, RssFeed
from rsswipe.storage.models import Item, SortOrder
from .feed_cache import FeedCache, feed_cache
from .ordering import order_items

logger = logging.getLogger(__name__)

FeedFactory = Callable[[str], BaseFeed]


class FeedAggregator:
    """Fan-out de fetch/cache por fonte, merge e ordenação."""

    def __init__(self, cache: Optional[FeedCache] = None, feed_factory: FeedFactory = RssFeed,
                 max_workers: int = MAX_FETCH_WORKERS):
        self.cache = cache if cache is not None else feed_cache
        self.feed_factory = feed_factory
        self.max_workers = max_workers

    def load_source(self, url: str) -> List[Item]:
        cached = self.cache.get(url)
        if cached is not None:
            return cached
        try:
            items = self.feed_factory(url).fetch() or []
        except Exception as e:
            logger.error("Feed %s failed: %s", url, e)
            return []
        # só fontes com itens entram no cache (falha => nova tentativa no próximo request)
        if items:
            self.cache.set(url, items)
        return items

    def collect(self, urls: Iterable[str]) -> List[Item]:
        """Busca todas as fontes em paralelo; retorna só quando todas terminaram."""
        unique = list(dict.fromkeys(urls))
        if not unique:
            return []

        merged: List[Item] = []
        with ThreadPoolExecutor(max_workers=min(len(unique), self.max_workers)) as ex:
            futures = [ex.submit(self.load_source, url) for url in unique]
            # merge na ordem das fontes (determinístico para o shuffle)
            for url, fut in zip(unique, futures):
                try:
                    merged.extend(fut.result())
                except Exception as e:
                    logger.error("Feed %s failed: %s", url, e)

        logger.info("Aggregated %d items from %d sources", len(merged), len(unique))
        return merged

    def aggregate(self, urls: Iterable[str], order: SortOrder = SortOrder.chronological,
                  today: Optional[date] = None) -> List[Item]:
        return order_items(self.collect(urls), order, today)
