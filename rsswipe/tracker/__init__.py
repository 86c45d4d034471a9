from .feed_aggregator import FeedAggregator
from .feed_cache import FeedCache, CacheEntry, feed_cache
from .ordering import order_items, seeded_shuffle, sort_chronological, date_seed

__all__ = [
    "FeedAggregator",
    "FeedCache",
    "CacheEntry",
    "feed_cache",
    "order_items",
    "seeded_shuffle",
    "sort_chronological",
    "date_seed",
]
