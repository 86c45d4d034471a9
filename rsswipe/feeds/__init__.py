from .rss import RssFeed, normalize_entry
from .identity import item_id, clean_description, placeholder_gradient
from .media import extract_media

# Se quiser, exporte também a base:
from .base import BaseFeed

__all__ = [
    "RssFeed",
    "BaseFeed",
    "normalize_entry",
    "item_id",
    "clean_description",
    "placeholder_gradient",
    "extract_media",
]
