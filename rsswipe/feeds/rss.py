import logging
import requests
import feedparser
from datetime import datetime, timezone
from typing import List, Mapping, Optional
from urllib.parse import urlparse

from rsswipe.config import REQUEST_TIMEOUT
from rsswipe.storage.models import Item
from rsswipe.utils.http import SESSION
from .base import BaseFeed
from .identity import UNTITLED, clean_description, item_id
from .media import content_body, extract_media

logger = logging.getLogger(__name__)


def _published_at(entry: Mapping) -> str:
    # published_parsed preferencial; fallback para updated_parsed
    for key in ("published_parsed", "updated_parsed"):
        parsed = entry.get(key)
        if parsed:
            try:
                return datetime(*parsed[:6], tzinfo=timezone.utc).isoformat()
            except (TypeError, ValueError):
                pass
    # string crua (pode não ser parseável; o orderer trata)
    raw = entry.get("published") or entry.get("updated")
    if raw:
        return raw
    return datetime.now(timezone.utc).isoformat()


def normalize_entry(entry: Mapping, source_url: str, source_title: str) -> Item:
    link = entry.get("link") or ""
    raw_title = entry.get("title") or ""
    return Item(
        id=item_id(source_url, link, raw_title),
        source_url=source_url,
        source_title=source_title,
        title=raw_title or UNTITLED,
        description=clean_description(content_body(entry) or entry.get("summary") or ""),
        link=link,
        published_at=_published_at(entry),
        media=extract_media(entry),
        discussion_url=entry.get("comments") or None,
    )


class RssFeed(BaseFeed):
    """Uma fonte RSS/Atom: busca, parse e normalização em lista de Item."""

    TIMEOUT = REQUEST_TIMEOUT

    def __init__(self, url: str, title: Optional[str] = None):
        self.url: str = url
        self.title: Optional[str] = title

    def _source_title(self, feed) -> str:
        return feed.feed.get("title") or self.title or urlparse(self.url).hostname or self.url

    def fetch(self) -> List[Item]:
        try:
            response = SESSION.get(self.url, timeout=self.TIMEOUT)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error("Fetch failed for '%s': %s", self.url, e)
            return []

        try:
            feed = feedparser.parse(response.text)
            if feed.bozo and not feed.entries:
                logger.error("Parse failed for '%s': %s", self.url, feed.get("bozo_exception"))
                return []
            source_title = self._source_title(feed)
            items = [normalize_entry(entry, self.url, source_title) for entry in feed.entries]
        except Exception as e:
            logger.error("Parse failed for '%s': %s", self.url, e, exc_info=True)
            return []

        logger.info("Fetched %d items from %s", len(items), self.url)
        return items
