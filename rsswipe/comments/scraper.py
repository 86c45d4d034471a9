import logging
from urllib.parse import urlparse
from bs4 import BeautifulSoup

from rsswipe.config import REQUEST_TIMEOUT
from rsswipe.storage.models import DiscussionResult
from rsswipe.utils.http import SESSION
from .base import fallback
from .generic import GenericAdapter
from .hackernews import HackerNewsAdapter
from .reddit import RedditAdapter

logger = logging.getLogger(__name__)

# Ordem de prioridade; o genérico fica por último e casa com qualquer host
ADAPTERS = (HackerNewsAdapter(), RedditAdapter(), GenericAdapter())


def select_adapter(hostname: str):
    return next(a for a in ADAPTERS if a.matches(hostname))


def scrape_comments(url: str) -> DiscussionResult:
    """
    Extrai até 20 comentários da página de discussão `url`.
    Nunca levanta exceção: sem comentários, devolve fallback_url = url.
    """
    try:
        adapter = select_adapter((urlparse(url).hostname or "").lower())
        if adapter.needs_page:
            response = SESSION.get(url, timeout=REQUEST_TIMEOUT)
            if not response.ok:
                logger.warning("Comments fetch for '%s' returned HTTP %s", url, response.status_code)
                return fallback(url)
            soup = BeautifulSoup(response.text, "html.parser")
        else:
            soup = None
        result = adapter.extract(soup, url)
    except Exception as e:
        logger.warning("Comments scrape failed for '%s': %s", url, e)
        return fallback(url)

    if not result.comments:
        return fallback(url)
    logger.debug("%s adapter extracted %d comments from %s", adapter.name, len(result.comments), url)
    return result
