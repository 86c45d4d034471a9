from rsswipe.storage.models import DiscussionResult
from .base import BaseCommentAdapter, fallback


class RedditAdapter(BaseCommentAdapter):
    """Markup instável e rate limit agressivo: sempre devolve o link original."""

    name = "reddit"
    hosts = ("reddit.com",)
    needs_page = False

    def extract(self, soup, url: str) -> DiscussionResult:
        return fallback(url)
