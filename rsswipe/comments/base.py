from abc import ABC, abstractmethod
from typing import Optional, Tuple
from bs4 import BeautifulSoup

from rsswipe.storage.models import DiscussionResult

MAX_COMMENTS = 20
MAX_COMMENT_CHARS = 500


def fallback(url: str) -> DiscussionResult:
    return DiscussionResult(comments=[], fallback_url=url)


class BaseCommentAdapter(ABC):
    """
    Estratégia de extração de comentários para um destino.
    `hosts` são substrings testadas contra o hostname; lista vazia casa com tudo.
    """

    name: str = "base"
    hosts: Tuple[str, ...] = ()
    needs_page: bool = True

    def matches(self, hostname: str) -> bool:
        if not self.hosts:
            return True
        return any(h in hostname for h in self.hosts)

    @abstractmethod
    def extract(self, soup: Optional[BeautifulSoup], url: str) -> DiscussionResult:
        pass
