from .scraper import scrape_comments, select_adapter, ADAPTERS
from .base import BaseCommentAdapter

__all__ = ["scrape_comments", "select_adapter", "ADAPTERS", "BaseCommentAdapter"]
