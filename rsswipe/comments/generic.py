from typing import List

from rsswipe.storage.models import Comment, DiscussionResult
from .base import BaseCommentAdapter, MAX_COMMENTS, MAX_COMMENT_CHARS

COMMENT_SELECTORS = (
    ".comment",
    ".comments .comment-body",
    '[class*="comment"]',
    "#comments .comment-content",
    ".post-comments .comment",
)
_TEXT_SELECTOR = "p, .content, .text"
_AUTHOR_SELECTOR = '[class*="author"], .username, .name'
MIN_COMMENT_CHARS = 10


class GenericAdapter(BaseCommentAdapter):
    """Heurística por seletores comuns de blogs/CMS. Sempre casa (último da cadeia)."""

    name = "generic"

    def _parse(self, elements) -> List[Comment]:
        comments: List[Comment] = []
        for i, el in enumerate(elements):
            node = el.select_one(_TEXT_SELECTOR)
            content = (node.get_text().strip() if node else "") or el.get_text().strip()
            if len(content) < MIN_COMMENT_CHARS:
                continue
            author = el.select_one(_AUTHOR_SELECTOR)
            comments.append(Comment(
                id=str(i),
                author=(author.get_text().strip() if author else "") or "User",
                content=content[:MAX_COMMENT_CHARS],
            ))
            if len(comments) >= MAX_COMMENTS:
                break
        return comments

    def extract(self, soup, url: str) -> DiscussionResult:
        for selector in COMMENT_SELECTORS:
            comments = self._parse(soup.select(selector))
            if comments:
                return DiscussionResult(comments=comments)
        return DiscussionResult(comments=[])
