from typing import List

from rsswipe.storage.models import Comment, DiscussionResult
from .base import BaseCommentAdapter, MAX_COMMENTS, MAX_COMMENT_CHARS


class HackerNewsAdapter(BaseCommentAdapter):
    name = "hackernews"
    hosts = ("ycombinator.com", "news.ycombinator")

    def extract(self, soup, url: str) -> DiscussionResult:
        comments: List[Comment] = []
        for i, row in enumerate(soup.select(".athing.comtr")):
            body = row.select_one(".commtext")
            content = body.get_text().strip() if body else ""
            # linhas sem texto (deletadas/flagged) não contam para o limite
            if not content:
                continue
            author = row.select_one(".hnuser")
            age = row.select_one(".age")
            comments.append(Comment(
                id=row.get("id") or str(i),
                author=(author.get_text().strip() if author else "") or "anonymous",
                content=content[:MAX_COMMENT_CHARS],
                date=(age.get_text().strip() if age else "") or None,
            ))
            if len(comments) >= MAX_COMMENTS:
                break
        return DiscussionResult(comments=comments)
