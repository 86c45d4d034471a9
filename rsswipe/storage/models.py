from enum import Enum
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


class Media(BaseModel):
    type: Literal["image", "video"]
    url: str


class Item(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str  # hash de (source_url, link, title), chave de saved items
    source_url: str = Field(alias="sourceUrl")
    source_title: str = Field(alias="sourceTitle")
    title: str
    description: str = ""
    link: str = ""
    published_at: str = Field(alias="publishedAt")
    media: Optional[Media] = None
    discussion_url: Optional[str] = Field(default=None, alias="discussionUrl")


class Comment(BaseModel):
    id: str
    author: str
    content: str
    date: Optional[str] = None


class DiscussionResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    comments: List[Comment] = Field(default_factory=list)
    fallback_url: Optional[str] = Field(default=None, alias="fallbackUrl")


class Source(BaseModel):
    url: str  # usado como chave única
    title: Optional[str] = None


class SortOrder(str, Enum):
    chronological = "chronological"
    random = "random"
