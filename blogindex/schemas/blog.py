from typing import List, Optional

from pydantic import BaseModel, Field


class Post(BaseModel):
    url: str
    slug: str
    title: str
    description: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    added: Optional[str] = None


class TagSummary(BaseModel):
    tag: str
    path: str
    count: int


class TagPage(BaseModel):
    tag: str
    path: str
    posts: List[Post] = Field(default_factory=list)
