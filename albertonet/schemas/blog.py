import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    description: str
    categories: List[str] = Field(default_factory=list)
    content: str
    image: Optional[str] = None
    publicationDate: datetime.date
    lastModifiedDate: Optional[datetime.date] = None
    readingTime: Optional[str] = None


class TopPost(BaseModel):
    """Entry of the curated top posts manifest, kept as stored."""

    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    categories: str
    publicationDate: str


class ParsedFrontMatter(BaseModel):
    metadata: dict[str, str] = Field(default_factory=dict)
    content: str = ""


class BatchFailure(BaseModel):
    path: str
    reason: str


class PostsReport(BaseModel):
    posts: List[Post] = Field(default_factory=list)
    failures: List[BatchFailure] = Field(default_factory=list)
