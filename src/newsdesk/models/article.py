"""Article document model - the aggregate that owns a block body."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import Field

from newsdesk.models.base import DocumentBase


class ArticleStatus(StrEnum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class Article(DocumentBase):
    """A news article.

    ``body_blocks`` is the serialized block array, stored verbatim.
    ``reading_time_minutes`` is derived from it on every write.
    """

    title: str
    slug: str
    subtitle: str | None = None
    status: ArticleStatus = ArticleStatus.DRAFT
    hero_image_url: str | None = None
    category_name: str | None = None
    body_blocks: list[Any] = Field(default_factory=list)
    reading_time_minutes: int = 1
    published_at: datetime | None = None
