"""Interfaces of the services the block editor talks to."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from pydantic import BaseModel

if TYPE_CHECKING:
    from collections.abc import Sequence


class ArticleCandidate(BaseModel):
    """An article offered by the article-link picker."""

    id: str
    title: str
    slug: str
    hero_image_url: str | None = None
    category_name: str | None = None


class MediaFile(BaseModel):
    """A file chosen by the editor for an image or video block."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


class UploadedFile(BaseModel):
    url: str
    mime_type: str


class UploadError(Exception):
    """Raised when a media upload cannot be completed."""


@runtime_checkable
class ArticleSearch(Protocol):
    async def search(self, query: str) -> list[ArticleCandidate]:
        """Return articles matching ``query``."""
        ...


@runtime_checkable
class FileUploader(Protocol):
    async def upload(self, file: MediaFile) -> UploadedFile:
        """Store ``file`` and return its permanent URL. Raises UploadError."""
        ...


@runtime_checkable
class BodyStore(Protocol):
    async def save_body(
        self,
        article_id: str,
        blocks: Sequence[Any],
        reading_time_minutes: int,
    ) -> int:
        """Persist a serialized body; return the stored reading time."""
        ...
