"""Repository for the articles container (partitioned by /id)."""

from __future__ import annotations

from newsdesk.database.repositories.base import BaseRepository
from newsdesk.models.article import Article


class ArticleRepository(BaseRepository[Article]):
    """Provide data access for the articles container."""

    container_name = "articles"
    model_class = Article

    async def get_by_slug(self, slug: str) -> Article | None:
        results = await self.query(
            "SELECT * FROM c WHERE c.slug = @slug AND NOT IS_DEFINED(c.deleted_at)",
            [{"name": "@slug", "value": slug}],
        )
        return results[0] if results else None

    async def search(self, text: str, *, limit: int = 5) -> list[Article]:
        """Case-insensitive substring match on title, subtitle and slug."""
        return await self.query(
            "SELECT TOP @limit * FROM c WHERE NOT IS_DEFINED(c.deleted_at)"
            " AND (CONTAINS(c.title, @text, true)"
            " OR CONTAINS(c.subtitle, @text, true)"
            " OR CONTAINS(c.slug, @text, true))"
            " ORDER BY c.updated_at DESC",
            [
                {"name": "@text", "value": text},
                {"name": "@limit", "value": limit},
            ],
        )
