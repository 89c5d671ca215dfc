"""Article business logic - create, load and save bodies, picker search."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from newsdesk.blocks.reading_time import WORDS_PER_MINUTE, estimate
from newsdesk.blocks.serialization import load_blocks
from newsdesk.editing.collaborators import ArticleCandidate
from newsdesk.models.article import Article

if TYPE_CHECKING:
    from collections.abc import Sequence

    from newsdesk.blocks.document import Document
    from newsdesk.database.repositories.articles import ArticleRepository

logger = logging.getLogger(__name__)


class ArticleNotFoundError(LookupError):
    """Raised when an article id does not resolve to an active article."""

    def __init__(self, article_id: str) -> None:
        super().__init__(f"Article not found: {article_id}")
        self.article_id = article_id


def reading_time_for(raw_blocks: Sequence[Any], words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Reading time of a serialized body."""
    return estimate(load_blocks(raw_blocks), words_per_minute=words_per_minute)


async def create_article(
    title: str,
    slug: str,
    articles_repo: ArticleRepository,
    *,
    body_blocks: Sequence[Any] = (),
    words_per_minute: int = WORDS_PER_MINUTE,
    **fields: Any,
) -> Article:
    """Create a draft article; the body starts empty unless given."""
    article = Article(
        title=title,
        slug=slug,
        body_blocks=list(body_blocks),
        reading_time_minutes=reading_time_for(body_blocks, words_per_minute),
        **fields,
    )
    await articles_repo.create(article)
    logger.info("Article created - id=%s slug=%s", article.id, slug)
    return article


async def get_article(article_id: str, articles_repo: ArticleRepository) -> Article:
    article = await articles_repo.get(article_id, article_id)
    if article is None:
        raise ArticleNotFoundError(article_id)
    return article


async def load_body(article_id: str, articles_repo: ArticleRepository) -> Document:
    article = await get_article(article_id, articles_repo)
    return load_blocks(article.body_blocks)


async def save_body(
    article_id: str,
    raw_blocks: Sequence[Any],
    articles_repo: ArticleRepository,
    *,
    words_per_minute: int = WORDS_PER_MINUTE,
) -> Article:
    """Replace an article's body and recompute its reading time.

    The array is stored exactly as given. The whole body is written at once,
    so the last save wins.
    """
    article = await get_article(article_id, articles_repo)
    article.body_blocks = list(raw_blocks)
    article.reading_time_minutes = reading_time_for(raw_blocks, words_per_minute)
    await articles_repo.update(article, article_id)
    logger.info(
        "Article body written - id=%s blocks=%d reading_time=%d",
        article_id,
        len(article.body_blocks),
        article.reading_time_minutes,
    )
    return article


async def search_articles(
    query: str,
    articles_repo: ArticleRepository,
    *,
    limit: int = 5,
    min_chars: int = 2,
) -> list[ArticleCandidate]:
    """Candidates for the article-link picker."""
    query = query.strip()
    if len(query) < min_chars:
        return []
    articles = await articles_repo.search(query, limit=limit)
    return [
        ArticleCandidate(
            id=article.id,
            title=article.title,
            slug=article.slug,
            hero_image_url=article.hero_image_url,
            category_name=article.category_name,
        )
        for article in articles
    ]


class ArticleStore:
    """Repository-backed body store and article search for editor sessions."""

    def __init__(
        self,
        articles_repo: ArticleRepository,
        *,
        words_per_minute: int = WORDS_PER_MINUTE,
        search_limit: int = 5,
    ) -> None:
        self._repo = articles_repo
        self._words_per_minute = words_per_minute
        self._search_limit = search_limit

    async def save_body(
        self,
        article_id: str,
        blocks: Sequence[Any],
        reading_time_minutes: int,
    ) -> int:
        article = await save_body(
            article_id,
            blocks,
            self._repo,
            words_per_minute=self._words_per_minute,
        )
        if article.reading_time_minutes != reading_time_minutes:
            logger.debug(
                "Reading time recomputed on write - id=%s sent=%d stored=%d",
                article_id,
                reading_time_minutes,
                article.reading_time_minutes,
            )
        return article.reading_time_minutes

    async def search(self, query: str) -> list[ArticleCandidate]:
        return await search_articles(query, self._repo, limit=self._search_limit)
