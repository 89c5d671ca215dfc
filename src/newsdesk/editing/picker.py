"""Search-as-you-type picker for the article-link block."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from newsdesk.editing.collaborators import ArticleCandidate, ArticleSearch

logger = logging.getLogger(__name__)


class ArticlePicker:
    """Debounced article search where each keystroke supersedes the last.

    A search fires only after input pauses for ``debounce_ms`` and only for
    queries of at least ``min_chars`` characters. Every keystroke bumps a
    generation counter and cancels the pending task; a response that arrives
    for an older generation is dropped instead of replacing the results.
    """

    def __init__(
        self,
        search: ArticleSearch,
        *,
        debounce_ms: int = 400,
        min_chars: int = 2,
        limit: int = 5,
        on_results: Callable[[list[ArticleCandidate]], None] | None = None,
    ) -> None:
        self._search = search
        self._debounce = debounce_ms / 1000
        self._min_chars = min_chars
        self._limit = limit
        self._on_results = on_results
        self._generation = 0
        self._task: asyncio.Task | None = None
        self.query = ""
        self.results: list[ArticleCandidate] = []
        self.searching = False

    @property
    def generation(self) -> int:
        return self._generation

    def set_query(self, query: str) -> None:
        """Record new input and schedule a search for it."""
        self.query = query
        self._generation += 1
        self._cancel_pending()
        if len(query) < self._min_chars:
            self.searching = False
            self._publish([])
            return
        self._task = asyncio.create_task(self._run(query, self._generation))

    def reset(self) -> None:
        """Clear input and results, abandoning any search in flight."""
        self.query = ""
        self._generation += 1
        self._cancel_pending()
        self.searching = False
        self._publish([])

    async def settle(self) -> None:
        """Wait for the current search task, if any, to finish."""
        if self._task is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await self._task

    async def _run(self, query: str, generation: int) -> None:
        await asyncio.sleep(self._debounce)
        if generation != self._generation:
            return
        self.searching = True
        try:
            results = await self._search.search(query)
        except asyncio.CancelledError:
            raise
        except Exception:  # noqa: BLE001
            logger.warning("Article search failed - query=%r", query, exc_info=True)
            results = []
        if generation != self._generation:
            logger.debug("Dropping stale search results - query=%r", query)
            return
        self.searching = False
        self._publish(list(results)[: self._limit])

    def _cancel_pending(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    def _publish(self, results: list[ArticleCandidate]) -> None:
        self.results = results
        if self._on_results is not None:
            self._on_results(results)
