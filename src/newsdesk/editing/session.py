"""Editing session - one actor editing one article body."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, assert_never

from newsdesk.blocks import document
from newsdesk.blocks.ids import new_block_id
from newsdesk.blocks.reading_time import estimate
from newsdesk.blocks.serialization import dump_blocks, load_blocks
from newsdesk.config import EditorConfig
from newsdesk.editing.widgets import (
    ArticleLinkEditor,
    BlockEditor,
    BulletListEditor,
    DividerEditor,
    HeadingEditor,
    ImageEditor,
    ParagraphEditor,
    QuoteEditor,
    TweetEditor,
    VideoEditor,
    YouTubeEditor,
)
from newsdesk.models.blocks import (
    ArticleLinkBlock,
    BulletListBlock,
    DividerBlock,
    HeadingBlock,
    ImageBlock,
    ParagraphBlock,
    QuoteBlock,
    TweetBlock,
    UnknownBlock,
    VideoBlock,
    YouTubeBlock,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from newsdesk.blocks.document import Document
    from newsdesk.blocks.ids import IdFactory
    from newsdesk.editing.collaborators import ArticleSearch, BodyStore, FileUploader
    from newsdesk.models.article import Article
    from newsdesk.models.blocks import AnyBlock, BlockKind

logger = logging.getLogger(__name__)


class EditorSession:
    """Apply user actions to an article body, one operation at a time.

    Each action maps to a single document operation. When the document
    changes, listeners are called with the new tuple so the view can
    re-render. Nothing is written until ``save``; ``discard`` drops every
    change since the last save.
    """

    def __init__(
        self,
        article_id: str,
        blocks: Sequence[AnyBlock] = (),
        *,
        store: BodyStore | None = None,
        search: ArticleSearch | None = None,
        uploader: FileUploader | None = None,
        config: EditorConfig | None = None,
        new_id: IdFactory = new_block_id,
    ) -> None:
        self.article_id = article_id
        self.store = store
        self.search = search
        self.uploader = uploader
        self.config = config or EditorConfig()
        self._new_id = new_id
        self._blocks: Document = tuple(blocks)
        self._saved: Document = self._blocks
        self._widgets: dict[str, BlockEditor] = {}
        self._listeners: list[Callable[[Document], None]] = []

    @classmethod
    def for_article(cls, article: Article, **kwargs: object) -> EditorSession:
        """Open a session on an article's stored body."""
        return cls(article.id, load_blocks(article.body_blocks), **kwargs)  # type: ignore[arg-type]

    @property
    def blocks(self) -> Document:
        return self._blocks

    @property
    def dirty(self) -> bool:
        return self._blocks != self._saved

    def subscribe(self, listener: Callable[[Document], None]) -> Callable[[], None]:
        """Register a change listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._blocks)

    def find(self, block_id: str) -> AnyBlock | None:
        return document.find(self._blocks, block_id)

    def add_block(self, kind: BlockKind | str) -> BlockEditor | None:
        """Append an empty block of ``kind`` and return its editor."""
        self._commit(document.append(self._blocks, kind, new_id=self._new_id))
        block = self._blocks[-1]
        logger.debug("Block added - article=%s id=%s type=%s", self.article_id, block.id, block.type)
        editor = self.widget(block.id)  # type: ignore[arg-type]
        if editor is not None:
            editor.initialize()
        return editor

    def update_block(self, block_id: str, replacement: AnyBlock) -> None:
        self._commit(document.update(self._blocks, block_id, replacement))

    def delete_block(self, block_id: str) -> None:
        self._commit(document.remove(self._blocks, block_id))
        widget = self._widgets.pop(block_id, None)
        if widget is not None:
            widget.discard()

    def drop(self, block_id: str, target_index: int) -> None:
        """Finish a drag: move ``block_id`` to ``target_index``."""
        if document.index_of(self._blocks, block_id) == target_index:
            return
        self._commit(document.reposition(self._blocks, block_id, target_index))

    def drop_on(self, active_id: str, over_id: str) -> None:
        """Finish a drag that ended over another block."""
        if active_id == over_id:
            return
        target = document.index_of(self._blocks, over_id)
        if target is None:
            return
        self.drop(active_id, target)

    def widget(self, block_id: str) -> BlockEditor | None:
        """Return the editor for a block; None for missing or unknown blocks."""
        cached = self._widgets.get(block_id)
        if cached is not None:
            return cached
        block = self.find(block_id)
        if block is None:
            return None
        editor = self._create_widget(block)
        if editor is not None:
            self._widgets[block_id] = editor
        return editor

    def _create_widget(self, block: AnyBlock) -> BlockEditor | None:
        match block:
            case ParagraphBlock():
                return ParagraphEditor(self, block.id)
            case HeadingBlock():
                return HeadingEditor(self, block.id)
            case ImageBlock():
                return ImageEditor(self, block.id)
            case QuoteBlock():
                return QuoteEditor(self, block.id)
            case DividerBlock():
                return DividerEditor(self, block.id)
            case BulletListBlock():
                return BulletListEditor(self, block.id)
            case YouTubeBlock():
                return YouTubeEditor(self, block.id)
            case TweetBlock():
                return TweetEditor(self, block.id)
            case ArticleLinkBlock():
                return ArticleLinkEditor(self, block.id)
            case VideoBlock():
                return VideoEditor(self, block.id)
            case UnknownBlock():
                return None
            case _:
                assert_never(block)

    def reading_time(self) -> int:
        return estimate(self._blocks, words_per_minute=self.config.words_per_minute)

    def serialize(self) -> list:
        return dump_blocks(self._blocks)

    async def save(self) -> int:
        """Hand the whole body to the store; returns the stored reading time."""
        if self.store is None:
            msg = "EditorSession has no body store - cannot save"
            raise RuntimeError(msg)
        snapshot = self._blocks
        stored = await self.store.save_body(
            self.article_id,
            dump_blocks(snapshot),
            estimate(snapshot, words_per_minute=self.config.words_per_minute),
        )
        self._saved = snapshot
        logger.info(
            "Article body saved - article=%s blocks=%d reading_time=%d",
            self.article_id,
            len(snapshot),
            stored,
        )
        return stored

    def discard(self) -> None:
        """Throw away every change made since the last save."""
        if not self.dirty:
            return
        for widget in self._widgets.values():
            widget.discard()
        self._widgets.clear()
        self._blocks = self._saved
        self.notify()

    def _commit(self, blocks: Document) -> None:
        if blocks == self._blocks:
            return
        self._blocks = blocks
        self.notify()
