"""Per-variant block editors.

A widget never holds a copy of its block: every edit reads the block's
current value from the session, applies one change and hands the result to
``EditorSession.update_block``. That keeps edits made elsewhere in the document
(for example while an upload is in flight) from being overwritten.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from newsdesk.blocks.embeds import (
    extract_tweet,
    extract_youtube_id,
    is_tweet_id,
    parse_tweet,
    parse_youtube_id,
    youtube_thumbnail_candidates,
    youtube_thumbnail_url,
)
from newsdesk.editing.picker import ArticlePicker
from newsdesk.models.blocks import (
    ArticleLinkBlock,
    BulletListBlock,
    DisplayStyle,
    DividerBlock,
    HeadingBlock,
    ImageBlock,
    KnownBlock,
    LinkedArticleSnapshot,
    ParagraphBlock,
    QuoteBlock,
    TweetBlock,
    VideoBlock,
    VideoSource,
    YouTubeBlock,
)

if TYPE_CHECKING:
    from newsdesk.editing.collaborators import ArticleCandidate, MediaFile, UploadedFile
    from newsdesk.editing.session import EditorSession

logger = logging.getLogger(__name__)

VIDEO_ID_HINT = "could not recognize a video ID"
TWEET_ID_HINT = "could not recognize a tweet link"
UPLOAD_FAILED = "upload failed"
UPLOAD_UNAVAILABLE = "uploads are not configured"

HEADING_LEVELS = (2, 3, 4)

B = TypeVar("B", bound=KnownBlock)


class BlockEditor(Generic[B]):
    """Base for the editor of one block in a session."""

    block_model: ClassVar[type[KnownBlock]]

    def __init__(self, session: EditorSession, block_id: str) -> None:
        self._session = session
        self.block_id = block_id

    @property
    def block(self) -> B | None:
        block = self._session.find(self.block_id)
        if isinstance(block, self.block_model):
            return block  # type: ignore[return-value]
        return None

    def initialize(self) -> None:
        """Set kind-specific defaults on a freshly added block."""

    def discard(self) -> None:
        """Release transient state when the block leaves the document."""

    def _apply(self, **changes: Any) -> bool:
        block = self.block
        if block is None:
            return False
        self._session.update_block(self.block_id, block.model_copy(update=changes))
        return True


class _UploadMixin:
    """Busy/error state for widgets that send files to the upload service."""

    _session: EditorSession
    block_id: str

    uploading: bool = False
    error: str | None = None

    async def _upload(self, file: MediaFile) -> UploadedFile | None:
        if self.uploading:
            logger.info("Upload ignored while another is running - block=%s", self.block_id)
            return None
        uploader = self._session.uploader
        if uploader is None:
            self.error = UPLOAD_UNAVAILABLE
            return None
        self.uploading = True
        self.error = None
        try:
            return await uploader.upload(file)
        except Exception:  # noqa: BLE001
            logger.warning(
                "Upload failed - block=%s file=%s",
                self.block_id,
                file.filename,
                exc_info=True,
            )
            self.error = UPLOAD_FAILED
            return None
        finally:
            self.uploading = False


class ParagraphEditor(BlockEditor[ParagraphBlock]):
    block_model = ParagraphBlock

    def set_text(self, html: str) -> None:
        self._apply(text=html)


class HeadingEditor(BlockEditor[HeadingBlock]):
    block_model = HeadingBlock

    def set_text(self, text: str) -> None:
        self._apply(text=text)

    def set_level(self, level: int) -> None:
        if level not in HEADING_LEVELS:
            msg = f"Heading level must be one of {HEADING_LEVELS}, got {level}"
            raise ValueError(msg)
        self._apply(level=level)


class ImageEditor(_UploadMixin, BlockEditor[ImageBlock]):
    block_model = ImageBlock

    async def upload(self, file: MediaFile) -> bool:
        """Upload an image and point the block at it; False on failure."""
        uploaded = await self._upload(file)
        if uploaded is None:
            return False
        return self._apply(url=uploaded.url)

    def set_url(self, url: str) -> None:
        self._apply(url=url)

    def set_caption(self, caption: str) -> None:
        self._apply(caption_he=caption)

    def set_caption_en(self, caption: str) -> None:
        self._apply(caption_en=caption)

    def set_credit(self, credit: str) -> None:
        self._apply(credit=credit)

    def set_alt_text(self, alt_text: str) -> None:
        self._apply(alt_text=alt_text)


class QuoteEditor(BlockEditor[QuoteBlock]):
    block_model = QuoteBlock

    def set_text(self, text: str) -> None:
        self._apply(text=text)

    def set_attribution(self, attribution: str) -> None:
        self._apply(attribution=attribution)


class DividerEditor(BlockEditor[DividerBlock]):
    block_model = DividerBlock


class BulletListEditor(BlockEditor[BulletListBlock]):
    block_model = BulletListBlock

    def initialize(self) -> None:
        block = self.block
        if block is not None and not block.items:
            self._apply(items=("",))

    def set_item(self, index: int, value: str) -> None:
        block = self.block
        if block is None or not 0 <= index < len(block.items):
            return
        items = list(block.items)
        items[index] = value
        self._apply(items=tuple(items))

    def add_item(self, value: str = "") -> None:
        block = self.block
        if block is not None:
            self._apply(items=(*block.items, value))

    def remove_item(self, index: int) -> None:
        """Remove one item; the last remaining item is kept."""
        block = self.block
        if block is None or len(block.items) <= 1 or not 0 <= index < len(block.items):
            return
        self._apply(items=block.items[:index] + block.items[index + 1 :])

    def move_item(self, index: int, target_index: int) -> None:
        block = self.block
        if block is None or not 0 <= index < len(block.items):
            return
        items = list(block.items)
        item = items.pop(index)
        items.insert(min(max(target_index, 0), len(items)), item)
        self._apply(items=tuple(items))


class YouTubeEditor(BlockEditor[YouTubeBlock]):
    block_model = YouTubeBlock

    def __init__(self, session: EditorSession, block_id: str) -> None:
        super().__init__(session, block_id)
        block = self.block
        self.raw_input = block.video_id if block else ""
        self.hint: str | None = None

    def commit(self, raw: str | None = None) -> None:
        """Normalize pasted input (on blur) and store the canonical ID."""
        text = (self.raw_input if raw is None else raw).strip()
        video_id = extract_youtube_id(text)
        self.hint = VIDEO_ID_HINT if text and parse_youtube_id(text) is None else None
        self.raw_input = video_id
        self._apply(video_id=video_id)

    def set_caption(self, caption: str) -> None:
        self._apply(caption=caption)

    def set_credit(self, credit: str) -> None:
        self._apply(credit=credit)

    @property
    def thumbnails(self) -> list[str]:
        block = self.block
        if block is None or not block.video_id:
            return []
        return youtube_thumbnail_candidates(block.video_id)


class TweetEditor(BlockEditor[TweetBlock]):
    block_model = TweetBlock

    def __init__(self, session: EditorSession, block_id: str) -> None:
        super().__init__(session, block_id)
        block = self.block
        self.raw_input = block.tweet_id if block else ""
        self.hint: str | None = None

    def commit(self, raw: str | None = None) -> None:
        """Normalize a pasted status URL into the tweet ID and handle."""
        block = self.block
        if block is None:
            return
        text = (self.raw_input if raw is None else raw).strip()
        ref = extract_tweet(text, previous_handle=block.author_handle)
        recognized = parse_tweet(text) is not None or is_tweet_id(text)
        self.hint = TWEET_ID_HINT if text and not recognized else None
        self.raw_input = ref.tweet_id
        self._apply(tweet_id=ref.tweet_id, author_handle=ref.author_handle)

    def set_caption(self, caption: str) -> None:
        self._apply(caption=caption)

    def set_preview_text(self, text: str) -> None:
        self._apply(preview_text=text)


class ArticleLinkEditor(BlockEditor[ArticleLinkBlock]):
    block_model = ArticleLinkBlock

    def __init__(self, session: EditorSession, block_id: str) -> None:
        super().__init__(session, block_id)
        self.picker: ArticlePicker | None = None
        if session.search is not None:
            config = session.config
            self.picker = ArticlePicker(
                session.search,
                debounce_ms=config.search_debounce_ms,
                min_chars=config.search_min_chars,
                limit=config.search_limit,
                on_results=lambda _: session.notify(),
            )

    def initialize(self) -> None:
        self._apply(
            linked_article_id="",
            linked_article=None,
            display_style=DisplayStyle.CARD,
        )

    def search(self, query: str) -> None:
        if self.picker is None:
            logger.debug("Article search requested without a search service")
            return
        self.picker.set_query(query)

    @property
    def candidates(self) -> list[ArticleCandidate]:
        return self.picker.results if self.picker else []

    def select(self, candidate: ArticleCandidate) -> None:
        """Link the chosen article and snapshot what render needs from it."""
        snapshot = LinkedArticleSnapshot(
            title=candidate.title,
            slug=candidate.slug,
            hero_image_url=candidate.hero_image_url,
        )
        self._apply(linked_article_id=candidate.id, linked_article=snapshot)
        if self.picker is not None:
            self.picker.reset()

    def clear(self) -> None:
        self._apply(linked_article_id="", linked_article=None)

    def set_display_style(self, style: DisplayStyle | str) -> None:
        self._apply(display_style=DisplayStyle(style))

    def discard(self) -> None:
        if self.picker is not None:
            self.picker.reset()


class VideoEditor(_UploadMixin, BlockEditor[VideoBlock]):
    block_model = VideoBlock

    def __init__(self, session: EditorSession, block_id: str) -> None:
        super().__init__(session, block_id)
        block = self.block
        self.raw_input = (block.video_id or "") if block else ""
        self.hint: str | None = None

    def set_source(self, source: VideoSource | str) -> None:
        self._apply(source=VideoSource(source))

    def commit_youtube(self, raw: str | None = None) -> None:
        text = (self.raw_input if raw is None else raw).strip()
        video_id = extract_youtube_id(text)
        self.hint = VIDEO_ID_HINT if text and parse_youtube_id(text) is None else None
        self.raw_input = video_id
        self._apply(
            video_id=video_id,
            thumbnail_url=youtube_thumbnail_url(video_id, "maxresdefault") if video_id else None,
        )

    async def upload(self, file: MediaFile) -> bool:
        uploaded = await self._upload(file)
        if uploaded is None:
            return False
        return self._apply(
            source=VideoSource.UPLOAD,
            url=uploaded.url,
            mime_type=uploaded.mime_type,
        )

    def remove_upload(self) -> None:
        self._apply(url="", mime_type=None, thumbnail_url=None)

    def set_caption(self, caption: str) -> None:
        self._apply(caption=caption)

    def set_credit(self, credit: str) -> None:
        self._apply(credit=credit)
