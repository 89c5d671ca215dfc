"""Content block models - the typed units that make up an article body.

Each variant is a frozen pydantic model discriminated on ``type``. Payload
fields serialize as flat camelCase properties next to ``id`` and ``type``, the
shape stored on the article record. Every payload field has a default so
partially-filled blocks load; extra properties are kept so they survive a
load/save cycle.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BlockKind(StrEnum):
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    IMAGE = "image"
    QUOTE = "quote"
    DIVIDER = "divider"
    BULLET_LIST = "bullet_list"
    YOUTUBE = "youtube"
    TWEET = "tweet"
    ARTICLE_LINK = "article_link"
    VIDEO = "video"


class DisplayStyle(StrEnum):
    CARD = "card"
    INLINE = "inline"


class VideoSource(StrEnum):
    YOUTUBE = "youtube"
    UPLOAD = "upload"


HeadingLevel = Literal[2, 3, 4]


class _Payload(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )


class _BlockBase(_Payload):
    id: str


class ParagraphBlock(_BlockBase):
    """Prose. ``text`` is inline HTML limited to bold, italic and links."""

    type: Literal["paragraph"] = "paragraph"
    text: str = ""


class HeadingBlock(_BlockBase):
    type: Literal["heading"] = "heading"
    text: str = ""
    level: HeadingLevel = 2


class ImageBlock(_BlockBase):
    """An uploaded image; ``url`` comes back from the file upload service."""

    type: Literal["image"] = "image"
    url: str = ""
    full_url: str | None = None
    credit: str | None = None
    caption_he: str | None = None
    caption_en: str | None = None
    alt_text: str | None = None


class QuoteBlock(_BlockBase):
    type: Literal["quote"] = "quote"
    text: str = ""
    attribution: str | None = None


class DividerBlock(_BlockBase):
    type: Literal["divider"] = "divider"


class BulletListBlock(_BlockBase):
    type: Literal["bullet_list"] = "bullet_list"
    items: tuple[str, ...] = ()


class YouTubeBlock(_BlockBase):
    type: Literal["youtube"] = "youtube"
    video_id: str = ""
    caption: str | None = None
    credit: str | None = None


class TweetBlock(_BlockBase):
    type: Literal["tweet"] = "tweet"
    tweet_id: str = ""
    author_handle: str | None = None
    preview_text: str | None = None
    caption: str | None = None


class LinkedArticleSnapshot(_Payload):
    """Title/slug/image copied from the linked article when it was picked."""

    title: str = ""
    slug: str = ""
    hero_image_url: str | None = None


class ArticleLinkBlock(_BlockBase):
    type: Literal["article_link"] = "article_link"
    linked_article_id: str = ""
    display_style: DisplayStyle = DisplayStyle.CARD
    linked_article: LinkedArticleSnapshot | None = None


class VideoBlock(_BlockBase):
    """A video that is either a YouTube embed or an uploaded file.

    ``source`` decides which reference is authoritative: ``video_id`` for
    YouTube, ``url`` for uploads. The other one is ignored when rendering.
    """

    type: Literal["video"] = "video"
    source: VideoSource = VideoSource.YOUTUBE
    video_id: str | None = None
    url: str | None = None
    thumbnail_url: str | None = None
    mime_type: str | None = None
    caption: str | None = None
    credit: str | None = None

    @property
    def media_ref(self) -> str:
        """The reference that counts for the current ``source``."""
        if self.source == VideoSource.UPLOAD:
            return self.url or ""
        return self.video_id or ""


class UnknownBlock(BaseModel):
    """A stored element that is not a recognizable block.

    Holds the original element untouched so saving the document writes it back
    exactly as it was read.
    """

    model_config = ConfigDict(frozen=True)

    raw: Any = None

    @property
    def id(self) -> str | None:
        value = self.raw.get("id") if isinstance(self.raw, dict) else None
        return value if isinstance(value, str) else None

    @property
    def type(self) -> str | None:
        value = self.raw.get("type") if isinstance(self.raw, dict) else None
        return value if isinstance(value, str) else None


Block = Annotated[
    ParagraphBlock
    | HeadingBlock
    | ImageBlock
    | QuoteBlock
    | DividerBlock
    | BulletListBlock
    | YouTubeBlock
    | TweetBlock
    | ArticleLinkBlock
    | VideoBlock,
    Field(discriminator="type"),
]

KnownBlock = (
    ParagraphBlock
    | HeadingBlock
    | ImageBlock
    | QuoteBlock
    | DividerBlock
    | BulletListBlock
    | YouTubeBlock
    | TweetBlock
    | ArticleLinkBlock
    | VideoBlock
)

AnyBlock = KnownBlock | UnknownBlock

BLOCK_MODELS: dict[BlockKind, type[KnownBlock]] = {
    BlockKind.PARAGRAPH: ParagraphBlock,
    BlockKind.HEADING: HeadingBlock,
    BlockKind.IMAGE: ImageBlock,
    BlockKind.QUOTE: QuoteBlock,
    BlockKind.DIVIDER: DividerBlock,
    BlockKind.BULLET_LIST: BulletListBlock,
    BlockKind.YOUTUBE: YouTubeBlock,
    BlockKind.TWEET: TweetBlock,
    BlockKind.ARTICLE_LINK: ArticleLinkBlock,
    BlockKind.VIDEO: VideoBlock,
}

BLOCK_LABELS: dict[BlockKind, str] = {
    BlockKind.PARAGRAPH: "פסקה",
    BlockKind.HEADING: "כותרת",
    BlockKind.IMAGE: "תמונה",
    BlockKind.QUOTE: "ציטוט",
    BlockKind.DIVIDER: "קו מפריד",
    BlockKind.BULLET_LIST: "רשימה",
    BlockKind.YOUTUBE: "YouTube",
    BlockKind.TWEET: "X / Tweet",
    BlockKind.ARTICLE_LINK: "קישור לכתבה",
    BlockKind.VIDEO: "וידאו",
}
