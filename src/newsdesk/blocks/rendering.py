"""Server-side HTML rendering of an article body."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, assert_never

import bleach
from jinja2 import Environment, PackageLoader, select_autoescape

from newsdesk.blocks.embeds import (
    tweet_url,
    youtube_embed_url,
    youtube_thumbnail_candidates,
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
    VideoSource,
    YouTubeBlock,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from newsdesk.models.blocks import AnyBlock

logger = logging.getLogger(__name__)

INLINE_TAGS = frozenset({"a", "b", "strong", "i", "em", "p", "br"})
INLINE_ATTRIBUTES = {"a": ["href", "title", "target", "rel"]}
INLINE_PROTOCOLS = frozenset({"http", "https", "mailto"})

PLACEHOLDER_TEMPLATE = "blocks/unknown.html"


def sanitize_inline_html(html: str) -> str:
    """Drop every tag and attribute outside the bold/italic/link allow-list."""
    return bleach.clean(
        html,
        tags=INLINE_TAGS,
        attributes=INLINE_ATTRIBUTES,
        protocols=INLINE_PROTOCOLS,
        strip=True,
    )


def create_environment() -> Environment:
    return Environment(
        loader=PackageLoader("newsdesk", "templates"),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


class BlockRenderer:
    """Render blocks to HTML fragments with one template per block kind."""

    def __init__(
        self,
        env: Environment | None = None,
        *,
        article_url_prefix: str = "/article/",
    ) -> None:
        self._env = env or create_environment()
        self._article_url_prefix = article_url_prefix

    def render_blocks(self, blocks: Iterable[AnyBlock]) -> str:
        return "\n".join(self.render_block(block) for block in blocks)

    def render_block(self, block: AnyBlock) -> str:
        """Render one block; anything that fails becomes a placeholder."""
        try:
            template_name, context = self._view(block)
            return self._env.get_template(template_name).render(**context)
        except Exception:
            logger.exception("Failed to render block id=%s type=%s", block.id, block.type)
            return self._env.get_template(PLACEHOLDER_TEMPLATE).render(block=block)

    def _view(self, block: AnyBlock) -> tuple[str, dict[str, Any]]:
        match block:
            case ParagraphBlock():
                return "blocks/paragraph.html", {
                    "block": block,
                    "html": sanitize_inline_html(block.text),
                }
            case HeadingBlock():
                return "blocks/heading.html", {"block": block}
            case ImageBlock():
                return "blocks/image.html", {"block": block}
            case QuoteBlock():
                return "blocks/quote.html", {"block": block}
            case DividerBlock():
                return "blocks/divider.html", {"block": block}
            case BulletListBlock():
                return "blocks/bullet_list.html", {
                    "block": block,
                    "items": [item for item in block.items if item.strip()],
                }
            case YouTubeBlock():
                return "blocks/youtube.html", self._youtube_context(block, block.video_id)
            case TweetBlock():
                return "blocks/tweet.html", {
                    "block": block,
                    "href": tweet_url(block.tweet_id, block.author_handle),
                }
            case ArticleLinkBlock():
                snapshot = block.linked_article
                return "blocks/article_link.html", {
                    "block": block,
                    "snapshot": snapshot,
                    "href": f"{self._article_url_prefix}{snapshot.slug}" if snapshot else None,
                }
            case VideoBlock():
                if block.source == VideoSource.UPLOAD:
                    return "blocks/video.html", {"block": block, "src": block.media_ref}
                return "blocks/youtube.html", self._youtube_context(block, block.media_ref)
            case UnknownBlock():
                return PLACEHOLDER_TEMPLATE, {"block": block}
            case _:
                assert_never(block)

    @staticmethod
    def _youtube_context(block: YouTubeBlock | VideoBlock, video_id: str) -> dict[str, Any]:
        thumbnails = youtube_thumbnail_candidates(video_id) if video_id else []
        return {
            "block": block,
            "video_id": video_id,
            "embed_url": youtube_embed_url(video_id) if video_id else None,
            "thumbnail": thumbnails[0] if thumbnails else None,
            "fallback_thumbnail": thumbnails[1] if len(thumbnails) > 1 else None,
        }
