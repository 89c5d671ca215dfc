"""Data models for Cosmos DB documents and article body blocks."""

from newsdesk.models.article import Article, ArticleStatus
from newsdesk.models.blocks import (
    AnyBlock,
    ArticleLinkBlock,
    Block,
    BlockKind,
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
    UnknownBlock,
    VideoBlock,
    VideoSource,
    YouTubeBlock,
)

__all__ = [
    "AnyBlock",
    "Article",
    "ArticleLinkBlock",
    "ArticleStatus",
    "Block",
    "BlockKind",
    "BulletListBlock",
    "DisplayStyle",
    "DividerBlock",
    "HeadingBlock",
    "ImageBlock",
    "KnownBlock",
    "LinkedArticleSnapshot",
    "ParagraphBlock",
    "QuoteBlock",
    "TweetBlock",
    "UnknownBlock",
    "VideoBlock",
    "VideoSource",
    "YouTubeBlock",
]
