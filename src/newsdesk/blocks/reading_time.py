"""Reading-time estimate derived from an article's block sequence."""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, assert_never

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
    from collections.abc import Iterable

    from newsdesk.models.blocks import AnyBlock

WORDS_PER_MINUTE = 200

_TAG = re.compile(r"<[^>]*>")


def count_words(text: str | None, *, strip_markup: bool = False) -> int:
    if not text:
        return 0
    if strip_markup:
        text = _TAG.sub("", text)
    return len(text.split())


def block_word_count(block: AnyBlock) -> int:
    match block:
        case ParagraphBlock() | HeadingBlock():
            return count_words(block.text, strip_markup=True)
        case QuoteBlock():
            return count_words(block.text)
        case (
            ImageBlock()
            | DividerBlock()
            | BulletListBlock()
            | YouTubeBlock()
            | TweetBlock()
            | ArticleLinkBlock()
            | VideoBlock()
            | UnknownBlock()
        ):
            return 0
        case _:
            assert_never(block)


def estimate(blocks: Iterable[AnyBlock], *, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Minutes to read the body; never less than 1."""
    total = sum(block_word_count(block) for block in blocks)
    return max(1, math.ceil(total / max(1, words_per_minute)))
