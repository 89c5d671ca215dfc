"""Tests for the reading-time estimate."""

import pytest

from newsdesk.blocks.reading_time import block_word_count, count_words, estimate
from newsdesk.models.blocks import (
    BulletListBlock,
    HeadingBlock,
    ImageBlock,
    ParagraphBlock,
    QuoteBlock,
    UnknownBlock,
)


def _words(n: int) -> str:
    return " ".join(["word"] * n)


class TestCountWords:
    """Test word counting."""

    def test_empty(self) -> None:
        """Verify empty and None text count as zero."""
        assert count_words("") == 0
        assert count_words(None) == 0

    def test_whitespace_runs(self) -> None:
        """Verify runs of whitespace separate words once."""
        assert count_words("  one\ttwo \n three  ") == 3

    def test_strip_markup(self) -> None:
        """Verify tags are removed before counting when asked."""
        html = "<b>bold</b> and <a href='https://x.test'>a link</a>"

        assert count_words(html, strip_markup=True) == 4


class TestBlockWordCount:
    """Test which blocks contribute words."""

    def test_paragraph_ignores_tags(self) -> None:
        """Verify paragraph markup does not count as words."""
        block = ParagraphBlock(id="p", text="<p>one <em>two</em></p>")

        assert block_word_count(block) == 2

    def test_heading_and_quote_count(self) -> None:
        """Verify headings and quotes contribute their text."""
        assert block_word_count(HeadingBlock(id="h", text="a b c")) == 3
        assert block_word_count(QuoteBlock(id="q", text="x y")) == 2

    @pytest.mark.parametrize(
        "block",
        [
            ImageBlock(id="i", caption_he="a caption here"),
            BulletListBlock(id="l", items=("one two", "three")),
            UnknownBlock(raw={"id": "u", "type": "poll", "text": "many words here"}),
        ],
    )
    def test_other_blocks_contribute_nothing(self, block) -> None:
        """Verify non-prose blocks count zero words."""
        assert block_word_count(block) == 0


class TestEstimate:
    """Test the minutes estimate."""

    def test_empty_document_is_one_minute(self) -> None:
        """Verify an empty body reads in one minute."""
        assert estimate([]) == 1

    def test_rounds_up(self) -> None:
        """Verify 210 words over three paragraphs take two minutes."""
        blocks = [
            ParagraphBlock(id="1", text=_words(70)),
            ParagraphBlock(id="2", text=_words(70)),
            ParagraphBlock(id="3", text=_words(70)),
        ]

        assert estimate(blocks) == 2

    def test_exact_multiple(self) -> None:
        """Verify 400 words take exactly two minutes."""
        assert estimate([ParagraphBlock(id="1", text=_words(400))]) == 2

    def test_custom_rate(self) -> None:
        """Verify the words-per-minute rate is configurable."""
        blocks = [ParagraphBlock(id="1", text=_words(100))]

        assert estimate(blocks, words_per_minute=50) == 2

    @pytest.mark.parametrize("words", [0, 1, 199, 200, 201, 1000])
    def test_never_below_one(self, words: int) -> None:
        """Verify the estimate is at least one minute."""
        assert estimate([ParagraphBlock(id="1", text=_words(words))]) >= 1
