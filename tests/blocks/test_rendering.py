"""Tests for server-side block rendering."""

from unittest.mock import patch

import pytest

from newsdesk.blocks.rendering import BlockRenderer, sanitize_inline_html
from newsdesk.models.blocks import (
    ArticleLinkBlock,
    BulletListBlock,
    DisplayStyle,
    DividerBlock,
    HeadingBlock,
    ImageBlock,
    LinkedArticleSnapshot,
    ParagraphBlock,
    QuoteBlock,
    TweetBlock,
    UnknownBlock,
    VideoBlock,
    VideoSource,
    YouTubeBlock,
)


class TestSanitizeInlineHtml:
    """Test the paragraph allow-list."""

    def test_keeps_bold_italic_links(self) -> None:
        """Verify allowed formatting survives."""
        html = '<b>bold</b> <em>it</em> <a href="https://x.test">link</a>'

        assert sanitize_inline_html(html) == html

    def test_strips_disallowed_tags(self) -> None:
        """Verify scripts and unknown tags are stripped."""
        cleaned = sanitize_inline_html('<script>alert(1)</script><span style="x">ok</span>')

        assert "<script" not in cleaned
        assert "<span" not in cleaned
        assert "ok" in cleaned

    def test_drops_javascript_links(self) -> None:
        """Verify non-http link protocols are removed."""
        cleaned = sanitize_inline_html('<a href="javascript:alert(1)">x</a>')

        assert "javascript" not in cleaned


class TestBlockRenderer:
    """Test rendering each block kind."""

    @pytest.fixture
    def renderer(self) -> BlockRenderer:
        return BlockRenderer()

    def test_paragraph(self, renderer: BlockRenderer) -> None:
        """Verify paragraph HTML is rendered unescaped after sanitizing."""
        html = renderer.render_block(ParagraphBlock(id="p", text="<b>hi</b><script>x</script>"))

        assert "<b>hi</b>" in html
        assert "<script" not in html
        assert 'data-block-id="p"' in html

    def test_heading_level_and_escaping(self, renderer: BlockRenderer) -> None:
        """Verify heading text is escaped and the level picks the tag."""
        html = renderer.render_block(HeadingBlock(id="h", text="<i>x</i>", level=3))

        assert html.startswith("<h3")
        assert "&lt;i&gt;" in html

    def test_image_with_caption(self, renderer: BlockRenderer) -> None:
        """Verify images render with caption and credit."""
        block = ImageBlock(id="i", url="https://cdn.test/a.jpg", caption_he="כיתוב", credit="AP")

        html = renderer.render_block(block)

        assert 'src="https://cdn.test/a.jpg"' in html
        assert "כיתוב" in html
        assert "AP" in html

    def test_empty_image_renders_nothing(self, renderer: BlockRenderer) -> None:
        """Verify an image without a URL is skipped."""
        assert renderer.render_block(ImageBlock(id="i")).strip() == ""

    def test_bullet_list_skips_blank_items(self, renderer: BlockRenderer) -> None:
        """Verify blank list items are not rendered."""
        html = renderer.render_block(BulletListBlock(id="l", items=("one", " ", "two")))

        assert html.count("<li>") == 2

    def test_youtube_has_embed_and_fallback(self, renderer: BlockRenderer) -> None:
        """Verify the embed URL and both thumbnails are present."""
        html = renderer.render_block(YouTubeBlock(id="y", video_id="dQw4w9WgXcQ"))

        assert "https://www.youtube.com/embed/dQw4w9WgXcQ" in html
        assert "maxresdefault.jpg" in html
        assert "hqdefault.jpg" in html

    def test_youtube_thumbnail_fallback_is_live(self, renderer: BlockRenderer) -> None:
        """Verify the thumbnail swap is wired on a rendered image, not inside noscript."""
        html = renderer.render_block(YouTubeBlock(id="y", video_id="dQw4w9WgXcQ"))

        assert "<noscript>" not in html
        assert 'src="https://img.youtube.com/vi/dQw4w9WgXcQ/maxresdefault.jpg"' in html
        assert 'data-fallback-src="https://img.youtube.com/vi/dQw4w9WgXcQ/hqdefault.jpg"' in html
        assert "onerror=" in html

    def test_tweet_links_to_status(self, renderer: BlockRenderer) -> None:
        """Verify a tweet links to its canonical status URL."""
        html = renderer.render_block(TweetBlock(id="t", tweet_id="12345", author_handle="bob"))

        assert "https://twitter.com/bob/status/12345" in html
        assert "@bob" in html

    def test_article_link_card_and_inline(self, renderer: BlockRenderer) -> None:
        """Verify both display styles link to the snapshot's slug."""
        snapshot = LinkedArticleSnapshot(title="Other story", slug="other-story")
        card = ArticleLinkBlock(id="a", linked_article_id="x", linked_article=snapshot)
        inline = card.model_copy(update={"display_style": DisplayStyle.INLINE})

        card_html = renderer.render_block(card)
        inline_html = renderer.render_block(inline)

        assert 'class="block block-article-link card"' in card_html
        assert "inline" in inline_html
        for html in (card_html, inline_html):
            assert 'href="/article/other-story"' in html
            assert "Other story" in html

    def test_uploaded_video_uses_url(self, renderer: BlockRenderer) -> None:
        """Verify an uploaded video renders its file and ignores any video ID."""
        block = VideoBlock(
            id="v",
            source=VideoSource.UPLOAD,
            url="https://cdn.test/v.mp4",
            video_id="dQw4w9WgXcQ",
            mime_type="video/mp4",
        )

        html = renderer.render_block(block)

        assert "<video" in html
        assert 'src="https://cdn.test/v.mp4"' in html
        assert "youtube.com" not in html

    def test_youtube_video_uses_video_id(self, renderer: BlockRenderer) -> None:
        """Verify a YouTube-sourced video renders as an embed."""
        block = VideoBlock(id="v", video_id="dQw4w9WgXcQ", url="https://cdn.test/v.mp4")

        html = renderer.render_block(block)

        assert "https://www.youtube.com/embed/dQw4w9WgXcQ" in html
        assert "<video" not in html

    def test_video_without_reference_renders_nothing(self, renderer: BlockRenderer) -> None:
        """Verify a video with no reference for its source renders empty."""
        upload = VideoBlock(id="v", source=VideoSource.UPLOAD, video_id="dQw4w9WgXcQ")
        youtube = VideoBlock(id="w", url="https://cdn.test/v.mp4")

        assert renderer.render_block(upload).strip() == ""
        assert renderer.render_block(youtube).strip() == ""

    def test_unknown_block_placeholder(self, renderer: BlockRenderer) -> None:
        """Verify unknown blocks render as a placeholder naming their type."""
        html = renderer.render_block(UnknownBlock(raw={"id": "u", "type": "poll"}))

        assert "Unrecognized block (poll)" in html

    def test_render_failure_becomes_placeholder(self, renderer: BlockRenderer) -> None:
        """Verify a block that fails to render does not abort the document."""
        blocks = [QuoteBlock(id="q", text="kept"), DividerBlock(id="d")]

        views = [RuntimeError("boom"), ("blocks/divider.html", {"block": blocks[1]})]

        with patch.object(renderer, "_view", side_effect=views):
            html = renderer.render_blocks(blocks)

        assert "Unrecognized block (quote)" in html
        assert "block-divider" in html
