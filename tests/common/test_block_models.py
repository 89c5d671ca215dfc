"""Tests for the block variant models."""

import pytest
from pydantic import ValidationError

from newsdesk.models.blocks import (
    BLOCK_LABELS,
    BLOCK_MODELS,
    BlockKind,
    HeadingBlock,
    UnknownBlock,
    VideoBlock,
    VideoSource,
)


class TestBlockModels:
    """Test the block schema."""

    def test_every_kind_has_model_and_label(self) -> None:
        """Verify the kind registry and the picker labels cover every kind."""
        assert set(BLOCK_MODELS) == set(BlockKind)
        assert set(BLOCK_LABELS) == set(BlockKind)
        for kind, model in BLOCK_MODELS.items():
            assert model(id="x").type == kind.value

    def test_blocks_are_frozen(self) -> None:
        """Verify blocks cannot be mutated in place."""
        block = HeadingBlock(id="h", text="t")

        with pytest.raises(ValidationError):
            block.text = "changed"

    def test_heading_level_restricted(self) -> None:
        """Verify only levels 2-4 are accepted."""
        with pytest.raises(ValidationError):
            HeadingBlock(id="h", level=1)

    def test_populate_by_camel_case(self) -> None:
        """Verify payload fields accept their camelCase names."""
        block = VideoBlock.model_validate({"id": "v", "videoId": "abc", "mimeType": "video/mp4"})

        assert block.video_id == "abc"
        assert block.mime_type == "video/mp4"

    def test_video_media_ref_follows_source(self) -> None:
        """Verify the authoritative reference depends on the video source."""
        block = VideoBlock(id="v", video_id="abc", url="https://cdn.test/v.mp4")

        assert block.media_ref == "abc"
        assert block.model_copy(update={"source": VideoSource.UPLOAD}).media_ref == (
            "https://cdn.test/v.mp4"
        )

    def test_unknown_block_accessors(self) -> None:
        """Verify unknown blocks expose id and type only when they are strings."""
        assert UnknownBlock(raw={"id": "u", "type": "poll"}).id == "u"
        assert UnknownBlock(raw={"id": 5}).id is None
        assert UnknownBlock(raw=["not", "a", "dict"]).type is None
