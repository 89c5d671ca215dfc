"""Conversion between block tuples and the stored JSON array."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter, ValidationError

from newsdesk.models.blocks import Block, UnknownBlock

if TYPE_CHECKING:
    from collections.abc import Iterable

    from newsdesk.blocks.document import Document
    from newsdesk.models.blocks import AnyBlock

logger = logging.getLogger(__name__)

_block_adapter: TypeAdapter[Any] = TypeAdapter(Block)


def dump_block(block: AnyBlock) -> Any:
    """Serialize one block.

    Unset optional fields are left out, but a key the block was given
    explicitly is always written, null included, so loaded elements are
    written back with the keys they had.
    """
    if isinstance(block, UnknownBlock):
        return block.raw
    data = block.model_dump(mode="json", by_alias=True, exclude_none=True)
    explicit = block.model_dump(mode="json", by_alias=True, exclude_unset=True)
    data.update({key: None for key, value in explicit.items() if value is None})
    return data


def dump_blocks(blocks: Iterable[AnyBlock]) -> list[Any]:
    return [dump_block(block) for block in blocks]


def load_block(raw: Any) -> AnyBlock:
    """Parse one stored element, keeping anything unrecognizable as-is."""
    try:
        return _block_adapter.validate_python(raw)
    except ValidationError as exc:
        logger.warning(
            "Unrecognized block kept verbatim - type=%s errors=%d",
            raw.get("type") if isinstance(raw, dict) else type(raw).__name__,
            exc.error_count(),
        )
        return UnknownBlock(raw=raw)


def load_blocks(raw: Iterable[Any] | None) -> Document:
    if not raw:
        return ()
    return tuple(load_block(item) for item in raw)


def dumps(blocks: Iterable[AnyBlock]) -> str:
    return json.dumps(dump_blocks(blocks), ensure_ascii=False)


def loads(text: str) -> Document:
    data = json.loads(text)
    if not isinstance(data, list):
        logger.warning("Stored body is not a JSON array - type=%s", type(data).__name__)
        return ()
    return load_blocks(data)
