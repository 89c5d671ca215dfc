"""Edit operations over an article body.

A document is an ordered tuple of blocks. Every operation takes a sequence and
returns a new tuple; the input is never mutated. Referencing an id that is not
in the document is a no-op, so a stale id from the editing surface cannot put
the document into an invalid state.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from newsdesk.blocks.ids import new_block_id
from newsdesk.models.blocks import BLOCK_MODELS, BlockKind, UnknownBlock

if TYPE_CHECKING:
    from collections.abc import Sequence

    from newsdesk.blocks.ids import IdFactory
    from newsdesk.models.blocks import AnyBlock, KnownBlock

logger = logging.getLogger(__name__)

Document = tuple["AnyBlock", ...]


def new_block(kind: BlockKind | str, block_id: str) -> KnownBlock:
    """Build a block of ``kind`` with an empty payload."""
    return BLOCK_MODELS[BlockKind(kind)](id=block_id)


def index_of(blocks: Sequence[AnyBlock], block_id: str) -> int | None:
    for index, block in enumerate(blocks):
        if block.id == block_id:
            return index
    return None


def find(blocks: Sequence[AnyBlock], block_id: str) -> AnyBlock | None:
    index = index_of(blocks, block_id)
    return None if index is None else blocks[index]


def append(
    blocks: Sequence[AnyBlock],
    kind: BlockKind | str,
    *,
    new_id: IdFactory = new_block_id,
) -> Document:
    """Add an empty block of ``kind`` at the end."""
    return (*blocks, new_block(kind, new_id()))


def _with_id(block: AnyBlock, block_id: str) -> AnyBlock | None:
    if not isinstance(block, UnknownBlock):
        return block.model_copy(update={"id": block_id})
    if isinstance(block.raw, dict):
        return UnknownBlock(raw={**block.raw, "id": block_id})
    return None


def update(blocks: Sequence[AnyBlock], block_id: str, replacement: AnyBlock) -> Document:
    """Swap in ``replacement`` for the block with ``block_id``.

    The replacement always keeps the target's id. A replacement of a different
    kind is refused, since a block's type never changes in place.
    """
    index = index_of(blocks, block_id)
    if index is None:
        return tuple(blocks)
    current = blocks[index]
    if replacement.type != current.type:
        logger.warning(
            "Refusing to change block type in place - id=%s from=%s to=%s",
            block_id,
            current.type,
            replacement.type,
        )
        return tuple(blocks)
    if replacement.id != block_id:
        rekeyed = _with_id(replacement, block_id)
        if rekeyed is None:
            logger.warning("Refusing replacement without a usable id - id=%s", block_id)
            return tuple(blocks)
        replacement = rekeyed
    return (*blocks[:index], replacement, *blocks[index + 1 :])


def remove(blocks: Sequence[AnyBlock], block_id: str) -> Document:
    index = index_of(blocks, block_id)
    if index is None:
        return tuple(blocks)
    return (*blocks[:index], *blocks[index + 1 :])


def reposition(blocks: Sequence[AnyBlock], block_id: str, target_index: int) -> Document:
    """Move one block to ``target_index`` (clamped), keeping the others' order."""
    index = index_of(blocks, block_id)
    if index is None:
        return tuple(blocks)
    target = min(max(target_index, 0), len(blocks) - 1)
    if target == index:
        return tuple(blocks)
    rest = [*blocks[:index], *blocks[index + 1 :]]
    rest.insert(target, blocks[index])
    return tuple(rest)
