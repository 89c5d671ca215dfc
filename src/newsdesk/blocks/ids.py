"""Block identifier allocation."""

from __future__ import annotations

import uuid
from collections.abc import Callable

IdFactory = Callable[[], str]


def new_block_id() -> str:
    """Return a random UUID4 string.

    Counters are not enough: a deleted block's id must never be handed to a
    block added later in the same editing session.
    """
    return str(uuid.uuid4())
