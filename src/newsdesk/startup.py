"""Service initialization helpers shared by the app lifespan."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from newsdesk.database.client import CosmosClient
from newsdesk.storage.uploads import BlobUploader

if TYPE_CHECKING:
    from newsdesk.config import Settings

logger = logging.getLogger(__name__)


async def init_database(settings: Settings) -> CosmosClient:
    """Connect to Cosmos DB. Raises ConnectionError when unreachable."""
    cosmos = CosmosClient(settings.cosmos)
    await cosmos.initialize()
    return cosmos


async def init_storage(settings: Settings) -> BlobUploader | None:
    """Create the media uploader, or None when storage is not configured."""
    if not (settings.storage.connection_string or settings.storage.account_url):
        logger.warning("Media storage not configured, uploads are disabled")
        return None
    uploader = BlobUploader(settings.storage)
    await uploader.initialize()
    return uploader
