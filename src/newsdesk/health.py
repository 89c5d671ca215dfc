"""Pre-flight health checks for local emulator dependencies."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import urlparse

import httpx

if TYPE_CHECKING:
    from newsdesk.config import Settings

logger = logging.getLogger(__name__)


def _is_local(url: str) -> bool:
    return not url.startswith("https://")


async def _probe(client: httpx.AsyncClient, url: str) -> bool:
    parsed = urlparse(url)
    try:
        await client.get(f"{parsed.scheme}://{parsed.netloc}/")
    except httpx.ConnectError:
        return False
    return True


async def check_emulators(settings: Settings) -> bool:
    """Verify the local Cosmos DB and Azurite emulators answer. False if any is down."""
    failures: list[str] = []
    async with httpx.AsyncClient(timeout=3) as client:
        cosmos_url = settings.cosmos.endpoint
        if not cosmos_url:
            failures.append("AZURE_COSMOS_ENDPOINT is not set, add it to .env")
        elif _is_local(cosmos_url) and not await _probe(client, cosmos_url):
            failures.append(
                f"Cosmos DB emulator is not running at {urlparse(cosmos_url).netloc}"
            )

        storage_url = settings.storage.account_url
        if settings.storage.connection_string:
            logger.debug("Storage configured by connection string, skipping probe")
        elif not storage_url:
            failures.append(
                "AZURE_STORAGE_ACCOUNT_URL or AZURE_STORAGE_CONNECTION_STRING is not set"
            )
        elif _is_local(storage_url) and not await _probe(client, storage_url):
            failures.append(
                f"Azurite storage emulator is not running at {urlparse(storage_url).netloc}"
            )

    if failures:
        for failure in failures:
            logger.error(failure)
        logger.error("Start the emulators with: docker compose up -d")
        return False
    return True
