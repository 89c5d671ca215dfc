"""Async Cosmos DB client for the newsdesk database."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from azure.cosmos import PartitionKey
from azure.cosmos.aio import CosmosClient as AzureCosmosClient
from azure.cosmos.aio import DatabaseProxy
from azure.cosmos.exceptions import CosmosHttpResponseError

if TYPE_CHECKING:
    from newsdesk.config import CosmosConfig

logger = logging.getLogger(__name__)

CONTAINERS = {"articles": "/id"}


class CosmosClient:
    """Own the async Cosmos client and the database handle."""

    def __init__(self, config: CosmosConfig) -> None:
        self._config = config
        self._client: AzureCosmosClient | None = None
        self._database: DatabaseProxy | None = None

    async def initialize(self) -> None:
        """Connect and make sure the database and its containers exist."""
        self._client = AzureCosmosClient(self._config.endpoint, credential=self._config.key)
        try:
            self._database = await self._client.create_database_if_not_exists(
                self._config.database
            )
            for name, partition_path in CONTAINERS.items():
                await self._database.create_container_if_not_exists(
                    id=name, partition_key=PartitionKey(path=partition_path)
                )
        except CosmosHttpResponseError as exc:
            await self.close()
            msg = f"Cannot reach Cosmos DB at {self._config.endpoint}: {exc.message}"
            raise ConnectionError(msg) from exc
        logger.info(
            "Cosmos DB ready - database=%s containers=%s",
            self._config.database,
            ",".join(CONTAINERS),
        )

    async def close(self) -> None:
        if self._client:
            await self._client.close()
            self._client = None
            self._database = None

    @property
    def database(self) -> DatabaseProxy:
        if self._database is None:
            raise RuntimeError("CosmosClient not initialized - call initialize() first")
        return self._database
