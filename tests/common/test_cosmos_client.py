"""Tests for the Cosmos DB client wrapper."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from azure.cosmos.exceptions import CosmosHttpResponseError

from newsdesk.config import CosmosConfig
from newsdesk.database.client import CONTAINERS, CosmosClient

_CONFIG = CosmosConfig(endpoint="http://localhost:8081", key="key", database="newsdesk")


class TestCosmosClient:
    """Test connecting and provisioning containers."""

    def test_database_before_initialize(self) -> None:
        """Verify the database handle is unavailable until initialized."""
        with pytest.raises(RuntimeError):
            _ = CosmosClient(_CONFIG).database

    async def test_initialize_creates_containers(self) -> None:
        """Verify the database and every container are created if missing."""
        database = MagicMock()
        database.create_container_if_not_exists = AsyncMock()
        with patch("newsdesk.database.client.AzureCosmosClient") as client_cls:
            client_cls.return_value.create_database_if_not_exists = AsyncMock(return_value=database)
            client = CosmosClient(_CONFIG)
            await client.initialize()

        assert client.database is database
        created = [c.kwargs["id"] for c in database.create_container_if_not_exists.call_args_list]
        assert created == list(CONTAINERS)

    async def test_initialize_failure_raises_connection_error(self) -> None:
        """Verify Cosmos errors during startup become ConnectionError and close the client."""
        with patch("newsdesk.database.client.AzureCosmosClient") as client_cls:
            azure_client = client_cls.return_value
            azure_client.create_database_if_not_exists = AsyncMock(
                side_effect=CosmosHttpResponseError(status_code=503, message="unavailable")
            )
            azure_client.close = AsyncMock()
            client = CosmosClient(_CONFIG)

            with pytest.raises(ConnectionError):
                await client.initialize()

        azure_client.close.assert_awaited_once()
