"""Tests for service initialization helpers."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

from newsdesk.startup import init_database, init_storage


async def test_init_database_initializes_client():
    settings = SimpleNamespace(cosmos=SimpleNamespace(endpoint="http://localhost:8081"))

    with patch("newsdesk.startup.CosmosClient") as client_cls:
        client_cls.return_value.initialize = AsyncMock()
        cosmos = await init_database(settings)

    client_cls.assert_called_once_with(settings.cosmos)
    cosmos.initialize.assert_awaited_once()


async def test_init_database_propagates_connection_error():
    settings = SimpleNamespace(cosmos=SimpleNamespace(endpoint="http://localhost:8081"))

    with patch("newsdesk.startup.CosmosClient") as client_cls:
        client_cls.return_value.initialize = AsyncMock(side_effect=ConnectionError("down"))
        with pytest.raises(ConnectionError):
            await init_database(settings)


async def test_init_storage_disabled_without_config():
    settings = SimpleNamespace(storage=SimpleNamespace(connection_string="", account_url=""))

    assert await init_storage(settings) is None


async def test_init_storage_creates_uploader():
    settings = SimpleNamespace(
        storage=SimpleNamespace(connection_string="UseDevelopmentStorage=true", account_url="")
    )

    with patch("newsdesk.startup.BlobUploader") as uploader_cls:
        uploader_cls.return_value.initialize = AsyncMock()
        uploader = await init_storage(settings)

    assert uploader is uploader_cls.return_value
    uploader.initialize.assert_awaited_once()
