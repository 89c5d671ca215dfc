"""Tests for emulator pre-flight checks."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import httpx

from newsdesk.health import check_emulators


def _settings(*, cosmos: str, account_url: str = "", connection_string: str = "") -> SimpleNamespace:
    return SimpleNamespace(
        cosmos=SimpleNamespace(endpoint=cosmos),
        storage=SimpleNamespace(account_url=account_url, connection_string=connection_string),
    )


def _client(get: AsyncMock) -> AsyncMock:
    client = AsyncMock()
    client.get = get
    client.__aenter__.return_value = client
    return client


async def test_all_emulators_up():
    get = AsyncMock()
    settings = _settings(cosmos="http://localhost:8081", account_url="http://127.0.0.1:10000/devstoreaccount1")

    with patch("newsdesk.health.httpx.AsyncClient", return_value=_client(get)):
        assert await check_emulators(settings) is True

    get.assert_any_await("http://localhost:8081/")
    get.assert_any_await("http://127.0.0.1:10000/")


async def test_cosmos_down():
    get = AsyncMock(side_effect=httpx.ConnectError("refused"))
    settings = _settings(cosmos="http://localhost:8081", connection_string="UseDevelopmentStorage=true")

    with patch("newsdesk.health.httpx.AsyncClient", return_value=_client(get)):
        assert await check_emulators(settings) is False


async def test_missing_configuration():
    get = AsyncMock()

    with patch("newsdesk.health.httpx.AsyncClient", return_value=_client(get)):
        assert await check_emulators(_settings(cosmos="")) is False

    get.assert_not_awaited()


async def test_cloud_endpoints_are_not_probed():
    get = AsyncMock()
    settings = _settings(
        cosmos="https://acct.documents.azure.com:443/",
        account_url="https://acct.blob.core.windows.net",
    )

    with patch("newsdesk.health.httpx.AsyncClient", return_value=_client(get)):
        assert await check_emulators(settings) is True

    get.assert_not_awaited()
