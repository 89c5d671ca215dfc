"""Generic repository over one Cosmos DB container."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar, cast

from azure.cosmos.exceptions import CosmosResourceNotFoundError

from newsdesk.models.base import DocumentBase

if TYPE_CHECKING:
    from azure.cosmos.aio import DatabaseProxy

T = TypeVar("T", bound=DocumentBase)


class BaseRepository(Generic[T]):
    """CRUD plus parameterized queries for documents of ``model_class``."""

    container_name: ClassVar[str]
    model_class: type[T]

    def __init__(self, database: DatabaseProxy) -> None:
        self._container = database.get_container_client(self.container_name)

    async def get(self, item_id: str, partition_key: str) -> T | None:
        """Fetch an active document; None when missing or soft-deleted."""
        try:
            data = await self._container.read_item(item=item_id, partition_key=partition_key)
        except CosmosResourceNotFoundError:
            return None
        item = self.model_class.model_validate(data)
        return None if item.deleted_at else item

    async def create(self, item: T) -> T:
        await self._container.create_item(body=item.model_dump(mode="json", exclude_none=True))
        return item

    async def update(self, item: T, partition_key: str) -> T:  # noqa: ARG002
        item.updated_at = datetime.now(UTC)
        await self._container.replace_item(
            item=item.id,
            body=item.model_dump(mode="json", exclude_none=True),
        )
        return item

    async def soft_delete(self, item: T, partition_key: str) -> T:
        item.deleted_at = datetime.now(UTC)
        return await self.update(item, partition_key)

    async def query(
        self,
        query: str,
        parameters: list[dict[str, Any]] | None = None,
    ) -> list[T]:
        items = self._container.query_items(query=query, parameters=parameters or [])
        return [
            self.model_class.model_validate(cast("dict[str, Any]", data))
            async for data in items
        ]
