"""Blob storage uploader for image and video blocks."""

from __future__ import annotations

import logging
import uuid
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from azure.core.exceptions import AzureError, ResourceExistsError
from azure.identity.aio import DefaultAzureCredential
from azure.storage.blob import ContentSettings
from azure.storage.blob.aio import BlobServiceClient

from newsdesk.editing.collaborators import UploadedFile, UploadError

if TYPE_CHECKING:
    from newsdesk.config import StorageConfig
    from newsdesk.editing.collaborators import MediaFile

logger = logging.getLogger(__name__)


def blob_name_for(filename: str) -> str:
    """Unique blob name that keeps the original extension."""
    suffix = PurePosixPath(filename).suffix.lower()
    return f"uploads/{uuid.uuid4().hex}{suffix}"


class BlobUploader:
    """Store media files in a blob container and hand back their public URL."""

    def __init__(self, config: StorageConfig) -> None:
        self._config = config
        self._credential: DefaultAzureCredential | None = None
        if config.connection_string:
            self._client = BlobServiceClient.from_connection_string(config.connection_string)
        else:
            self._credential = DefaultAzureCredential()
            self._client = BlobServiceClient(config.account_url, credential=self._credential)

    async def initialize(self) -> None:
        """Create the media container if it does not exist yet."""
        container = self._client.get_container_client(self._config.container)
        try:
            await container.create_container()
            logger.info("Created blob container %s", self._config.container)
        except ResourceExistsError:
            pass

    def public_url(self, blob_name: str, blob_url: str) -> str:
        base = self._config.public_base_url
        if not base:
            return blob_url
        return f"{base.rstrip('/')}/{self._config.container}/{blob_name}"

    async def upload(self, file: MediaFile) -> UploadedFile:
        blob_name = blob_name_for(file.filename)
        blob = self._client.get_blob_client(container=self._config.container, blob=blob_name)
        try:
            await blob.upload_blob(
                file.content,
                overwrite=True,
                content_settings=ContentSettings(content_type=file.content_type),
            )
        except AzureError as exc:
            logger.warning("Upload failed - file=%s error=%s", file.filename, exc)
            msg = f"Could not upload {file.filename}"
            raise UploadError(msg) from exc
        url = self.public_url(blob_name, blob.url)
        logger.info("Uploaded %s (%d bytes) to %s", file.filename, len(file.content), url)
        return UploadedFile(url=url, mime_type=file.content_type)

    async def close(self) -> None:
        await self._client.close()
        if self._credential is not None:
            await self._credential.close()
