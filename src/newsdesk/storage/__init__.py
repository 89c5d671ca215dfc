"""Media storage for uploaded images and videos."""

from newsdesk.storage.uploads import BlobUploader

__all__ = ["BlobUploader"]
