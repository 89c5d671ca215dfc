"""Block editing surface - session, per-variant widgets, article picker."""

from newsdesk.editing.collaborators import (
    ArticleCandidate,
    ArticleSearch,
    BodyStore,
    FileUploader,
    MediaFile,
    UploadedFile,
    UploadError,
)
from newsdesk.editing.picker import ArticlePicker
from newsdesk.editing.session import EditorSession

__all__ = [
    "ArticleCandidate",
    "ArticlePicker",
    "ArticleSearch",
    "BodyStore",
    "EditorSession",
    "FileUploader",
    "MediaFile",
    "UploadError",
    "UploadedFile",
]
