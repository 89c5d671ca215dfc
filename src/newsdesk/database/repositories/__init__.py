"""Repository modules for each Cosmos DB container."""

from newsdesk.database.repositories.articles import ArticleRepository
from newsdesk.database.repositories.base import BaseRepository

__all__ = ["ArticleRepository", "BaseRepository"]
