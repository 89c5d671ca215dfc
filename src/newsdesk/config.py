"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


def _env_int(key: str, default: int) -> int:
    raw = _env(key)
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


@dataclass(frozen=True)
class CosmosConfig:
    endpoint: str = field(default_factory=lambda: _env("AZURE_COSMOS_ENDPOINT"))
    key: str = field(default_factory=lambda: _env("AZURE_COSMOS_KEY"))
    database: str = field(default_factory=lambda: _env("AZURE_COSMOS_DATABASE", "newsdesk"))


@dataclass(frozen=True)
class StorageConfig:
    """Blob storage for uploaded images and videos."""

    account_url: str = field(default_factory=lambda: _env("AZURE_STORAGE_ACCOUNT_URL"))
    connection_string: str = field(
        default_factory=lambda: _env("AZURE_STORAGE_CONNECTION_STRING")
    )
    container: str = field(default_factory=lambda: _env("AZURE_STORAGE_CONTAINER", "media"))
    public_base_url: str = field(default_factory=lambda: _env("MEDIA_PUBLIC_BASE_URL"))


@dataclass(frozen=True)
class EditorConfig:
    """Tunables for the block editor and reading-time estimate."""

    words_per_minute: int = field(
        default_factory=lambda: _env_int("EDITOR_WORDS_PER_MINUTE", 200)
    )
    search_debounce_ms: int = field(
        default_factory=lambda: _env_int("EDITOR_SEARCH_DEBOUNCE_MS", 400)
    )
    search_min_chars: int = field(
        default_factory=lambda: _env_int("EDITOR_SEARCH_MIN_CHARS", 2)
    )
    search_limit: int = field(default_factory=lambda: _env_int("EDITOR_SEARCH_LIMIT", 5))


@dataclass(frozen=True)
class MonitorConfig:
    connection_string: str = field(
        default_factory=lambda: _env("APPLICATIONINSIGHTS_CONNECTION_STRING")
    )


@dataclass(frozen=True)
class AppConfig:
    env: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@dataclass(frozen=True)
class Settings:
    cosmos: CosmosConfig = field(default_factory=CosmosConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    editor: EditorConfig = field(default_factory=EditorConfig)
    monitor: MonitorConfig = field(default_factory=MonitorConfig)
    app: AppConfig = field(default_factory=AppConfig)


def load_settings() -> Settings:
    """Load ``.env`` (if present) and build settings from the environment."""
    load_dotenv()
    return Settings()
