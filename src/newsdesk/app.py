"""Web entry point - FastAPI app serving the article body API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from azure.monitor.opentelemetry import configure_azure_monitor
from fastapi import FastAPI
from opentelemetry.sdk.resources import SERVICE_NAME, Resource

from newsdesk.blocks.rendering import BlockRenderer
from newsdesk.config import load_settings
from newsdesk.health import check_emulators
from newsdesk.logging import configure_logging
from newsdesk.routes import articles
from newsdesk.startup import init_database, init_storage

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = load_settings()
    configure_logging(settings.app.log_level)
    logger.info("Web app starting - env=%s", settings.app.env)

    if settings.monitor.connection_string:
        configure_azure_monitor(
            connection_string=settings.monitor.connection_string,
            resource=Resource.create({SERVICE_NAME: "newsdesk"}),
        )
        logger.info("Azure Monitor OpenTelemetry configured")

    if settings.app.is_development and not await check_emulators(settings):
        msg = "Local emulators are not reachable"
        raise RuntimeError(msg)

    cosmos = await init_database(settings)
    uploader = await init_storage(settings)

    app.state.settings = settings
    app.state.cosmos = cosmos
    app.state.uploader = uploader
    app.state.renderer = BlockRenderer()

    yield

    logger.info("Web app shutting down")
    if uploader is not None:
        await uploader.close()
    await cosmos.close()


def create_app() -> FastAPI:
    app = FastAPI(title="Newsdesk", lifespan=lifespan)
    app.include_router(articles.router)
    return app
