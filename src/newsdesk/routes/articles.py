"""Article body routes - load, save, preview, picker search, media upload."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, File, HTTPException, Request, UploadFile
from fastapi.responses import HTMLResponse

from newsdesk.blocks.serialization import load_blocks
from newsdesk.database.repositories.articles import ArticleRepository
from newsdesk.editing.collaborators import MediaFile, UploadError
from newsdesk.models.blocks import BLOCK_LABELS
from newsdesk.services.articles import (
    ArticleNotFoundError,
    get_article,
    save_body,
    search_articles,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/articles", tags=["articles"])


def _body_response(blocks: list[Any], reading_time_minutes: int) -> dict[str, Any]:
    return {"blocks": blocks, "readingTimeMinutes": reading_time_minutes}


@router.get("/block-kinds")
async def block_kinds():
    """Kinds offered by the editor's add-block menu, in menu order."""
    return [{"kind": kind.value, "label": label} for kind, label in BLOCK_LABELS.items()]


@router.get("/search")
async def search(request: Request, q: str = ""):
    """Candidates for the article-link picker."""
    cosmos = request.app.state.cosmos
    editor = request.app.state.settings.editor
    repo = ArticleRepository(cosmos.database)
    candidates = await search_articles(
        q,
        repo,
        limit=editor.search_limit,
        min_chars=editor.search_min_chars,
    )
    return [candidate.model_dump(mode="json") for candidate in candidates]


@router.post("/media")
async def upload_media(request: Request, file: UploadFile = File(...)):  # noqa: B008
    """Store an image or video for a block and return its URL."""
    uploader = request.app.state.uploader
    if uploader is None:
        raise HTTPException(status_code=503, detail="Media storage is not configured")
    media = MediaFile(
        filename=file.filename or "upload",
        content=await file.read(),
        content_type=file.content_type or "application/octet-stream",
    )
    try:
        uploaded = await uploader.upload(media)
    except UploadError as exc:
        logger.warning("Media upload rejected - file=%s", media.filename, exc_info=True)
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return {"url": uploaded.url, "mimeType": uploaded.mime_type}


@router.get("/{article_id}/blocks")
async def get_blocks(request: Request, article_id: str):
    """Return the stored block array and its reading time."""
    cosmos = request.app.state.cosmos
    repo = ArticleRepository(cosmos.database)
    try:
        article = await get_article(article_id, repo)
    except ArticleNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _body_response(article.body_blocks, article.reading_time_minutes)


@router.put("/{article_id}/blocks")
async def put_blocks(
    request: Request,
    article_id: str,
    blocks: list[Any] = Body(...),  # noqa: B008
):
    """Replace the body and return it with the recomputed reading time."""
    cosmos = request.app.state.cosmos
    editor = request.app.state.settings.editor
    repo = ArticleRepository(cosmos.database)
    try:
        article = await save_body(
            article_id,
            blocks,
            repo,
            words_per_minute=editor.words_per_minute,
        )
    except ArticleNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _body_response(article.body_blocks, article.reading_time_minutes)


@router.get("/{article_id}/preview", response_class=HTMLResponse)
async def preview(request: Request, article_id: str):
    """Render the stored body as HTML."""
    cosmos = request.app.state.cosmos
    renderer = request.app.state.renderer
    repo = ArticleRepository(cosmos.database)
    try:
        article = await get_article(article_id, repo)
    except ArticleNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return HTMLResponse(renderer.render_blocks(load_blocks(article.body_blocks)))
