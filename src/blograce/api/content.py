"""Document store endpoints for mirrored summary content."""

import logging

from fastapi import APIRouter, Body

from blograce.api.dependencies import ApiKeyDep, ContentRepoDep
from blograce.api.v1.schemas import (
    ContentResponse,
    DeleteContentRequest,
    DeleteContentResponse,
    SaveContentRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["content"])


@router.post("/save-content", response_model=ContentResponse, status_code=201)
async def save_content(
    request: SaveContentRequest,
    content_repo: ContentRepoDep,
    _auth: ApiKeyDep,
) -> ContentResponse:
    """Store (or replace) the content document for a URL."""
    document = await content_repo.save(request.url, request.content)
    logger.info(f"Stored content document {document.id} for {request.url}")
    return ContentResponse.model_validate(document)


@router.delete("/delete-content", response_model=DeleteContentResponse)
async def delete_content(
    content_repo: ContentRepoDep,
    _auth: ApiKeyDep,
    request: DeleteContentRequest = Body(...),
) -> DeleteContentResponse:
    """Delete the content document for a URL.

    An unknown URL is not an error: summaries from the fallback path are
    never mirrored here.
    """
    deleted = await content_repo.delete_by_url(request.url)
    logger.info(f"Deleted {deleted} content document(s) for {request.url}")
    return DeleteContentResponse(deleted=deleted)
