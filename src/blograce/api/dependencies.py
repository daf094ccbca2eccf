"""FastAPI dependency injection providers."""

import secrets
from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, HTTPException, Security
from fastapi.security import APIKeyHeader
from sqlalchemy.ext.asyncio import AsyncSession

from blograce.config import get_settings
from blograce.infrastructure.database import async_session_factory, get_session
from blograce.infrastructure.document_store_client import (
    DocumentStoreClient,
    get_document_store,
)
from blograce.repositories.content_repo import ContentRepository
from blograce.services.record_store import RecordStore
from blograce.services.workflow import SubmissionWorkflow

# Type alias for database session dependency
SessionDep = Annotated[AsyncSession, Depends(get_session)]

# --- API Key Authentication ---

_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def require_api_key(
    api_key: str | None = Security(_api_key_header),
) -> str:
    """Verify API key for the document store endpoints.

    If API_KEY is not configured (empty), auth is skipped (dev mode).
    """
    settings = get_settings()
    if not settings.api_key:
        return "anonymous"
    if not api_key or not secrets.compare_digest(api_key, settings.api_key):
        raise HTTPException(status_code=403, detail="Invalid or missing API key")
    return api_key


ApiKeyDep = Annotated[str, Depends(require_api_key)]

DocumentStoreDep = Annotated[DocumentStoreClient, Depends(get_document_store)]


async def get_content_repository(
    session: SessionDep,
) -> AsyncGenerator[ContentRepository, None]:
    """Provide ContentRepository instance."""
    yield ContentRepository(session)


def get_record_store(document_store: DocumentStoreDep) -> RecordStore:
    """Provide RecordStore instance.

    The adapter opens its own sessions so each write commits independently.
    """
    return RecordStore(async_session_factory, document_store)


RecordStoreDep = Annotated[RecordStore, Depends(get_record_store)]


def get_workflow(
    record_store: RecordStoreDep,
    document_store: DocumentStoreDep,
) -> SubmissionWorkflow:
    """Provide SubmissionWorkflow instance."""
    return SubmissionWorkflow(record_store, document_store)


# Type aliases for commonly used dependencies
ContentRepoDep = Annotated[ContentRepository, Depends(get_content_repository)]
WorkflowDep = Annotated[SubmissionWorkflow, Depends(get_workflow)]
