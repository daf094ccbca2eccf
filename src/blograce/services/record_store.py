"""Record store adapter over the summaries table and the document store."""

import logging
from collections.abc import Awaitable
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from blograce.domain.summary import SummaryRecord
from blograce.infrastructure.document_store_client import DocumentStoreClient, DocumentStoreError
from blograce.repositories.summary_repo import SummaryRepository

logger = logging.getLogger(__name__)

# Step names reported in StepResult.name
STEP_RECORD_CREATE = "record_store.create"
STEP_RECORD_DELETE = "record_store.delete"
STEP_DOCUMENT_SAVE = "document_store.save"
STEP_DOCUMENT_DELETE = "document_store.delete"

# asyncpg connection failures surface as OSError, not SQLAlchemyError
DATABASE_ERRORS = (SQLAlchemyError, OSError)


class RecordStoreError(Exception):
    """Raised when a record store read or write fails."""


@dataclass(frozen=True)
class StepResult:
    """Outcome of one independent remote write."""

    name: str
    ok: bool
    error: str | None = None


@dataclass(frozen=True)
class DeleteOutcome:
    """Per-store results of a two-store delete.

    There is no rollback: when only one step succeeds the stores diverge.
    """

    relational: StepResult
    document: StepResult

    @property
    def ok(self) -> bool:
        """True only when both stores confirmed the delete."""
        return self.relational.ok and self.document.ok

    @property
    def steps(self) -> list[StepResult]:
        return [self.relational, self.document]


async def run_step(name: str, operation: Awaitable) -> StepResult:
    """Await one store operation and turn its failure into a StepResult."""
    try:
        await operation
    except (RecordStoreError, DocumentStoreError) as e:
        logger.error(f"Step {name} failed: {e}")
        return StepResult(name=name, ok=False, error=str(e))
    return StepResult(name=name, ok=True)


class RecordStore:
    """Thin pass-through to the relational store.

    Every operation runs in its own session and commits on its own, so no
    two writes share a transaction.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        document_store: DocumentStoreClient,
    ) -> None:
        """Initialize the adapter.

        Args:
            session_factory: Factory for record store sessions
            document_store: Client used for the parallel document delete
        """
        self.session_factory = session_factory
        self.document_store = document_store

    async def create(self, url: str, summary: str) -> SummaryRecord:
        """Insert a (url, summary) row and return it with its assigned id."""
        try:
            async with self.session_factory() as session:
                model = await SummaryRepository(session).create(url, summary)
                await session.commit()
                record = SummaryRecord.from_model(model)
        except DATABASE_ERRORS as e:
            raise RecordStoreError(f"Failed to insert summary for {url}: {e}") from e

        logger.info(f"Saved summary {record.id} for {url}")
        return record

    async def list_all(self) -> list[SummaryRecord]:
        """Return every saved summary ordered by id descending."""
        try:
            async with self.session_factory() as session:
                models = await SummaryRepository(session).list_all()
                return [SummaryRecord.from_model(m) for m in models]
        except DATABASE_ERRORS as e:
            raise RecordStoreError(f"Failed to fetch summaries: {e}") from e

    async def _delete_row(self, summary_id: int) -> None:
        try:
            async with self.session_factory() as session:
                removed = await SummaryRepository(session).delete_by_id(summary_id)
                await session.commit()
        except DATABASE_ERRORS as e:
            raise RecordStoreError(f"Failed to delete summary {summary_id}: {e}") from e

        logger.info(f"Deleted {removed} summary row(s) for id {summary_id}")

    async def delete_by_id(self, summary_id: int, url: str) -> DeleteOutcome:
        """Delete a summary from the record store by id and its document by url."""
        relational = await run_step(STEP_RECORD_DELETE, self._delete_row(summary_id))
        document = await run_step(STEP_DOCUMENT_DELETE, self.document_store.delete_content(url))

        outcome = DeleteOutcome(relational=relational, document=document)
        if not outcome.ok:
            logger.warning(
                f"Partial delete for summary {summary_id} ({url}): "
                f"record_store={relational.ok}, document_store={document.ok}"
            )
        return outcome
