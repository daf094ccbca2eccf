"""Submission workflow: validate, look up or generate, persist, notify."""

import logging
from dataclasses import dataclass, field
from enum import StrEnum

from blograce.domain.knowledge_base import lookup
from blograce.domain.summary import SummaryRecord
from blograce.infrastructure.document_store_client import DocumentStoreClient
from blograce.services.record_store import (
    STEP_DOCUMENT_SAVE,
    STEP_RECORD_CREATE,
    DeleteOutcome,
    RecordStore,
    RecordStoreError,
    StepResult,
    run_step,
)
from blograce.services.summarizer import FALLBACK_CONTENT, summarize
from blograce.services.translator import translate

logger = logging.getLogger(__name__)


class SubmissionState(StrEnum):
    """Workflow states of a single submission."""

    IDLE = "idle"
    VALIDATING = "validating"
    STATIC_PATH = "static_path"
    FALLBACK_PATH = "fallback_path"
    PERSISTING = "persisting"
    DONE = "done"


class SubmissionSource(StrEnum):
    """Where a summary came from."""

    STATIC = "static"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class Notification:
    """Toast message for the user.

    Levels: 'success', 'warning', 'error'.
    """

    level: str
    message: str
    description: str | None = None


@dataclass
class SessionState:
    """UI state of one page session."""

    url_input: str = ""
    summary: str = ""
    translation: str = ""
    is_loading: bool = False
    show_banner: bool = False
    scroll_to_result: bool = False
    state: SubmissionState = SubmissionState.IDLE
    saved_summaries: list[SummaryRecord] = field(default_factory=list)
    notifications: list[Notification] = field(default_factory=list)

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)


@dataclass
class SubmissionResult:
    """Outcome of SubmissionWorkflow.submit."""

    state: SubmissionState
    notification: Notification
    source: SubmissionSource | None = None
    url: str = ""
    summary: str = ""
    translation: str = ""
    steps: list[StepResult] = field(default_factory=list)

    @property
    def saved(self) -> bool:
        """True when the record store write succeeded."""
        return any(s.name == STEP_RECORD_CREATE and s.ok for s in self.steps)


EMPTY_URL_NOTIFICATION = Notification("error", "Please enter a valid blog URL.")


class SubmissionWorkflow:
    """Drives submissions, deletes and list refreshes against the stores."""

    def __init__(self, record_store: RecordStore, document_store: DocumentStoreClient) -> None:
        self.record_store = record_store
        self.document_store = document_store

    def _transition(self, session: SessionState, state: SubmissionState) -> None:
        logger.debug(f"Submission state {session.state} -> {state}")
        session.state = state

    async def refresh(self, session: SessionState) -> bool:
        """Replace the cached list with a fresh read from the record store.

        Returns:
            False when the read failed and the cached list was left stale
        """
        try:
            session.saved_summaries = await self.record_store.list_all()
        except RecordStoreError as e:
            logger.error(f"Error fetching summaries: {e}")
            session.notify(Notification("error", "Failed to load saved summaries."))
            return False
        return True

    async def submit(self, session: SessionState, raw_url: str) -> SubmissionResult:
        """Run one submission for the given input string."""
        session.url_input = raw_url
        self._transition(session, SubmissionState.VALIDATING)

        url = raw_url.strip()
        if not url:
            self._transition(session, SubmissionState.IDLE)
            session.notify(EMPTY_URL_NOTIFICATION)
            return SubmissionResult(state=SubmissionState.IDLE, notification=EMPTY_URL_NOTIFICATION)

        entry = lookup(url)
        if entry:
            self._transition(session, SubmissionState.STATIC_PATH)
            source = SubmissionSource.STATIC
            summary, translation = entry.summary, entry.translation
        else:
            self._transition(session, SubmissionState.FALLBACK_PATH)
            source = SubmissionSource.FALLBACK
            session.summary = ""
            session.translation = ""
            session.is_loading = True
            # The page at the URL is never fetched
            summary = summarize(FALLBACK_CONTENT)
            translation = translate(summary)

        session.summary = summary
        session.translation = translation

        self._transition(session, SubmissionState.PERSISTING)
        steps = [await run_step(STEP_RECORD_CREATE, self.record_store.create(url, summary))]
        if source is SubmissionSource.STATIC:
            steps.append(
                await run_step(STEP_DOCUMENT_SAVE, self.document_store.save_content(url, summary))
            )

        self._transition(session, SubmissionState.DONE)
        session.url_input = ""
        session.scroll_to_result = True

        notification = self._submission_notification(source, steps)
        if steps[0].ok:
            await self.refresh(session)
            session.show_banner = True
        session.notify(notification)
        session.is_loading = False

        logger.info(f"Submitted {url} via {source} path (saved={steps[0].ok})")
        return SubmissionResult(
            state=SubmissionState.DONE,
            notification=notification,
            source=source,
            url=url,
            summary=summary,
            translation=translation,
            steps=steps,
        )

    @staticmethod
    def _submission_notification(
        source: SubmissionSource, steps: list[StepResult]
    ) -> Notification:
        record_ok = steps[0].ok
        mirror = steps[1] if len(steps) > 1 else None

        if source is SubmissionSource.FALLBACK:
            if record_ok:
                return Notification("success", "Summary saved!", "Your summary is stored securely.")
            return Notification(
                "error",
                "Failed to save summary.",
                "You may want to check your database configuration!",
            )

        if record_ok and mirror.ok:
            return Notification("success", "Static summary saved successfully!")
        if record_ok:
            return Notification(
                "warning",
                "Static summary saved, but the document store copy failed.",
                "It may be missing from one database.",
            )
        if mirror.ok:
            return Notification(
                "error",
                "Failed to save static summary.",
                "It was only saved to the document store.",
            )
        return Notification("error", "Failed to save static summary.")

    async def delete(self, session: SessionState, summary_id: int, url: str) -> DeleteOutcome:
        """Delete a saved summary from both stores.

        On full success the entry is pruned from the cached list; otherwise
        the cached list is left as is.
        """
        outcome = await self.record_store.delete_by_id(summary_id, url)

        if outcome.ok:
            session.saved_summaries = [r for r in session.saved_summaries if r.id != summary_id]
            session.notify(Notification("success", "Summary deleted from both databases!"))
        else:
            session.notify(
                Notification(
                    "error",
                    "Failed to fully delete summary",
                    "It may still exist in one database.",
                )
            )
        return outcome
