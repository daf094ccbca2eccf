"""HTMX-powered web views."""

from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Form, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from blograce.api.dependencies import WorkflowDep
from blograce.config import get_settings
from blograce.domain.knowledge_base import SAMPLE_LINKS
from blograce.services.workflow import SessionState

router = APIRouter(tags=["web"])

# Templates configuration
templates = Jinja2Templates(directory=Path(__file__).resolve().parents[2] / "templates")

TOAST_CLASSES = {
    "success": "toast toast-success",
    "warning": "toast toast-warning",
    "error": "toast toast-error",
}


def toast_class(level: str) -> str:
    """CSS class for a notification level, falling back to error styling."""
    return TOAST_CLASSES.get(level, TOAST_CLASSES["error"])


templates.env.filters["toast_class"] = toast_class


def _context(state: SessionState, **extra) -> dict:
    """Template context shared by the page and its partials."""
    settings = get_settings()
    return {
        "state": state,
        "samples": SAMPLE_LINKS,
        "banner_duration_ms": settings.banner_duration_ms,
        "scroll_delay_ms": settings.scroll_delay_ms,
        **extra,
    }


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, workflow: WorkflowDep) -> HTMLResponse:
    """Render the form with the saved summaries list."""
    state = SessionState()
    await workflow.refresh(state)

    return templates.TemplateResponse(
        request=request,
        name="index.html",
        context=_context(state),
    )


@router.post("/summaries", response_class=HTMLResponse)
async def submit(
    request: Request,
    workflow: WorkflowDep,
    url: Annotated[str, Form()] = "",
) -> HTMLResponse:
    """HTMX endpoint for a submission.

    Returns the result panel plus out-of-band swaps for the saved list,
    the input field, the toast and the banner. A rejected input leaves the
    previous result panel in place.
    """
    state = SessionState()
    result = await workflow.submit(state, url)

    response = templates.TemplateResponse(
        request=request,
        name="partials/submission.html",
        context=_context(state, result=result),
    )
    if result.source is None:
        response.headers["HX-Reswap"] = "none"
    return response


@router.delete("/summaries/{summary_id}", response_class=HTMLResponse)
async def delete(
    request: Request,
    summary_id: int,
    workflow: WorkflowDep,
    url: str = Query(...),
) -> HTMLResponse:
    """HTMX endpoint for deleting one saved summary.

    The row is replaced by the (empty) response on success so it drops out
    of the list without a re-fetch. On failure the swap is cancelled and
    only the toast is shown.
    """
    state = SessionState()
    outcome = await workflow.delete(state, summary_id, url)

    response = templates.TemplateResponse(
        request=request,
        name="partials/delete_result.html",
        context=_context(state, outcome=outcome),
    )
    if not outcome.ok:
        response.headers["HX-Reswap"] = "none"
    return response
