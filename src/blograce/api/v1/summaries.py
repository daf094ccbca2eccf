"""Summary API endpoints."""

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse

from blograce.api.dependencies import RecordStoreDep, WorkflowDep
from blograce.api.v1.schemas import (
    DeleteResponse,
    NotificationResponse,
    StepResponse,
    SubmissionResponse,
    SubmitRequest,
    SummaryListResponse,
    SummaryResponse,
)
from blograce.services.record_store import RecordStoreError
from blograce.services.workflow import SessionState

router = APIRouter(prefix="/summaries", tags=["summaries"])


@router.get("", response_model=SummaryListResponse)
async def list_summaries(record_store: RecordStoreDep) -> SummaryListResponse:
    """List saved summaries, newest first."""
    try:
        records = await record_store.list_all()
    except RecordStoreError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e

    return SummaryListResponse(
        summaries=[SummaryResponse.model_validate(r) for r in records],
        total=len(records),
    )


@router.post("", response_model=SubmissionResponse)
async def submit_summary(request: SubmitRequest, workflow: WorkflowDep) -> SubmissionResponse:
    """Summarize, translate and save a blog URL."""
    result = await workflow.submit(SessionState(), request.url)
    if result.source is None:
        raise HTTPException(status_code=400, detail=result.notification.message)

    return SubmissionResponse(
        url=result.url,
        source=result.source,
        summary=result.summary,
        translation=result.translation,
        saved=result.saved,
        steps=[StepResponse.model_validate(s) for s in result.steps],
        notification=NotificationResponse.model_validate(result.notification),
    )


@router.delete("/{summary_id}", response_model=DeleteResponse)
async def delete_summary(
    summary_id: int,
    workflow: WorkflowDep,
    url: str = Query(..., min_length=1),
) -> DeleteResponse | JSONResponse:
    """Delete a summary from the record store and its document by URL."""
    outcome = await workflow.delete(SessionState(), summary_id, url)
    response = DeleteResponse(
        deleted=outcome.ok,
        steps=[StepResponse.model_validate(s) for s in outcome.steps],
    )
    if not outcome.ok:
        return JSONResponse(response.model_dump(), status_code=502)
    return response
