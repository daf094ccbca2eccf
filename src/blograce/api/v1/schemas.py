"""Pydantic schemas for API request/response models."""

from pydantic import BaseModel, ConfigDict


class SummaryResponse(BaseModel):
    """Response schema for a saved summary."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    url: str
    summary: str


class SummaryListResponse(BaseModel):
    """Response schema for the saved summary list."""

    summaries: list[SummaryResponse]
    total: int


class SubmitRequest(BaseModel):
    """Request schema for a submission."""

    url: str


class StepResponse(BaseModel):
    """Result of one store write."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    ok: bool
    error: str | None = None


class NotificationResponse(BaseModel):
    """User-facing message produced by the workflow."""

    model_config = ConfigDict(from_attributes=True)

    level: str
    message: str
    description: str | None = None


class SubmissionResponse(BaseModel):
    """Response schema for a submission."""

    url: str
    source: str
    summary: str
    translation: str
    saved: bool
    steps: list[StepResponse]
    notification: NotificationResponse


class DeleteResponse(BaseModel):
    """Response schema for a two-store delete."""

    deleted: bool
    steps: list[StepResponse]


class SaveContentRequest(BaseModel):
    """Request body of POST /api/save-content."""

    url: str
    content: str


class DeleteContentRequest(BaseModel):
    """Request body of DELETE /api/delete-content."""

    url: str


class ContentResponse(BaseModel):
    """Response schema for a stored document."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    url: str
    content: str


class DeleteContentResponse(BaseModel):
    """Response schema for a document delete."""

    deleted: int
