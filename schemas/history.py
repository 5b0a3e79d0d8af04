"""History-related Pydantic schemas."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class HistoryRecord(BaseModel):
    """
    One email handed to the mail client.

    Records are never edited once created. The persisted form uses the
    camelCase ``dateSent`` key; both spellings are accepted on input.
    """

    to: str = Field(..., description="Recipient address")
    subject: str = Field(..., description="Email subject")
    body: str = Field(..., description="Email body as dispatched (without the attachment reminder)")
    date_sent: datetime = Field(..., alias="dateSent", description="When the mail client was opened (UTC)")

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "to": "jsmith@stanford.edu",
                "subject": "Prospective PhD student interested in robot learning",
                "body": "Dear Professor Smith,\n\nI am writing to ...",
                "dateSent": "2025-01-13T10:30:00Z"
            }
        }
    )


class HistoryResponse(BaseModel):
    """Response schema for GET /api/history."""

    records: List[HistoryRecord] = Field(default_factory=list, description="Most recent batch first")
    count: int = Field(..., ge=0, description="Number of records")


class ClearHistoryResponse(BaseModel):
    """Response schema for DELETE /api/history."""

    cleared: bool = Field(..., description="False when the request was not confirmed")
    count: int = Field(..., ge=0, description="Records remaining after the request")
