"""
Email Drafter Step Models
"""

from pydantic import BaseModel, Field

from gateway.models.core import Contact, ResumeFacts


class DraftRequest(BaseModel):
    """Input of one drafting call."""

    contact: Contact = Field(description="Recipient of the email")
    purpose: str = Field(description="Why the student is writing, e.g. 'seeking a PhD research position'")
    resume: ResumeFacts = Field(description="Parsed resume of the sender")
