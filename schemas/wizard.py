"""
Pydantic schemas for the wizard API endpoints.

These models validate requests and shape the wizard snapshot the browser
front end renders.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from gateway.models.core import Contact, ResumeFacts


# ===================================================================
# REQUEST SCHEMAS
# ===================================================================

class DetailsUpdate(BaseModel):
    """
    Request body for PUT /api/wizard/details

    Omitted fields keep their current value.
    """

    university: Optional[str] = Field(default=None, max_length=255, description="Target university")
    department: Optional[str] = Field(default=None, max_length=255, description="Target department or field")
    purpose: Optional[str] = Field(default=None, max_length=1000, description="Why the student is writing")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "university": "Stanford University",
                "department": "Computer Science",
                "purpose": "seeking a PhD research position"
            }
        }
    )


class ContactToggle(BaseModel):
    """Request body for POST /api/wizard/contacts/toggle"""

    email: str = Field(..., min_length=3, max_length=320, description="Email of the contact to toggle")


class EmailBodyUpdate(BaseModel):
    """Request body for PUT /api/wizard/emails/{index}"""

    body: str = Field(..., description="New email body")


# ===================================================================
# RESPONSE SCHEMAS
# ===================================================================

class StepIndicatorItem(BaseModel):
    """One entry of the progress indicator."""

    number: int
    title: str
    active: bool
    completed: bool


class ResumeSummary(BaseModel):
    """Resume facts without the document bytes."""

    file_name: str
    applicant_name: Optional[str] = None
    skills: List[str]
    education_level: str
    projects: List[str]

    @classmethod
    def from_facts(cls, facts: ResumeFacts) -> "ResumeSummary":
        return cls(
            file_name=facts.file_name,
            applicant_name=facts.applicant_name,
            skills=facts.skills,
            education_level=facts.education_level,
            projects=facts.projects,
        )


class ContactView(BaseModel):
    """A discovered contact plus its selection state."""

    contact: Contact
    selectable: bool = Field(..., description="False when the contact has no email")
    selected: bool


class DraftEmailView(BaseModel):
    """A drafted email as shown on the Review step."""

    index: int
    to: str
    subject: str
    body: str
    sent: bool
    mailto_link: Optional[str] = Field(default=None, description="Link to open this email alone; None once sent")


class WizardStateResponse(BaseModel):
    """Response schema for GET /api/wizard/state and every wizard action."""

    step: int = Field(..., ge=1, le=3)
    step_title: str
    steps: List[StepIndicatorItem]
    resume: Optional[ResumeSummary] = None
    university: str
    department: str
    purpose: str
    contacts: List[ContactView] = Field(default_factory=list)
    selected_count: int
    emails: List[DraftEmailView] = Field(default_factory=list)
    unsent_count: int
    error: Optional[str] = None
    busy_action: Optional[str] = None


class SendResponse(BaseModel):
    """Response schema for POST /api/wizard/emails/send"""

    sent_count: int = Field(..., ge=0)
    skipped: int = Field(..., ge=0)
    links: List[str] = Field(default_factory=list, description="mailto: links opened, in order")
    state: WizardStateResponse
