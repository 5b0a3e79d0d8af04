"""Core data models shared by the gateway steps and the wizard."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

NOT_FOUND = "Not found"


class ResumeDocument(BaseModel):
    """An uploaded resume, base64-encoded for attachment to model requests."""

    file_name: str = Field(description="Original upload file name")
    media_type: str = Field(default="application/pdf", description="MIME type of the document")
    data: str = Field(description="Base64-encoded file bytes", repr=False)

    model_config = ConfigDict(frozen=True)


class ResumeFacts(ResumeDocument):
    """
    Facts extracted from a resume, plus the document they came from.

    Created once per successful parse; a new upload replaces it entirely.
    """

    applicant_name: Optional[str] = Field(default=None, description="Applicant's full name, if the model found it")
    skills: List[str] = Field(default_factory=list, description="Key technical skills, languages and technologies")
    education_level: str = Field(default=NOT_FOUND, description="Highest education level mentioned")
    projects: List[str] = Field(
        default_factory=list,
        max_length=3,
        description="Up to three one-sentence project summaries"
    )


class Contact(BaseModel):
    """
    An academic contact returned by discovery.

    The model answers with camelCase keys; they are accepted as aliases.
    """

    name: str = Field(min_length=1, description="Full name")
    title: str = Field(description="Official title, e.g. 'Associate Professor'")
    email: Optional[str] = Field(default=None, description="Academic email, or None if none was found")
    research_interests: str = Field(
        alias="researchInterests",
        description="One-sentence summary of relevant research interests"
    )
    lab_website: Optional[str] = Field(default=None, alias="labWebsite")
    recent_publication: Optional[str] = Field(default=None, alias="recentPublication")
    linkedin_profile: Optional[str] = Field(default=None, alias="linkedinProfile")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("email", "lab_website", "recent_publication", "linkedin_profile", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Models sometimes write "" or "null" instead of null."""
        if isinstance(v, str):
            v = v.strip()
            if not v or v.lower() in ("null", "none", "n/a"):
                return None
        return v

    @property
    def last_name(self) -> str:
        return self.name.split()[-1]


class DraftContent(BaseModel):
    """Subject and body produced by the drafting call."""

    subject: str = Field(min_length=1, description="Email subject line")
    body: str = Field(min_length=1, description="Email body")

    model_config = ConfigDict(frozen=True, strict=True)
