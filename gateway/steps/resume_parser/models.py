"""
Resume Parser Step Models

Lenient Pydantic model for the resume analysis response: missing or
malformed fields fall back to defaults instead of failing.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gateway.models.core import NOT_FOUND

MAX_PROJECTS = 3


def _string_items(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


class ResumeAnalysis(BaseModel):
    """
    Structured analysis of a resume.

    This is the response format we ask the model for.
    """

    name: Optional[str] = Field(default=None, description="Applicant's full name")
    skills: List[str] = Field(default_factory=list, description="Key technical skills")
    education_level: str = Field(default=NOT_FOUND, alias="educationLevel", description="Highest education level")
    projects: List[str] = Field(default_factory=list, description="One-sentence project summaries")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Jordan Lee",
                "skills": ["Python", "PyTorch", "ROS"],
                "educationLevel": "Bachelor of Science in Computer Science",
                "projects": ["Built a reinforcement-learning controller for a quadruped robot."]
            }
        }
    )

    @field_validator("name", mode="before")
    @classmethod
    def clean_name(cls, v: Any) -> Optional[str]:
        if isinstance(v, str) and v.strip() and v.strip() != NOT_FOUND:
            return v.strip()
        return None

    @field_validator("skills", mode="before")
    @classmethod
    def clean_skills(cls, v: Any) -> List[str]:
        return _string_items(v)

    @field_validator("education_level", mode="before")
    @classmethod
    def clean_education_level(cls, v: Any) -> str:
        if isinstance(v, str) and v.strip():
            return v.strip()
        return NOT_FOUND

    @field_validator("projects", mode="before")
    @classmethod
    def clean_projects(cls, v: Any) -> List[str]:
        return _string_items(v)[:MAX_PROJECTS]
