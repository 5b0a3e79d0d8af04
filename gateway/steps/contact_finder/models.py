"""
Contact Finder Step Models
"""

from typing import List

from pydantic import BaseModel, Field

from gateway.models.core import Contact, ResumeFacts

# Keys every element of a non-empty discovery result must carry
REQUIRED_CONTACT_FIELDS = ("name", "title", "researchInterests")


class ContactSearchRequest(BaseModel):
    """Input of one discovery call."""

    university: str = Field(description="Target university")
    department: str = Field(description="Target department or field of study")
    resume: ResumeFacts = Field(description="Parsed resume of the applicant")


class ContactSearchResult(BaseModel):
    """Validated discovery result; an empty list is a valid outcome."""

    contacts: List[Contact] = Field(default_factory=list)

    @property
    def reachable_count(self) -> int:
        """Contacts that can actually be emailed."""
        return sum(1 for contact in self.contacts if contact.email)
