"""In-memory wizard state owned by the WizardController."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Set

from config.settings import settings
from gateway.models.core import Contact, ResumeFacts


class WizardStep(IntEnum):
    """Wizard steps in the order the user moves through them."""
    INPUT = 1
    SELECT = 2
    REVIEW = 3

    @property
    def title(self) -> str:
        return _STEP_TITLES[self]

    @property
    def previous(self) -> Optional["WizardStep"]:
        return WizardStep(self - 1) if self > WizardStep.INPUT else None


_STEP_TITLES = {
    WizardStep.INPUT: "Details",
    WizardStep.SELECT: "Select Contacts",
    WizardStep.REVIEW: "Review & Send",
}


@dataclass
class DraftEmail:
    """
    One drafted email awaiting dispatch.

    The body stays editable until the email is sent; sent never goes back
    to False.
    """

    to: str
    subject: str
    body: str
    sent: bool = False

    def mark_sent(self) -> None:
        if self.sent:
            raise ValueError(f"Email to {self.to} was already sent")
        self.sent = True


@dataclass
class WizardState:
    """
    Everything the wizard collected so far.

    Going back never clears these fields; only a new resume upload resets
    the resume facts.
    """

    step: WizardStep = WizardStep.INPUT

    # Step 1 (Details)
    resume: Optional[ResumeFacts] = None
    university: str = ""
    department: str = ""
    purpose: str = field(default_factory=lambda: settings.default_purpose)

    # Step 2 (Select Contacts)
    contacts: List[Contact] = field(default_factory=list)
    selected_emails: Set[str] = field(default_factory=set)

    # Step 3 (Review & Send)
    emails: List[DraftEmail] = field(default_factory=list)

    # Banner shown above the current step
    error: Optional[str] = None

    # Name of the async action in flight, None when idle
    busy_action: Optional[str] = None

    @property
    def reachable_emails(self) -> List[str]:
        """Emails of current contacts that have one, in contact order."""
        return [contact.email for contact in self.contacts if contact.email]

    @property
    def selected_contacts(self) -> List[Contact]:
        """Selected contacts in discovery order."""
        return [
            contact for contact in self.contacts
            if contact.email and contact.email in self.selected_emails
        ]

    @property
    def unsent_count(self) -> int:
        return sum(1 for email in self.emails if not email.sent)
