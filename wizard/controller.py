"""
Wizard controller - the single owner of WizardState.

Steps: Input -> Select -> Review, moving forward only when the current
step's async action succeeds, and back one step at a time.
"""

import asyncio
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, List, Optional, Set

import logfire

from gateway.models.core import ResumeFacts
from services.history_store import HistoryStore
from utils.pdf_parser import read_resume_upload
from wizard.dispatch import DispatchQueue, DispatchResult
from wizard.exceptions import (
    ActionFailedError,
    InputValidationError,
    InvalidTransitionError,
    WizardBusyError,
)
from wizard.state import DraftEmail, WizardState, WizardStep

if TYPE_CHECKING:
    from gateway import AIGateway

# User-facing messages
RESUME_PARSE_FAILED = "Failed to parse resume. The AI couldn't extract details. Please try another file."
MISSING_DETAILS = "Please upload your resume and enter a university name and department."
CONTACTS_FAILED = "Failed to find contacts. The model may have returned an unexpected format. Please try again."
MISSING_SELECTION = "Something went wrong. Please ensure resume, purpose, and contacts are selected."
DRAFTING_FAILED = "An error occurred while generating emails. Please try again."
DISPATCH_FAILED = "Could not open your email client. Emails opened so far were saved to history."


class WizardController:
    """
    Drives the outreach wizard through well-defined transition functions.

    All mutable state lives in one WizardState. The AI gateway, the history
    store and the dispatch queue are injected.
    """

    def __init__(
        self,
        gateway: "AIGateway",
        history: HistoryStore,
        dispatcher: DispatchQueue,
        state: Optional[WizardState] = None,
    ):
        self.gateway = gateway
        self.history = history
        self.dispatcher = dispatcher
        self._state = state or WizardState()

    @property
    def state(self) -> WizardState:
        return self._state

    def link_for(self, email: DraftEmail) -> str:
        """mailto: link for one draft, as dispatch would open it."""
        return self.dispatcher.link_for(email)

    # ===================================================================
    # GUARDS
    # ===================================================================

    def _require_step(self, step: WizardStep, action: str) -> None:
        if self._state.step != step:
            raise InvalidTransitionError(
                f"Cannot {action} on the '{self._state.step.title}' step."
            )

    def _ensure_idle(self) -> None:
        if self._state.busy_action:
            raise WizardBusyError(f"Please wait: {self._state.busy_action} is still in progress.")

    @contextmanager
    def _busy(self, action: str) -> Iterator[None]:
        """Mark an async action in flight; rejects re-entrant triggers."""
        self._ensure_idle()
        self._state.busy_action = action
        try:
            yield
        finally:
            self._state.busy_action = None

    def _invalid(self, message: str) -> InputValidationError:
        self._state.error = message
        return InputValidationError(message)

    def _failed(self, message: str, cause: BaseException) -> ActionFailedError:
        self._state.error = message
        logfire.error(
            "Wizard action failed",
            step=self._state.step.title,
            message=message,
            error=str(cause),
            error_type=type(cause).__name__
        )
        return ActionFailedError(message)

    # ===================================================================
    # STEP 1: DETAILS
    # ===================================================================

    def update_details(
        self,
        university: Optional[str] = None,
        department: Optional[str] = None,
        purpose: Optional[str] = None,
    ) -> WizardState:
        """Edit the free-text inputs of the Details step."""
        self._ensure_idle()
        self._require_step(WizardStep.INPUT, "edit details")

        if university is not None:
            self._state.university = university
        if department is not None:
            self._state.department = department
        if purpose is not None:
            self._state.purpose = purpose

        return self._state

    async def upload_resume(self, file_name: str, content_type: str, data: bytes) -> ResumeFacts:
        """
        Replace the resume and parse it.

        Any previous resume facts are discarded before parsing starts, so a
        failed parse leaves no resume behind.

        Raises:
            InputValidationError: If the file is not a usable PDF
            ActionFailedError: If the AI could not extract the resume facts
        """
        with self._busy("resume parsing"):
            self._require_step(WizardStep.INPUT, "upload a resume")
            self._state.error = None
            self._state.resume = None

            try:
                document = read_resume_upload(file_name, content_type, data)
            except ValueError as e:
                raise self._invalid(str(e)) from e

            try:
                facts = await self.gateway.extract_resume_facts(document)
            except Exception as e:
                raise self._failed(RESUME_PARSE_FAILED, e) from e

            self._state.resume = facts
            logfire.info("Resume ready", file_name=file_name, skill_count=len(facts.skills))
            return facts

    async def find_contacts(self) -> WizardState:
        """
        Discover contacts and move to the Select step.

        The selection starts as every contact that has an email.

        Raises:
            InputValidationError: If resume, university or department is missing
            ActionFailedError: If discovery failed; the step does not change
        """
        with self._busy("contact search"):
            self._require_step(WizardStep.INPUT, "search for contacts")
            state = self._state
            if state.resume is None or not state.university.strip() or not state.department.strip():
                raise self._invalid(MISSING_DETAILS)

            state.error = None
            try:
                contacts = await self.gateway.discover_contacts(
                    state.university.strip(),
                    state.department.strip(),
                    state.resume,
                )
            except Exception as e:
                raise self._failed(CONTACTS_FAILED, e) from e

            state.contacts = list(contacts)
            state.selected_emails = set(state.reachable_emails)
            state.step = WizardStep.SELECT

            logfire.info(
                "Contacts found",
                contact_count=len(state.contacts),
                selected_count=len(state.selected_emails)
            )
            return state

    # ===================================================================
    # STEP 2: SELECT CONTACTS
    # ===================================================================

    def toggle_contact(self, email: str) -> Set[str]:
        """
        Add or remove one contact's email from the selection.

        Raises:
            InputValidationError: If no current contact has that email
        """
        self._ensure_idle()
        self._require_step(WizardStep.SELECT, "change the selection")

        if email not in self._state.reachable_emails:
            raise self._invalid("This contact has no email address and cannot be selected.")

        if email in self._state.selected_emails:
            self._state.selected_emails.discard(email)
        else:
            self._state.selected_emails.add(email)

        return set(self._state.selected_emails)

    async def generate_emails(self) -> List[DraftEmail]:
        """
        Draft one email per selected contact, concurrently, then move to Review.

        Either every draft succeeds or none is kept.

        Raises:
            InputValidationError: If resume, purpose or selection is missing
            ActionFailedError: If any drafting request failed
        """
        with self._busy("email generation"):
            self._require_step(WizardStep.SELECT, "generate emails")
            state = self._state
            if state.resume is None or not state.purpose.strip() or not state.selected_emails:
                raise self._invalid(MISSING_SELECTION)

            state.error = None
            state.emails = []
            contacts = state.selected_contacts
            purpose = state.purpose.strip()

            with logfire.span("wizard.generate_emails", contact_count=len(contacts)):
                results = await asyncio.gather(
                    *(self.gateway.draft_email(contact, purpose, state.resume) for contact in contacts),
                    return_exceptions=True,
                )

            failures = [result for result in results if isinstance(result, BaseException)]
            if failures:
                logfire.warning("Drafting batch failed", failed=len(failures), total=len(contacts))
                raise self._failed(DRAFTING_FAILED, failures[0]) from failures[0]

            state.emails = [
                DraftEmail(to=contact.email, subject=draft.subject, body=draft.body)
                for contact, draft in zip(contacts, results)
            ]
            state.step = WizardStep.REVIEW

            logfire.info("Emails drafted", count=len(state.emails))
            return list(state.emails)

    # ===================================================================
    # STEP 3: REVIEW & SEND
    # ===================================================================

    def edit_email_body(self, index: int, body: str) -> DraftEmail:
        """
        Replace the body of an unsent draft.

        Raises:
            InputValidationError: If index is out of range or the email was sent
        """
        self._ensure_idle()
        self._require_step(WizardStep.REVIEW, "edit an email")

        if not 0 <= index < len(self._state.emails):
            raise self._invalid(f"There is no email #{index + 1} to edit.")

        email = self._state.emails[index]
        if email.sent:
            raise self._invalid("This email has already been sent and can no longer be edited.")

        email.body = body
        return email

    async def send_all(self) -> DispatchResult:
        """
        Hand every unsent draft to the mail client, in order, and record history.

        Raises:
            ActionFailedError: If the mail client could not be opened; emails
                opened before the failure stay sent and are recorded
        """
        with self._busy("sending"):
            self._require_step(WizardStep.REVIEW, "send emails")
            self._state.error = None

            result = await self.dispatcher.run(self._state.emails)
            self.history.prepend(result.records)

            if result.error:
                raise self._failed(DISPATCH_FAILED, RuntimeError(result.error))

            return result

    # ===================================================================
    # NAVIGATION
    # ===================================================================

    def back(self) -> WizardStep:
        """Go back one step without discarding any collected data."""
        self._ensure_idle()

        previous = self._state.step.previous
        if previous is None:
            raise InvalidTransitionError("Already on the first step.")

        self._state.step = previous
        logfire.info("Wizard moved back", step=previous.title)
        return previous

    def clear_error(self) -> None:
        self._state.error = None
