"""
Tests for the wizard controller: transitions, guards and error messages.

The AI gateway is replaced by FakeGateway; history is persisted to an
in-memory SQLite database.

Run with:
    pytest wizard/tests/test_wizard_controller.py -v
"""

import asyncio

import pytest

from gateway.core.exceptions import ExternalAPIError, ResponseShapeError
from gateway.models.core import DraftContent
from services.history_store import HistoryStore
from services.mail_client import MailClientLauncher
from wizard import controller as wizard_controller
from wizard.controller import WizardController
from wizard.dispatch import DispatchQueue
from wizard.exceptions import (
    ActionFailedError,
    InputValidationError,
    InvalidTransitionError,
    WizardBusyError,
)
from wizard.state import WizardStep


class FakeGateway:
    """AIGateway stand-in with scripted results."""

    def __init__(self, facts=None, contacts=None, failing_drafts=()):
        self.facts = facts
        self.contacts = contacts or []
        self.failing_drafts = set(failing_drafts)
        self.resume_error = None
        self.contacts_error = None
        self.drafted_for = []
        self.discovery_args = None

    async def extract_resume_facts(self, document):
        if self.resume_error:
            raise self.resume_error
        return self.facts.model_copy(update={"file_name": document.file_name, "data": document.data})

    async def discover_contacts(self, university, department, facts):
        self.discovery_args = (university, department)
        if self.contacts_error:
            raise self.contacts_error
        return list(self.contacts)

    async def draft_email(self, contact, purpose, facts):
        await asyncio.sleep(0)
        self.drafted_for.append(contact.email)
        if contact.email in self.failing_drafts:
            raise ResponseShapeError("missing body")
        return DraftContent(subject=f"Hello {contact.last_name}", body=f"Dear {contact.name}, {purpose}.")


class RecordingLauncher(MailClientLauncher):
    def __init__(self, fail=False):
        self.links = []
        self.fail = fail

    def open(self, link):
        if self.fail:
            raise OSError("no handler for mailto")
        self.links.append(link)


async def no_sleep(seconds):
    return None


@pytest.fixture
def gateway(resume_facts, contacts):
    return FakeGateway(facts=resume_facts, contacts=contacts)


@pytest.fixture
def launcher():
    return RecordingLauncher()


@pytest.fixture
def controller(gateway, storage, launcher):
    return WizardController(
        gateway=gateway,
        history=HistoryStore(storage),
        dispatcher=DispatchQueue(launcher, delay_seconds=0, attachment_reminder="", sleep=no_sleep),
    )


async def advance_to_select(controller, pdf_bytes):
    controller.update_details(university="Stanford University", department="Computer Science")
    await controller.upload_resume("resume.pdf", "application/pdf", pdf_bytes)
    await controller.find_contacts()


async def advance_to_review(controller, pdf_bytes):
    await advance_to_select(controller, pdf_bytes)
    await controller.generate_emails()


# ===================================================================
# STEP 1: DETAILS
# ===================================================================

@pytest.mark.unit
def test_initial_state(controller):
    state = controller.state

    assert state.step == WizardStep.INPUT
    assert state.purpose == "seeking a PhD research position"
    assert state.resume is None
    assert state.error is None


@pytest.mark.unit
def test_update_details_keeps_omitted_fields(controller):
    controller.update_details(university="MIT", department="EECS")
    controller.update_details(purpose="asking about summer internships")

    assert controller.state.university == "MIT"
    assert controller.state.department == "EECS"
    assert controller.state.purpose == "asking about summer internships"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_upload_resume_stores_facts(controller, pdf_bytes):
    facts = await controller.upload_resume("cv.pdf", "application/pdf", pdf_bytes)

    assert controller.state.resume is facts
    assert facts.file_name == "cv.pdf"
    assert controller.state.busy_action is None


@pytest.mark.unit
@pytest.mark.asyncio
async def test_non_pdf_upload_rejected_without_ai_call(controller, gateway):
    gateway.resume_error = AssertionError("should not be called")

    with pytest.raises(InputValidationError, match="valid PDF"):
        await controller.upload_resume("cv.docx", "application/msword", b"data")

    assert controller.state.error == "Please upload a valid PDF file."


@pytest.mark.unit
@pytest.mark.asyncio
async def test_failed_parse_clears_previous_resume(controller, gateway, pdf_bytes):
    await controller.upload_resume("first.pdf", "application/pdf", pdf_bytes)
    gateway.resume_error = ExternalAPIError("overloaded")

    with pytest.raises(ActionFailedError) as exc_info:
        await controller.upload_resume("second.pdf", "application/pdf", pdf_bytes)

    assert controller.state.resume is None
    assert controller.state.error == wizard_controller.RESUME_PARSE_FAILED
    assert isinstance(exc_info.value.__cause__, ExternalAPIError)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_find_contacts_requires_resume_and_details(controller, gateway):
    with pytest.raises(InputValidationError):
        await controller.find_contacts()

    assert controller.state.error == wizard_controller.MISSING_DETAILS
    assert gateway.discovery_args is None
    assert controller.state.step == WizardStep.INPUT


@pytest.mark.unit
@pytest.mark.asyncio
async def test_find_contacts_preselects_contacts_with_email(controller, gateway, pdf_bytes):
    controller.update_details(university="  Stanford University ", department="Computer Science")
    await controller.upload_resume("resume.pdf", "application/pdf", pdf_bytes)

    await controller.find_contacts()

    state = controller.state
    assert state.step == WizardStep.SELECT
    assert gateway.discovery_args == ("Stanford University", "Computer Science")
    assert state.selected_emails == {"asmith@stanford.edu", "cpatel@stanford.edu"}


@pytest.mark.unit
@pytest.mark.asyncio
async def test_find_contacts_failure_stays_on_details(controller, gateway, pdf_bytes):
    gateway.contacts_error = ResponseShapeError("missing researchInterests")
    controller.update_details(university="Stanford University", department="Computer Science")
    await controller.upload_resume("resume.pdf", "application/pdf", pdf_bytes)

    with pytest.raises(ActionFailedError):
        await controller.find_contacts()

    assert controller.state.step == WizardStep.INPUT
    assert controller.state.contacts == []
    assert controller.state.error == wizard_controller.CONTACTS_FAILED


@pytest.mark.unit
@pytest.mark.asyncio
async def test_empty_discovery_still_moves_to_select(controller, gateway, pdf_bytes):
    gateway.contacts = []

    await advance_to_select(controller, pdf_bytes)

    assert controller.state.step == WizardStep.SELECT
    assert controller.state.selected_emails == set()


# ===================================================================
# STEP 2: SELECT CONTACTS
# ===================================================================

@pytest.mark.unit
@pytest.mark.asyncio
async def test_toggle_contact(controller, pdf_bytes):
    await advance_to_select(controller, pdf_bytes)

    assert controller.toggle_contact("asmith@stanford.edu") == {"cpatel@stanford.edu"}
    assert controller.toggle_contact("asmith@stanford.edu") == {"asmith@stanford.edu", "cpatel@stanford.edu"}


@pytest.mark.unit
@pytest.mark.asyncio
async def test_toggle_unknown_email_rejected(controller, pdf_bytes):
    await advance_to_select(controller, pdf_bytes)

    with pytest.raises(InputValidationError):
        controller.toggle_contact("nobody@stanford.edu")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_generate_emails_requires_selection(controller, gateway, pdf_bytes):
    await advance_to_select(controller, pdf_bytes)
    controller.toggle_contact("asmith@stanford.edu")
    controller.toggle_contact("cpatel@stanford.edu")

    with pytest.raises(InputValidationError):
        await controller.generate_emails()

    assert controller.state.error == wizard_controller.MISSING_SELECTION
    assert gateway.drafted_for == []


@pytest.mark.unit
@pytest.mark.asyncio
async def test_generate_emails_drafts_selected_in_contact_order(controller, pdf_bytes):
    await advance_to_select(controller, pdf_bytes)

    emails = await controller.generate_emails()

    assert [email.to for email in emails] == ["asmith@stanford.edu", "cpatel@stanford.edu"]
    assert emails[0].subject == "Hello Smith"
    assert not any(email.sent for email in emails)
    assert controller.state.step == WizardStep.REVIEW


@pytest.mark.unit
@pytest.mark.asyncio
async def test_one_failed_draft_discards_the_batch(controller, gateway, pdf_bytes):
    gateway.failing_drafts = {"cpatel@stanford.edu"}
    await advance_to_select(controller, pdf_bytes)

    with pytest.raises(ActionFailedError):
        await controller.generate_emails()

    assert controller.state.emails == []
    assert controller.state.step == WizardStep.SELECT
    assert controller.state.error == wizard_controller.DRAFTING_FAILED
    # Every request was still issued
    assert sorted(gateway.drafted_for) == ["asmith@stanford.edu", "cpatel@stanford.edu"]


# ===================================================================
# STEP 3: REVIEW & SEND
# ===================================================================

@pytest.mark.unit
@pytest.mark.asyncio
async def test_edit_email_body(controller, pdf_bytes):
    await advance_to_review(controller, pdf_bytes)

    email = controller.edit_email_body(1, "New body")

    assert email.body == "New body"
    assert controller.state.emails[1].body == "New body"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_edit_out_of_range_rejected(controller, pdf_bytes):
    await advance_to_review(controller, pdf_bytes)

    with pytest.raises(InputValidationError):
        controller.edit_email_body(5, "x")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_send_all_records_history_and_locks_emails(controller, launcher, pdf_bytes):
    await advance_to_review(controller, pdf_bytes)
    controller.edit_email_body(0, "Edited body")

    result = await controller.send_all()

    assert result.sent_count == 2
    assert len(launcher.links) == 2
    assert controller.state.unsent_count == 0
    assert [record.to for record in controller.history.records] == [
        "asmith@stanford.edu", "cpatel@stanford.edu"
    ]
    assert controller.history.records[0].body == "Edited body"

    with pytest.raises(InputValidationError):
        controller.edit_email_body(0, "Too late")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_newest_batch_goes_first_in_history(controller, pdf_bytes):
    await advance_to_review(controller, pdf_bytes)
    await controller.send_all()

    controller.back()
    controller.toggle_contact("asmith@stanford.edu")
    await controller.generate_emails()
    await controller.send_all()

    assert [record.to for record in controller.history.records] == [
        "cpatel@stanford.edu", "asmith@stanford.edu", "cpatel@stanford.edu"
    ]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_send_failure_reports_error(controller, launcher, pdf_bytes):
    await advance_to_review(controller, pdf_bytes)
    launcher.fail = True

    with pytest.raises(ActionFailedError):
        await controller.send_all()

    assert controller.state.error == wizard_controller.DISPATCH_FAILED
    assert controller.state.unsent_count == 2
    assert len(controller.history) == 0


# ===================================================================
# NAVIGATION AND GUARDS
# ===================================================================

@pytest.mark.unit
@pytest.mark.asyncio
async def test_back_keeps_collected_data(controller, pdf_bytes):
    await advance_to_review(controller, pdf_bytes)

    assert controller.back() == WizardStep.SELECT
    assert controller.back() == WizardStep.INPUT

    state = controller.state
    assert state.resume is not None
    assert len(state.contacts) == 3
    assert len(state.emails) == 2


@pytest.mark.unit
def test_back_from_first_step_rejected(controller):
    with pytest.raises(InvalidTransitionError):
        controller.back()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_actions_rejected_on_wrong_step(controller, pdf_bytes):
    with pytest.raises(InvalidTransitionError):
        await controller.generate_emails()
    with pytest.raises(InvalidTransitionError):
        await controller.send_all()

    await advance_to_select(controller, pdf_bytes)

    with pytest.raises(InvalidTransitionError):
        controller.update_details(university="MIT")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_second_action_while_busy_rejected(controller, gateway, pdf_bytes):
    release = asyncio.Event()
    original = gateway.extract_resume_facts

    async def slow_extract(document):
        await release.wait()
        return await original(document)

    gateway.extract_resume_facts = slow_extract
    upload = asyncio.create_task(controller.upload_resume("resume.pdf", "application/pdf", pdf_bytes))
    await asyncio.sleep(0)

    assert controller.state.busy_action == "resume parsing"
    with pytest.raises(WizardBusyError):
        controller.update_details(university="MIT")
    with pytest.raises(WizardBusyError):
        await controller.upload_resume("resume.pdf", "application/pdf", pdf_bytes)

    release.set()
    await upload
    assert controller.state.busy_action is None


@pytest.mark.unit
@pytest.mark.asyncio
async def test_clear_error(controller):
    with pytest.raises(InputValidationError):
        await controller.find_contacts()

    controller.clear_error()

    assert controller.state.error is None
