"""Wizard endpoints: details, resume upload, contact discovery, drafting and sending."""

from typing import NoReturn

import logfire
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from api.dependencies import get_controller
from schemas.wizard import (
    ContactToggle,
    ContactView,
    DetailsUpdate,
    DraftEmailView,
    EmailBodyUpdate,
    ResumeSummary,
    SendResponse,
    StepIndicatorItem,
    WizardStateResponse,
)
from wizard.controller import WizardController
from wizard.exceptions import (
    ActionFailedError,
    InputValidationError,
    InvalidTransitionError,
    WizardBusyError,
    WizardError,
)
from wizard.state import WizardStep


router = APIRouter(prefix="/api/wizard", tags=["Wizard"])


def build_state_response(controller: WizardController) -> WizardStateResponse:
    """Snapshot of the controller's state for the front end."""
    state = controller.state
    reachable = set(state.reachable_emails)

    return WizardStateResponse(
        step=int(state.step),
        step_title=state.step.title,
        steps=[
            StepIndicatorItem(
                number=int(step),
                title=step.title,
                active=step == state.step,
                completed=step < state.step,
            )
            for step in WizardStep
        ],
        resume=ResumeSummary.from_facts(state.resume) if state.resume else None,
        university=state.university,
        department=state.department,
        purpose=state.purpose,
        contacts=[
            ContactView(
                contact=contact,
                selectable=contact.email in reachable,
                selected=bool(contact.email) and contact.email in state.selected_emails,
            )
            for contact in state.contacts
        ],
        selected_count=len(state.selected_emails),
        emails=[
            DraftEmailView(
                index=index,
                to=email.to,
                subject=email.subject,
                body=email.body,
                sent=email.sent,
                mailto_link=None if email.sent else controller.link_for(email),
            )
            for index, email in enumerate(state.emails)
        ],
        unsent_count=state.unsent_count,
        error=state.error,
        busy_action=state.busy_action,
    )


def _raise_http(error: WizardError) -> NoReturn:
    """Map a wizard error onto the HTTP status the front end expects."""
    if isinstance(error, InputValidationError):
        code = 422  # Unprocessable Content
    elif isinstance(error, (InvalidTransitionError, WizardBusyError)):
        code = status.HTTP_409_CONFLICT
    elif isinstance(error, ActionFailedError):
        code = status.HTTP_502_BAD_GATEWAY
    else:
        code = status.HTTP_400_BAD_REQUEST

    raise HTTPException(status_code=code, detail=error.message) from error


@router.get("/state", response_model=WizardStateResponse)
async def get_state(controller: WizardController = Depends(get_controller)):
    """Current step, collected data and any error banner."""
    return build_state_response(controller)


@router.put("/details", response_model=WizardStateResponse)
async def update_details(
    details: DetailsUpdate,
    controller: WizardController = Depends(get_controller),
):
    """Edit university, department or purpose on the Details step."""
    try:
        controller.update_details(
            university=details.university,
            department=details.department,
            purpose=details.purpose,
        )
    except WizardError as e:
        _raise_http(e)

    return build_state_response(controller)


@router.post("/resume", response_model=WizardStateResponse)
async def upload_resume(
    file: UploadFile = File(..., description="Resume as a PDF file"),
    controller: WizardController = Depends(get_controller),
):
    """
    Upload a resume PDF and extract skills, education level and projects.

    A failed parse clears any previously uploaded resume.
    """
    with logfire.span("api.wizard_upload_resume", file_name=file.filename, content_type=file.content_type):
        data = await file.read()
        try:
            await controller.upload_resume(
                file.filename or "resume.pdf",
                file.content_type or "",
                data,
            )
        except WizardError as e:
            _raise_http(e)

        return build_state_response(controller)


@router.post("/contacts", response_model=WizardStateResponse)
async def find_contacts(controller: WizardController = Depends(get_controller)):
    """Search for faculty and graduate students, then move to the Select step."""
    with logfire.span(
        "api.wizard_find_contacts",
        university=controller.state.university,
        department=controller.state.department
    ):
        try:
            await controller.find_contacts()
        except WizardError as e:
            _raise_http(e)

        return build_state_response(controller)


@router.post("/contacts/toggle", response_model=WizardStateResponse)
async def toggle_contact(
    toggle: ContactToggle,
    controller: WizardController = Depends(get_controller),
):
    """Select or deselect one contact by email."""
    try:
        controller.toggle_contact(toggle.email)
    except WizardError as e:
        _raise_http(e)

    return build_state_response(controller)


@router.post("/emails", response_model=WizardStateResponse)
async def generate_emails(controller: WizardController = Depends(get_controller)):
    """Draft one email per selected contact, then move to the Review step."""
    with logfire.span("api.wizard_generate_emails", selected=len(controller.state.selected_emails)):
        try:
            await controller.generate_emails()
        except WizardError as e:
            _raise_http(e)

        return build_state_response(controller)


@router.put("/emails/{index}", response_model=WizardStateResponse)
async def edit_email(
    index: int,
    update: EmailBodyUpdate,
    controller: WizardController = Depends(get_controller),
):
    """Replace the body of an unsent draft."""
    try:
        controller.edit_email_body(index, update.body)
    except WizardError as e:
        _raise_http(e)

    return build_state_response(controller)


@router.post("/emails/send", response_model=SendResponse)
async def send_all(controller: WizardController = Depends(get_controller)):
    """
    Open every unsent draft in the mail client, one at a time.

    Emails opened before a mail client failure stay sent and are recorded
    in history; the error is returned as 502.
    """
    with logfire.span("api.wizard_send_all", unsent=controller.state.unsent_count):
        try:
            result = await controller.send_all()
        except WizardError as e:
            _raise_http(e)

        return SendResponse(
            sent_count=result.sent_count,
            skipped=result.skipped,
            links=result.links,
            state=build_state_response(controller),
        )


@router.post("/back", response_model=WizardStateResponse)
async def go_back(controller: WizardController = Depends(get_controller)):
    """Return to the previous step, keeping everything collected so far."""
    try:
        controller.back()
    except WizardError as e:
        _raise_http(e)

    return build_state_response(controller)


@router.delete("/error", response_model=WizardStateResponse)
async def dismiss_error(controller: WizardController = Depends(get_controller)):
    """Dismiss the error banner."""
    controller.clear_error()
    return build_state_response(controller)
