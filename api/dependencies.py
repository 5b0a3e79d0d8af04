"""Dependencies resolving the long-lived application objects from app.state."""

from fastapi import HTTPException, Request, status

from services.history_store import HistoryStore
from services.preferences import ThemePreference
from wizard.controller import WizardController


def _from_state(request: Request, name: str):
    value = getattr(request.app.state, name, None)
    if value is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Application is still starting up",
        )
    return value


def get_controller(request: Request) -> WizardController:
    """The single wizard controller of this local session."""
    return _from_state(request, "controller")


def get_history_store(request: Request) -> HistoryStore:
    """History store shared with the wizard controller."""
    return get_controller(request).history


def get_theme_preference(request: Request) -> ThemePreference:
    return _from_state(request, "theme_preference")
