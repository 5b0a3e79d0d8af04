"""
Pydantic schemas for request/response validation.
"""

from schemas.history import HistoryRecord, HistoryResponse, ClearHistoryResponse
from schemas.preferences import Theme, ThemeResponse, ThemeUpdate
from schemas.wizard import (
    DetailsUpdate,
    ContactToggle,
    EmailBodyUpdate,
    WizardStateResponse,
    SendResponse,
)

__all__ = [
    # History schemas
    "HistoryRecord",
    "HistoryResponse",
    "ClearHistoryResponse",

    # Preference schemas
    "Theme",
    "ThemeResponse",
    "ThemeUpdate",

    # Wizard schemas
    "DetailsUpdate",
    "ContactToggle",
    "EmailBodyUpdate",
    "WizardStateResponse",
    "SendResponse",
]
