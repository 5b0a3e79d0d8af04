"""
Wizard factory.

create_wizard_controller() wires the controller to the AI gateway, the
persisted history and the mail client handoff.
"""

from typing import TYPE_CHECKING, Optional

from wizard.controller import WizardController
from wizard.dispatch import DispatchQueue, DispatchResult
from wizard.state import DraftEmail, WizardState, WizardStep

if TYPE_CHECKING:
    from gateway import AIGateway
    from services.mail_client import MailClientLauncher
    from services.storage import KeyValueStore


def create_wizard_controller(
    storage: "KeyValueStore",
    gateway: Optional["AIGateway"] = None,
    launcher: Optional["MailClientLauncher"] = None,
) -> WizardController:
    """
    Build a controller with default collaborators from settings.

    Args:
        storage: Persistent key/value store holding the history entry
        gateway: AI gateway (defaults to create_ai_gateway())
        launcher: Mail client launcher (defaults to create_mail_launcher())
    """
    from gateway import create_ai_gateway
    from services.history_store import HistoryStore
    from services.mail_client import create_mail_launcher

    return WizardController(
        gateway=gateway or create_ai_gateway(),
        history=HistoryStore(storage),
        dispatcher=DispatchQueue(launcher or create_mail_launcher()),
    )


__all__ = [
    "WizardController",
    "DispatchQueue",
    "DispatchResult",
    "DraftEmail",
    "WizardState",
    "WizardStep",
    "create_wizard_controller",
]
