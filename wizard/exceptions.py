"""
Wizard errors.

Every error carries the message shown to the user. None of them is fatal:
the wizard stays on its current step and the user may retry.
"""


class WizardError(Exception):
    """Base exception for wizard actions."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InputValidationError(WizardError):
    """A required field is missing or invalid; no AI call was made."""
    pass


class InvalidTransitionError(WizardError):
    """The action is not available on the current step."""
    pass


class WizardBusyError(WizardError):
    """Another action is still in flight."""
    pass


class ActionFailedError(WizardError):
    """
    The AI gateway (or file read) failed.

    The underlying exception is chained as __cause__.
    """
    pass
