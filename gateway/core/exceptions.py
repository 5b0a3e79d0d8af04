"""
Exceptions raised by the AI gateway.

GatewayError
├── ValidationError        step prerequisites missing, no model call made
├── ExternalAPIError       the model call itself failed
├── TranslationError       the response could not be turned into data
│   ├── ResponseParseError     no JSON could be parsed from the text
│   └── ResponseShapeError     JSON parsed but does not have the expected fields
└── StepExecutionError     anything unexpected, wrapped with the step name
"""


class GatewayError(Exception):
    """Base exception for AI gateway failures."""
    pass


class ValidationError(GatewayError):
    """
    Raised when step input validation fails.

    Example: drafting an email for a contact without an email address.
    """
    pass


class ExternalAPIError(GatewayError):
    """
    Raised when the generative-AI service call fails.

    Not retried here; the user re-triggers the whole step.
    """
    pass


class TranslationError(GatewayError):
    """Raised when a model response cannot be translated into the expected data."""

    def __init__(self, message: str, raw_response: str = ""):
        self.raw_response = raw_response
        super().__init__(message)


class ResponseParseError(TranslationError):
    """The response text contains no parseable JSON value."""
    pass


class ResponseShapeError(TranslationError):
    """The response parsed as JSON but is missing required fields."""
    pass


class StepExecutionError(GatewayError):
    """
    Raised when a gateway step fails for an unexpected reason.

    Attributes:
        step_name: Name of the failed step
        original_error: The underlying exception
    """

    def __init__(self, step_name: str, original_error: Exception):
        self.step_name = step_name
        self.original_error = original_error
        super().__init__(f"Step '{step_name}' failed: {str(original_error)}")
