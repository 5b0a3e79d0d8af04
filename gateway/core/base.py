"""
Core gateway infrastructure - base class for the AI operations.

BaseGatewayStep: one request/response exchange with the generative-AI service
"""

import time
from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, Sequence, TypeVar

import logfire

from .exceptions import (
    ExternalAPIError,
    GatewayError,
    StepExecutionError,
    ValidationError,
)

RequestT = TypeVar("RequestT")
ResultT = TypeVar("ResultT")


class BaseGatewayStep(ABC, Generic[RequestT, ResultT]):
    """
    Abstract base class for the gateway operations.

    Each step must implement:
    - _execute_step(): Prompting, response cleaning and validation
    - Optionally: _validate_input(): Input validation

    The execute() method wraps step execution with:
    - Logfire observability spans
    - Error handling and logging
    - Timing metrics
    """

    def __init__(self, step_name: str, agent: Any):
        """
        Initialize gateway step.

        Args:
            step_name: Unique identifier for this step (used in logs)
            agent: pydantic-ai Agent (or anything with an async run()) returning text
        """
        self.step_name = step_name
        self.agent = agent
        self.last_duration: Optional[float] = None

    async def execute(self, request: RequestT) -> ResultT:
        """
        Execute the step with full observability.

        Gateway errors propagate unchanged so callers can tell translation
        failures from transport failures; anything else is wrapped in
        StepExecutionError.

        Raises:
            GatewayError: If the step fails
        """
        start_time = time.perf_counter()

        with logfire.span(f"gateway.{self.step_name}", step=self.step_name):
            try:
                logfire.info(f"{self.step_name} started")

                validation_error = await self._validate_input(request)
                if validation_error:
                    raise ValidationError(f"Input validation failed: {validation_error}")

                result = await self._execute_step(request)

                self.last_duration = time.perf_counter() - start_time
                logfire.info(
                    f"{self.step_name} completed",
                    duration=self.last_duration
                )
                return result

            except Exception as e:
                self.last_duration = time.perf_counter() - start_time

                logfire.error(
                    f"{self.step_name} failed",
                    error=str(e),
                    error_type=type(e).__name__,
                    duration=self.last_duration,
                    raw_response=getattr(e, "raw_response", None),
                    exc_info=True
                )

                if isinstance(e, GatewayError):
                    raise
                raise StepExecutionError(self.step_name, e) from e

    async def _validate_input(self, request: RequestT) -> Optional[str]:
        """
        Validate that prerequisites for this step are met.

        Returns:
            Error message if validation fails, None if valid
        """
        return None

    async def _request_text(self, user_prompt: Sequence[Any]) -> str:
        """
        Send one request and return the response text.

        Raises:
            ExternalAPIError: If the model call fails
        """
        try:
            result = await self.agent.run(list(user_prompt))
        except Exception as e:
            raise ExternalAPIError(f"Model request failed: {str(e)}") from e

        text = result.output if isinstance(result.output, str) else str(result.output)
        logfire.info("Model responded", response_length=len(text))
        return text

    @abstractmethod
    async def _execute_step(self, request: RequestT) -> ResultT:
        """
        Execute step-specific logic.

        MUST BE IMPLEMENTED by each step.
        """
        pass
