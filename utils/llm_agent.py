"""Utilities for creating instrumented pydantic-ai agents."""

import logging
from typing import Optional, Sequence, Union

from anthropic import AsyncAnthropic
from pydantic_ai import Agent
from pydantic_ai.models.anthropic import AnthropicModel
from pydantic_ai.providers.anthropic import AnthropicProvider

from config.settings import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()


def _default_system_prompt() -> str:
    return (
        "You are a careful assistant for students writing to academic contacts. "
        "When asked for JSON, reply with JSON only."
    )


def create_anthropic_model(model_name: str) -> AnthropicModel:
    """
    Anthropic model whose client never retries.

    A failed request surfaces at once and the user re-triggers the step.
    """
    client = AsyncAnthropic(api_key=settings.anthropic_api_key, max_retries=0)
    return AnthropicModel(model_name, provider=AnthropicProvider(anthropic_client=client))


def create_agent(
    model: str,
    system_prompt: Optional[str] = None,
    temperature: float = 0.7,
    max_tokens: int = 2000,
    timeout: Optional[float] = None,
    builtin_tools: Sequence = (),
) -> Agent[None, str]:
    """
    Create a pydantic-ai Agent that returns the raw response text.

    Output is deliberately plain text: responses are cleaned and validated by
    the gateway, never trusted to be exact structured output.
    """
    resolved_model: Union[str, AnthropicModel] = model
    if model.startswith("anthropic:"):
        if not settings.anthropic_api_key:
            raise ValueError("ANTHROPIC_API_KEY environment variable not set")
        resolved_model = create_anthropic_model(model.split(":", 1)[1])

    prompt = system_prompt or _default_system_prompt()

    model_settings = {
        "temperature": temperature,
        "max_tokens": max_tokens,
    }
    if timeout is not None:
        model_settings["timeout"] = timeout

    agent = Agent(
        model=resolved_model,
        output_type=str,
        system_prompt=prompt,
        model_settings=model_settings,
        builtin_tools=list(builtin_tools),
    )

    logger.debug(
        "Created agent: model=%s, temperature=%s, max_tokens=%s, timeout=%s, builtin_tools=%s",
        model,
        temperature,
        max_tokens,
        timeout,
        [type(tool).__name__ for tool in builtin_tools],
    )

    return agent
