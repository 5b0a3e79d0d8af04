"""
Email Drafter Step

Drafts one email (subject + body) for one contact. The caller attaches the
contact's address as the recipient.
"""

import base64
from typing import Any, Optional

import logfire
from pydantic import ValidationError as PydanticValidationError
from pydantic_ai import BinaryContent

from config.settings import settings
from gateway.core.base import BaseGatewayStep
from gateway.core.exceptions import ResponseShapeError
from gateway.core.json_extraction import parse_json_payload
from gateway.models.core import DraftContent
from utils.llm_agent import create_agent

from .models import DraftRequest
from .prompts import SYSTEM_PROMPT, create_drafting_prompt


class EmailDrafterStep(BaseGatewayStep[DraftRequest, DraftContent]):
    """
    Draft a personalized outreach email.

    Fails unless the response parses into an object with a string subject
    and a string body.
    """

    def __init__(self, agent: Optional[Any] = None):
        """Initialize email drafter step."""
        super().__init__(
            step_name="email_drafter",
            agent=agent or create_agent(
                model=settings.drafting_model,
                system_prompt=SYSTEM_PROMPT,
                temperature=0.7,  # Higher for creative writing
                max_tokens=2000,
                timeout=settings.llm_timeout,
            ),
        )

    async def _validate_input(self, request: DraftRequest) -> Optional[str]:
        if not request.contact.email:
            return f"contact '{request.contact.name}' has no email address"

        if not request.purpose.strip():
            return "purpose is empty or missing"

        return None

    async def _execute_step(self, request: DraftRequest) -> DraftContent:
        logfire.info(
            "Drafting email",
            recipient_name=request.contact.name,
            recipient_title=request.contact.title
        )

        user_prompt = create_drafting_prompt(
            contact=request.contact,
            purpose=request.purpose,
            resume=request.resume,
        )
        document = BinaryContent(
            data=base64.b64decode(request.resume.data),
            media_type=request.resume.media_type
        )
        text = await self._request_text([user_prompt, document])

        payload = parse_json_payload(text)
        if not isinstance(payload, dict):
            raise ResponseShapeError(
                f"Expected a JSON object with subject and body, got {type(payload).__name__}",
                raw_response=text,
            )

        try:
            draft = DraftContent.model_validate(payload)
        except PydanticValidationError as e:
            raise ResponseShapeError(
                f"Draft is missing a subject or body: {e.error_count()} error(s)",
                raw_response=text,
            ) from e

        logfire.info(
            "Email drafted",
            recipient_name=request.contact.name,
            word_count=len(draft.body.split())
        )
        return draft
