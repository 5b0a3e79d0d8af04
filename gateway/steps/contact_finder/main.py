"""
Contact Finder Step

Asks the model (optionally with web search) for faculty and lab contacts that
match the applicant, then validates the whole batch.
"""

import base64
from typing import Any, List, Optional

import logfire
from pydantic import ValidationError as PydanticValidationError
from pydantic_ai import BinaryContent, WebSearchTool

from config.settings import settings
from gateway.core.base import BaseGatewayStep
from gateway.core.exceptions import ResponseShapeError
from gateway.core.json_extraction import parse_json_payload
from gateway.models.core import Contact
from utils.llm_agent import create_agent

from .models import REQUIRED_CONTACT_FIELDS, ContactSearchRequest, ContactSearchResult
from .prompts import SYSTEM_PROMPT, create_user_prompt


class ContactFinderStep(BaseGatewayStep[ContactSearchRequest, List[Contact]]):
    """
    Discover academic contacts at a university department.

    A non-empty answer in which any element lacks name, title or research
    interests fails the whole batch; bad elements are never filtered out.
    """

    def __init__(self, agent: Optional[Any] = None, enable_web_search: Optional[bool] = None):
        """Initialize contact finder step."""
        if enable_web_search is None:
            enable_web_search = settings.enable_web_search
        self.enable_web_search = enable_web_search

        super().__init__(
            step_name="contact_finder",
            agent=agent or create_agent(
                model=settings.discovery_model,
                system_prompt=SYSTEM_PROMPT,
                temperature=0.2,
                max_tokens=8000,
                timeout=settings.llm_timeout,
                builtin_tools=[WebSearchTool()] if enable_web_search else [],
            ),
        )

    async def _validate_input(self, request: ContactSearchRequest) -> Optional[str]:
        if not request.university.strip():
            return "university is empty or missing"

        if not request.department.strip():
            return "department is empty or missing"

        return None

    async def _execute_step(self, request: ContactSearchRequest) -> List[Contact]:
        resume = request.resume
        logfire.info(
            "Searching for contacts",
            university=request.university,
            department=request.department,
            web_search=self.enable_web_search
        )

        user_prompt = create_user_prompt(
            university=request.university,
            department=request.department,
            skills=resume.skills,
            education_level=resume.education_level,
            projects=resume.projects,
        )
        document = BinaryContent(data=base64.b64decode(resume.data), media_type=resume.media_type)
        text = await self._request_text([user_prompt, document])

        payload = parse_json_payload(text)
        result = self._validate_contacts(payload, text)

        logfire.info(
            "Contact search completed",
            contact_count=len(result.contacts),
            reachable_count=result.reachable_count
        )
        return result.contacts

    @staticmethod
    def _validate_contacts(payload: Any, raw_response: str) -> ContactSearchResult:
        """
        Check the parsed payload is a list of contact objects.

        Raises:
            ResponseShapeError: If the payload is not an array, or any element
                lacks a required field or fails validation
        """
        if not isinstance(payload, list):
            raise ResponseShapeError(
                f"Expected a JSON array of contacts, got {type(payload).__name__}",
                raw_response=raw_response,
            )

        for index, item in enumerate(payload):
            if not isinstance(item, dict):
                raise ResponseShapeError(
                    f"Contact #{index} is not an object",
                    raw_response=raw_response,
                )
            missing = [key for key in REQUIRED_CONTACT_FIELDS if key not in item]
            if missing:
                raise ResponseShapeError(
                    f"Contact #{index} is missing {', '.join(missing)}",
                    raw_response=raw_response,
                )

        try:
            return ContactSearchResult(contacts=payload)
        except PydanticValidationError as e:
            raise ResponseShapeError(
                f"Contacts failed validation: {e.error_count()} error(s)",
                raw_response=raw_response,
            ) from e
