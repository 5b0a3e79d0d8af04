"""
Resume Parser Step

Sends the uploaded resume to the model and turns its answer into
ResumeFacts. Missing fields default; only an unparseable answer fails.
"""

import base64
import binascii
from typing import Any, Optional

import logfire
from pydantic_ai import BinaryContent

from config.settings import settings
from gateway.core.base import BaseGatewayStep
from gateway.core.json_extraction import parse_json_payload
from gateway.models.core import ResumeDocument, ResumeFacts
from utils.llm_agent import create_agent

from .models import ResumeAnalysis
from .prompts import SYSTEM_PROMPT, create_user_prompt


class ResumeParserStep(BaseGatewayStep[ResumeDocument, ResumeFacts]):
    """
    Extract skills, education and projects from a resume PDF.

    Responsibilities:
    - Attach the PDF to a single model request
    - Clean the response and parse it leniently
    - Return a well-formed ResumeFacts record
    """

    def __init__(self, agent: Optional[Any] = None):
        """Initialize resume parser step."""
        super().__init__(
            step_name="resume_parser",
            agent=agent or create_agent(
                model=settings.resume_model,
                system_prompt=SYSTEM_PROMPT,
                temperature=0.1,  # Low temperature for consistent extraction
                max_tokens=2000,
                timeout=settings.llm_timeout,
            ),
        )

    async def _validate_input(self, request: ResumeDocument) -> Optional[str]:
        if not request.data:
            return "resume document is empty"

        try:
            base64.b64decode(request.data, validate=True)
        except (binascii.Error, ValueError):
            return "resume document is not valid base64"

        return None

    async def _execute_step(self, request: ResumeDocument) -> ResumeFacts:
        logfire.info(
            "Analyzing resume",
            file_name=request.file_name,
            media_type=request.media_type
        )

        document = BinaryContent(
            data=base64.b64decode(request.data),
            media_type=request.media_type
        )
        text = await self._request_text([create_user_prompt(), document])

        payload = parse_json_payload(text)
        if not isinstance(payload, dict):
            logfire.warning("Resume analysis is not a JSON object, using defaults", payload_type=type(payload).__name__)
            payload = {}

        analysis = ResumeAnalysis.model_validate(payload)

        logfire.info(
            "Resume analysis completed",
            skill_count=len(analysis.skills),
            project_count=len(analysis.projects),
            has_name=analysis.name is not None
        )

        return ResumeFacts(
            file_name=request.file_name,
            media_type=request.media_type,
            data=request.data,
            applicant_name=analysis.name,
            skills=analysis.skills,
            education_level=analysis.education_level,
            projects=analysis.projects,
        )
