"""
AI gateway factory.

This module provides AIGateway, the single boundary between the wizard and
the generative-AI service, and create_ai_gateway() which wires the three
steps with agents built from settings.
"""

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from gateway.models.core import Contact, DraftContent, ResumeDocument, ResumeFacts
    from gateway.steps.contact_finder.main import ContactFinderStep
    from gateway.steps.email_drafter.main import EmailDrafterStep
    from gateway.steps.resume_parser.main import ResumeParserStep


class AIGateway:
    """
    Three stateless operations against the generative-AI service.

    None of them retries; a failed call raises a GatewayError and the user
    re-triggers the whole wizard step.

    Example:
        ```python
        from gateway import create_ai_gateway

        gateway = create_ai_gateway()
        facts = await gateway.extract_resume_facts(document)
        contacts = await gateway.discover_contacts("Stanford University", "Computer Science", facts)
        draft = await gateway.draft_email(contacts[0], "seeking a PhD research position", facts)
        ```
    """

    def __init__(
        self,
        resume_parser: "ResumeParserStep",
        contact_finder: "ContactFinderStep",
        email_drafter: "EmailDrafterStep",
    ):
        self.resume_parser = resume_parser
        self.contact_finder = contact_finder
        self.email_drafter = email_drafter

    async def extract_resume_facts(self, document: "ResumeDocument") -> "ResumeFacts":
        return await self.resume_parser.execute(document)

    async def discover_contacts(
        self,
        university: str,
        department: str,
        facts: "ResumeFacts",
    ) -> List["Contact"]:
        from gateway.steps.contact_finder.models import ContactSearchRequest

        return await self.contact_finder.execute(
            ContactSearchRequest(university=university, department=department, resume=facts)
        )

    async def draft_email(self, contact: "Contact", purpose: str, facts: "ResumeFacts") -> "DraftContent":
        from gateway.steps.email_drafter.models import DraftRequest

        return await self.email_drafter.execute(
            DraftRequest(contact=contact, purpose=purpose, resume=facts)
        )


def create_ai_gateway() -> AIGateway:
    """
    Factory function to create a fully configured AI gateway.

    Returns:
        AIGateway with agents for resume parsing, contact discovery and drafting

    Raises:
        ValueError: If ANTHROPIC_API_KEY is not configured
    """
    # Import step classes lazily to avoid circular dependencies at package import time
    from gateway.steps.resume_parser.main import ResumeParserStep
    from gateway.steps.contact_finder.main import ContactFinderStep
    from gateway.steps.email_drafter.main import EmailDrafterStep

    return AIGateway(
        resume_parser=ResumeParserStep(),
        contact_finder=ContactFinderStep(),
        email_drafter=EmailDrafterStep(),
    )
