"""
Email Drafter Prompts
"""

from gateway.models.core import Contact, ResumeFacts

SYSTEM_PROMPT = """You are an expert academic writing assistant who drafts short, personalized cold emails from students to researchers.

<style>
- Respectful, professional and enthusiastic, never flattering
- Specific: connect one or two concrete skills or projects to the recipient's research
- Avoid "I hope this email finds you well", "delve", "leverage", "cutting-edge"
- No em dashes
</style>"""

DEFAULT_SENDER = "the applicant"


def salutation_for(contact: Contact) -> str:
    """
    Pick a formal greeting from the contact's title.

    Example:
        >>> salutation_for(Contact(name="Ada Lovelace", title="Professor", researchInterests="x"))
        'Dear Professor Lovelace,'
    """
    title = contact.title.lower()
    if "student" in title or "candidate" in title:
        return f"Dear {contact.name},"
    if "professor" in title:
        return f"Dear Professor {contact.last_name},"
    return f"Dear Dr. {contact.last_name},"


def create_drafting_prompt(contact: Contact, purpose: str, resume: ResumeFacts) -> str:
    """
    Build the drafting instruction for one contact.

    Args:
        contact: Recipient (must have an email; checked by the step)
        purpose: What the student is writing to ask for
        resume: Parsed resume of the sender

    Returns:
        Formatted user prompt
    """
    sender = resume.applicant_name or DEFAULT_SENDER
    recent_work = (
        f' Their recent work includes "{contact.recent_publication}".'
        if contact.recent_publication else ""
    )
    project = resume.projects[0] if resume.projects else "a relevant project"

    return f"""
Your task is to draft a personalized, professional, and concise cold email.

**Instructions:**
1.  **Recipient:** {contact.name}, who is a {contact.title}.
2.  **Their Research:** {contact.research_interests}.{recent_work}
3.  **Sender Profile:**
    - **Key Skills:** {', '.join(resume.skills)}
    - **Education:** {resume.education_level}
    - **Relevant Project:** "{project}"
4.  **Purpose:** The student is writing to {purpose}.

**Email Content:**
-   Create a concise and compelling subject line.
-   Open with "{salutation_for(contact)}"
-   In the first paragraph, state the purpose of the email directly.
-   In the second paragraph, briefly connect the student's background to the contact's specific research. Explicitly mention one or two of the applicant's key skills or a specific project to demonstrate clear alignment.
-   Conclude by expressing enthusiasm for their work, mentioning the attached resume, and politely suggesting a next step (e.g., a brief meeting).
-   Keep the entire email body under 200 words.
-   Sign off professionally as {sender}.

Return the result as a single JSON object with two properties: "subject" and "body". Do not include any other text or markdown formatting.
Example format:
{{
    "subject": "Inquiry from a Prospective PhD Student",
    "body": "{salutation_for(contact)}\\n\\nI am writing to express my keen interest in your research..."
}}
""".strip()
