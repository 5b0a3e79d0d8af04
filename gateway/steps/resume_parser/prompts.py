"""
Resume Parser Prompts
"""

SYSTEM_PROMPT = """You read student resumes and extract facts for academic outreach.
Only report what the document actually says. Never invent skills, degrees or projects."""


def create_user_prompt() -> str:
    """Instruction sent alongside the attached resume document."""
    return """
Analyze the provided resume and extract the following information.
Return the result as a single JSON object.

1.  "name": The applicant's full name as written at the top of the resume. Use null if it is not present.
2.  "skills": An array of strings listing the key technical skills, languages, and technologies.
3.  "educationLevel": A string representing the highest level of education mentioned (e.g., "PhD in Computer Science", "Master of Science in Biology", "Bachelor of Arts in English").
4.  "projects": An array of strings, where each string is a concise one-sentence summary of a key project mentioned in the resume. Extract up to 3 of the most relevant projects.

Your response MUST be only a valid JSON object. Do not include any other text, explanations, or markdown formatting.
""".strip()
