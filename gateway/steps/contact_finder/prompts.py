"""
Contact Finder Prompts
"""

SYSTEM_PROMPT = """You are an expert academic researcher who finds faculty and lab contacts for students.
Verify every email address you report. Prefer returning null over guessing an address."""


def create_user_prompt(
    university: str,
    department: str,
    skills: list[str],
    education_level: str,
    projects: list[str],
) -> str:
    """
    Build the discovery instruction for one university/department.

    Args:
        university: Target university name
        department: Target department or field of study
        skills: Applicant skills from the resume analysis
        education_level: Applicant's highest education level
        projects: Applicant project summaries

    Returns:
        Formatted user prompt
    """
    return f"""
Your task is to act as an expert academic researcher. Based on the provided applicant profile and target university/department, find relevant academic contacts.

**Target:**
- **University:** {university}
- **Department / Field of Study:** {department}

**Applicant Profile:**
- **Key Skills:** {', '.join(skills)}
- **Education:** {education_level}
- **Project Experience:** {'; '.join(projects)}

**Search Strategy:**
1.  **Identify Potential Contacts:** Find contacts at the specified university and department whose research strongly aligns with the applicant's profile. Search for a diverse range of personnel: Professors, Assistant/Associate Professors, Research Scientists, Lab Managers, and senior PhD students.
2.  **Prioritize Email Retrieval:** Finding a valid academic email address is the highest priority. Look for official university directory pages, faculty profile pages, lab websites, and publications.
3.  **Gather Supporting Information:** For each contact, find their official title, a summary of their relevant research interests, their lab/personal website, a recent publication, and their LinkedIn profile URL.
4.  **Verify Information:** Cross-reference information from multiple sources, especially email addresses.

**Output Format:**
Return the result as a JSON array of objects. Each object must have these properties: "name", "title", "email", "researchInterests", "labWebsite", "recentPublication", and "linkedinProfile".
- "name": The contact's full name.
- "title": The contact's official title (e.g., "Professor of Computer Science", "PhD Candidate").
- "email": The contact's verified academic email address. If a valid email cannot be found, this MUST be null.
- "researchInterests": A concise one-sentence summary of their key research areas relevant to the applicant's resume.
- "labWebsite": The URL to their lab or personal academic website. Set to null if not found.
- "recentPublication": The title of one of their recent, relevant publications. Set to null if not found.
- "linkedinProfile": The full URL to their LinkedIn profile. Set to null if not found.

**CRITICAL INSTRUCTIONS:**
- Your response MUST be only a valid JSON array. Do not include any other text, explanations, or markdown formatting.
- If you cannot find any suitable contacts, you MUST return an empty JSON array: [].
""".strip()
