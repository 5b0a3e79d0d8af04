"""Gateway steps package.

One step per request/response exchange with the generative-AI service:
- resume_parser: Extracts structured facts from the resume PDF
- contact_finder: Discovers matching academic contacts
- email_drafter: Drafts one personalized email per contact
"""
