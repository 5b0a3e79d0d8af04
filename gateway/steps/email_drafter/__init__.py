"""
Email Drafter Step

Writes the subject and body of one outreach email.
"""

from .main import EmailDrafterStep

__all__ = ["EmailDrafterStep"]
