"""
Resume Parser Step

Extracts skills, highest education level and key projects from the
uploaded resume PDF.
"""

from .main import ResumeParserStep

__all__ = ["ResumeParserStep"]
