"""
Models package for gateway data

NOTE: not database models
"""

from .core import (
    NOT_FOUND,
    ResumeDocument,
    ResumeFacts,
    Contact,
    DraftContent,
)

__all__ = [
    "NOT_FOUND",
    "ResumeDocument",
    "ResumeFacts",
    "Contact",
    "DraftContent",
]
