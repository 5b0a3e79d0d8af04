"""
Contact Finder Step

Discovers faculty, researchers and senior students whose work matches the
applicant's resume.
"""

from .main import ContactFinderStep

__all__ = ["ContactFinderStep"]
