"""
Configuration module for the application.
Exports the settings instance for use throughout the application.
"""

from config.settings import settings

__all__ = ["settings"]
