"""Preference-related Pydantic schemas."""

from enum import Enum

from pydantic import BaseModel, Field


class Theme(str, Enum):
    """UI colour scheme stored under the theme key."""
    DARK = "dark"
    LIGHT = "light"


class ThemeResponse(BaseModel):
    """Response schema for the theme endpoints."""

    theme: Theme = Field(..., description="Current theme")


class ThemeUpdate(BaseModel):
    """Request schema for PUT /api/preferences/theme."""

    theme: Theme = Field(..., description="Theme to store")
