"""Theme preference endpoints."""

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_theme_preference
from schemas.preferences import ThemeResponse, ThemeUpdate
from services.preferences import ThemePreference


router = APIRouter(prefix="/api/preferences", tags=["Preferences"])


@router.get("/theme", response_model=ThemeResponse)
async def get_theme(
    system_prefers_dark: bool = Query(False, description="Browser's prefers-color-scheme: dark"),
    preference: ThemePreference = Depends(get_theme_preference),
):
    """Stored theme, falling back to the system preference."""
    return ThemeResponse(theme=preference.get(system_prefers_dark=system_prefers_dark))


@router.put("/theme", response_model=ThemeResponse)
async def set_theme(
    update: ThemeUpdate,
    preference: ThemePreference = Depends(get_theme_preference),
):
    return ThemeResponse(theme=preference.set(update.theme))


@router.post("/theme/toggle", response_model=ThemeResponse)
async def toggle_theme(
    system_prefers_dark: bool = Query(False, description="Browser's prefers-color-scheme: dark"),
    preference: ThemePreference = Depends(get_theme_preference),
):
    """Switch between dark and light and persist the result."""
    return ThemeResponse(theme=preference.toggle(system_prefers_dark=system_prefers_dark))
