"""Theme preference persisted next to the history entry."""

from typing import Optional

import logfire

from config.settings import settings
from schemas.preferences import Theme
from services.storage import KeyValueStore


class ThemePreference:
    """Read/write access to the stored "dark"/"light" theme."""

    def __init__(self, storage: KeyValueStore, storage_key: Optional[str] = None):
        self.storage = storage
        self.storage_key = storage_key or settings.theme_storage_key

    def get(self, system_prefers_dark: bool = False) -> Theme:
        """
        Stored theme, or the system preference when nothing valid is stored.
        """
        raw = self.storage.get(self.storage_key)
        if raw is not None:
            try:
                return Theme(raw)
            except ValueError:
                logfire.warning("Ignoring invalid stored theme", key=self.storage_key, value=raw)

        return Theme.DARK if system_prefers_dark else Theme.LIGHT

    def set(self, theme: Theme) -> Theme:
        self.storage.set(self.storage_key, theme.value)
        logfire.info("Theme updated", theme=theme.value)
        return theme

    def toggle(self, system_prefers_dark: bool = False) -> Theme:
        current = self.get(system_prefers_dark=system_prefers_dark)
        return self.set(Theme.LIGHT if current == Theme.DARK else Theme.DARK)
