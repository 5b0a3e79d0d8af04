"""
API route handlers.
"""

from api.routes.wizard import router as wizard_router
from api.routes.history import router as history_router
from api.routes.preferences import router as preferences_router

__all__ = ["wizard_router", "history_router", "preferences_router"]
