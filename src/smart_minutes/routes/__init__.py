"""Route exports."""

from .auth import router as auth_router
from .errors import register_exception_handlers
from .minutes import router as minutes_router
from .transcriptions import router as transcriptions_router

__all__ = [
    "auth_router",
    "minutes_router",
    "register_exception_handlers",
    "transcriptions_router",
]
