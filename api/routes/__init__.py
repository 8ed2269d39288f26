"""API route modules."""

from api.routes.feedback import router as feedback_router
from api.routes.health import router as health_router
from api.routes.messages import router as messages_router

__all__ = ["feedback_router", "health_router", "messages_router"]
