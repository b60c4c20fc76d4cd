"""Error handling helpers for the HTTP edge of the courses service."""
from typing import Any, Dict
import logging

logger = logging.getLogger(__name__)


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        logger.error("Unhandled exception while serving course data: %s", exc, exc_info=True)
        return {
            "message": "An internal error occurred while loading course data. Please try again later.",
            "fallback": True,
            "metadata": {"error": str(exc), "context": context or {}},
        }
