"""Error handling helpers for the category menu API."""
from typing import Any, Dict, Optional
import logging

from commerce_menu.integrations.policy.response_wrappers import QueryError, TransportError

logger = logging.getLogger(__name__)


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        logger.error("Category fetch failed: %s", exc, exc_info=True)
        metadata: Dict[str, Any] = {"error": str(exc), "context": context or {}}
        if isinstance(exc, TransportError):
            kind = "transport"
            metadata["status_code"] = exc.status_code
        elif isinstance(exc, QueryError):
            kind = "query"
            metadata["errors"] = exc.errors
        else:
            kind = "internal"
        return {
            "message": "Categories are temporarily unavailable. Please try again later.",
            "kind": kind,
            "retryable": True,
            "metadata": metadata,
        }
