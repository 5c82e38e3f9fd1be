from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from commerce_menu.integrations.contracts.categories import CategoryTreeResponse

logger = logging.getLogger(__name__)


class CategoryFetchError(RuntimeError):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}


class TransportError(CategoryFetchError):
    """The endpoint could not be reached or answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, payload=payload)
        self.status_code = status_code


class QueryError(CategoryFetchError):
    """The endpoint answered, but the payload reports GraphQL errors."""

    def __init__(
        self,
        message: str,
        *,
        errors: Optional[List[Any]] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, payload=payload)
        self.errors = errors or []


FetchError = TransportError


def normalize_category_response(raw: Any) -> CategoryTreeResponse:
    """Turn a decoded query response into the cached tree.

    A payload carrying ``errors`` is a logical failure. Otherwise the ``data``
    wrapper is unwrapped; a payload without one is used as a whole.
    """
    if not isinstance(raw, dict):
        raise QueryError(f"Unexpected response payload type: {type(raw).__name__}")

    errors = raw.get("errors")
    if errors:
        logger.error("GraphQL errors: %s", errors)
        raise QueryError(
            "GraphQL query failed",
            errors=errors if isinstance(errors, list) else [errors],
            payload=raw,
        )

    data = raw["data"] if raw.get("data") is not None else raw
    if not isinstance(data, dict):
        raise QueryError(f"Unexpected data payload type: {type(data).__name__}", payload=raw)

    try:
        return CategoryTreeResponse.model_validate(data)
    except ValidationError as exc:
        raise QueryError(f"Response validation failed: {exc}", payload=raw) from exc
