"""
Category Service

Serves the category tree with caching and request deduplication:
- At most one outstanding network call, however many callers are waiting
- The successful result is cached for the lifetime of the process
- Failures are not cached; the next fetch() retries
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Optional

from commerce_menu.integrations.clients.catalog_service import CatalogServiceClient
from commerce_menu.integrations.contracts.categories import CategoryTreeResponse
from commerce_menu.integrations.policy.response_wrappers import normalize_category_response
from commerce_menu.integrations.queries import CATEGORY_QUERY

logger = logging.getLogger(__name__)


def _consume_outcome(task: asyncio.Task) -> None:
    # Mark the outcome retrieved even if every waiting caller was cancelled.
    if not task.cancelled():
        task.exception()


class CacheStatus(str, Enum):
    EMPTY = "EMPTY"
    IN_FLIGHT = "IN_FLIGHT"
    RESOLVED = "RESOLVED"


class CategoryCacheState:
    """The single cache slot: empty, in-flight (shared task) or resolved."""

    def __init__(self) -> None:
        self.status = CacheStatus.EMPTY
        self.pending: Optional[asyncio.Task] = None
        self.value: Optional[CategoryTreeResponse] = None

    def start(self, task: asyncio.Task) -> None:
        self.status = CacheStatus.IN_FLIGHT
        self.pending = task
        self.value = None

    def resolve(self, value: CategoryTreeResponse) -> None:
        self.status = CacheStatus.RESOLVED
        self.pending = None
        self.value = value

    def clear(self) -> None:
        self.status = CacheStatus.EMPTY
        self.pending = None
        self.value = None

    def owns(self, task: Optional[asyncio.Task]) -> bool:
        return task is not None and self.pending is task


class CategoryService:
    def __init__(
        self,
        client: CatalogServiceClient,
        state: Optional[CategoryCacheState] = None,
        query: str = CATEGORY_QUERY,
    ) -> None:
        self.client = client
        self.query = query
        self._state = state or CategoryCacheState()

    @property
    def state(self) -> CategoryCacheState:
        return self._state

    async def fetch(self) -> CategoryTreeResponse:
        """
        Return the category tree, from cache when possible.

        Concurrent callers arriving while a request is in flight join that
        request and observe its exact result or exception.
        """
        state = self._state

        if state.status is CacheStatus.RESOLVED and state.value is not None:
            logger.debug("Category cache hit")
            return state.value

        if state.status is CacheStatus.IN_FLIGHT and state.pending is not None:
            logger.debug("Joining in-flight category request")
            return await asyncio.shield(state.pending)

        # The task is registered before the first await so later callers join it.
        task = asyncio.ensure_future(self._load())
        task.add_done_callback(_consume_outcome)
        state.start(task)
        return await asyncio.shield(task)

    async def _load(self) -> CategoryTreeResponse:
        task = asyncio.current_task()
        try:
            raw = await self.client.query(self.query)
            tree = normalize_category_response(raw)
        except Exception as exc:
            logger.error("Error fetching categories: %s", exc)
            if self._state.owns(task):
                self._state.clear()
            raise

        if self._state.owns(task):
            self._state.resolve(tree)
        else:
            logger.info("Discarding category result fetched before invalidation")
        return tree

    def invalidate(self) -> None:
        """Drop the cached tree and any in-flight request reference."""
        logger.info("Category cache invalidated (was %s)", self._state.status.value)
        self._state.clear()
