"""
Integrations layer.
This package contains all code used to communicate with the commerce backend:
- Catalog Service GraphQL endpoint (category tree)

Key rule:
- The menu layer MUST NOT call the endpoint directly.
- It goes through CategoryService (policy/), which caches and deduplicates calls.
- We use the MOCK transport during development and swap to the REAL_HTTP
  transport when the endpoint is configured.

Switching implementations:
- The selection of mock vs real transports happens in ONE place
  (commerce_menu/api/dependencies.py).
"""

from .contracts.categories import (
    CategoryPage,
    CategoryRecord,
    CategoryTreeResponse,
    NavigableNode,
    PageInfo,
)
from .contracts.interfaces import (
    CommerceConfigProvider,
    RootLinkResolver,
    Transport,
    TransportResponse,
)

__all__ = [
    # categories
    "CategoryPage", "CategoryRecord", "CategoryTreeResponse", "NavigableNode", "PageInfo",
    # interfaces
    "CommerceConfigProvider", "RootLinkResolver", "Transport", "TransportResponse",
]
