"""
Commerce category menu.

Fetches the category tree from the Catalog Service (cached, one request in
flight at a time) and turns it into a navigable menu tree.
"""

from commerce_menu.integrations.contracts.categories import (
    CategoryRecord,
    CategoryTreeResponse,
    NavigableNode,
)
from commerce_menu.integrations.clients.catalog_service import CatalogServiceClient
from commerce_menu.integrations.policy.category_service import (
    CacheStatus,
    CategoryCacheState,
    CategoryService,
)
from commerce_menu.integrations.policy.response_wrappers import (
    CategoryFetchError,
    FetchError,
    QueryError,
    TransportError,
)
from commerce_menu.menu.category_menu import (
    CategoryMenuBuilder,
    build_category_menu,
    load_category_menu,
)
from commerce_menu.utils.cache_keys import create_hash_from_headers

__all__ = [
    "CacheStatus",
    "CatalogServiceClient",
    "CategoryCacheState",
    "CategoryFetchError",
    "CategoryMenuBuilder",
    "CategoryRecord",
    "CategoryService",
    "CategoryTreeResponse",
    "FetchError",
    "NavigableNode",
    "QueryError",
    "TransportError",
    "build_category_menu",
    "create_hash_from_headers",
    "load_category_menu",
]
