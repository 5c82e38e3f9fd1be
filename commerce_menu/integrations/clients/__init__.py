"""
Integration clients.

- catalog_service.py: builds and sends Catalog Service queries over a Transport
- real_http/: httpx transport for the live endpoint
- mocks/: local transport serving canned category data
"""

from .catalog_service import CATALOG_SERVICE_SCOPE, CatalogServiceClient, compact_query

__all__ = ["CATALOG_SERVICE_SCOPE", "CatalogServiceClient", "compact_query"]
