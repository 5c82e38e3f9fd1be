"""
Mock integration clients.

These transports return fake (but realistic) Catalog Service responses without
calling any external API. They are used when:
- The commerce endpoint is not configured or not reachable
- We want to exercise the menu end-to-end without external dependencies

Important:
- Mock transports must follow the SAME interface as the real HTTP transport.

Switching to real:
Set INTEGRATIONS_MODE=real (see commerce_menu/api/dependencies.py).
"""

from .local_categories import LocalCategoryTransport

__all__ = ["LocalCategoryTransport"]
