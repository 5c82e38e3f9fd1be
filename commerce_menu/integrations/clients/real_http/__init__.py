"""
Real HTTP integration clients.

These clients communicate with the real Catalog Service endpoint via httpx.

Important:
- Must implement the same Transport interface as the mock clients
- Must return data shaped according to commerce_menu/integrations/contracts/*

Switching:
The selection of mock vs real transport happens in commerce_menu/api/dependencies.py only.
"""

from .httpx_transport import HttpxTransport

__all__ = ["HttpxTransport"]
