"""
Catalog Service GraphQL client.

Purpose:
- Builds the GET request for a Catalog Service query (endpoint, cache-busting
  token, collapsed query text, variables)
- Sends it through a Transport and decodes the JSON body

Usage:
- Held by CategoryService, which adds caching and request deduplication
- The Transport decides mock vs real HTTP (see clients/real_http and clients/mocks)
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, Optional

from commerce_menu.integrations.contracts.interfaces import CommerceConfigProvider, Transport
from commerce_menu.integrations.policy.response_wrappers import TransportError
from commerce_menu.utils.cache_keys import create_hash_from_headers

logger = logging.getLogger(__name__)

CATALOG_SERVICE_SCOPE = "cs"

_WHITESPACE_RUN = re.compile(r"\s+")


def compact_query(query: str) -> str:
    """Collapse newlines, tabs and runs of spaces into single spaces."""
    return _WHITESPACE_RUN.sub(" ", query)


class CatalogServiceClient:
    def __init__(
        self,
        config: CommerceConfigProvider,
        transport: Transport,
        scope: str = CATALOG_SERVICE_SCOPE,
    ) -> None:
        self.config = config
        self.transport = transport
        self.scope = scope

    def build_params(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
        headers = self.config.get_headers(self.scope)
        return {
            "cb": create_hash_from_headers(headers),
            "query": compact_query(query),
            "variables": json.dumps(variables) if variables else "null",
        }

    def build_headers(self) -> Dict[str, str]:
        headers = dict(self.config.get_headers(self.scope))
        headers["Content-Type"] = "application/json"
        return headers

    async def query(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Any:
        """
        Perform a Catalog Service query as a GET request.

        Returns:
            The decoded JSON body (GraphQL ``data``/``errors`` envelope)

        Raises:
            TransportError: non-2xx status, connection failure or non-JSON body
        """
        url = self.config.get_endpoint_url()
        params = self.build_params(query, variables)
        headers = self.build_headers()

        logger.info("Querying catalog service at %s (cb=%s)", url, params["cb"])
        response = await self.transport.get(url, params, headers)

        if not response.ok:
            logger.error("Catalog service returned HTTP %s", response.status_code)
            raise TransportError(
                f"Catalog service request failed with HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except (UnicodeDecodeError, ValueError) as exc:
            raise TransportError(
                "Catalog service returned a non-JSON body",
                status_code=response.status_code,
            ) from exc
