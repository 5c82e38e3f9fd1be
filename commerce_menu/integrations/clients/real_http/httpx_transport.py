"""
Real HTTP transport (httpx).

Used when the Catalog Service endpoint is configured. Request params are
merged into any query string already present on the endpoint URL.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

import httpx

from commerce_menu.integrations.contracts.interfaces import Transport, TransportResponse
from commerce_menu.integrations.policy.response_wrappers import TransportError

logger = logging.getLogger(__name__)


class HttpxTransport(Transport):
    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout_seconds: float = 20.0,
    ) -> None:
        self._client = client
        self.timeout_seconds = timeout_seconds

    async def get(
        self,
        url: str,
        params: Mapping[str, str],
        headers: Mapping[str, str],
    ) -> TransportResponse:
        try:
            # Keep any query string already on the endpoint (e.g. ?env=prod).
            request_url = httpx.URL(url).copy_merge_params(dict(params))
            if self._client is not None:
                response = await self._client.get(request_url, headers=dict(headers))
            else:
                async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                    response = await client.get(request_url, headers=dict(headers))
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error("Request error connecting to catalog service: %s", exc)
            raise TransportError(f"Request error connecting to catalog service: {exc}") from exc

        return TransportResponse(
            status_code=response.status_code,
            body=response.content,
            headers=dict(response.headers),
        )

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
