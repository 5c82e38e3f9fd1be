"""
Local Category Transport (Mock/Local).

Purpose:
- Acts as a development-time Catalog Service when the commerce endpoint is not
  reachable (INTEGRATIONS_MODE=mock).
- Serves a canned categories payload from data/categories.json, or any payload
  handed in by the caller.

Swap:
Replace with clients/real_http/httpx_transport.py once the endpoint and
headers are configured.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from commerce_menu.integrations.contracts.interfaces import Transport, TransportResponse

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path(__file__).parent / "data" / "categories.json"


class LocalCategoryTransport(Transport):
    def __init__(
        self,
        payload: Optional[Any] = None,
        data_path: Optional[Path] = None,
        status_code: int = 200,
        delay_seconds: float = 0.0,
    ) -> None:
        self._payload = payload
        self.data_path = data_path or DEFAULT_DATA_PATH
        self.status_code = status_code
        self.delay_seconds = delay_seconds
        self.calls: List[Dict[str, Any]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def _load_payload(self) -> Any:
        if self._payload is not None:
            return self._payload
        with open(self.data_path, "r", encoding="utf-8") as f:
            return json.load(f)

    async def get(
        self,
        url: str,
        params: Mapping[str, str],
        headers: Mapping[str, str],
    ) -> TransportResponse:
        self.calls.append({"url": url, "params": dict(params), "headers": dict(headers)})
        logger.debug("Mock catalog request #%d to %s", len(self.calls), url)

        # Always yield once so concurrent callers overlap like a real request.
        await asyncio.sleep(self.delay_seconds)

        body = json.dumps(self._load_payload()).encode("utf-8")
        return TransportResponse(status_code=self.status_code, body=body)
