"""Pytest fixtures and fake collaborators for the category menu tests."""

import asyncio
import json
from typing import Any, Dict, List, Mapping, Optional, Tuple

import pytest

from commerce_menu.integrations.clients.catalog_service import CatalogServiceClient
from commerce_menu.integrations.contracts.interfaces import (
    CommerceConfigProvider,
    Transport,
    TransportResponse,
)
from commerce_menu.integrations.policy.category_service import CategoryService


SAMPLE_TREE = {
    "categories": {
        "total_count": 2,
        "items": [
            {"id": "11", "uid": "MTE=", "name": "Men", "url_path": "men", "position": 2, "children": []},
            {
                "id": "3",
                "uid": "Mw==",
                "name": "Gear",
                "url_path": "gear",
                "position": 1,
                "children": [
                    {"id": "5", "name": "Fitness", "url_path": "gear/fitness", "position": 2},
                    {"id": "4", "name": "Bags", "url_path": "gear/bags", "position": 1},
                ],
            },
        ],
        "page_info": {"current_page": 1, "page_size": 100, "total_pages": 1},
    }
}


class FakeConfigProvider(CommerceConfigProvider):
    def __init__(self, endpoint: str = "https://commerce.example.com/graphql", headers: Optional[Dict[str, Dict[str, str]]] = None):
        self.endpoint = endpoint
        self.headers = headers if headers is not None else {"cs": {"Magento-Store-Code": "main", "x-api-key": "k1"}}
        self.header_requests: List[str] = []

    def get_endpoint_url(self) -> str:
        return self.endpoint

    def get_headers(self, scope: str) -> Dict[str, str]:
        self.header_requests.append(scope)
        return dict(self.headers.get(scope, {}))


class FakeTransport(Transport):
    """Replays queued (status, payload) responses; optionally blocks until released."""

    def __init__(self, responses: Optional[List[Tuple[int, Any]]] = None, gated: bool = False):
        self.responses = list(responses or [(200, {"data": SAMPLE_TREE})])
        self.calls: List[Dict[str, Any]] = []
        self.gated = gated
        self._gate: Optional[asyncio.Event] = None

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def _event(self) -> asyncio.Event:
        if self._gate is None:
            self._gate = asyncio.Event()
        return self._gate

    def release(self) -> None:
        self._event().set()

    async def get(self, url: str, params: Mapping[str, str], headers: Mapping[str, str]) -> TransportResponse:
        self.calls.append({"url": url, "params": dict(params), "headers": dict(headers)})
        if self.gated:
            await self._event().wait()
        else:
            await asyncio.sleep(0)
        status_code, payload = self.responses[0] if len(self.responses) == 1 else self.responses.pop(0)
        body = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")
        return TransportResponse(status_code=status_code, body=body)


async def settle(rounds: int = 5) -> None:
    """Let scheduled tasks run up to their next suspension point."""
    for _ in range(rounds):
        await asyncio.sleep(0)


@pytest.fixture
def config_provider():
    return FakeConfigProvider()


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def gated_transport():
    return FakeTransport(gated=True)


@pytest.fixture
def make_service(config_provider):
    def _make(transport: Transport) -> CategoryService:
        return CategoryService(CatalogServiceClient(config_provider, transport))

    return _make
