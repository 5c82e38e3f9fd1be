import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping


# Resolves an internal path against the site root (locale/store prefix).
RootLinkResolver = Callable[[str], str]


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

@dataclass
class TransportResponse:
    status_code: int
    body: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        return json.loads(self.body.decode("utf-8"))


# ---------------------------------------------------------------------------
# Abstract collaborator interfaces
# ---------------------------------------------------------------------------

class CommerceConfigProvider(ABC):
    """Supplies the query endpoint and the per-scope request headers."""

    @abstractmethod
    def get_endpoint_url(self) -> str:
        """Return the base GraphQL endpoint URL."""

    @abstractmethod
    def get_headers(self, scope: str) -> Dict[str, str]:
        """Return auth/context headers for a named scope (e.g. ``cs``)."""


class Transport(ABC):
    """HTTP-style GET capability used by the catalog client."""

    @abstractmethod
    async def get(
        self,
        url: str,
        params: Mapping[str, str],
        headers: Mapping[str, str],
    ) -> TransportResponse:
        """Perform a GET and return status and raw body."""
