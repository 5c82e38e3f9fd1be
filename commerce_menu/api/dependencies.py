"""
Dependency wiring for the API.

Mock vs real transport is selected here and nowhere else:
INTEGRATIONS_MODE=real uses httpx against the configured endpoint, anything
else serves the local mock payload.
"""

import hmac
import logging
import os
from typing import Optional

from dotenv import load_dotenv
from fastapi import Header, HTTPException, Request, status

from commerce_menu.integrations.clients.catalog_service import CatalogServiceClient
from commerce_menu.integrations.clients.mocks.local_categories import LocalCategoryTransport
from commerce_menu.integrations.clients.real_http.httpx_transport import HttpxTransport
from commerce_menu.integrations.policy.category_service import CategoryService
from commerce_menu.menu.category_menu import CategoryMenuBuilder
from commerce_menu.utils.config_loader import CommerceConfig, StaticConfigProvider, load_commerce_config
from commerce_menu.utils.root_link import make_root_link

load_dotenv()

logger = logging.getLogger(__name__)

_ALLOWLIST_PATHS = {
    "/",
    "/health",
    "/docs",
    "/docs/oauth2-redirect",
    "/openapi.json",
    "/redoc",
}

_config: Optional[CommerceConfig] = None
_category_service: Optional[CategoryService] = None
_menu_builder: Optional[CategoryMenuBuilder] = None


def get_api_keys():
    keys = os.getenv("API_KEYS", "")
    return [k.strip() for k in keys.split(",") if k.strip()]


def is_known_key(candidate: str) -> bool:
    return bool(candidate) and any(hmac.compare_digest(candidate, key) for key in get_api_keys())


async def api_key_protection(
    request: Request,
    x_api_key: Optional[str] = Header(default=None, alias="X-API-KEY"),
):
    """Guard the category endpoints; docs and health checks stay public."""
    if request.url.path in _ALLOWLIST_PATHS:
        return

    if not is_known_key((x_api_key or "").strip()):
        logger.warning(
            "Rejected category menu request: %s %s (X-API-KEY %s)",
            request.method,
            request.url.path,
            "unknown" if x_api_key else "missing",
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing API Key",
        )


def _use_real_integrations() -> bool:
    return os.getenv("INTEGRATIONS_MODE", "").strip().lower() == "real"


def get_config() -> CommerceConfig:
    global _config
    if _config is None:
        _config = load_commerce_config()
    return _config


def get_category_service() -> CategoryService:
    """Return the process-wide CategoryService (one cache per process)."""
    global _category_service
    if _category_service is None:
        config = get_config()
        if _use_real_integrations():
            transport = HttpxTransport(timeout_seconds=config.timeout_seconds)
            logger.info("Using real catalog service at %s", config.endpoint)
        else:
            transport = LocalCategoryTransport()
            logger.info("Using local mock catalog service")
        client = CatalogServiceClient(StaticConfigProvider(config), transport)
        _category_service = CategoryService(client)
    return _category_service


def get_menu_builder() -> CategoryMenuBuilder:
    global _menu_builder
    if _menu_builder is None:
        config = get_config()
        _menu_builder = CategoryMenuBuilder(
            root_link=make_root_link(config.root_path),
            prefix=config.category_path_prefix,
        )
    return _menu_builder


def _reset_all() -> None:
    """Reset all singletons (for tests)."""
    global _config, _category_service, _menu_builder
    _config = None
    _category_service = None
    _menu_builder = None
