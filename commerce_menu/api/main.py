"""
FastAPI application - category menu service
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from datetime import datetime
from typing import Any, Dict

from fastapi import APIRouter, Depends, FastAPI, status
from fastapi.responses import JSONResponse

from commerce_menu.api.dependencies import api_key_protection, get_category_service, get_menu_builder
from commerce_menu.error_handler import ErrorHandler
from commerce_menu.integrations.policy.category_service import CategoryService
from commerce_menu.integrations.policy.response_wrappers import CategoryFetchError
from commerce_menu.menu.category_menu import CategoryMenuBuilder, load_category_menu, menu_to_dicts

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Commerce Category Menu API",
    description="Cached Catalog Service category tree and navigation menu",
    version="1.0.0",
    dependencies=[Depends(api_key_protection)],
)

error_handler = ErrorHandler()

categories_router = APIRouter(prefix="/api/v1/categories", tags=["Categories"])


@categories_router.get("")
async def get_categories(service: CategoryService = Depends(get_category_service)):
    """Raw category tree (served from cache after the first call)."""
    try:
        tree = await service.fetch()
    except CategoryFetchError as exc:
        payload = error_handler.handle_exception(exc, context={"endpoint": "categories"})
        return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content=payload)
    return tree.model_dump(mode="json")


@categories_router.get("/menu")
async def get_category_menu(
    service: CategoryService = Depends(get_category_service),
    builder: CategoryMenuBuilder = Depends(get_menu_builder),
) -> Dict[str, Any]:
    """Navigable menu; ``menu`` is null when there is nothing to render."""
    nodes = await load_category_menu(service, builder)
    return {"menu": menu_to_dicts(nodes)}


@categories_router.post("/cache/invalidate")
async def invalidate_categories(service: CategoryService = Depends(get_category_service)) -> Dict[str, str]:
    service.invalidate()
    return {"status": "invalidated"}


app.include_router(categories_router)


@app.get("/", tags=["Health"])
async def root():
    return {"service": "Commerce Category Menu API", "status": "healthy", "version": "1.0.0", "timestamp": datetime.now().isoformat()}


@app.get("/health", tags=["Health"])
async def health_check(service: CategoryService = Depends(get_category_service)):
    """Health check including the category cache state."""
    return {"status": "healthy", "category_cache": service.state.status.value, "timestamp": datetime.now().isoformat()}
