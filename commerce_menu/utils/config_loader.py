"""
Commerce configuration loader (endpoint, scoped headers, link settings).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from commerce_menu.integrations.contracts.interfaces import CommerceConfigProvider

logger = logging.getLogger(__name__)


class CommerceConfig(BaseModel):
    endpoint: str
    headers: Dict[str, Dict[str, str]] = Field(default_factory=dict)
    root_path: str = "/"
    category_path_prefix: str = "/categories"
    timeout_seconds: float = Field(default=20.0, gt=0.0, le=120.0)


def load_commerce_config(config_path: Optional[Path] = None) -> CommerceConfig:
    """
    Load and validate the commerce configuration from a YAML file

    COMMERCE_ENDPOINT and COMMERCE_ROOT_PATH (environment or .env) override
    the file values.

    Args:
        config_path: Path to config file. Defaults to config/commerce_config.yml

    Returns:
        Validated CommerceConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(__file__).parent.parent.parent / "config" / "commerce_config.yml"

    if not config_path.exists():
        raise FileNotFoundError(f"Commerce config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if os.getenv("COMMERCE_ENDPOINT"):
        data["endpoint"] = os.environ["COMMERCE_ENDPOINT"]
    if os.getenv("COMMERCE_ROOT_PATH"):
        data["root_path"] = os.environ["COMMERCE_ROOT_PATH"]

    try:
        cfg = CommerceConfig(**data)
        logger.info("Successfully loaded commerce config from %s", config_path)
        return cfg
    except ValidationError as e:
        logger.error("Commerce config validation failed: %s", e)
        raise


class StaticConfigProvider(CommerceConfigProvider):
    """Config provider backed by a loaded CommerceConfig."""

    def __init__(self, config: CommerceConfig) -> None:
        self.config = config

    def get_endpoint_url(self) -> str:
        return self.config.endpoint

    def get_headers(self, scope: str) -> Dict[str, str]:
        return dict(self.config.headers.get(scope, {}))
