"""
Category tree contracts.

Defines the shapes exchanged with the Catalog Service categories query:
- CategoryRecord / CategoryPage / CategoryTreeResponse: wire data (validated)
- NavigableNode: the menu tree handed to the rendering layer

The wire models are deliberately lenient: malformed fields degrade to
defaults instead of failing validation, so a partially broken payload still
produces a menu.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        return None
    return str(value)


def _as_int(value: Any, default: Optional[int]) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_records(value: Any) -> List[Any]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, (dict, CategoryRecord))]


# Tree levels kept (roots are level 1); deeper children are dropped before validation.
MAX_CATEGORY_DEPTH = 64


def prune_records(value: Any, max_depth: int = MAX_CATEGORY_DEPTH) -> List[Any]:
    """
    Copy raw category records, cutting ``children`` below ``max_depth`` levels.

    Walks the tree with an explicit stack so an arbitrarily deep payload loses
    only its deepest levels instead of failing validation as a whole.
    """
    roots: List[Any] = []
    stack = [(_as_records(value), roots, 1)]
    truncated = False

    while stack:
        records, target, depth = stack.pop()
        for record in records:
            if isinstance(record, CategoryRecord):
                target.append(record)
                continue
            copied = dict(record)
            children = _as_records(copied.get("children"))
            copied["children"] = []
            if children:
                if depth >= max_depth:
                    truncated = True
                else:
                    stack.append((children, copied["children"], depth + 1))
            target.append(copied)

    if truncated:
        logger.warning("Category tree deeper than %d levels; deeper children dropped", max_depth)
    return roots


# ---------------------------------------------------------------------------
# Wire models
# ---------------------------------------------------------------------------

class CategoryRecord(BaseModel):
    """One category node as returned by the categories query."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    uid: Optional[str] = None
    name: Optional[str] = None
    url_path: Optional[str] = None
    path: Optional[str] = None
    level: Optional[int] = None
    position: int = 0
    children_count: Optional[int] = None
    children: List["CategoryRecord"] = Field(default_factory=list)

    @field_validator("id", "uid", "name", "url_path", "path", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return _as_text(value)

    @field_validator("position", mode="before")
    @classmethod
    def _coerce_position(cls, value: Any) -> int:
        return _as_int(value, 0)

    @field_validator("level", "children_count", mode="before")
    @classmethod
    def _coerce_optional_int(cls, value: Any) -> Optional[int]:
        return _as_int(value, None)

    @field_validator("children", mode="before")
    @classmethod
    def _coerce_children(cls, value: Any) -> List[Any]:
        return _as_records(value)


class PageInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    current_page: Optional[int] = None
    page_size: Optional[int] = None
    total_pages: Optional[int] = None


class CategoryPage(BaseModel):
    """Root-level categories plus pagination metadata (passed through)."""

    model_config = ConfigDict(extra="ignore")

    items: List[CategoryRecord] = Field(default_factory=list)
    total_count: Optional[int] = None
    page_info: Optional[PageInfo] = None

    @field_validator("items", mode="before")
    @classmethod
    def _coerce_items(cls, value: Any) -> List[Any]:
        return prune_records(value)

    @field_validator("total_count", mode="before")
    @classmethod
    def _coerce_total(cls, value: Any) -> Optional[int]:
        return _as_int(value, None)

    @field_validator("page_info", mode="before")
    @classmethod
    def _coerce_page_info(cls, value: Any) -> Any:
        return value if isinstance(value, (dict, PageInfo)) else None


class CategoryTreeResponse(BaseModel):
    """Top-level payload of the categories query.

    Extra keys are kept so a payload without the usual ``categories`` wrapper
    is still carried through unchanged.
    """

    model_config = ConfigDict(extra="allow")

    categories: Optional[CategoryPage] = None

    @field_validator("categories", mode="before")
    @classmethod
    def _coerce_categories(cls, value: Any) -> Any:
        return value if isinstance(value, (dict, CategoryPage)) else None

    @property
    def root_items(self) -> List[CategoryRecord]:
        if self.categories is None:
            return []
        return self.categories.items


# ---------------------------------------------------------------------------
# Built menu
# ---------------------------------------------------------------------------

@dataclass
class NavigableNode:
    href: str
    label: str
    identifier: Optional[str] = None
    children: List["NavigableNode"] = field(default_factory=list)

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "href": self.href,
            "label": self.label,
            "identifier": self.identifier,
            "children": [child.to_dict() for child in self.children],
        }
