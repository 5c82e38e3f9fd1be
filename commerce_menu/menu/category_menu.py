"""
Build the navigable category menu from the category tree.

Pure transformation: no I/O and no caching. Malformed or missing fields fall
back to placeholders (``#`` href, "Unnamed Category" label, no children)
instead of raising.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import ValidationError

from commerce_menu.integrations.contracts.categories import (
    CategoryRecord,
    CategoryTreeResponse,
    NavigableNode,
)
from commerce_menu.integrations.contracts.interfaces import RootLinkResolver
from commerce_menu.integrations.policy.category_service import CategoryService
from commerce_menu.integrations.policy.response_wrappers import CategoryFetchError

logger = logging.getLogger(__name__)

UNNAMED_CATEGORY_LABEL = "Unnamed Category"
UNRESOLVED_HREF = "#"
DEFAULT_CATEGORY_PREFIX = "/categories"

TreeInput = Union[CategoryTreeResponse, dict, None]


def _identity(path: str) -> str:
    return path


def build_category_url(
    record: CategoryRecord,
    root_link: RootLinkResolver = _identity,
    prefix: str = DEFAULT_CATEGORY_PREFIX,
) -> str:
    """Resolve a category href; relative url paths live under ``prefix``."""
    if not record.url_path:
        return UNRESOLVED_HREF
    if record.url_path.startswith("/"):
        path = record.url_path
    else:
        path = f"{prefix.rstrip('/')}/{record.url_path}"
    return root_link(path)


def sort_by_position(records: Iterable[CategoryRecord]) -> List[CategoryRecord]:
    # sorted() is stable, so equal positions keep their input order.
    return sorted(records, key=lambda record: record.position or 0)


def _as_tree(tree: TreeInput) -> Optional[CategoryTreeResponse]:
    if tree is None:
        return None
    if isinstance(tree, CategoryTreeResponse):
        return tree
    if not isinstance(tree, dict):
        logger.warning("Ignoring category tree of type %s", type(tree).__name__)
        return None
    try:
        return CategoryTreeResponse.model_validate(tree)
    except ValidationError as exc:
        logger.warning("Ignoring malformed category tree: %s", exc)
        return None


class CategoryMenuBuilder:
    def __init__(
        self,
        root_link: RootLinkResolver = _identity,
        prefix: str = DEFAULT_CATEGORY_PREFIX,
    ) -> None:
        self.root_link = root_link
        self.prefix = prefix

    def build(self, tree: TreeInput) -> Optional[List[NavigableNode]]:
        """
        Build the ordered menu tree.

        Returns:
            Root-level nodes, or None when the tree has no root categories
        """
        parsed = _as_tree(tree)
        if parsed is None or not parsed.root_items:
            return None
        return self._build_nodes(parsed.root_items)

    def _build_nodes(self, records: Iterable[CategoryRecord]) -> List[NavigableNode]:
        return [self._build_node(record) for record in sort_by_position(records)]

    def _build_node(self, record: CategoryRecord) -> NavigableNode:
        return NavigableNode(
            href=build_category_url(record, self.root_link, self.prefix),
            label=record.name or UNNAMED_CATEGORY_LABEL,
            identifier=record.id or record.uid,
            children=self._build_nodes(record.children) if record.children else [],
        )


def build_category_menu(
    tree: TreeInput,
    root_link: RootLinkResolver = _identity,
    prefix: str = DEFAULT_CATEGORY_PREFIX,
) -> Optional[List[NavigableNode]]:
    return CategoryMenuBuilder(root_link=root_link, prefix=prefix).build(tree)


async def load_category_menu(
    service: CategoryService,
    builder: Optional[CategoryMenuBuilder] = None,
) -> Optional[List[NavigableNode]]:
    """Fetch and build the menu; a failed fetch means no menu."""
    builder = builder or CategoryMenuBuilder()
    try:
        tree = await service.fetch()
    except CategoryFetchError as exc:
        logger.error("Failed to load category menu: %s", exc)
        return None
    return builder.build(tree)


def menu_to_dicts(nodes: Optional[List[NavigableNode]]) -> Optional[List[Dict[str, Any]]]:
    if nodes is None:
        return None
    return [node.to_dict() for node in nodes]
