"""
Category menu: turns the fetched category tree into navigable nodes for the
header renderer.
"""

from .category_menu import (
    UNNAMED_CATEGORY_LABEL,
    CategoryMenuBuilder,
    build_category_menu,
    build_category_url,
    load_category_menu,
    menu_to_dicts,
)

__all__ = [
    "UNNAMED_CATEGORY_LABEL",
    "CategoryMenuBuilder",
    "build_category_menu",
    "build_category_url",
    "load_category_menu",
    "menu_to_dicts",
]
