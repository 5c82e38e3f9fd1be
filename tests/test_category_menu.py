"""Tests for building the navigable category menu."""

import pytest

from commerce_menu.integrations.contracts.categories import (
    MAX_CATEGORY_DEPTH,
    CategoryRecord,
    CategoryTreeResponse,
    prune_records,
)
from commerce_menu.menu.category_menu import (
    UNNAMED_CATEGORY_LABEL,
    CategoryMenuBuilder,
    build_category_menu,
    build_category_url,
    load_category_menu,
    menu_to_dicts,
)
from commerce_menu.utils.root_link import make_root_link

from tests.conftest import SAMPLE_TREE, FakeTransport


def _tree(*items):
    return {"categories": {"items": list(items)}}


def test_siblings_sorted_by_position_with_stable_ties():
    menu = build_category_menu(_tree({"name": "X", "position": 2}, {"name": "Y"}, {"name": "Z", "position": 2}))

    assert [node.label for node in menu] == ["Y", "X", "Z"]


def test_nested_children_are_sorted():
    menu = build_category_menu(SAMPLE_TREE)

    assert [node.label for node in menu] == ["Gear", "Men"]
    assert [child.label for child in menu[0].children] == ["Bags", "Fitness"]


def test_missing_url_path_falls_back_to_hash():
    resolved = []

    def root_link(path):
        resolved.append(path)
        return path

    assert build_category_url(CategoryRecord(name="No link"), root_link) == "#"
    assert build_category_url(CategoryRecord(url_path=""), root_link) == "#"
    assert resolved == []


def test_relative_url_path_gets_category_prefix():
    assert build_category_url(CategoryRecord(url_path="shoes")) == "/categories/shoes"


def test_absolute_url_path_is_passed_through():
    assert build_category_url(CategoryRecord(url_path="/already/absolute")) == "/already/absolute"


def test_paths_are_resolved_through_root_link():
    menu = build_category_menu(_tree({"name": "Shoes", "url_path": "shoes"}), root_link=make_root_link("/en-us/"))

    assert menu[0].href == "/en-us/categories/shoes"


def test_custom_prefix():
    builder = CategoryMenuBuilder(prefix="/c/")

    assert builder.build(_tree({"url_path": "shoes"}))[0].href == "/c/shoes"


@pytest.mark.parametrize("tree", [_tree(), None, {}, {"categories": None}, "garbage"])
def test_empty_input_builds_nothing(tree):
    assert build_category_menu(tree) is None


def test_fallback_label_and_identifier():
    menu = build_category_menu(_tree({"uid": "MTI="}, {"id": "4", "uid": "NA==", "name": "Bags"}, {"position": 5}))

    assert menu[0].label == UNNAMED_CATEGORY_LABEL
    assert menu[0].identifier == "MTI="
    assert menu[1].identifier == "4"
    assert menu[2].identifier is None
    assert menu[2].href == "#"


def test_leaf_nodes_have_empty_children():
    menu = build_category_menu(_tree({"name": "Leaf", "children": None}, {"name": "Leaf 2", "children": []}))

    assert all(node.children == [] for node in menu)
    assert not menu[0].has_children


def test_build_accepts_parsed_tree_and_is_fresh_each_call():
    tree = CategoryTreeResponse.model_validate(SAMPLE_TREE)

    first = build_category_menu(tree)
    second = build_category_menu(tree)

    assert first == second
    assert first[0] is not second[0]


def test_menu_to_dicts():
    menu = build_category_menu(_tree({"id": "1", "name": "Shoes", "url_path": "shoes"}))

    assert menu_to_dicts(menu) == [
        {"href": "/categories/shoes", "label": "Shoes", "identifier": "1", "children": []}
    ]
    assert menu_to_dicts(None) is None


@pytest.mark.asyncio
async def test_load_category_menu_builds_from_fetched_tree(make_service, transport):
    menu = await load_category_menu(make_service(transport))

    assert [node.label for node in menu] == ["Gear", "Men"]


@pytest.mark.asyncio
async def test_load_category_menu_returns_none_on_failure(make_service):
    service = make_service(FakeTransport(responses=[(200, {"errors": [{"message": "boom"}]})]))

    assert await load_category_menu(service) is None


def _chain(depth):
    leaf = {"name": f"Level {depth}", "url_path": f"l{depth}"}
    for level in range(depth - 1, 0, -1):
        leaf = {"name": f"Level {level}", "url_path": f"l{level}", "children": [leaf]}
    return _tree(leaf)


def _depth(nodes):
    depth = 0
    while nodes:
        depth += 1
        nodes = nodes[0].children
    return depth


def test_very_deep_tree_keeps_top_levels():
    menu = build_category_menu(_chain(300))

    assert menu is not None
    assert menu[0].label == "Level 1"
    assert _depth(menu) == MAX_CATEGORY_DEPTH


def test_tree_at_depth_limit_is_kept_whole():
    menu = build_category_menu(_chain(MAX_CATEGORY_DEPTH))

    assert _depth(menu) == MAX_CATEGORY_DEPTH


def test_pruning_preserves_sibling_order():
    records = prune_records(
        [{"name": "A", "children": [{"name": "A1"}, {"name": "A2", "children": [{"name": "A2a"}]}]}, {"name": "B"}],
        max_depth=2,
    )

    assert [record["name"] for record in records] == ["A", "B"]
    assert [child["name"] for child in records[0]["children"]] == ["A1", "A2"]
    assert records[0]["children"][1]["children"] == []
