"""Tests helpers de l'éditeur de propriétés — chemins imbriqués + listes."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from page_editor.core.props import add_array_item, remove_array_item, set_prop_path, update_array_item


def test_set_top_level_prop():
    assert set_prop_path({"title": "a"}, ["title"], "b") == {"title": "b"}


def test_set_nested_creates_missing_key():
    props = {"hours": {"monday": "9-18"}}
    partial = set_prop_path(props, ["hours", "sunday"], "Closed")
    assert partial == {"hours": {"monday": "9-18", "sunday": "Closed"}}
    assert props == {"hours": {"monday": "9-18"}}


def test_set_creates_intermediate_dicts():
    assert set_prop_path({}, ["social", "links", "x"], "#") == {"social": {"links": {"x": "#"}}}


def test_set_in_list_item():
    props = {"features": [{"title": "a"}, {"title": "b"}]}
    partial = set_prop_path(props, ["features", 1, "title"], "B")
    assert partial["features"] == [{"title": "a"}, {"title": "B"}]
    assert props["features"][1]["title"] == "b"


def test_set_list_index_out_of_range():
    with pytest.raises(IndexError):
        set_prop_path({"features": []}, ["features", 0, "title"], "x")


def test_empty_path():
    with pytest.raises(ValueError):
        set_prop_path({}, [], 1)


def test_add_array_item():
    props = {"images": [{"src": "a.jpg"}]}
    item = {"src": "b.jpg"}
    partial = add_array_item(props, "images", item)
    assert partial == {"images": [{"src": "a.jpg"}, {"src": "b.jpg"}]}
    assert partial["images"][1] is not item
    assert len(props["images"]) == 1


def test_add_to_missing_array():
    assert add_array_item({}, "images", {"src": "a.jpg"}) == {"images": [{"src": "a.jpg"}]}


def test_remove_array_item():
    props = {"members": [{"name": "a"}, {"name": "b"}, {"name": "c"}]}
    assert remove_array_item(props, "members", 1) == {"members": [{"name": "a"}, {"name": "c"}]}
    assert len(props["members"]) == 3


def test_update_array_item():
    props = {"products": [{"name": "a"}, {"name": "b"}]}
    assert update_array_item(props, "products", 0, {"name": "z"}) == {"products": [{"name": "z"}, {"name": "b"}]}


def test_update_array_item_out_of_range_is_unchanged():
    props = {"products": [{"name": "a"}]}
    assert update_array_item(props, "products", 5, {"name": "z"}) == {"products": [{"name": "a"}]}
