"""Tests for the mod registry."""

import pytest

from modflow.engine import list_mods
from modflow.mods import REGISTRY, ModName, ModRegistry
from modflow.mods.move import move_left


def test_registry_names_in_declaration_order():
    assert REGISTRY.names() == [
        "move_left",
        "move_right",
        "point_free_to_anon",
        "call_nearest_expression",
        "delete_function",
        "delete_closest_tag",
        "debug_node_under_cursor",
    ]
    assert len(REGISTRY) == len(ModName)


def test_registry_lookup():
    assert REGISTRY.get("move_left") is move_left
    assert "delete_function" in REGISTRY
    assert REGISTRY.get("rename_symbol") is None
    assert "rename_symbol" not in REGISTRY


def test_registry_requires_every_handler():
    with pytest.raises(ValueError, match="move_right"):
        ModRegistry({ModName.MOVE_LEFT: move_left})


def test_list_mods_is_stable():
    assert list_mods() == list_mods()
    assert list_mods().mods == REGISTRY.names()
