"""Mod registry: closed set of mod names mapped to their handlers."""

from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from .base import ModHandler
from .debug import debug_node_under_cursor
from .delete import delete_closest_tag, delete_function
from .move import move_left, move_right
from .point_free import call_nearest_expression, point_free_to_anon


class ModName(str, Enum):
    """Names of the available mods, as used on the wire."""

    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    POINT_FREE_TO_ANON = "point_free_to_anon"
    CALL_NEAREST_EXPRESSION = "call_nearest_expression"
    DELETE_FUNCTION = "delete_function"
    DELETE_CLOSEST_TAG = "delete_closest_tag"
    DEBUG_NODE_UNDER_CURSOR = "debug_node_under_cursor"


class ModRegistry:
    """Read-only mapping from ModName to handler.

    Built once at import time; every ModName must have exactly one handler.
    """

    def __init__(self, handlers: Dict[ModName, ModHandler]):
        missing = [name.value for name in ModName if name not in handlers]
        if missing:
            raise ValueError(f"Mods without a handler: {', '.join(missing)}")
        self._handlers: Mapping[ModName, ModHandler] = MappingProxyType(
            {name: handlers[name] for name in ModName}
        )

    def names(self) -> List[str]:
        return [name.value for name in self._handlers]

    def get(self, name: str) -> Optional[ModHandler]:
        try:
            return self._handlers[ModName(name)]
        except ValueError:
            return None

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def __len__(self) -> int:
        return len(self._handlers)


REGISTRY = ModRegistry(
    {
        ModName.MOVE_LEFT: move_left,
        ModName.MOVE_RIGHT: move_right,
        ModName.POINT_FREE_TO_ANON: point_free_to_anon,
        ModName.CALL_NEAREST_EXPRESSION: call_nearest_expression,
        ModName.DELETE_FUNCTION: delete_function,
        ModName.DELETE_CLOSEST_TAG: delete_closest_tag,
        ModName.DEBUG_NODE_UNDER_CURSOR: debug_node_under_cursor,
    }
)
