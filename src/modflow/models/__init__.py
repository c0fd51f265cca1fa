"""Pydantic models for the modflow wire format."""

from .positions import Anchor, NodeDescriptor, Point, Position, Range, anchor_point
from .protocol import Request, RequestParams, Response
from .results import ListModsResult, ModFailure, ModResult, ModSuccess

__all__ = [
    "Anchor",
    "ListModsResult",
    "ModFailure",
    "ModResult",
    "ModSuccess",
    "NodeDescriptor",
    "Point",
    "Position",
    "Range",
    "Request",
    "RequestParams",
    "Response",
    "anchor_point",
]
