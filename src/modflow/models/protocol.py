"""Request/response envelopes for the NDJSON stdio protocol."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from .positions import Anchor, NodeDescriptor, Position


class RequestParams(BaseModel):
    source: str = ""
    language: str | None = None
    node_info: NodeDescriptor | None = None
    cursor: Position | None = None

    def anchor(self) -> Anchor | None:
        """The captured node if there is one, else the bare cursor."""
        if self.node_info is not None:
            return self.node_info
        return self.cursor


class Request(BaseModel):
    id: int | None = None
    method: str
    params: RequestParams = Field(default_factory=RequestParams)

    @field_validator("params", mode="before")
    @classmethod
    def _null_params(cls, value: Any) -> Any:
        return {} if value is None else value


class Response(BaseModel):
    id: int | None = None
    result: Dict[str, Any]


__all__ = ["Request", "RequestParams", "Response"]
