"""Result models returned by mods and the engine."""

from __future__ import annotations

from typing import List, Union

from pydantic import BaseModel

from .positions import Position, Range


class ModSuccess(BaseModel):
    """Successful mod: replace ``original_range`` with ``mod``."""

    mod: str
    original_range: Range
    original_source: str
    source: str | None = None  # full text after the edit
    cursor: Position | None = None
    clipboard: str | None = None


class ModFailure(BaseModel):
    """Failed mod, or a diagnostic delivered through the error channel."""

    code: str
    message: str

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ListModsResult(BaseModel):
    mods: List[str]


ModResult = Union[ModSuccess, ModFailure]


__all__ = ["ListModsResult", "ModFailure", "ModResult", "ModSuccess"]
