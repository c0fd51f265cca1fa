"""Mod handlers and the registry that names them."""

from .registry import REGISTRY, ModName, ModRegistry

__all__ = ["REGISTRY", "ModName", "ModRegistry"]
