"""modflow: cursor-anchored syntax tree mods for JavaScript and TypeScript."""

from .client import ModFlowClient, RequestCorrelator
from .engine import apply_mod, choose_and_apply, list_mods
from .errors import ModFlowError, NoMatchError

__all__ = [
    "__version__",
    "ModFlowClient",
    "ModFlowError",
    "NoMatchError",
    "RequestCorrelator",
    "apply_mod",
    "choose_and_apply",
    "list_mods",
]

__version__ = "0.1.0"
