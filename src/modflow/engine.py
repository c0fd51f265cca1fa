"""Engine entry points: apply a mod by name, list the available mods.

Every call parses a fresh tree from the given text and keeps no state
between calls, so calls over different snapshots can run concurrently.
"""

import asyncio
import logging
from typing import Callable, List, Optional

from .errors import INTERNAL_ERROR, ModFlowError, UnknownModError
from .models import Anchor, ListModsResult, ModFailure, ModResult
from .mods import REGISTRY

logger = logging.getLogger(__name__)


def list_mods() -> ListModsResult:
    """Names of all registered mods. Needs no source and no anchor."""
    return ListModsResult(mods=REGISTRY.names())


def apply_mod(name: str, source: str, language: str, anchor: Anchor) -> ModResult:
    """Run the mod ``name`` at ``anchor`` and return its result.

    Mod errors come back as ModFailure with their code. Anything else is a
    bug: it is logged with its traceback and reported as INTERNAL_ERROR.
    """
    handler = REGISTRY.get(name)
    try:
        if handler is None:
            raise UnknownModError(name)
        logger.debug("Applying %s (%s) at %r", name, language, anchor)
        return handler(source, language, anchor)
    except ModFlowError as e:
        logger.debug("Mod %s failed: [%s] %s", name, e.code, e.message)
        return e.to_failure()
    except Exception as e:
        logger.exception("Unexpected error in mod %s", name)
        return ModFailure(code=INTERNAL_ERROR, message=str(e))


async def list_mods_async() -> ListModsResult:
    return await asyncio.to_thread(list_mods)


async def apply_mod_async(
    name: str, source: str, language: str, anchor: Anchor
) -> ModResult:
    """Non-blocking apply_mod: parsing and search run in a worker thread."""
    return await asyncio.to_thread(apply_mod, name, source, language, anchor)


def choose_and_apply(
    source: str,
    language: str,
    anchor: Anchor,
    choose: Callable[[List[str]], Optional[str]],
) -> Optional[ModResult]:
    """List the mods, let ``choose`` pick one, then apply it at ``anchor``.

    The anchor captured before the choice is reused as is, however long the
    choice takes. When ``choose`` returns None the selection was cancelled:
    nothing is applied and None is returned.
    """
    selected = choose(list_mods().mods)
    if selected is None:
        logger.debug("Mod selection cancelled")
        return None
    return apply_mod(selected, source, language, anchor)
