"""modflow settings and logging setup."""

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .parser import JAVASCRIPT, normalize_variant

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_REQUEST_TIMEOUT = 30.0

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    log_file: Optional[Path]
    log_level: str
    default_language: str
    request_timeout: float


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"${name} must be a number, got {value!r}") from None


def resolve_settings(
    log_file: Optional[str] = None,
    log_level: Optional[str] = None,
    language: Optional[str] = None,
    request_timeout: Optional[float] = None,
) -> Settings:
    """Resolve settings from CLI options, environment, then defaults.

    Resolution order for each setting:
    1. Explicit argument (CLI flag)
    2. Environment variable ($MODFLOW_LOG_FILE, $MODFLOW_LOG_LEVEL,
       $MODFLOW_LANGUAGE, $MODFLOW_REQUEST_TIMEOUT)
    3. Default (log to stderr at WARNING, javascript, 30s)

    Reads fresh from the environment each time.
    """
    log_file = log_file or os.environ.get("MODFLOW_LOG_FILE") or None
    log_level = (log_level or os.environ.get("MODFLOW_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    language = language or os.environ.get("MODFLOW_LANGUAGE") or JAVASCRIPT
    if request_timeout is None:
        request_timeout = _env_float("MODFLOW_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)

    return Settings(
        log_file=Path(log_file) if log_file else None,
        log_level=log_level,
        default_language=normalize_variant(language),
        request_timeout=request_timeout,
    )


def configure_logging(settings: Settings) -> logging.Handler:
    """Attach a handler to the ``modflow`` logger.

    Logs go to the configured file, or to stderr; stdout carries protocol
    output and is never used for logs.
    """
    if settings.log_file:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(settings.log_file)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("modflow")
    level = logging.getLevelName(settings.log_level)
    logger.setLevel(level if isinstance(level, int) else logging.WARNING)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()
    logger.addHandler(handler)
    return handler
