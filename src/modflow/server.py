"""NDJSON request loop: one JSON request per line in, one response per line out.

Request:  {"id": 1, "method": "move_left",
           "params": {"source": "...", "language": "typescript",
                      "node_info": {...} | "cursor": {"line": 0, "column": 4}}}
Response: {"id": 1, "result": {...}}

``list_mods`` takes no params and answers {"mods": [...]}. Every other
method name is looked up in the mod registry.
"""

import json
import logging
from typing import IO, Any, Dict, Optional

from pydantic import ValidationError

from .config import Settings, resolve_settings
from .engine import apply_mod, list_mods
from .errors import BAD_REQUEST, NoMatchError
from .models import ModFailure, Request, Response

logger = logging.getLogger(__name__)

LIST_MODS = "list_mods"


class ModFlowServer:
    """Dispatches protocol requests to the engine."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or resolve_settings()

    def handle(self, request: Request) -> Response:
        if request.method == LIST_MODS:
            return Response(id=request.id, result=list_mods().model_dump())

        params = request.params
        anchor = params.anchor()
        if anchor is None:
            failure = NoMatchError("syntax node").to_failure()
            return Response(id=request.id, result=failure.model_dump())

        language = params.language or self.settings.default_language
        result = apply_mod(request.method, params.source, language, anchor)
        return Response(id=request.id, result=result.model_dump(exclude_none=True))

    def handle_line(self, line: str) -> Optional[str]:
        """Handle one raw request line; returns the response line, if any."""
        line = line.strip()
        if not line:
            return None

        request_id = None
        try:
            data: Dict[str, Any] = json.loads(line)
            if isinstance(data, dict) and isinstance(data.get("id"), int):
                request_id = data["id"]
            request = Request.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning("Rejected request: %s", e)
            failure = ModFailure(code=BAD_REQUEST, message=str(e))
            response = Response(id=request_id, result=failure.model_dump())
            return response.model_dump_json()

        return self.handle(request).model_dump_json()

    def serve(self, stdin: IO[str], stdout: IO[str]) -> None:
        """Answer requests from ``stdin`` until EOF."""
        logger.info("modflow server started")
        for line in stdin:
            response = self.handle_line(line)
            if response is None:
                continue
            stdout.write(response + "\n")
            stdout.flush()
        logger.info("modflow server stopped")
