"""Client side of the NDJSON protocol.

``RequestCorrelator`` owns the request bookkeeping: id allocation and the
table of callbacks waiting for a response. Each entry is removed exactly
once, when its response arrives, when it is cancelled, or when it expires.
"""

import json
import logging
import time
from dataclasses import dataclass
from typing import IO, Any, Callable, Dict, List, Optional

from .config import Settings, resolve_settings

logger = logging.getLogger(__name__)

Callback = Callable[[Dict[str, Any]], None]


@dataclass
class PendingRequest:
    method: str
    callback: Callback
    deadline: Optional[float] = None


class RequestCorrelator:
    """Matches responses to the callbacks of the requests that caused them."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._next_id = 0
        self._pending: Dict[int, PendingRequest] = {}

    @property
    def pending(self) -> int:
        return len(self._pending)

    def register(
        self, method: str, callback: Callback, timeout: Optional[float] = None
    ) -> int:
        """Allocate a request id and remember its callback."""
        self._next_id += 1
        deadline = self._clock() + timeout if timeout is not None else None
        self._pending[self._next_id] = PendingRequest(method, callback, deadline)
        return self._next_id

    def resolve(self, request_id: int, result: Dict[str, Any]) -> bool:
        """Deliver a response. Unknown or already settled ids are ignored."""
        entry = self._pending.pop(request_id, None)
        if entry is None:
            logger.warning("Dropping response for unknown request %s", request_id)
            return False
        entry.callback(result)
        return True

    def cancel(self, request_id: int) -> bool:
        return self._pending.pop(request_id, None) is not None

    def evict_expired(self, now: Optional[float] = None) -> List[int]:
        """Forget requests past their deadline; returns the evicted ids."""
        now = self._clock() if now is None else now
        expired = [
            request_id
            for request_id, entry in self._pending.items()
            if entry.deadline is not None and entry.deadline <= now
        ]
        for request_id in expired:
            entry = self._pending.pop(request_id)
            logger.warning("Request %s (%s) timed out", request_id, entry.method)
        return expired


class ModFlowClient:
    """Writes requests to a server stream and dispatches its responses.

    Every request gets ``settings.request_timeout`` seconds to be answered.
    Expired requests are evicted whenever a request is sent or a response
    line is fed.
    """

    def __init__(
        self,
        writer: IO[str],
        correlator: Optional[RequestCorrelator] = None,
        settings: Optional[Settings] = None,
    ):
        self.writer = writer
        self.correlator = correlator or RequestCorrelator()
        self.timeout = (settings or resolve_settings()).request_timeout

    def request(
        self, method: str, params: Optional[Dict[str, Any]], callback: Callback
    ) -> int:
        self.correlator.evict_expired()
        request_id = self.correlator.register(method, callback, self.timeout)
        message = {"id": request_id, "method": method, "params": params or {}}
        self.writer.write(json.dumps(message) + "\n")
        self.writer.flush()
        return request_id

    def feed(self, line: str) -> bool:
        """Handle one response line from the server."""
        self.correlator.evict_expired()
        line = line.strip()
        if not line:
            return False
        response = json.loads(line)
        request_id = response.get("id")
        if request_id is None:
            logger.warning("Server error without request id: %s", response.get("result"))
            return False
        return self.correlator.resolve(request_id, response.get("result", {}))
