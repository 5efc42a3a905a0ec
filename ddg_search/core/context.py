"""
core/context.py

Per-call log sink handed to the searcher and fetcher.

Anything with async ``info`` and ``error`` methods satisfies CallContext;
LoggingContext forwards to the stdlib logger with a short call id.
"""
from __future__ import annotations

import logging
import uuid
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class CallContext(Protocol):
    async def info(self, message: str) -> None: ...

    async def error(self, message: str) -> None: ...


class LoggingContext:
    def __init__(self, call_id: Optional[str] = None, log: logging.Logger = logger) -> None:
        self.call_id = call_id or uuid.uuid4().hex[:8]
        self._log = log

    async def info(self, message: str) -> None:
        self._log.info("[%s] %s", self.call_id, message)

    async def error(self, message: str) -> None:
        self._log.error("[%s] %s", self.call_id, message)
