"""
core/config.py

Shared dataclasses: SearchResult, Settings.
"""
from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """One search hit; position is the 1-based rank within its response."""
    title: str
    link: str
    snippet: str
    position: int

    def to_dict(self) -> dict:
        return asdict(self)


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name, "")
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid integer for %s=%r, using %d", name, raw, default)
        return default
    if value < minimum:
        logger.warning("%s=%d is below %d, using %d", name, value, minimum, default)
        return default
    return value


@dataclass
class Settings:
    """Process configuration, read from the environment at startup."""
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    search_requests_per_minute: int = 30
    fetch_requests_per_minute: int = 20
    request_timeout: int = 30
    search_max_retries: int = 5
    fetch_max_retries: int = 3

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            host                       = os.getenv("HOST", "0.0.0.0"),
            port                       = _env_int("PORT", 3000),
            log_level                  = os.getenv("LOG_LEVEL", "INFO").upper(),
            search_requests_per_minute = _env_int("SEARCH_RATE_LIMIT", 30),
            fetch_requests_per_minute  = _env_int("FETCH_RATE_LIMIT", 20),
            request_timeout            = _env_int("REQUEST_TIMEOUT", 30),
            search_max_retries         = _env_int("SEARCH_MAX_RETRIES", 5),
            fetch_max_retries          = _env_int("FETCH_MAX_RETRIES", 3),
        )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(levelname)s [%(name)s] %(message)s",
    )
