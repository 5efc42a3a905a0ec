"""
core/retry.py

Bounded retry loop over tagged attempt outcomes.

Every attempt ends as one of:
  SUCCESS  : usable data, return it immediately
  EMPTY    : request worked but produced nothing, log and retry
  FAILURE  : timeout / HTTP error / transport or unexpected error, log and retry

Exhausting the attempts returns None; the loop itself never raises.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, Optional, TypeVar

import httpx

from .context import CallContext

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AttemptStatus(enum.Enum):
    SUCCESS = "success"
    EMPTY = "empty"
    FAILURE = "failure"


@dataclass(frozen=True)
class AttemptOutcome(Generic[T]):
    status: AttemptStatus
    value: Optional[T] = None
    error: str = ""

    @classmethod
    def success(cls, value: T) -> "AttemptOutcome[T]":
        return cls(AttemptStatus.SUCCESS, value=value)

    @classmethod
    def empty(cls, reason: str = "no data") -> "AttemptOutcome[T]":
        return cls(AttemptStatus.EMPTY, error=reason)

    @classmethod
    def failure(cls, error: str) -> "AttemptOutcome[T]":
        return cls(AttemptStatus.FAILURE, error=error)


def describe_error(exc: BaseException) -> str:
    """Map an exception raised by an attempt to a short log message."""
    if isinstance(exc, httpx.TimeoutException):
        return "request timed out"
    if isinstance(exc, httpx.HTTPStatusError):
        return f"HTTP error {exc.response.status_code}: {exc}"
    if isinstance(exc, httpx.RequestError):
        return f"request error: {exc}"
    return f"unexpected error: {exc!r}"


async def run_with_retries(
    attempt: Callable[[], Awaitable[AttemptOutcome[T]]],
    max_retries: int,
    ctx: CallContext,
    label: str,
) -> Optional[T]:
    """Run *attempt* up to *max_retries* times, returning the first success."""
    for n in range(1, max_retries + 1):
        try:
            outcome = await attempt()
        except Exception as exc:
            logger.debug("%s attempt %d raised", label, n, exc_info=True)
            outcome = AttemptOutcome.failure(describe_error(exc))

        if outcome.status is AttemptStatus.SUCCESS:
            return outcome.value

        if outcome.status is AttemptStatus.EMPTY:
            await ctx.info(f"{label}: attempt {n}/{max_retries} returned {outcome.error}")
        else:
            await ctx.error(f"{label}: attempt {n}/{max_retries} failed: {outcome.error}")

    await ctx.error(f"{label}: giving up after {max_retries} attempts")
    return None
