"""
Racing an awaitable against a deadline.

Neither helper cancels the source. When the deadline wins, the source
keeps running in the background and a later failure of it is marked as
retrieved so asyncio does not report it.
"""

from __future__ import annotations
from typing import TypeVar, Awaitable
import asyncio
import logging

from .reject import allow_reject

T = TypeVar("T")

logger = logging.getLogger(__name__)


class StrictTimeoutError(TimeoutError):
    """Raised by with_strict_timeout when the deadline passes first."""


async def _race(timeout: float, awaitable: Awaitable[T]) -> asyncio.Future[T] | None:
    if timeout < 0:
        raise ValueError(f"timeout must be non-negative, got {timeout}")
    source = allow_reject(awaitable)
    done, _ = await asyncio.wait({source}, timeout=timeout)
    return source if done else None


async def with_strict_timeout(timeout: float, awaitable: Awaitable[T], message: str) -> T:
    """
    Return the source's value, or raise if the deadline passes first.

    Args:
        timeout: Deadline in seconds, on the running loop's clock.
        awaitable: Source operation. A failure before the deadline
                   propagates unchanged.
        message: Message of the StrictTimeoutError raised on timeout.

    Raises:
        StrictTimeoutError: The source did not settle in time.
    """
    source = await _race(timeout, awaitable)
    if source is None:
        logger.debug("Strict timeout after %ss: %s", timeout, message)
        raise StrictTimeoutError(message)
    return source.result()


async def with_timeout(timeout: float, awaitable: Awaitable[T]) -> tuple[bool, T | None]:
    """
    Race the source against a deadline without failing on timeout.

    Returns:
        ``(False, value)`` if the source resolved first, ``(True, None)``
        if the deadline passed first. A source failure before the
        deadline is raised, not folded into the tuple.
    """
    source = await _race(timeout, awaitable)
    if source is None:
        return True, None
    return False, source.result()
