"""Suppression of asyncio's "exception was never retrieved" diagnostics."""

from __future__ import annotations
from typing import TypeVar, Awaitable
import asyncio

T = TypeVar("T")


def allow_reject(awaitable: Awaitable[T]) -> asyncio.Future[T]:
    """
    Mark an operation's eventual exception as retrieved.

    Use this for operations that may fail after every consumer has
    stopped waiting for them (a timed-out source, an abandoned wait).
    Outcomes are unchanged: awaiting the returned future, once or many
    times, still yields the value or raises the exception.

    Args:
        awaitable: A future or coroutine. Futures and tasks are returned
                   as the same object; coroutines are scheduled as tasks.

    Returns:
        The future with an observing done-callback attached.
    """
    future = asyncio.ensure_future(awaitable)
    future.add_done_callback(_retrieve_exception)
    return future


def _retrieve_exception(future: asyncio.Future) -> None:
    if not future.cancelled():
        future.exception()
