"""
Waiting for a condition driven by a Signal.

Both helpers register their listener when called, not when awaited, so
firings between the call and the first await are not missed. They
return futures, which any number of consumers may await.
"""

from __future__ import annotations
from typing import Any, Awaitable, Callable
import asyncio
import logging

from .deferred import Deferred
from .reject import allow_reject
from .signal import Signal

logger = logging.getLogger(__name__)


def until_true(
    signal: Signal,
    predicate: Callable[[], Any],
    guard: Awaitable[Any] | None = None,
) -> asyncio.Future[None]:
    """
    Resolve once predicate() is true.

    The predicate is checked immediately and again every time signal
    fires. If it is already true, an already-resolved future is returned
    and no listener is registered.

    Args:
        signal: When this fires, the predicate is reevaluated.
        predicate: Zero-argument check; firing arguments are ignored.
        guard: If this fails first, stop listening and fail with its
               exception.
    """
    if predicate():
        future: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        future.set_result(None)
        return future

    return until_signal(signal, lambda *args: predicate(), guard)


def until_signal(
    signal: Signal,
    predicate: Callable[..., Any],
    guard: Awaitable[Any] | None = None,
) -> asyncio.Future[None]:
    """
    Resolve on the first firing of signal for which predicate(*args) is true.

    Settles exactly once. On the first qualifying firing, guard failure,
    or predicate exception, the listener is removed before the future is
    settled, so later firings have no effect. Cancelling the returned
    future also removes the listener. Work behind the guard is never
    cancelled.

    Example:
        ready = until_signal(status_changed, lambda name, up: name == "db" and up)
        await with_strict_timeout(5, ready, "db did not come up")
    """
    deferred: Deferred[None] = Deferred()

    def on_fire(*args: Any) -> None:
        if deferred.done:
            return
        try:
            matched = predicate(*args)
        except Exception as e:
            slot.remove()
            deferred.reject(e)
            return
        if matched:
            slot.remove()
            logger.debug("Condition met on %r", signal)
            deferred.resolve()

    slot = signal.add(on_fire)
    logger.debug("Listening on %r", signal)

    guard_future: asyncio.Future[Any] | None = None

    def on_guard(fut: asyncio.Future[Any]) -> None:
        if fut.cancelled():
            if not deferred.done:
                slot.remove()
                deferred.future.cancel()
            return
        error = fut.exception()
        if error is None or deferred.done:
            return
        slot.remove()
        logger.debug("Guard failed while listening on %r: %r", signal, error)
        deferred.reject(error)

    if guard is not None:
        guard_future = allow_reject(guard)
        guard_future.add_done_callback(on_guard)

    def release(_: asyncio.Future[None]) -> None:
        slot.remove()
        if guard_future is not None:
            guard_future.remove_done_callback(on_guard)

    deferred.future.add_done_callback(release)
    return allow_reject(deferred.future)
