"""Deferred result box settled from outside its construction."""

from __future__ import annotations
from typing import TypeVar, Generic
import asyncio

T = TypeVar("T")


class Deferred(Generic[T]):
    """
    An asyncio future with resolve/reject controls.

    Settles at most once. Like a settled promise, later calls to
    ``resolve`` or ``reject`` are ignored rather than raising
    ``InvalidStateError``.

    Example:
        deferred = Deferred()
        loop.call_later(1, deferred.resolve, "ready")
        value = await deferred.future
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        if loop is None:
            loop = asyncio.get_running_loop()
        self._future: asyncio.Future[T] = loop.create_future()

    @property
    def future(self) -> asyncio.Future[T]:
        return self._future

    @property
    def done(self) -> bool:
        return self._future.done()

    def resolve(self, value: T | None = None) -> None:
        if not self._future.done():
            self._future.set_result(value)  # type: ignore[arg-type]

    def reject(self, error: BaseException) -> None:
        if not self._future.done():
            self._future.set_exception(error)
