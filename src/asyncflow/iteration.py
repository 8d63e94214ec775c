"""
Serial and parallel iteration with async step functions.

Every step is called as ``step(item, index, items)``. Steps that only
need the item can ignore the other two arguments.

Serial variants await each step before starting the next and stop at the
first failure. Parallel variants start every step before awaiting any of
them and return results in input order, whatever order they finish in.
"""

from __future__ import annotations
from typing import TypeVar, Callable, Awaitable, Sequence
import asyncio

T = TypeVar("T")
U = TypeVar("U")

StepFunc = Callable[[T, int, Sequence[T]], Awaitable[U]]


async def serial_for_each(items: Sequence[T], step: StepFunc[T, object]) -> None:
    """
    Run step over items one at a time, in order.

    Step i+1 is not called until step i has completed. If a step raises,
    the exception propagates and no later item is visited.
    """
    for i, item in enumerate(items):
        await step(item, i, items)


async def serial_map(items: Sequence[T], step: StepFunc[T, U]) -> list[U]:
    """Collect step results one at a time, in order."""
    result: list[U] = []

    async def collect(item: T, i: int, seq: Sequence[T]) -> None:
        result.append(await step(item, i, seq))

    await serial_for_each(items, collect)
    return result


async def serial_filter(items: Sequence[T], step: StepFunc[T, bool]) -> list[T]:
    """Keep items whose step result is truthy, evaluated one at a time."""
    result: list[T] = []

    async def keep(item: T, i: int, seq: Sequence[T]) -> None:
        if await step(item, i, seq):
            result.append(item)

    await serial_for_each(items, keep)
    return result


async def parallel_for_each(items: Sequence[T], step: StepFunc[T, object]) -> None:
    """
    Run step over all items concurrently and wait for every one.

    All steps are created before any is awaited, and start in index
    order. If any step raises, the first exception observed propagates.
    The remaining steps are not cancelled: they run to completion in the
    background and their results (or exceptions) are dropped. If calling
    step itself raises, nothing is awaited and the steps created so far
    are closed.

    Example:
        async def fetch(url, i, urls):
            pages[url] = await client.get(url)

        await parallel_for_each(urls, fetch)
    """
    pending: list[Awaitable[object]] = []
    try:
        for i, item in enumerate(items):
            pending.append(step(item, i, items))
    except BaseException:
        # A step that raised synchronously; drop the coroutines not yet started.
        for aw in pending:
            if asyncio.iscoroutine(aw):
                aw.close()
        raise
    await asyncio.gather(*pending)


async def parallel_map(items: Sequence[T], step: StepFunc[T, U]) -> list[U]:
    """
    Collect step results concurrently, preserving input order.

    Each step writes into its own slot, so the output lines up with
    items even when later steps finish first.
    """
    result: list[U] = [None] * len(items)  # type: ignore[list-item]

    async def fill(item: T, i: int, seq: Sequence[T]) -> None:
        result[i] = await step(item, i, seq)

    await parallel_for_each(items, fill)
    return result


async def parallel_filter(items: Sequence[T], step: StepFunc[T, bool]) -> list[T]:
    """Keep items whose step result is truthy, evaluated concurrently."""
    table = [False] * len(items)

    async def mark(item: T, i: int, seq: Sequence[T]) -> None:
        table[i] = bool(await step(item, i, seq))

    await parallel_for_each(items, mark)
    return [item for item, keep in zip(items, table) if keep]
