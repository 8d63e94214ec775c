"""
Asyncflow: async control-flow combinators for asyncio.

Provides serial and parallel iteration, timeout racing, and waiting on
signal-driven conditions. "Parallel" means interleaved on one event
loop; nothing here uses threads or processes.

Usage:
    from asyncflow import parallel_map, with_strict_timeout, until_true

    # Concurrent map, results in input order
    pages = await parallel_map(urls, lambda url, i, urls: fetch(url))

    # Fail if the source takes longer than 5 seconds
    value = await with_strict_timeout(5, fetch(url), "fetch timed out")

    # Resolve once the condition holds, rechecked on every firing
    await until_true(changed, lambda: cache.ready)
"""

from .iteration import (
    serial_for_each,
    serial_map,
    serial_filter,
    parallel_for_each,
    parallel_map,
    parallel_filter,
    StepFunc,
)
from .timeout import with_strict_timeout, with_timeout, StrictTimeoutError
from .waiting import until_true, until_signal
from .reject import allow_reject
from .signal import Signal, SignalSlot
from .deferred import Deferred

__version__ = "0.1.0"
__all__ = [
    # Iteration
    "serial_for_each",
    "serial_map",
    "serial_filter",
    "parallel_for_each",
    "parallel_map",
    "parallel_filter",
    "StepFunc",
    # Timeouts
    "with_strict_timeout",
    "with_timeout",
    "StrictTimeoutError",
    # Condition waiting
    "until_true",
    "until_signal",
    "allow_reject",
    # Collaborators
    "Signal",
    "SignalSlot",
    "Deferred",
]
