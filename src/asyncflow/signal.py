"""
Synchronous event notification.

A Signal keeps an ordered list of callbacks and calls each of them with
the arguments passed to ``emit``. Registering returns a SignalSlot whose
``remove`` unregisters the callback.
"""

from __future__ import annotations
from typing import Any, Callable


class SignalSlot:
    """Registration handle returned by ``Signal.add``."""

    def __init__(self, signal: Signal, callback: Callable[..., Any]):
        self._signal: Signal | None = signal
        self.callback = callback

    @property
    def active(self) -> bool:
        return self._signal is not None

    def remove(self) -> None:
        """Unregister the callback. Safe to call more than once."""
        if self._signal is None:
            return
        self._signal._discard(self)
        self._signal = None


class Signal:
    """
    Event source delivering argument tuples to registered callbacks.

    Callbacks run synchronously inside ``emit`` in registration order.
    A snapshot of the slots is taken first, so callbacks may remove
    themselves (or others) while the signal is firing; a slot removed
    mid-emit is skipped if it has not been reached yet. Exceptions
    raised by a callback propagate to the caller of ``emit``.

    Example:
        changed = Signal()
        slot = changed.add(lambda key, value: print(key, value))
        changed.emit("size", 3)
        slot.remove()
    """

    def __init__(self) -> None:
        self._slots: list[SignalSlot] = []

    def add(self, callback: Callable[..., Any]) -> SignalSlot:
        slot = SignalSlot(self, callback)
        self._slots.append(slot)
        return slot

    def emit(self, *args: Any) -> None:
        for slot in list(self._slots):
            if slot.active:
                slot.callback(*args)

    def clear(self) -> None:
        for slot in list(self._slots):
            slot.remove()

    def _discard(self, slot: SignalSlot) -> None:
        self._slots.remove(slot)

    def __len__(self) -> int:
        return len(self._slots)
