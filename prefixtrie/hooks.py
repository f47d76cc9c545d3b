"""Allocation instrumentation.

Every trie reports each object it creates (the trie itself and each node)
to an allocation listener and each object it releases on ``destroy()`` to a
deallocation listener. Listeners can be given per trie, or installed as
process-wide defaults which a trie picks up when it is created.

The process-wide slots are plain module state with no locking; guard them
yourself if tries are created from several threads.
"""

from __future__ import annotations

from typing import Any, Callable

AllocationListener = Callable[[Any], None]

_allocation_listener: AllocationListener | None = None
_deallocation_listener: AllocationListener | None = None


def set_allocation_listener(listener: AllocationListener | None) -> None:
    global _allocation_listener
    _allocation_listener = listener


def set_deallocation_listener(listener: AllocationListener | None) -> None:
    global _deallocation_listener
    _deallocation_listener = listener


def get_allocation_listener() -> AllocationListener | None:
    return _allocation_listener


def get_deallocation_listener() -> AllocationListener | None:
    return _deallocation_listener


class AllocationCounter:
    """Counts listener calls to check that a trie releases what it created.

    Pass ``counter.on_allocate`` / ``counter.on_deallocate`` to a ``Trie``,
    or use the counter as a context manager to install it process-wide::

        with AllocationCounter() as counter:
            trie = Trie()
            trie.add_word("hello")
            trie.destroy()
        assert counter.balanced
    """

    def __init__(self):
        self.allocations = 0
        self.deallocations = 0
        self._previous: tuple[AllocationListener | None, AllocationListener | None] | None = None

    def on_allocate(self, obj: Any) -> None:
        self.allocations += 1

    def on_deallocate(self, obj: Any) -> None:
        self.deallocations += 1

    @property
    def outstanding(self) -> int:
        return self.allocations - self.deallocations

    @property
    def balanced(self) -> bool:
        return self.outstanding == 0

    def __enter__(self) -> AllocationCounter:
        self._previous = (_allocation_listener, _deallocation_listener)
        set_allocation_listener(self.on_allocate)
        set_deallocation_listener(self.on_deallocate)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._previous is not None:
            set_allocation_listener(self._previous[0])
            set_deallocation_listener(self._previous[1])
            self._previous = None

    def __repr__(self) -> str:
        return f"AllocationCounter(allocations={self.allocations}, deallocations={self.deallocations})"
