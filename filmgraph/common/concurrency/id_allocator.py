# filmgraph/common/concurrency/id_allocator.py
from __future__ import annotations

import threading
from typing import Optional


class IdentityAllocator:
    """
    Hands out strictly increasing integer ids, one sequence per instance.

    Ids are never reused. There is no release(); a future delete operation
    simply leaves a gap.
    """

    def __init__(self, start: int = 1, name: str = "ids") -> None:
        if start < 0:
            raise ValueError("start must be >= 0")
        self._name = name
        self._next = int(start)
        self._last: Optional[int] = None
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    def next_id(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            self._last = value
            return value

    def peek(self) -> int:
        """The id the next call to next_id() will return."""
        with self._lock:
            return self._next

    @property
    def last(self) -> Optional[int]:
        """Most recently issued id, or None if nothing was issued yet."""
        with self._lock:
            return self._last

    def __repr__(self) -> str:
        return f"IdentityAllocator(name={self._name!r}, next={self.peek()})"
