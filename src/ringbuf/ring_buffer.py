"""Fixed-capacity circular buffer with drop-oldest writes.

Storage is a pre-allocated numpy array that is never resized. Once the
buffer is full, each push overwrites the oldest element, so memory stays
bounded no matter how much is written.

The buffer is not thread-safe. Callers sharing one across threads must
hold their own lock for the duration of each call.
"""

import logging
import operator
from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

import numpy as np
import numpy.typing as npt

from ringbuf.constants import LOGGER_NAME
from ringbuf.errors import IndexOutOfRangeError, InvalidCapacityError

_log = logging.getLogger(LOGGER_NAME)

T = TypeVar("T")


def _zero_value(dtype: np.dtype) -> Any:
    """Value used to blank a slot: ``None`` for objects, else the dtype's zero."""
    if dtype == np.dtype(object):
        return None
    return np.zeros((), dtype=dtype)[()]


class RingBuffer(Generic[T]):
    """Circular buffer with O(1) push, poll and indexed access.

    ``head`` is the slot of the oldest element and ``tail`` the slot the
    next push writes to. Both are equal when the buffer is empty and when
    it is full, so ``_non_empty`` tells the two apart.
    """

    __slots__ = (
        "_storage",
        "_zero",
        "_head",
        "_tail",
        "_non_empty",
    )

    def __init__(self, capacity: int, dtype: npt.DTypeLike = object) -> None:
        capacity = operator.index(capacity)
        if capacity < 1:
            raise InvalidCapacityError(capacity)
        resolved = np.dtype(dtype)
        self._zero = _zero_value(resolved)
        self._storage: np.ndarray = np.full(capacity, self._zero, dtype=resolved)
        self._head = 0
        self._tail = 0
        self._non_empty = False
        _log.debug("Allocated ring buffer: capacity=%d dtype=%s", capacity, resolved)

    @property
    def capacity(self) -> int:
        return len(self._storage)

    @property
    def dtype(self) -> np.dtype:
        return self._storage.dtype

    def cap(self) -> int:
        """Total number of slots, fixed at construction."""
        return len(self._storage)

    def __len__(self) -> int:
        if not self._non_empty:
            return 0
        n = self._tail - self._head
        if n <= 0:
            n += len(self._storage)
        return n

    def __repr__(self) -> str:
        return f"RingBuffer(capacity={self.capacity}, len={len(self)})"

    def is_empty(self) -> bool:
        return not self._non_empty

    def is_full(self) -> bool:
        return self._non_empty and self._head == self._tail

    def _advance(self, pos: int) -> int:
        pos += 1
        if pos == len(self._storage):
            return 0
        return pos

    def push(self, value: T) -> None:
        """Append *value* as the newest element.

        When the buffer is full the oldest element is overwritten and lost;
        the length stays at capacity.
        """
        self._storage[self._tail] = value
        if self._non_empty:
            if self._tail == self._head:
                self._head = self._advance(self._head)
        else:
            self._non_empty = True
        self._tail = self._advance(self._tail)

    def poll(self) -> tuple[T | None, bool]:
        """Remove and return the oldest element.

        Returns ``(value, True)`` on success and ``(zero, False)`` when the
        buffer is empty, where *zero* is ``None`` for object storage or the
        dtype's zero otherwise. Check the flag rather than the value.
        """
        if not self._non_empty:
            return self._zero, False
        value = self._storage[self._head]
        self._storage[self._head] = self._zero
        self._head = self._advance(self._head)
        if self._head == self._tail:
            self._non_empty = False
        return value, True

    def get(self, index: int) -> T:
        """Return the element at logical *index*; 0 is the oldest."""
        index = operator.index(index)
        length = len(self)
        if index < 0 or index >= length:
            raise IndexOutOfRangeError(index, length)
        pos = self._head + index
        if pos >= len(self._storage):
            pos -= len(self._storage)
        return self._storage[pos]

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def clear(self) -> None:
        """Drop all elements without touching storage.

        Old values stay referenced until overwritten; use :meth:`reset` to
        release them immediately.
        """
        self._head = 0
        self._tail = 0
        self._non_empty = False

    def reset(self) -> None:
        """Drop all elements and blank every slot."""
        self.clear()
        self._storage[:] = self._zero
        _log.debug("Reset ring buffer: capacity=%d", self.capacity)

    def _spans(self, reverse: bool) -> tuple[range, ...]:
        """Physical slot ranges covering the occupied region, in visit order."""
        if not self._non_empty:
            return ()
        head, tail = self._head, self._tail
        if tail > head:
            spans = (range(head, tail),)
        else:
            spans = (range(head, len(self._storage)), range(0, tail))
        if reverse:
            return tuple(span[::-1] for span in reversed(spans))
        return spans

    def _visit(self, visit: Callable[[T], bool], reverse: bool) -> None:
        storage = self._storage
        for span in self._spans(reverse):
            for pos in span:
                if not visit(storage[pos]):
                    return

    def for_each(self, visit: Callable[[T], bool]) -> None:
        """Call *visit* on each element, oldest first.

        Traversal stops the first time *visit* returns a falsy value.
        """
        self._visit(visit, reverse=False)

    def for_each_reversed(self, visit: Callable[[T], bool]) -> None:
        """Call *visit* on each element, newest first.

        Traversal stops the first time *visit* returns a falsy value.
        """
        self._visit(visit, reverse=True)

    def _iterate(self, reverse: bool) -> Iterator[T]:
        storage = self._storage
        for span in self._spans(reverse):
            for pos in span:
                yield storage[pos]

    def iter(self) -> Iterator[T]:
        """Lazily yield elements oldest first.

        Cursor positions are read when iteration starts. Mutating the
        buffer before the iterator is exhausted gives undefined results.
        """
        return self._iterate(reverse=False)

    def iter_reversed(self) -> Iterator[T]:
        """Lazily yield elements newest first. Same caveats as :meth:`iter`."""
        return self._iterate(reverse=True)

    def __iter__(self) -> Iterator[T]:
        return self._iterate(reverse=False)

    def __reversed__(self) -> Iterator[T]:
        return self._iterate(reverse=True)

    def to_array(self) -> np.ndarray:
        """Return the logical contents, oldest first, as a contiguous copy."""
        spans = self._spans(reverse=False)
        if not spans:
            return np.empty(0, dtype=self._storage.dtype)
        if len(spans) == 1:
            span = spans[0]
            return self._storage[span.start : span.stop].copy()
        return np.concatenate(
            [self._storage[self._head :], self._storage[: self._tail]]
        )
