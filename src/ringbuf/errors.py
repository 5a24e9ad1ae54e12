"""Exceptions raised by ring buffer operations."""


class RingBufferError(Exception):
    """Base class for ring buffer misuse."""


class InvalidCapacityError(RingBufferError, ValueError):
    """Raised when a buffer is constructed with capacity < 1."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        super().__init__(f"ring buffer capacity must be greater than 0, got {capacity}")


class IndexOutOfRangeError(RingBufferError, IndexError):
    """Raised when a logical index does not address an occupied slot."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        if length == 0:
            message = f"index {index} out of range: buffer is empty"
        else:
            message = f"index {index} out of range for length {length}"
        super().__init__(message)
