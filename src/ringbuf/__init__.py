"""Fixed-capacity ring buffer with drop-oldest writes."""

from ringbuf.errors import IndexOutOfRangeError, InvalidCapacityError, RingBufferError
from ringbuf.ring_buffer import RingBuffer

__version__ = "0.1.0"

__all__ = [
    "IndexOutOfRangeError",
    "InvalidCapacityError",
    "RingBuffer",
    "RingBufferError",
]
