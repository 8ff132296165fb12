"""FIFO buffers and a self-scaling pool of buffers."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Deque, Optional

_WAIT_TIMEOUT = 0.01


class BufferClosedError(Exception):
    """Raised when a closed buffer is used."""

    def __init__(self, message: str = "closed buffer") -> None:
        super().__init__(message)


class PoolClosedError(Exception):
    """Raised when a closed buffer pool is used."""

    def __init__(self, message: str = "closed buffer pool") -> None:
        super().__init__(message)


class Buffer:
    """A bounded FIFO buffer whose put and get never block.

    ``None`` stands for "nothing available", so it cannot be told apart
    from an empty buffer when stored.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"illegal size for buffer: {size}")
        self._size = size
        self._data: Deque[Any] = deque()
        self._lock = threading.Lock()
        self._closed = False

    def cap(self) -> int:
        """Return the capacity of the buffer."""
        return self._size

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def put(self, datum: Any) -> bool:
        """Store a datum; return False if the buffer is full."""
        with self._lock:
            if self._closed:
                raise BufferClosedError()
            if len(self._data) >= self._size:
                return False
            self._data.append(datum)
            return True

    def get(self) -> Any:
        """Take the oldest datum, or return None if the buffer is empty.

        Data left in a closed buffer can still be drained; once it is empty
        a BufferClosedError is raised.
        """
        with self._lock:
            if self._data:
                return self._data.popleft()
            if self._closed:
                raise BufferClosedError()
            return None

    def close(self) -> bool:
        """Close the buffer; return False if it was already closed."""
        with self._lock:
            if self._closed:
                return False
            self._closed = True
            return True

    def closed(self) -> bool:
        """Tell whether the buffer has been closed."""
        return self._closed


class Pool:
    """A pool of equally sized buffers whose put and get block.

    The pool starts with one buffer and grows up to ``max_buffer_number``
    buffers when puts keep failing; idle empty buffers are retired again
    when gets keep failing.
    """

    def __init__(self, buffer_cap: int, max_buffer_number: int) -> None:
        if buffer_cap <= 0:
            raise ValueError(f"illegal buffer cap for buffer pool: {buffer_cap}")
        if max_buffer_number <= 0:
            raise ValueError(
                f"illegal max buffer number for buffer pool: {max_buffer_number}"
            )
        self._buffer_cap = buffer_cap
        self._max_buffer_number = max_buffer_number
        self._buffers: Deque[Buffer] = deque([Buffer(buffer_cap)])
        self._buffer_number = 1
        self._total = 0
        self._closed = False
        self._cond = threading.Condition()

    def buffer_cap(self) -> int:
        """Return the capacity shared by every buffer in the pool."""
        return self._buffer_cap

    def max_buffer_number(self) -> int:
        """Return the largest number of buffers the pool may hold."""
        return self._max_buffer_number

    def buffer_number(self) -> int:
        """Return the current number of buffers."""
        with self._cond:
            return self._buffer_number

    def total(self) -> int:
        """Return the number of data held in the pool."""
        with self._cond:
            return self._total

    def closed(self) -> bool:
        """Tell whether the pool has been closed."""
        return self._closed

    def close(self) -> bool:
        """Close the pool and its buffers; return False if already closed."""
        with self._cond:
            if self._closed:
                return False
            self._closed = True
            for buf in self._buffers:
                buf.close()
            self._buffers.clear()
            self._cond.notify_all()
            return True

    def put(self, datum: Any) -> None:
        """Store a datum, blocking while the pool is full."""
        if self._closed:
            raise PoolClosedError()
        attempts = 0
        max_attempts = self.buffer_number() * 5
        while True:
            buf = self._acquire_buffer()
            placed = False
            try:
                placed = buf.put(datum)
                if placed:
                    self._adjust_total(1)
                else:
                    attempts += 1
                    if attempts >= max_attempts and self._can_grow():
                        placed = self._grow(datum)
                        attempts = 0
            finally:
                self._settle(buf, exhausted=False)
            if placed:
                return
            if attempts >= max_attempts:
                self._wait_for_change()

    def get(self) -> Any:
        """Take a datum, blocking while the pool is empty."""
        if self._closed:
            raise PoolClosedError()
        attempts = 0
        max_attempts = self.buffer_number() * 10
        while True:
            buf = self._acquire_buffer()
            try:
                datum = buf.get()
            except BufferClosedError:
                self._settle(buf, exhausted=False)
                raise
            if datum is not None:
                self._adjust_total(-1)
            else:
                attempts += 1
            if self._settle(buf, exhausted=attempts >= max_attempts):
                attempts = 0
                continue
            if datum is not None:
                return datum
            if attempts >= max_attempts:
                self._wait_for_change()

    def _acquire_buffer(self) -> Buffer:
        with self._cond:
            while not self._buffers:
                if self._closed:
                    raise PoolClosedError()
                self._cond.wait(_WAIT_TIMEOUT)
            return self._buffers.popleft()

    def _settle(self, buf: Buffer, exhausted: bool) -> bool:
        """Return a buffer to the pool, or retire it; True if retired."""
        with self._cond:
            if exhausted and len(buf) == 0 and self._buffer_number > 1:
                buf.close()
                self._buffer_number -= 1
                return True
            if self._closed:
                self._buffer_number -= 1
                raise PoolClosedError()
            self._buffers.append(buf)
            self._cond.notify_all()
            return False

    def _adjust_total(self, delta: int) -> None:
        with self._cond:
            self._total += delta
            self._cond.notify_all()

    def _can_grow(self) -> bool:
        with self._cond:
            return self._buffer_number < self._max_buffer_number

    def _grow(self, datum: Any) -> bool:
        with self._cond:
            if self._closed or self._buffer_number >= self._max_buffer_number:
                return False
            new_buf = Buffer(self._buffer_cap)
            new_buf.put(datum)
            self._buffers.append(new_buf)
            self._buffer_number += 1
            self._total += 1
            self._cond.notify_all()
            return True

    def _wait_for_change(self) -> None:
        with self._cond:
            if not self._closed:
                self._cond.wait(_WAIT_TIMEOUT)


def _is_none(value: Optional[Any]) -> bool:
    return value is None