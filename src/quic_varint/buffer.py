"""
Byte-buffer abstraction consumed by the varint codec.

The codec never owns the bytes it reads or writes. It talks to two small
interfaces instead:

- `Buf`: a read cursor that knows how many bytes are left.
- `BufMut`: a write sink that knows how much capacity is left.

Any object with the right methods works. `ByteCursor` and `ByteSink` are the
in-memory implementations used by the byte-string helpers and the CLI.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from quic_varint.types.exceptions import InsufficientSpaceError, UnexpectedEndError


@runtime_checkable
class Buf(Protocol):
    """A read cursor over a contiguous byte sequence."""

    def remaining(self) -> int:
        """Number of bytes left to read."""
        ...

    def has_remaining(self) -> bool:
        """Whether at least one byte is left to read."""
        ...

    def get_u8(self) -> int:
        """Consume and return one byte."""
        ...

    def copy_to_slice(self, n: int) -> bytes:
        """Consume and return the next `n` bytes."""
        ...


@runtime_checkable
class BufMut(Protocol):
    """A bounded write sink."""

    def remaining_mut(self) -> int:
        """Number of bytes that can still be written."""
        ...

    def put_u8(self, value: int) -> None:
        """Append one byte."""
        ...

    def put_slice(self, data: bytes) -> None:
        """Append a run of bytes."""
        ...


class ByteCursor:
    """
    Read cursor over an in-memory byte sequence.

    The underlying data is never copied or mutated. Only the position moves.
    """

    __slots__ = ("_data", "_pos")

    def __init__(self, data: bytes | bytearray | memoryview, offset: int = 0) -> None:
        # View the data as raw bytes, whatever its item format.
        self._data = memoryview(data).cast("B")
        if not 0 <= offset <= len(self._data):
            raise ValueError(f"offset {offset} outside buffer of {len(self._data)} bytes")
        self._pos = offset

    @property
    def position(self) -> int:
        """Absolute offset of the next byte to read."""
        return self._pos

    def remaining(self) -> int:
        return len(self._data) - self._pos

    def has_remaining(self) -> bool:
        return self._pos < len(self._data)

    def get_u8(self) -> int:
        """
        Consume and return one byte.

        Raises:
            UnexpectedEndError: If the cursor is exhausted.
        """
        if not self.has_remaining():
            raise UnexpectedEndError(needed=1, remaining=0, offset=self._pos)
        value = self._data[self._pos]
        self._pos += 1
        return value

    def copy_to_slice(self, n: int) -> bytes:
        """
        Consume and return the next `n` bytes.

        Raises:
            UnexpectedEndError: If fewer than `n` bytes remain. Nothing is consumed.
        """
        if n > self.remaining():
            raise UnexpectedEndError(needed=n, remaining=self.remaining(), offset=self._pos)
        chunk = bytes(self._data[self._pos : self._pos + n])
        self._pos += n
        return chunk

    def __repr__(self) -> str:
        return f"ByteCursor(position={self._pos}, remaining={self.remaining()})"


class ByteSink:
    """
    Write sink with a fixed capacity.

    A write that would exceed the capacity fails before touching the buffer.
    """

    __slots__ = ("_buf", "_capacity")

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._buf = bytearray()
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        """Total number of bytes this sink accepts."""
        return self._capacity

    @property
    def data(self) -> bytes:
        """Bytes written so far."""
        return bytes(self._buf)

    def remaining_mut(self) -> int:
        return self._capacity - len(self._buf)

    def put_u8(self, value: int) -> None:
        self.put_slice(bytes((value,)))

    def put_slice(self, data: bytes) -> None:
        """
        Append a run of bytes.

        Raises:
            InsufficientSpaceError: If `data` does not fit. Nothing is written.
        """
        if len(data) > self.remaining_mut():
            raise InsufficientSpaceError(required=len(data), available=self.remaining_mut())
        self._buf += data

    def __len__(self) -> int:
        return len(self._buf)

    def __repr__(self) -> str:
        return f"ByteSink(written={len(self._buf)}, capacity={self._capacity})"
