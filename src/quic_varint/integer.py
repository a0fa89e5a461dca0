"""The validated varint value type."""

from __future__ import annotations

from typing_extensions import Self

from quic_varint.buffer import Buf, BufMut, ByteCursor, ByteSink
from quic_varint.types import (
    BaseUint,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
    UnexpectedEndError,
    VarIntDecodeError,
    VarIntOverflowError,
)
from quic_varint.varint import MAX_ENCODED_LENGTH, read, size, write


class VarInt(BaseUint):
    """
    An unsigned integer guaranteed to fit the QUIC varint format.

    Every instance holds a magnitude in [0, 2^62 - 1]. The bound is checked on
    every construction path, so an out-of-range value can never exist.

    Arithmetic follows the strict operand rule of the uint types: `+` and
    comparisons only accept another `VarInt`. Layout arithmetic mixing a
    varint with a plain byte count goes through `add_length`.
    """

    BITS = 62
    OVERFLOW_ERROR = VarIntOverflowError

    @classmethod
    def from_u8(cls, value: int) -> Self:
        """Widen an 8-bit integer. Never fails for a valid uint8."""
        return cls(int(Uint8(value)))

    @classmethod
    def from_u16(cls, value: int) -> Self:
        """Widen a 16-bit integer. Never fails for a valid uint16."""
        return cls(int(Uint16(value)))

    @classmethod
    def from_u32(cls, value: int) -> Self:
        """Widen a 32-bit integer. Never fails for a valid uint32."""
        return cls(int(Uint32(value)))

    @classmethod
    def from_u64(cls, value: int) -> Self:
        """
        Narrow a 64-bit integer.

        Raises:
            VarIntOverflowError: If `value` exceeds 2^62 - 1.
        """
        return cls(value)

    @classmethod
    def from_size(cls, value: int) -> Self:
        """
        Narrow a platform-width length or count.

        Raises:
            VarIntOverflowError: If `value` is negative or exceeds 2^62 - 1.
        """
        return cls(value)

    def size(self) -> int:
        """Minimal number of bytes needed to encode this value."""
        octets = size(int(self))
        # Unreachable by construction.
        assert octets is not None
        return octets

    def to_u64(self) -> Uint64:
        """Widen to a 64-bit integer."""
        return Uint64(int(self))

    def to_size(self) -> int:
        """Extract the magnitude as a plain integer."""
        return int(self)

    def checked_add(self, other: VarInt) -> Self:
        """
        Add two varints.

        Raises:
            TypeError: If `other` is not a VarInt.
            VarIntOverflowError: If the sum exceeds 2^62 - 1.
        """
        return self + other

    def add_length(self, length: int) -> int:
        """
        Add a plain byte count, producing a plain integer.

        Used for buffer layout arithmetic, where the result is a position or a
        length rather than a value that will itself be encoded.
        """
        if isinstance(length, bool) or not isinstance(length, int):
            self._raise_type_error(length, "add_length")
        return int(self) + int(length)

    def encode(self, buf: BufMut) -> None:
        """
        Write this value to a sink.

        Raises:
            InsufficientSpaceError: If the sink is too small.
        """
        write(int(self), buf)

    @classmethod
    def decode(cls, buf: Buf) -> Self:
        """
        Read a value from a cursor.

        Raises:
            UnexpectedEndError: If the cursor ends before the encoding does.
        """
        before = buf.remaining()
        value = read(buf)
        if value is None:
            raise UnexpectedEndError(remaining=before)
        return cls(value)

    def encode_bytes(self) -> bytes:
        """Encode this value as a standalone byte string."""
        sink = ByteSink(MAX_ENCODED_LENGTH)
        self.encode(sink)
        return sink.data

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """
        Decode a byte string holding exactly one varint.

        Raises:
            UnexpectedEndError: If `data` is shorter than the encoding.
            VarIntDecodeError: If bytes remain after the encoding.
        """
        cursor = ByteCursor(data)
        value = cls.decode(cursor)
        if cursor.has_remaining():
            raise VarIntDecodeError(
                f"{cursor.remaining()} trailing bytes after varint",
                offset=cursor.position,
            )
        return value
