"""Tests for the in-memory byte buffers."""

from __future__ import annotations

import array

import pytest

from quic_varint.buffer import Buf, BufMut, ByteCursor, ByteSink
from quic_varint.types import InsufficientSpaceError, UnexpectedEndError


class TestByteCursor:
    """Tests for the read cursor."""

    def test_satisfies_protocol(self) -> None:
        assert isinstance(ByteCursor(b""), Buf)

    def test_reads_advance_position(self) -> None:
        cursor = ByteCursor(b"\x01\x02\x03\x04")
        assert cursor.get_u8() == 1
        assert cursor.copy_to_slice(2) == b"\x02\x03"
        assert cursor.position == 3
        assert cursor.remaining() == 1
        assert cursor.has_remaining()

    def test_starts_at_offset(self) -> None:
        cursor = ByteCursor(b"abc", offset=2)
        assert cursor.remaining() == 1
        assert cursor.get_u8() == ord("c")
        assert not cursor.has_remaining()

    def test_offset_counts_bytes_of_wide_items(self) -> None:
        """A view of 2-byte items is addressed by byte, not by item."""
        view = memoryview(array.array("H", [1, 2]))
        cursor = ByteCursor(view, offset=3)
        assert cursor.remaining() == 1
        with pytest.raises(ValueError, match="outside buffer of 4 bytes"):
            ByteCursor(view, offset=5)

    @pytest.mark.parametrize("offset", [-1, 4])
    def test_invalid_offset(self, offset: int) -> None:
        with pytest.raises(ValueError, match="outside buffer"):
            ByteCursor(b"abc", offset=offset)

    def test_get_u8_past_end(self) -> None:
        cursor = ByteCursor(b"")
        with pytest.raises(UnexpectedEndError) as exc_info:
            cursor.get_u8()
        assert exc_info.value.needed == 1
        assert exc_info.value.remaining == 0

    def test_copy_past_end_consumes_nothing(self) -> None:
        cursor = ByteCursor(b"\x01\x02")
        with pytest.raises(UnexpectedEndError, match="needed 3 bytes, 2 remaining"):
            cursor.copy_to_slice(3)
        assert cursor.position == 0

    def test_does_not_copy_underlying_data(self) -> None:
        """The cursor reads through a view, so later changes are visible."""
        data = bytearray(b"\x00\x00")
        cursor = ByteCursor(data)
        data[1] = 0xFF
        cursor.get_u8()
        assert cursor.get_u8() == 0xFF

    def test_repr(self) -> None:
        assert repr(ByteCursor(b"abc", 1)) == "ByteCursor(position=1, remaining=2)"


class TestByteSink:
    """Tests for the bounded write sink."""

    def test_satisfies_protocol(self) -> None:
        assert isinstance(ByteSink(0), BufMut)

    def test_writes_track_capacity(self) -> None:
        sink = ByteSink(4)
        sink.put_u8(0xAB)
        sink.put_slice(b"\x01\x02")
        assert sink.data == b"\xab\x01\x02"
        assert len(sink) == 3
        assert sink.remaining_mut() == 1
        assert sink.capacity == 4

    def test_overflowing_write_is_rejected_whole(self) -> None:
        sink = ByteSink(2)
        sink.put_u8(1)
        with pytest.raises(InsufficientSpaceError) as exc_info:
            sink.put_slice(b"\x02\x03")
        assert exc_info.value.required == 2
        assert exc_info.value.available == 1
        assert sink.data == b"\x01"

    def test_zero_capacity(self) -> None:
        with pytest.raises(InsufficientSpaceError):
            ByteSink(0).put_u8(0)

    def test_negative_capacity(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            ByteSink(-1)

    def test_repr(self) -> None:
        sink = ByteSink(8)
        sink.put_u8(0)
        assert repr(sink) == "ByteSink(written=1, capacity=8)"
