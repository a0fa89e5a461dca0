"""
QUIC variable-length integer encoding and decoding.

WHAT IS A QUIC VARINT?
----------------------
QUIC frames carry many integers: stream identifiers, offsets, lengths, error
codes. Most are small, a few are huge. The varint format spends 1 byte on the
small ones and up to 8 bytes on the big ones.

Unlike LEB128, the length is not discovered byte by byte. The two most
significant bits of the first byte (the tag) state the total length up front::

    [T T|D D D D D D] [D D D D D D D D] ...
     ^-^-- Tag: 00 = 1 byte, 01 = 2, 10 = 4, 11 = 8
         ^---------^-- High-order data bits

A decoder therefore knows after one byte exactly how much more to read.


LENGTH CLASSES
--------------
::

    +------+--------+-------------+-----------------------------------------+
    | Tag  | Length | Usable Bits | Range                                   |
    +------+--------+-------------+-----------------------------------------+
    | 00   | 1      | 6           | 0 - 63                                  |
    | 01   | 2      | 14          | 64 - 16383                              |
    | 10   | 4      | 30          | 16384 - 1073741823                      |
    | 11   | 8      | 62          | 1073741824 - 4611686018427387903        |
    +------+--------+-------------+-----------------------------------------+

Values of 2^62 and above cannot be represented at all.


ENCODING EXAMPLE: VALUE 15293
-----------------------------
Step 1: Pick the class
    64 <= 15293 <= 16383, so 2 bytes, tag 01.

Step 2: Write as a big-endian 16-bit integer
    15293 = 0x3BBD

Step 3: OR the tag into the top two bits
    0x3BBD | (0b01 << 14) = 0x7BBD

Result: [0x7B, 0xBD]

The value's own top two bits are always zero because it fits in the class's
usable bits, so the tag never clobbers data.


DECODING EXAMPLE: BYTES [0x7B, 0xBD]
------------------------------------
Step 1: Read the first byte (0x7B = 0b01111011)
    Tag = 0b01, so the encoding is 2 bytes long.
    Low 6 bits = 0b111011 (0x3B)

Step 2: Read 1 more byte (0xBD)

Step 3: Combine as big-endian
    0x3BBD = 15293


FAILURE MODES
-------------
Encoding can fail in two unrelated ways:

- InsufficientSpaceError: the sink is too small. Grow or flush, then retry.
- OversizedValueError: the value is >= 2^62. No retry can help.

Decoding returns None when the buffer holds too few bytes. Whether more bytes
will ever arrive is for the caller holding the stream to decide.


References:
    RFC 9000, Section 16 (Variable-Length Integer Encoding):
        https://www.rfc-editor.org/rfc/rfc9000.html#section-16
    RFC 9000, Appendix A.1 (Sample Variable-Length Integer Decoding):
        https://www.rfc-editor.org/rfc/rfc9000.html#appendix-A.1
"""

from __future__ import annotations

import logging
import operator
import struct
from typing import Final

from quic_varint.buffer import Buf, BufMut, ByteCursor, ByteSink
from quic_varint.types import InsufficientSpaceError, OversizedValueError, StrictBaseModel

logger = logging.getLogger(__name__)


class LengthClass(StrictBaseModel):
    """One of the four encoded sizes of a varint."""

    octets: int
    """Total encoded length in bytes."""

    tag: int
    """Two-bit prefix stored in the top bits of the first byte."""

    usable_bits: int
    """Bits available for the magnitude once the tag is accounted for."""

    @property
    def max_value(self) -> int:
        """Largest magnitude this class can carry."""
        return 2**self.usable_bits - 1

    @property
    def struct_format(self) -> str:
        """The `struct` format of a big-endian unsigned integer of this width."""
        return _STRUCT_FORMATS[self.octets]


_STRUCT_FORMATS: Final[dict[int, str]] = {1: ">B", 2: ">H", 4: ">I", 8: ">Q"}

LENGTH_CLASSES: Final[tuple[LengthClass, ...]] = (
    LengthClass(octets=1, tag=0b00, usable_bits=6),
    LengthClass(octets=2, tag=0b01, usable_bits=14),
    LengthClass(octets=4, tag=0b10, usable_bits=30),
    LengthClass(octets=8, tag=0b11, usable_bits=62),
)
"""All length classes, indexed by tag."""

ONE_OCTET_MAX: Final = LENGTH_CLASSES[0].max_value
TWO_OCTETS_MAX: Final = LENGTH_CLASSES[1].max_value
FOUR_OCTETS_MAX: Final = LENGTH_CLASSES[2].max_value
EIGHT_OCTETS_MAX: Final = LENGTH_CLASSES[3].max_value
"""The largest representable value, 2^62 - 1."""

MAX_ENCODED_LENGTH: Final = LENGTH_CLASSES[-1].octets
"""No varint is ever longer than this many bytes."""

TAG_SHIFT: Final = 6
"""Position of the tag within the first byte."""

VALUE_MASK: Final = 0b0011_1111
"""Mask keeping the data bits of the first byte."""


def length_class(value: int) -> LengthClass | None:
    """
    Return the smallest length class able to carry `value`.

    Returns:
        The matching class, or None if `value` is negative or >= 2^62.

    Raises:
        TypeError: If `value` is not an integer, or is a bool.
    """
    # Booleans are ints to Python but never magnitudes on the wire.
    if isinstance(value, bool):
        raise TypeError("Expected int, got bool")
    value = operator.index(value)

    # Negative numbers have no encoding in any class.
    if value < 0:
        return None

    # Classes are ordered by size, so the first fit is the minimal one.
    for candidate in LENGTH_CLASSES:
        if value <= candidate.max_value:
            return candidate
    return None


def size(value: int) -> int | None:
    """
    Compute the minimal encoded length of `value`.

    Args:
        value: The magnitude to classify.

    Returns:
        1, 2, 4 or 8. None if the value cannot be represented.
    """
    cls = length_class(value)
    return None if cls is None else cls.octets


def read(buf: Buf) -> int | None:
    """
    Decode one varint from a read cursor.

    Consumes exactly the bytes of the encoding on success. When the buffer is
    too short, the tag byte (if any) has been consumed and nothing else.

    Args:
        buf: Cursor positioned at the first byte of the varint.

    Returns:
        The decoded value, or None if the buffer ends before the encoding does.
    """
    # An empty buffer is reported as absence, like any short read.
    if not buf.has_remaining():
        return None

    # The tag decides how many bytes follow. The remaining 6 bits of the
    # first byte are the high-order bits of the value.
    first = buf.get_u8()
    cls = LENGTH_CLASSES[first >> TAG_SHIFT]

    # Check before reading so the cursor is not advanced past the tag.
    if buf.remaining() < cls.octets - 1:
        return None

    # Reassemble the value: masked first byte, then the continuation bytes.
    #
    # Together they form a big-endian integer of the class width.
    scratch = bytes((first & VALUE_MASK,)) + buf.copy_to_slice(cls.octets - 1)
    (value,) = struct.unpack(cls.struct_format, scratch)
    return value


def write(value: int, buf: BufMut) -> None:
    """
    Encode `value` into a write sink using the minimal length class.

    Args:
        value: Magnitude in [0, 2^62 - 1].
        buf: Sink with at least `size(value)` bytes of capacity left.

    Raises:
        OversizedValueError: If `value` cannot be represented.
        InsufficientSpaceError: If the sink is too small. Nothing is written.
        TypeError: If `value` is not an integer, or is a bool.
    """
    # Pick the smallest class that can carry the value.
    #
    # No class means the value needs more than 62 bits. Checked before capacity.
    cls = length_class(value)
    if cls is None:
        logger.debug("Rejecting oversized varint value %d", value)
        raise OversizedValueError(value)
    value = operator.index(value)

    # Refuse to write a partial encoding.
    available = buf.remaining_mut()
    if available < cls.octets:
        logger.debug("No room for %d-byte varint: %d bytes left", cls.octets, available)
        raise InsufficientSpaceError(required=cls.octets, available=available)

    # Pack as a big-endian integer of the class width.
    #
    # The value is at most usable_bits wide, so the top two bits are free
    # and the tag can be OR-ed in without losing data.
    tagged = (cls.tag << (cls.octets * 8 - 2)) | value
    buf.put_slice(struct.pack(cls.struct_format, tagged))


def encode_varint(value: int) -> bytes:
    """
    Encode `value` as a standalone byte string.

    Raises:
        OversizedValueError: If `value` cannot be represented.
    """
    sink = ByteSink(MAX_ENCODED_LENGTH)
    write(value, sink)
    return sink.data


def decode_varint(data: bytes | bytearray | memoryview, offset: int = 0) -> tuple[int, int] | None:
    """
    Decode a varint from bytes at the given offset.

    Args:
        data: Input bytes containing the varint.
        offset: Starting position in data. Defaults to 0.

    Returns:
        Tuple of (decoded_value, bytes_consumed), or None if `data` ends
        before the encoding does.
    """
    cursor = ByteCursor(data, offset)
    value = read(cursor)
    if value is None:
        return None
    return value, cursor.position - offset
