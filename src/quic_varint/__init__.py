"""QUIC variable-length integer codec."""

from .buffer import Buf, BufMut, ByteCursor, ByteSink
from .integer import VarInt
from .types import (
    EncodeError,
    InsufficientSpaceError,
    OversizedValueError,
    UnexpectedEndError,
    VarIntDecodeError,
    VarIntError,
    VarIntOverflowError,
)
from .varint import (
    EIGHT_OCTETS_MAX,
    LENGTH_CLASSES,
    LengthClass,
    decode_varint,
    encode_varint,
    length_class,
    read,
    size,
    write,
)

__all__ = [
    # Value type
    "VarInt",
    "LengthClass",
    "LENGTH_CLASSES",
    "EIGHT_OCTETS_MAX",
    # Codec
    "size",
    "length_class",
    "read",
    "write",
    "encode_varint",
    "decode_varint",
    # Buffers
    "Buf",
    "BufMut",
    "ByteCursor",
    "ByteSink",
    # Exceptions
    "VarIntError",
    "VarIntOverflowError",
    "EncodeError",
    "InsufficientSpaceError",
    "OversizedValueError",
    "VarIntDecodeError",
    "UnexpectedEndError",
]
