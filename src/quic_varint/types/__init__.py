"""Reusable type definitions for the varint codec."""

from .base import StrictBaseModel
from .exceptions import (
    EncodeError,
    InsufficientSpaceError,
    OversizedValueError,
    UintOverflowError,
    UnexpectedEndError,
    VarIntDecodeError,
    VarIntError,
    VarIntOverflowError,
    VarIntValueError,
)
from .uint import BaseUint, Uint8, Uint16, Uint32, Uint64

__all__ = [
    # Core types
    "BaseUint",
    "Uint8",
    "Uint16",
    "Uint32",
    "Uint64",
    "StrictBaseModel",
    # Exceptions
    "VarIntError",
    "VarIntValueError",
    "UintOverflowError",
    "VarIntOverflowError",
    "EncodeError",
    "InsufficientSpaceError",
    "OversizedValueError",
    "VarIntDecodeError",
    "UnexpectedEndError",
]
