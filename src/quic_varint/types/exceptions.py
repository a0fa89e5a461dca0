"""Exception hierarchy for the varint codec."""

from __future__ import annotations


class VarIntError(Exception):
    """
    Base exception for all varint-related errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class VarIntValueError(VarIntError):
    """
    Base class for value-related errors.

    Raised when a value is invalid for an operation, even if its type is correct.
    """


class UintOverflowError(VarIntValueError, OverflowError):
    """
    Raised when a numeric value is outside the range of a fixed-width type.

    Attributes:
        value: The value that caused the overflow.
        type_name: The type that couldn't hold the value.
        min_value: The minimum allowed value (inclusive).
        max_value: The maximum allowed value (inclusive).
    """

    def __init__(
        self,
        value: int,
        type_name: str,
        *,
        min_value: int = 0,
        max_value: int,
    ) -> None:
        self.value = value
        self.type_name = type_name
        self.min_value = min_value
        self.max_value = max_value

        super().__init__(
            f"{value} is out of range for {type_name} (valid range: [{min_value}, {max_value}])"
        )


class VarIntOverflowError(UintOverflowError):
    """Raised when a magnitude does not fit in the 62 usable bits of a varint."""


class EncodeError(VarIntError):
    """Base class for encode-side failures."""


class InsufficientSpaceError(EncodeError):
    """
    Raised when the output buffer cannot hold the encoding.

    Recoverable: the caller may grow or flush the buffer and retry.

    Attributes:
        required: Number of bytes the encoding needs.
        available: Remaining capacity of the buffer.
    """

    def __init__(self, *, required: int, available: int) -> None:
        self.required = required
        self.available = available

        super().__init__(
            f"insufficient space to encode value: need {required} bytes, {available} available"
        )


class OversizedValueError(EncodeError):
    """
    Raised when a value is too large for varint encoding.

    Not retryable: no buffer size makes the value representable.

    Attributes:
        value: The rejected value.
    """

    def __init__(self, value: int) -> None:
        self.value = value

        super().__init__(f"value too large for varint encoding: {value}")


class VarIntDecodeError(VarIntError):
    """
    Raised when decoding bytes to a varint fails.

    Attributes:
        detail: Description of what went wrong.
        offset: The byte offset where the error occurred (if known).
    """

    def __init__(self, detail: str, *, offset: int | None = None) -> None:
        self.detail = detail
        self.offset = offset

        msg = f"Failed to decode varint: {detail}"
        if offset is not None:
            msg = f"{msg} (at byte offset {offset})"

        super().__init__(msg)


class UnexpectedEndError(VarIntDecodeError):
    """
    Raised when the input ends before an encoding is complete.

    Attributes:
        remaining: Number of bytes that were left.
        needed: Number of bytes that were requested (if known).
    """

    def __init__(
        self,
        *,
        remaining: int,
        needed: int | None = None,
        offset: int | None = None,
    ) -> None:
        self.remaining = remaining
        self.needed = needed

        if needed is not None:
            detail = f"unexpected end of input: needed {needed} bytes, {remaining} remaining"
        else:
            detail = f"unexpected end of input: {remaining} bytes remaining"

        super().__init__(detail, offset=offset)
