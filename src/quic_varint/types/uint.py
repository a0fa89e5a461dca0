"""Fixed-width unsigned integer types."""

from __future__ import annotations

from typing import Any, ClassVar, Literal, SupportsIndex

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self

from .exceptions import UintOverflowError


class BaseUint(int):
    """A base class for custom unsigned integer types that inherits from `int`."""

    BITS: ClassVar[int]
    """The number of bits in the integer (overridden by subclasses)."""

    OVERFLOW_ERROR: ClassVar[type[UintOverflowError]] = UintOverflowError
    """The exception raised when a value falls outside the type's range."""

    def __new__(cls, value: Any) -> Self:
        """
        Create and validate a new Uint instance.

        Only genuine integers are accepted. `bool` is rejected even though it
        subclasses `int`, as are floats and strings that Python would coerce.

        Raises:
            TypeError: If `value` is not an integer.
            UintOverflowError: If `value` is outside the range [0, 2**BITS - 1].
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Expected int, got {type(value).__name__}")
        int_value = int(value)
        if not (0 <= int_value < (2**cls.BITS)):
            raise cls.OVERFLOW_ERROR(int_value, cls.__name__, max_value=2**cls.BITS - 1)
        return super().__new__(cls, int_value)

    @classmethod
    def max_value(cls) -> Self:
        """Return the largest value representable by this type."""
        return cls(2**cls.BITS - 1)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Hook into Pydantic's validation system."""

        def validate(value: Any) -> BaseUint:
            """Pydantic validation function that calls the class constructor."""
            try:
                return cls(value)
            except (OverflowError, TypeError) as e:
                raise ValueError(str(e)) from e

        # Validator that runs the constructor, so every path yields an instance of `cls`.
        from_int_validator = core_schema.no_info_plain_validator_function(validate)

        return core_schema.json_or_python_schema(
            # JSON: check for a strict in-range integer first, then wrap it.
            json_schema=core_schema.chain_schema(
                [core_schema.int_schema(strict=True, ge=0, lt=2**cls.BITS), from_int_validator]
            ),
            python_schema=from_int_validator,
            # For serialization, convert the instance back to a plain int.
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: int(instance)
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Hook into Pydantic's JSON Schema generation system."""
        json_schema = handler(core_schema)
        json_schema.update(format=f"uint{cls.BITS}")
        return json_schema

    def to_bytes(
        self,
        length: SupportsIndex | None = None,
        byteorder: Literal["little", "big"] = "big",
        *,
        signed: bool = False,
    ) -> bytes:
        """
        Return an array of bytes representing the integer.

        Defaults to network byte order and the smallest whole number of bytes
        covering `BITS`.
        """
        actual_length = (self.BITS + 7) // 8 if length is None else int(length)
        return super().to_bytes(length=actual_length, byteorder=byteorder, signed=signed)

    def _raise_type_error(self, other: Any, op_symbol: str) -> None:
        """Helper to raise a consistent TypeError."""
        raise TypeError(
            f"Unsupported operand type(s) for {op_symbol}: "
            f"'{type(self).__name__}' and '{type(other).__name__}'"
        )

    def __add__(self, other: Any) -> Self:
        """Handle the addition operator (`+`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "+")
        return type(self)(int(self) + int(other))

    def __radd__(self, other: Any) -> Self:
        """Handle the reverse addition operator (`+`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "+")
        return type(self)(int(other) + int(self))

    def __sub__(self, other: Any) -> Self:
        """Handle the subtraction operator (`-`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "-")
        return type(self)(int(self) - int(other))

    def __rsub__(self, other: Any) -> Self:
        """Handle the reverse subtraction operator (`-`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "-")
        return type(self)(int(other) - int(self))

    def __eq__(self, other: object) -> bool:
        """Handle the equality operator (`==`)"""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "==")
        return int(self) == int(other)  # type: ignore[call-overload]

    def __ne__(self, other: object) -> bool:
        """Handle the inequality operator (`!=`)"""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "!=")
        return int(self) != int(other)  # type: ignore[call-overload]

    def __lt__(self, other: Any) -> bool:
        """Handle the less-than operator (`<`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "<")
        return int(self) < int(other)

    def __le__(self, other: Any) -> bool:
        """Handle the less-than-or-equal-to operator (`<=`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "<=")
        return int(self) <= int(other)

    def __gt__(self, other: Any) -> bool:
        """Handle the greater-than operator (`>`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, ">")
        return int(self) > int(other)

    def __ge__(self, other: Any) -> bool:
        """Handle the greater-than-or-equal-to operator (`>=`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, ">=")
        return int(self) >= int(other)

    def __repr__(self) -> str:
        """Return the official string representation of the object."""
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        """Return the informal, user-friendly string representation."""
        return str(int(self))

    def __hash__(self) -> int:
        """Return a distinct hash for the object."""
        return hash((type(self), int(self)))


class Uint8(BaseUint):
    """A type representing an 8-bit unsigned integer (uint8)."""

    BITS = 8


class Uint16(BaseUint):
    """A type representing a 16-bit unsigned integer (uint16)."""

    BITS = 16


class Uint32(BaseUint):
    """A type representing a 32-bit unsigned integer (uint32)."""

    BITS = 32


class Uint64(BaseUint):
    """A type representing a 64-bit unsigned integer (uint64)."""

    BITS = 64
