"""
Opaque byte string types.

Values are immutable `bytes` subclasses that validate their length on
construction and serialize to hex strings in JSON and YAML.
"""

from __future__ import annotations

from typing import Any, ClassVar, Iterable, SupportsIndex

from pydantic.annotated_handlers import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self


def _coerce_to_bytes(value: Any) -> bytes:
    """
    Coerce a variety of inputs to raw bytes.

    Accepts:
      - `bytes` / `bytearray` (returned as immutable `bytes`)
      - Iterables of integers in [0, 255]
      - Hex strings, with or without a '0x' prefix (e.g. "0xdeadbeef" or "deadbeef")

    Raises:
      ValueError if conversion is not possible or out-of-range.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        # bytes.fromhex handles empty string and validates hex characters
        return bytes.fromhex(value.removeprefix("0x"))
    if isinstance(value, Iterable):
        # bytes(bytearray(iterable)) enforces each element is an int in 0..255
        return bytes(bytearray(value))
    raise ValueError(f"Cannot convert {type(value).__name__} to bytes")


class BoundedBytes(bytes):
    """
    A base class for variable-length byte strings with an upper bound.

    Subclasses set:
      - `MIN_LENGTH`: minimum number of bytes (defaults to 0).
      - `LIMIT`: maximum number of bytes the instance may contain.
    """

    MIN_LENGTH: ClassVar[int] = 0
    """The minimum number of bytes."""

    LIMIT: ClassVar[int]
    """The maximum number of bytes (overridden by subclasses)."""

    def __new__(cls, value: Any = b"") -> Self:
        """
        Create and validate a new instance.

        Args:
            value: Any value coercible to bytes (see `_coerce_to_bytes`).

        Raises:
            ValueError: If the resulting length is outside `[MIN_LENGTH, LIMIT]`.
        """
        if not hasattr(cls, "LIMIT"):
            raise TypeError(f"{cls.__name__} must define LIMIT")

        b = _coerce_to_bytes(value)
        if not cls.MIN_LENGTH <= len(b) <= cls.LIMIT:
            raise ValueError(
                f"{cls.__name__} expects between {cls.MIN_LENGTH} and {cls.LIMIT} bytes, "
                f"got {len(b)}"
            )
        return super().__new__(cls, b)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Hook into Pydantic's validation system.

        1. If the input is already an instance of the class, accept it.
        2. Otherwise, coerce the input (bytes, hex string, int iterable) and
           instantiate the class, which checks the length bounds.
        3. For serialization (e.g., to JSON), convert to hex string.
        """
        return core_schema.union_schema(
            [
                core_schema.is_instance_schema(cls),
                core_schema.no_info_plain_validator_function(cls),
            ],
            serialization=core_schema.plain_serializer_function_ser_schema(lambda x: x.hex()),
        )

    def __repr__(self) -> str:
        """Return a string representation of the bytes."""
        tname = type(self).__name__
        return f"{tname}({self.hex()})"

    def __hash__(self) -> int:
        """Return the hash of the bytes."""
        return hash((type(self), bytes(self)))

    def hex(self, sep: str | bytes | None = None, bytes_per_sep: SupportsIndex = 1) -> str:
        """Return the hexadecimal string representation of the underlying bytes."""
        return bytes(self).hex() if sep is None else bytes(self).hex(sep, bytes_per_sep)
