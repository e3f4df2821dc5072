"""Literal/numerical value pairs of a criterion and int32 bit helpers."""

from __future__ import annotations

from typing import Iterator, Optional

INT32_BITS = 32
_UINT32_MASK = (1 << INT32_BITS) - 1
_INT32_SIGN = 1 << (INT32_BITS - 1)


def to_int32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range (two's complement)."""
    value = int(value) & _UINT32_MASK
    return value - (1 << INT32_BITS) if value & _INT32_SIGN else value


def fits_32_bits(value: int) -> bool:
    """Check if a value is representable as int32 or uint32."""
    return -_INT32_SIGN <= value <= _UINT32_MASK


def is_flag(value: int) -> bool:
    """Check if an int32 value has exactly one bit set."""
    unsigned = value & _UINT32_MASK
    return unsigned != 0 and unsigned & (unsigned - 1) == 0


def iter_flags(state: int) -> Iterator[int]:
    """Yield the set bits of an int32 state as int32 values, lowest bit first."""
    unsigned = state & _UINT32_MASK
    for bit in range(INT32_BITS):
        if unsigned & (1 << bit):
            yield to_int32(1 << bit)


class ValuePairTable:
    """
    Bidirectional mapping between literal names and numerical codes.

    Literals are unique keys; a literal registered again keeps its original
    position but takes the new code. Several literals may share a code, in
    which case reverse lookup returns the first one in insertion order.
    The table only grows.
    """

    def __init__(self) -> None:
        self._pairs: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[str]:
        return iter(self._pairs)

    def __contains__(self, literal: object) -> bool:
        return literal in self._pairs

    def add(self, literal: str, numerical: int) -> None:
        self._pairs[literal] = numerical

    def get_literal(self, numerical: int) -> Optional[str]:
        for literal, value in self._pairs.items():
            if value == numerical:
                return literal
        return None

    def get_numerical(self, literal: str) -> Optional[int]:
        return self._pairs.get(literal)

    def has_numerical(self, numerical: int) -> bool:
        return numerical in self._pairs.values()

    def items(self) -> list[tuple[str, int]]:
        """Pairs in insertion order."""
        return list(self._pairs.items())

    def items_by_flag(self) -> list[tuple[str, int]]:
        """Pairs ordered by ascending bit position (sign bit last)."""
        return sorted(self._pairs.items(), key=lambda pair: pair[1] & _UINT32_MASK)

    def to_dict(self) -> dict[str, int]:
        """Copy of the pairs, literal -> numerical."""
        return dict(self._pairs)
