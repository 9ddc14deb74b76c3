"""
Integer / Bit Conversions

Plain-Python helpers for the two's-complement encoding used by bit-vector
arithmetic: bit i of a w-bit word is (value >> i) & 1.
"""

from typing import Iterable, List


def bits_of(value: int, width: int) -> List[bool]:
    """
    Two's-complement bits of ``value``, least significant first.

    Args:
        value: Any integer; wraps modulo 2^width
        width: Number of bits

    Returns:
        List of ``width`` truth values
    """
    return [(value >> i) & 1 != 0 for i in range(width)]


def to_unsigned(bits: Iterable[bool]) -> int:
    """Value of an LSB-first bit sequence read as an unsigned integer."""
    result = 0
    for i, bit in enumerate(bits):
        if bit:
            result |= 1 << i
    return result


def to_signed(bits: Iterable[bool]) -> int:
    """Value of an LSB-first bit sequence read as a two's-complement integer."""
    bits = list(bits)
    value = to_unsigned(bits)
    if bits and bits[-1]:
        value -= 1 << len(bits)
    return value


def wrap(value: int, width: int) -> int:
    """Reduce ``value`` modulo 2^width."""
    return value & ((1 << width) - 1)
