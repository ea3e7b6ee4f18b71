"""
Magnitude arithmetic for positional radix conversion.

A byte sequence is read as an unsigned big-endian integer (its magnitude)
and rewritten as base-R digits by repeated division with remainder, and
back. Python ints are arbitrary precision, so no fixed-width overflow can
occur. To keep long inputs fast the division works on blocks of ``w`` digits
at a time, where ``R**w`` is the largest power of the radix that fits in 64
bits, and the resulting blocks are split into single digits with native-size
arithmetic.

Leading zero bytes are not part of the magnitude: callers count and restore
them separately.
"""

from functools import lru_cache
from typing import List, Sequence, Tuple

_BLOCK_LIMIT = 1 << 64


@lru_cache(maxsize=None)
def block_width(radix: int) -> Tuple[int, int]:
    """
    Return ``(w, R**w)`` for the largest ``w`` with ``R**w <= 2**64``.

    Args:
        radix: Digit radix, at least 2

    Returns:
        Tuple of digits per block and the block divisor
    """
    if radix < 2:
        raise ValueError(f"radix must be at least 2, got {radix}")
    width = 1
    while radix ** (width + 1) <= _BLOCK_LIMIT:
        width += 1
    return width, radix ** width


def count_leading_zeros(values: Sequence[int]) -> int:
    """Count the contiguous zero values at the start of a byte or digit sequence."""
    if isinstance(values, (bytes, bytearray)):
        return len(values) - len(values.lstrip(b"\x00"))
    for index, value in enumerate(values):
        if value:
            return index
    return len(values)


def to_magnitude(data: bytes) -> int:
    """Interpret bytes as an unsigned big-endian integer."""
    return int.from_bytes(data, "big")


def from_magnitude(magnitude: int) -> bytes:
    """
    Render a magnitude as its minimal big-endian byte sequence.

    Zero renders as the empty byte sequence, so no leading zero byte is ever
    produced here.
    """
    if magnitude < 0:
        raise ValueError("magnitude cannot be negative")
    return magnitude.to_bytes((magnitude.bit_length() + 7) // 8, "big")


def to_digits(magnitude: int, radix: int) -> List[int]:
    """
    Convert a magnitude to base-``radix`` digits, most significant first.

    The result is canonical: it never starts with a zero digit, and zero
    converts to an empty list.

    Args:
        magnitude: Non-negative integer to convert
        radix: Target radix

    Returns:
        List of digit values in ``0..radix-1``
    """
    if magnitude < 0:
        raise ValueError("magnitude cannot be negative")
    if magnitude == 0:
        return []

    width, block = block_width(radix)

    # Least significant block first
    blocks = []
    while magnitude:
        magnitude, remainder = divmod(magnitude, block)
        blocks.append(remainder)

    digits: List[int] = []
    for value in reversed(blocks):
        chunk = [0] * width
        for position in range(width - 1, -1, -1):
            value, chunk[position] = divmod(value, radix)
        digits.extend(chunk)

    # Only the top block can carry padding zeros, and it is never all zero
    return digits[count_leading_zeros(digits):]


def from_digits(digits: Sequence[int], radix: int) -> int:
    """
    Accumulate base-``radix`` digits, most significant first, into a magnitude.

    Leading zero digits do not change the value.
    """
    width, block = block_width(radix)
    count = len(digits)
    magnitude = 0
    start = 0
    # The first chunk absorbs the remainder so the rest are whole blocks
    end = count % width or width
    while start < count:
        value = 0
        for digit in digits[start:end]:
            value = value * radix + digit
        magnitude = magnitude * block + value
        start, end = end, end + width
    return magnitude


__all__ = [
    "block_width",
    "count_leading_zeros",
    "to_magnitude",
    "from_magnitude",
    "to_digits",
    "from_digits",
]
