"""
Byte-aligned fast paths.

For a power-of-two radix ``2**k`` the base-R digits of a magnitude are just
its bits cut into ``k``-bit groups from the least significant end, so no
division is needed. For radix 256 the trimmed bytes already are the digits.
Both codecs produce exactly the output of :class:`PositionalCodec`; they only
skip the arithmetic.
"""

from typing import List, Sequence

from ..alphabet import Alphabet
from ..errors import InvalidSymbolError
from .magnitude import from_magnitude, to_magnitude
from .positional import PositionalCodec

# Python formats these radices natively, without the decimal length limit
_NATIVE_FORMATS = {1: "b", 4: "x"}
_NATIVE_DIGITS = "0123456789abcdef"


class PowerOfTwoCodec(PositionalCodec):
    """Bit-group packing codec for radices 2, 4, 8, ... 128."""

    def __init__(self, alphabet: Alphabet):
        radix = alphabet.radix
        bits = radix.bit_length() - 1
        if radix != 1 << bits or bits > 7:
            raise ValueError(f"PowerOfTwoCodec needs a radix in 2..128 that is a power of two, got {radix}")
        super().__init__(alphabet)
        self._bits = bits
        self._groups: List[str] = [format(digit, f"0{bits}b") for digit in range(radix)]
        native = _NATIVE_FORMATS.get(bits)
        self._native = native
        self._native_table = (
            str.maketrans(_NATIVE_DIGITS[:radix], alphabet.symbols) if native else None
        )

    @property
    def bits_per_digit(self) -> int:
        return self._bits

    def _encode_magnitude(self, trimmed: bytes) -> str:
        magnitude = to_magnitude(trimmed)
        if self._native:
            return format(magnitude, self._native).translate(self._native_table)

        bits = self._bits
        stream = format(magnitude, "b")
        # Left-pad so that groups line up with the least significant bit
        stream = "0" * (-len(stream) % bits) + stream
        symbols = self._alphabet.symbols
        return "".join([
            symbols[int(stream[start:start + bits], 2)]
            for start in range(0, len(stream), bits)
        ])

    def _decode_digits(self, digits: Sequence[int]) -> bytes:
        groups = self._groups
        stream = "".join([groups[digit] for digit in digits])
        return from_magnitude(int(stream, 2))


class Base256Codec(PositionalCodec):
    """
    Identity codec over the byte space.

    Text carries one code point in U+0000..U+00FF per byte. The leading zero
    bookkeeping still runs, which for this radix restores exactly the bytes
    the identity mapping would have produced.
    """

    def __init__(self, alphabet: Alphabet):
        if alphabet.symbols != "".join(map(chr, range(256))):
            raise ValueError(f"Base256Codec needs the identity byte alphabet, got {alphabet!r}")
        super().__init__(alphabet)

    def _encode_magnitude(self, trimmed: bytes) -> str:
        return trimmed.decode("latin-1")

    def _digits_of(self, text: str) -> bytes:
        try:
            return text.encode("latin-1")
        except UnicodeEncodeError as e:
            raise InvalidSymbolError(text[e.start], e.start, self.radix, cause=e) from e

    def _decode_digits(self, digits: Sequence[int]) -> bytes:
        return bytes(digits)


__all__ = ["PowerOfTwoCodec", "Base256Codec"]
