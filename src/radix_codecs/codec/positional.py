"""
Positional radix codec.

One parametric engine serves every radix: the input bytes are read as an
unsigned big-endian magnitude, rewritten in base R and rendered through the
alphabet. Because magnitude arithmetic drops leading zero bytes, their count
is carried separately as a prefix of zero symbols:

    encode(b"\\x00\\x00\\x01\\x02") == zero_symbol * 2 + digits(0x0102)

Canonical form: the digit part never starts with the zero symbol. The empty
input encodes to the empty string, while ``n`` zero bytes encode to ``n``
zero symbols.
"""

import logging
from typing import Any, Sequence

from ..alphabet import Alphabet
from ..errors import InvalidSymbolError
from .base import BaseCodec
from .magnitude import (
    count_leading_zeros,
    from_digits,
    from_magnitude,
    to_digits,
    to_magnitude,
)

logger = logging.getLogger(__name__)


class PositionalCodec(BaseCodec):
    """
    General big-integer codec for any alphabet.

    Subclasses may override :meth:`_encode_magnitude`, :meth:`_digits_of` and
    :meth:`_decode_digits` with faster routines, provided the output stays
    identical to this class.
    """

    def __init__(self, alphabet: Alphabet):
        super().__init__(alphabet)

    def encode(self, data: Any) -> str:
        raw = self._to_bytes(data)
        zeros = count_leading_zeros(raw)
        prefix = self._alphabet.zero_symbol * zeros
        if zeros == len(raw):
            return prefix
        return prefix + self._encode_magnitude(raw[zeros:])

    def decode(self, text: str) -> bytes:
        text = self._to_text(text)
        if not text:
            return b""

        try:
            digits = self._digits_of(text)
        except InvalidSymbolError as e:
            logger.debug(f"Rejected {self.name} input of length {len(text)}: {e.message}")
            raise

        zeros = count_leading_zeros(digits)
        if zeros == len(digits):
            return bytes(zeros)
        return bytes(zeros) + self._decode_digits(digits[zeros:])

    def _encode_magnitude(self, trimmed: bytes) -> str:
        """Render bytes whose first byte is non-zero as canonical digits."""
        digits = to_digits(to_magnitude(trimmed), self.radix)
        return self._alphabet.render(digits)

    def _digits_of(self, text: str) -> Sequence[int]:
        """Translate every symbol to its digit value."""
        return self._alphabet.digits_of(text)

    def _decode_digits(self, digits: Sequence[int]) -> bytes:
        """Convert digits whose first digit is non-zero to minimal bytes."""
        return from_magnitude(from_digits(digits, self.radix))


__all__ = ["PositionalCodec"]
