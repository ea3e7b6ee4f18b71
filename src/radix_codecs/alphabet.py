"""
Digit alphabets for the radix codecs.

An alphabet is the bijection between digit values 0..R-1 and the printable
symbols that render them. Alphabets are immutable value objects; the built-in
tables below are created once at import time and shared by every codec.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Optional

from .errors import InvalidSymbolError


class Alphabet:
    """
    Ordered, de-duplicated symbol set of size R with its reverse mapping.

    Args:
        symbols: One character per digit value, in digit order
        name: Human readable table name
        case_insensitive: Also accept the other letter case when reading
    """

    def __init__(self, symbols: str, *, name: str, case_insensitive: bool = False):
        if not isinstance(symbols, str):
            raise ValueError("Alphabet symbols must be a string")
        if len(symbols) < 2:
            raise ValueError(f"Alphabet {name} needs at least 2 symbols, got {len(symbols)}")

        lookup: Dict[str, int] = {}
        for digit, symbol in enumerate(symbols):
            if symbol in lookup:
                raise ValueError(f"Alphabet {name} repeats symbol {symbol!r}")
            lookup[symbol] = digit

        if case_insensitive:
            for symbol, digit in list(lookup.items()):
                for variant in (symbol.lower(), symbol.upper()):
                    # A case-folded variant must not shadow a different digit
                    if lookup.setdefault(variant, digit) != digit:
                        raise ValueError(
                            f"Alphabet {name} is not case-insensitive: {variant!r} is ambiguous"
                        )

        self._symbols = symbols
        self._name = name
        self._case_insensitive = case_insensitive
        self._lookup = lookup

    @property
    def radix(self) -> int:
        """Number of digit values."""
        return len(self._symbols)

    @property
    def symbols(self) -> str:
        """Canonical symbols in digit order."""
        return self._symbols

    @property
    def name(self) -> str:
        return self._name

    @property
    def case_insensitive(self) -> bool:
        return self._case_insensitive

    @property
    def zero_symbol(self) -> str:
        """Symbol of digit 0, used for the leading-zero-byte prefix."""
        return self._symbols[0]

    def symbol_of(self, digit: int) -> str:
        """Return the canonical symbol for a digit value."""
        if not 0 <= digit < self.radix:
            raise ValueError(f"Digit {digit} out of range for radix {self.radix}")
        return self._symbols[digit]

    def digit_of(self, symbol: str, position: Optional[int] = None) -> int:
        """
        Return the digit value of a symbol.

        Raises:
            InvalidSymbolError: If the symbol is not part of this alphabet
        """
        digit = self._lookup.get(symbol)
        if digit is None:
            raise InvalidSymbolError(symbol, position, self.radix)
        return digit

    def digits_of(self, text: str, offset: int = 0) -> List[int]:
        """
        Translate a whole string to digit values.

        Args:
            text: Symbols to translate
            offset: Index of ``text[0]`` within the caller's original string,
                so reported positions refer to the original input

        Raises:
            InvalidSymbolError: Naming the first offending symbol and position
        """
        lookup = self._lookup
        digits = [lookup.get(symbol, -1) for symbol in text]
        if -1 in digits:
            index = digits.index(-1)
            raise InvalidSymbolError(text[index], offset + index, self.radix)
        return digits

    def render(self, digits: Iterable[int]) -> str:
        """Map digit values to their canonical symbols."""
        symbols = self._symbols
        return "".join([symbols[d] for d in digits])

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._lookup

    def __len__(self) -> int:
        return self.radix

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return (self._symbols == other._symbols
                and self._case_insensitive == other._case_insensitive)

    def __hash__(self) -> int:
        return hash((self._symbols, self._case_insensitive))

    def __repr__(self) -> str:
        return f"Alphabet(name={self._name!r}, radix={self.radix})"


_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_LOWER = "abcdefghijklmnopqrstuvwxyz"
_DIGITS = "0123456789"

BINARY = Alphabet("01", name="binary")
DECIMAL = Alphabet(_DIGITS, name="decimal")
HEXADECIMAL = Alphabet(_DIGITS + "abcdef", name="hexadecimal", case_insensitive=True)

# RFC 4648 symbol order; no padding symbol, lengths are recovered from the magnitude
BASE64_STANDARD = Alphabet(_UPPER + _LOWER + _DIGITS + "+/", name="base64")
BASE64_URLSAFE = Alphabet(_UPPER + _LOWER + _DIGITS + "-_", name="base64url")

# Standard basE91 table: printable ASCII without '-', '\\', "'" and space
BASE91 = Alphabet(
    _UPPER + _LOWER + _DIGITS + "!#$%&()*+,./:;<=>?@[]^_`{|}~\"",
    name="base91",
)

# Identity byte space: code point n stands for byte value n
BYTES256 = Alphabet("".join(map(chr, range(256))), name="bytes256")


__all__ = [
    "Alphabet",
    "BINARY",
    "DECIMAL",
    "HEXADECIMAL",
    "BASE64_STANDARD",
    "BASE64_URLSAFE",
    "BASE91",
    "BYTES256",
]
