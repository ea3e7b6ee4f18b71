"""
Unit tests for digit alphabets.
"""

import pytest

from radix_codecs import (
    Alphabet,
    BASE64_STANDARD,
    BASE64_URLSAFE,
    BASE91_ALPHABET,
    BINARY,
    BYTES256,
    DECIMAL,
    HEXADECIMAL,
    InvalidSymbolError,
)


BUILT_IN = [BINARY, DECIMAL, HEXADECIMAL, BASE64_STANDARD, BASE64_URLSAFE, BASE91_ALPHABET, BYTES256]


@pytest.mark.unit
class TestBuiltInAlphabets:
    """The shipped tables are bijections of the right size."""

    @pytest.mark.parametrize("alphabet,radix,zero", [
        (BINARY, 2, "0"),
        (DECIMAL, 10, "0"),
        (HEXADECIMAL, 16, "0"),
        (BASE64_STANDARD, 64, "A"),
        (BASE64_URLSAFE, 64, "A"),
        (BASE91_ALPHABET, 91, "A"),
        (BYTES256, 256, "\x00"),
    ])
    def test_size_and_zero_symbol(self, alphabet, radix, zero):
        assert alphabet.radix == radix
        assert len(alphabet) == radix
        assert alphabet.zero_symbol == zero

    @pytest.mark.parametrize("alphabet", BUILT_IN, ids=lambda a: a.name)
    def test_bijection(self, alphabet):
        assert len(set(alphabet.symbols)) == alphabet.radix
        for digit in range(alphabet.radix):
            assert alphabet.digit_of(alphabet.symbol_of(digit)) == digit

    def test_base91_excludes_delimiters(self):
        for symbol in ("-", "\\", "'", " "):
            assert symbol not in BASE91_ALPHABET
        assert all(33 <= ord(s) <= 126 for s in BASE91_ALPHABET.symbols)

    def test_base64_variants_differ_only_in_last_two(self):
        assert BASE64_STANDARD.symbols[:62] == BASE64_URLSAFE.symbols[:62]
        assert BASE64_STANDARD.symbols[62:] == "+/"
        assert BASE64_URLSAFE.symbols[62:] == "-_"
        assert "=" not in BASE64_STANDARD

    def test_bytes256_is_identity(self):
        assert [ord(s) for s in BYTES256.symbols] == list(range(256))

    def test_hex_case_insensitive_lookup(self):
        assert HEXADECIMAL.case_insensitive
        assert HEXADECIMAL.digit_of("F") == HEXADECIMAL.digit_of("f") == 15
        assert HEXADECIMAL.symbol_of(15) == "f"
        assert "F" in HEXADECIMAL

    def test_render(self):
        assert HEXADECIMAL.render([0, 10, 15]) == "0af"
        assert BINARY.render([]) == ""


@pytest.mark.unit
class TestAlphabetLookup:

    def test_digit_of_unknown_symbol(self):
        with pytest.raises(InvalidSymbolError) as exc_info:
            DECIMAL.digit_of("x", position=4)
        assert exc_info.value.symbol == "x"
        assert exc_info.value.position == 4
        assert exc_info.value.radix == 10

    def test_digits_of_with_offset(self):
        assert DECIMAL.digits_of("0409") == [0, 4, 0, 9]
        with pytest.raises(InvalidSymbolError) as exc_info:
            DECIMAL.digits_of("12x", offset=10)
        assert exc_info.value.position == 12

    @pytest.mark.parametrize("digit", [-1, 2, 100])
    def test_symbol_of_out_of_range(self, digit):
        with pytest.raises(ValueError):
            BINARY.symbol_of(digit)


@pytest.mark.unit
class TestAlphabetConstruction:

    def test_duplicate_symbols_rejected(self):
        with pytest.raises(ValueError):
            Alphabet("0120", name="dup")

    def test_too_small_rejected(self):
        with pytest.raises(ValueError):
            Alphabet("0", name="unary")

    def test_non_string_rejected(self):
        with pytest.raises(ValueError):
            Alphabet(["0", "1"], name="list")

    def test_ambiguous_case_insensitive_rejected(self):
        with pytest.raises(ValueError):
            Alphabet("aA", name="mixed", case_insensitive=True)

    def test_value_equality(self):
        assert Alphabet("01", name="other") == BINARY
        assert hash(Alphabet("01", name="other")) == hash(BINARY)
        assert Alphabet("0123456789abcdef", name="hex") != HEXADECIMAL
        assert BINARY != "01"

    def test_repr(self):
        assert repr(HEXADECIMAL) == "Alphabet(name='hexadecimal', radix=16)"
