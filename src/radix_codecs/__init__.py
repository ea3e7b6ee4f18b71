"""
Radix Codecs

Binary-to-text codecs for radices 2, 10, 16, 64, 91 and 256 sharing one
contract: ``decode(encode(data)) == data`` for every byte sequence,
including the empty one and those starting with zero bytes.
"""

from .alphabet import (
    Alphabet,
    BASE64_STANDARD,
    BASE64_URLSAFE,
    BASE91 as BASE91_ALPHABET,
    BINARY,
    BYTES256,
    DECIMAL,
    HEXADECIMAL,
)
from .codec import Base256Codec, BaseCodec, PositionalCodec, PowerOfTwoCodec
from .errors import *
from .identifier import decode_uuid, encode_uuid
from .options import SUPPORTED_RADICES, CodecOptions, create_codec
from .registry import (
    BASE2,
    BASE10,
    BASE16,
    BASE64,
    BASE91,
    BASE256,
    BaseType,
    get_codec,
    supported_radices,
)

__version__ = "1.0.0"
__all__ = [
    # Shared codecs
    "BASE2",
    "BASE10",
    "BASE16",
    "BASE64",
    "BASE91",
    "BASE256",
    "BaseType",
    "get_codec",
    "supported_radices",

    # Engine
    "BaseCodec",
    "PositionalCodec",
    "PowerOfTwoCodec",
    "Base256Codec",
    "CodecOptions",
    "SUPPORTED_RADICES",
    "create_codec",

    # Alphabets
    "Alphabet",
    "BINARY",
    "DECIMAL",
    "HEXADECIMAL",
    "BASE64_STANDARD",
    "BASE64_URLSAFE",
    "BASE91_ALPHABET",
    "BYTES256",

    # Identifiers
    "encode_uuid",
    "decode_uuid",

    # Errors
    "ErrorCode",
    "CodecError",
    "UnsupportedRadixError",
    "EncodingError",
    "DecodingError",
    "InvalidSymbolError",
    "error_from_dict",
]
