"""
Identifier text forms.

Renders 128-bit identifiers in any supported radix and reads them back.
The identifier is handled as its opaque 16 big-endian bytes.
"""

import uuid
from typing import Union

from .errors import DecodingError, ErrorCode
from .registry import BaseType, get_codec

IDENTIFIER_SIZE = 16


def encode_uuid(value: uuid.UUID, base: Union[BaseType, int, str] = BaseType.BASE16) -> str:
    """Encode a UUID's 16 bytes in the given radix."""
    return get_codec(base).encode(value.bytes)


def decode_uuid(text: str, base: Union[BaseType, int, str] = BaseType.BASE16) -> uuid.UUID:
    """
    Decode text produced by :func:`encode_uuid`.

    Raises:
        InvalidSymbolError: If ``text`` holds a symbol outside the alphabet
        DecodingError: If the decoded value is not exactly 16 bytes long
    """
    data = get_codec(base).decode(text)
    if len(data) != IDENTIFIER_SIZE:
        raise DecodingError(
            f"Identifier must decode to {IDENTIFIER_SIZE} bytes, got {len(data)}",
            ErrorCode.INVALID_LENGTH,
            {"length": len(data)},
        )
    return uuid.UUID(bytes=data)


__all__ = ["IDENTIFIER_SIZE", "encode_uuid", "decode_uuid"]
