"""
Shared codec instances.

The six codecs are built once, when this module is first imported. Module
import is serialised by the interpreter, so concurrent first use can never
observe two different instances.
"""

import logging
from enum import Enum
from typing import Tuple, Union

from .codec import BaseCodec
from .errors import UnsupportedRadixError
from .options import SUPPORTED_RADICES, CodecOptions, create_codec

logger = logging.getLogger(__name__)

BASE2: BaseCodec = create_codec(CodecOptions(radix=2))
BASE10: BaseCodec = create_codec(CodecOptions(radix=10))
BASE16: BaseCodec = create_codec(CodecOptions(radix=16))
BASE64: BaseCodec = create_codec(CodecOptions(radix=64))
BASE91: BaseCodec = create_codec(CodecOptions(radix=91))
BASE256: BaseCodec = create_codec(CodecOptions(radix=256))


class BaseType(Enum):
    """Supported radices, each bound to its shared codec."""

    BASE2 = 2
    BASE10 = 10
    BASE16 = 16
    BASE64 = 64
    BASE91 = 91
    BASE256 = 256

    @property
    def radix(self) -> int:
        return self.value

    @property
    def codec(self) -> BaseCodec:
        return _CODECS[self.value]


_CODECS = {
    2: BASE2,
    10: BASE10,
    16: BASE16,
    64: BASE64,
    91: BASE91,
    256: BASE256,
}


def supported_radices() -> Tuple[int, ...]:
    """Radices with a shared codec, ascending."""
    return SUPPORTED_RADICES


def get_codec(key: Union[BaseType, int, str]) -> BaseCodec:
    """
    Look up a shared codec.

    Args:
        key: A ``BaseType``, a radix such as ``64``, or a name such as
            ``"base64"``, ``"BASE64"`` or ``"64"``

    Returns:
        The shared codec instance

    Raises:
        UnsupportedRadixError: If no codec matches ``key``
    """
    if isinstance(key, BaseType):
        return key.codec
    if isinstance(key, bool):
        raise UnsupportedRadixError(key)

    radix = key
    if isinstance(key, str):
        name = key.strip().lower()
        if name.startswith("base"):
            name = name[4:]
        radix = int(name) if name.isdecimal() else None

    codec = _CODECS.get(radix)
    if codec is None:
        logger.debug(f"No codec registered for {key!r}")
        raise UnsupportedRadixError(key, {"supported": list(SUPPORTED_RADICES)})
    return codec


__all__ = [
    "BASE2",
    "BASE10",
    "BASE16",
    "BASE64",
    "BASE91",
    "BASE256",
    "BaseType",
    "get_codec",
    "supported_radices",
]
