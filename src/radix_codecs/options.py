"""
Codec construction options.

Provides a typed option model describing which codec to build and a factory
that turns options into a ready codec instance.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .alphabet import (
    Alphabet,
    BASE64_STANDARD,
    BASE64_URLSAFE,
    BASE91,
    BINARY,
    BYTES256,
    DECIMAL,
    HEXADECIMAL,
)
from .codec import Base256Codec, BaseCodec, PositionalCodec, PowerOfTwoCodec
from .errors import UnsupportedRadixError

logger = logging.getLogger(__name__)

_ALPHABETS: Dict[int, Alphabet] = {
    2: BINARY,
    10: DECIMAL,
    16: HEXADECIMAL,
    64: BASE64_STANDARD,
    91: BASE91,
    256: BYTES256,
}

SUPPORTED_RADICES = tuple(sorted(_ALPHABETS))


class CodecOptions(BaseModel):
    """
    Options for building a codec.

    ``case_insensitive`` left as None keeps the alphabet default (only
    radix 16 reads both letter cases). ``fast_path`` False forces the general
    big-integer engine even where a byte-aligned shortcut exists.
    """
    radix: int = Field(description="Target radix")
    base64_variant: Literal["standard", "urlsafe"] = Field(
        default="standard",
        alias="base64Variant",
        description="Symbol set for radix 64",
    )
    case_insensitive: Optional[bool] = Field(
        default=None,
        alias="caseInsensitive",
        description="Accept both letter cases when decoding",
    )
    fast_path: bool = Field(default=True, alias="fastPath", description="Use byte-aligned shortcuts")

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("radix")
    @classmethod
    def validate_radix(cls, v: int) -> int:
        if v not in _ALPHABETS:
            raise ValueError(f"radix must be one of {SUPPORTED_RADICES}, got {v}")
        return v

    @model_validator(mode="after")
    def validate_alphabet(self) -> "CodecOptions":
        # Mixed-case alphabets cannot be read case-insensitively
        self.alphabet()
        return self

    def alphabet(self) -> Alphabet:
        """Resolve the alphabet these options describe."""
        if self.radix == 64 and self.base64_variant == "urlsafe":
            base = BASE64_URLSAFE
        else:
            base = _ALPHABETS[self.radix]
        if self.case_insensitive is None or self.case_insensitive == base.case_insensitive:
            return base
        return Alphabet(base.symbols, name=base.name, case_insensitive=self.case_insensitive)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a camelCase dictionary."""
        result: Dict[str, Any] = {"radix": self.radix}
        if self.radix == 64:
            result["base64Variant"] = self.base64_variant
        if self.case_insensitive is not None:
            result["caseInsensitive"] = self.case_insensitive
        if not self.fast_path:
            result["fastPath"] = self.fast_path
        return result


def create_codec(options: Optional[CodecOptions] = None, **kwargs: Any) -> BaseCodec:
    """
    Build a codec from options.

    Args:
        options: Prepared options; mutually exclusive with ``kwargs``
        **kwargs: Fields used to build ``CodecOptions`` when ``options`` is None

    Returns:
        A new codec instance

    Raises:
        UnsupportedRadixError: If the radix has no alphabet
    """
    if options is None:
        radix = kwargs.get("radix")
        if radix not in _ALPHABETS:
            raise UnsupportedRadixError(radix, {"supported": list(SUPPORTED_RADICES)})
        options = CodecOptions(**kwargs)
    elif kwargs:
        raise TypeError("create_codec() takes either options or keyword fields, not both")

    alphabet = options.alphabet()
    radix = alphabet.radix
    if not options.fast_path:
        codec: BaseCodec = PositionalCodec(alphabet)
    elif radix == 256:
        codec = Base256Codec(alphabet)
    elif radix & (radix - 1) == 0:
        codec = PowerOfTwoCodec(alphabet)
    else:
        codec = PositionalCodec(alphabet)

    logger.debug(f"Created {codec!r} from {options.to_dict()}")
    return codec


__all__ = [
    "CodecOptions",
    "SUPPORTED_RADICES",
    "create_codec",
]
