"""
Radix Codec Engine

Provides the conversion engine shared by every radix.

Key components:
- base.py: BaseCodec contract and file helpers
- magnitude.py: big-integer magnitude <-> digit conversion
- positional.py: general positional codec with leading-zero bookkeeping
- fast_paths.py: bit-packing and identity shortcuts for byte-aligned radices
"""

from .base import BaseCodec
from .fast_paths import Base256Codec, PowerOfTwoCodec
from .positional import PositionalCodec

__all__ = [
    "BaseCodec",
    "PositionalCodec",
    "PowerOfTwoCodec",
    "Base256Codec",
]
