"""
BaseCodec contract.

Every radix codec converts a complete in-memory byte sequence to text and
back, with ``decode(encode(data)) == data`` for every input. Implementations
are immutable and stateless, so one instance may be shared by any number of
threads.
"""

from __future__ import annotations
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Union

from ..alphabet import Alphabet
from ..errors import DecodingError, EncodingError

PathLike = Union[str, "os.PathLike[str]"]


class BaseCodec(ABC):
    """
    Abstract base class for binary-to-text radix codecs.

    Subclasses implement :meth:`encode` and :meth:`decode`; the file helpers
    are built on top of them.
    """

    def __init__(self, alphabet: Alphabet):
        self._alphabet = alphabet

    @property
    def alphabet(self) -> Alphabet:
        """Digit alphabet used by this codec."""
        return self._alphabet

    @property
    def radix(self) -> int:
        return self._alphabet.radix

    @property
    def name(self) -> str:
        return self._alphabet.name

    @abstractmethod
    def encode(self, data: Any) -> str:
        """
        Encode a byte sequence as text.

        Args:
            data: Bytes-like object or iterable of ints in 0..255

        Returns:
            Canonical encoded text

        Raises:
            EncodingError: If ``data`` is not a byte sequence
        """

    @abstractmethod
    def decode(self, text: str) -> bytes:
        """
        Decode text produced by :meth:`encode`.

        Args:
            text: Encoded text

        Returns:
            The original bytes

        Raises:
            InvalidSymbolError: If ``text`` holds a symbol outside the alphabet
            DecodingError: If ``text`` is not a string
        """

    def encode_file(self, path: PathLike) -> str:
        """
        Encode the full contents of a file.

        Raises:
            OSError: When the file cannot be read
        """
        return self.encode(Path(path).read_bytes())

    def decode_to_file(self, path: PathLike, text: str) -> None:
        """
        Decode text and write the bytes to a file, replacing its contents.

        The file is only opened once decoding has succeeded.

        Raises:
            InvalidSymbolError: If ``text`` cannot be decoded
            OSError: When the file cannot be written
        """
        data = self.decode(text)
        Path(path).write_bytes(data)

    @staticmethod
    def _to_bytes(data: Any) -> bytes:
        """Coerce supported byte sources to ``bytes``."""
        if isinstance(data, bytes):
            return data
        if isinstance(data, (bytearray, memoryview)):
            return bytes(data)
        # bytes(int) would silently allocate zero bytes, and str needs an explicit charset
        if isinstance(data, (str, int)):
            raise EncodingError(
                f"Expected a byte sequence, got {type(data).__name__}",
                details={"type": type(data).__name__},
            )
        try:
            return bytes(data)
        except (TypeError, ValueError) as e:
            raise EncodingError(
                f"Cannot interpret {type(data).__name__} as a byte sequence",
                details={"type": type(data).__name__},
                cause=e,
            ) from e

    @staticmethod
    def _to_text(text: Any) -> str:
        if not isinstance(text, str):
            raise DecodingError(
                f"Expected encoded text as str, got {type(text).__name__}",
                details={"type": type(text).__name__},
            )
        return text

    def __repr__(self) -> str:
        return f"{type(self).__name__}(radix={self.radix}, alphabet={self.name!r})"


__all__ = ["BaseCodec"]
