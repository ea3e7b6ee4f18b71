"""
Radix Codec Error Model

This module provides the error taxonomy for the radix codecs. Every failure
surfaces as a typed exception carrying a stable error code, so callers can
tell an empty result (valid for empty input) apart from malformed input.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Codec error codes."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    UNSUPPORTED_RADIX = 2

    # Encoding errors (100-199)
    ENCODING_ERROR = 100

    # Decoding errors (200-299)
    DECODING_ERROR = 200
    INVALID_SYMBOL = 201
    INVALID_LENGTH = 202


class CodecError(Exception):
    """
    Base exception for all codec errors.

    Provides structured error information: a message, an error code,
    free-form details and the underlying cause, if any.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a codec error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CodecError':
        """Create error from dictionary representation."""
        code = ErrorCode(data.get("code", ErrorCode.UNKNOWN))
        message = data.get("message", "Unknown error")
        details = data.get("details")
        return cls(message, code, details)


class UnsupportedRadixError(CodecError):
    """No codec exists for the requested radix."""

    def __init__(self, radix: Any, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        merged = {"radix": radix}
        merged.update(details or {})
        super().__init__(f"Unsupported radix: {radix!r}", ErrorCode.UNSUPPORTED_RADIX, merged, cause)
        self.radix = radix


class EncodingError(CodecError):
    """Input could not be interpreted as a byte sequence."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.ENCODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class DecodingError(CodecError):
    """Text could not be decoded back into bytes."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.DECODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class InvalidSymbolError(DecodingError):
    """A character outside the alphabet was found in the text."""

    def __init__(self, symbol: str, position: Optional[int], radix: int,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        where = f" at position {position}" if position is not None else ""
        message = f"Invalid symbol {symbol!r}{where} for radix {radix}"
        merged: Dict[str, Any] = {"symbol": symbol, "position": position, "radix": radix}
        merged.update(details or {})
        super().__init__(message, ErrorCode.INVALID_SYMBOL, merged, cause)
        self.symbol = symbol
        self.position = position
        self.radix = radix


def error_from_dict(data: Dict[str, Any]) -> CodecError:
    """
    Rebuild the most specific error class from a serialized error.

    Args:
        data: Dictionary produced by ``CodecError.to_dict()``

    Returns:
        Error instance matching the serialized code
    """
    try:
        code = ErrorCode(data.get("code", ErrorCode.UNKNOWN))
    except ValueError:
        code = ErrorCode.UNKNOWN

    message = data.get("message", "Unknown error")
    details = dict(data.get("details") or {})

    if code == ErrorCode.INVALID_SYMBOL and "symbol" in details and "radix" in details:
        symbol = details.pop("symbol")
        position = details.pop("position", None)
        radix = details.pop("radix")
        return InvalidSymbolError(symbol, position, radix, details or None)
    elif code == ErrorCode.UNSUPPORTED_RADIX and "radix" in details:
        radix = details.pop("radix")
        return UnsupportedRadixError(radix, details or None)
    elif code in (ErrorCode.DECODING_ERROR, ErrorCode.INVALID_SYMBOL, ErrorCode.INVALID_LENGTH):
        return DecodingError(message, code, details or None)
    elif code == ErrorCode.ENCODING_ERROR:
        return EncodingError(message, code, details or None)
    else:
        return CodecError(message, code, details or None)


__all__ = [
    "ErrorCode",
    "CodecError",
    "UnsupportedRadixError",
    "EncodingError",
    "DecodingError",
    "InvalidSymbolError",
    "error_from_dict",
]
