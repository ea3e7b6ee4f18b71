from .parity import assert_bytes_equal

__all__ = [
    "assert_bytes_equal",
]
