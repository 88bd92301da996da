"""Key encoding for JumpHasher.

Turns Python values into the byte stream fed into an incremental hash. The
layout matches the Rust standard library's ``Hash`` implementations, so the
same value hashed with the same hasher lands in the same bucket on both sides:

- bytes-like: 8-byte little-endian length prefix, then the raw bytes
- str: UTF-8 bytes followed by a 0xFF terminator
- bool: one byte
- int: 8 bytes little-endian (i64 / u64)
- tuple: item encodings concatenated
- list: 8-byte little-endian length prefix, then item encodings

JumpHasher.update() bypasses this and feeds bytes unchanged.
"""

import numbers
from typing import Any

# str terminator: 0xFF never occurs in UTF-8, so the encoding is prefix-free
STR_TERMINATOR = b"\xff"

_INT_MIN = -(1 << 63)
_INT_MAX = (1 << 64) - 1


def _length_prefix(n: int) -> bytes:
    # usize on 64-bit targets
    return n.to_bytes(8, "little")


def _encode_int(value: int) -> bytes:
    if not (_INT_MIN <= value <= _INT_MAX):
        raise ValueError(
            f"int keys must fit in i64 or u64, got {value}"
        )
    return (value & _INT_MAX).to_bytes(8, "little")


def key_bytes(value: Any) -> bytes:
    """Encode a value into the bytes fed to an incremental hash.

    Args:
        value: bytes-like, str, bool, integer (numpy scalars included), or a
            tuple/list of those

    Returns:
        Encoded bytes

    Raises:
        TypeError: If the value (or a nested item) has an unsupported type
        ValueError: If an int falls outside the i64/u64 range

    Example:
        >>> key_bytes("test")
        b'test\\xff'
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        return _length_prefix(len(raw)) + raw
    if isinstance(value, str):
        return value.encode("utf-8") + STR_TERMINATOR
    if isinstance(value, bool):
        return b"\x01" if value else b"\x00"
    if isinstance(value, numbers.Integral):
        return _encode_int(int(value))
    if isinstance(value, tuple):
        return b"".join(key_bytes(item) for item in value)
    if isinstance(value, list):
        return _length_prefix(len(value)) + b"".join(key_bytes(item) for item in value)

    raise TypeError(f"Cannot encode key of type {type(value).__name__}")
