from __future__ import annotations

from typing import Any, Iterable

import numpy as np


def as_message(data: Any) -> bytes:
    """
    Coerce a message buffer to immutable bytes.

    Accepts bytes, bytearray, memoryview, numpy integer arrays (any shape,
    flattened in C order) and iterables of ints. Every element must be a
    byte value 0..255. The caller's buffer is copied, never modified.
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        raise TypeError("message must be bytes-like, not str (encode it first)")

    if isinstance(data, np.ndarray):
        arr = data.reshape(-1)
        if arr.dtype == np.uint8:
            return arr.tobytes()
        if not np.issubdtype(arr.dtype, np.integer):
            raise TypeError(f"message array must have an integer dtype, got {arr.dtype}")
        if arr.size and (int(arr.min()) < 0 or int(arr.max()) > 0xFF):
            raise ValueError("message array values must be in range [0,255]")
        return arr.astype(np.uint8).tobytes()

    if not isinstance(data, Iterable):
        raise TypeError("message must be bytes-like or an iterable of ints")

    out = bytearray()
    for v in data:
        if not isinstance(v, (int, np.integer)) or isinstance(v, bool):
            raise TypeError("message elements must be ints")
        if not (0 <= v <= 0xFF):
            raise ValueError(f"message element out of range [0,255]: {v}")
        out.append(int(v))
    return bytes(out)


def format_bits(value: int, width: int) -> str:
    """Zero-padded binary string of exactly `width` digits."""
    if value < 0 or value >> width:
        raise ValueError(f"value does not fit in {width} bits")
    return format(value, f"0{width}b")


def format_hex(value: int, width: int) -> str:
    digits = (width + 3) // 4
    if value < 0 or value >> width:
        raise ValueError(f"value does not fit in {width} bits")
    return f"0x{value:0{digits}X}"


def message_bits(data: bytes) -> str:
    """MSB-first bit pattern of a message, 8 digits per byte, no separators."""
    return "".join(format(b, "08b") for b in data)
