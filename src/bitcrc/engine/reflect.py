from __future__ import annotations


def reflect(value: int, n_bits: int) -> int:
    """
    Reverse the order of the lowest n_bits bits of value.

    Bit 0 of the input becomes bit n_bits-1 of the output and so on.
    Bits at or above n_bits are ignored, so the result always fits in n_bits.
    reflect(reflect(x, n), n) == x for any x < 2**n.
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError("reflect: value must be int")
    if not isinstance(n_bits, int) or isinstance(n_bits, bool):
        raise TypeError("reflect: n_bits must be int")
    if value < 0:
        raise ValueError("reflect: value must be non-negative")
    if n_bits < 0:
        raise ValueError("reflect: n_bits must be non-negative")

    r = 0
    for _ in range(n_bits):
        r = (r << 1) | (value & 1)
        value >>= 1
    return r


# Read-only after import.
_REFLECTED_BYTES = tuple(reflect(i, 8) for i in range(256))


def reflect_byte(b: int) -> int:
    """reflect(b, 8) for a single byte value, via lookup."""
    return _REFLECTED_BYTES[b & 0xFF]
