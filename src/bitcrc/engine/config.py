from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


MIN_WIDTH = 8   # one message byte is folded into the top of the register
MAX_WIDTH = 64


@dataclass(frozen=True)
class CrcConfig:
    """
    Parameter set of one CRC algorithm.

    width:             register width W in bits, 8..64
    polynomial:        truncated generator polynomial (implicit x^W term omitted)
    initial_remainder: register seed before the first message byte
    final_xor:         XORed into the remainder after the last message byte
    reflect_input:     reverse the bits of every message byte before folding it in
    reflect_output:    reverse all W bits of the remainder after the final XOR
    check:             optional catalogue check value, CRC of b"123456789"

    Every W-bit field must already fit in W bits: out-of-range values are
    rejected here rather than masked, so a constructed config can never make
    the division fail.
    """
    width: int
    polynomial: int
    initial_remainder: int = 0
    final_xor: int = 0
    reflect_input: bool = False
    reflect_output: bool = False
    check: Optional[int] = None

    def __post_init__(self) -> None:
        width = _check_int("width", self.width, MIN_WIDTH, MAX_WIDTH)
        hi = (1 << width) - 1

        _check_int("polynomial", self.polynomial, 0, hi)
        _check_int("initial_remainder", self.initial_remainder, 0, hi)
        _check_int("final_xor", self.final_xor, 0, hi)
        _check_bool("reflect_input", self.reflect_input)
        _check_bool("reflect_output", self.reflect_output)
        if self.check is not None:
            _check_int("check", self.check, 0, hi)

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    @property
    def top_bit(self) -> int:
        return 1 << (self.width - 1)


# ----------------------------
# Internal
# ----------------------------

def _check_int(name: str, v: Any, lo: int, hi: int) -> int:
    if not isinstance(v, int) or isinstance(v, bool):
        raise TypeError(f"cfg.{name} must be int")
    if not (lo <= v <= hi):
        raise ValueError(f"cfg.{name} out of range [{lo},{hi}]")
    return v


def _check_bool(name: str, v: Any) -> bool:
    if not isinstance(v, bool):
        raise TypeError(f"cfg.{name} must be bool")
    return v
