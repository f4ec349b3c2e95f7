from __future__ import annotations

from dataclasses import dataclass

from bitcrc.engine.config import CrcConfig

NAME = "CRC-8/SMBUS"
ALIASES = ("CRC-8",)


@dataclass(frozen=True)
class Config(CrcConfig):
    """Plain 8-bit CRC, poly x^8+x^2+x+1, no reflection, zero seed."""
    width: int = 8
    polynomial: int = 0x07
    initial_remainder: int = 0x00
    final_xor: int = 0x00
    reflect_input: bool = False
    reflect_output: bool = False
    check: int = 0xF4
