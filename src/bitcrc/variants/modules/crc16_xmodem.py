from __future__ import annotations

from dataclasses import dataclass

from bitcrc.engine.config import CrcConfig

NAME = "CRC-16/XMODEM"
ALIASES = ("XMODEM", "ZMODEM", "CRC-16/ACORN")


@dataclass(frozen=True)
class Config(CrcConfig):
    """CRC-16/XMODEM: CCITT polynomial, zero seed, MSB-first."""
    width: int = 16
    polynomial: int = 0x1021
    initial_remainder: int = 0x0000
    final_xor: int = 0x0000
    reflect_input: bool = False
    reflect_output: bool = False
    check: int = 0x31C3
