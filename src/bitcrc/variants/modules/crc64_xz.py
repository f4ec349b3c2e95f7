from __future__ import annotations

from dataclasses import dataclass

from bitcrc.engine.config import CrcConfig

NAME = "CRC-64/XZ"
ALIASES = ("CRC-64/GO-ECMA",)


@dataclass(frozen=True)
class Config(CrcConfig):
    """
    CRC-64/XZ (ECMA-182 polynomial, reflected).
      Check("123456789") = 0x995DC9BBDF1939FA
    """
    width: int = 64
    polynomial: int = 0x42F0E1EBA9EA3693
    initial_remainder: int = 0xFFFFFFFFFFFFFFFF
    final_xor: int = 0xFFFFFFFFFFFFFFFF
    reflect_input: bool = True
    reflect_output: bool = True
    check: int = 0x995DC9BBDF1939FA
