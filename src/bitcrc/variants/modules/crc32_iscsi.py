from __future__ import annotations

from dataclasses import dataclass

from bitcrc.engine.config import CrcConfig

NAME = "CRC-32/ISCSI"
ALIASES = ("CRC-32C", "CRC-32/CASTAGNOLI")


@dataclass(frozen=True)
class Config(CrcConfig):
    """
    CRC-32/ISCSI (Castagnoli, "CRC-32C")
      width=32 poly=0x1EDC6F41 init=0xFFFFFFFF refin=true refout=true xorout=0xFFFFFFFF
      Check("123456789") = 0xE3069283
    """
    width: int = 32
    polynomial: int = 0x1EDC6F41
    initial_remainder: int = 0xFFFFFFFF
    final_xor: int = 0xFFFFFFFF
    reflect_input: bool = True
    reflect_output: bool = True
    check: int = 0xE3069283
