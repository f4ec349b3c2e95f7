from __future__ import annotations

from dataclasses import dataclass

from bitcrc.engine.config import CrcConfig

NAME = "CRC-16/KERMIT"
ALIASES = ("CRC-16/CCITT-TRUE", "KERMIT")


@dataclass(frozen=True)
class Config(CrcConfig):
    """
    CRC-16/KERMIT: the CCITT polynomial processed LSB-first.
      width=16 poly=0x1021 init=0x0000 refin=true refout=true xorout=0x0000
    """
    width: int = 16
    polynomial: int = 0x1021
    initial_remainder: int = 0x0000
    final_xor: int = 0x0000
    reflect_input: bool = True
    reflect_output: bool = True
    check: int = 0x2189
