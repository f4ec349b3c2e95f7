from __future__ import annotations

from dataclasses import dataclass

from bitcrc.engine.config import CrcConfig

NAME = "CRC-16/ARC"
ALIASES = ("CRC-16", "ARC", "CRC-16/LHA", "CRC-IBM")


@dataclass(frozen=True)
class Config(CrcConfig):
    """
    CRC-16/ARC, the "CRC-16" of the ARC and LHA archivers.
      width=16 poly=0x8005 init=0x0000 refin=true refout=true xorout=0x0000
      Check("123456789") = 0xBB3D
    """
    width: int = 16
    polynomial: int = 0x8005
    initial_remainder: int = 0x0000
    final_xor: int = 0x0000
    reflect_input: bool = True
    reflect_output: bool = True
    check: int = 0xBB3D
