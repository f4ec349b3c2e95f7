from __future__ import annotations

from dataclasses import dataclass

from bitcrc.engine.config import CrcConfig

NAME = "CRC-16/IBM-3740"
ALIASES = ("CRC-16/CCITT-FALSE", "CRC-CCITT-FALSE", "CRC-CCITT", "CRC-16/AUTOSAR")


@dataclass(frozen=True)
class Config(CrcConfig):
    """
    CRC-16/IBM-3740, commonly called CRC-CCITT or CCITT-FALSE.
      width=16 poly=0x1021 init=0xFFFF refin=false refout=false xorout=0x0000
      Check("123456789") = 0x29B1

    Same parameters as binascii.crc_hqx(data, 0xFFFF).
    """
    width: int = 16
    polynomial: int = 0x1021
    initial_remainder: int = 0xFFFF
    final_xor: int = 0x0000
    reflect_input: bool = False
    reflect_output: bool = False
    check: int = 0x29B1
