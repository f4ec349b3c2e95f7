from __future__ import annotations

from dataclasses import dataclass

from bitcrc.engine.config import CrcConfig

NAME = "CRC-32/ISO-HDLC"
ALIASES = ("CRC-32", "CRC-32/ADCCP", "CRC-32/V-42", "PKZIP")


@dataclass(frozen=True)
class Config(CrcConfig):
    """
    CRC-32/ISO-HDLC (aka "IEEE 802.3", zlib, PNG)
      width=32 poly=0x04C11DB7 init=0xFFFFFFFF refin=true refout=true xorout=0xFFFFFFFF
      Check("123456789") = 0xCBF43926

    Must agree with zlib.crc32() for every input.
    """
    width: int = 32
    polynomial: int = 0x04C11DB7
    initial_remainder: int = 0xFFFFFFFF
    final_xor: int = 0xFFFFFFFF
    reflect_input: bool = True
    reflect_output: bool = True
    check: int = 0xCBF43926
