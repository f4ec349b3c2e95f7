from __future__ import annotations

from dataclasses import dataclass

from bitcrc.engine.config import CrcConfig

NAME = "CRC-32/BZIP2"
ALIASES = ("CRC-32/AAL5", "B-CRC-32")


@dataclass(frozen=True)
class Config(CrcConfig):
    """CRC-32/BZIP2: the IEEE polynomial without any reflection."""
    width: int = 32
    polynomial: int = 0x04C11DB7
    initial_remainder: int = 0xFFFFFFFF
    final_xor: int = 0xFFFFFFFF
    reflect_input: bool = False
    reflect_output: bool = False
    check: int = 0xFC891918
