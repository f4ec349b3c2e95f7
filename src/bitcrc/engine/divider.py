from __future__ import annotations

import logging
from typing import Any

from bitcrc.engine.config import CrcConfig
from bitcrc.engine.reflect import reflect, reflect_byte
from bitcrc.utils.bitops import as_message, format_bits, message_bits

logger = logging.getLogger(__name__)


def compute_crc(message: Any, *, cfg: CrcConfig) -> int:
    """
    CRC of `message` under `cfg`, by modulo-2 long division one byte at a time.

    For each message byte (bit-reversed first if cfg.reflect_input) the byte is
    XORed into the top 8 bits of the remainder, then the remainder is shifted
    left 8 times. Whenever the bit about to be shifted out is 1, the truncated
    polynomial is XORed in: the implicit x^W term of the full polynomial would
    clear that bit, and it leaves the register anyway.

    After the last byte the remainder is XORed with cfg.final_xor and, if
    cfg.reflect_output, all W bits are reversed.

    An empty message yields initial_remainder ^ final_xor (reflected if
    reflect_output).
    """
    if not isinstance(cfg, CrcConfig):
        raise TypeError("compute_crc: cfg must be a CrcConfig")
    data = as_message(message)

    width = cfg.width
    mask = cfg.mask
    top_bit = cfg.top_bit
    poly = cfg.polynomial
    shift = width - 8
    trace = logger.isEnabledFor(logging.DEBUG)

    if trace:
        logger.debug("trunc. polynomial: %s", format_bits(poly, width))
        logger.debug("initial remainder: %s", format_bits(cfg.initial_remainder, width))
        logger.debug("final xor:         %s", format_bits(cfg.final_xor, width))
        logger.debug("message (%d bytes): %s", len(data), message_bits(data))

    remainder = cfg.initial_remainder

    for i, b in enumerate(data):
        if cfg.reflect_input:
            b = reflect_byte(b)

        remainder ^= b << shift

        for _ in range(8):
            if remainder & top_bit:
                remainder = ((remainder << 1) ^ poly) & mask
            else:
                remainder = (remainder << 1) & mask

        if trace:
            logger.debug("byte %d: remainder %s", i, format_bits(remainder, width))

    remainder ^= cfg.final_xor

    if cfg.reflect_output:
        remainder = reflect(remainder, width)

    if trace:
        logger.debug("crc: %s", format_bits(remainder, width))
    return remainder


def crc(polynomial: int, initial_remainder: int, final_xor: int,
        reflect_input: bool, reflect_output: bool, message: Any,
        *, width: int = 32) -> int:
    """
    Flat-argument form of compute_crc().

    Builds (and validates) a CrcConfig from the arguments, so parameter
    errors surface as TypeError/ValueError before any byte is processed.
    """
    cfg = CrcConfig(
        width=width,
        polynomial=polynomial,
        initial_remainder=initial_remainder,
        final_xor=final_xor,
        reflect_input=reflect_input,
        reflect_output=reflect_output,
    )
    return compute_crc(message, cfg=cfg)
