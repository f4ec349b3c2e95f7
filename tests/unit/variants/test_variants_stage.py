import binascii
import zlib

import numpy as np
import pytest

from bitcrc.engine.config import CrcConfig
from bitcrc.variants import stage as variant_stage
from bitcrc.variants.modules.crc16_ibm_3740 import Config as Crc16Ibm3740Config


def test_available_modules_lists_all_presets():
    assert variant_stage.available_modules() == [
        "crc16_arc",
        "crc16_ibm_3740",
        "crc16_kermit",
        "crc16_xmodem",
        "crc32_bzip2",
        "crc32_iscsi",
        "crc32_iso_hdlc",
        "crc64_xz",
        "crc8_smbus",
    ]


@pytest.mark.parametrize("module_name", variant_stage.available_modules())
def test_every_preset_reproduces_its_check_value(module_name: str):
    mod = variant_stage._import_variant_module(module_name)

    # Project invariant: module Config must be default-constructible
    try:
        module_cfg = mod.Config()
    except TypeError as e:
        pytest.fail(
            f"variant module '{module_name}' Config() must be default-constructible. Error: {e}"
        )

    assert isinstance(module_cfg, CrcConfig)
    assert module_cfg.check is not None

    cfg = variant_stage.Config(module=module_name, module_cfg=module_cfg)
    assert variant_stage.compute(variant_stage.CHECK_MESSAGE, cfg=cfg) == module_cfg.check
    assert variant_stage.self_check(module_name)
    assert variant_stage.resolve_name(mod.NAME) == module_name


@pytest.mark.parametrize(
    "name, module_name",
    [
        ("CRC-32", "crc32_iso_hdlc"),
        ("crc-32", "crc32_iso_hdlc"),
        ("CRC-32/ISO-HDLC", "crc32_iso_hdlc"),
        ("CRC-32C", "crc32_iscsi"),
        ("CRC-CCITT", "crc16_ibm_3740"),
        ("CRC-16/CCITT-FALSE", "crc16_ibm_3740"),
        ("CRC-16", "crc16_arc"),
        ("CRC-8", "crc8_smbus"),
        ("crc64_xz", "crc64_xz"),
    ],
)
def test_resolve_name_accepts_names_and_aliases(name, module_name):
    assert variant_stage.resolve_name(name) == module_name


def test_resolve_name_unknown_raises_key_error():
    with pytest.raises(KeyError):
        variant_stage.resolve_name("CRC-7/NOPE")


def test_resolve_name_rejects_empty():
    with pytest.raises(ValueError):
        variant_stage.resolve_name("")


def test_get_config_returns_preset_parameters():
    cfg = variant_stage.get_config("CRC-32")
    assert cfg.width == 32
    assert cfg.polynomial == 0x04C11DB7
    assert cfg.initial_remainder == 0xFFFFFFFF
    assert cfg.final_xor == 0xFFFFFFFF
    assert cfg.reflect_input and cfg.reflect_output

    assert variant_stage.get_config("CRC-64/XZ").width == 64


def test_default_stage_config_is_crc32():
    cfg = variant_stage.Config()
    assert variant_stage.compute(b"123456789", cfg=cfg) == 0xCBF43926
    assert variant_stage.compute(b"", cfg=cfg) == 0x00000000


def test_module_cfg_override_is_used():
    # CCITT polynomial with a zero seed is CRC-16/XMODEM
    module_cfg = Crc16Ibm3740Config(initial_remainder=0x0000)
    cfg = variant_stage.Config(module="crc16_ibm_3740", module_cfg=module_cfg)
    assert variant_stage.compute(b"123456789", cfg=cfg) == 0x31C3


def test_module_cfg_must_be_crc_config():
    cfg = variant_stage.Config(module="crc8_smbus", module_cfg=object())
    with pytest.raises(TypeError):
        variant_stage.compute(b"abc", cfg=cfg)


def test_bad_module_names():
    with pytest.raises(ValueError):
        variant_stage.compute(b"abc", cfg=variant_stage.Config(module=""))
    with pytest.raises(ImportError):
        variant_stage.compute(b"abc", cfg=variant_stage.Config(module="crc99_missing"))


def test_crc32_preset_matches_zlib():
    cfg = variant_stage.Config(module="crc32_iso_hdlc")
    rng = np.random.default_rng(11)
    for n in (0, 1, 16, 300):
        msg = rng.bytes(n)
        assert variant_stage.compute(msg, cfg=cfg) == zlib.crc32(msg)


def test_ccitt_preset_matches_crc_hqx():
    cfg = variant_stage.Config(module="crc16_ibm_3740")
    for msg in (b"", b"1234", b"\x00" * 10, bytes(range(256))):
        assert variant_stage.compute(msg, cfg=cfg) == binascii.crc_hqx(msg, 0xFFFF)
