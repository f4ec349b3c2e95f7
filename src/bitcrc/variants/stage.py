from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict
import importlib
import logging
import pkgutil

from bitcrc.engine.config import CrcConfig
from bitcrc.engine.divider import compute_crc

logger = logging.getLogger(__name__)

CHECK_MESSAGE = b"123456789"


@dataclass(frozen=True)
class Config:
    """
    Variant stage config.

    module: preset module name (e.g. "crc32_iso_hdlc")
    module_cfg: instance of that module's Config (or None -> defaults)
    """
    module: str = "crc32_iso_hdlc"
    module_cfg: Any = None


def available_modules() -> list[str]:
    """
    Enumerate available preset modules under bitcrc/variants/modules.
    """
    pkg = importlib.import_module(f"{__package__}.modules")
    names = [m.name for m in pkgutil.iter_modules(pkg.__path__)]
    return sorted([n for n in names if not n.startswith("_")])


def _import_variant_module(name: str):
    if not isinstance(name, str) or not name:
        raise ValueError("cfg.module must be a non-empty string")
    mod = importlib.import_module(f"{__package__}.modules.{name}")

    for attr in ("Config", "NAME", "ALIASES"):
        if not hasattr(mod, attr):
            raise AttributeError(f"variant module '{name}' missing {attr}")
    return mod


def _name_index() -> Dict[str, str]:
    """
    Lower-cased module name, catalogue name and aliases -> module name.
    """
    index: Dict[str, str] = {}
    for module_name in available_modules():
        mod = _import_variant_module(module_name)
        for key in (module_name, mod.NAME, *mod.ALIASES):
            key = key.lower()
            if key in index and index[key] != module_name:
                raise ValueError(
                    f"variant name '{key}' claimed by both '{index[key]}' and '{module_name}'"
                )
            index[key] = module_name
    return index


def resolve_name(name: str) -> str:
    """
    Module name for a module name, catalogue name or alias (case-insensitive).
    """
    if not isinstance(name, str) or not name:
        raise ValueError("name must be a non-empty string")
    module_name = _name_index().get(name.lower())
    if module_name is None:
        raise KeyError(f"unknown CRC variant: {name!r}")
    logger.debug("variant %r -> module %s", name, module_name)
    return module_name


def get_config(name: str) -> CrcConfig:
    """
    Default configuration of a named preset.
    """
    return _import_variant_module(resolve_name(name)).Config()


def _resolve_module_and_cfg(cfg: Config):
    mod = _import_variant_module(cfg.module)

    module_cfg = cfg.module_cfg if cfg.module_cfg is not None else mod.Config()
    if not isinstance(module_cfg, CrcConfig):
        raise TypeError(f"module_cfg for '{cfg.module}' must be a CrcConfig")
    return mod, module_cfg


def compute(data: Any, *, cfg: Config) -> int:
    """
    Stage compute: CRC of data with the selected preset.
    """
    _, module_cfg = _resolve_module_and_cfg(cfg)
    return compute_crc(data, cfg=module_cfg)


def self_check(name: str) -> bool:
    """
    True if the preset reproduces its catalogue check value over b"123456789".
    """
    module_cfg = get_config(name)
    if module_cfg.check is None:
        raise ValueError(f"variant {name!r} has no check value")
    got = compute_crc(CHECK_MESSAGE, cfg=module_cfg)
    logger.debug("self-check %s: got 0x%X expected 0x%X", name, got, module_cfg.check)
    return got == module_cfg.check
