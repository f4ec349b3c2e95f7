from __future__ import annotations

from pathlib import Path


def repo_root() -> Path:
    """
    Find the repository root by walking upward until we find pyproject.toml.
    """
    start = Path(__file__).resolve()
    for p in [start] + list(start.parents):
        if (p / "pyproject.toml").exists():
            return p
    raise RuntimeError("repo_root(): could not find pyproject.toml walking upward")


def examples_dir() -> Path:
    return repo_root() / "examples"


# IHDR chunk type + data of a 908x720 RGBA PNG; its CRC-32 is stored in the file.
PNG_IHDR = bytes([
    0x49, 0x48, 0x44, 0x52,
    0x00, 0x00, 0x03, 0x8C,
    0x00, 0x00, 0x02, 0xD0,
    0x08, 0x06, 0x00, 0x00, 0x00,
])
PNG_IHDR_CRC32 = 0xDBF1FE9A
