import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from pyines.header import Header  # noqa: E402


def make_rom(
    prg_units: int = 1,
    chr_units: int = 1,
    flags6: int = 0,
    flags7: int = 0,
    *,
    trainer: bool = False,
    extra: bytes = b"",
) -> bytes:
    """Build an iNES image whose sections are filled with recognisable bytes."""
    if trainer:
        flags6 |= 0x04
    data = b"NES\x1a" + bytes((prg_units, chr_units, flags6, flags7)) + bytes(8)
    if trainer:
        data += b"\x77" * 512
    data += b"\xaa" * (prg_units * 0x4000)
    data += b"\x55" * (chr_units * 0x2000)
    return data + extra


@pytest.fixture
def rom_factory():
    return make_rom


@pytest.fixture
def nrom_header() -> Header:
    return Header.create(1, 1)
