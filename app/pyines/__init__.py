"""Decoder and loader for iNES (.nes) cartridge images."""

from pyines.cartridge import CartridgeImage
from pyines.errors import EmptyProgramRom, InvalidSignature, LoadStage, PyinesError, ShortRead
from pyines.header import Header, Mirroring, decode_header
from pyines.loader import is_valid_file, load, load_bytes, load_file
from pyines.mapper import mapper_name

__all__ = [
    "CartridgeImage",
    "EmptyProgramRom",
    "Header",
    "InvalidSignature",
    "LoadStage",
    "Mirroring",
    "PyinesError",
    "ShortRead",
    "decode_header",
    "is_valid_file",
    "load",
    "load_bytes",
    "load_file",
    "mapper_name",
]
