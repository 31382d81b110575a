from dataclasses import dataclass
from enum import Enum
from typing import Final, final

from returns.result import Failure, Result, Success

from pyines.errors import InvalidSignature

HEADER_SIZE: Final[int] = 0x10  # 16 bytes
MAGIC: Final[bytes] = b"NES\x1a"
PRG_UNIT_SIZE: Final[int] = 0x4000  # 16 KB
CHR_UNIT_SIZE: Final[int] = 0x2000  # 8 KB

# flags6
FLAG6_VERTICAL: Final[int] = 0x01
FLAG6_BATTERY: Final[int] = 0x02
FLAG6_TRAINER: Final[int] = 0x04
FLAG6_FOUR_SCREEN: Final[int] = 0x08


@final
class Mirroring(Enum):
    """Nametable mirroring wired into the cartridge."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    FOUR_SCREEN = "four-screen"


def _mirroring(flags6: int) -> Mirroring:
    # four-screen wins over the vertical bit
    if flags6 & FLAG6_FOUR_SCREEN:
        return Mirroring.FOUR_SCREEN
    if flags6 & FLAG6_VERTICAL:
        return Mirroring.VERTICAL
    return Mirroring.HORIZONTAL


def _mapper_id(flags6: int, flags7: int) -> int:
    return (flags7 & 0xF0) | (flags6 >> 4)


@dataclass(frozen=True)
class Header:
    """
    Decoded iNES header.

    Notes:
      - prg_units: 16 KB blocks (0x4000), header byte 4
      - chr_units: 8 KB blocks (0x2000), header byte 5; 0 means CHR RAM
      - raw_flags6 / raw_flags7: header bytes 6 and 7, kept verbatim
      - mapper_id: high nibble from flags7 and low nibble from flags6
      - reserved: header bytes 8-15, kept verbatim
    """

    prg_units: int
    chr_units: int
    raw_flags6: int
    raw_flags7: int
    mapper_id: int
    mirroring: Mirroring
    has_battery_ram: bool
    has_trainer: bool
    four_screen: bool
    reserved: bytes = bytes(8)

    @classmethod
    def create(
        cls,
        prg_units: int,
        chr_units: int,
        *,
        mapper_id: int = 0,
        mirroring: Mirroring = Mirroring.HORIZONTAL,
        has_battery_ram: bool = False,
        has_trainer: bool = False,
        reserved: bytes = bytes(8),
    ) -> "Header":
        """
        Build a header from its semantic fields, deriving the raw flag bytes.

        Raises:
            ValueError if a unit count or the mapper id does not fit in a byte,
            or if reserved is not 8 bytes long.
        """
        for name, value in (("prg_units", prg_units), ("chr_units", chr_units), ("mapper_id", mapper_id)):
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{name} must be in range 0-255, got {value}")
        if len(reserved) != 8:
            raise ValueError(f"reserved must be 8 bytes, got {len(reserved)}")

        flags6 = (mapper_id & 0x0F) << 4
        if mirroring is Mirroring.VERTICAL:
            flags6 |= FLAG6_VERTICAL
        elif mirroring is Mirroring.FOUR_SCREEN:
            flags6 |= FLAG6_FOUR_SCREEN
        if has_battery_ram:
            flags6 |= FLAG6_BATTERY
        if has_trainer:
            flags6 |= FLAG6_TRAINER
        flags7 = mapper_id & 0xF0

        return decode_header(MAGIC + bytes((prg_units, chr_units, flags6, flags7)) + bytes(reserved)).unwrap()

    def to_bytes(self) -> bytes:
        """Encode back into the 16-byte on-disk form."""
        return MAGIC + bytes((self.prg_units, self.chr_units, self.raw_flags6, self.raw_flags7)) + self.reserved

    @property
    def prg_rom_size(self) -> int:
        return self.prg_units * PRG_UNIT_SIZE

    @property
    def chr_rom_size(self) -> int:
        return self.chr_units * CHR_UNIT_SIZE

    @property
    def uses_chr_ram(self) -> bool:
        return self.chr_units == 0

    @property
    def tv_system(self) -> str:
        """
        TV system of the ROM.

        Uses header byte index 9 (iNES v1): bit 0 -> 0 = NTSC, 1 = PAL.
        """
        return "PAL" if self.reserved[1] & 0x01 else "NTSC"


def decode_header(data: bytes) -> Result[Header, InvalidSignature]:
    """
    Decode the 16-byte iNES header.

    Unit counts are passed through unchecked; rejecting an empty PRG ROM is
    the loader's job.

    Raises:
        ValueError if data is not exactly 16 bytes long.
    """
    if len(data) != HEADER_SIZE:
        raise ValueError(f"iNES header must be {HEADER_SIZE} bytes, got {len(data)}")

    data = bytes(data)
    if data[0:4] != MAGIC:
        return Failure(InvalidSignature(data[0:4]))

    flags6 = data[6]
    flags7 = data[7]

    return Success(
        Header(
            prg_units=data[4],
            chr_units=data[5],
            raw_flags6=flags6,
            raw_flags7=flags7,
            mapper_id=_mapper_id(flags6, flags7),
            mirroring=_mirroring(flags6),
            has_battery_ram=bool(flags6 & FLAG6_BATTERY),
            has_trainer=bool(flags6 & FLAG6_TRAINER),
            four_screen=bool(flags6 & FLAG6_FOUR_SCREEN),
            reserved=data[8:16],
        )
    )
