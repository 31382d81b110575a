from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from pyines.header import HEADER_SIZE, Header, Mirroring
from pyines.mapper import mapper_name

TRAINER_SIZE = 0x200  # 512 bytes


def frozen_region(data: bytes) -> NDArray[np.uint8]:
    """Copy data into a read-only uint8 array."""
    arr = np.frombuffer(data, dtype=np.uint8).copy()
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class CartridgeImage:
    """
    Represents an NES cartridge image decoded from an iNES ROM file.

    The image owns its header and the ROM sections that followed it in the
    stream. It keeps no reference to the stream and every region is a
    read-only uint8 array, so it can be shared freely once loaded.

    Notes:
      - trainer: 512 bytes, or None when the header has no trainer
      - program_rom: prg_units * 16 KB, never empty
      - graphics_rom: chr_units * 8 KB; empty when the cartridge uses CHR RAM
    """

    header: Header
    trainer: Optional[NDArray[np.uint8]]
    program_rom: NDArray[np.uint8]
    graphics_rom: NDArray[np.uint8]
    source: Optional[str] = None

    def __repr__(self) -> str:
        """Return a string representation of the cartridge."""
        return (
            f"<CartridgeImage source={self.source!r} "
            f"PRG={len(self.program_rom)} bytes "
            f"CHR={len(self.graphics_rom)} bytes "
            f"Trainer={0 if self.trainer is None else len(self.trainer)} bytes "
            f"Mapper={self.mapper_id} "
            f"Mirroring={self.mirroring.value}>"
        )

    @property
    def mapper_id(self) -> int:
        return self.header.mapper_id

    @property
    def mapper_name(self) -> Optional[str]:
        return mapper_name(self.header.mapper_id)

    @property
    def mirroring(self) -> Mirroring:
        return self.header.mirroring

    @property
    def uses_chr_ram(self) -> bool:
        """True when no graphics ROM was shipped and the board must supply CHR RAM."""
        return len(self.graphics_rom) == 0

    @property
    def size(self) -> int:
        """Total number of bytes the image occupied in its stream."""
        trainer = 0 if self.trainer is None else len(self.trainer)
        return HEADER_SIZE + trainer + len(self.program_rom) + len(self.graphics_rom)
