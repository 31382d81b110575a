# Well-known iNES mapper numbers. Classification only:
# - 000 (NROM)
# - 001 (MMC1)
# - 002 (UxROM)
# - 003 (CNROM)
# - 004 (MMC3)
# and the other boards below. Bank switching is left to the emulator.

from typing import Dict, Final, Optional

MAPPER_NAMES: Final[Dict[int, str]] = {
    0: "NROM",
    1: "MMC1",
    2: "UxROM",
    3: "CNROM",
    4: "MMC3",
    5: "MMC5",
    7: "AxROM",
    9: "MMC2",
    10: "MMC4",
    11: "Color Dreams",
    13: "CPROM",
    19: "Namco 163",
    21: "VRC4a/VRC4c",
    22: "VRC2a",
    23: "VRC2b/VRC4e",
    24: "VRC6a",
    25: "VRC4b/VRC4d",
    26: "VRC6b",
    34: "BNROM/NINA-001",
    66: "GxROM",
    69: "Sunsoft FME-7",
    71: "Camerica",
    85: "VRC7",
    206: "Namco 118",
}


def mapper_name(mapper_id: int) -> Optional[str]:
    """Board name for a mapper number, or None if it is not a well-known one."""
    return MAPPER_NAMES.get(mapper_id)
