from enum import Enum
from typing import final


@final
class LoadStage(Enum):
    """Sections of an iNES image, in the order they are read."""

    HEADER = "header"
    TRAINER = "trainer"
    PROGRAM_ROM = "program ROM"
    GRAPHICS_ROM = "graphics ROM"


class PyinesError(Exception):
    """Base exception for all PyINES related errors."""

    pass


class InvalidSignature(PyinesError):
    """The first four bytes are not ``NES\\x1a``."""

    def __init__(self, signature: bytes) -> None:
        self.signature = bytes(signature)
        super().__init__(f"Not a valid iNES file format (signature {self.signature!r})")


class EmptyProgramRom(PyinesError):
    """The header declares zero 16 KB program-ROM units."""

    def __init__(self) -> None:
        super().__init__("PRG ROM size is 0, a cartridge without program code cannot be loaded")


class ShortRead(PyinesError):
    """The stream ended before a section was complete."""

    def __init__(self, stage: LoadStage, expected: int, actual: int) -> None:
        self.stage = stage
        self.expected = expected
        self.actual = actual
        super().__init__(f"Failed to read {stage.value}: expected {expected} bytes, got {actual}")
