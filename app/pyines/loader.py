import dataclasses
import io
from pathlib import Path
from typing import BinaryIO, Optional, Tuple, Union

from returns.result import Failure, Result, Success

from pyines.cartridge import TRAINER_SIZE, CartridgeImage, frozen_region
from pyines.errors import EmptyProgramRom, LoadStage, PyinesError, ShortRead
from pyines.header import HEADER_SIZE, decode_header


def _read_exact(stream: BinaryIO, n_bytes: int, stage: LoadStage) -> Result[bytes, ShortRead]:
    """Read exactly n_bytes, or fail with ShortRead once the stream runs dry."""
    buf = bytearray()
    while len(buf) < n_bytes:
        chunk = stream.read(n_bytes - len(buf))
        if not chunk:
            return Failure(ShortRead(stage, n_bytes, len(buf)))
        buf += chunk
    return Success(bytes(buf))


def load(stream: BinaryIO) -> Result[CartridgeImage, PyinesError]:
    """
    Load a cartridge image from a sequential byte stream.

    Sections are read strictly in file order (header, trainer, PRG ROM,
    CHR ROM) and each read is all-or-nothing. The stream is never rewound;
    bytes consumed before a failure stay consumed. Anything after the CHR ROM
    is left unread.

    OSError raised by the stream itself is not caught here.

    Args:
        stream: Binary file-like object positioned at the start of the image

    Returns:
        Result containing either a CartridgeImage or the first error hit.
    """
    raw_header = _read_exact(stream, HEADER_SIZE, LoadStage.HEADER)
    if isinstance(raw_header, Failure):
        return raw_header

    decoded = decode_header(raw_header.unwrap())
    if isinstance(decoded, Failure):
        return decoded
    header = decoded.unwrap()

    trainer = None
    if header.has_trainer:
        raw_trainer = _read_exact(stream, TRAINER_SIZE, LoadStage.TRAINER)
        if isinstance(raw_trainer, Failure):
            return raw_trainer
        trainer = frozen_region(raw_trainer.unwrap())

    prg_size = header.prg_rom_size
    if prg_size == 0:
        return Failure(EmptyProgramRom())
    prg = _read_exact(stream, prg_size, LoadStage.PROGRAM_ROM)
    if isinstance(prg, Failure):
        return prg

    # No CHR ROM in file: the board provides CHR RAM, nothing is allocated here
    chr_size = header.chr_rom_size
    if chr_size == 0:
        chr_ = Success(b"")
    else:
        chr_ = _read_exact(stream, chr_size, LoadStage.GRAPHICS_ROM)
        if isinstance(chr_, Failure):
            return chr_

    return Success(
        CartridgeImage(
            header=header,
            trainer=trainer,
            program_rom=frozen_region(prg.unwrap()),
            graphics_rom=frozen_region(chr_.unwrap()),
        )
    )


def load_bytes(data: Union[bytes, bytearray, memoryview]) -> Result[CartridgeImage, PyinesError]:
    """Load a cartridge image from an in-memory buffer."""
    return load(io.BytesIO(data))


def load_file(filepath: Union[Path, str]) -> Result[CartridgeImage, Union[PyinesError, OSError]]:
    """
    Load a cartridge image from a file path.

    The file is held open only for the duration of the load. Errors from
    opening or reading it are returned as Failure(OSError).

    Args:
        filepath: Path to the ROM file to load

    Returns:
        Result containing either a CartridgeImage or an error.
    """
    try:
        with open(filepath, "rb") as f:
            result = load(f)
    except OSError as e:
        return Failure(e)

    def attach_source(image: CartridgeImage) -> CartridgeImage:
        return dataclasses.replace(image, source=str(filepath))

    return result.map(attach_source)


def is_valid_file(filepath: Union[Path, str]) -> Tuple[bool, Optional[str]]:
    """
    Check if a file is a loadable NES ROM.

    Args:
        filepath: Path to the file to check

    Returns:
        A tuple of (is_valid, error_message) where error_message is None if
        valid or describes the first failure otherwise.
    """
    result = load_file(filepath)
    if isinstance(result, Success):
        return True, None
    return False, str(result.failure())
