from __future__ import annotations

import logging
from collections import defaultdict
from pathlib import Path
from typing import Any, Callable, DefaultDict, Dict, List, Union

from returns.result import Failure, Result

from pyines.cartridge import CartridgeImage
from pyines.errors import PyinesError
from pyines.loader import load_file

LOAD_STARTED = "load_started"
HEADER_DECODED = "header_decoded"
LOAD_SUCCEEDED = "load_succeeded"
LOAD_FAILED = "load_failed"
TRAILING_BYTES = "trailing_bytes"

Event = Dict[str, Any]


class EventBus:
    """Minimal publish/subscribe helper for load diagnostics."""

    def __init__(self) -> None:
        self._subs: DefaultDict[str, List[Callable[[Event], None]]] = defaultdict(list)

    def on(self, event_type: str, callback: Callable[[Event], None]) -> None:
        self._subs[event_type].append(callback)

    def emit(self, event_type: str, **payload: Any) -> None:
        for callback in list(self._subs[event_type]):
            callback({"type": event_type, **payload})


def observed_load(
    filepath: Union[Path, str],
    bus: EventBus,
) -> Result[CartridgeImage, Union[PyinesError, OSError]]:
    """
    Call load_file and report what happened on the bus.

    Trailing data is found by comparing the file size with the bytes the
    image consumed; it is reported, never treated as an error.
    """
    bus.emit(LOAD_STARTED, path=str(filepath))
    result = load_file(filepath)

    if isinstance(result, Failure):
        bus.emit(LOAD_FAILED, path=str(filepath), error=result.failure())
        return result

    image = result.unwrap()
    bus.emit(HEADER_DECODED, path=str(filepath), header=image.header)
    bus.emit(LOAD_SUCCEEDED, path=str(filepath), image=image)

    extra = Path(filepath).stat().st_size - image.size
    if extra > 0:
        bus.emit(TRAILING_BYTES, path=str(filepath), count=extra)

    return result


def attach_logger(bus: EventBus, logger: logging.Logger, *, warn_trailing_bytes: bool = True) -> None:
    """Subscribe logging callbacks for every load event."""
    bus.on(LOAD_STARTED, lambda e: logger.debug(f"Attempting to load ROM: {e['path']}"))
    bus.on(HEADER_DECODED, lambda e: logger.debug(f"Parsed header: {e['header']}"))
    bus.on(LOAD_SUCCEEDED, lambda e: logger.info(f"Loaded {e['image']!r}"))
    bus.on(LOAD_FAILED, lambda e: logger.error(f"Error loading ROM {e['path']}: {e['error']}"))
    if warn_trailing_bytes:
        bus.on(TRAILING_BYTES, lambda e: logger.warning(f"Extra {e['count']} bytes at end of ROM ignored"))
