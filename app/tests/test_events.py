import logging

from returns.result import Failure, Success

from pyines.errors import InvalidSignature
from pyines.events import (
    HEADER_DECODED,
    LOAD_FAILED,
    LOAD_STARTED,
    LOAD_SUCCEEDED,
    TRAILING_BYTES,
    EventBus,
    attach_logger,
    observed_load,
)


def record_all(bus):
    seen = []
    for event_type in (LOAD_STARTED, HEADER_DECODED, LOAD_SUCCEEDED, LOAD_FAILED, TRAILING_BYTES):
        bus.on(event_type, seen.append)
    return seen


def test_event_bus_dispatch():
    bus = EventBus()
    seen = []
    bus.on("ping", seen.append)
    bus.on("ping", lambda e: seen.append(e["n"] * 2))
    bus.emit("ping", n=2)
    bus.emit("other", n=3)
    assert seen == [{"type": "ping", "n": 2}, 4]


def test_observed_load_success(tmp_path, rom_factory):
    path = tmp_path / "game.nes"
    path.write_bytes(rom_factory())
    bus = EventBus()
    seen = record_all(bus)

    result = observed_load(path, bus)

    assert isinstance(result, Success)
    assert [e["type"] for e in seen] == [LOAD_STARTED, HEADER_DECODED, LOAD_SUCCEEDED]
    assert seen[1]["header"] == result.unwrap().header
    assert seen[2]["image"] is result.unwrap()


def test_observed_load_trailing_bytes(tmp_path, rom_factory):
    path = tmp_path / "game.nes"
    path.write_bytes(rom_factory(extra=bytes(128)))
    bus = EventBus()
    seen = record_all(bus)

    assert isinstance(observed_load(path, bus), Success)
    assert seen[-1] == {"type": TRAILING_BYTES, "path": str(path), "count": 128}


def test_observed_load_failure(tmp_path):
    path = tmp_path / "bad.nes"
    path.write_bytes(b"BAD!" + bytes(12))
    bus = EventBus()
    seen = record_all(bus)

    result = observed_load(path, bus)

    assert isinstance(result, Failure)
    assert [e["type"] for e in seen] == [LOAD_STARTED, LOAD_FAILED]
    assert isinstance(seen[1]["error"], InvalidSignature)


def test_attach_logger(tmp_path, rom_factory, caplog):
    path = tmp_path / "game.nes"
    path.write_bytes(rom_factory(extra=b"\x00"))
    logger = logging.getLogger("PyINES.test")
    bus = EventBus()
    attach_logger(bus, logger)

    with caplog.at_level(logging.DEBUG, logger="PyINES.test"):
        observed_load(path, bus)

    messages = [r.getMessage() for r in caplog.records]
    assert any("Attempting to load ROM" in m for m in messages)
    assert any("Extra 1 bytes at end of ROM ignored" in m for m in messages)
    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_attach_logger_without_trailing_warning(tmp_path, rom_factory, caplog):
    path = tmp_path / "game.nes"
    path.write_bytes(rom_factory(extra=b"\x00"))
    logger = logging.getLogger("PyINES.test")
    bus = EventBus()
    attach_logger(bus, logger, warn_trailing_bytes=False)

    with caplog.at_level(logging.DEBUG, logger="PyINES.test"):
        observed_load(path, bus)

    assert not any(r.levelno == logging.WARNING for r in caplog.records)
