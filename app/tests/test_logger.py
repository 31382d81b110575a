import logging

from pyines.logger import HoldingFileHandler, setup_logging


def make_record(msg):
    return logging.LogRecord("PyINES", logging.INFO, __file__, 1, msg, None, None)


def test_holding_file_handler_writes(tmp_path):
    path = tmp_path / "out.log"
    handler = HoldingFileHandler(path)
    handler.emit(make_record("first"))
    handler.emit(make_record("second"))

    assert path.read_text(encoding="utf-8").splitlines() == ["first", "second"]
    assert handler.held == 0


def test_holding_file_handler_retries(tmp_path):
    path = tmp_path / "later" / "out.log"
    handler = HoldingFileHandler(path)

    handler.emit(make_record("held"))
    assert handler.held == 1

    path.parent.mkdir()
    handler.emit(make_record("next"))
    assert handler.held == 0
    assert path.read_text(encoding="utf-8").splitlines() == ["held", "next"]


def test_setup_logging_with_file(tmp_path):
    log = setup_logging(debug=True, log_dir=tmp_path / "logs")
    log.info("hello from test")

    assert logging.getLogger().level == logging.DEBUG
    files = list((tmp_path / "logs").glob("pyines_*.log"))
    assert len(files) == 1
    assert "hello from test" in files[0].read_text(encoding="utf-8")

    setup_logging(debug=False)
    assert logging.getLogger().level == logging.INFO
