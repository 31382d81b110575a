import logging
from datetime import datetime
from pathlib import Path
from typing import Final, List, Optional, Tuple, Union

from rich.console import Console
from rich.logging import RichHandler

console: Final[Console] = Console()
error_console: Final[Console] = Console(stderr=True)

time_format: Final[str] = "%Y-%m-%d %H:%M:%S"


class HoldingFileHandler(logging.Handler):
    """
    Append records to a log file, one open/close per record.

    Records that fail to write are held and retried, in order, ahead of the
    next record.
    """

    def __init__(self, file_name: Union[str, Path]):
        super().__init__()
        self._file_name = Path(file_name)
        self._log_hold: List[Tuple[logging.LogRecord, Exception]] = []

    def _write_log_entry(self, log_entry: str) -> None:
        with open(self._file_name, "a", encoding="utf-8") as f:
            f.write(log_entry + "\n")

    def emit(self, record: logging.LogRecord) -> None:
        self.acquire()
        try:
            still_failed = []
            for old_record, _ in self._log_hold:
                try:
                    self._write_log_entry(self.format(old_record))
                except OSError as e:
                    still_failed.append((old_record, e))
            self._log_hold = still_failed

            try:
                self._write_log_entry(self.format(record))
            except OSError as e:
                self._log_hold.append((record, e))
        finally:
            self.release()

    @property
    def held(self) -> int:
        """Number of records still waiting to be written."""
        return len(self._log_hold)


def get_time() -> str:
    return datetime.now().strftime("%Y-%m-%d_%H-%M-%S")


def setup_logging(debug: bool = False, log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Configure the root logger with a rich console handler.

    When log_dir is given a pyines_<timestamp>.log file is written there too.
    """
    handlers: List[logging.Handler] = [
        RichHandler(
            rich_tracebacks=True,
            show_path=debug,
            enable_link_path=True,
            tracebacks_show_locals=debug,
            show_level=True,
            console=error_console,
        )
    ]
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = HoldingFileHandler(log_dir / f"pyines_{get_time()}.log")
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s", time_format))
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(message)s",
        datefmt=time_format,
        handlers=handlers,
        force=True,
    )
    return log


log: Final[logging.Logger] = logging.getLogger("PyINES")
