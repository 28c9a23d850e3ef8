"""Package logger for ContentSearch.

Console lines look like ``05-01 12:00:00 [WARN] message``. When a command
asks for a log file, everything down to DEBUG (including compiled query
bodies) is written to ``<log_dir>/<action>/<action>_<mmddHHMMSS>.log``.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

log = logging.getLogger("ContentSearch")

_SHORT_LEVELS = {"DEBUG": "DEBG", "WARNING": "WARN", "ERROR": "ERRO", "CRITICAL": "ERRO"}


class _ShortLevelFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__("%(asctime)s [%(shortlevel)s] %(message)s", datefmt="%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        record.shortlevel = _SHORT_LEVELS.get(record.levelname, record.levelname[:4])
        return super().format(record)


def _log_file_path(action: str, log_dir: str) -> Path:
    folder = Path(log_dir or "log") / action
    folder.mkdir(parents=True, exist_ok=True)
    return folder / f"{action}_{datetime.now():%m%d%H%M%S}.log"


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> Path | None:
    """(Re)initialize the ``ContentSearch`` logger for one command.

    Args:
        level: Console level name; unknown names fall back to INFO.
        action: Command name, used for the log file location.
        log_to_file: Also write a DEBUG-level file for this command.
        log_dir: Root directory for log files.

    Returns:
        Path of the log file, or ``None`` when only the console is used.
    """
    console_level = logging.getLevelName((level or "INFO").upper())
    if not isinstance(console_level, int):
        console_level = logging.INFO

    formatter = _ShortLevelFormatter()
    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(formatter)

    log.handlers.clear()
    log.addHandler(console)
    log.setLevel(logging.DEBUG)
    log.propagate = False

    if not (log_to_file and action):
        log.setLevel(console_level)
        return None

    path = _log_file_path(action, log_dir)
    file_handler = logging.FileHandler(path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    log.addHandler(file_handler)
    return path
