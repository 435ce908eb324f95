"""Logging configuration for the pingpong command line."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from pingpong.config import LOG_FILE_NAME, LoggingConfig

# Marks handlers installed here, so a second setup replaces only those.
_HANDLER_TAG = "_pingpong_handler"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the chat readable:
    - pingpong logs pass at the configured console level
    - Python warnings (captured as 'py.warnings') only at ERROR+
    - any third-party logger only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "pingpong" or record.name.startswith("pingpong."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".pingpong",
    console_level: int | str = logging.WARNING,
    file_level: int | str = logging.DEBUG,
) -> Path:
    """
    Configure logging with:
    - Console handler on stderr, filtered so chat output stays clean
    - File handler with everything at ``file_level`` or above

    Returns the path of the log file.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG, False):
            root.removeHandler(h)
            h.close()

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    setattr(ch, _HANDLER_TAG, True)
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    setattr(fh, _HANDLER_TAG, True)
    root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)

    return log_file


def setup_logging_from_config(config: LoggingConfig) -> Path:
    return setup_logging(
        log_dir=config.directory,
        console_level=config.console_level,
        file_level=config.file_level,
    )
