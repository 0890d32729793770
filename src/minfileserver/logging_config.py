"""Logging setup for the server process.

Handlers are attached to the package logger rather than the root logger, so
embedding applications keep control of their own logging. Configuration is
idempotent: calling it again replaces the handlers it installed before.
"""

import logging
import sys
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from typing import Dict, Optional

PACKAGE_LOGGER = "minfileserver"

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_HANDLER_TAG = "_minfileserver_handler"


@dataclass(frozen=True)
class LoggingConfig:
    """Settings for the logging subsystem.

    Attributes:
        level: Minimum severity name to emit.
        log_file: Optional path of a rotating log file.
        max_bytes: Size of a log file before rotation.
        backup_count: Number of rotated files kept.
        console_fmt: Format of stderr records.
        file_fmt: Format of file records.
        datefmt: Timestamp format.
    """

    level: str = "INFO"
    log_file: Optional[str] = None
    max_bytes: int = 2 * 1024 * 1024
    backup_count: int = 3
    console_fmt: str = "%(asctime)s [%(levelname)s] %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"


def parse_level(level: str) -> int:
    """Map a level name to its logging constant.

    Raises:
        ValueError: If the name is not a known level.
    """
    try:
        return _LEVEL_MAP[level.upper()]
    except KeyError:
        raise ValueError(f"Unknown log level: {level!r}. Must be one of: {', '.join(sorted(_LEVEL_MAP))}")


def configure_logging(cfg: LoggingConfig) -> logging.Logger:
    """Install stderr (and optionally file) handlers on the package logger.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(parse_level(cfg.level))
    logger.propagate = False

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            logger.removeHandler(handler)
            handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(cfg.console_fmt, cfg.datefmt))
    setattr(console, _HANDLER_TAG, True)
    logger.addHandler(console)

    if cfg.log_file:
        file_handler = RotatingFileHandler(
            cfg.log_file, maxBytes=cfg.max_bytes, backupCount=cfg.backup_count, encoding="utf-8"
        )
        file_handler.setFormatter(logging.Formatter(cfg.file_fmt, cfg.datefmt))
        setattr(file_handler, _HANDLER_TAG, True)
        logger.addHandler(file_handler)

    return logger
