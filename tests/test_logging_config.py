import logging

import pytest

from minfileserver.logging_config import PACKAGE_LOGGER, LoggingConfig, configure_logging, parse_level


pytestmark = pytest.mark.usefixtures("restore_package_logger")


@pytest.mark.parametrize(
    "name,expected",
    [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        ("Warn", logging.WARNING),
        ("error", logging.ERROR),
    ],
)
def test_parse_level(name, expected):
    assert parse_level(name) == expected


def test_parse_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        parse_level("verbose")


def test_configure_console_logging():
    logger = configure_logging(LoggingConfig(level="DEBUG"))
    assert logger.name == PACKAGE_LOGGER
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert sum(isinstance(h, logging.StreamHandler) for h in logger.handlers) == 1


def test_configure_is_idempotent():
    configure_logging(LoggingConfig())
    logger = configure_logging(LoggingConfig(level="WARNING"))
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_configure_file_logging(tmp_path):
    log_file = tmp_path / "server.log"
    logger = configure_logging(LoggingConfig(log_file=str(log_file)))
    logging.getLogger(f"{PACKAGE_LOGGER}.web.app").info("hello from the app")
    for handler in logger.handlers:
        handler.flush()

    assert len(logger.handlers) == 2
    assert "hello from the app" in log_file.read_text(encoding="utf-8")
