"""Tests for package logging setup."""

import logging

from app.utils import LOGGER_NAME, configure_logging, get_logger


class TestGetLogger:
    def test_returns_named_logger(self) -> None:
        log = get_logger("app.features.example")
        assert log.name == "app.features.example"

    def test_module_loggers_propagate_to_package_logger(self) -> None:
        log = get_logger("app.features.example")
        assert log.parent is logging.getLogger(LOGGER_NAME)


class TestConfigureLogging:
    def test_package_logger_has_one_handler(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger(LOGGER_NAME).handlers) == 1

    def test_root_logger_left_alone(self) -> None:
        configure_logging()
        package_handlers = logging.getLogger(LOGGER_NAME).handlers
        assert not any(h in logging.getLogger().handlers for h in package_handlers)

    def test_package_logger_still_propagates(self) -> None:
        assert logging.getLogger(LOGGER_NAME).propagate is True
