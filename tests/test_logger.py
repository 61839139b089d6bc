"""Tests for the Logger wrapper."""

import logging

from course_registry.utils.logger import Logger, LogLevel


def test_file_logging(tmp_path):
    log_file = tmp_path / "registry.log"
    logger = Logger(log_file=str(log_file), log_level=LogLevel.DEBUG, console=False)

    logger.log_debug("debug line")
    logger.log_warning("warning line")
    for handler in logger.logger.handlers:
        handler.flush()

    content = log_file.read_text()
    assert "CourseRegistry - DEBUG - debug line" in content
    assert "CourseRegistry - WARNING - warning line" in content


def test_generated_log_file_in_log_dir(tmp_path):
    logger = Logger(console=False, log_dir=str(tmp_path / "logs"))
    assert logger.log_file.startswith(str(tmp_path / "logs"))
    assert logger.log_file.endswith(".log")


def test_without_file_or_console_keeps_existing_configuration(tmp_path):
    app_log = tmp_path / "app.log"
    app_logger = Logger(log_file=str(app_log), log_level=LogLevel.DEBUG, console=False)
    configured_handlers = list(app_logger.logger.handlers)

    passive = Logger(to_file=False, console=False)

    assert passive.log_file is None
    assert passive.logger.handlers == configured_handlers
    assert passive.logger.level == logging.DEBUG

    app_logger.log_warning("still written")
    for handler in app_logger.logger.handlers:
        handler.flush()
    assert "still written" in app_log.read_text()


def test_level_from_name():
    assert LogLevel.from_name("debug") is LogLevel.DEBUG
    assert LogLevel.from_name("nonsense") is LogLevel.INFO
    assert LogLevel.from_name("nonsense", LogLevel.ERROR) is LogLevel.ERROR
    assert LogLevel.WARNING.value == logging.WARNING
