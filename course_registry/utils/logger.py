"""
Logger for the Course Registry
Provides logging for registry operations and the text menu
"""
import logging
import os
from datetime import datetime
from enum import Enum


class LogLevel(Enum):
    """Log level enumeration"""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @classmethod
    def from_name(cls, name: str, default: "LogLevel" = None) -> "LogLevel":
        """Resolve a level from its name, e.g. "info" -> LogLevel.INFO"""
        try:
            return cls[str(name).upper()]
        except KeyError:
            return default if default is not None else cls.INFO


class Logger:
    """Application logger with optional file and console output"""

    def __init__(
        self,
        log_file: str = None,
        log_level: LogLevel = LogLevel.INFO,
        to_file: bool = True,
        console: bool = True,
        log_dir: str = "logs",
    ):
        """
        Initialize logger

        Args:
            log_file: Path to the log file, generated under log_dir if omitted
            log_level: Minimum level for all handlers
            to_file: Attach a file handler
            console: Attach a console handler
            log_dir: Directory for the generated log file
        """
        self.log_level = log_level

        if to_file and log_file is None:
            os.makedirs(log_dir, exist_ok=True)
            log_file = os.path.join(
                log_dir, f"course_registry_{datetime.now().strftime('%Y%m%d')}.log"
            )

        self.log_file = log_file if to_file else None

        self.logger = logging.getLogger("CourseRegistry")
        if not (to_file or console):
            # Write through whatever the application already configured
            return

        self.logger.setLevel(log_level.value)
        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers.clear()

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        if self.log_file:
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(log_level.value)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        if console:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(log_level.value)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

    def log_info(self, message: str):
        """Log info message"""
        self.logger.info(message)

    def log_error(self, message: str):
        """Log error message"""
        self.logger.error(message)

    def log_warning(self, message: str):
        """Log warning message"""
        self.logger.warning(message)

    def log_debug(self, message: str):
        """Log debug message"""
        self.logger.debug(message)

    def log_critical(self, message: str):
        """Log critical message"""
        self.logger.critical(message)
