#!/usr/bin/env python3

import logging
import os
import sys
from datetime import datetime
from typing import Optional

from colorama import Fore, Style, init

# Initialize colorama for cross-platform colored output
init(autoreset=True)

# Logger name shared by the CLI and the CloudWatch manager
LOGGER_NAME = "cloudwatch_alarm_cleanup"


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for console output"""

    COLORS = {
        "DEBUG": Fore.CYAN,
        "INFO": Fore.GREEN,
        "WARNING": Fore.YELLOW,
        "ERROR": Fore.RED,
        "CRITICAL": Fore.RED + Style.BRIGHT,
    }

    def format(self, record):
        # Color a copy so the file handler keeps the plain level name
        record = logging.makeLogRecord(record.__dict__)
        log_color = self.COLORS.get(record.levelname, Fore.WHITE)
        record.levelname = f"{log_color}{record.levelname}{Style.RESET_ALL}"
        return super().format(record)


class AlarmCleanupLogger:
    """Logger for CloudWatch alarm cleanup operations"""

    def __init__(self, name: str, operation: str = "general", log_dir: Optional[str] = "logs"):
        self.name = name
        self.operation = operation
        self.log_dir = log_dir
        self.log_file = None
        self.logger = self._setup_logger()
        self.start_time = datetime.now()

    def _setup_logger(self) -> logging.Logger:
        """Setup logger with file and console handlers"""
        logger = logging.getLogger(self.name)

        # Clear existing handlers to avoid duplicates
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)

        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)

            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            self.log_file = os.path.join(
                self.log_dir, f"{timestamp}_{self.operation}_{self.name}.log"
            )

            # File handler - stores all levels
            file_handler = logging.FileHandler(self.log_file, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
            file_handler.setFormatter(file_formatter)
            logger.addHandler(file_handler)

        # Console handler - shows INFO and above with colors
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_formatter = ColoredFormatter(
            "%(asctime)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
        )
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

        if self.log_file:
            logger.debug(f"Starting {self.operation} operation - Log file: {self.log_file}")

        return logger

    def info(self, message: str):
        self.logger.info(message)

    def debug(self, message: str):
        self.logger.debug(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str):
        self.logger.error(message)

    def critical(self, message: str):
        self.logger.critical(message)

    def log_alarm_action(
        self, alarm_name: str, action: str, status: str, details: str = ""
    ):
        """Log a single alarm action with structured format"""
        message = f"ALARM:{alarm_name} | ACTION:{action} | STATUS:{status}"
        if details:
            message += f" | DETAILS:{details}"

        if status.upper() in ["FAILED", "ERROR"]:
            self.error(message)
        elif status.upper() in ["SKIPPED", "WARNING"]:
            self.warning(message)
        else:
            self.debug(message)

    def log_summary(self, total_checked: int, deleted: int, failed: int, skipped: int = 0):
        """Log operation summary to the log file"""
        self.debug("=" * 50)
        self.debug("OPERATION SUMMARY")
        self.debug("=" * 50)
        self.debug(f"Total checked: {total_checked}")
        self.debug(f"Deleted: {deleted}")
        self.debug(f"Failed: {failed}")
        if skipped > 0:
            self.debug(f"Skipped: {skipped}")

        duration = datetime.now() - self.start_time
        self.debug(f"Operation duration: {duration}")
        self.debug("=" * 50)


def setup_logger(name: str, operation: str = "general", log_dir: Optional[str] = "logs") -> AlarmCleanupLogger:
    """Factory function to create logger instances"""
    return AlarmCleanupLogger(name, operation, log_dir)
