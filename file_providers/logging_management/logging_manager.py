"""
Reusable logging configuration for applications that use the file providers.
"""
import os
import sys
import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from file_providers.support.constants import APP_NAME

NOISY_LOGGERS = ("boto3", "botocore", "s3transfer", "urllib3")


class LoggingManager:
    """Class to manage logging configuration for the file providers."""
    @staticmethod
    def setup_logging(
            service_name: str = APP_NAME,
            log_file_path: Optional[str] = None,
            log_level: int = logging.INFO,
            enable_console: bool = True,
            enable_file: bool = True,
            max_bytes: int = 10 * 1024 * 1024,  # 10MB
            backup_count: int = 5
    ) -> logging.Logger:
        """
        Setup consistent logging configuration.

        Args:
            service_name: Name of the logger to return
            log_file_path: Path to log file (None for no file logging)
            log_level: Logging level
            enable_console: Whether to log to console
            enable_file: Whether to log to file
            max_bytes: Max log file size before rotation
            backup_count: Number of backup files to keep

        Returns:
            Configured logger instance
        """
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)

        detailed_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        simple_formatter = logging.Formatter(
            "%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S"
        )

        root_logger.setLevel(log_level)

        if enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(simple_formatter)
            console_handler.setLevel(log_level)
            root_logger.addHandler(console_handler)

        # File handler with rotation
        if enable_file and log_file_path:
            log_dir = os.path.dirname(log_file_path)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)

            file_handler = RotatingFileHandler(
                filename=log_file_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            )
            file_handler.setFormatter(detailed_formatter)
            file_handler.setLevel(logging.DEBUG)  # File gets all details
            root_logger.addHandler(file_handler)

        # S3 clients log every request at DEBUG
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

        return logging.getLogger(service_name)
