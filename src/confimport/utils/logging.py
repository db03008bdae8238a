"""Logging configuration for confimport."""

import logging
import sys
from logging.handlers import RotatingFileHandler

from confimport.utils.config import Config


def setup_logging(config: Config, console_output: bool = False) -> None:
    """
    Set up logging for confimport.

    Args:
        config: Application configuration
        console_output: Whether to output logs to console (default: False)
    """
    format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    formatter = logging.Formatter(format_str)

    # Console format is simpler (no timestamp)
    console_format = "%(levelname)s - %(name)s - %(message)s"
    console_formatter = logging.Formatter(console_format)

    root_logger = logging.getLogger("confimport")
    root_logger.setLevel(config.log_level)

    # Drop handlers left by an earlier setup_logging call
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    config.logging_path.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        config.logging_path / "confimport.log", maxBytes=10000, backupCount=3
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(config.log_level)
    root_logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(console_formatter)
        console_handler.setLevel(logging.INFO)
        root_logger.addHandler(console_handler)
