"""Logging configuration for the storyskel command line.

Reads the log level from the environment and installs a single console
handler on the root logger.
"""

import logging
import os
import sys
from dataclasses import dataclass

logger = logging.getLogger(__name__)

LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass
class LoggingConfig:
    """Logging settings, read from environment variables with defaults."""

    log_level: str = "INFO"
    log_format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """Create config from environment variables."""
        level = os.getenv("LOG_LEVEL", "INFO").upper()
        if level not in LEVEL_MAP:
            logger.warning(f"Unknown log level '{level}', defaulting to INFO")
            level = "INFO"
        return cls(log_level=level)


def setup_logging(config: LoggingConfig) -> None:
    """Configure the root logger from ``config``.

    Existing root handlers are removed so repeated calls do not duplicate
    output.
    """
    level = LEVEL_MAP.get(config.log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stderr keeps stdout free for --stdout output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(fmt=config.log_format, datefmt=config.date_format))
    root_logger.addHandler(console_handler)

    logging.getLogger("storyskel").setLevel(level)

    logger.debug(f"Logging configured: level={config.log_level}")
