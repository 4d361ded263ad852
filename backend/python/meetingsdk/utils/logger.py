import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def create_logger(name: str, level: str | None = None) -> logging.Logger:
    """
    Create (or fetch) a named logger with a console handler.

    Args:
        name: Logger name
        level: Logging level name; defaults to the LOG_LEVEL environment
            variable, then INFO

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    # Handlers are attached once per logger name
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    return logger
