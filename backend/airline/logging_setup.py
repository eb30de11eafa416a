"""
Logging configuration for the flights service.

Every module logs through ``logging.getLogger(__name__)``; since all modules
live under the ``airline`` package, configuring that logger is enough.
"""
import logging
import sys

from airline.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Attach a stdout handler to the ``airline`` logger.

    Safe to call more than once: existing handlers are replaced.
    """
    log_level = getattr(logging, (level or settings.log_level).upper())

    logger = logging.getLogger("airline")
    logger.setLevel(log_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)

    # SQL echo is already handled by the engine in development
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return logger
