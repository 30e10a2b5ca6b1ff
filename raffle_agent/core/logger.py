import logging
import sys

from raffle_agent.core.config import env_config

_LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
_initialized = False


def _init_logging() -> None:
    """Configure the package logger once."""
    global _initialized # noqa
    if _initialized:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))

    root = logging.getLogger('raffle_agent')
    root.setLevel(getattr(logging, env_config.LOG_LEVEL.upper(), logging.INFO))
    root.addHandler(handler)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger.

    Args:
        name: Usually __name__ of the calling module

    Returns:
        Logger attached to the package handler
    """
    _init_logging()
    return logging.getLogger(name)
