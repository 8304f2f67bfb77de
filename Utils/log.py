import logging
import os

_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

_default_level = None


def _normalize(level):
    return level.upper() if isinstance(level, str) else level


def get_logger(name, level=None):
    """Return a logger writing to stderr, configured on first use.

    New loggers start at the level given to ``set_log_level``, else the
    ``SUDOKU_LOG_LEVEL`` environment variable, else INFO. An explicit
    ``level`` always wins.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
        logger.addHandler(handler)
        logger.propagate = False
        initial = _default_level or os.environ.get("SUDOKU_LOG_LEVEL", "INFO")
        logger.setLevel(_normalize(initial))
    if level is not None:
        logger.setLevel(_normalize(level))
    return logger


def set_log_level(level):
    """Apply ``level`` to every logger from ``get_logger``, existing and future."""
    global _default_level
    _default_level = _normalize(level)
    for logger in logging.Logger.manager.loggerDict.values():
        if isinstance(logger, logging.Logger) and logger.handlers and not logger.propagate:
            logger.setLevel(_default_level)
