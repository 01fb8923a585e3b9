"""
Logging Setup
==============
The terminal belongs to the renderer, so all diagnostics go to a file.
"""

import logging


LOG_FORMAT = '[%(asctime)s][%(levelname)s] %(name)s: %(message)s'

_handler = None


def setup_logging(log_path: str, level: int = logging.INFO) -> logging.Logger:
    """
    Attach a file handler to the package logger.

    Safe to call more than once: a previous handler is replaced, never stacked.
    """
    global _handler
    logger = logging.getLogger('plane_war')
    logger.setLevel(level)
    logger.propagate = False

    if _handler is not None:
        logger.removeHandler(_handler)
        _handler.close()

    _handler = logging.FileHandler(log_path, encoding='utf-8')
    _handler.setLevel(level)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    return logger
