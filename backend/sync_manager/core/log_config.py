"""
Logging setup: a single stdout handler on the package logger.
"""

import logging
import sys


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stdout handler to the sync_manager logger once; later calls only change the level."""
    logger = logging.getLogger("sync_manager")
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(levelname)s:     %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.propagate = True
    return logger
