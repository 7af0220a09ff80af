"""Opt-in stdout logging for applications that embed busline.

The bus itself never calls this; it only emits records through module loggers.
"""

import logging
import sys


def setup_logger(name: str = "busline", level: str = "WARNING") -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger.handlers:
        return logger  # avoid duplicate handlers

    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s: %(message)s")
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    logger.propagate = False
    return logger
