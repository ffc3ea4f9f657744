"""
Root logging configuration
"""

import logging

from tripfriend.core.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)-8s %(name)s %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def setup_logging(level: str = LOG_LEVEL) -> None:
    """
    Configure root logging once. Safe to call repeatedly.
    When handlers already exist (uvicorn, pytest) only the level is applied.
    """
    root = logging.getLogger()
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    root.setLevel(resolved)
    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
