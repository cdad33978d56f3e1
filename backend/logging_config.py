"""Logging configuration for the assessment backend."""

import logging
import sys


LOG_FORMAT = "%(asctime)s level=%(levelname)s module=%(module)s message=%(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once.

    Args:
        level: Log level name, e.g. "DEBUG" or "INFO"
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Only attach a handler if not already configured
    if not any(getattr(h, "_vc_assessment", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._vc_assessment = True
        root.addHandler(handler)

    # SQL echo is controlled by the engine, keep its logger quiet otherwise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
