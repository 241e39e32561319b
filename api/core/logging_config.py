"""
Process-wide logging setup.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HANDLER_NAME = "products_api"


def setup_logging(level: str = "INFO") -> None:
    """
    Attach a console handler to the root logger once and set its level.

    Calling it again (tests, repeated `create_app()`) only updates the level.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if any(handler.get_name() == HANDLER_NAME for handler in root.handlers):
        return None

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.set_name(HANDLER_NAME)
    root.addHandler(handler)
