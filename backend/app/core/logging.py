"""Service loggers.

Modules call ``get_logger(__name__)`` and get a child of ``estate`` named after
their package path, so ``app.services.listings`` logs as
``estate.services.listings``. One handler on ``estate`` covers all of them.
"""

import logging

from app.core.config import get_settings

ROOT_LOGGER = "estate"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel((level or get_settings().LOG_LEVEL).upper())
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
        root.addHandler(handler)
        root.propagate = False
    return root


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger(ROOT_LOGGER).handlers:
        configure_logging()
    return logging.getLogger(ROOT_LOGGER).getChild(name.removeprefix("app."))
