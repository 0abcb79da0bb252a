"""Logging utilities.

All loggers live under the ``htmltext`` namespace.  The package logger carries
a :class:`logging.NullHandler` so that library use stays silent unless the
host application configures logging.  :func:`configure_logging` is used by the
command line interface; repeated calls leave exactly one stderr handler.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "htmltext"
_FORMAT = "%(levelname)s %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class _CLIHandler(logging.StreamHandler):
    """Stream handler marker so :func:`configure_logging` can find its own."""


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under ``htmltext``.

    ``name`` may be a module ``__name__`` (already inside the namespace) or a
    short suffix such as ``"cli"``.
    """

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Route package logs to the current ``sys.stderr``.

    ``verbose`` selects ``DEBUG`` instead of ``WARNING``.
    """

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in [h for h in logger.handlers if isinstance(h, _CLIHandler)]:
        logger.removeHandler(handler)
    handler = _CLIHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger


__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]
