"""Logging setup for astarpath.

Every module logs through a child of the ``astarpath`` logger obtained with
``get_logger(__name__)``. The package logger owns a single handler writing to
standard error, which keeps standard output free for command results such as
``astarpath path --json``.
"""

import logging
import sys
from typing import Optional

_PACKAGE_LOGGER = "astarpath"
_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handler installed by setup_root_logger; None until the first setup
_handler: Optional[logging.Handler] = None


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the package handler once.

    Later calls leave the existing handler and level alone until
    ``reset_logging()`` is called.

    Args:
        level: Level for the package logger and its handler.
        format_string: Record format; defaults to timestamp, name, level, message.
        handler: Handler to install; defaults to a ``StreamHandler`` on
            ``sys.stderr``.
    """
    global _handler

    if _handler is not None:
        return

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))

    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    # Records still reach the root logger so pytest's caplog sees them
    package_logger.propagate = True

    _handler = handler


def get_logger(name: str) -> logging.Logger:
    """Return a logger that defers its level to the ``astarpath`` logger."""
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and of its handler."""
    setup_root_logger()

    logging.getLogger(_PACKAGE_LOGGER).setLevel(level)
    if _handler is not None:
        _handler.setLevel(level)


def level_for_flags(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI ``--verbose``/``--quiet`` flags to a logging level.

    ``--verbose`` wins when both are given.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def reset_logging() -> None:
    """Remove the package handler so the next setup starts fresh (for tests)."""
    global _handler

    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    if _handler is not None:
        package_logger.removeHandler(_handler)
    package_logger.setLevel(logging.NOTSET)
    _handler = None


setup_root_logger()
