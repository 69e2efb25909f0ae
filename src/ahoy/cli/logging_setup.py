"""Diagnostic logging for the ``ahoy`` logger namespace.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached here, once per process, by the CLI entry point.  Output goes
to stderr so it never mixes with a command's stdout.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME: str = "ahoy"


def _build_handler() -> logging.Handler:
    """Return a Rich log handler, or a plain stream handler without Rich."""
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        return handler
    return RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )


def configure_logging(verbose: bool) -> logging.Logger:
    """Attach a single stderr handler to the ``ahoy`` logger.

    Level is ``INFO`` when *verbose*, ``WARNING`` otherwise.  Calling it
    again replaces the previous handler instead of stacking a new one.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(_build_handler())
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    logger.propagate = False
    return logger
