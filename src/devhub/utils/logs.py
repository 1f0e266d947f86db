"""Logging set-up for the ``devhub`` process.

Modules log through ``logging.getLogger(__name__)``; this module only
decides where those records go.  Rich is optional here, as everywhere
in the CLI: without it records are written as plain lines to stderr.
"""

from __future__ import annotations

import logging

_FORMAT: str = "%(name)s: %(message)s"


def _build_handler() -> logging.Handler:
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s " + _FORMAT))
        return handler

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter(_FORMAT))
    return handler


def configure_logging(level: str = "WARNING") -> None:
    """Attach a single stderr handler to the ``devhub`` logger.

    Calling this more than once replaces the previous handler rather
    than stacking duplicates.
    """
    logger = logging.getLogger("devhub")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(_build_handler())
    logger.setLevel(level.upper())
