"""Rich logging for the siteformats command line.

Log records go to stderr so that ``siteformats list --json`` and friends keep
stdout clean for machine readable output. The level is read from
``SITEFORMATS_LOG_LEVEL`` (``DEBUG``, ``INFO``, ...) on every call.
"""

from __future__ import annotations

import logging
import os
from typing import Final

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["configure_logging", "console"]

LOG_LEVEL_ENV: Final[str] = "SITEFORMATS_LOG_LEVEL"
_MANAGED_ATTR: Final[str] = "_siteformats_managed"

console = Console(stderr=True)


def _level_from_env() -> int:
    name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level <name>" for names it does not know
    return level if isinstance(level, int) else logging.INFO


def _is_managed(handler: logging.Handler) -> bool:
    return isinstance(handler, RichHandler) and getattr(handler, _MANAGED_ATTR, False)


def _new_handler() -> RichHandler:
    # Format names and media types contain brackets, so markup stays off.
    handler = RichHandler(console=console, rich_tracebacks=True, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(handler, _MANAGED_ATTR, True)
    return handler


def configure_logging() -> None:
    """Route the root logger through a single Rich handler.

    Calling this more than once only refreshes the level.
    """
    root = logging.getLogger()
    if not any(_is_managed(handler) for handler in root.handlers):
        root.handlers.clear()
        root.addHandler(_new_handler())

    root.setLevel(_level_from_env())
    logging.captureWarnings(True)
