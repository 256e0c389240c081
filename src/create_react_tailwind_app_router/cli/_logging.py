"""Rich-backed logging for the CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "create_react_tailwind_app_router"

_console = Console(stderr=True)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace.

    Handlers live on the package logger only; see setup_logging().
    """
    return logging.getLogger(name)


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a RichHandler to the package logger (once) and set its level."""
    root = logging.getLogger(LOGGER_NAME)

    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(console=_console, show_path=False, show_time=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)

    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return root
