"""Console logging via Rich.

Installs a single ``RichHandler`` on the root logger and routes uvicorn's
loggers through it, so access lines and application messages share one
format (time, level, message).
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger. Safe to call more than once."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        log_time_format="%H:%M:%S",
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level.upper())

    for name in _UVICORN_LOGGERS:
        uv_logger = logging.getLogger(name)
        uv_logger.handlers.clear()
        uv_logger.propagate = True

    # Requests are logged by the app's own middleware.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
