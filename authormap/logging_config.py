"""Logging setup for the command-line entry point.

The library itself only creates module loggers; ``configure_logging()`` is
called once by the CLI.
"""

from __future__ import annotations

import logging


def configure_logging(level: int = logging.WARNING) -> None:
    """Attach a stderr handler to the root logger.

    Idempotent: if the root logger already has handlers only the level is
    updated.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        root.addHandler(handler)
    root.setLevel(level)
