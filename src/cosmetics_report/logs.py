from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "warning") -> None:
    """Send diagnostics to stderr so stdout carries only the report."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger()
    for h in list(root.handlers):
        if getattr(h, "_cosmetics_report", False):
            root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._cosmetics_report = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(level)
