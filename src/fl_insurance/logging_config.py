"""Logging setup for report runs.

Log records go to stderr, optionally mirrored to a UTF-8 file. Stdout is left
for the single success line printed by the CLI, so output can be piped or
checked without filtering log noise.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

def configure_logging(log_path: Path | None = None, level: int = logging.INFO) -> None:
    """Install the root handlers for a run, replacing any configured earlier.

    `main` may run several times in one process, so existing root handlers
    are replaced instead of being stacked.

    Args:
        log_path: Optional log file; its parent directory is created.
        level: Root level, normally `Settings.log_level`.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
