"""Logging setup for the browser session.

The terminal belongs to the UI while the browser runs, so records never go to
stderr. When logging is enabled they go to a plain file under
the platform log directory. A bounded in-memory handler always keeps the most
recent records for the log view.
"""

from __future__ import annotations

import logging
from collections import deque
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
RECENT_FORMAT = "%(asctime)s %(levelname)s %(message)s"
RECENT_CAPACITY = 200
LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / f"{APP_NAME}.log"


class RecentLogBuffer(logging.Handler):
    """Keep the last ``capacity`` formatted records in memory."""

    def __init__(self, capacity: int = RECENT_CAPACITY) -> None:
        super().__init__(level=logging.INFO)
        self.records: deque[str] = deque(maxlen=capacity)
        self.setFormatter(logging.Formatter(RECENT_FORMAT, datefmt="%H:%M:%S"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.records.append(self.format(record))
        except Exception:
            self.handleError(record)

    def lines(self) -> list[str]:
        return list(self.records)


def configure_logging(enable_file: bool, log_path: Path | None = None) -> RecentLogBuffer:
    """Attach handlers to the ``lazyfm`` logger and return the recent buffer.

    Calling again replaces handlers installed by an earlier call.
    """
    root = logging.getLogger("lazyfm")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.DEBUG if enable_file else logging.INFO)
    root.propagate = False

    recent = RecentLogBuffer()
    root.addHandler(recent)

    if enable_file:
        path = log_path or LOG_PATH
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path, encoding="utf-8")
        except OSError as exc:
            root.warning("file logging disabled, cannot open %s: %s", path, exc)
        else:
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(file_handler)
            root.info("logging to %s", path)
    return recent


__all__ = ["LOG_PATH", "RecentLogBuffer", "configure_logging"]
