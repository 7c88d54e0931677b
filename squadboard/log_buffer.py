"""In-memory ring buffer of recent log records, served at /api/logs."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import asdict, dataclass
from datetime import datetime, timezone

BUFFER_SIZE = 200
TARGET_LOGGERS = (
    "squadboard.main",
    "squadboard.fixtures",
    "squadboard.fetch",
    "squadboard.players",
    "squadboard.squads",
)


@dataclass(frozen=True)
class LogEntry:
    timestamp: str
    level: str
    levelno: int
    logger: str
    message: str


class BufferHandler(logging.Handler):
    """Keeps the last *maxlen* formatted records."""

    def __init__(self, maxlen: int = BUFFER_SIZE) -> None:
        super().__init__()
        self._buffer: deque[LogEntry] = deque(maxlen=maxlen)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._buffer.append(
                LogEntry(
                    timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
                    level=record.levelname,
                    levelno=record.levelno,
                    logger=record.name,
                    message=self.format(record),
                )
            )
        except Exception:
            self.handleError(record)

    def entries(self, limit: int = 100, min_level: str | None = None) -> list[dict]:
        """Newest-first entries, optionally only those at *min_level* or above."""
        items = list(self._buffer)
        if min_level:
            threshold = logging.getLevelName(min_level.upper())
            if isinstance(threshold, int):
                items = [entry for entry in items if entry.levelno >= threshold]
        items.reverse()
        return [asdict(entry) for entry in items[: max(limit, 0)]]

    def clear(self) -> None:
        self._buffer.clear()


_handler: BufferHandler | None = None


def get_buffer_handler() -> BufferHandler:
    global _handler
    if _handler is None:
        _handler = BufferHandler()
        _handler.setFormatter(logging.Formatter("%(message)s"))
        _handler.setLevel(logging.INFO)
    return _handler


def install_buffer_handler() -> BufferHandler:
    """Attach the buffer handler to every service logger tree."""
    handler = get_buffer_handler()
    for name in TARGET_LOGGERS:
        target = logging.getLogger(name)
        if handler not in target.handlers:
            target.addHandler(handler)
        if target.level == logging.NOTSET or target.level > logging.INFO:
            target.setLevel(logging.INFO)
    return handler
