"""In-memory capture of log records for post-mortem export.

The animation owns the terminal, so log output is kept in a ring buffer
instead of being printed, and can be written to a file on exit.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from orbital_clock.limits import MAX_LOG_LINES, MAX_LOG_MESSAGE_LENGTH

TRUNCATION_SUFFIX = "... [truncated]"


@dataclass(slots=True)
class LogEntry:
    """A captured log record."""

    level: str
    logger: str
    message: str
    timestamp: float


log_buffer: deque[LogEntry] = deque(maxlen=MAX_LOG_LINES)


class DebugLogHandler(logging.Handler):
    """Logging handler that appends records to :data:`log_buffer`."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            if len(message) > MAX_LOG_MESSAGE_LENGTH:
                message = message[:MAX_LOG_MESSAGE_LENGTH] + TRUNCATION_SUFFIX
            log_buffer.append(
                LogEntry(
                    level=record.levelname,
                    logger=record.name,
                    message=message,
                    timestamp=record.created,
                )
            )
        except Exception:
            self.handleError(record)


_handler: DebugLogHandler | None = None


def setup_debug_logging(level: int = logging.DEBUG) -> DebugLogHandler:
    """Attach the capture handler to the package logger.

    Idempotent: repeated calls return the already installed handler.
    """
    global _handler

    if _handler is not None:
        return _handler

    handler = DebugLogHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger = logging.getLogger("orbital_clock")
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    _handler = handler

    package_logger.debug("Debug logging initialized")
    return handler


def clear_log_buffer() -> None:
    log_buffer.clear()


def export_logs_to_file(file_path: str | Path) -> int:
    """Write all buffered entries to ``file_path``.

    Returns:
        Number of log entries written.
    """
    output_path = Path(file_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", encoding="utf-8") as f:
        f.write("# orbital-clock debug log\n")
        f.write(f"# Total entries: {len(log_buffer)}\n\n")
        for entry in log_buffer:
            ts = datetime.fromtimestamp(entry.timestamp).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
            f.write(f"{ts} [{entry.level}] {entry.logger}: {entry.message}\n")

    return len(log_buffer)
