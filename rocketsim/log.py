"""Logging setup for the simulator and the pattern demos.

Modules log through ``logging.getLogger(__name__)``. The process entry point
calls :func:`configure_logging` once; it installs a console handler and a
:class:`LogHistory` handler that keeps every formatted line in memory.

Example:
    >>> import logging
    >>> from rocketsim.log import configure_logging
    >>>
    >>> history = configure_logging(level=logging.INFO)
    >>> logging.getLogger("rocketsim").info("Launching rocket!")
    >>> history.get_history()[-1]
    '[INFO] [2025-01-01T12:00:00.000+00:00] Launching rocket!'
"""

import logging
import sys
from datetime import datetime, timezone
from typing import TextIO


ROOT_LOGGERS: tuple[str, ...] = ("rocketsim", "patterns")

LOG_FORMAT = "[%(levelname)s] [%(asctime)s] %(message)s"

# Handlers installed by the last configure_logging() call
_installed: list[logging.Handler] = []


class IsoTimestampFormatter(logging.Formatter):
    """Formatter that renders ``asctime`` as an ISO-8601 UTC timestamp."""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        stamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return stamp.isoformat(timespec="milliseconds")


class LogHistory(logging.Handler):
    """Handler that keeps formatted log lines in emission order."""

    def __init__(self, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._lines: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._lines.append(self.format(record))
        except Exception:
            self.handleError(record)

    def get_history(self) -> list[str]:
        """Get recorded log lines (copy)."""
        return self._lines.copy()

    def clear(self) -> None:
        self._lines.clear()


def configure_logging(
    level: int | str = logging.INFO,
    stream: TextIO | None = None,
) -> LogHistory:
    """Install console and history handlers on the package loggers.

    Calling this again replaces the handlers installed by a previous call.

    Args:
        level: Minimum level for both handlers
        stream: Console stream (defaults to stdout)

    Returns:
        The history handler, to be passed to whoever needs the log lines
    """
    formatter = IsoTimestampFormatter(LOG_FORMAT)

    console = logging.StreamHandler(stream if stream is not None else sys.stdout)
    console.setFormatter(formatter)

    history = LogHistory()
    history.setFormatter(formatter)

    for name in ROOT_LOGGERS:
        logger = logging.getLogger(name)
        for handler in _installed:
            logger.removeHandler(handler)
        logger.addHandler(console)
        logger.addHandler(history)
        logger.setLevel(level)

    _installed[:] = [console, history]
    return history
