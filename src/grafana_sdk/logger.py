"""
Logging setup for the ``grafana-sdk`` command line.

Library modules only create loggers (``logging.getLogger(__name__)``);
handlers are installed here, once, by the CLI.  Output is either the usual
one-line text format or JSON lines (``--log-json`` / ``LOG_JSON``), which
carry any ``extra=`` fields passed at the call site.
"""

from __future__ import annotations

import json
import logging
from typing import IO, Any

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Attributes every LogRecord has; anything else came in through ``extra=``
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "asctime",
}


class JsonFormatter(logging.Formatter):
    """One JSON object per record: time, level, logger, message, extras."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
    stream: IO[str] | None = None,
) -> None:
    """
    Point the root logger at a single stream handler.

    Raises ``ValueError`` for an unknown level name, before touching any
    existing handlers.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter() if json_format else logging.Formatter(TEXT_FORMAT))
    root.handlers[:] = [handler]
