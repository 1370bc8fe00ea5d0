"""Logging setup shared by the CLI and any embedding application."""

import json
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Extra attributes copied into JSON records when present,
# e.g. logger.error("...", extra={"content_id": cid})
_EXTRA_FIELDS = ("content_id", "operation", "status", "duration_ms", "url")


class JsonFormatter(logging.Formatter):
    """Emit log records as newline-delimited JSON."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            if hasattr(record, key):
                data[key] = getattr(record, key)
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data, default=str)


def configure_logging(config=None, level: str | None = None,
                      log_format: str | None = None, stream=None) -> logging.Handler:
    """Install a single stream handler on the root logger.

    Explicit *level* / *log_format* win over the values on *config*
    (an ``AppConfig``).  Returns the installed handler.
    """
    level = level or getattr(config, "log_level", None) or "INFO"
    log_format = log_format or getattr(config, "log_format", None) or "text"

    handler = logging.StreamHandler(stream or sys.stderr)
    if log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(
        handlers=[handler],
        level=getattr(logging, level.upper(), logging.INFO),
        force=True,
    )
    return handler
