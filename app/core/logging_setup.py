import json
import logging
import logging.config
import os
from datetime import datetime, timezone

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%fZ"


class JsonFormatter(logging.Formatter):
    """One compact JSON object per line, for log collectors."""

    def formatTime(self, record, datefmt=None):
        dt = datetime.fromtimestamp(record.created, timezone.utc)
        return dt.strftime(datefmt or TIMESTAMP_FORMAT)

    def format(self, record) -> str:
        payload = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging() -> None:
    debug_mode = os.getenv("LOG_LEVEL", "info").lower() == "debug"
    level = os.getenv("LOG_LEVEL", "info").upper()
    if level not in logging.getLevelNamesMapping():
        level = "INFO"
    formatter = "json" if os.getenv("LOG_FORMAT", "json").lower() == "json" else "text"

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": JsonFormatter,
                "datefmt": TIMESTAMP_FORMAT,
            },
            "text": {
                "format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": formatter,
                "stream": "ext://sys.stdout",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": level,
        },
    }

    logging.config.dictConfig(logging_config)

    # httpx logs every request at INFO
    quiet = logging.DEBUG if debug_mode else logging.WARNING
    logging.getLogger("httpx").setLevel(quiet)
    logging.getLogger("httpcore").setLevel(quiet)
