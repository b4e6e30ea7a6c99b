"""
Logging setup shared by main.py and the scripts.

Plain text by default; ``LOG_FORMAT=json`` switches to one JSON object per
line for log shippers.
"""

import json
import logging
import sys

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_EXTRA_KEYS = ("attempt", "error_type", "uri", "nodes", "edges")


class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
        }
        for key in _EXTRA_KEYS:
            val = getattr(record, key, None)
            if val is not None:
                log_entry[key] = val
        if record.exc_info and record.exc_info[0]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """Configure the root logger (replaces any existing handlers)."""
    handler = logging.StreamHandler(sys.stderr)
    if fmt.lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt="%H:%M:%S"))

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # the driver is chatty at DEBUG during connection retries
    logging.getLogger("neo4j").setLevel(logging.WARNING)
