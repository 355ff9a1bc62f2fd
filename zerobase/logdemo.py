"""Structured JSON logging demo."""

import logging
import sys
from datetime import datetime

from zerobase.strutil import to_json_str

LOGGER_NAME = "zerobase.logdemo"

_LEVEL_NAMES = {
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "fatal",
}
_RESERVED_KEYS = ("time", "msg", "level")


def _rfc3339(timestamp):
    text = datetime.fromtimestamp(timestamp).astimezone().isoformat(timespec="seconds")
    return text[:-6] + "Z" if text.endswith("+00:00") else text


def _plain(value):
    if isinstance(value, BaseException):
        return str(value)
    return value


class JsonFormatter(logging.Formatter):
    """Render a record and its ``fields`` as one JSON object with sorted keys."""

    def format(self, record):
        fields = {key: _plain(value) for key, value in (getattr(record, "fields", None) or {}).items()}
        for key in _RESERVED_KEYS:
            if key in fields:
                fields["fields." + key] = fields.pop(key)
        fields["time"] = _rfc3339(record.created)
        fields["msg"] = record.getMessage()
        fields["level"] = _LEVEL_NAMES.get(record.levelno, record.levelname.lower())
        return to_json_str(fields)


def configure(stream=None):
    """Return the demo logger writing JSON lines to ``stream`` (stdout by default) at warning level."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    logger.setLevel(logging.WARNING)
    logger.propagate = False
    return logger


def demo(logger=None):
    """Log the walrus messages; the final fatal entry ends the process with status 1."""
    log = logger if logger is not None else configure()
    log.info(
        "A group of walrus emerges from the ocean",
        extra={"fields": {"animal": "walrus", "size": 10}},
    )
    log.warning(
        "The group's number increased tremendously!",
        extra={"fields": {"omg": True, "number": 122}},
    )
    log.critical("The ice breaks!", extra={"fields": {"omg": True, "number": 100}})
    raise SystemExit(1)