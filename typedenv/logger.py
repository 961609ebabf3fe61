import json
import logging
import sys
import time
from typing import Any

LOGGER_NAME = "typedenv"

_RESERVED_ATTRS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
    "message",
    "asctime",
}


class JsonFormatter(logging.Formatter):
    """JSON log formatter."""

    def __init__(self, *, utc: bool = True) -> None:
        super().__init__()
        self.utc = utc

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": self._timestamp(record.created),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        extras = {k: v for k, v in record.__dict__.items() if k not in _RESERVED_ATTRS}
        if extras:
            payload["extra"] = extras

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)

    def _timestamp(self, created: float) -> str:
        if self.utc:
            return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(created))
        return time.strftime("%Y-%m-%dT%H:%M:%S%z", time.localtime(created))


class PlainFormatter(logging.Formatter):
    """Plain text log formatter."""

    def __init__(self, *, utc: bool = True) -> None:
        dtfmt = "%Y-%m-%dT%H:%M:%SZ" if utc else "%Y-%m-%d %H:%M:%S%z"
        super().__init__(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt=dtfmt)
        self.converter = time.gmtime if utc else time.localtime


def get_logger(name: str | None = None) -> logging.Logger:
    """Returns a namespaced logger."""
    return logging.getLogger(name or LOGGER_NAME)


def log_parse_error(key: str, error: Exception) -> None:
    """Default error hook: one warning line per malformed variable."""
    get_logger().warning(
        "error while parsing %s: %s",
        key,
        error,
        extra={
            "env_key": key,
            "error_code": getattr(getattr(error, "code", None), "value", None),
            "value": getattr(error, "value", None),
        },
    )


def configure_logging(
    *,
    level: str | None = None,
    fmt: str | None = None,
    utc: bool | None = None,
) -> None:
    """Configures root logging from arguments, falling back to TYPEDENV_LOG_* variables."""
    from .config import EnvConfig

    cfg = EnvConfig()
    level_str = (level if level is not None else cfg.get_str("TYPEDENV_LOG_LEVEL", "INFO")).upper()
    fmt_str = (fmt if fmt is not None else cfg.get_str("TYPEDENV_LOG_FORMAT", "plain")).lower()
    use_utc = cfg.get_bool("TYPEDENV_LOG_UTC", True) if utc is None else utc

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    root.setLevel(getattr(logging, level_str, logging.INFO))

    handler = logging.StreamHandler(stream=sys.stdout)
    if fmt_str == "json":
        handler.setFormatter(JsonFormatter(utc=use_utc))
    else:
        handler.setFormatter(PlainFormatter(utc=use_utc))

    root.addHandler(handler)

    log = get_logger("typedenv.boot")
    log.debug("logging configured", extra={"level": level_str, "format": fmt_str, "utc": use_utc})
