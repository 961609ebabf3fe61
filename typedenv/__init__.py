"""Typed accessors for process environment variables.

The module-level functions read the live process environment through a
shared :class:`EnvConfig`. Its error hook is process-wide; replace it with
:func:`set_error_hook`, preferably once at startup.
"""

from datetime import timedelta

from .config import Config, EnvConfig, ErrorHook
from .errors import (
    DurationParseError,
    EnvParseError,
    ErrorCode,
    FloatParseError,
    IntParseError,
    UnknownBoolValueError,
)
from .logger import (
    JsonFormatter,
    PlainFormatter,
    configure_logging,
    get_logger,
    log_parse_error,
)
from .parsing import parse_bool, parse_duration, parse_float, parse_int

default_config = EnvConfig()


def get_error_hook() -> ErrorHook:
    """Returns the process-wide error hook."""
    return default_config.on_error


def set_error_hook(hook: ErrorHook | None) -> ErrorHook:
    """Installs the process-wide error hook and returns the previous one.

    ``None`` restores the default logging hook.
    """
    prev = default_config.on_error
    default_config.on_error = log_parse_error if hook is None else hook
    return prev


def get_str(name: str, default: str = "") -> str:
    return default_config.get_str(name, default)


def get_bool(name: str, default: bool = False) -> bool:
    return default_config.get_bool(name, default)


def get_int(name: str, default: int = 0) -> int:
    return default_config.get_int(name, default)


def get_float(name: str, default: float = 0.0) -> float:
    return default_config.get_float(name, default)


def get_duration(name: str, default: timedelta = timedelta(0)) -> timedelta:
    return default_config.get_duration(name, default)


__all__ = [
    "Config",
    "EnvConfig",
    "ErrorHook",
    "default_config",
    "get_error_hook",
    "set_error_hook",
    "get_str",
    "get_bool",
    "get_int",
    "get_float",
    "get_duration",
    "parse_bool",
    "parse_int",
    "parse_float",
    "parse_duration",
    "ErrorCode",
    "EnvParseError",
    "UnknownBoolValueError",
    "IntParseError",
    "FloatParseError",
    "DurationParseError",
    "configure_logging",
    "get_logger",
    "log_parse_error",
    "JsonFormatter",
    "PlainFormatter",
]
