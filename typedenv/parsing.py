"""Pure parsers for raw environment values.

Every parser takes a non-empty raw string and either returns the typed value
or raises the matching :class:`~typedenv.errors.EnvParseError` subclass.
Nothing here touches the environment or logs.
"""

import math
import re
from datetime import timedelta

from .errors import (
    DurationParseError,
    ErrorCode,
    FloatParseError,
    IntParseError,
    UnknownBoolValueError,
)

TRUE_TOKENS = frozenset({"true", "t", "1"})
FALSE_TOKENS = frozenset({"false", "f", "0"})

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

_MAX_INT_DIGITS = len(str(INT64_MAX))
_MAX_FRACTION_DIGITS = 18

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_FLOAT_SPECIAL_RE = re.compile(r"[+-]?inf(?:inity)?|nan", re.IGNORECASE)

_DURATION_NUMBER_RE = re.compile(r"([0-9]*)(?:\.([0-9]*))?")
_DURATION_UNIT_RE = re.compile(r"[^0-9.]*")

NANOSECOND = 1
MICROSECOND = 1_000 * NANOSECOND
MILLISECOND = 1_000 * MICROSECOND
SECOND = 1_000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

DURATION_UNITS = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # micro sign
    "μs": MICROSECOND,  # greek mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}


def parse_bool(text: str) -> bool:
    """Parses one of the six accepted tokens, case-insensitively.

    ``true``, ``t`` and ``1`` are True; ``false``, ``f`` and ``0`` are False.
    No other spelling is accepted and surrounding whitespace is not stripped.
    """
    v = text.lower()
    if v in TRUE_TOKENS:
        return True
    if v in FALSE_TOKENS:
        return False
    raise UnknownBoolValueError(v)


def parse_int(text: str) -> int:
    """Parses a base-10 signed integer in the 64-bit range."""
    if not _INT_RE.fullmatch(text):
        raise IntParseError(text, "invalid syntax", ErrorCode.INVALID_SYNTAX)
    if len(text.lstrip("+-").lstrip("0")) > _MAX_INT_DIGITS:
        raise IntParseError(text, "value out of range", ErrorCode.OUT_OF_RANGE)
    n = int(text)
    if n < INT64_MIN or n > INT64_MAX:
        raise IntParseError(text, "value out of range", ErrorCode.OUT_OF_RANGE)
    return n


def parse_float(text: str) -> float:
    """Parses a decimal or exponential float literal (or inf/nan)."""
    if _FLOAT_SPECIAL_RE.fullmatch(text):
        return float(text)
    if not _FLOAT_RE.fullmatch(text):
        raise FloatParseError(text, "invalid syntax", ErrorCode.INVALID_SYNTAX)
    f = float(text)
    if math.isinf(f):
        raise FloatParseError(text, "value out of range", ErrorCode.OUT_OF_RANGE)
    return f


def parse_duration(text: str) -> timedelta:
    """Parses a duration such as ``300ms``, ``-1.5h`` or ``2h45m``.

    The value is a possibly signed sequence of decimal numbers, each with an
    optional fraction and a mandatory unit suffix. Valid units are ``ns``,
    ``us`` (or ``µs``), ``ms``, ``s``, ``m`` and ``h``. The total is computed in
    integer nanoseconds, must fit in a signed 64-bit count, and is truncated
    toward zero to microseconds for the returned ``timedelta``.
    """
    s = text
    neg = False
    if s and s[0] in "+-":
        neg = s[0] == "-"
        s = s[1:]
    if s == "0":
        return timedelta(0)
    if not s:
        raise _invalid_duration(text)

    limit = INT64_MAX + 1 if neg else INT64_MAX
    total = 0
    while s:
        m = _DURATION_NUMBER_RE.match(s)
        whole, frac = m.group(1), m.group(2) or ""
        if not whole and not frac:
            raise _invalid_duration(text)
        s = s[m.end():]

        unit = _DURATION_UNIT_RE.match(s).group(0)
        if not unit:
            raise DurationParseError(text, "missing unit in duration", ErrorCode.MISSING_UNIT)
        scale = DURATION_UNITS.get(unit)
        if scale is None:
            raise DurationParseError(
                text, f"unknown unit '{unit}' in duration", ErrorCode.UNKNOWN_UNIT
            )
        s = s[len(unit):]

        whole = whole.lstrip("0")
        if len(whole) > _MAX_INT_DIGITS:
            raise _invalid_duration(text)
        total += int(whole or "0") * scale
        if frac:
            # digits past 18 are below nanosecond precision for every unit
            frac = frac[:_MAX_FRACTION_DIGITS]
            total += int(frac) * scale // 10 ** len(frac)
        if total > limit:
            raise _invalid_duration(text)

    micros = total // MICROSECOND
    return timedelta(microseconds=-micros if neg else micros)


def _invalid_duration(text: str) -> DurationParseError:
    return DurationParseError(text, "invalid duration", ErrorCode.INVALID_DURATION)
