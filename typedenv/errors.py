from enum import Enum


class ErrorCode(str, Enum):
    """Parse error codes."""
    UNKNOWN_BOOL_VALUE = "unknown_bool_value"

    INVALID_SYNTAX = "invalid_syntax"
    OUT_OF_RANGE = "out_of_range"

    INVALID_DURATION = "invalid_duration"
    MISSING_UNIT = "missing_unit"
    UNKNOWN_UNIT = "unknown_unit"


class EnvParseError(ValueError):
    """Base error for environment values that fail to parse."""

    func = "parse"

    def __init__(self, value: str, reason: str, code: ErrorCode) -> None:
        self.value = value
        self.reason = reason
        self.code = code
        super().__init__(f"{self.func}: parsing '{value}': {reason}")


class UnknownBoolValueError(EnvParseError):
    """Bool value outside the accepted token set."""

    func = "bool"

    def __init__(self, value: str) -> None:
        super().__init__(value, "unknown bool value", ErrorCode.UNKNOWN_BOOL_VALUE)
        self.args = (f"unknown bool value: '{value}'",)


class IntParseError(EnvParseError):
    """Integer parse error."""

    func = "int"


class FloatParseError(EnvParseError):
    """Float parse error."""

    func = "float"


class DurationParseError(EnvParseError):
    """Duration parse error."""

    func = "duration"
