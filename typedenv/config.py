import os
from datetime import timedelta
from typing import Callable, Mapping, Protocol, TypeVar

from .errors import EnvParseError
from .logger import log_parse_error
from .parsing import parse_bool, parse_duration, parse_float, parse_int

T = TypeVar("T")

ErrorHook = Callable[[str, Exception], None]


class Config(Protocol):
    """Typed config interface."""
    def get_str(self, name: str, default: str = "") -> str:
        ...
    def get_bool(self, name: str, default: bool = False) -> bool:
        ...
    def get_int(self, name: str, default: int = 0) -> int:
        ...
    def get_float(self, name: str, default: float = 0.0) -> float:
        ...
    def get_duration(self, name: str, default: timedelta = timedelta(0)) -> timedelta:
        ...


class EnvConfig:
    """Environment-backed config provider.

    Every accessor returns ``default`` when the variable is unset or empty.
    A present value that fails to parse is passed to ``on_error`` once, along
    with the variable name, and the accessor returns ``default``. Accessors
    never raise parse errors to the caller.

    ``environ`` defaults to the live ``os.environ``; it is read on every call.
    ``on_error`` defaults to :func:`~typedenv.logger.log_parse_error` and may be
    reassigned at any time. Reassignment is not synchronized with concurrent
    readers, so replace it at startup.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        on_error: ErrorHook | None = None,
    ) -> None:
        self.environ = environ
        self.on_error: ErrorHook = log_parse_error if on_error is None else on_error

    def get_str(self, name: str, default: str = "") -> str:
        env = os.environ if self.environ is None else self.environ
        val = env.get(name)
        return val if val else default

    def get_bool(self, name: str, default: bool = False) -> bool:
        return self._parse(name, default, parse_bool)

    def get_int(self, name: str, default: int = 0) -> int:
        return self._parse(name, default, parse_int)

    def get_float(self, name: str, default: float = 0.0) -> float:
        return self._parse(name, default, parse_float)

    def get_duration(self, name: str, default: timedelta = timedelta(0)) -> timedelta:
        return self._parse(name, default, parse_duration)

    def _parse(self, name: str, default: T, parser: Callable[[str], T]) -> T:
        raw = self.get_str(name, "")
        if not raw:
            return default
        try:
            return parser(raw)
        except EnvParseError as e:
            self.on_error(name, e)
            return default
