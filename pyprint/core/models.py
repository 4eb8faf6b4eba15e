from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Self


class OptionName(Enum):
    SEP = "sep"
    END = "end"
    FILE = "file"
    FLUSH = "flush"


class Conversion(Enum):
    DISPLAY = "display"
    DEBUG = "debug"

    def convert(self, value: Any) -> str:
        if self is Conversion.DEBUG:
            return repr(value)
        return str(value)


@dataclass(frozen=True, slots=True)
class Option:
    """A named option passed among positional values, e.g. ``sep("-")``."""

    name: OptionName
    value: Any

    def __repr__(self) -> str:
        return f"{self.name.value}={self.value!r}"


def sep(value: Any) -> Option:
    return Option(OptionName.SEP, value)


def end(value: Any) -> Option:
    return Option(OptionName.END, value)


def file(value: Any) -> Option:
    return Option(OptionName.FILE, value)


def flush(value: Any = True) -> Option:
    return Option(OptionName.FLUSH, value)


class SinkWriteFailure(Exception):
    """Raised (or carried in a PrintResult) when the sink rejects a write or flush."""

    def __init__(self, step: str, error: BaseException) -> None:
        super().__init__(f"{step} to sink failed: {error}")
        self.step = step
        self.error = error


@dataclass(frozen=True, slots=True)
class PrintResult:
    error: Optional[SinkWriteFailure] = None

    @classmethod
    def success(cls) -> Self:
        return cls()

    @classmethod
    def failure(cls, error: SinkWriteFailure) -> Self:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> None:
        if self.error is not None:
            raise self.error
