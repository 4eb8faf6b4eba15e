from __future__ import annotations

from typing import Callable, Optional

import pytest

from pyprint.core import state


class RecordingSink:
    """In-memory sink that logs every call and can fail on a chosen write."""

    def __init__(self, fail_on_write: Optional[int] = None, fail_on_flush: bool = False) -> None:
        self.calls: list[tuple[str, str]] = []
        self.fail_on_write = fail_on_write
        self.fail_on_flush = fail_on_flush

    def write(self, text: str) -> int:
        writes = sum(1 for kind, _ in self.calls if kind == "write")
        if self.fail_on_write is not None and writes + 1 == self.fail_on_write:
            raise OSError(28, "No space left on device")
        self.calls.append(("write", text))
        return len(text)

    def flush(self) -> None:
        if self.fail_on_flush:
            raise BrokenPipeError(32, "Broken pipe")
        self.calls.append(("flush", ""))

    @property
    def text(self) -> str:
        return "".join(t for kind, t in self.calls if kind == "write")

    @property
    def flush_count(self) -> int:
        return sum(1 for kind, _ in self.calls if kind == "flush")


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def make_sink() -> Callable[..., RecordingSink]:
    return RecordingSink


@pytest.fixture(autouse=True)
def _fresh_last_result():
    state.reset()
    yield
    state.reset()
