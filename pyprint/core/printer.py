from __future__ import annotations

import logging
import sys
from typing import Any, Optional, Protocol, Self, runtime_checkable

from pyprint.core import state
from pyprint.core.models import PrintResult, SinkWriteFailure

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = " "
DEFAULT_TERMINATOR = "\n"


@runtime_checkable
class Writable(Protocol):
    def write(self, text: str, /) -> Any: ...

    def flush(self) -> Any: ...


class PrintJob:
    """
    Single-use builder behind every print call.

    Configure with the ``set_*`` methods and ``append_element`` in any order,
    then call ``render()`` exactly once. Output is written piecewise:
    first element, then separator + element for each remaining element,
    then the terminator, then an optional flush.
    """

    def __init__(self, sink: Optional[Writable] = None) -> None:
        self.default_sink: Writable = sink if sink is not None else sys.stdout
        self.elements: list[str] = []
        self.separator = DEFAULT_SEPARATOR
        self.terminator = DEFAULT_TERMINATOR
        self.sink: Writable = self.default_sink
        self.flush_on_complete = False
        self._rendered = False

    def append_element(self, value: str) -> Self:
        self.elements.append(value)
        return self

    def set_separator(self, value: Any) -> Self:
        self.separator = DEFAULT_SEPARATOR if value is None else str(value)
        return self

    def set_terminator(self, value: Any) -> Self:
        self.terminator = DEFAULT_TERMINATOR if value is None else str(value)
        return self

    def set_sink(self, sink: Optional[Writable]) -> Self:
        self.sink = self.default_sink if sink is None else sink
        return self

    def set_flush(self, value: Any) -> Self:
        self.flush_on_complete = bool(value)
        return self

    def render(self) -> PrintResult:
        if self._rendered:
            raise RuntimeError("PrintJob has already been rendered")
        self._rendered = True

        result = self._render()
        state.record_result(result)
        return result

    def _render(self) -> PrintResult:
        logger.debug(
            "Rendering %d element(s) to %r (sep=%r, end=%r, flush=%s)",
            len(self.elements),
            self.sink,
            self.separator,
            self.terminator,
            self.flush_on_complete,
        )
        try:
            if self.elements:
                first, *rest = self.elements
                self.sink.write(first)
                for element in rest:
                    self.sink.write(self.separator + element)
            self.sink.write(self.terminator)
        except (OSError, ValueError) as e:
            return _failed("write", e)

        if self.flush_on_complete:
            try:
                self.sink.flush()
            except (OSError, ValueError) as e:
                return _failed("flush", e)

        return PrintResult.success()


def _failed(step: str, error: Exception) -> PrintResult:
    # ValueError covers writes to a closed stream.
    failure = SinkWriteFailure(step, error)
    failure.__cause__ = error
    logger.debug("Sink %s failed: %s", step, error)
    return PrintResult.failure(failure)
