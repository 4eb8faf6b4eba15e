from __future__ import annotations

import threading

from pyprint.core.models import PrintResult

_local = threading.local()


def record_result(result: PrintResult) -> None:
    _local.result = result


def last_result() -> PrintResult:
    """
    Outcome of the most recent render on the calling thread.
    Threads that never rendered see a success.
    """
    result = getattr(_local, "result", None)
    return PrintResult.success() if result is None else result


def reset() -> None:
    _local.__dict__.pop("result", None)
