"""
Python-style print entry points.

Every function accepts values and options in any order::

    print("a", sep("-"), "b", end="!\\n")

Options may repeat; the last occurrence wins. Keyword options count as
coming after every positional argument. The ``*_or_abort`` variants raise
``SinkWriteFailure`` instead of returning a failed ``PrintResult``, which
suits call sites that treat console output as infallible. Nothing already
written to the sink is rolled back.
"""
from __future__ import annotations

import logging
import sys
from typing import Any, Callable

from pyprint.core import state
from pyprint.core.dispatcher import dispatch
from pyprint.core.models import Conversion, PrintResult
from pyprint.core.printer import Writable

logger = logging.getLogger(__name__)


def _stdout() -> Writable:
    return sys.stdout


def _stderr() -> Writable:
    return sys.stderr


def _or_abort(result: PrintResult) -> None:
    if result.error is not None:
        logger.error("Printing failed, aborting: %s", result.error)
        raise result.error


def _run(conversion: Conversion, default_sink: Callable[[], Writable], args: tuple[Any, ...], options: dict[str, Any]) -> PrintResult:
    # Resolved per call so redirected sys.stdout / sys.stderr are honored.
    return dispatch(args, options, conversion=conversion, sink=default_sink())


def print(*args: Any, **options: Any) -> PrintResult:  # noqa: A001
    return _run(Conversion.DISPLAY, _stdout, args, options)


def print_or_abort(*args: Any, **options: Any) -> None:
    _or_abort(print(*args, **options))


def debug_print(*args: Any, **options: Any) -> PrintResult:
    return _run(Conversion.DEBUG, _stdout, args, options)


def debug_print_or_abort(*args: Any, **options: Any) -> None:
    _or_abort(debug_print(*args, **options))


def error_print(*args: Any, **options: Any) -> PrintResult:
    return _run(Conversion.DISPLAY, _stderr, args, options)


def error_print_or_abort(*args: Any, **options: Any) -> None:
    _or_abort(error_print(*args, **options))


def debug_error_print(*args: Any, **options: Any) -> PrintResult:
    return _run(Conversion.DEBUG, _stderr, args, options)


def debug_error_print_or_abort(*args: Any, **options: Any) -> None:
    _or_abort(debug_error_print(*args, **options))


def last_result() -> PrintResult:
    return state.last_result()


# Short names: p = plain, d = debug, e = stderr; "rn" variants abort on failure.
pprint = print
pprn = print_or_abort
dprint = debug_print
dprn = debug_print_or_abort
eprint = error_print
eprn = error_print_or_abort
deprint = debug_error_print
deprn = debug_error_print_or_abort
