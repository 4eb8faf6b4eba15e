from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Callable, Optional

from pyprint.core.models import Conversion, Option, OptionName, PrintResult
from pyprint.core.printer import PrintJob, Writable

logger = logging.getLogger(__name__)

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"0", "false", "no", "off"}


def _setter(job: PrintJob, name: OptionName) -> Callable[[Any], PrintJob]:
    return {
        OptionName.SEP: job.set_separator,
        OptionName.END: job.set_terminator,
        OptionName.FILE: job.set_sink,
        OptionName.FLUSH: job.set_flush,
    }[name]


def _keyword_options(options: Mapping[str, Any]) -> list[Option]:
    parsed: list[Option] = []
    for key, value in options.items():
        try:
            name = OptionName(key)
        except ValueError:
            raise TypeError(f"'{key}' is an invalid keyword argument for print()") from None
        parsed.append(Option(name, value))
    return parsed


def build_job(
    args: Iterable[Any],
    options: Optional[Mapping[str, Any]] = None,
    conversion: Conversion = Conversion.DISPLAY,
    sink: Optional[Writable] = None,
) -> PrintJob:
    """
    Walk ``args`` left to right: ``Option`` instances configure the job,
    everything else is converted and appended as an element.
    Keyword ``options`` are applied after the positional list, so they act
    as the last occurrence of their option.
    """
    keyword = _keyword_options(options or {})
    job = PrintJob(sink=sink)
    for arg in [*args, *keyword]:
        if isinstance(arg, Option):
            _setter(job, arg.name)(arg.value)
        else:
            job.append_element(conversion.convert(arg))
    return job


def dispatch(
    args: Iterable[Any],
    options: Optional[Mapping[str, Any]] = None,
    conversion: Conversion = Conversion.DISPLAY,
    sink: Optional[Writable] = None,
) -> PrintResult:
    return build_job(args, options, conversion=conversion, sink=sink).render()


def parse_bool(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    raise ValueError(f"Not a boolean: {text!r}")


def parse_token(token: str) -> Any:
    """
    ``sep=``, ``end=``, ``file=`` and ``flush=`` prefixes become options;
    any other token is returned unchanged as a value.
    """
    key, eq, value = token.partition("=")
    if not eq:
        return token
    try:
        name = OptionName(key)
    except ValueError:
        return token
    if name == OptionName.FLUSH:
        return Option(name, parse_bool(value))
    return Option(name, value)


def parse_tokens(tokens: Iterable[str], raw: bool = False) -> list[Any]:
    if raw:
        return list(tokens)
    parsed = [parse_token(t) for t in tokens]
    logger.debug("Parsed tokens: %r", parsed)
    return parsed
