from __future__ import annotations

import logging
import sys
from contextlib import ExitStack
from typing import Any

import click

from pyprint.core.dispatcher import build_job, parse_tokens
from pyprint.core.models import Conversion, Option, OptionName, end, sep
from pyprint.reporters.cli_reporter import CLIReporter

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _unescape(text: str) -> str:
    return text.encode("latin-1", "backslashreplace").decode("unicode_escape")


def _unescape_arg(arg: Any) -> Any:
    if isinstance(arg, str):
        return _unescape(arg)
    if isinstance(arg, Option) and arg.name in (OptionName.SEP, OptionName.END):
        return Option(arg.name, _unescape(str(arg.value)))
    return arg


def _open_sinks(args: list[Any], stack: ExitStack) -> list[Any]:
    """
    Replace ``file=PATH`` options with open streams. Only the last one takes
    effect, so earlier paths are dropped without being opened.
    """
    file_positions = [i for i, a in enumerate(args) if isinstance(a, Option) and a.name == OptionName.FILE]
    if not file_positions:
        return args

    last = file_positions[-1]
    path = str(args[last].value)
    if path == "-":
        stream = None
    else:
        logger.debug("Appending output to %s", path)
        try:
            stream = stack.enter_context(open(path, "a", encoding="utf-8"))
        except OSError as e:
            raise click.FileError(path, hint=str(e)) from e

    out: list[Any] = []
    for i, arg in enumerate(args):
        if i == last:
            out.append(Option(OptionName.FILE, stream))
        elif i not in file_positions:
            out.append(arg)
    return out


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("tokens", nargs=-1)
@click.option("--debug", "-d", is_flag=True, default=False, help="Print the repr() of each value.")
@click.option("--stderr", "-E", "to_stderr", is_flag=True, default=False, help="Default to standard error.")
@click.option("--escapes", "-e", is_flag=True, default=False, help="Interpret backslash escapes.")
@click.option("--raw", is_flag=True, default=False, help="Treat sep=/end=/file=/flush= tokens as plain values.")
@click.option("--sep", "default_sep", default=" ", envvar="PYPRINT_SEP", show_default=True, help="Default separator.")
@click.option("--end", "default_end", default="\n", envvar="PYPRINT_END", show_default=r"\n", help="Default terminator.")
@click.option("--explain", is_flag=True, default=False, help="Describe the parsed print job on stderr.")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(
    tokens: tuple[str, ...],
    debug: bool,
    to_stderr: bool,
    escapes: bool,
    raw: bool,
    default_sep: str,
    default_end: str,
    explain: bool,
    verbose: bool,
) -> None:
    """
    Print TOKENS like Python's print().

    Tokens of the form sep=TEXT, end=TEXT, file=PATH and flush=BOOL are
    options and may appear anywhere; the last occurrence wins.
    """
    _configure_logging(verbose)
    reporter = CLIReporter()

    try:
        parsed = parse_tokens(tokens, raw=raw)
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    args: list[Any] = [sep(default_sep), end(default_end), *parsed]
    if escapes:
        try:
            args = [_unescape_arg(a) for a in args]
        except UnicodeDecodeError as e:
            raise click.UsageError(f"Invalid escape sequence: {e.reason}") from e

    conversion = Conversion.DEBUG if debug else Conversion.DISPLAY
    default_sink = sys.stderr if to_stderr else sys.stdout

    with ExitStack() as stack:
        job = build_job(_open_sinks(args, stack), conversion=conversion, sink=default_sink)
        if explain:
            reporter.print_job(job)
        result = job.render()

    if result.error is not None:
        reporter.print_failure(result.error)
        raise click.ClickException(str(result.error))


if __name__ == "__main__":
    cli()
