from __future__ import annotations

import io
import logging

import pytest

import pyprint
from pyprint import api
from pyprint.core.models import SinkWriteFailure, end, file, flush, sep


def test_print_to_stdout(capsys) -> None:
    result = api.print("Hello", "World")
    assert result.ok
    assert capsys.readouterr().out == "Hello World\n"


def test_print_with_keyword_options(capsys) -> None:
    api.print("Hello", "World", sep=", ", end="!\n")
    assert capsys.readouterr().out == "Hello, World!\n"


def test_print_with_positional_options(capsys) -> None:
    api.print(sep("-"), "a", "b", end("."), sep("+"))
    assert capsys.readouterr().out == "a+b."


def test_print_without_values(capsys) -> None:
    api.print()
    assert capsys.readouterr().out == "\n"


def test_debug_print_uses_repr(capsys) -> None:
    api.debug_print("text", [1, 2, 3], {"k": "v"})
    assert capsys.readouterr().out == "'text' [1, 2, 3] {'k': 'v'}\n"


def test_error_print_goes_to_stderr(capsys) -> None:
    api.error_print("Hi!")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Hi!\n"


def test_debug_error_print_goes_to_stderr(capsys) -> None:
    api.debug_error_print("Hi!")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "'Hi!'\n"


def test_file_overrides_error_default(capsys) -> None:
    buf = io.StringIO()
    api.error_print("a", file=buf)
    api.debug_error_print(file(buf), "b")
    assert buf.getvalue() == "a\n'b'\n"
    assert capsys.readouterr().err == ""


def test_file_none_falls_back_to_family_default(capsys) -> None:
    api.error_print("a", file=None)
    assert capsys.readouterr().err == "a\n"


def test_flush_reaches_sink(sink) -> None:
    api.print("a", flush(True), file=sink)
    assert sink.flush_count == 1


@pytest.mark.parametrize(
    "func",
    [
        api.print_or_abort,
        api.debug_print_or_abort,
        api.error_print_or_abort,
        api.debug_error_print_or_abort,
    ],
)
def test_abort_variants_succeed_silently(func, sink) -> None:
    assert func("a", file=sink) is None
    assert sink.text.endswith("\n")


@pytest.mark.parametrize(
    "func, first_write",
    [
        (api.print_or_abort, "one"),
        (api.debug_print_or_abort, "'one'"),
        (api.error_print_or_abort, "one"),
        (api.debug_error_print_or_abort, "'one'"),
    ],
)
def test_abort_variants_raise_on_failure(func, first_write, make_sink, caplog) -> None:
    failing = make_sink(fail_on_write=2)
    with caplog.at_level(logging.ERROR, logger="pyprint.api"):
        with pytest.raises(SinkWriteFailure) as excinfo:
            func("one", "two", "three", file=failing)
    assert isinstance(excinfo.value.error, OSError)
    assert failing.calls == [("write", first_write)]
    assert "Printing failed" in caplog.text


def test_debug_error_abort_variant_formats_and_targets_stderr(capsys) -> None:
    api.debug_error_print_or_abort("x", 1)
    captured = capsys.readouterr()
    assert captured.err == "'x' 1\n"
    assert captured.out == ""


def test_non_abort_variant_returns_failure(make_sink) -> None:
    failing = make_sink(fail_on_write=2)
    result = api.print("one", "two", "three", file=failing)
    assert not result.ok
    assert failing.calls == [("write", "one")]


def test_last_result_tracks_renders(make_sink) -> None:
    assert api.last_result().ok

    failing = make_sink(fail_on_write=1)
    result = api.print("a", file=failing)
    assert api.last_result() is result
    assert not api.last_result().ok

    api.print("b", file=make_sink())
    assert api.last_result().ok


def test_last_result_after_abort(make_sink) -> None:
    with pytest.raises(SinkWriteFailure) as excinfo:
        api.print_or_abort("a", file=make_sink(fail_on_write=1))
    assert api.last_result().error is excinfo.value


def test_package_exports_entry_points(capsys) -> None:
    pyprint.print("a", pyprint.sep("-"), "b")
    assert capsys.readouterr().out == "a-b\n"
    assert pyprint.debug_error_print_or_abort is api.debug_error_print_or_abort


def test_short_names_alias_entry_points(capsys) -> None:
    assert api.pprn is api.print_or_abort
    assert api.deprn is api.debug_error_print_or_abort

    api.pprint("a", "b", sep=";")
    api.dprint("a")
    api.eprint("e")
    api.deprint("e")
    captured = capsys.readouterr()
    assert captured.out == "a;b\n'a'\n"
    assert captured.err == "e\n'e'\n"
