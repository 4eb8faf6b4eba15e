from pyprint.api import (
    debug_error_print,
    debug_error_print_or_abort,
    debug_print,
    debug_print_or_abort,
    error_print,
    error_print_or_abort,
    last_result,
    print,
    print_or_abort,
)
from pyprint.core.dispatcher import build_job, dispatch, parse_tokens
from pyprint.core.models import (
    Conversion,
    Option,
    OptionName,
    PrintResult,
    SinkWriteFailure,
    end,
    file,
    flush,
    sep,
)
from pyprint.core.printer import PrintJob, Writable

__version__ = "1.0.1"

__all__ = [
    "Conversion",
    "Option",
    "OptionName",
    "PrintJob",
    "PrintResult",
    "SinkWriteFailure",
    "Writable",
    "build_job",
    "debug_error_print",
    "debug_error_print_or_abort",
    "debug_print",
    "debug_print_or_abort",
    "dispatch",
    "end",
    "error_print",
    "error_print_or_abort",
    "file",
    "flush",
    "last_result",
    "parse_tokens",
    "print",
    "print_or_abort",
    "sep",
]
