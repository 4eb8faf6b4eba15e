from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pyprint.core.models import SinkWriteFailure
from pyprint.core.printer import PrintJob

console = Console(stderr=True)


def _sink_label(job: PrintJob) -> str:
    name = getattr(job.sink, "name", None)
    return str(name) if name is not None else type(job.sink).__name__


class CLIReporter:
    def __init__(self, console_instance: Console | None = None) -> None:
        self.console = console_instance or console

    def print_job(self, job: PrintJob) -> None:
        table = Table(title="Elements", show_lines=False)
        table.add_column("#", justify="right", no_wrap=True)
        table.add_column("Value", overflow="fold")

        for idx, element in enumerate(job.elements, start=1):
            table.add_row(str(idx), Text(repr(element)))

        self.console.print(table)

        lines = [
            f"Separator  : {job.separator!r}",
            f"Terminator : {job.terminator!r}",
            f"Sink       : {_sink_label(job)}",
            f"Flush      : {job.flush_on_complete}",
        ]
        self.console.print(Panel(Text("\n".join(lines)), title="Print Job"))

    def print_failure(self, failure: SinkWriteFailure) -> None:
        lines = [
            f"Step  : {failure.step}",
            f"Error : {failure.error!r}",
        ]
        self.console.print(Panel(Text("\n".join(lines)), title="Print Failed", style="red"))
