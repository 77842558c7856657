# src/kubepulse/reporters/console_reporter.py
"""
A reporter that displays the records of a cycle in a formatted table in the console.
"""

import logging
from typing import List

from rich.console import Console
from rich.table import Table

from ..models.metrics import InstanceRecord
from .base_reporter import BaseReporter

logger = logging.getLogger(__name__)


def _format_stat(current: int, configured: int, usage: int, unit: str) -> str:
    if not configured:
        return f"{current}{unit}"
    return f"{current}{unit} / {configured}{unit} ({usage}%)"


class ConsoleReporter(BaseReporter):
    """
    Renders instance resource usage using the 'rich' library.
    Records are buffered and printed as one table when the cycle ends.
    """

    def __init__(self, console: Console = None):
        self.console = console or Console()
        self.records: List[InstanceRecord] = []
        self.namespace = ""

    def start_cycle(self, namespace: str):
        self.records = []
        self.namespace = namespace

    def report(self, record: InstanceRecord):
        self.records.append(record)

    def end_cycle(self, count: int, elapsed_ms: int):
        if not self.records:
            self.console.print("No pod metrics to report.", style="yellow")
            return

        table = Table(
            title=f"Instance resources in '{self.namespace}'",
            header_style="bold magenta",
            show_lines=True,
        )
        table.add_column("Instance", style="cyan")
        table.add_column("Type", style="bold")
        table.add_column("Component", style="cyan")
        table.add_column("Parent", style="dim")
        table.add_column("CPU (m)", style="blue", justify="right")
        table.add_column("Memory (MB)", style="green", justify="right")

        # Sort by component, then instance name
        for record in sorted(self.records, key=lambda r: (r.component_type.value, r.component_name, r.name)):
            table.add_row(
                record.name,
                record.component_type.value,
                record.component_name,
                record.parent,
                _format_stat(record.cpu.current, record.cpu.configured, record.cpu.usage, "m"),
                _format_stat(record.memory.current, record.memory.configured, record.memory.usage, ""),
            )

        self.console.print(table)
        self.console.print(f"Captured metrics of {count} instance(s) in {elapsed_ms}ms", style="dim")
