# src/kubepulse/reporters/log_reporter.py
"""
A reporter that writes one JSON document per line to standard output, for
consumption by a log pipeline.
"""

import logging

import typer

from ..models.metrics import InstanceRecord
from .base_reporter import BaseReporter

logger = logging.getLogger(__name__)

MARSHAL_ERROR = "marshal error"


class LogReporter(BaseReporter):
    """
    Emits structured log lines. Diagnostics and records share the same stream.
    """

    def __init__(self, file=None):
        # None means the current sys.stdout at write time.
        self.file = file

    def _echo(self, line: str):
        typer.echo(line, file=self.file)

    @staticmethod
    def serialize(record: InstanceRecord) -> str:
        """Returns the single-line JSON form of a record, or a sentinel on failure."""
        try:
            return record.model_dump_json()
        except Exception as e:
            logger.debug(f"Failed to serialize record for '{getattr(record, 'name', '?')}': {e}")
            return MARSHAL_ERROR

    def start_cycle(self, namespace: str):
        self._echo("Start to capture pod metrics ...")

    def report(self, record: InstanceRecord):
        self._echo(self.serialize(record))

    def end_cycle(self, count: int, elapsed_ms: int):
        self._echo(f"Captured pod metrics in {elapsed_ms}ms")
