"""Reporters that present instance records."""

from .base_reporter import BaseReporter
from .console_reporter import ConsoleReporter
from .log_reporter import LogReporter

__all__ = ["BaseReporter", "ConsoleReporter", "LogReporter"]
