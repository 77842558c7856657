# src/kubepulse/reporters/base_reporter.py
"""
Defines the abstract base class for all reporters.
"""
from abc import ABC, abstractmethod

from ..models.metrics import InstanceRecord


class BaseReporter(ABC):
    """
    Abstract Base Class for all reporters.
    """

    def start_cycle(self, namespace: str):
        """Called once before the first record of a collection cycle."""
        pass

    @abstractmethod
    def report(self, record: InstanceRecord):
        """
        Presents a single instance record. Called as soon as the record is
        built, not batched.
        """
        pass

    def end_cycle(self, count: int, elapsed_ms: int):
        """Called once after the last record of a collection cycle."""
        pass
