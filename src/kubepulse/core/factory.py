# src/kubepulse/core/factory.py
"""
Factory functions to instantiate the correlator and its reporter.
"""

import logging

from ..collectors.pod_collector import PodCollector
from ..collectors.pod_metrics_collector import PodMetricsCollector
from ..reporters.base_reporter import BaseReporter
from ..reporters.console_reporter import ConsoleReporter
from ..reporters.log_reporter import LogReporter
from .config import config
from .correlator import MetricsCorrelator

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json", "table")


def get_reporter(output_format: str = "json") -> BaseReporter:
    """Returns the reporter for the given output format."""
    if output_format == "json":
        return LogReporter()
    elif output_format == "table":
        return ConsoleReporter()
    raise NotImplementedError(f"Reporter for format '{output_format}' not implemented.")


def get_correlator(reporter: BaseReporter = None) -> MetricsCorrelator:
    """Builds a correlator whose collectors use the configured page size."""
    page_size = config.PAGE_SIZE
    logger.debug(f"Creating correlator with page size {page_size}.")
    return MetricsCorrelator(
        pod_collector=PodCollector(page_size=page_size),
        pod_metrics_collector=PodMetricsCollector(page_size=page_size),
        reporter=reporter or get_reporter(),
    )
