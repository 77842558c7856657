# src/kubepulse/core/correlator.py
import logging
import time
from typing import List, Optional

from ..collectors.pod_collector import PodCollector
from ..collectors.pod_metrics_collector import PodMetricsCollector
from ..models.metrics import InstanceDefinition, InstanceRecord, ResourceStat, UsageSample
from ..reporters.base_reporter import BaseReporter
from ..utils.k8s_utils import to_megabytes, to_millicores, usage_percent
from .classifier import classify
from .limits import resolve_limits

logger = logging.getLogger(__name__)


def find_definition(name: str, definitions: List[InstanceDefinition]) -> Optional[InstanceDefinition]:
    """Returns the definition of the pod with the given name, if it was listed."""
    for definition in definitions:
        if definition.name == name:
            return definition
    return None


def build_record(sample: UsageSample, definitions: List[InstanceDefinition]) -> InstanceRecord:
    """
    Joins a usage sample with the matching pod definition.

    Usage is taken from the first container of the sample. Limits are only
    filled in when a definition with the same name exists and declares them;
    otherwise configured and usage stay at 0.
    """
    component_type, component_name, parent = classify(sample.labels)

    first = sample.containers[0] if sample.containers else None
    if first is None:
        logger.debug(f"Pod metrics of '{sample.name}' contain no containers.")
    cpu_current = to_millicores(first.cpu if first else None)
    memory_current = to_megabytes(first.memory if first else None)

    cpu = ResourceStat(current=int(cpu_current))
    memory = ResourceStat(current=int(memory_current))

    definition = find_definition(sample.name, definitions)
    if definition is not None:
        cpu_limit, memory_limit = resolve_limits(component_type, definition)
        cpu_configured = to_millicores(cpu_limit)
        memory_configured = to_megabytes(memory_limit)

        cpu.configured = int(cpu_configured)
        cpu.usage = usage_percent(cpu_current, cpu_configured)
        memory.configured = int(memory_configured)
        memory.usage = usage_percent(memory_current, memory_configured)
    else:
        logger.debug(f"No pod definition found for '{sample.name}'; limits are unknown.")

    message = (
        f"Captured metrics of {component_type.value} instance '{sample.name}': "
        f"{cpu.current}m vCPU, {memory.current} MB memory"
    )

    return InstanceRecord(
        name=sample.name,
        parent=parent,
        component_type=component_type,
        component_name=component_name,
        cpu=cpu,
        memory=memory,
        message=message,
    )


class MetricsCorrelator:
    """Fetches pods and their usage, and reports one record per sampled pod."""

    def __init__(
        self,
        pod_collector: PodCollector,
        pod_metrics_collector: PodMetricsCollector,
        reporter: BaseReporter,
    ):
        self.pod_collector = pod_collector
        self.pod_metrics_collector = pod_metrics_collector
        self.reporter = reporter

    async def run(self, namespace: str) -> List[InstanceRecord]:
        """
        Executes one collection cycle for the namespace.

        Records are handed to the reporter as they are built. Listing errors
        degrade to partial results; ClusterConfigError propagates.
        """
        start_time = time.monotonic()
        self.reporter.start_cycle(namespace)

        definitions = await self.pod_collector.collect(namespace)
        samples = await self.pod_metrics_collector.collect(namespace)
        logger.debug(f"Correlating {len(samples)} usage samples with {len(definitions)} pod definitions.")

        records = []
        for sample in samples:
            record = build_record(sample, definitions)
            self.reporter.report(record)
            records.append(record)

        elapsed_ms = int((time.monotonic() - start_time) * 1000)
        self.reporter.end_cycle(len(records), elapsed_ms)
        return records

    async def close(self):
        """Closes the API clients of both collectors."""
        await self.pod_collector.close()
        await self.pod_metrics_collector.close()
