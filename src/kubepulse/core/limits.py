# src/kubepulse/core/limits.py

from decimal import Decimal
from typing import Optional, Tuple

from ..models.metrics import ComponentType, InstanceDefinition

# Knative injects a queue-proxy sidecar; the workload itself always runs here.
APP_CONTAINER_NAME = "user-container"

Limits = Tuple[Optional[Decimal], Optional[Decimal]]


def resolve_limits(component_type: ComponentType, definition: InstanceDefinition) -> Limits:
    """
    Returns the (cpu cores, memory bytes) limits of the container that runs
    the workload. Either value is None when it cannot be determined.
    """
    if not definition.containers:
        return None, None

    if component_type in (ComponentType.JOB, ComponentType.BUILD):
        container = definition.containers[0]
        return container.cpu_limit, container.memory_limit

    if component_type == ComponentType.APP:
        for container in definition.containers:
            if container.name == APP_CONTAINER_NAME:
                return container.cpu_limit, container.memory_limit

    return None, None
