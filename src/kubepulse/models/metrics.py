# src/kubepulse/models/metrics.py
"""
This module defines the Pydantic data models used across KubePulse: the
snapshots fetched from the Kubernetes API (instance definitions and usage
samples) and the per-instance record emitted by the reporters.
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..utils.k8s_utils import parse_optional_quantity, parse_quantity

INSTANCE_RESOURCES_METRIC = "instance-resources"


class ComponentType(str, Enum):
    """The kind of workload that owns an instance."""

    APP = "app"
    JOB = "job"
    BUILD = "build"
    UNKNOWN = "unknown"


class ContainerSpec(BaseModel):
    """
    A container of an instance definition with its declared limits.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="The name of the container.")
    cpu_limit: Optional[Decimal] = Field(None, description="CPU limit in cores, if declared.")
    memory_limit: Optional[Decimal] = Field(None, description="Memory limit in bytes, if declared.")


class InstanceDefinition(BaseModel):
    """
    Immutable snapshot of a pod spec, taken when the inventory was fetched.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="The name of the pod.")
    labels: Dict[str, str] = Field(default_factory=dict, description="The labels of the pod.")
    containers: List[ContainerSpec] = Field(default_factory=list, description="Containers in spec order.")

    @classmethod
    def from_pod(cls, pod: Any) -> "InstanceDefinition":
        """Builds a definition from a kubernetes_asyncio V1Pod."""
        containers = []
        spec_containers = (pod.spec.containers if pod.spec else None) or []
        for container in spec_containers:
            limits = (container.resources.limits if container.resources else None) or {}
            containers.append(
                ContainerSpec(
                    name=container.name,
                    cpu_limit=parse_optional_quantity(limits.get("cpu")),
                    memory_limit=parse_optional_quantity(limits.get("memory")),
                )
            )
        return cls(
            name=pod.metadata.name,
            labels=pod.metadata.labels or {},
            containers=containers,
        )


class ContainerUsage(BaseModel):
    """
    Measured consumption of a single container.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field("", description="The name of the container.")
    cpu: Decimal = Field(Decimal(0), description="CPU usage in cores.")
    memory: Decimal = Field(Decimal(0), description="Memory usage in bytes.")


class UsageSample(BaseModel):
    """
    A point-in-time measurement of an instance, as served by metrics.k8s.io.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="The name of the pod.")
    labels: Dict[str, str] = Field(default_factory=dict, description="The labels of the pod.")
    containers: List[ContainerUsage] = Field(default_factory=list, description="Per-container usage.")

    @classmethod
    def from_pod_metrics(cls, item: Dict[str, Any]) -> "UsageSample":
        """Builds a sample from a raw PodMetrics object (metrics.k8s.io/v1beta1)."""
        metadata = item.get("metadata") or {}
        containers = []
        for container in item.get("containers") or []:
            usage = container.get("usage") or {}
            containers.append(
                ContainerUsage(
                    name=container.get("name", ""),
                    cpu=parse_quantity(usage.get("cpu")),
                    memory=parse_quantity(usage.get("memory")),
                )
            )
        return cls(
            name=metadata.get("name", ""),
            labels=metadata.get("labels") or {},
            containers=containers,
        )


class ResourceStat(BaseModel):
    """Current usage against the configured limit for one resource dimension."""

    current: int = 0
    configured: int = 0
    usage: int = 0


class InstanceRecord(BaseModel):
    """
    The structured line emitted for every sampled instance.
    Field order is the key order of the serialized record.
    """

    metric: str = INSTANCE_RESOURCES_METRIC
    name: str
    parent: str = ""
    component_type: ComponentType = ComponentType.UNKNOWN
    component_name: str = "unknown"
    cpu: ResourceStat = Field(default_factory=ResourceStat, description="CPU in millicores.")
    memory: ResourceStat = Field(default_factory=ResourceStat, description="Memory in MB.")
    message: str = ""
