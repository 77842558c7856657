from .metrics import (
    ComponentType,
    ContainerSpec,
    ContainerUsage,
    InstanceDefinition,
    InstanceRecord,
    ResourceStat,
    UsageSample,
)

__all__ = [
    "ComponentType",
    "ContainerSpec",
    "ContainerUsage",
    "InstanceDefinition",
    "InstanceRecord",
    "ResourceStat",
    "UsageSample",
]
