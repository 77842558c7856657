from .base_collector import BaseCollector
from .pod_collector import PodCollector
from .pod_metrics_collector import PodMetricsCollector

__all__ = [
    "BaseCollector",
    "PodCollector",
    "PodMetricsCollector",
]
