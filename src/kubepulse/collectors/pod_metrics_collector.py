# src/kubepulse/collectors/pod_metrics_collector.py
"""
Collects the live CPU and memory usage of the pods in a namespace from the
metrics.k8s.io aggregated API (served by metrics-server).
"""

import logging
from typing import List, Optional

from ..core.k8s_client import get_custom_objects_api
from ..models.metrics import UsageSample
from .base_collector import BaseCollector

logger = logging.getLogger(__name__)

METRICS_GROUP = "metrics.k8s.io"
METRICS_VERSION = "v1beta1"
METRICS_PLURAL = "pods"


class PodMetricsCollector(BaseCollector):
    """
    Lists PodMetrics objects through the custom objects API.
    """

    resource_name = "pod metrics"

    def __init__(self, page_size: int = 100):
        super().__init__(page_size)
        self._api = None

    async def _ensure_client(self):
        """Lazily initialize the Kubernetes client. Raises ClusterConfigError on failure."""
        if self._api is None:
            self._api = await get_custom_objects_api()
        return self._api

    async def collect(self, namespace: str) -> List[UsageSample]:
        """
        Fetches the usage of every pod in the namespace.
        """
        api = await self._ensure_client()

        async def fetch_page(limit: int, token: Optional[str]):
            kwargs = {"limit": limit}
            if token:
                kwargs["_continue"] = token
            response = await api.list_namespaced_custom_object(
                METRICS_GROUP, METRICS_VERSION, namespace, METRICS_PLURAL, **kwargs
            )
            metadata = response.get("metadata") or {}
            return response.get("items") or [], metadata.get("continue")

        items = await self._paginate(fetch_page)
        return [UsageSample.from_pod_metrics(item) for item in items]

    async def close(self):
        """Close the Kubernetes API client if it exists."""
        if self._api:
            await self._api.api_client.close()
            logger.debug("PodMetricsCollector Kubernetes client closed.")
            self._api = None
