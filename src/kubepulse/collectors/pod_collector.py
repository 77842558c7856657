# src/kubepulse/collectors/pod_collector.py
"""
Collects the pod definitions of a namespace, including the resource limits
declared for each container.
"""

import logging
from typing import List, Optional

from ..core.k8s_client import get_core_v1_api
from ..models.metrics import InstanceDefinition
from .base_collector import BaseCollector

logger = logging.getLogger(__name__)


class PodCollector(BaseCollector):
    """
    Lists every pod in a namespace through the core Kubernetes API.
    """

    resource_name = "pods"

    def __init__(self, page_size: int = 100):
        super().__init__(page_size)
        self._api = None

    async def _ensure_client(self):
        """Lazily initialize the Kubernetes client. Raises ClusterConfigError on failure."""
        if self._api is None:
            self._api = await get_core_v1_api()
        return self._api

    async def collect(self, namespace: str) -> List[InstanceDefinition]:
        """
        Fetches all pods of the namespace and converts them to instance definitions.
        """
        api = await self._ensure_client()

        async def fetch_page(limit: int, token: Optional[str]):
            kwargs = {"limit": limit}
            if token:
                kwargs["_continue"] = token
            pod_list = await api.list_namespaced_pod(namespace, **kwargs)
            next_token = pod_list.metadata._continue if pod_list.metadata else None
            return pod_list.items or [], next_token

        pods = await self._paginate(fetch_page)
        return [InstanceDefinition.from_pod(pod) for pod in pods]

    async def close(self):
        """Close the Kubernetes API client if it exists."""
        if self._api:
            await self._api.api_client.close()
            logger.debug("PodCollector Kubernetes client closed.")
            self._api = None
