import asyncio
import logging

from kubernetes_asyncio import client, config

from .exceptions import ClusterConfigError

logger = logging.getLogger(__name__)

# Global lock to prevent race conditions during config loading
_CONFIG_LOCK = asyncio.Lock()
_CONFIG_LOADED = False


async def load_cluster_config() -> None:
    """
    Ensures that the in-cluster Kubernetes configuration is loaded exactly once.

    Raises:
        ClusterConfigError: If the service account credentials are not available.
    """
    global _CONFIG_LOADED

    if _CONFIG_LOADED:
        return

    async with _CONFIG_LOCK:
        # Double-check locking pattern
        if _CONFIG_LOADED:
            return

        try:
            logger.debug("Attempting to load in-cluster Kubernetes config...")
            config.load_incluster_config()
        except config.ConfigException as e:
            raise ClusterConfigError(f"In-cluster Kubernetes configuration not available: {e}") from e

        logger.debug("Loaded in-cluster Kubernetes configuration.")
        _CONFIG_LOADED = True


def read_namespace(path: str) -> str:
    """
    Reads the namespace this workload runs in from the service account mount.

    Raises:
        ClusterConfigError: If the file is missing, unreadable or empty.
    """
    try:
        with open(path, "r") as f:
            namespace = f.read().strip()
    except OSError as e:
        raise ClusterConfigError(f"Could not read namespace identity file '{path}': {e}") from e

    if not namespace:
        raise ClusterConfigError(f"Namespace identity file '{path}' is empty.")
    return namespace


async def get_core_v1_api() -> client.CoreV1Api:
    """Returns a CoreV1Api bound to the in-cluster configuration."""
    await load_cluster_config()
    try:
        return client.CoreV1Api()
    except Exception as e:
        raise ClusterConfigError(f"Failed to create the core Kubernetes client: {e}") from e


async def get_custom_objects_api() -> client.CustomObjectsApi:
    """Returns a CustomObjectsApi, used to reach the metrics.k8s.io aggregated API."""
    await load_cluster_config()
    try:
        return client.CustomObjectsApi()
    except Exception as e:
        raise ClusterConfigError(f"Failed to create the metrics Kubernetes client: {e}") from e
