# tests/collectors/test_pod_metrics_collector.py

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock, call, patch

import pytest

from kubepulse.collectors.pod_metrics_collector import PodMetricsCollector


def _item(name, cpu, memory, labels=None):
    return {
        "metadata": {"name": name, "namespace": "demo", "labels": labels or {}},
        "timestamp": "2026-10-17T10:00:00Z",
        "window": "15s",
        "containers": [{"name": "user-container", "usage": {"cpu": cpu, "memory": memory}}],
    }


def _page(items, token=""):
    return {"kind": "PodMetricsList", "apiVersion": "metrics.k8s.io/v1beta1", "metadata": {"continue": token}, "items": items}


@pytest.fixture
def mock_metrics_api():
    """Mock of the CustomObjectsApi serving three pages of pod metrics."""
    mock_api = MagicMock()
    mock_api.list_namespaced_custom_object = AsyncMock(
        side_effect=[
            _page([_item("pod-1", "250000000n", "102400Ki")], token="page-2"),
            _page([_item("pod-2", "1m", "1Mi")], token="page-3"),
            _page([_item("pod-3", "0", "0")]),
        ]
    )
    mock_api.api_client.close = AsyncMock()
    return mock_api


@pytest.mark.asyncio
@patch("kubepulse.collectors.pod_metrics_collector.get_custom_objects_api")
async def test_metrics_collector_pages_through_all_results(mock_get_api, mock_metrics_api):
    mock_get_api.return_value = mock_metrics_api

    results = await PodMetricsCollector(page_size=1).collect("demo")

    assert [s.name for s in results] == ["pod-1", "pod-2", "pod-3"]
    assert mock_metrics_api.list_namespaced_custom_object.await_args_list == [
        call("metrics.k8s.io", "v1beta1", "demo", "pods", limit=1),
        call("metrics.k8s.io", "v1beta1", "demo", "pods", limit=1, _continue="page-2"),
        call("metrics.k8s.io", "v1beta1", "demo", "pods", limit=1, _continue="page-3"),
    ]


@pytest.mark.asyncio
@patch("kubepulse.collectors.pod_metrics_collector.get_custom_objects_api")
async def test_metrics_collector_parses_usage(mock_get_api, mock_metrics_api):
    mock_get_api.return_value = mock_metrics_api

    results = await PodMetricsCollector().collect("demo")

    usage = results[0].containers[0]
    assert usage.name == "user-container"
    assert usage.cpu == Decimal("0.25")
    assert usage.memory == Decimal(104857600)


@pytest.mark.asyncio
@patch("kubepulse.collectors.pod_metrics_collector.get_custom_objects_api")
async def test_metrics_collector_returns_partial_results_on_error(mock_get_api, mock_metrics_api):
    mock_get_api.return_value = mock_metrics_api
    mock_metrics_api.list_namespaced_custom_object.side_effect = [
        _page([_item("pod-1", "1m", "1Mi")], token="page-2"),
        Exception("metrics API unavailable"),
    ]

    results = await PodMetricsCollector().collect("demo")

    assert [s.name for s in results] == ["pod-1"]


@pytest.mark.asyncio
@patch("kubepulse.collectors.pod_metrics_collector.get_custom_objects_api")
async def test_metrics_collector_handles_missing_continue(mock_get_api, mock_metrics_api):
    mock_get_api.return_value = mock_metrics_api
    mock_metrics_api.list_namespaced_custom_object.side_effect = [{"items": [_item("pod-1", "1m", "1Mi")]}]

    results = await PodMetricsCollector().collect("demo")

    assert len(results) == 1
    assert mock_metrics_api.list_namespaced_custom_object.await_count == 1
