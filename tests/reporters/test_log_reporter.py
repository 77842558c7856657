# tests/reporters/test_log_reporter.py

import io
import json
from unittest.mock import MagicMock

from kubepulse.models.metrics import ComponentType, InstanceRecord, ResourceStat
from kubepulse.reporters.log_reporter import MARSHAL_ERROR, LogReporter


def _record():
    return InstanceRecord(
        name="web-pod",
        parent="web-00001",
        component_type=ComponentType.APP,
        component_name="web",
        cpu=ResourceStat(current=250, configured=500, usage=50),
        memory=ResourceStat(current=104, configured=500, usage=20),
        message="Captured metrics of app instance 'web-pod': 250m vCPU, 104 MB memory",
    )


def test_record_is_one_json_line_with_stable_keys():
    out = io.StringIO()
    LogReporter(file=out).report(_record())

    lines = out.getvalue().splitlines()
    assert len(lines) == 1
    payload = json.loads(lines[0])
    assert list(payload) == [
        "metric",
        "name",
        "parent",
        "component_type",
        "component_name",
        "cpu",
        "memory",
        "message",
    ]
    assert payload["metric"] == "instance-resources"
    assert payload["component_type"] == "app"
    assert payload["cpu"] == {"current": 250, "configured": 500, "usage": 50}
    assert payload["memory"] == {"current": 104, "configured": 500, "usage": 20}


def test_default_record_values_serialize():
    payload = json.loads(LogReporter.serialize(InstanceRecord(name="lonely")))

    assert payload["parent"] == ""
    assert payload["component_type"] == "unknown"
    assert payload["component_name"] == "unknown"
    assert payload["cpu"] == {"current": 0, "configured": 0, "usage": 0}


def test_serialization_failure_emits_sentinel():
    broken = MagicMock()
    broken.model_dump_json.side_effect = ValueError("cannot serialize")

    out = io.StringIO()
    LogReporter(file=out).report(broken)

    assert out.getvalue() == MARSHAL_ERROR + "\n"


def test_cycle_progress_and_timing_lines():
    out = io.StringIO()
    reporter = LogReporter(file=out)

    reporter.start_cycle("demo")
    reporter.end_cycle(3, 42)

    assert out.getvalue().splitlines() == [
        "Start to capture pod metrics ...",
        "Captured pod metrics in 42ms",
    ]


def test_writes_to_stdout_by_default(capsys):
    LogReporter().report(_record())

    captured = capsys.readouterr()
    assert json.loads(captured.out)["name"] == "web-pod"
