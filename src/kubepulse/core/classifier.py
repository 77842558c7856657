# src/kubepulse/core/classifier.py
"""
Maps the labels of an instance to the component that owns it.

Ownership labels are expected to be mutually exclusive. When several are
present anyway, they are checked in a fixed order and the first match wins:
build, then app, then job.
"""

from typing import Mapping, NamedTuple

from ..models.metrics import ComponentType

BUILD_RUN_LABEL = "buildrun.shipwright.io/name"
BUILD_LABEL = "build.shipwright.io/name"
SERVICE_LABEL = "serving.knative.dev/service"
REVISION_LABEL = "serving.knative.dev/revision"
JOB_RUN_LABEL = "codeengine.cloud.ibm.com/job-run"
JOB_DEFINITION_LABEL = "codeengine.cloud.ibm.com/job-definition-name"

STANDALONE = "standalone"
UNKNOWN = "unknown"


class Classification(NamedTuple):
    component_type: ComponentType
    component_name: str
    parent: str


def classify(labels: Mapping[str, str]) -> Classification:
    """Classifies an instance by its ownership labels."""
    labels = labels or {}

    if BUILD_RUN_LABEL in labels:
        return Classification(
            ComponentType.BUILD,
            labels.get(BUILD_LABEL, STANDALONE),
            labels[BUILD_RUN_LABEL],
        )

    if SERVICE_LABEL in labels:
        return Classification(
            ComponentType.APP,
            labels[SERVICE_LABEL],
            labels.get(REVISION_LABEL, ""),
        )

    if JOB_RUN_LABEL in labels:
        return Classification(
            ComponentType.JOB,
            labels.get(JOB_DEFINITION_LABEL, STANDALONE),
            labels[JOB_RUN_LABEL],
        )

    return Classification(ComponentType.UNKNOWN, UNKNOWN, "")
