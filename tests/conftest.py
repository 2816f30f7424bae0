"""
Shared fixtures for condition tests.

Provides a source machine with a Ready condition, an empty target, and the
same source as an unstructured mapping.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from statusmirror.models import Condition, ConditionStatus, ObjectMeta, Resource, ResourceStatus

T0 = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def t0() -> datetime:
    """Transition time of the source condition."""
    return T0


@pytest.fixture
def ready_condition() -> Condition:
    """Source Ready condition waiting for infrastructure."""
    return Condition(
        type="Ready",
        status=ConditionStatus.FALSE,
        reason="WaitingForInfra",
        message="infra not ready",
        last_transition_time=T0,
        observed_generation=7,
    )


@pytest.fixture
def source(ready_condition: Condition) -> Resource:
    """Machine/m1 reporting the Ready condition."""
    return Resource(
        kind="Machine",
        metadata=ObjectMeta(name="m1", namespace="default", generation=7),
        status=ResourceStatus(conditions=[ready_condition]),
    )


@pytest.fixture
def empty_source() -> Resource:
    """Machine/m1 reporting no conditions."""
    return Resource(kind="Machine", metadata=ObjectMeta(name="m1", generation=1))


@pytest.fixture
def target() -> Resource:
    """Cluster/c1 at generation 3 with no conditions."""
    return Resource(kind="Cluster", metadata=ObjectMeta(name="c1", generation=3))


@pytest.fixture
def unstructured_source() -> dict:
    """Machine/m1 with the Ready condition, as parsed JSON."""
    return {
        "kind": "Machine",
        "metadata": {"name": "m1", "namespace": "default", "generation": 7},
        "status": {
            "conditions": [
                {
                    "type": "Ready",
                    "status": "False",
                    "reason": "WaitingForInfra",
                    "message": "infra not ready",
                    "lastTransitionTime": "2026-01-01T12:00:00Z",
                    "observedGeneration": 7,
                },
            ],
        },
    }
