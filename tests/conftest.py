"""Shared test fixtures for all test modules."""

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import pytest

from kubestatepy.core.models import (
    ObjectMeta,
    StatefulSet,
    StatefulSetSpec,
    StatefulSetStatus,
)


def build_statefulset(
    namespace: str = "ns1",
    name: str = "web",
    creation_timestamp: datetime | None = None,
    generation: int = 0,
    labels: dict[str, str] | None = None,
    annotations: dict[str, str] | None = None,
    desired_replicas: int | None = None,
    **status: Any,
) -> StatefulSet:
    """Build a StatefulSet domain object with sensible defaults."""
    return StatefulSet(
        metadata=ObjectMeta(
            name=name,
            namespace=namespace,
            creation_timestamp=creation_timestamp,
            generation=generation,
            labels=labels or {},
            annotations=annotations or {},
        ),
        spec=StatefulSetSpec(replicas=desired_replicas),
        status=StatefulSetStatus(**status),
    )


@pytest.fixture
def make_statefulset() -> Callable[..., StatefulSet]:
    """Factory fixture for StatefulSet domain objects.

    Usage:
        def test_something(make_statefulset):
            sts = make_statefulset(desired_replicas=3, ready_replicas=2)
    """
    return build_statefulset


@pytest.fixture
def full_statefulset() -> StatefulSet:
    """A StatefulSet with every field populated."""
    return StatefulSet(
        metadata=ObjectMeta(
            name="db",
            namespace="prod",
            creation_timestamp=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
            generation=7,
            labels={"app": "db", "team": "storage", "tier": "backend"},
            annotations={"owner": "alice", "sha": "abc123"},
        ),
        spec=StatefulSetSpec(replicas=3),
        status=StatefulSetStatus(
            replicas=3,
            current_replicas=2,
            ready_replicas=1,
            updated_replicas=1,
            observed_generation=6,
            current_revision="db-5d8f",
            update_revision="db-7c9a",
        ),
    )
