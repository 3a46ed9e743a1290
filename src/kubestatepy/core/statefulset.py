"""Metric families for StatefulSet objects."""

import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from kubestatepy.core.generator import FamilyGenerator
from kubestatepy.core.labels import (
    IDENTITY_LABEL_KEYS,
    create_annotation_keys_values,
    create_label_keys_values,
    parse_allow_list,
    validate_allow_list,
)
from kubestatepy.core.metrics import gauge, info, optional, single
from kubestatepy.core.models import Family, Metric, MetricType, StatefulSet

logger = logging.getLogger(__name__)

DESC_STATEFULSET_LABELS_NAME = "kube_statefulset_labels"
DESC_STATEFULSET_LABELS_HELP = "Kubernetes labels converted to Prometheus labels."
DESC_STATEFULSET_ANNOTATIONS_NAME = "kube_statefulset_annotations"
DESC_STATEFULSET_ANNOTATIONS_HELP = (
    "Kubernetes annotations converted to Prometheus labels."
)


def _unix_seconds(timestamp: datetime) -> float:
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return float(int(timestamp.timestamp()))


def wrap_statefulset_func(
    f: Callable[[StatefulSet], Family],
) -> Callable[[object], Family]:
    """Prepend the namespace and name identity labels to every record.

    Args:
        f: Raw extractor producing records without identity labels.

    Returns:
        Extractor with the same records, each prefixed with
        ``namespace=<ns>`` and ``name=<name>``.

    Raises:
        TypeError: If called with something other than a StatefulSet.
        ValueError: If the raw extractor emitted a namespace or name label.
    """

    def wrapped(obj: object) -> Family:
        if not isinstance(obj, StatefulSet):
            raise TypeError(f"expected StatefulSet, got {type(obj).__name__}")
        family = f(obj)
        identity_values = (obj.metadata.namespace, obj.metadata.name)
        metrics = []
        for m in family.metrics:
            metrics.append(
                Metric(
                    label_keys=IDENTITY_LABEL_KEYS + m.label_keys,
                    label_values=identity_values + m.label_values,
                    value=m.value,
                )
            )
        return Family(metrics=tuple(metrics))

    return wrapped


def _created(s: StatefulSet) -> Family:
    if s.metadata.creation_timestamp is None:
        return Family()
    return single(gauge(_unix_seconds(s.metadata.creation_timestamp)))


def _gauge_family(
    name: str, help: str, f: Callable[[StatefulSet], Family]
) -> FamilyGenerator:
    return FamilyGenerator(name, help, MetricType.GAUGE, "", wrap_statefulset_func(f))


def statefulset_metric_families(
    allow_labels: str | Iterable[str] = (),
    allow_annotations: str | Iterable[str] = (),
) -> tuple[FamilyGenerator, ...]:
    """Build the StatefulSet family catalog.

    The labels and annotations families are only included when their
    allow-list is non-empty.

    Args:
        allow_labels: Object label keys to expose, in output order. A
            string is read as a comma separated list.
        allow_annotations: Object annotation keys to expose, in output order.

    Returns:
        Family generators in a fixed order.

    Raises:
        ValueError: If an allow-list repeats a key or uses a reserved name.
    """
    label_keys = validate_allow_list(
        parse_allow_list(allow_labels), "labels allow-list"
    )
    annotation_keys = validate_allow_list(
        parse_allow_list(allow_annotations), "annotations allow-list"
    )

    families = [
        _gauge_family(
            "kube_statefulset_created",
            "Unix creation timestamp",
            _created,
        ),
        _gauge_family(
            "kube_statefulset_status_replicas",
            "The number of replicas per StatefulSet.",
            lambda s: single(gauge(s.status.replicas or 0)),
        ),
        _gauge_family(
            "kube_statefulset_status_replicas_current",
            "The number of current replicas per StatefulSet.",
            lambda s: single(gauge(s.status.current_replicas or 0)),
        ),
        _gauge_family(
            "kube_statefulset_status_replicas_ready",
            "The number of ready replicas per StatefulSet.",
            lambda s: single(gauge(s.status.ready_replicas or 0)),
        ),
        _gauge_family(
            "kube_statefulset_status_replicas_updated",
            "The number of updated replicas per StatefulSet.",
            lambda s: single(gauge(s.status.updated_replicas or 0)),
        ),
        _gauge_family(
            "kube_statefulset_status_observed_generation",
            "The generation observed by the StatefulSet controller.",
            lambda s: single(gauge(s.status.observed_generation or 0)),
        ),
        _gauge_family(
            "kube_statefulset_replicas",
            "Number of desired pods for a StatefulSet.",
            lambda s: optional(s.spec.replicas),
        ),
        _gauge_family(
            "kube_statefulset_metadata_generation",
            "Sequence number representing a specific generation of the "
            "desired state for the StatefulSet.",
            lambda s: single(gauge(s.metadata.generation or 0)),
        ),
        _gauge_family(
            "kube_statefulset_status_current_revision",
            "Indicates the version of the StatefulSet used to generate Pods "
            "in the sequence [0,currentReplicas).",
            lambda s: single(info(["revision"], [s.status.current_revision or ""])),
        ),
        _gauge_family(
            "kube_statefulset_status_update_revision",
            "Indicates the version of the StatefulSet used to generate Pods "
            "in the sequence [replicas-updatedReplicas,replicas)",
            lambda s: single(info(["revision"], [s.status.update_revision or ""])),
        ),
    ]

    if label_keys:
        families.append(
            _gauge_family(
                DESC_STATEFULSET_LABELS_NAME,
                DESC_STATEFULSET_LABELS_HELP,
                lambda s: single(
                    info(*create_label_keys_values(s.metadata.labels, label_keys))
                ),
            )
        )
    if annotation_keys:
        families.append(
            _gauge_family(
                DESC_STATEFULSET_ANNOTATIONS_NAME,
                DESC_STATEFULSET_ANNOTATIONS_HELP,
                lambda s: single(
                    info(
                        *create_annotation_keys_values(
                            s.metadata.annotations, annotation_keys
                        )
                    )
                ),
            )
        )

    logger.debug(
        "Built StatefulSet catalog with %d families "
        "(%d allowed labels, %d allowed annotations)",
        len(families),
        len(label_keys),
        len(annotation_keys),
    )
    return tuple(families)
