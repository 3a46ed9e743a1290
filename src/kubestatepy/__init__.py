"""kubestatepy - turn Kubernetes workload objects into labeled gauge families."""

from kubestatepy.config import StatefulSetMetricsConfig
from kubestatepy.core.generator import (
    FamilyGenerator,
    compose_metric_gen_funcs,
    extract_metric_families,
    filter_family_generators,
)
from kubestatepy.core.labels import (
    create_annotation_keys_values,
    create_label_keys_values,
)
from kubestatepy.core.models import (
    Family,
    Metric,
    MetricType,
    ObjectMeta,
    StatefulSet,
    StatefulSetSpec,
    StatefulSetStatus,
)
from kubestatepy.core.statefulset import (
    statefulset_metric_families,
    wrap_statefulset_func,
)

__all__ = [
    "Family",
    "FamilyGenerator",
    "Metric",
    "MetricType",
    "ObjectMeta",
    "StatefulSet",
    "StatefulSetMetricsConfig",
    "StatefulSetSpec",
    "StatefulSetStatus",
    "compose_metric_gen_funcs",
    "create_annotation_keys_values",
    "create_label_keys_values",
    "extract_metric_families",
    "filter_family_generators",
    "statefulset_metric_families",
    "wrap_statefulset_func",
]
