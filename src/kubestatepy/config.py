"""Configuration for the StatefulSet metric catalog."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from kubestatepy.core.generator import FamilyGenerator, filter_family_generators
from kubestatepy.core.labels import parse_allow_list
from kubestatepy.core.statefulset import statefulset_metric_families

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatefulSetMetricsConfig:
    """Allow-lists captured once at startup.

    Attributes:
        allow_labels: Object label keys exposed by kube_statefulset_labels.
        allow_annotations: Annotation keys exposed by
            kube_statefulset_annotations.
        metric_allowlist: Family names to keep; empty keeps all.
        metric_denylist: Family names to drop.
    """

    allow_labels: tuple[str, ...] = ()
    allow_annotations: tuple[str, ...] = ()
    metric_allowlist: tuple[str, ...] = ()
    metric_denylist: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in (
            "allow_labels",
            "allow_annotations",
            "metric_allowlist",
            "metric_denylist",
        ):
            object.__setattr__(self, name, parse_allow_list(getattr(self, name)))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "StatefulSetMetricsConfig":
        """Build a config from a plain mapping (e.g. a parsed YAML section).

        Recognized keys: labels_allowlist, annotations_allowlist,
        metric_allowlist, metric_denylist. Values may be lists or comma
        separated strings.
        """
        return cls(
            allow_labels=data.get("labels_allowlist"),
            allow_annotations=data.get("annotations_allowlist"),
            metric_allowlist=data.get("metric_allowlist"),
            metric_denylist=data.get("metric_denylist"),
        )

    def families(self) -> tuple[FamilyGenerator, ...]:
        """Build and filter the StatefulSet catalog.

        Raises:
            ValueError: If an allow-list is malformed.
        """
        catalog = statefulset_metric_families(
            self.allow_labels, self.allow_annotations
        )
        selected = filter_family_generators(
            catalog, self.metric_allowlist, self.metric_denylist
        )
        logger.debug(
            "Selected %d of %d StatefulSet families", len(selected), len(catalog)
        )
        return selected
