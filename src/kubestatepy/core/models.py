"""Core domain models: metric records, families and the StatefulSet object."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class MetricType(str, Enum):
    """Exposition type of a metric family."""

    GAUGE = "gauge"
    COUNTER = "counter"
    INFO = "info"
    STATESET = "stateset"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Metric:
    """A single labeled measurement.

    Attributes:
        label_keys: Label names, positionally paired with label_values.
        label_values: Label values, same length as label_keys.
        value: The measured value.
    """

    label_keys: tuple[str, ...] = ()
    label_values: tuple[str, ...] = ()
    value: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "label_keys", tuple(self.label_keys))
        object.__setattr__(self, "label_values", tuple(self.label_values))
        object.__setattr__(self, "value", float(self.value))
        if len(self.label_keys) != len(self.label_values):
            raise ValueError(
                f"label_keys and label_values differ in length: "
                f"{len(self.label_keys)} != {len(self.label_values)}"
            )
        if len(set(self.label_keys)) != len(self.label_keys):
            repeated = sorted(
                {key for key in self.label_keys if self.label_keys.count(key) > 1}
            )
            raise ValueError(f"label_keys repeat {repeated}")

    @property
    def labels(self) -> dict[str, str]:
        """Labels as an ordered mapping."""
        return dict(zip(self.label_keys, self.label_values))


@dataclass(frozen=True)
class Family:
    """A named group of metrics produced from one object.

    A family with no metrics is valid and contributes nothing to output.
    """

    name: str = ""
    help: str = ""
    type: MetricType = MetricType.GAUGE
    deprecated_version: str = ""
    metrics: tuple[Metric, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "metrics", tuple(self.metrics))


@dataclass(frozen=True)
class ObjectMeta:
    """Identity and metadata of a Kubernetes object."""

    name: str
    namespace: str = ""
    creation_timestamp: datetime | None = None
    generation: int = 0
    labels: Mapping[str, str] = field(default_factory=dict)
    annotations: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class StatefulSetSpec:
    """Desired state. ``replicas`` is None when the field is unset."""

    replicas: int | None = None


@dataclass(frozen=True)
class StatefulSetStatus:
    """Observed state. Counters default to zero when unset."""

    replicas: int = 0
    current_replicas: int = 0
    ready_replicas: int = 0
    updated_replicas: int = 0
    observed_generation: int = 0
    current_revision: str = ""
    update_revision: str = ""


@dataclass(frozen=True)
class StatefulSet:
    """A StatefulSet snapshot as seen by the metric extractors."""

    metadata: ObjectMeta
    spec: StatefulSetSpec = field(default_factory=StatefulSetSpec)
    status: StatefulSetStatus = field(default_factory=StatefulSetStatus)

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    @property
    def name(self) -> str:
        return self.metadata.name

